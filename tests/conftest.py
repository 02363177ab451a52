"""Shared pytest fixtures."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from caster_service.main import app
from caster_service.routes.alexa import get_dispatcher
from caster_service.services.dispatcher import SkillDispatcher


class RecordingNotifier:
    """Notifier stand-in that remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def notify(self, value1: str, value2: str) -> None:
        self.calls.append((value1, value2))
        return None


class RecordingObserver:
    """Observer stand-in that keeps records in memory."""

    def __init__(self) -> None:
        self.records: list[tuple[int, str, dict[str, Any]]] = []

    def record(self, level: int, event: str, **fields: Any) -> None:
        self.records.append((level, event, fields))

    def events(self) -> list[str]:
        return [event for _, event, _ in self.records]


def build_envelope(
    request_type: str,
    intent: dict[str, Any] | None = None,
    new: bool = False,
    attributes: dict[str, Any] | None = None,
    application_id: str = "amzn1.ask.skill.test",
) -> dict[str, Any]:
    """Build a minimal Alexa request envelope."""
    request: dict[str, Any] = {"type": request_type, "requestId": "req-1", "locale": "en-US"}
    if intent is not None:
        request["intent"] = intent

    return {
        "version": "1.0",
        "session": {
            "sessionId": "session-1",
            "new": new,
            "attributes": attributes or {},
            "application": {"applicationId": application_id},
        },
        "request": request,
    }


def one_shot(**slots: str | None) -> dict[str, Any]:
    """Build a OneShot intent; a None value sends the slot without a value."""
    return {
        "name": "OneShot",
        "slots": {
            name: ({"name": name} if value is None else {"name": name, "value": value})
            for name, value in slots.items()
        },
    }


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def dispatcher(notifier: RecordingNotifier, observer: RecordingObserver) -> SkillDispatcher:
    return SkillDispatcher(application_id="", notifier=notifier, observer=observer)


@pytest.fixture
def client(dispatcher: SkillDispatcher):
    """Test client with the dispatcher's outbound side replaced."""
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    yield TestClient(app)
    app.dependency_overrides.clear()
