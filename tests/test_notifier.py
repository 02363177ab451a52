"""Tests for the webhook trigger notifier."""

import json
import logging

import httpx
import pytest

from caster_service.config import Settings
from caster_service.models.alexa import AlexaRequestEnvelope
from caster_service.models.trigger import TriggerPayload
from caster_service.services.dispatcher import SkillDispatcher
from caster_service.services.notifier import TriggerNotifier
from conftest import RecordingObserver, build_envelope, one_shot


def _settings(**overrides) -> Settings:
    values = {"trigger_key": "test-key", "trigger_event": "caster"}
    values.update(overrides)
    return Settings(**values)


def _recording_transport(seen: list[httpx.Request], status_code: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status_code, text="Congratulations! You've fired the caster event")

    return httpx.MockTransport(handler)


def _refusing_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_deliver_posts_values_to_trigger() -> None:
    seen: list[httpx.Request] = []
    notifier = TriggerNotifier(_settings(), transport=_recording_transport(seen))

    result = await notifier.deliver(TriggerPayload(value1="Netflix", value2="Stranger Things"))

    assert result.delivered is True
    assert result.status_code == 200
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "http://maker.ifttt.com/trigger/caster/with/key/test-key"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"value1": "Netflix", "value2": "Stranger Things"}


@pytest.mark.asyncio
async def test_deliver_logs_non_success_status(caplog: pytest.LogCaptureFixture) -> None:
    notifier = TriggerNotifier(_settings(), transport=_recording_transport([], status_code=500))

    with caplog.at_level(logging.INFO, logger="caster_service.services.notifier"):
        result = await notifier.deliver(TriggerPayload(value1="Hulu", value2="The Bear"))

    assert result.delivered is False
    assert result.status_code == 500
    assert "Trigger STATUS: 500" in caplog.text
    assert "rejected with status 500" in caplog.text


@pytest.mark.asyncio
async def test_deliver_swallows_connection_errors(caplog: pytest.LogCaptureFixture) -> None:
    notifier = TriggerNotifier(_settings(), transport=_refusing_transport())

    with caplog.at_level(logging.ERROR, logger="caster_service.services.notifier"):
        result = await notifier.deliver(TriggerPayload(value1="Hulu", value2="The Bear"))

    assert result.delivered is False
    assert result.status_code is None
    assert "Connection refused" in result.error
    assert "Problem with trigger request" in caplog.text


@pytest.mark.asyncio
async def test_notify_returns_before_delivery_completes() -> None:
    seen: list[httpx.Request] = []
    notifier = TriggerNotifier(_settings(), transport=_recording_transport(seen))

    task = notifier.notify("Netflix", "Ozark")

    assert task is not None
    assert notifier.pending == 1
    await notifier.drain()
    assert task.result().delivered is True
    assert len(seen) == 1
    assert notifier.pending == 0


@pytest.mark.asyncio
async def test_notify_skips_without_key(caplog: pytest.LogCaptureFixture) -> None:
    seen: list[httpx.Request] = []
    notifier = TriggerNotifier(_settings(trigger_key=""), transport=_recording_transport(seen))

    with caplog.at_level(logging.WARNING, logger="caster_service.services.notifier"):
        task = notifier.notify("Netflix", "Ozark")

    assert task is None
    assert seen == []
    assert "CASTER_TRIGGER_KEY" in caplog.text


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "failing_transport",
    [_refusing_transport(), _recording_transport([], status_code=500)],
    ids=["connection-refused", "status-500"],
)
async def test_notifier_failure_does_not_change_response(
    failing_transport: httpx.MockTransport,
) -> None:
    envelope = AlexaRequestEnvelope.model_validate(
        build_envelope("IntentRequest", intent=one_shot(Service="Netflix", Query="Stranger Things"))
    )

    healthy = TriggerNotifier(_settings(), transport=_recording_transport([]))
    failing = TriggerNotifier(_settings(), transport=failing_transport)

    ok_response = await SkillDispatcher("", healthy, RecordingObserver()).dispatch(envelope)
    failed_response = await SkillDispatcher("", failing, RecordingObserver()).dispatch(envelope)
    await healthy.drain()
    await failing.drain()

    assert ok_response.model_dump() == failed_response.model_dump()
    assert failed_response.response.outputSpeech.text == "Searching Netflix for Stranger Things."
    assert failed_response.response.shouldEndSession is True
