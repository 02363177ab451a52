"""Alexa Skill request/response models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class RequestType(str, Enum):
    """Request types the skill dispatches on."""

    SESSION_STARTED = "SessionStartedRequest"
    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"


class SpeechType(str, Enum):
    """Alexa speech output type."""

    PLAIN_TEXT = "PlainText"
    SSML = "SSML"


class AlexaSlot(BaseModel):
    """Alexa slot value.

    A slot can be present without a value when recognition was ambiguous.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None  # The slots mapping key already names the slot
    value: str | None = None


class AlexaIntent(BaseModel):
    """Alexa intent with slots."""

    model_config = ConfigDict(frozen=True)

    name: str
    slots: dict[str, AlexaSlot] = {}

    def has_slot(self, name: str) -> bool:
        """Return True if the slot object was sent, with or without a value."""
        return name in self.slots

    def slot_value(self, name: str) -> str | None:
        """Return the slot value as sent, or None if absent, valueless or blank."""
        slot = self.slots.get(name)
        if slot is None or slot.value is None:
            return None
        if not slot.value.strip():
            return None
        return slot.value


class AlexaRequest(BaseModel):
    """Alexa request payload."""

    model_config = ConfigDict(frozen=True)

    type: str
    requestId: str = ""
    timestamp: str | None = None
    intent: AlexaIntent | None = None
    locale: str = "en-US"
    reason: str | None = None  # SessionEndedRequest only


class AlexaApplication(BaseModel):
    """Skill application identity."""

    model_config = ConfigDict(frozen=True)

    applicationId: str


class AlexaSession(BaseModel):
    """Alexa session information."""

    model_config = ConfigDict(frozen=True)

    sessionId: str
    new: bool = False
    attributes: dict[str, Any] = {}
    application: AlexaApplication | None = None


class AlexaRequestEnvelope(BaseModel):
    """Full Alexa request envelope."""

    model_config = ConfigDict(frozen=True)

    version: str = "1.0"
    session: AlexaSession | None = None
    request: AlexaRequest
    context: dict[str, Any] = {}


class AlexaOutputSpeech(BaseModel):
    """Alexa speech output.

    Plain text goes in ``text``, SSML in ``ssml``.
    """

    type: SpeechType = SpeechType.PLAIN_TEXT
    text: str | None = None
    ssml: str | None = None


class AlexaReprompt(BaseModel):
    """Speech played when the user does not answer an ask."""

    outputSpeech: AlexaOutputSpeech


class AlexaCard(BaseModel):
    """Alexa card for visual display."""

    type: str = "Simple"
    title: str
    content: str


class AlexaResponseBody(BaseModel):
    """Alexa response body."""

    outputSpeech: AlexaOutputSpeech
    reprompt: AlexaReprompt | None = None
    card: AlexaCard | None = None
    shouldEndSession: bool = True


class AlexaResponse(BaseModel):
    """Full Alexa response envelope."""

    version: str = "1.0"
    sessionAttributes: dict[str, Any] = {}
    response: AlexaResponseBody
