"""Alexa response construction helpers."""

from dataclasses import dataclass
from typing import Any

from ..models.alexa import (
    AlexaCard,
    AlexaOutputSpeech,
    AlexaReprompt,
    AlexaResponse,
    AlexaResponseBody,
    SpeechType,
)


@dataclass(frozen=True)
class Card:
    """Simple card shown on devices with a screen."""

    title: str
    content: str


@dataclass(frozen=True)
class SkillResponse:
    """One speakable response for one invocation."""

    speech: str
    speech_type: SpeechType = SpeechType.PLAIN_TEXT
    reprompt: str | None = None
    card: Card | None = None
    should_end_session: bool = True

    def to_envelope(self, session_attributes: dict[str, Any] | None = None) -> AlexaResponse:
        """Render the Alexa response envelope."""
        body = AlexaResponseBody(
            outputSpeech=_build_speech(self.speech, self.speech_type),
            shouldEndSession=self.should_end_session,
        )

        if self.reprompt is not None:
            body.reprompt = AlexaReprompt(
                outputSpeech=_build_speech(self.reprompt, _detect_type(self.reprompt)),
            )

        if self.card is not None:
            body.card = AlexaCard(title=self.card.title, content=self.card.content)

        return AlexaResponse(
            sessionAttributes=dict(session_attributes or {}),
            response=body,
        )


def tell(speech: str, speech_type: SpeechType | None = None) -> SkillResponse:
    """Speak and end the session."""
    return SkillResponse(speech=speech, speech_type=speech_type or _detect_type(speech))


def tell_with_card(speech: str, card_title: str, card_content: str) -> SkillResponse:
    """Speak, show a card and end the session."""
    return SkillResponse(
        speech=speech,
        speech_type=_detect_type(speech),
        card=Card(title=card_title, content=card_content),
    )


def ask(speech: str, reprompt: str | None = None) -> SkillResponse:
    """Speak and keep the session open for the user's answer."""
    return SkillResponse(
        speech=speech,
        speech_type=_detect_type(speech),
        reprompt=reprompt,
        should_end_session=False,
    )


def ask_with_card(
    speech: str,
    reprompt: str | None,
    card_title: str,
    card_content: str,
) -> SkillResponse:
    """Speak, show a card and keep the session open."""
    return SkillResponse(
        speech=speech,
        speech_type=_detect_type(speech),
        reprompt=reprompt,
        card=Card(title=card_title, content=card_content),
        should_end_session=False,
    )


def _detect_type(speech: str) -> SpeechType:
    """SSML payloads are wrapped in <speak> tags."""
    if speech.lstrip().startswith("<speak>"):
        return SpeechType.SSML
    return SpeechType.PLAIN_TEXT


def _build_speech(speech: str, speech_type: SpeechType) -> AlexaOutputSpeech:
    if speech_type == SpeechType.SSML:
        return AlexaOutputSpeech(type=SpeechType.SSML, ssml=speech)
    return AlexaOutputSpeech(type=SpeechType.PLAIN_TEXT, text=speech)
