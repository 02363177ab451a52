"""Caster intent and lifecycle handlers.

Every handler takes a HandlerContext and returns exactly one SkillResponse.

Examples:
    One-shot:
        User:  "Alexa, ask Caster to search Netflix for Stranger Things"
        Alexa: "Searching Netflix for Stranger Things."
    Dialog:
        User:  "Alexa, open Caster"
        Alexa: "Welcome to Caster. What would you like to watch?"
        User:  "Stranger Things on Netflix"
        Alexa: "Searching Netflix for Stranger Things."
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from ..models.alexa import AlexaIntent, AlexaRequest, AlexaSession
from .notifier import Notifier
from .observability import Observer, safe_record
from .responses import SkillResponse, ask, tell, tell_with_card

logger = logging.getLogger(__name__)

SERVICE_SLOT = "Service"
QUERY_SLOT = "Query"

CARD_TITLE = "Caster"
WATCH_PROMPT = "What would you like to watch?"
GOODBYE = "Goodbye"
WAVES_AUDIO = "https://s3.amazonaws.com/ask-storage/tidePooler/OceanWaves.mp3"


@dataclass(frozen=True)
class HandlerContext:
    """Everything a handler may read for one invocation."""

    request: AlexaRequest
    session: AlexaSession | None
    notifier: Notifier
    observer: Observer

    @property
    def intent(self) -> AlexaIntent:
        if self.request.intent is None:
            raise ValueError(f"{self.request.type} carries no intent")
        return self.request.intent

    @property
    def attributes(self) -> dict[str, Any]:
        return dict(self.session.attributes) if self.session else {}

    @property
    def session_id(self) -> str | None:
        return self.session.sessionId if self.session else None


Handler = Callable[[HandlerContext], SkillResponse]


# -------------------------- Lifecycle --------------------------


def on_session_started(ctx: HandlerContext) -> None:
    safe_record(
        ctx.observer,
        logging.INFO,
        "session.started",
        request_id=ctx.request.requestId,
        session_id=ctx.session_id,
    )


def on_launch(ctx: HandlerContext) -> SkillResponse:
    safe_record(
        ctx.observer,
        logging.INFO,
        "launch",
        request_id=ctx.request.requestId,
        session_id=ctx.session_id,
    )
    return handle_welcome(ctx)


def on_session_ended(ctx: HandlerContext) -> SkillResponse:
    safe_record(
        ctx.observer,
        logging.INFO,
        "session.ended",
        request_id=ctx.request.requestId,
        session_id=ctx.session_id,
        reason=ctx.request.reason,
    )
    return tell("")


# -------------------------- Responses --------------------------


def handle_welcome(ctx: HandlerContext) -> SkillResponse:
    """Greet the user and ask what to watch."""
    speech = (
        "<speak>"
        f"<audio src='{WAVES_AUDIO}'/>"
        f"Welcome to Caster. {WATCH_PROMPT}"
        "</speak>"
    )
    return ask(speech, WATCH_PROMPT)


def handle_help(ctx: HandlerContext) -> SkillResponse:
    speech = (
        "I am currently equipped to "
        "stream shows and movies from Netflix, Hulu, and HBO Go. "
        "Or you can say exit. "
        + WATCH_PROMPT
    )
    return ask(speech, WATCH_PROMPT)


def handle_stop(ctx: HandlerContext) -> SkillResponse:
    return tell(GOODBYE)


def handle_one_shot(ctx: HandlerContext) -> SkillResponse:
    """
    Handle the one-shot search, e.g. "search Hulu for The Bear".

    Both slots need a non-blank value before the trigger fires. Anything less
    goes to the clarification dialog without notifying.
    """
    intent = ctx.intent
    service = intent.slot_value(SERVICE_SLOT)
    query = intent.slot_value(QUERY_SLOT)

    if service is None or query is None:
        return handle_no_slot_dialog(ctx)

    logger.info(f"One-shot search: service='{service}', query='{query}'")

    ctx.notifier.notify(service, query)

    speech = f"Searching {service} for {query}."
    return tell_with_card(speech, CARD_TITLE, speech)


def handle_no_slot_dialog(ctx: HandlerContext) -> SkillResponse:
    """
    Handle no slots, or slot(s) with no values.

    A slot sent without a value means recognition was ambiguous, so we
    reprompt for whatever is still missing and keep the session open.
    """
    intent = ctx.intent
    service = intent.slot_value(SERVICE_SLOT)
    query = intent.slot_value(QUERY_SLOT)

    if service is not None:
        prompt = f"What would you like to watch on {service}?"
    elif query is not None:
        prompt = f"Which service should I search for {query}? Netflix, Hulu, or HBO Go?"
    elif intent.has_slot(SERVICE_SLOT) or intent.has_slot(QUERY_SLOT):
        prompt = "What would you like to watch, and on which service?"
    else:
        prompt = f"I can't understand your request. {WATCH_PROMPT}"

    return ask(prompt, prompt)


def handle_unrecognized(ctx: HandlerContext) -> SkillResponse:
    """Fallback for intent names with no handler."""
    return tell("Sorry, I don't know how to help with that. Goodbye.")


INTENT_HANDLERS: dict[str, Handler] = {
    "OneShot": handle_one_shot,
    "AMAZON.HelpIntent": handle_help,
    "AMAZON.StopIntent": handle_stop,
    "AMAZON.CancelIntent": handle_stop,
}
