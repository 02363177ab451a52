"""Alexa Skill request dispatch."""

import logging
from typing import Mapping

from ..models.alexa import AlexaRequestEnvelope, AlexaResponse, RequestType
from .notifier import Notifier
from .observability import Observer, safe_record
from .responses import SkillResponse
from .skill_handlers import (
    INTENT_HANDLERS,
    Handler,
    HandlerContext,
    handle_unrecognized,
    on_launch,
    on_session_ended,
    on_session_started,
)

logger = logging.getLogger(__name__)


class SkillRequestError(Exception):
    """Request that cannot be turned into a valid response."""


class ApplicationMismatchError(SkillRequestError):
    """Request addressed to a different skill application."""


class UnsupportedRequestError(SkillRequestError):
    """Request type the skill does not handle."""


class MalformedEventError(SkillRequestError):
    """Request missing data its type requires."""


class SkillDispatcher:
    """Routes each request to exactly one handler."""

    def __init__(
        self,
        application_id: str,
        notifier: Notifier,
        observer: Observer,
        intent_handlers: Mapping[str, Handler] | None = None,
    ):
        """Initialize the dispatcher.

        Args:
            application_id: Expected skill application id, empty to accept any
            notifier: Outbound trigger for the one-shot intent
            observer: Structured event sink for lifecycle and routing records
            intent_handlers: Intent name to handler table
        """
        self.application_id = application_id
        self.notifier = notifier
        self.observer = observer
        self.intent_handlers = dict(
            INTENT_HANDLERS if intent_handlers is None else intent_handlers
        )

    async def dispatch(self, envelope: AlexaRequestEnvelope) -> AlexaResponse:
        """
        Process one Alexa request and return its response envelope.

        Args:
            envelope: Full Alexa request envelope

        Returns:
            Alexa response envelope

        Raises:
            ApplicationMismatchError: Session belongs to another application
            UnsupportedRequestError: Request type has no handler
            MalformedEventError: Intent request without an intent
        """
        self._verify_application(envelope)

        request = envelope.request
        session = envelope.session
        ctx = HandlerContext(
            request=request,
            session=session,
            notifier=self.notifier,
            observer=self.observer,
        )

        logger.info(f"Alexa request type: {request.type}")

        if session is not None and session.new and request.type != RequestType.SESSION_STARTED:
            on_session_started(ctx)

        response = self._route(ctx)
        return response.to_envelope(ctx.attributes)

    def _route(self, ctx: HandlerContext) -> SkillResponse:
        request_type = ctx.request.type

        if request_type == RequestType.SESSION_STARTED:
            on_session_started(ctx)
            return SkillResponse(speech="", should_end_session=False)

        if request_type == RequestType.LAUNCH:
            return on_launch(ctx)

        if request_type == RequestType.SESSION_ENDED:
            return on_session_ended(ctx)

        if request_type == RequestType.INTENT:
            if ctx.request.intent is None:
                raise MalformedEventError("IntentRequest without an intent")

            intent_name = ctx.request.intent.name
            logger.info(f"Alexa intent: {intent_name}")

            handler = self.intent_handlers.get(intent_name)
            if handler is None:
                safe_record(
                    self.observer,
                    logging.WARNING,
                    "intent.unhandled",
                    intent=intent_name,
                    request_id=ctx.request.requestId,
                    session_id=ctx.session_id,
                )
                return handle_unrecognized(ctx)

            return handler(ctx)

        raise UnsupportedRequestError(f"Unsupported request type: {request_type}")

    def _verify_application(self, envelope: AlexaRequestEnvelope) -> None:
        if not self.application_id:
            return

        session = envelope.session
        received = session.application.applicationId if session and session.application else None
        if received != self.application_id:
            logger.error(f"The applicationIds don't match: {received}")
            raise ApplicationMismatchError("Invalid applicationId")
