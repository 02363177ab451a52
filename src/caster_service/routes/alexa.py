"""Alexa Skill webhook endpoint."""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from ..config import settings
from ..models.alexa import AlexaRequestEnvelope, AlexaResponse
from ..services.dispatcher import (
    ApplicationMismatchError,
    SkillDispatcher,
    SkillRequestError,
)
from ..services.notifier import TriggerNotifier
from ..services.observability import LoggingObserver

logger = logging.getLogger(__name__)

router = APIRouter(tags=["alexa"])


@lru_cache(maxsize=1)
def get_notifier() -> TriggerNotifier:
    """Get or create the TriggerNotifier singleton."""
    return TriggerNotifier(settings)


@lru_cache(maxsize=1)
def get_dispatcher() -> SkillDispatcher:
    """Get or create the SkillDispatcher singleton."""
    return SkillDispatcher(
        application_id=settings.application_id,
        notifier=get_notifier(),
        observer=LoggingObserver(),
    )


@router.post("/alexa", response_model=AlexaResponse, response_model_exclude_none=True)
async def alexa_webhook(
    envelope: AlexaRequestEnvelope,
    dispatcher: SkillDispatcher = Depends(get_dispatcher),
) -> AlexaResponse:
    """
    Handle Alexa Skill requests.

    This endpoint receives requests from the Alexa service when users
    interact with the Caster skill.

    Supported intents:
    - LaunchRequest: "Alexa, open Caster"
    - OneShot: "Alexa, ask Caster to search Netflix for Stranger Things"
    - AMAZON.HelpIntent: "Alexa, ask Caster for help"
    - AMAZON.StopIntent / AMAZON.CancelIntent: "Alexa, stop"

    The response is returned in Alexa response format with speech output.
    """
    logger.info(f"Alexa request received: {envelope.request.type}")

    try:
        return await dispatcher.dispatch(envelope)
    except ApplicationMismatchError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except SkillRequestError as e:
        logger.error(f"Rejected Alexa request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
