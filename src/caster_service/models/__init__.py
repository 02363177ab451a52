"""Pydantic models for request/response schemas."""

from .alexa import AlexaRequestEnvelope, AlexaResponse
from .trigger import TriggerPayload, TriggerResult

__all__ = [
    "AlexaRequestEnvelope",
    "AlexaResponse",
    "TriggerPayload",
    "TriggerResult",
]
