"""IFTTT Maker webhook trigger models."""

from pydantic import BaseModel, Field


class TriggerPayload(BaseModel):
    """JSON body posted to the webhook trigger."""

    value1: str = Field(..., description="Streaming service slot value")
    value2: str = Field(..., description="Free-text query slot value")


class TriggerResult(BaseModel):
    """Outcome of a single webhook delivery attempt."""

    delivered: bool
    status_code: int | None = Field(None, description="HTTP status, None if no response")
    body: str | None = Field(None, description="Response body text")
    error: str | None = Field(None, description="Transport error message")
