"""Fire-and-forget delivery to the IFTTT Maker webhook trigger.

Delivery is at most once with no guarantee: a notification is posted once
from a detached task, its outcome is only logged, and nothing is retried or
reported back to the user. Callers must never wait on the result to build
their speech response.
"""

import asyncio
import logging
from typing import Protocol

import httpx

from ..config import Settings
from ..models.trigger import TriggerPayload, TriggerResult

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Anything that can forward the two captured slot values."""

    def notify(self, value1: str, value2: str) -> asyncio.Task | None:
        ...


class TriggerNotifier:
    """Posts slot values to the configured webhook trigger."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the notifier.

        Args:
            settings: Application settings with the trigger host, event and key
            transport: Optional httpx transport, used to stub the trigger service
        """
        self._settings = settings
        self._transport = transport
        self._pending: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of deliveries still in flight."""
        return len(self._pending)

    def notify(self, value1: str, value2: str) -> asyncio.Task | None:
        """Schedule delivery on the running loop and return immediately.

        Returns:
            The detached delivery task, or None when no webhook key is configured
        """
        if not self._settings.trigger_key:
            logger.warning(
                "Webhook key not configured, skipping trigger. Set CASTER_TRIGGER_KEY."
            )
            return None

        payload = TriggerPayload(value1=value1, value2=value2)
        task = asyncio.get_running_loop().create_task(self.deliver(payload))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def deliver(self, payload: TriggerPayload) -> TriggerResult:
        """Post one payload to the trigger and log the outcome.

        Transport errors and non-2xx statuses are logged, never raised.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.trigger_timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self._settings.trigger_url,
                    json=payload.model_dump(),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as e:
            logger.error(f"Problem with trigger request: {e}")
            return TriggerResult(delivered=False, error=str(e) or type(e).__name__)

        logger.info(f"Trigger STATUS: {response.status_code}")
        logger.info(f"Trigger BODY: {response.text}")

        if not response.is_success:
            logger.warning(
                f"Trigger {self._settings.trigger_event} rejected with status {response.status_code}"
            )

        return TriggerResult(
            delivered=response.is_success,
            status_code=response.status_code,
            body=response.text,
        )

    async def drain(self) -> None:
        """Wait for in-flight deliveries to finish."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
