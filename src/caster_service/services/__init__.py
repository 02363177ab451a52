"""Business logic services."""

from .dispatcher import SkillDispatcher
from .notifier import TriggerNotifier
from .observability import LoggingObserver
from .responses import SkillResponse

__all__ = [
    "SkillDispatcher",
    "TriggerNotifier",
    "LoggingObserver",
    "SkillResponse",
]
