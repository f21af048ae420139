"""Report models."""

from enum import Enum

from .base import FrozenModel


class OutcomeStatus(str, Enum):
    """Result of processing one context."""

    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class Outcome(FrozenModel):
    """Recorded result for one context."""

    context_name: str
    status: OutcomeStatus
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS
