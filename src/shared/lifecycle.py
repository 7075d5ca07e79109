"""Outcome of a lifecycle command (order status, delivery status).

Command routes report "entity missing" and "transition refused" with the
same HTTP status, but callers inside the process still need to tell them
apart, so lifecycle services return one of these instead of raising.
"""

from enum import Enum


class TransitionResult(Enum):
    APPLIED = "Applied"
    NOT_FOUND = "NotFound"
    INVALID_TRANSITION = "InvalidTransition"

    @property
    def succeeded(self) -> bool:
        return self is TransitionResult.APPLIED
