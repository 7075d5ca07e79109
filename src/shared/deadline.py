"""Deadline propagated through every downstream call of a checkout.

A Deadline holds an absolute wall-clock expiry so it can cross process
boundaries in the ``X-Request-Deadline`` header. Ports use ``remaining()``
as their transport timeout and refuse to start a call once it is expired.
A deadline expiring after a downstream write committed does not undo it.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

DEADLINE_HEADER = "X-Request-Deadline"


class DeadlineExceeded(Exception):
    """Raised by a port when its deadline expired before the call started."""


@dataclass(frozen=True)
class Deadline:
    expires_at: float  # seconds since the epoch

    @classmethod
    def within(cls, seconds: float) -> Deadline:
        return cls(expires_at=time.time() + seconds)

    @classmethod
    def from_header(cls, value: str | None) -> Deadline | None:
        if not value:
            return None
        try:
            return cls(expires_at=float(value))
        except ValueError:
            return None

    def remaining(self) -> float:
        return max(self.expires_at - time.time(), 0.0)

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0

    def check(self) -> None:
        if self.expired:
            raise DeadlineExceeded(f"Deadline expired at {self.expires_at}")

    def as_header(self) -> dict[str, str]:
        return {DEADLINE_HEADER: repr(self.expires_at)}


def timeout_for(deadline: Deadline | None, default: float) -> float:
    """Transport timeout for a call, bounded by the deadline when one is set."""
    if deadline is None:
        return default
    deadline.check()
    return min(default, deadline.remaining())
