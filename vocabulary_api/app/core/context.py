"""
Per-call identity, clock and identifier generation.

Every service operation receives a ``CallContext`` holding the acting
caller and the current time, resolved once when the call starts.  The
clock and the identifier generator are plain functions so tests can
substitute deterministic fakes.
"""

import time
import uuid
from dataclasses import dataclass
from typing import Callable

IdFactory = Callable[[], str]
Clock = Callable[[], int]


@dataclass(frozen=True)
class CallContext:
    """Caller identity and timestamp for a single operation."""

    caller: str
    now: int


def utc_now_ns() -> int:
    """Current time as nanoseconds since the Unix epoch."""
    return time.time_ns()


def new_record_id() -> str:
    """Return a fresh unique record identifier."""
    return str(uuid.uuid4())


def make_context(caller: str, clock: Clock = utc_now_ns) -> CallContext:
    return CallContext(caller=caller, now=clock())
