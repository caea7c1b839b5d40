"""Randomness capability used by the string generator.

A :class:`RandomSource` is anything exposing ``randrange(stop)`` that returns a
uniformly distributed integer in ``[0, stop)``.  :class:`random.Random` and
:class:`random.SystemRandom` both qualify, as does any deterministic test double.

When no source is configured the generator falls back to a per-thread
:class:`random.Random`, so a single generator can be shared between threads
without external locking.  Caller-supplied sources must be safe for concurrent
use on their own if they are shared the same way; this module does not enforce
that.
"""

from __future__ import annotations

import random
import threading
from typing import Protocol, runtime_checkable

__all__ = ["RandomSource", "default_random", "draw_in_range"]


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for pluggable randomness sources."""

    def randrange(self, stop: int) -> int:
        """Return a uniformly distributed integer in ``[0, stop)``."""

        ...


_local = threading.local()


def default_random() -> random.Random:
    """Return the calling thread's private :class:`random.Random`."""

    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


def draw_in_range(source: RandomSource | None, minimum: int, maximum: int) -> int:
    """Draw an integer uniformly from the closed interval ``[minimum, maximum]``.

    Parameters
    ----------
    source:
        Caller-supplied source.  The draw is ``minimum + source.randrange(span)``
        where ``span`` is the interval size.
    minimum, maximum:
        Inclusive bounds; callers guarantee ``minimum <= maximum``.

    When ``source`` is ``None`` the thread-local default services the request
    with an inclusive ``randint`` draw.  Both paths are uniform over the same
    interval.
    """

    if source is not None:
        return minimum + source.randrange(maximum - minimum + 1)
    return default_random().randint(minimum, maximum)
