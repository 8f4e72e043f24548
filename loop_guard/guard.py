"""
Loop Guard
==========
Counts loop iterations and raises once a configured ceiling is passed.
Meant as a development/test rail against runaway ``while True`` loops.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Max number of ticks reached"


@dataclass
class LoopGuardConfig:
    max_ticks: int = 1000           # inclusive ceiling on protect() calls
    message: str = DEFAULT_MESSAGE  # text carried by IterationLimitExceeded


class IterationLimitExceeded(RuntimeError):
    """Raised by LoopGuard.protect() once the tick count passes max_ticks."""

    def __init__(self, message: str, count: int, max_ticks: int) -> None:
        super().__init__(message)
        self.message = message
        self.count = count
        self.max_ticks = max_ticks


class LoopGuard:
    """
    Tick counter that raises when a loop runs more often than allowed.

    Create the guard **outside** the loop and call ``protect()`` once per
    iteration::

        guard = LoopGuard(10)
        while True:
            guard.protect()     # raises IterationLimitExceeded on tick 11
            ...

    Parameters
    ----------
    max_ticks : int
        How many times the loop may run. Not validated: zero or a negative
        value makes the first ``protect()`` call raise.
    """

    def __init__(self, max_ticks: int) -> None:
        self._max_ticks = max_ticks
        self._count: int = 0
        self._message: str = DEFAULT_MESSAGE

    @classmethod
    def from_config(cls, config: Optional[LoopGuardConfig] = None) -> "LoopGuard":
        cfg = config or LoopGuardConfig()
        return cls(cfg.max_ticks).with_message(cfg.message)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def with_message(self, message: str) -> "LoopGuard":
        """Replace the failure message; returns the guard for chaining."""
        if message != self._message:
            logger.debug("LoopGuard message set to %r", message)
        self._message = message
        return self

    def protect(self) -> None:
        """
        Count one iteration and raise if the loop has gone past ``max_ticks``.

        Raises
        ------
        IterationLimitExceeded
            On the call that takes ``count`` above ``max_ticks`` and on
            every call after it.
        """
        self._count += 1
        if self._count > self._max_ticks:
            logger.error(
                "LoopGuard tripped at tick %d (max_ticks=%d): %s",
                self._count,
                self._max_ticks,
                self._message,
            )
            raise IterationLimitExceeded(self._message, self._count, self._max_ticks)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def max_ticks(self) -> int:
        return self._max_ticks

    @property
    def count(self) -> int:
        return self._count

    @property
    def message(self) -> str:
        return self._message

    @property
    def tripped(self) -> bool:
        return self._count > self._max_ticks

    @property
    def remaining(self) -> int:
        """Ticks left before the next protect() call would raise."""
        return max(self._max_ticks - self._count, 0)

    def __repr__(self) -> str:
        return (
            f"LoopGuard(max_ticks={self._max_ticks}, count={self._count}, "
            f"message={self._message!r})"
        )
