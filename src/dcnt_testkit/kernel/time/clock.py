"""Kernel time – ChainEnvironment port + LogicalClock."""
from __future__ import annotations

import time
from typing import Any, Protocol

from dcnt_testkit.kernel.errors import InvalidTimeOffsetError


class ChainEnvironment(Protocol):
    """Port: block-scheduling hooks exposed by a development chain."""

    async def set_next_block_timestamp(self, timestamp: int) -> None: ...
    async def mine(self) -> None: ...
    async def latest_timestamp(self) -> int: ...


class ClockLogger(Protocol):
    """Port: the slice of a structured logger the clock needs."""

    def debug(self, event: str, **kw: Any) -> None: ...


def wall_clock_seconds() -> int:
    """Whole seconds since the epoch, per the host clock."""
    return int(time.time())


class LogicalClock:
    """Simulated "current time" shared by time-dependent chain tests.

    The clock starts at wall-clock time and only moves forward through
    :meth:`advance`. Advancing schedules the chain's next block at the new
    logical time; :meth:`commit` mines a block when the chain lags behind,
    so the new time is visible to contracts even without a pending
    transaction.

    One clock must be driven by a single caller at a time: each
    coroutine awaits the chain and there is no locking.

    Parameters
    ----------
    environment:
        The chain whose block timestamps follow this clock.
    start:
        Initial logical time in seconds. Defaults to wall-clock time.
    logger:
        Optional structured logger receiving ``clock_*`` debug events.

    Example::

        clock = LogicalClock(environment, logger=get_logger("dcnt.clock"))
        await clock.advance(ONE_MONTH)
        await clock.commit()
        assert await environment.latest_timestamp() == clock.now()
    """

    def __init__(
        self,
        environment: ChainEnvironment,
        start: int | None = None,
        *,
        logger: ClockLogger | None = None,
    ) -> None:
        self._environment = environment
        self._current = wall_clock_seconds() if start is None else start
        self._logger = logger

    def now(self) -> int:
        """Return the current logical time in seconds."""
        return self._current

    async def advance(self, offset: int = 0) -> int:
        """Move logical time forward by *offset* seconds.

        The chain is told to stamp its next block with the new time before
        the clock itself moves; if that call fails the clock is unchanged
        and the chain's error propagates as-is.

        Raises
        ------
        InvalidTimeOffsetError
            When *offset* is negative.
        """
        if offset < 0:
            raise InvalidTimeOffsetError(offset)
        target = self._current + offset
        await self._environment.set_next_block_timestamp(target)
        self._current = target
        self._debug("clock_advanced", offset=offset, current_time=target)
        return target

    async def commit(self) -> None:
        """Mine a block if the chain has not yet reached logical time."""
        latest = await self._environment.latest_timestamp()
        if self._current > latest:
            await self._environment.mine()
            self._debug("clock_committed", current_time=self._current, previous_block_time=latest)
        else:
            self._debug("clock_commit_skipped", current_time=self._current, latest_block_time=latest)

    def _debug(self, event: str, **kw: Any) -> None:
        if self._logger is not None:
            self._logger.debug(event, **kw)


__all__ = ["ChainEnvironment", "ClockLogger", "LogicalClock", "wall_clock_seconds"]
