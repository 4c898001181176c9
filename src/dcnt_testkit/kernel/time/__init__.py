"""Kernel time – LogicalClock, ChainEnvironment port and duration constants."""
from dcnt_testkit.kernel.time.clock import ChainEnvironment, ClockLogger, LogicalClock, wall_clock_seconds
from dcnt_testkit.kernel.time.durations import ONE_DAY, ONE_MONTH, ONE_YEAR

__all__ = [
    "ChainEnvironment",
    "ClockLogger",
    "LogicalClock",
    "ONE_DAY",
    "ONE_MONTH",
    "ONE_YEAR",
    "wall_clock_seconds",
]
