"""Kernel time – named offsets, in seconds, for clock advancement."""
from __future__ import annotations

from typing import Final

ONE_DAY: Final[int] = 60 * 60 * 24
# 30-day approximation
ONE_MONTH: Final[int] = ONE_DAY * 30
# 365-day approximation, leap days ignored
ONE_YEAR: Final[int] = ONE_DAY * 365

__all__ = ["ONE_DAY", "ONE_MONTH", "ONE_YEAR"]
