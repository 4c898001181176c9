"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass base for env-driven settings.

    Subclasses set ``_prefix``; loaders then read ``<PREFIX>_<FIELD>``.
    Construction runs :meth:`_validate`, so an instance that exists is
    always usable (a bad RPC URL never reaches the JSON-RPC client).
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Hook: raise ``InvalidSettingValueError`` for unusable values."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable that feeds *field_name*."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


__all__ = ["Settings"]
