"""Domain errors – rule and invariant violations raised by the kernel."""

from __future__ import annotations

from typing import Any

from dcnt_testkit.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a kernel rule / invariant is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidTimeOffsetError(ValidationError):
    """A clock advancement would move logical time backwards."""

    default_code = "invalid_time_offset"

    def __init__(self, offset: int, **kwargs: Any) -> None:
        super().__init__(
            f"Time offset must be non-negative, got {offset}",
            errors=[{"field": "offset", "value": offset, "reason": "negative"}],
            **kwargs,
        )
        self.offset = offset


__all__ = ["DomainError", "InvalidTimeOffsetError", "ValidationError"]
