"""Root error class for dcnt-testkit: clock, node and settings failures."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error carries a stable ``code`` slug so a failing harness run can
    be triaged from its log line alone, e.g. ``invalid_time_offset`` versus
    ``json_rpc_error``.

    Args:
        message: Human-readable description.
        code: Slug override; subclasses set ``default_code``.
        detail: Extra context such as the RPC method or setting name.
        cause: Lower-level exception (usually from httpx) being wrapped.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        # one JSON line, ready for the structlog JSON renderer
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
