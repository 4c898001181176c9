"""Infrastructure errors – I/O failures talking to the chain node."""

from __future__ import annotations

from typing import Any

from dcnt_testkit.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a rule violation."""

    default_code = "infrastructure_error"


class ConnectionError(InfrastructureError):  # noqa: A001
    """Failed to connect to an external resource (RPC node, …)."""

    default_code = "connection_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not connect to '{resource}'", **kwargs)
        self.resource = resource


class TimeoutError(InfrastructureError):  # noqa: A001
    """An I/O operation exceeded its deadline."""

    default_code = "infrastructure_timeout"


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


class ExternalServiceError(InfrastructureError):
    """An external service returned an unexpected response."""

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"External service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class JsonRpcError(ExternalServiceError):
    """The node answered a JSON-RPC call with an ``error`` member."""

    default_code = "json_rpc_error"

    def __init__(
        self,
        method: str,
        rpc_code: int | None,
        rpc_message: str,
        *,
        data: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            service=method,
            message=f"JSON-RPC {method} failed ({rpc_code}): {rpc_message}",
            detail={"rpc_code": rpc_code, "data": data},
            **kwargs,
        )
        self.method = method
        self.rpc_code = rpc_code
        self.rpc_message = rpc_message
        self.data = data


__all__ = [
    "ConnectionError",
    "ExternalServiceError",
    "InfrastructureError",
    "JsonRpcError",
    "SerializationError",
    "TimeoutError",
]
