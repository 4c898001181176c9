"""JSON-RPC adapter – HttpxJsonRpcClient."""
from __future__ import annotations

import itertools
from typing import Any, Sequence

import httpx

from dcnt_testkit.kernel.errors import (
    ConnectionError as AppConnectionError,
    ExternalServiceError,
    JsonRpcError,
    SerializationError,
    TimeoutError as AppTimeoutError,
)
from dcnt_testkit.observability.logging import get_logger


class HttpxJsonRpcClient:
    """Thin async JSON-RPC 2.0 client over httpx with structured error mapping.

    No retries are attempted; every failure surfaces as a kernel
    infrastructure error.
    """

    def __init__(self, url: str, timeout: float = 10.0, **kwargs: Any) -> None:
        self._url = url
        self._client = httpx.AsyncClient(timeout=timeout, **kwargs)
        self._ids = itertools.count(1)
        self._log = get_logger(__name__)

    @property
    def url(self) -> str:
        return self._url

    async def __aenter__(self) -> "HttpxJsonRpcClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def call(self, method: str, params: Sequence[Any] | None = None) -> Any:
        """Invoke *method* on the node and return its ``result`` member."""
        request_id = next(self._ids)
        payload = {
            "jsonrpc": "2.0",
            "id": request_id,
            "method": method,
            "params": list(params or []),
        }
        self._log.debug("rpc_call", method=method, id=request_id)
        try:
            response = await self._client.post(self._url, json=payload)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            self._log.warning("rpc_timeout", method=method, url=self._url)
            raise AppTimeoutError(f"JSON-RPC request timed out: {method} {self._url}") from exc
        except httpx.ConnectError as exc:
            self._log.warning("rpc_connect_failed", method=method, url=self._url)
            raise AppConnectionError(self._url) from exc
        except httpx.HTTPStatusError as exc:
            self._log.warning("rpc_http_error", method=method, status_code=exc.response.status_code)
            raise ExternalServiceError(
                service=self._url,
                message=f"HTTP {exc.response.status_code} from {method} {self._url}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            self._log.warning("rpc_transport_error", method=method, error=str(exc))
            raise ExternalServiceError(service=self._url, message=str(exc)) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise SerializationError(
                f"Response to {method} is not valid JSON", payload_type="json-rpc"
            ) from exc
        if not isinstance(body, dict):
            raise SerializationError(
                f"Response to {method} is not a JSON-RPC object", payload_type="json-rpc"
            )

        error = body.get("error")
        if error is not None:
            self._log.warning("rpc_error", method=method, error=error)
            if isinstance(error, dict):
                raise JsonRpcError(
                    method,
                    error.get("code"),
                    str(error.get("message", "")),
                    data=error.get("data"),
                )
            raise JsonRpcError(method, None, str(error))
        if "result" not in body:
            raise SerializationError(
                f"Response to {method} has neither result nor error", payload_type="json-rpc"
            )
        return body["result"]


__all__ = ["HttpxJsonRpcClient"]
