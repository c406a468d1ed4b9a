"""HTTP client for the Reel backend.

Wraps ``httpx.AsyncClient`` so that every call ends in an ``ApiResult``.
Nothing raised by the transport or the response body escapes: callers
branch on ``success`` and decide on rollback themselves.
"""

from collections.abc import Callable
from typing import Any, TypeVar

import httpx
import logfire
from pydantic import ValidationError

from reel.domain.model import ApiResult

T = TypeVar("T")
Body = dict[str, Any]


class ApiClient:
    """JSON-over-HTTP client with result-shaped responses."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        """Initialize API client.

        Args:
            http: Configured httpx client (base URL, auth headers, timeout)
        """
        self.http = http

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Body | None = None,
    ) -> ApiResult[Body]:
        """Send a request and return the raw response body.

        Args:
            method: HTTP method
            path: Path relative to the API base URL
            params: Query parameters (None values are dropped)
            json: JSON body

        Returns:
            Successful result holding the full body, or a failed result
            for transport errors, non-JSON bodies, HTTP errors and
            ``success: false`` bodies
        """
        if params is not None:
            params = {k: v for k, v in params.items() if v is not None}

        with logfire.span("api {method} {path}", method=method, path=path):
            try:
                response = await self.http.request(
                    method, path, params=params, json=json
                )
            except httpx.HTTPError as e:
                logfire.warn(
                    "Backend unreachable",
                    method=method,
                    path=path,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return ApiResult.fail(f"Network error: {e}" if str(e) else "Network error")

            try:
                body = response.json()
            except ValueError:
                logfire.warn(
                    "Non-JSON response",
                    method=method,
                    path=path,
                    status_code=response.status_code,
                )
                return ApiResult.fail(
                    f"Invalid response from server ({response.status_code})"
                )

            if not isinstance(body, dict):
                return ApiResult.fail(
                    f"Invalid response from server ({response.status_code})"
                )

            if response.is_error or not body.get("success", False):
                message = body.get("message") or (
                    f"Request failed ({response.status_code})"
                )
                logfire.warn(
                    "Backend reported failure",
                    method=method,
                    path=path,
                    status_code=response.status_code,
                    message=message,
                )
                return ApiResult.fail(message)

            return ApiResult.ok(body, body.get("message"))

    async def call(
        self,
        method: str,
        path: str,
        parse: Callable[[Body], T],
        *,
        params: dict[str, Any] | None = None,
        json: Body | None = None,
    ) -> ApiResult[T]:
        """Send a request and parse the successful body into a domain value.

        Args:
            method: HTTP method
            path: Path relative to the API base URL
            parse: Turns the response body into the result data
            params: Query parameters
            json: JSON body

        Returns:
            Result holding the parsed data; a body that does not match
            the expected shape becomes a failed result
        """
        result = await self.send(method, path, params=params, json=json)
        if not result.success or result.data is None:
            return ApiResult.fail(result.message or "Request failed")

        try:
            data = parse(result.data)
        except (
            ValidationError,
            KeyError,
            TypeError,
            AttributeError,
            ValueError,
        ) as e:
            logfire.error(
                "Malformed response body",
                method=method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            return ApiResult.fail("Malformed response from server")

        return ApiResult.ok(data, result.message)
