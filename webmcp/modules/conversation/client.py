"""WOPR daemon REST client used by the conversation tools."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from webmcp.shared.config import get_settings
from webmcp.shared.schemas.tools import CallerContext

logger = structlog.get_logger()

GENERIC_FAILURE = "Request failed"


class DaemonRequestError(RuntimeError):
    """A daemon request failed; ``status_code`` is None for transport errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


def path_segment(value: object) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(str(value), safe="")


def error_from_response(resp: httpx.Response) -> DaemonRequestError:
    """Normalise a non-success response into a ``DaemonRequestError``.

    Prefers the body's ``error`` string, then the status code, then a bare
    generic message when the body is not a JSON object.
    """
    try:
        body = resp.json()
    except ValueError:
        body = None

    if not isinstance(body, dict):
        return DaemonRequestError(GENERIC_FAILURE, resp.status_code)

    message = body.get("error")
    if isinstance(message, str) and message:
        return DaemonRequestError(message, resp.status_code)
    return DaemonRequestError(f"{GENERIC_FAILURE} ({resp.status_code})", resp.status_code)


class DaemonClient:
    """Async client for the WOPR daemon API.

    Every request carries ``Content-Type: application/json`` and, when the
    caller context holds a token, ``Authorization: Bearer <token>``.
    """

    def __init__(
        self,
        daemon_url: str | None = None,
        api_base: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.daemon_url = (daemon_url if daemon_url is not None else settings.daemon_url).rstrip("/")
        self.api_base = (api_base if api_base is not None else settings.api_base).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.daemon_timeout
        self._transport = transport

    def url(self, path: str) -> str:
        return f"{self.daemon_url}{self.api_base}{path}"

    @staticmethod
    def headers(auth: CallerContext | None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if auth is not None and auth.token:
            headers["Authorization"] = f"Bearer {auth.token}"
        return headers

    async def request(
        self,
        path: str,
        auth: CallerContext | None = None,
        *,
        method: str = "GET",
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the parsed JSON body.

        Raises:
            DaemonRequestError: On transport failure, non-2xx status, or an
                unparseable success body.
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.request(
                    method,
                    self.url(path),
                    headers=self.headers(auth),
                    json=json,
                    params=params,
                )
        except httpx.HTTPError as e:
            logger.warning("daemon_unreachable", method=method, path=path, error=str(e))
            raise DaemonRequestError(f"{GENERIC_FAILURE}: {e}") from e

        if not resp.is_success:
            error = error_from_response(resp)
            logger.warning(
                "daemon_request_failed",
                method=method,
                path=path,
                status=resp.status_code,
                error=str(error),
            )
            raise error

        try:
            return resp.json()
        except ValueError as e:
            raise DaemonRequestError(
                f"{GENERIC_FAILURE}: invalid JSON response", resp.status_code
            ) from e
