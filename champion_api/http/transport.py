"""HTTP transport shared by every Champion API service."""

import json
import logging
from contextlib import aclosing
from typing import Any, AsyncIterator, Dict, Mapping, Optional

import httpx

from champion_api.exceptions import (
    ChampionAPIError,
    HTTPError,
    NetworkError,
    ParseError,
    StreamError,
)
from champion_api.http.sse import iter_sse_events
from champion_api.logging_context import request_scope

logger = logging.getLogger(__name__)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}
STREAM_HEADERS = {
    "Accept": "text/event-stream",
    "Cache-Control": "no-cache",
}

QueryParams = Optional[Mapping[str, str]]


class Transport:
    """
    Performs single request/response exchanges and opens SSE streams.

    Wraps one `httpx.AsyncClient` whose base URL every path is relative to.
    No retries are attempted: every failure becomes a `ChampionAPIError`
    and is raised to the caller.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        connect_timeout: float = 10.0,
    ):
        """
        Initialize transport.

        Args:
            client: Shared HTTP client, already configured with the base URL
            connect_timeout: Connect timeout for streams (they have no read timeout)
        """
        self.client = client
        self.stream_timeout = httpx.Timeout(None, connect=connect_timeout)

    @property
    def base_url(self) -> str:
        return str(self.client.base_url).rstrip("/")

    async def get(self, path: str, params: QueryParams = None) -> Any:
        """
        Make a GET request and decode the JSON body.

        Args:
            path: Request path (relative to base_url)
            params: Flat query parameters, values already stringified

        Returns:
            Decoded JSON value ({} for an empty body)
        """
        return await self._request("GET", path, params=params)

    async def post(
        self,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        params: QueryParams = None,
    ) -> Any:
        """
        Make a POST request with a JSON body and decode the JSON response.

        Args:
            path: Request path (relative to base_url)
            body: JSON-serializable request body
            params: Flat query parameters, values already stringified

        Returns:
            Decoded JSON value ({} for an empty body)
        """
        content = json.dumps(body) if body is not None else None
        return await self._request("POST", path, params=params, content=content)

    async def _request(
        self,
        method: str,
        path: str,
        params: QueryParams = None,
        content: Optional[str] = None,
    ) -> Any:
        with request_scope():
            self._ensure_open(path)

            logger.debug(f"{method} {self.base_url}{path}")
            try:
                response = await self.client.request(
                    method,
                    path,
                    params=dict(params) if params else None,
                    content=content,
                    headers=JSON_HEADERS,
                )
            except httpx.TransportError as e:
                logger.warning(f"{method} {path} failed: {e!r}")
                raise NetworkError(
                    f"Failed to make {method} request: {e}", endpoint=path
                ) from e

            return self._handle_response(response, path)

    def _handle_response(self, response: httpx.Response, endpoint: str) -> Any:
        status = response.status_code

        if 200 <= status < 300:
            if not response.content:
                return {}
            try:
                return response.json()
            except ValueError as e:
                logger.warning(f"{endpoint}: unparseable {status} response")
                raise ParseError(
                    f"Failed to parse response JSON: {e}",
                    status_code=status,
                    endpoint=endpoint,
                ) from e

        error_body = None
        if response.content:
            try:
                error_body = response.json()
            except ValueError:
                pass

        if isinstance(error_body, dict):
            errors = error_body.get("errors")
            if isinstance(errors, list) and errors:
                error = ChampionAPIError.from_response(error_body, status, endpoint)
                logger.warning(f"{endpoint}: {error.code} (HTTP {status})")
                raise error

        logger.warning(f"{endpoint}: HTTP {status}")
        raise HTTPError(
            f"HTTP {status}: {response.reason_phrase}",
            status_code=status,
            endpoint=endpoint,
            details=error_body if isinstance(error_body, dict) else None,
        )

    async def stream(self, path: str, params: QueryParams = None) -> AsyncIterator[Any]:
        """
        Open a server-sent-event stream and yield decoded JSON events.

        The sequence ends when the server closes the connection. Closing the
        generator (``aclose()``, leaving an ``aclosing`` block, or a timeout
        around ``take``) closes the connection; no error is raised for it.

        Args:
            path: Stream path (relative to base_url)
            params: Flat query parameters, values already stringified

        Raises:
            HTTPError: If the server answers with anything but 200
            StreamError: If the connection cannot be established or drops
        """
        # Request id covers the handshake only
        with request_scope():
            response = await self._open_stream(path, params)

        try:
            async with aclosing(iter_sse_events(response.aiter_lines())) as events:
                async for event in events:
                    yield event
        except httpx.TransportError as e:
            logger.warning(f"Stream {path} interrupted: {e!r}")
            raise StreamError(f"Stream interrupted: {e}", endpoint=path) from e
        finally:
            await response.aclose()
            logger.debug(f"Closed stream {path}")

    async def _open_stream(self, path: str, params: QueryParams) -> httpx.Response:
        self._ensure_open(path)

        request = self.client.build_request(
            "GET",
            path,
            params=dict(params) if params else None,
            headers=STREAM_HEADERS,
            timeout=self.stream_timeout,
        )
        logger.debug(f"Opening stream {request.url}")

        try:
            response = await self.client.send(request, stream=True)
        except httpx.TransportError as e:
            logger.warning(f"Stream {path} failed to connect: {e!r}")
            raise StreamError(f"Failed to establish stream: {e}", endpoint=path) from e

        if response.status_code != 200:
            await response.aclose()
            logger.warning(f"Stream {path} rejected: HTTP {response.status_code}")
            raise HTTPError(
                f"Stream request failed: HTTP {response.status_code} "
                f"{response.reason_phrase}",
                status_code=response.status_code,
                endpoint=path,
            )
        return response

    def _ensure_open(self, endpoint: str):
        if self.client.is_closed:
            raise NetworkError("HTTP client has been closed", endpoint=endpoint)
