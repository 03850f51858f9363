"""Common base for API services."""

from contextlib import aclosing
from typing import Any, AsyncIterator, Callable, Optional, TypeVar

from champion_api.http.envelope import unwrap_envelope
from champion_api.http.transport import QueryParams, Transport

T = TypeVar("T")


class BaseService:
    """A group of endpoints sharing one transport."""

    def __init__(self, transport: Transport):
        self.transport = transport

    async def _stream(
        self,
        path: str,
        decode: Callable[[Any], T],
        params: QueryParams = None,
    ) -> AsyncIterator[T]:
        """
        Subscribe to an SSE endpoint and decode each unwrapped event.

        Closing this generator closes the transport stream with it, so the
        connection is released as soon as the consumer stops.

        Args:
            path: Stream path (relative to base_url)
            decode: Builds the typed value from one unwrapped event
            params: Flat query parameters, values already stringified
        """
        async with aclosing(self.transport.stream(path, params=params)) as events:
            async for event in events:
                yield decode(unwrap_envelope(event))
