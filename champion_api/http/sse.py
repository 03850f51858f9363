"""Decoding of `text/event-stream` bodies into JSON events.

Only `data: ` lines are examined. The `[DONE]` payload means "nothing this
frame" and does not end the stream. A frame that is not valid JSON is
dropped so one bad frame cannot kill a long-lived subscription.
"""

import asyncio
import json
import logging
from typing import Any, AsyncIterable, AsyncIterator, Optional, Tuple

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "
DONE_SENTINEL = "[DONE]"


def decode_sse_line(line: str) -> Tuple[bool, Any]:
    """
    Decode a single SSE line.

    Args:
        line: One line of the event stream, without its terminator

    Returns:
        (True, value) when the line carries a JSON payload, (False, None)
        when the line produces no event.
    """
    if not line.startswith(DATA_PREFIX):
        return False, None

    payload = line[len(DATA_PREFIX):].strip()
    if not payload or payload == DONE_SENTINEL:
        return False, None

    try:
        return True, json.loads(payload)
    except ValueError:
        logger.debug(f"Dropping malformed SSE frame: {payload[:200]!r}")
        return False, None


async def iter_sse_events(lines: AsyncIterable[str]) -> AsyncIterator[Any]:
    """Yield one decoded JSON value per `data: ` line, in wire order."""
    async for line in lines:
        has_event, value = decode_sse_line(line)
        if has_event:
            yield value


async def take(
    events: AsyncIterator[Any],
    count: Optional[int] = None,
    timeout: Optional[float] = None,
) -> AsyncIterator[Any]:
    """
    Forward at most `count` events, stopping once `timeout` seconds elapse.

    Either limit closes the source stream, which releases its connection.
    Running out of time is not an error: the sequence simply ends.

    Args:
        events: Source event stream (an async generator)
        count: Maximum number of events, or None for no limit
        timeout: Overall time budget in seconds, or None for no limit
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout if timeout is not None else None
    delivered = 0
    try:
        while count is None or delivered < count:
            remaining = None
            if deadline is not None:
                remaining = deadline - loop.time()
                if remaining <= 0:
                    break
            try:
                event = await asyncio.wait_for(events.__anext__(), remaining)
            except StopAsyncIteration:
                break
            except asyncio.TimeoutError:
                break
            delivered += 1
            yield event
    finally:
        aclose = getattr(events, "aclose", None)
        if aclose is not None:
            await aclose()
