"""Request ids for client log lines.

Every HTTP exchange and every stream handshake runs under a short request
id so the DEBUG/WARNING lines it produces can be grouped together. An id
set by the caller (for example one per trading decision) is reused for all
calls made inside it; otherwise the transport opens a fresh id per call and
drops it again once the call returns.
"""

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

_request_id: ContextVar[Optional[str]] = ContextVar("champion_api_request_id", default=None)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


def new_request_id() -> str:
    return uuid.uuid4().hex[:12]


def get_request_id() -> Optional[str]:
    """Id of the call currently in progress, or the caller's own id."""
    return _request_id.get()


def set_request_id(rid: Optional[str] = None) -> str:
    """
    Pin a request id on the current context until `clear_request_id`.

    Use this to tag a group of API calls with one id of your choosing.

    Args:
        rid: Id to use; a new 12-character hex id when None

    Returns:
        The id now in effect
    """
    if rid is None:
        rid = new_request_id()
    _request_id.set(rid)
    return rid


def clear_request_id():
    _request_id.set(None)


@contextmanager
def request_scope() -> Iterator[str]:
    """Run one API call under a request id.

    Keeps an id pinned by the caller. Otherwise a new id is set for the
    duration of the block and the previous value is restored on exit.
    """
    current = _request_id.get()
    if current is not None:
        yield current
        return

    rid = new_request_id()
    token = _request_id.set(rid)
    try:
        yield rid
    finally:
        _request_id.reset(token)


class RequestIDFilter(logging.Filter):
    """Stamp `record.request_id` ("-" outside any API call)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or "-"
        return True


def setup_request_logging(level: str = "INFO") -> logging.Logger:
    """Install the request-id filter and a console handler on the root logger.

    Safe to call more than once.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    handler = next(
        (h for h in root_logger.handlers if getattr(h, "_champion_api", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._champion_api = True
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)

    if not any(isinstance(f, RequestIDFilter) for f in handler.filters):
        handler.addFilter(RequestIDFilter())
    return root_logger
