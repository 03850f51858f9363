"""HTTP transport, SSE decoding and envelope normalization."""

from champion_api.http.envelope import as_list, extract_collection, unwrap_envelope
from champion_api.http.sse import decode_sse_line, iter_sse_events, take
from champion_api.http.transport import Transport

__all__ = [
    "Transport",
    "as_list",
    "decode_sse_line",
    "extract_collection",
    "iter_sse_events",
    "take",
    "unwrap_envelope",
]
