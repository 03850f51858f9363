"""Async typed client for the Champion trading API (HTTP + server-sent events)."""

from champion_api.client import ChampionAPI
from champion_api.config import Settings
from champion_api.exceptions import (
    ChampionAPIError,
    HTTPError,
    NetworkError,
    ParseError,
    StreamError,
)
from champion_api.http import Transport, take, unwrap_envelope
from champion_api.models import *  # noqa: F401,F403
from champion_api.models import __all__ as _models_all
from champion_api.services import (
    AccountingService,
    AdminService,
    MarketService,
    TradingService,
)

__version__ = "1.0.0"

__all__ = [
    "AccountingService",
    "AdminService",
    "ChampionAPI",
    "ChampionAPIError",
    "HTTPError",
    "MarketService",
    "NetworkError",
    "ParseError",
    "Settings",
    "StreamError",
    "TradingService",
    "Transport",
    "take",
    "unwrap_envelope",
    *_models_all,
]
