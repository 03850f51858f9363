"""API services, one per endpoint group."""

from champion_api.services.accounting import AccountingService
from champion_api.services.admin import AdminService
from champion_api.services.base import BaseService
from champion_api.services.market import MarketService
from champion_api.services.trading import TradingService

__all__ = [
    "AccountingService",
    "AdminService",
    "BaseService",
    "MarketService",
    "TradingService",
]
