"""Champion API client: composition root for transport and services."""

import logging
from typing import Optional

import httpx

from champion_api.config import Settings
from champion_api.http.transport import Transport
from champion_api.services.accounting import AccountingService
from champion_api.services.admin import AdminService
from champion_api.services.market import MarketService
from champion_api.services.trading import TradingService

logger = logging.getLogger(__name__)


class ChampionAPI:
    """
    Async client for the Champion trading API.

    Usage:
        async with ChampionAPI(base_url="http://localhost:3000/v1") as api:
            balance = await api.accounting.get_balance()
            async with aclosing(api.market.stream_ticks("frxUSDJPY")) as ticks:
                async for tick in ticks:
                    ...
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. "http://localhost:3000/v1" (default: settings)
            timeout: Request timeout in seconds (default: settings)
            http_client: Pre-built client to use instead of creating one; the
                caller keeps ownership and must close it. Its base URL and
                timeouts take precedence over `base_url`, `timeout` and settings
            settings: Settings to fall back on (default: read from environment)
        """
        self.settings = settings or Settings()
        self.base_url = (base_url or self.settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else self.settings.timeout

        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout, connect=self.settings.connect_timeout),
            )
        else:
            # Requests follow the injected client's own base URL
            self.base_url = str(http_client.base_url).rstrip("/")
        self.http_client = http_client

        self.transport = Transport(http_client, connect_timeout=self.settings.connect_timeout)
        self.accounting = AccountingService(self.transport)
        self.market = MarketService(self.transport)
        self.trading = TradingService(self.transport)
        self.admin = AdminService(self.transport)

    async def __aenter__(self) -> "ChampionAPI":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        """Release the connection pool (only if this client created it)."""
        if self._owns_client and not self.http_client.is_closed:
            logger.debug(f"Closing HTTP client for {self.base_url}")
            await self.http_client.aclose()
