"""Market data endpoints: instruments, candles, ticks and products."""

from typing import AsyncIterator, Dict, Optional

from champion_api.http.envelope import extract_collection, unwrap_envelope
from champion_api.models.instrument import InstrumentsList
from champion_api.models.ohlc import OHLC, OHLCHistory, OHLCHistoryRequest
from champion_api.models.product import ProductConfig, ProductsList
from champion_api.models.tick import Tick, TickHistory, TickHistoryRequest
from champion_api.services.base import BaseService


class MarketService(BaseService):
    """Market data service."""

    async def get_instruments(self, product_id: Optional[str] = None) -> InstrumentsList:
        """
        List available trading instruments.

        Args:
            product_id: Only instruments tradable with this product

        Returns:
            InstrumentsList
        """
        params: Dict[str, str] = {}
        if product_id is not None:
            params["product_id"] = product_id

        response = await self.transport.get("/market/instruments", params=params)
        return InstrumentsList.model_validate(unwrap_envelope(response))

    async def get_ohlc_history(self, request: OHLCHistoryRequest) -> OHLCHistory:
        """
        Get historical candles.

        Args:
            request: Instrument, time range, granularity and count

        Returns:
            OHLCHistory
        """
        response = await self.transport.post(
            "/market/instruments/candles/history",
            body=request.to_payload(),
        )
        payload = unwrap_envelope(response)
        return OHLCHistory(
            candles=[OHLC.model_validate(c) for c in extract_collection(payload, "candles")]
        )

    def stream_ohlc(self, instrument_id: str, granularity: int) -> AsyncIterator[OHLC]:
        """
        Stream live candles.

        Args:
            instrument_id: Instrument identifier
            granularity: Candle size in seconds
        """
        params = {
            "instrument_id": instrument_id,
            "granularity": str(granularity),
        }
        return self._stream(
            "/market/instruments/candles/stream", OHLC.model_validate, params=params
        )

    async def get_tick_history(self, request: TickHistoryRequest) -> TickHistory:
        """
        Get historical ticks.

        Args:
            request: Instrument, time range and count

        Returns:
            TickHistory
        """
        response = await self.transport.post(
            "/market/instruments/ticks/history",
            body=request.to_payload(),
        )
        payload = unwrap_envelope(response)
        return TickHistory(
            ticks=[Tick.model_validate(t) for t in extract_collection(payload, "ticks")]
        )

    def stream_ticks(self, instrument_id: str) -> AsyncIterator[Tick]:
        """Stream live ticks for one instrument."""
        return self._stream(
            "/market/instruments/ticks/stream",
            Tick.model_validate,
            params={"instrument_id": instrument_id},
        )

    async def get_products(self) -> ProductsList:
        response = await self.transport.get("/market/products")
        return ProductsList.model_validate(unwrap_envelope(response))

    async def get_product_config(self, product_id: str) -> ProductConfig:
        """
        Get configuration details for one product.

        Args:
            product_id: Product identifier (e.g. "multipliers")

        Returns:
            ProductConfig
        """
        response = await self.transport.get(
            "/market/products/config", params={"product_id": product_id}
        )
        return ProductConfig.model_validate(unwrap_envelope(response))
