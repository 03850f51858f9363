"""OHLC candle models."""

from typing import List

from pydantic import BaseModel

from champion_api.models.base import ChampionModel


class OHLC(ChampionModel):
    """One candle. Prices are decimal strings, times epoch milliseconds."""

    open: str
    high: str
    low: str
    close: str
    open_epoch_ms: int
    close_epoch_ms: int

    @property
    def epoch_ms(self) -> int:
        """Candle timestamp (the close time)."""
        return self.close_epoch_ms


class OHLCHistoryRequest(BaseModel):
    """Body for POST /market/instruments/candles/history."""

    instrument_id: str
    from_epoch_ms: int
    to_epoch_ms: int
    granularity: int  # seconds per candle
    count: int

    def to_payload(self) -> dict:
        return self.model_dump()


class OHLCHistory(ChampionModel):
    candles: List[OHLC]
