"""Price tick models."""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from champion_api.models.base import ChampionModel


class Tick(ChampionModel):
    """A price tick.

    Older payloads name the price `tick` and the time `epoch`; both are
    accepted on input and always dumped as `price` / `epoch_ms`.
    """

    price: str = Field(validation_alias=AliasChoices("price", "tick"))
    epoch_ms: int = Field(validation_alias=AliasChoices("epoch_ms", "epoch"))
    ask: Optional[str] = None
    bid: Optional[str] = None
    tick_display_value: Optional[str] = None

    def __str__(self) -> str:
        return f"Tick(price: {self.price}, epoch_ms: {self.epoch_ms}, ask: {self.ask}, bid: {self.bid})"


class TickHistoryRequest(BaseModel):
    """Body for POST /market/instruments/ticks/history."""

    instrument_id: str
    from_epoch_ms: int
    to_epoch_ms: int
    count: int

    def to_payload(self) -> dict:
        return self.model_dump()


class TickHistory(ChampionModel):
    ticks: List[Tick]
