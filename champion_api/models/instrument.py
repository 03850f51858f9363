"""Trading instrument models."""

from typing import List

from champion_api.models.base import ChampionModel


class Instrument(ChampionModel):
    """A tradable instrument. `opens_at`/`closes_at` are epoch milliseconds."""

    id: str
    display_name: str
    categories: List[str]
    pip_size: int
    is_market_open: bool
    opens_at: int
    closes_at: int


class InstrumentsList(ChampionModel):
    instruments: List[Instrument]
