"""Account balance model."""

from typing import Optional

from champion_api.models.base import ChampionModel


class Balance(ChampionModel):
    """Account balance. Stream updates also carry timestamp/change/contract_id."""

    balance: str
    currency: str
    timestamp: Optional[str] = None
    change: Optional[str] = None
    contract_id: Optional[str] = None

    def __str__(self) -> str:
        return f"Balance(balance: {self.balance}, currency: {self.currency})"
