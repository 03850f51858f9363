"""Trading product models."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import RootModel

from champion_api.models.base import ChampionModel


class ProductType(str, Enum):
    """Product identifiers understood by the trading endpoints."""

    MULTIPLIERS = "multipliers"
    ACCUMULATORS = "accumulators"
    RISE_FALL = "rise_fall"


class Product(ChampionModel):
    id: str
    display_name: str
    description: Optional[str] = None
    is_enabled: bool = True
    config: Optional[Dict[str, Any]] = None


class ProductsList(ChampionModel):
    products: List[Product]


class ProductConfig(RootModel[Dict[str, Any]]):
    """Free-form product configuration, kept exactly as received."""

    @property
    def config(self) -> Dict[str, Any]:
        return self.root

    def get(self, key: str, default: Any = None) -> Any:
        return self.root.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.root)
