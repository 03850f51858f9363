"""Contract models.

`Contract.contract_details` is a tagged union: `product_id` on the contract
selects the details model. An unknown product fails decoding instead of
falling back to a generic shape.
"""

from typing import Any, Dict, List, Optional, Type, Union

from pydantic import ConfigDict, ValidationInfo, field_validator

from champion_api.models.base import ChampionModel
from champion_api.models.product import ProductType


class CancellationDetails(ChampionModel):
    ask_price: Optional[str] = None
    expiry: Optional[int] = None


class OrderDetails(ChampionModel):
    """One limit order leg (take_profit, stop_loss or stop_out)."""

    model_config = ConfigDict(coerce_numbers_to_str=False)

    display_name: Optional[str] = None
    display_order_amount: Optional[str] = None
    order_amount: Optional[Union[float, str]] = None
    order_date: Optional[int] = None


class LimitOrderDetails(ChampionModel):
    take_profit: Optional[OrderDetails] = None
    stop_loss: Optional[OrderDetails] = None
    stop_out: Optional[OrderDetails] = None


class MarketSpotPrice(ChampionModel):
    epoch: int
    price: str


class TickInStream(ChampionModel):
    epoch: int
    tick: str
    tick_display_value: Optional[str] = None


class ContractDetails(ChampionModel):
    """Fields shared by every product. Unknown keys are kept as extras."""

    model_config = ConfigDict(extra="allow")

    instrument_id: Optional[str] = None
    instrument_name: Optional[str] = None
    profit_loss: Optional[str] = None
    reference_id: Optional[str] = None
    contract_start_time: Optional[int] = None
    entry_tick_time: Optional[int] = None
    entry_spot: Optional[str] = None
    exit_spot: Optional[str] = None
    exit_tick_time: Optional[int] = None
    commission: Optional[str] = None
    stake: Optional[str] = None
    bid_price: Optional[str] = None
    bid_price_currency: Optional[str] = None
    is_expired: Optional[bool] = None
    is_valid_to_sell: Optional[bool] = None
    is_sold: Optional[bool] = None
    potential_payout: Optional[str] = None
    status: Optional[str] = None
    tick_stream: Optional[List[TickInStream]] = None
    validation_params: Optional[Dict[str, Any]] = None
    market_spot_price: Optional[MarketSpotPrice] = None

    @property
    def additional_fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class MultiplierContractDetails(ContractDetails):
    variant: Optional[str] = None
    multiplier: Optional[int] = None
    cancellation: Optional[CancellationDetails] = None
    limit_order: Optional[LimitOrderDetails] = None


class AccumulatorContractDetails(ContractDetails):
    growth_rate: Optional[float] = None
    high_barrier: Optional[str] = None
    low_barrier: Optional[str] = None
    maximum_payout: Optional[str] = None
    tick_count: Optional[int] = None
    limit_order: Optional[LimitOrderDetails] = None


class RiseFallContractDetails(ContractDetails):
    contract_type: Optional[str] = None
    duration: Optional[int] = None
    duration_unit: Optional[str] = None
    barrier: Optional[str] = None


CONTRACT_DETAILS_BY_PRODUCT: Dict[str, Type[ContractDetails]] = {
    ProductType.MULTIPLIERS.value: MultiplierContractDetails,
    ProductType.ACCUMULATORS.value: AccumulatorContractDetails,
    ProductType.RISE_FALL.value: RiseFallContractDetails,
}

AnyContractDetails = Union[
    MultiplierContractDetails,
    AccumulatorContractDetails,
    RiseFallContractDetails,
]


class Contract(ChampionModel):
    """A bought (open or closed) contract."""

    contract_id: str
    product_id: str
    buy_price: Optional[str] = None
    buy_time: Optional[int] = None
    idempotency_key: Optional[str] = None
    sell_price: Optional[str] = None
    profit: Optional[str] = None
    sell_time: Optional[int] = None
    contract_details: AnyContractDetails

    @field_validator("contract_details", mode="before")
    @classmethod
    def _select_details_model(cls, value: Any, info: ValidationInfo) -> Any:
        if isinstance(value, ContractDetails):
            return value
        product_id = info.data.get("product_id")
        details_model = CONTRACT_DETAILS_BY_PRODUCT.get(product_id)
        if details_model is None:
            raise ValueError(f"Unknown product_id: {product_id!r}")
        return details_model.model_validate(value)

    def __str__(self) -> str:
        return f"Contract(id: {self.contract_id}, product: {self.product_id}, buy_price: {self.buy_price})"
