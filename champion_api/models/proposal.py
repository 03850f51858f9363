"""Trading proposal models and proposal request builders."""

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from champion_api.models.base import ChampionModel
from champion_api.models.product import ProductType


class ProposalMarketSpotPrice(ChampionModel):
    epoch: int
    price: str


class ProposalContractDetails(ChampionModel):
    """Priced contract terms within a proposal. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    bid_price: str
    bid_price_currency: str
    commission: Optional[str] = None
    is_expired: bool
    is_sold: bool
    is_valid_to_sell: bool
    market_spot_price: ProposalMarketSpotPrice
    multiplier: Optional[int] = None
    potential_payout: str
    stake: str
    start_time: int
    status: str
    # accumulators
    growth_rate: Optional[float] = None
    high_barrier: Optional[str] = None
    low_barrier: Optional[str] = None
    maximum_payout: Optional[str] = None

    @property
    def additional_fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class RiseFallProposalDetails(ChampionModel):
    """Priced terms of a rise/fall proposal. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    contract_type: Optional[str] = None
    duration: Optional[int] = None
    duration_unit: Optional[str] = None
    barrier: Optional[str] = None
    stake: Optional[str] = None
    payout: Optional[str] = None
    potential_payout: Optional[str] = None
    bid_price: Optional[str] = None
    bid_price_currency: Optional[str] = None
    commission: Optional[str] = None
    market_spot_price: Optional[ProposalMarketSpotPrice] = None
    start_time: Optional[int] = None
    status: Optional[str] = None

    @property
    def additional_fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class ProposalVariant(ChampionModel):
    """One side of a proposal, e.g. MULTUP or MULTDOWN."""

    variant: str
    contract_details: ProposalContractDetails


class Proposal(ChampionModel):
    """
    Proposal response.

    Multipliers and accumulators answer with `variants`; rise/fall answers
    with a single `contract_details` object. Exactly one must be present.
    """

    variants: Optional[List[ProposalVariant]] = None
    contract_details: Optional[RiseFallProposalDetails] = None

    @model_validator(mode="after")
    def _check_shape(self) -> "Proposal":
        if (self.variants is None) == (self.contract_details is None):
            raise ValueError(
                "Invalid proposal structure: expected exactly one of variants or contract_details"
            )
        return self

    def variant(self, name: str) -> Optional[ProposalVariant]:
        """Look up a variant by name (case-insensitive)."""
        for v in self.variants or []:
            if v.variant.upper() == name.upper():
                return v
        return None


def _limit_order(**limits: Optional[float]) -> Optional[Dict[str, float]]:
    order = {k: v for k, v in limits.items() if v is not None}
    return order or None


class ProposalRequest(BaseModel):
    """
    Base for proposal/buy requests.

    `proposal_details()` is the product-specific body nested under
    `proposal_details` when buying; `to_payload()` is the flat body posted
    to /trading/proposal.
    """

    product_id: ClassVar[ProductType]

    instrument_id: str
    amount: float

    def proposal_details(self) -> Dict[str, Any]:
        return {
            "instrument_id": self.instrument_id,
            "stake": str(self.amount),
        }

    def to_payload(self) -> Dict[str, Any]:
        return {"product_id": self.product_id.value, **self.proposal_details()}


class MultiplierProposalRequest(ProposalRequest):
    """Multiplier request. `trade_type` ("up"/"down") is required to buy."""

    product_id: ClassVar[ProductType] = ProductType.MULTIPLIERS

    multiplier: int
    trade_type: Optional[str] = None
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None
    cancellation: Optional[int] = None

    def proposal_details(self) -> Dict[str, Any]:
        details = super().proposal_details()
        details["multiplier"] = self.multiplier
        if self.trade_type is not None:
            details["variant"] = "MULTUP" if self.trade_type.upper() == "UP" else "MULTDOWN"
        limit_order = _limit_order(stop_loss=self.stop_loss, take_profit=self.take_profit)
        if limit_order:
            details["limit_order"] = limit_order
        if self.cancellation is not None:
            details["cancellation"] = self.cancellation
        return details


class AccumulatorProposalRequest(ProposalRequest):
    product_id: ClassVar[ProductType] = ProductType.ACCUMULATORS

    growth_rate: float
    take_profit: Optional[float] = None

    def proposal_details(self) -> Dict[str, Any]:
        details = super().proposal_details()
        details["growth_rate"] = self.growth_rate
        limit_order = _limit_order(take_profit=self.take_profit)
        if limit_order:
            details["limit_order"] = limit_order
        return details


class RiseFallProposalRequest(ProposalRequest):
    """Rise/fall request. "rise" maps to CALL, "fall" to PUT."""

    product_id: ClassVar[ProductType] = ProductType.RISE_FALL

    duration: int
    trade_type: str
    duration_unit: str = "s"
    basis: str = "stake"

    @property
    def contract_type(self) -> str:
        trade_type = self.trade_type.lower()
        if trade_type == "rise":
            return "CALL"
        if trade_type == "fall":
            return "PUT"
        return self.trade_type.upper()

    def proposal_details(self) -> Dict[str, Any]:
        details = super().proposal_details()
        details.update(
            {
                "contract_type": self.contract_type,
                "duration": self.duration,
                "duration_unit": self.duration_unit,
                "basis": self.basis,
            }
        )
        return details
