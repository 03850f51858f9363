"""Wire models for the Champion API."""

from champion_api.models.balance import Balance
from champion_api.models.base import ChampionModel
from champion_api.models.contract import (
    AccumulatorContractDetails,
    CancellationDetails,
    Contract,
    ContractDetails,
    LimitOrderDetails,
    MarketSpotPrice,
    MultiplierContractDetails,
    OrderDetails,
    RiseFallContractDetails,
    TickInStream,
)
from champion_api.models.instrument import Instrument, InstrumentsList
from champion_api.models.ohlc import OHLC, OHLCHistory, OHLCHistoryRequest
from champion_api.models.product import Product, ProductConfig, ProductsList, ProductType
from champion_api.models.proposal import (
    AccumulatorProposalRequest,
    MultiplierProposalRequest,
    Proposal,
    ProposalContractDetails,
    ProposalMarketSpotPrice,
    ProposalRequest,
    ProposalVariant,
    RiseFallProposalDetails,
    RiseFallProposalRequest,
)
from champion_api.models.tick import Tick, TickHistory, TickHistoryRequest

__all__ = [
    "AccumulatorContractDetails",
    "AccumulatorProposalRequest",
    "Balance",
    "CancellationDetails",
    "ChampionModel",
    "Contract",
    "ContractDetails",
    "Instrument",
    "InstrumentsList",
    "LimitOrderDetails",
    "MarketSpotPrice",
    "MultiplierContractDetails",
    "MultiplierProposalRequest",
    "OHLC",
    "OHLCHistory",
    "OHLCHistoryRequest",
    "OrderDetails",
    "Product",
    "ProductConfig",
    "ProductType",
    "ProductsList",
    "Proposal",
    "ProposalContractDetails",
    "ProposalMarketSpotPrice",
    "ProposalRequest",
    "ProposalVariant",
    "RiseFallContractDetails",
    "RiseFallProposalDetails",
    "RiseFallProposalRequest",
    "Tick",
    "TickHistory",
    "TickHistoryRequest",
    "TickInStream",
]
