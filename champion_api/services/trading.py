"""Trading endpoints: contracts, proposals, buy/sell/cancel."""

import json
import logging
import time
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional

from champion_api.http.envelope import extract_collection, unwrap_envelope
from champion_api.models.contract import Contract
from champion_api.models.product import ProductType
from champion_api.models.proposal import (
    AccumulatorProposalRequest,
    MultiplierProposalRequest,
    Proposal,
    ProposalRequest,
    RiseFallProposalRequest,
)
from champion_api.services.base import BaseService

logger = logging.getLogger(__name__)


def _contracts_from_payload(payload: Any) -> List[Contract]:
    return [Contract.model_validate(c) for c in extract_collection(payload, "contracts")]


def _query_value(value: Any) -> str:
    # Structured values (e.g. limit_order) travel as JSON strings
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


class TradingService(BaseService):
    """Contract lifecycle and pricing."""

    # -------------------------------------------------------------------------
    # Contracts
    # -------------------------------------------------------------------------

    async def get_open_contracts(self, contract_id: Optional[str] = None) -> List[Contract]:
        """
        Get open contracts.

        Args:
            contract_id: Only this contract

        Returns:
            List of open contracts (a single object response becomes one element)
        """
        params: Dict[str, str] = {}
        if contract_id is not None:
            params["contract_id"] = contract_id

        response = await self.transport.get("/trading/contracts/open", params=params)
        return _contracts_from_payload(unwrap_envelope(response))

    async def get_closed_contracts(
        self,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Contract]:
        """
        Get closed contracts.

        Args:
            date_from: Lower bound on close date
            date_to: Upper bound on close date
            limit: Page size
            offset: Page offset

        Returns:
            List of closed contracts
        """
        params: Dict[str, str] = {}
        if date_from is not None:
            params["date_from"] = date_from
        if date_to is not None:
            params["date_to"] = date_to
        if limit is not None:
            params["limit"] = str(limit)
        if offset is not None:
            params["offset"] = str(offset)

        response = await self.transport.get("/trading/contracts/close", params=params)
        return _contracts_from_payload(unwrap_envelope(response))

    def stream_open_contracts(self) -> AsyncIterator[List[Contract]]:
        """Yield the full list of open contracts on every update."""
        return self._stream("/trading/contracts/open/stream", _contracts_from_payload)

    def stream_closed_contracts(self) -> AsyncIterator[List[Contract]]:
        """Yield the list of closed contracts on every update."""
        return self._stream("/trading/contracts/close/stream", _contracts_from_payload)

    # -------------------------------------------------------------------------
    # Buy / sell / cancel
    # -------------------------------------------------------------------------

    async def buy_contract(self, body: Dict[str, Any]) -> Contract:
        """
        Buy a contract from a pre-built request body.

        Args:
            body: `{"idempotency_key", "product_id", "proposal_details"}`

        Returns:
            The bought contract
        """
        response = await self.transport.post("/trading/contracts/buy", body=body)
        return Contract.model_validate(unwrap_envelope(response))

    async def buy(
        self,
        request: ProposalRequest,
        idempotency_key: Optional[str] = None,
    ) -> Contract:
        """
        Buy the contract described by a proposal request.

        Args:
            request: Product-specific request
            idempotency_key: Defaults to the current epoch milliseconds

        Returns:
            The bought contract
        """
        body = {
            "idempotency_key": idempotency_key or str(int(time.time() * 1000)),
            "product_id": request.product_id.value,
            "proposal_details": request.proposal_details(),
        }
        logger.info(
            f"Buying {request.product_id.value} on {request.instrument_id} "
            f"(stake {request.amount}, key {body['idempotency_key']})"
        )
        return await self.buy_contract(body)

    async def buy_multiplier_contract(
        self,
        instrument_id: str,
        amount: float,
        multiplier: int,
        trade_type: str,
        stop_loss: Optional[float] = None,
        take_profit: Optional[float] = None,
        cancellation: Optional[int] = None,
        idempotency_key: Optional[str] = None,
    ) -> Contract:
        """
        Buy a multiplier contract.

        Args:
            instrument_id: Instrument identifier
            amount: Stake
            multiplier: Multiplier value
            trade_type: "up" (MULTUP) or "down" (MULTDOWN)
            stop_loss: Optional stop loss amount
            take_profit: Optional take profit amount
            cancellation: Optional deal cancellation duration
            idempotency_key: Optional idempotency key

        Returns:
            The bought contract
        """
        request = MultiplierProposalRequest(
            instrument_id=instrument_id,
            amount=amount,
            multiplier=multiplier,
            trade_type=trade_type,
            stop_loss=stop_loss,
            take_profit=take_profit,
            cancellation=cancellation,
        )
        return await self.buy(request, idempotency_key)

    async def buy_accumulator_contract(
        self,
        instrument_id: str,
        amount: float,
        growth_rate: float,
        take_profit: Optional[float] = None,
        idempotency_key: Optional[str] = None,
    ) -> Contract:
        """Buy an accumulator contract."""
        request = AccumulatorProposalRequest(
            instrument_id=instrument_id,
            amount=amount,
            growth_rate=growth_rate,
            take_profit=take_profit,
        )
        return await self.buy(request, idempotency_key)

    async def buy_rise_fall_contract(
        self,
        instrument_id: str,
        amount: float,
        duration: int,
        trade_type: str,
        duration_unit: str = "s",
        basis: str = "stake",
        idempotency_key: Optional[str] = None,
    ) -> Contract:
        """
        Buy a rise/fall contract.

        Args:
            instrument_id: Instrument identifier
            amount: Stake
            duration: Contract duration in `duration_unit`
            trade_type: "rise" (CALL) or "fall" (PUT)
            duration_unit: Duration unit, seconds by default
            basis: Amount basis, stake by default
            idempotency_key: Optional idempotency key

        Returns:
            The bought contract
        """
        request = RiseFallProposalRequest(
            instrument_id=instrument_id,
            amount=amount,
            duration=duration,
            trade_type=trade_type,
            duration_unit=duration_unit,
            basis=basis,
        )
        return await self.buy(request, idempotency_key)

    async def sell_contract(self, contract_id: str) -> Dict[str, Any]:
        """Sell an open contract. Returns the unwrapped sell result."""
        response = await self.transport.post(
            "/trading/contracts/sell", body={"contract_id": contract_id}
        )
        return unwrap_envelope(response)

    async def cancel_contract(self, contract_id: str) -> Dict[str, Any]:
        """Cancel a contract (multipliers with deal cancellation only)."""
        response = await self.transport.post(
            "/trading/contracts/cancel", body={"contract_id": contract_id}
        )
        return unwrap_envelope(response)

    # -------------------------------------------------------------------------
    # Proposals
    # -------------------------------------------------------------------------

    async def get_proposal(self, request: ProposalRequest) -> Proposal:
        """
        Price a potential trade.

        Args:
            request: Product-specific proposal request

        Returns:
            Proposal
        """
        response = await self.transport.post("/trading/proposal", body=request.to_payload())
        return Proposal.model_validate(unwrap_envelope(response))

    async def get_multiplier_proposal(
        self,
        instrument_id: str,
        amount: float,
        multiplier: int,
        stop_loss: Optional[float] = None,
        take_profit: Optional[float] = None,
        cancellation: Optional[int] = None,
    ) -> Proposal:
        return await self.get_proposal(
            MultiplierProposalRequest(
                instrument_id=instrument_id,
                amount=amount,
                multiplier=multiplier,
                stop_loss=stop_loss,
                take_profit=take_profit,
                cancellation=cancellation,
            )
        )

    async def get_accumulator_proposal(
        self,
        instrument_id: str,
        amount: float,
        growth_rate: float,
        take_profit: Optional[float] = None,
    ) -> Proposal:
        return await self.get_proposal(
            AccumulatorProposalRequest(
                instrument_id=instrument_id,
                amount=amount,
                growth_rate=growth_rate,
                take_profit=take_profit,
            )
        )

    async def get_rise_fall_proposal(
        self,
        instrument_id: str,
        amount: float,
        duration: int,
        trade_type: str,
    ) -> Proposal:
        return await self.get_proposal(
            RiseFallProposalRequest(
                instrument_id=instrument_id,
                amount=amount,
                duration=duration,
                trade_type=trade_type,
            )
        )

    def stream_proposal(
        self,
        product_id: str,
        instrument_id: str,
        amount: float,
        additional_params: Optional[Mapping[str, Any]] = None,
    ) -> AsyncIterator[Proposal]:
        """
        Stream live proposal prices.

        Args:
            product_id: Product identifier
            instrument_id: Instrument identifier
            amount: Stake
            additional_params: Extra product parameters; mappings and lists
                are sent JSON-encoded, everything else stringified
        """
        if isinstance(product_id, ProductType):
            product_id = product_id.value
        params = {
            "product_id": product_id,
            "instrument_id": instrument_id,
            "stake": str(amount),
        }
        for key, value in (additional_params or {}).items():
            params[key] = _query_value(value)

        return self._stream("/trading/proposal/stream", Proposal.model_validate, params=params)
