"""Tests for wire models."""

import json

import pytest
from pydantic import ValidationError

from champion_api.models import (
    OHLC,
    AccumulatorContractDetails,
    AccumulatorProposalRequest,
    Balance,
    Contract,
    Instrument,
    InstrumentsList,
    MultiplierContractDetails,
    MultiplierProposalRequest,
    OHLCHistoryRequest,
    ProductConfig,
    ProductsList,
    Proposal,
    RiseFallContractDetails,
    RiseFallProposalDetails,
    RiseFallProposalRequest,
    Tick,
    TickHistoryRequest,
)

INSTRUMENT = {
    "id": "frxUSDJPY",
    "display_name": "USD/JPY",
    "categories": ["forex"],
    "pip_size": 3,
    "is_market_open": True,
    "opens_at": 1640995200000,
    "closes_at": 1641081600000,
}

CANDLE = {
    "open": "110.123",
    "high": "110.456",
    "low": "110.000",
    "close": "110.234",
    "open_epoch_ms": 1640995140000,
    "close_epoch_ms": 1640995200000,
}

PROPOSAL_DETAILS = {
    "bid_price": "10.00",
    "bid_price_currency": "USD",
    "commission": "0.10",
    "is_expired": False,
    "is_sold": False,
    "is_valid_to_sell": False,
    "market_spot_price": {"epoch": 1640995200, "price": "110.123"},
    "multiplier": 100,
    "potential_payout": "20.00",
    "stake": "10.00",
    "start_time": 1640995200,
    "status": "open",
    "stop_out": "0.50",
}


class TestRoundTrip:
    """JSON encode then decode yields an equal value."""

    @pytest.mark.parametrize(
        "model, payload",
        [
            (Balance, {"balance": "1000.00", "currency": "USD"}),
            (
                Balance,
                {
                    "balance": "995.00",
                    "currency": "USD",
                    "timestamp": "2024-01-01T00:00:00Z",
                    "change": "-5.00",
                    "contract_id": "c-1",
                },
            ),
            (Instrument, INSTRUMENT),
            (OHLC, CANDLE),
            (Tick, {"price": "110.123", "epoch_ms": 1640995200000, "ask": "110.125", "bid": "110.121"}),
            (Tick, {"price": "110.123", "epoch_ms": 1640995200000}),
        ],
    )
    def test_round_trip(self, model, payload):
        decoded = model.model_validate(payload)

        assert decoded.to_dict() == payload
        assert model.model_validate_json(decoded.model_dump_json()) == decoded
        assert json.loads(json.dumps(decoded.to_dict())) == payload


class TestBalance:
    def test_balance_fields(self):
        balance = Balance.model_validate({"balance": "1000.00", "currency": "USD"})
        assert balance.balance == "1000.00"
        assert balance.currency == "USD"
        assert balance.timestamp is None
        assert str(balance) == "Balance(balance: 1000.00, currency: USD)"

    def test_missing_currency_is_validation_error(self):
        with pytest.raises(ValidationError):
            Balance.model_validate({"balance": "1000.00"})


class TestMarketModels:
    def test_instruments_list(self):
        listing = InstrumentsList.model_validate({"instruments": [INSTRUMENT]})
        assert listing.instruments[0].display_name == "USD/JPY"
        assert listing.instruments[0].is_market_open is True

    def test_ohlc_epoch_ms_is_close_time(self):
        assert OHLC.model_validate(CANDLE).epoch_ms == 1640995200000

    def test_numeric_prices_accepted_as_strings(self):
        candle = OHLC.model_validate({**CANDLE, "open": 110.5})
        assert candle.open == "110.5"

    def test_tick_legacy_keys(self):
        tick = Tick.model_validate({"tick": "1.2345", "epoch": 1700000000})
        assert tick.price == "1.2345"
        assert tick.epoch_ms == 1700000000
        assert tick.to_dict() == {"price": "1.2345", "epoch_ms": 1700000000}

    def test_products_and_config(self):
        products = ProductsList.model_validate(
            {"products": [{"id": "multipliers", "display_name": "Multipliers"}]}
        )
        assert products.products[0].is_enabled is True

        config = ProductConfig.model_validate({"multipliers": [10, 100], "stake": {"min": "1"}})
        assert config.get("multipliers") == [10, 100]
        assert config.to_dict() == {"multipliers": [10, 100], "stake": {"min": "1"}}

    def test_history_requests(self):
        ohlc = OHLCHistoryRequest(
            instrument_id="frxUSDJPY",
            from_epoch_ms=1640995200000,
            to_epoch_ms=1641081600000,
            granularity=60,
            count=100,
        )
        assert ohlc.to_payload() == {
            "instrument_id": "frxUSDJPY",
            "from_epoch_ms": 1640995200000,
            "to_epoch_ms": 1641081600000,
            "granularity": 60,
            "count": 100,
        }

        ticks = TickHistoryRequest(
            instrument_id="frxUSDJPY", from_epoch_ms=1, to_epoch_ms=2, count=10
        )
        assert ticks.to_payload() == {
            "instrument_id": "frxUSDJPY",
            "from_epoch_ms": 1,
            "to_epoch_ms": 2,
            "count": 10,
        }


class TestContract:
    """Contract details are selected by product_id."""

    def _contract(self, product_id, **details):
        return {
            "contract_id": "contract_123",
            "product_id": product_id,
            "buy_price": "10.00",
            "buy_time": 1640995200,
            "contract_details": {"instrument_id": "frxUSDJPY", "stake": "10.00", **details},
        }

    def test_multiplier_details(self):
        contract = Contract.model_validate(
            self._contract(
                "multipliers",
                multiplier=100,
                commission="0.50",
                variant="MULTUP",
                bid_price="15.75",
                is_valid_to_sell=True,
                limit_order={
                    "take_profit": {"order_amount": 20, "display_name": "Take profit"},
                    "stop_out": {"order_amount": "-10.00", "order_date": 1640995200},
                },
                cancellation={"ask_price": "1.20", "expiry": 1640998800},
            )
        )

        details = contract.contract_details
        assert isinstance(details, MultiplierContractDetails)
        assert details.multiplier == 100
        assert details.variant == "MULTUP"
        assert details.limit_order.take_profit.order_amount == 20
        assert details.limit_order.stop_out.order_amount == "-10.00"
        assert details.cancellation.expiry == 1640998800

        serialized = contract.to_dict()
        assert serialized["contract_details"]["multiplier"] == 100
        assert serialized["contract_details"]["limit_order"]["take_profit"]["order_amount"] == 20

    def test_accumulator_details(self):
        contract = Contract.model_validate(
            self._contract("accumulators", growth_rate=0.03, high_barrier="110.5", low_barrier="109.5")
        )
        assert isinstance(contract.contract_details, AccumulatorContractDetails)
        assert contract.contract_details.growth_rate == 0.03

    def test_rise_fall_details(self):
        contract = Contract.model_validate(
            self._contract("rise_fall", contract_type="CALL", duration=60, duration_unit="s")
        )
        assert isinstance(contract.contract_details, RiseFallContractDetails)
        assert contract.contract_details.contract_type == "CALL"

    def test_unknown_product_fails_loudly(self):
        with pytest.raises(ValidationError, match="Unknown product_id"):
            Contract.model_validate(self._contract("digits"))

    def test_unknown_detail_fields_kept(self):
        contract = Contract.model_validate(self._contract("multipliers", new_field="x"))
        assert contract.contract_details.additional_fields == {"new_field": "x"}
        assert contract.to_dict()["contract_details"]["new_field"] == "x"

    def test_tick_stream_ticks_become_strings(self):
        contract = Contract.model_validate(
            self._contract("accumulators", tick_stream=[{"epoch": 1, "tick": 110.1}])
        )
        assert contract.contract_details.tick_stream[0].tick == "110.1"

    def test_round_trip(self):
        payload = self._contract("multipliers", multiplier=50, variant="MULTDOWN")
        contract = Contract.model_validate(payload)
        assert Contract.model_validate(contract.to_dict()) == contract


class TestProposal:
    def test_variants_shape(self):
        proposal = Proposal.model_validate(
            {
                "variants": [
                    {"variant": "MULTUP", "contract_details": PROPOSAL_DETAILS},
                    {"variant": "MULTDOWN", "contract_details": PROPOSAL_DETAILS},
                ]
            }
        )
        assert len(proposal.variants) == 2
        assert proposal.contract_details is None
        up = proposal.variant("multup")
        assert up.contract_details.potential_payout == "20.00"
        assert up.contract_details.market_spot_price.price == "110.123"
        assert up.contract_details.additional_fields == {"stop_out": "0.50"}

    def test_contract_details_shape(self):
        proposal = Proposal.model_validate(
            {
                "contract_details": {
                    "contract_type": "CALL",
                    "duration": 60,
                    "duration_unit": "s",
                    "payout": 19.5,
                    "market_spot_price": {"epoch": 1640995200, "price": "110.123"},
                    "barrier": "110.123",
                    "date_expiry": 1640995260,
                }
            }
        )
        details = proposal.contract_details
        assert proposal.variants is None
        assert isinstance(details, RiseFallProposalDetails)
        assert details.contract_type == "CALL"
        assert details.payout == "19.5"
        assert details.market_spot_price.price == "110.123"
        assert details.additional_fields == {"date_expiry": 1640995260}

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"ask_price": "10.50", "id": "proposal_123"},
            {"variants": [], "contract_details": {}},
        ],
    )
    def test_invalid_shapes(self, payload):
        with pytest.raises(ValidationError):
            Proposal.model_validate(payload)


class TestProposalRequests:
    def test_multiplier_request(self):
        request = MultiplierProposalRequest(
            instrument_id="frxUSDJPY",
            amount=10.0,
            multiplier=100,
            trade_type="up",
            stop_loss=5.0,
            take_profit=20.0,
            cancellation=3600,
        )
        assert request.to_payload() == {
            "product_id": "multipliers",
            "instrument_id": "frxUSDJPY",
            "stake": "10.0",
            "multiplier": 100,
            "variant": "MULTUP",
            "limit_order": {"stop_loss": 5.0, "take_profit": 20.0},
            "cancellation": 3600,
        }

    def test_multiplier_without_direction_or_limits(self):
        request = MultiplierProposalRequest(instrument_id="R_100", amount=5, multiplier=10)
        assert request.proposal_details() == {
            "instrument_id": "R_100",
            "stake": "5.0",
            "multiplier": 10,
        }

    def test_down_maps_to_multdown(self):
        request = MultiplierProposalRequest(
            instrument_id="R_100", amount=5, multiplier=10, trade_type="DOWN"
        )
        assert request.proposal_details()["variant"] == "MULTDOWN"

    def test_accumulator_request(self):
        request = AccumulatorProposalRequest(
            instrument_id="R_100", amount=10, growth_rate=0.03, take_profit=15.0
        )
        assert request.to_payload() == {
            "product_id": "accumulators",
            "instrument_id": "R_100",
            "stake": "10.0",
            "growth_rate": 0.03,
            "limit_order": {"take_profit": 15.0},
        }

    @pytest.mark.parametrize("trade_type, contract_type", [("rise", "CALL"), ("Fall", "PUT"), ("higher", "HIGHER")])
    def test_rise_fall_request(self, trade_type, contract_type):
        request = RiseFallProposalRequest(
            instrument_id="R_100", amount=10, duration=60, trade_type=trade_type
        )
        assert request.to_payload() == {
            "product_id": "rise_fall",
            "instrument_id": "R_100",
            "stake": "10.0",
            "contract_type": contract_type,
            "duration": 60,
            "duration_unit": "s",
            "basis": "stake",
        }
