"""Walk through the Champion API against a running server.

This example demonstrates:
1. Configuring logging and the client from the environment
2. Reading the balance and the instrument list
3. Pricing a multiplier trade and buying it
4. Consuming a few live ticks, then closing the stream
5. Selling the contract

Set CHAMPION_API_BASE_URL to point at a server other than localhost:3000.
"""

import asyncio
from contextlib import aclosing

from champion_api import ChampionAPI, ChampionAPIError, Settings, take
from champion_api.logging_context import setup_request_logging


def section(title: str):
    print("=" * 70)
    print(title)
    print("=" * 70)


async def main():
    settings = Settings()
    setup_request_logging(settings.log_level)

    async with ChampionAPI(settings=settings) as api:
        section("STEP 1: Account")
        balance = await api.accounting.get_balance()
        print(balance)
        print()

        section("STEP 2: Instruments")
        listing = await api.market.get_instruments(product_id="multipliers")
        for instrument in listing.instruments[:5]:
            state = "open" if instrument.is_market_open else "closed"
            print(f"  - {instrument.id} ({instrument.display_name}, {state})")
        print()
        if not listing.instruments:
            return
        instrument_id = listing.instruments[0].id

        section("STEP 3: Proposal and buy")
        proposal = await api.trading.get_multiplier_proposal(
            instrument_id, amount=10.0, multiplier=100, take_profit=5.0
        )
        for variant in proposal.variants or []:
            details = variant.contract_details
            print(f"  {variant.variant}: payout {details.potential_payout} {details.bid_price_currency}")

        try:
            contract = await api.trading.buy_multiplier_contract(
                instrument_id, amount=10.0, multiplier=100, trade_type="up"
            )
        except ChampionAPIError as e:
            print(f"Buy rejected: {e}")
            return
        print(contract)
        print()

        section("STEP 4: Live ticks")
        async for tick in take(api.market.stream_ticks(instrument_id), count=5, timeout=10):
            print(f"  {tick.epoch_ms}: {tick.price}")

        async with aclosing(api.accounting.stream_balance()) as updates:
            async for update in take(updates, count=1, timeout=5):
                print(f"  balance now {update.balance} {update.currency}")
        print()

        section("STEP 5: Sell")
        result = await api.trading.sell_contract(contract.contract_id)
        print(result)


if __name__ == "__main__":
    asyncio.run(main())
