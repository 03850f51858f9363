"""Account balance endpoints."""

from typing import AsyncIterator

from champion_api.http.envelope import unwrap_envelope
from champion_api.models.balance import Balance
from champion_api.services.base import BaseService


class AccountingService(BaseService):
    """Balance lookups, live balance updates and balance reset."""

    async def get_balance(self) -> Balance:
        """
        Get the current account balance.

        Returns:
            Balance
        """
        response = await self.transport.get("/accounting/balance")
        return Balance.model_validate(unwrap_envelope(response))

    def stream_balance(self) -> AsyncIterator[Balance]:
        """Yield a Balance for every update pushed by the server."""
        return self._stream("/accounting/balance/stream", Balance.model_validate)

    async def reset_balance(self) -> Balance:
        """
        Reset the balance to the server's default value.

        Returns:
            Balance after the reset
        """
        response = await self.transport.post("/accounting/balance/reset")
        return Balance.model_validate(unwrap_envelope(response))
