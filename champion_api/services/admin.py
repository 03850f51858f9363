"""Administrative endpoints."""

from typing import Any, Dict

from champion_api.http.envelope import unwrap_envelope
from champion_api.services.base import BaseService


class AdminService(BaseService):
    async def reset_state(self) -> Dict[str, Any]:
        """Reset the entire server-side mock state."""
        response = await self.transport.post("/admin/reset")
        return unwrap_envelope(response)
