"""Shared pydantic base for wire models."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class ChampionModel(BaseModel):
    """Base for every response model.

    Field names equal the snake_case wire keys. Numeric prices sent as
    numbers are accepted into string fields.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    def to_dict(self) -> Dict[str, Any]:
        """Dump to a JSON-compatible dict, leaving out unset optionals."""
        return self.model_dump(mode="json", exclude_none=True)
