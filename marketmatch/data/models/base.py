"""
Base model classes for MarketMatch data models.

Records handed to the matching engine are immutable: scoring never
changes an agent or task, it wraps it in a new result.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MarketModel(BaseModel):
    """
    Base model for agent, task and match records.

    Accepts both snake_case and camelCase keys so records exported by the
    marketplace API can be loaded as-is.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def model_dump_api(self) -> dict[str, Any]:
        """Convert model to a camelCase, JSON-compatible dictionary."""
        return self.model_dump(mode="json", by_alias=True)
