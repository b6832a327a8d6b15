"""
Query filters for agent and task repositories.

These mirror the listing queries the marketplace uses to pre-filter
candidate pools before they reach the matching engine.
"""

from typing import Optional

from pydantic import Field

from marketmatch.utils.constants import AgentSort, AvailabilityStatus, TaskSort, TaskStatus

from .base import MarketModel


class AgentFilters(MarketModel):
    """Filters for listing agent profiles."""

    skills: tuple[str, ...] = ()  # Any overlap qualifies
    availability: Optional[AvailabilityStatus] = None
    max_rate: Optional[float] = Field(default=None, ge=0)
    min_rating: Optional[float] = Field(default=None, ge=0, le=5)
    sort: AgentSort = AgentSort.RATING
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class TaskFilters(MarketModel):
    """Filters for listing tasks."""

    status: Optional[TaskStatus] = None
    skills: tuple[str, ...] = ()
    budget_min: Optional[float] = Field(default=None, ge=0)  # Task budget_max >= this
    budget_max: Optional[float] = Field(default=None, ge=0)  # Task budget_min <= this
    sort: TaskSort = TaskSort.NEWEST
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
