"""
Match result data models for MarketMatch.

Defines the annotated results returned by the matching engine and the
aggregates built on top of them.
"""

from typing import Generic, TypeVar

from pydantic import Field, FieldSerializationInfo, field_serializer
from pydantic.alias_generators import to_camel

from .agent import AgentCandidate
from .base import MarketModel

EntityT = TypeVar("EntityT", bound=MarketModel)


class ScoredMatch(MarketModel, Generic[EntityT]):
    """An agent or task annotated with its compatibility score."""

    entity: EntityT
    match_score: float = Field(ge=0, le=100)  # Weighted sum, 2 decimals
    match_breakdown: dict[str, float] = Field(default_factory=dict)  # Factor -> 0-1
    match_percentage: int = Field(ge=0, le=100)

    @field_serializer("match_breakdown")
    def serialize_breakdown(
        self,
        breakdown: dict[str, float],
        info: FieldSerializationInfo,
    ) -> dict[str, float]:
        """Camel-case the factor names when dumping by alias."""
        if info.by_alias:
            return {to_camel(factor): value for factor, value in breakdown.items()}
        return breakdown

    @property
    def entity_id(self) -> str:
        """Id of the scored agent or task."""
        return self.entity.id


class MatchStatistics(MarketModel):
    """Aggregate over the top matches for a task."""

    total_matches: int = 0
    average_score: float = 0.0
    top_score: float = 0.0
    average_hourly_rate: float = 0.0


class TaskMatchesResult(MarketModel):
    """Ranked agents for a task together with their statistics."""

    task_id: str
    task_title: str = ""
    matches: list[ScoredMatch[AgentCandidate]] = Field(default_factory=list)
    statistics: MatchStatistics = Field(default_factory=MatchStatistics)
