"""
Agent profile data models for MarketMatch.

Defines the read-only view of an agent that the matching engine scores.
"""

from typing import Any, Optional

from pydantic import Field, field_serializer, field_validator

from marketmatch.utils.constants import AvailabilityStatus

from .base import MarketModel


class AgentCandidate(MarketModel):
    """An agent profile as supplied to the matching engine."""

    id: str
    title: Optional[str] = None
    skills: frozenset[str] = Field(default_factory=frozenset)
    average_rating: float = Field(default=0.0, ge=0, le=5)
    experience_years: int = Field(default=0, ge=0)
    completed_tasks: int = Field(default=0, ge=0)
    hourly_rate: Optional[float] = Field(default=None, ge=0)
    availability_status: AvailabilityStatus = AvailabilityStatus.AVAILABLE

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Accept numeric ids from upstream records."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("skills", mode="before")
    @classmethod
    def clean_skills(cls, v: Any) -> Any:
        """Strip whitespace and drop blank skill tags."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [v]
        return frozenset(s.strip() for s in v if isinstance(s, str) and s.strip())

    @property
    def display_name(self) -> str:
        """Title when present, otherwise the agent id."""
        return self.title or self.id

    @field_serializer("skills")
    def serialize_skills(self, skills: frozenset[str]) -> list[str]:
        """Emit skills in a stable order."""
        return sorted(skills)
