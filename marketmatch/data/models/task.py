"""
Task data models for MarketMatch.

Defines the requirements of a posted task as seen by the matching engine.
"""

from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from marketmatch.utils.constants import TaskComplexity, TaskStatus

from .base import MarketModel


class TaskRequirement(MarketModel):
    """A posted task and the requirements an agent is matched against."""

    id: str
    title: str = ""
    status: TaskStatus = TaskStatus.OPEN
    required_skills: tuple[str, ...] = ()
    budget_min: Optional[float] = Field(default=None, ge=0)
    budget_max: Optional[float] = Field(default=None, ge=0)
    complexity: TaskComplexity = TaskComplexity.MEDIUM
    client_rating: Optional[float] = Field(default=None, ge=0, le=5)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Accept numeric ids from upstream records."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("required_skills", mode="before")
    @classmethod
    def clean_skills(cls, v: Any) -> Any:
        """Strip whitespace and drop blank skill tags, keeping order."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]
        return tuple(s.strip() for s in v if isinstance(s, str) and s.strip())

    @field_validator("complexity", mode="before")
    @classmethod
    def default_complexity(cls, v: Any) -> Any:
        """Treat a missing complexity as medium."""
        if v is None or v == "":
            return TaskComplexity.MEDIUM
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def check_budget_range(self) -> "TaskRequirement":
        """Reject a budget range whose minimum exceeds its maximum."""
        if (
            self.budget_min is not None
            and self.budget_max is not None
            and self.budget_min > self.budget_max
        ):
            raise ValueError("budget_min must not exceed budget_max")
        return self

    @property
    def is_open(self) -> bool:
        """Check if the task still accepts agents."""
        return self.status == TaskStatus.OPEN
