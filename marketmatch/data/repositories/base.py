"""
Repository contracts for agent and task data.

The matching handlers only depend on these abstract classes; any storage
backend that can list and look up agents and tasks can be plugged in.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from marketmatch.data.models import (
    AgentCandidate,
    AgentFilters,
    MarketModel,
    TaskFilters,
    TaskRequirement,
)

# Type variable for record models
T = TypeVar("T", bound=MarketModel)


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository providing record lookups.

    Subclasses must define the record name and model class.
    """

    @property
    @abstractmethod
    def record_name(self) -> str:
        """Human readable name of the stored records."""
        pass

    @property
    @abstractmethod
    def model_class(self) -> type[T]:
        """Pydantic model class for this repository."""
        pass

    @abstractmethod
    def get_by_id(self, id_value: str) -> Optional[T]:
        """Get a record by its ID."""
        pass

    @abstractmethod
    def add(self, model: T) -> T:
        """Store a record, replacing any record with the same ID."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count stored records."""
        pass

    def exists(self, id_value: str) -> bool:
        """Check if a record with this ID is stored."""
        return self.get_by_id(id_value) is not None


class AgentRepository(BaseRepository[AgentCandidate]):
    """Source of agent profiles for the matching handlers."""

    @property
    def record_name(self) -> str:
        return "agent"

    @property
    def model_class(self) -> type[AgentCandidate]:
        return AgentCandidate

    @abstractmethod
    def list(self, filters: Optional[AgentFilters] = None) -> list[AgentCandidate]:
        """
        List agent profiles.

        Args:
            filters: Skill overlap, availability, rate ceiling, minimum
                rating, ordering and paging

        Returns:
            One page of matching agents
        """
        pass


class TaskRepository(BaseRepository[TaskRequirement]):
    """Source of tasks for the matching handlers."""

    @property
    def record_name(self) -> str:
        return "task"

    @property
    def model_class(self) -> type[TaskRequirement]:
        return TaskRequirement

    @abstractmethod
    def list(self, filters: Optional[TaskFilters] = None) -> list[TaskRequirement]:
        """
        List tasks.

        Args:
            filters: Status, skill overlap, budget bounds, ordering and paging

        Returns:
            One page of matching tasks
        """
        pass
