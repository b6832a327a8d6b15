"""
In-memory repositories backed by JSON exports.

Used by the CLI and the test suite. Listing follows the marketplace's
agent and task listing queries so that candidate pools handed to the
matching engine are pre-filtered the same way.
"""

from pathlib import Path
from typing import Generic, Optional, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from marketmatch.data.models import (
    AgentCandidate,
    AgentFilters,
    MarketModel,
    TaskFilters,
    TaskRequirement,
)
from marketmatch.utils.constants import AgentSort, TaskSort, TaskStatus
from marketmatch.utils.exceptions import RepositoryError
from marketmatch.utils.logger import get_logger

from .base import AgentRepository, TaskRepository

logger = get_logger(__name__)

T = TypeVar("T", bound=MarketModel)


def _load_records(path: Union[str, Path], model_class: type[T]) -> list[T]:
    """Read a JSON array of records from ``path`` and validate it."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise RepositoryError(f"Could not read {path}: {e}") from e

    try:
        records = TypeAdapter(list[model_class]).validate_json(raw)
    except ValidationError as e:
        raise RepositoryError(f"Invalid {model_class.__name__} data in {path}: {e}") from e

    logger.debug(f"Loaded {len(records)} {model_class.__name__} records from {path}")
    return records


def load_agents(path: Union[str, Path]) -> list[AgentCandidate]:
    """Load agent profiles from a JSON array file."""
    return _load_records(path, AgentCandidate)


def load_tasks(path: Union[str, Path]) -> list[TaskRequirement]:
    """Load tasks from a JSON array file."""
    return _load_records(path, TaskRequirement)


def _paginate(records: list[T], offset: int, limit: int) -> list[T]:
    return records[offset:offset + limit]


class _InMemoryStore(Generic[T]):
    """Insertion-ordered record storage keyed by ID."""

    def __init__(self, records: Optional[list[T]] = None) -> None:
        self._records: dict[str, T] = {}
        for record in records or []:
            self.add(record)

    def add(self, model: T) -> T:
        # Re-adding moves the record to the newest position
        self._records.pop(model.id, None)
        self._records[model.id] = model
        return model

    def get_by_id(self, id_value: str) -> Optional[T]:
        return self._records.get(str(id_value))

    def count(self) -> int:
        return len(self._records)

    def get_all(self) -> list[T]:
        """Get all records in insertion order."""
        return list(self._records.values())


class InMemoryAgentRepository(_InMemoryStore[AgentCandidate], AgentRepository):
    """Agent repository holding profiles in memory."""

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemoryAgentRepository":
        """Create a repository from a JSON array of agent profiles."""
        return cls(load_agents(path))

    def list(self, filters: Optional[AgentFilters] = None) -> list[AgentCandidate]:
        filters = filters or AgentFilters()
        agents = self.get_all()

        if filters.skills:
            wanted = set(filters.skills)
            agents = [a for a in agents if a.skills & wanted]

        if filters.availability:
            agents = [a for a in agents if a.availability_status == filters.availability]

        if filters.max_rate:
            # Agents without a rate cannot satisfy a rate ceiling
            agents = [
                a for a in agents
                if a.hourly_rate is not None and a.hourly_rate <= filters.max_rate
            ]

        if filters.min_rating:
            agents = [a for a in agents if a.average_rating >= filters.min_rating]

        if filters.sort == AgentSort.RATE_LOW:
            agents.sort(key=lambda a: (a.hourly_rate is None, a.hourly_rate or 0.0))
        elif filters.sort == AgentSort.RATE_HIGH:
            agents.sort(key=lambda a: (a.hourly_rate is None, -(a.hourly_rate or 0.0)))
        else:
            agents.sort(key=lambda a: a.average_rating, reverse=True)

        return _paginate(agents, filters.offset, filters.limit)


class InMemoryTaskRepository(_InMemoryStore[TaskRequirement], TaskRepository):
    """Task repository holding tasks in memory."""

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemoryTaskRepository":
        """Create a repository from a JSON array of tasks."""
        return cls(load_tasks(path))

    def list(self, filters: Optional[TaskFilters] = None) -> list[TaskRequirement]:
        filters = filters or TaskFilters()
        tasks = [t for t in self.get_all() if t.status != TaskStatus.CANCELLED]

        if filters.status:
            tasks = [t for t in tasks if t.status == filters.status]

        if filters.skills:
            wanted = set(filters.skills)
            tasks = [t for t in tasks if wanted.intersection(t.required_skills)]

        if filters.budget_min:
            tasks = [
                t for t in tasks
                if t.budget_max is not None and t.budget_max >= filters.budget_min
            ]

        if filters.budget_max:
            tasks = [
                t for t in tasks
                if t.budget_min is not None and t.budget_min <= filters.budget_max
            ]

        if filters.sort == TaskSort.BUDGET_HIGH:
            tasks.sort(key=lambda t: (t.budget_max is None, -(t.budget_max or 0.0)))
        elif filters.sort == TaskSort.BUDGET_LOW:
            tasks.sort(key=lambda t: (t.budget_min is None, t.budget_min or 0.0))
        else:
            tasks.reverse()

        return _paginate(tasks, filters.offset, filters.limit)
