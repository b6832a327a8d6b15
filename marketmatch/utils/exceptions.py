"""
Exceptions raised by the MarketMatch data and service layers.

The matching engine itself never raises for well-typed input; these cover
data loading and lookups performed around it.
"""


class MarketMatchError(Exception):
    """Base exception for MarketMatch errors."""


class RepositoryError(MarketMatchError):
    """Raised when agent or task records cannot be loaded."""


class NotFoundError(RepositoryError):
    """Raised when a requested record does not exist."""

    entity_name = "Record"

    def __init__(self, entity_id: str):
        self.entity_id = entity_id
        super().__init__(f"{self.entity_name} not found: {entity_id}")


class AgentNotFoundError(NotFoundError):
    """Raised when an agent profile is not found."""

    entity_name = "Agent profile"


class TaskNotFoundError(NotFoundError):
    """Raised when a task is not found."""

    entity_name = "Task"
