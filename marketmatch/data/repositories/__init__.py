"""
Repositories for MarketMatch data access.

Abstract contracts used by the matching handlers, plus in-memory
implementations loaded from JSON exports.
"""

# Contracts
from .base import AgentRepository, BaseRepository, TaskRepository

# In-memory implementations
from .memory import (
    InMemoryAgentRepository,
    InMemoryTaskRepository,
    load_agents,
    load_tasks,
)

__all__ = [
    # Contracts
    "AgentRepository",
    "BaseRepository",
    "TaskRepository",
    # In-memory
    "InMemoryAgentRepository",
    "InMemoryTaskRepository",
    "load_agents",
    "load_tasks",
]
