"""
Pydantic data models for MarketMatch.

This module provides the agent and task records consumed by the matching
engine, the annotated results it returns, and repository filters.
"""

# Base models
from .base import MarketModel

# Agent models
from .agent import AgentCandidate

# Task models
from .task import TaskRequirement

# Match models
from .match import MatchStatistics, ScoredMatch, TaskMatchesResult

# Repository filters
from .filters import AgentFilters, TaskFilters

__all__ = [
    # Base
    "MarketModel",
    # Agent
    "AgentCandidate",
    # Task
    "TaskRequirement",
    # Match
    "MatchStatistics",
    "ScoredMatch",
    "TaskMatchesResult",
    # Filters
    "AgentFilters",
    "TaskFilters",
]
