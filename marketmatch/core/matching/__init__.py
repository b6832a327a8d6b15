"""Agent-task matching engine module."""

from .matching_engine import MatchingEngine

__all__ = [
    "MatchingEngine",
]
