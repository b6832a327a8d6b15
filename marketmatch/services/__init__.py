"""
Business services for MarketMatch.

This module contains the handlers that fetch candidate pools and run
them through the matching engine.
"""

from marketmatch.services.matching_service import (
    AgentRecommendationService,
    TaskMatchingService,
)

__all__ = [
    "AgentRecommendationService",
    "TaskMatchingService",
]
