"""
Application-wide constants for MarketMatch.

This module contains all constant values used throughout the application.
Scoring weights live here rather than in settings so that ranking behaviour
only changes through a code change.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "MarketMatch"
APP_DISPLAY_NAME: Final[str] = "AI Agent Marketplace Matching Engine"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Scoring Constants
# =============================================================================

# Weights for ranking agents against a task (sum to 100)
AGENT_SCORING_WEIGHTS: Final[dict[str, float]] = {
    "skills_match": 40,
    "rating_score": 25,
    "experience_score": 15,
    "tasks_score": 10,
    "price_score": 10,
}

# Weights for ranking tasks for an agent (sum to 100)
TASK_SCORING_WEIGHTS: Final[dict[str, float]] = {
    "skills_match": 50,
    "budget_score": 30,
    "complexity_score": 10,
    "client_score": 10,
}

MAX_MATCH_SCORE: Final[float] = 100.0

# Normalisation caps for the agent factors
MAX_RATING: Final[float] = 5.0
EXPERIENCE_YEARS_CAP: Final[float] = 10.0
COMPLETED_TASKS_CAP: Final[float] = 50.0

# Sub-score used when a price factor has nothing to compare
NEUTRAL_PRICE_SCORE: Final[float] = 0.5

# Penalty slopes for the price factors
OVER_BUDGET_PENALTY: Final[float] = 0.5
AGENT_OVER_BUDGET_PENALTY: Final[float] = 2.0
UNDER_BUDGET_PENALTY: Final[float] = 0.5
UNDER_BUDGET_FLOOR: Final[float] = 0.5
MIDPOINT_DEVIATION_PENALTY: Final[float] = 0.3
RANGE_POSITION_PENALTY: Final[float] = 0.3

# Experience years covered by one agent level, and the penalty per level short
YEARS_PER_AGENT_LEVEL: Final[int] = 3
MAX_AGENT_LEVEL: Final[int] = 3
COMPLEXITY_GAP_PENALTY: Final[float] = 0.5

COMPLEXITY_LEVELS: Final[dict[str, int]] = {
    "low": 1,
    "medium": 2,
    "high": 3,
}
DEFAULT_COMPLEXITY_LEVEL: Final[int] = 2

# Recommendations below this percentage are not shown to agents
MIN_RECOMMENDATION_PERCENTAGE: Final[int] = 30

# Number of top matches aggregated by match statistics
STATISTICS_MATCH_LIMIT: Final[int] = 50


# =============================================================================
# Enums
# =============================================================================


class TaskStatus(str, Enum):
    """Lifecycle status of a posted task."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskComplexity(str, Enum):
    """Complexity level a client assigns to a task."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AvailabilityStatus(str, Enum):
    """Whether an agent is taking on new work."""

    AVAILABLE = "available"
    BUSY = "busy"
    UNAVAILABLE = "unavailable"


class AgentSort(str, Enum):
    """Orderings supported when listing agents."""

    RATING = "rating"
    RATE_LOW = "rate_low"
    RATE_HIGH = "rate_high"


class TaskSort(str, Enum):
    """Orderings supported when listing tasks."""

    NEWEST = "newest"
    BUDGET_HIGH = "budget_high"
    BUDGET_LOW = "budget_low"


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    TASK_MATCHES_GENERATED = "task_matches_generated"
    TASKS_RECOMMENDED = "tasks_recommended"
