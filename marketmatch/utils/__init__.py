"""
Utility modules for MarketMatch.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Scoring weights and enums
- exceptions: Error types for the data and service layers
"""

from marketmatch.utils.config import (
    AppSettings,
    LoggingSettings,
    MatchingSettings,
    get_settings,
    reload_settings,
    ROOT_DIR,
    DATA_DIR,
)
from marketmatch.utils.constants import (
    APP_NAME,
    APP_DISPLAY_NAME,
    VERSION,
    AGENT_SCORING_WEIGHTS,
    TASK_SCORING_WEIGHTS,
    AgentSort,
    AuditAction,
    AvailabilityStatus,
    TaskComplexity,
    TaskSort,
    TaskStatus,
)
from marketmatch.utils.exceptions import (
    AgentNotFoundError,
    MarketMatchError,
    NotFoundError,
    RepositoryError,
    TaskNotFoundError,
)
from marketmatch.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
    LoggerMixin,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "LoggingSettings",
    "MatchingSettings",
    "get_settings",
    "reload_settings",
    "ROOT_DIR",
    "DATA_DIR",
    # Constants
    "APP_NAME",
    "APP_DISPLAY_NAME",
    "VERSION",
    "AGENT_SCORING_WEIGHTS",
    "TASK_SCORING_WEIGHTS",
    "AgentSort",
    "AuditAction",
    "AvailabilityStatus",
    "TaskComplexity",
    "TaskSort",
    "TaskStatus",
    # Exceptions
    "AgentNotFoundError",
    "MarketMatchError",
    "NotFoundError",
    "RepositoryError",
    "TaskNotFoundError",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "LoggerMixin",
    "log",
]
