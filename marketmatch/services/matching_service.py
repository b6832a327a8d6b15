"""
Matching handlers for MarketMatch.

Fetch candidate pools from the repositories, hand them to the matching
engine and return the ranked results. These are the two callers of the
engine: task matching (task -> agents) and agent recommendation
(agent -> tasks).
"""

from typing import Optional

from marketmatch.core.matching import MatchingEngine
from marketmatch.data.models import (
    AgentCandidate,
    AgentFilters,
    MatchStatistics,
    ScoredMatch,
    TaskFilters,
    TaskMatchesResult,
    TaskRequirement,
)
from marketmatch.data.repositories import AgentRepository, TaskRepository
from marketmatch.utils.config import AppSettings, get_settings
from marketmatch.utils.constants import AuditAction, AvailabilityStatus, TaskStatus
from marketmatch.utils.exceptions import AgentNotFoundError, TaskNotFoundError
from marketmatch.utils.logger import LoggerMixin, audit_log


class TaskMatchingService(LoggerMixin):
    """
    Finds the best agents for a task.

    Usage:
        service = TaskMatchingService(agent_repo, task_repo)
        result = service.get_task_matches(task_id)
        # result.matches is sorted by match_score descending
    """

    def __init__(
        self,
        agent_repository: AgentRepository,
        task_repository: TaskRepository,
        settings: Optional[AppSettings] = None,
    ):
        self._agents = agent_repository
        self._tasks = task_repository
        self._settings = (settings or get_settings()).matching

    def get_task_matches(self, task_id: str, limit: Optional[int] = None) -> TaskMatchesResult:
        """
        Rank agents for a stored task and summarise the candidate field.

        Args:
            task_id: ID of the task to match
            limit: Maximum number of matches (defaults to settings)

        Returns:
            TaskMatchesResult with ranked matches and statistics

        Raises:
            TaskNotFoundError: If no task has this ID
        """
        task = self._tasks.get_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        matches = self.find_task_matches(task, limit)
        statistics = self.get_task_statistics(task)

        audit_log(
            AuditAction.TASK_MATCHES_GENERATED.value,
            {
                "task_id": task.id,
                "match_count": len(matches),
                "top_agents": [m.entity_id for m in matches[:5]],
                "top_score": statistics.top_score,
            },
        )

        return TaskMatchesResult(
            task_id=task.id,
            task_title=task.title,
            matches=matches,
            statistics=statistics,
        )

    def find_task_matches(
        self,
        task: TaskRequirement,
        limit: Optional[int] = None,
    ) -> list[ScoredMatch[AgentCandidate]]:
        """Rank the pre-filtered agent pool for a task."""
        limit = limit or self._settings.default_match_limit
        candidates = self._candidate_pool(task, limit)
        matches = MatchingEngine.find_matches_for_task(task, candidates, limit)

        self.logger.debug(
            f"Task {task.id}: scored {len(candidates)} candidates, returning {len(matches)}"
        )
        return matches

    def get_task_statistics(self, task: TaskRequirement) -> MatchStatistics:
        """Summarise the top matches for a task."""
        candidates = self._candidate_pool(task, self._settings.statistics_limit)
        return MatchingEngine.get_match_statistics(task, candidates)

    def _candidate_pool(self, task: TaskRequirement, limit: int) -> list[AgentCandidate]:
        """Fetch available agents sharing a skill with the task and within its budget."""
        filters = AgentFilters(
            skills=task.required_skills,
            availability=AvailabilityStatus.AVAILABLE,
            max_rate=task.budget_max,
            limit=limit * self._settings.candidate_pool_multiplier,
        )
        return self._agents.list(filters)


class AgentRecommendationService(LoggerMixin):
    """
    Recommends open tasks to an agent.

    Usage:
        service = AgentRecommendationService(agent_repo, task_repo)
        recommendations = service.get_recommended_tasks(agent_id)
    """

    def __init__(
        self,
        agent_repository: AgentRepository,
        task_repository: TaskRepository,
        settings: Optional[AppSettings] = None,
    ):
        self._agents = agent_repository
        self._tasks = task_repository
        self._settings = (settings or get_settings()).matching

    def get_recommended_tasks(
        self,
        agent_id: str,
        limit: Optional[int] = None,
    ) -> list[ScoredMatch[TaskRequirement]]:
        """
        Recommend open tasks to a stored agent.

        Args:
            agent_id: ID of the agent profile
            limit: Maximum number of recommendations (defaults to settings)

        Returns:
            Ranked task matches, best first

        Raises:
            AgentNotFoundError: If no agent profile has this ID
        """
        agent = self._agents.get_by_id(agent_id)
        if agent is None:
            raise AgentNotFoundError(agent_id)

        recommendations = self.recommend_tasks(agent, limit)

        audit_log(
            AuditAction.TASKS_RECOMMENDED.value,
            {
                "agent_id": agent.id,
                "recommendation_count": len(recommendations),
                "top_tasks": [m.entity_id for m in recommendations[:5]],
            },
        )
        return recommendations

    def recommend_tasks(
        self,
        agent: AgentCandidate,
        limit: Optional[int] = None,
    ) -> list[ScoredMatch[TaskRequirement]]:
        """Rank the current open tasks for an agent."""
        limit = limit or self._settings.recommendation_limit
        open_tasks = self._tasks.list(
            TaskFilters(status=TaskStatus.OPEN, limit=self._settings.open_task_fetch_limit)
        )
        recommendations = MatchingEngine.find_tasks_for_agent(agent, open_tasks, limit)

        self.logger.debug(
            f"Agent {agent.id}: scored {len(open_tasks)} open tasks, "
            f"{len(recommendations)} above threshold"
        )
        return recommendations
