"""
Agent-task matching engine.

Scores agents against a task's requirements and tasks against an agent's
profile with a weighted sum of per-factor sub-scores, then ranks candidate
pools in both directions.

Every function here is pure: inputs are never modified, nothing is cached
and no I/O happens. Fetching and pre-filtering the candidate pools is left
to the caller.
"""

import math
import re
from collections.abc import Iterable, Sequence
from operator import attrgetter
from typing import Optional, TypeVar, Union

from marketmatch.data.models import (
    AgentCandidate,
    MarketModel,
    MatchStatistics,
    ScoredMatch,
    TaskRequirement,
)
from marketmatch.utils.constants import (
    AGENT_OVER_BUDGET_PENALTY,
    AGENT_SCORING_WEIGHTS,
    COMPLETED_TASKS_CAP,
    COMPLEXITY_GAP_PENALTY,
    COMPLEXITY_LEVELS,
    DEFAULT_COMPLEXITY_LEVEL,
    EXPERIENCE_YEARS_CAP,
    MAX_AGENT_LEVEL,
    MAX_MATCH_SCORE,
    MAX_RATING,
    MIDPOINT_DEVIATION_PENALTY,
    MIN_RECOMMENDATION_PERCENTAGE,
    NEUTRAL_PRICE_SCORE,
    OVER_BUDGET_PENALTY,
    RANGE_POSITION_PENALTY,
    STATISTICS_MATCH_LIMIT,
    TASK_SCORING_WEIGHTS,
    UNDER_BUDGET_FLOOR,
    UNDER_BUDGET_PENALTY,
    YEARS_PER_AGENT_LEVEL,
    TaskComplexity,
    TaskStatus,
)

EntityT = TypeVar("EntityT", bound=MarketModel)

# Skill phrases are tokenized on whitespace and hyphens
_TOKEN_SEPARATOR = re.compile(r"[\s-]")


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(value, high))


def _round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with halves going up (30.5 -> 31)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _tokens(skill: str) -> list[str]:
    return [token for token in _TOKEN_SEPARATOR.split(skill) if token]


def _weighted_match(
    entity: EntityT,
    breakdown: dict[str, float],
    weights: dict[str, float],
) -> ScoredMatch[EntityT]:
    """Combine bounded sub-scores into a ScoredMatch for ``entity``."""
    score = sum(breakdown[factor] * weight for factor, weight in weights.items())
    return ScoredMatch[type(entity)](
        entity=entity,
        match_score=_round_half_up(score, 2),
        match_breakdown=breakdown,
        match_percentage=min(int(_round_half_up(_clamp(score, 0.0, MAX_MATCH_SCORE))), 100),
    )


def _complexity_level(complexity: Union[TaskComplexity, str, None]) -> int:
    if isinstance(complexity, TaskComplexity):
        complexity = complexity.value
    if isinstance(complexity, str):
        return COMPLEXITY_LEVELS.get(complexity.strip().lower(), DEFAULT_COMPLEXITY_LEVEL)
    return DEFAULT_COMPLEXITY_LEVEL


class MatchingEngine:
    """
    Stateless engine for scoring agents and tasks against each other.

    Agent for task (weights in AGENT_SCORING_WEIGHTS):
    - Skills overlap with the task requirements
    - Average rating
    - Years of experience
    - Completed-task volume
    - Hourly rate against the task budget

    Task for agent (weights in TASK_SCORING_WEIGHTS):
    - Skills overlap
    - Task budget range against the agent's rate
    - Task complexity against the agent's experience level
    - Client rating

    All methods are static or class methods; the class holds no state.
    """

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    @classmethod
    def score_agent_for_task(
        cls,
        agent: AgentCandidate,
        task: TaskRequirement,
    ) -> ScoredMatch[AgentCandidate]:
        """
        Score how well an agent fits a task.

        Args:
            agent: Agent profile to score
            task: Task whose requirements the agent is compared with

        Returns:
            ScoredMatch wrapping the agent, with a 0-100 score and a
            per-factor breakdown
        """
        breakdown = {
            "skills_match": cls.skills_match(agent.skills, task.required_skills),
            "rating_score": _clamp(agent.average_rating, 0.0, MAX_RATING) / MAX_RATING,
            "experience_score": min(agent.experience_years / EXPERIENCE_YEARS_CAP, 1.0),
            "tasks_score": min(agent.completed_tasks / COMPLETED_TASKS_CAP, 1.0),
            "price_score": cls.price_match(agent, task),
        }
        return _weighted_match(agent, breakdown, AGENT_SCORING_WEIGHTS)

    @classmethod
    def score_task_for_agent(
        cls,
        task: TaskRequirement,
        agent: AgentCandidate,
    ) -> ScoredMatch[TaskRequirement]:
        """
        Score how attractive a task is for an agent.

        Args:
            task: Task to score
            agent: Agent the task would be recommended to

        Returns:
            ScoredMatch wrapping the task, with a 0-100 score and a
            per-factor breakdown
        """
        client_rating = task.client_rating or 0.0
        breakdown = {
            "skills_match": cls.skills_match(agent.skills, task.required_skills),
            "budget_score": cls.agent_budget_match(agent, task),
            "complexity_score": cls.complexity_match(agent, task.complexity),
            "client_score": _clamp(client_rating, 0.0, MAX_RATING) / MAX_RATING,
        }
        return _weighted_match(task, breakdown, TASK_SCORING_WEIGHTS)

    # -------------------------------------------------------------------------
    # Factors
    # -------------------------------------------------------------------------

    @staticmethod
    def skills_match(
        candidate_skills: Optional[Iterable[str]],
        required_skills: Optional[Sequence[str]],
    ) -> float:
        """
        Fraction of required skills covered by the candidate's skills.

        Matching is case-insensitive and fuzzy. Two counts are taken
        independently and the larger one wins:
        - exact-or-substring: the skills are equal or one contains the other
        - token overlap: a word of the candidate skill occurs in a required
          skill, or the first word of a required skill occurs in it

        Substring matching lets "java" match inside "javascript".

        Args:
            candidate_skills: Skills the agent lists
            required_skills: Skills the task asks for

        Returns:
            Score between 0 and 1
        """
        required = [skill.lower() for skill in required_skills or ()]
        if not required:
            return 1.0

        candidates = list(dict.fromkeys(skill.lower() for skill in candidate_skills or ()))
        if not candidates:
            return 0.0

        exact_matches = [
            skill for skill in candidates
            if any(req == skill or req in skill or skill in req for req in required)
        ]

        required_heads = [(_tokens(req) or [req])[0] for req in required]
        token_matches = [
            skill for skill in candidates
            if any(
                token in req or head in token
                for token in _tokens(skill)
                for req, head in zip(required, required_heads)
            )
        ]

        match_count = max(len(exact_matches), len(token_matches))
        return min(match_count / len(required), 1.0)

    @staticmethod
    def price_match(agent: AgentCandidate, task: TaskRequirement) -> float:
        """
        How good the agent's rate is for the task budget, client side.

        Agents at or under budget score best; agents over the ceiling lose
        half a point per 100% overage. Without a minimum the score falls off
        gently with distance from half the ceiling.
        """
        rate = agent.hourly_rate
        budget_max = task.budget_max
        if not rate or not budget_max:
            return NEUTRAL_PRICE_SCORE

        if rate > budget_max:
            over_budget_ratio = rate / budget_max
            return max(0.0, 1 - (over_budget_ratio - 1) * OVER_BUDGET_PENALTY)

        if task.budget_min:
            # In range, or cheaper than the minimum asked
            return 1.0

        budget_midpoint = budget_max / 2
        deviation = abs(rate - budget_midpoint) / budget_midpoint
        return max(0.0, 1 - deviation * MIDPOINT_DEVIATION_PENALTY)

    @staticmethod
    def agent_budget_match(agent: AgentCandidate, task: TaskRequirement) -> float:
        """
        How well the task budget suits the agent's rate, agent side.

        Rates in the middle of the range score best. Going over the ceiling
        is penalised four times as steeply as on the client side; rates
        under the minimum never drop below 0.5.
        """
        rate = agent.hourly_rate
        budget_min, budget_max = task.budget_min, task.budget_max
        if not rate:
            return NEUTRAL_PRICE_SCORE
        if not budget_min and not budget_max:
            return NEUTRAL_PRICE_SCORE

        if not budget_min:
            return 1.0

        if budget_max and budget_min <= rate <= budget_max:
            budget_range = budget_max - budget_min
            if budget_range == 0:
                return 1.0
            position = (rate - budget_min) / budget_range
            return 1 - abs(position - 0.5) * RANGE_POSITION_PENALTY

        if budget_max and rate > budget_max:
            over_budget = rate / budget_max - 1
            return max(0.0, 1 - over_budget * AGENT_OVER_BUDGET_PENALTY)

        if rate >= budget_min:
            # Minimum only, and the rate clears it
            return 1.0

        under_budget = budget_min / rate - 1
        return max(UNDER_BUDGET_FLOOR, 1 - under_budget * UNDER_BUDGET_PENALTY)

    @staticmethod
    def complexity_match(
        agent: AgentCandidate,
        task_complexity: Union[TaskComplexity, str, None],
    ) -> float:
        """
        Fit between task complexity and the agent's experience level.

        Agents get one level per three years of experience (capped at 3).
        Tasks at or below the agent's level score 1; each level above costs
        half a point. Unknown complexity counts as medium.
        """
        agent_level = min(agent.experience_years // YEARS_PER_AGENT_LEVEL + 1, MAX_AGENT_LEVEL)
        task_level = _complexity_level(task_complexity)

        if agent_level >= task_level:
            return 1.0

        return max(0.0, 1 - (task_level - agent_level) * COMPLEXITY_GAP_PENALTY)

    # -------------------------------------------------------------------------
    # Ranking
    # -------------------------------------------------------------------------

    @staticmethod
    def rank_matches(matches: Iterable[ScoredMatch[EntityT]]) -> list[ScoredMatch[EntityT]]:
        """
        Sort matches by score, highest first.

        The sort is stable: equal scores keep their input order.
        """
        return sorted(matches, key=attrgetter("match_score"), reverse=True)

    @classmethod
    def find_matches_for_task(
        cls,
        task: TaskRequirement,
        candidates: Iterable[AgentCandidate],
        limit: int = 10,
    ) -> list[ScoredMatch[AgentCandidate]]:
        """
        Rank a pre-filtered pool of agents for a task.

        Args:
            task: Task to find agents for
            candidates: Agents to score; no further filtering is applied
            limit: Maximum number of matches to return

        Returns:
            Up to ``limit`` matches sorted by score, highest first
        """
        scored = [cls.score_agent_for_task(agent, task) for agent in candidates]
        return cls.rank_matches(scored)[:max(limit, 0)]

    @classmethod
    def find_tasks_for_agent(
        cls,
        agent: AgentCandidate,
        tasks: Iterable[TaskRequirement],
        limit: int = 10,
    ) -> list[ScoredMatch[TaskRequirement]]:
        """
        Recommend open tasks to an agent.

        Tasks that are not open are skipped, and matches below
        MIN_RECOMMENDATION_PERCENTAGE are dropped.

        Args:
            agent: Agent to recommend tasks to
            tasks: Task pool to choose from
            limit: Maximum number of recommendations

        Returns:
            Up to ``limit`` matches sorted by score, highest first
        """
        scored = [
            cls.score_task_for_agent(task, agent)
            for task in tasks
            if task.status == TaskStatus.OPEN
        ]
        relevant = [
            match for match in scored
            if match.match_percentage >= MIN_RECOMMENDATION_PERCENTAGE
        ]
        return cls.rank_matches(relevant)[:max(limit, 0)]

    @classmethod
    def get_match_statistics(
        cls,
        task: TaskRequirement,
        candidates: Iterable[AgentCandidate],
    ) -> MatchStatistics:
        """
        Summarise the top matches for a task.

        Aggregates the best STATISTICS_MATCH_LIMIT matches. Agents without
        an hourly rate count as 0 in the average rate. An empty pool gives
        zeroed statistics.
        """
        matches = cls.find_matches_for_task(task, candidates, STATISTICS_MATCH_LIMIT)
        if not matches:
            return MatchStatistics()

        total_matches = len(matches)
        average_score = sum(m.match_score for m in matches) / total_matches
        average_hourly_rate = sum(m.entity.hourly_rate or 0.0 for m in matches) / total_matches

        return MatchStatistics(
            total_matches=total_matches,
            average_score=_round_half_up(average_score, 2),
            top_score=_round_half_up(matches[0].match_score, 2),
            average_hourly_rate=_round_half_up(average_hourly_rate, 2),
        )
