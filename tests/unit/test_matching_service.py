"""
Tests for the task matching and agent recommendation handlers.
"""

import pytest
from loguru import logger

from marketmatch.data.models import AgentCandidate, TaskRequirement
from marketmatch.data.repositories import InMemoryAgentRepository
from marketmatch.services import AgentRecommendationService, TaskMatchingService
from marketmatch.utils.config import AppSettings, MatchingSettings
from marketmatch.utils.constants import AuditAction
from marketmatch.utils.exceptions import AgentNotFoundError, NotFoundError, TaskNotFoundError


@pytest.fixture
def audit_records():
    """Capture audit log records emitted while the test runs."""
    records = []
    handler_id = logger.add(
        lambda message: records.append(message.record),
        filter=lambda record: "audit_type" in record["extra"],
        level="INFO",
    )
    yield records
    logger.remove(handler_id)


@pytest.fixture
def matching_service(agent_repository, task_repository):
    return TaskMatchingService(agent_repository, task_repository, AppSettings())


@pytest.fixture
def recommendation_service(agent_repository, task_repository):
    return AgentRecommendationService(agent_repository, task_repository, AppSettings())


# ═══════════════════════════════════════════════════════════════════════════
#  TaskMatchingService
# ═══════════════════════════════════════════════════════════════════════════


class TestTaskMatchingService:
    def test_pool_excludes_busy_and_over_budget_agents(self, matching_service):
        result = matching_service.get_task_matches("t-nlp")
        ids = [m.entity_id for m in result.matches]
        assert ids == ["a-senior", "a-junior"]
        assert "a-busy" not in ids
        assert "a-pricey" not in ids

    def test_result_fields(self, matching_service):
        result = matching_service.get_task_matches("t-nlp")
        assert result.task_id == "t-nlp"
        assert result.task_title == "Build NLP pipeline"
        assert result.matches[0].match_score == 97.5
        assert result.matches[0].match_percentage == 98

    def test_statistics(self, matching_service):
        stats = matching_service.get_task_matches("t-nlp").statistics
        assert stats.total_matches == 2
        assert stats.top_score == 97.5
        assert stats.average_hourly_rate == 42.5

    def test_limit_does_not_shrink_statistics(self, matching_service):
        result = matching_service.get_task_matches("t-nlp", limit=1)
        assert len(result.matches) == 1
        assert result.statistics.total_matches == 2

    def test_default_limit_from_settings(self, agent_repository, task_repository):
        settings = AppSettings(matching=MatchingSettings(default_match_limit=1))
        service = TaskMatchingService(agent_repository, task_repository, settings)
        assert len(service.get_task_matches("t-nlp").matches) == 1

    def test_no_candidates(self, matching_service, task_repository):
        task_repository.add(TaskRequirement(id="t-rust", required_skills=["Rust"]))
        result = matching_service.get_task_matches("t-rust")
        assert result.matches == []
        assert result.statistics.total_matches == 0

    def test_unbudgeted_task_allows_any_rate(self, matching_service, task_repository):
        task_repository.add(TaskRequirement(id="t-open", required_skills=["Machine Learning"]))
        ids = [m.entity_id for m in matching_service.get_task_matches("t-open").matches]
        assert set(ids) == {"a-senior", "a-pricey"}

    def test_unknown_task(self, matching_service):
        with pytest.raises(TaskNotFoundError) as exc:
            matching_service.get_task_matches("t-missing")
        assert exc.value.entity_id == "t-missing"
        assert isinstance(exc.value, NotFoundError)
        assert "Task not found: t-missing" in str(exc.value)

    def test_audit_entry(self, matching_service, audit_records):
        matching_service.get_task_matches("t-nlp")
        assert len(audit_records) == 1
        record = audit_records[0]
        assert record["extra"]["audit_type"] == "DECISION"
        assert AuditAction.TASK_MATCHES_GENERATED.value in record["message"]
        assert "a-senior" in record["message"]

    def test_pool_size_follows_multiplier(self, task_repository):
        agents = InMemoryAgentRepository([
            AgentCandidate(id=f"a{i}", skills=["Python"], hourly_rate=30, average_rating=4.0)
            for i in range(10)
        ])
        settings = AppSettings(matching=MatchingSettings(candidate_pool_multiplier=3))
        service = TaskMatchingService(agents, task_repository, settings)
        task = task_repository.get_by_id("t-script")
        assert len(service._candidate_pool(task, 2)) == 6


# ═══════════════════════════════════════════════════════════════════════════
#  AgentRecommendationService
# ═══════════════════════════════════════════════════════════════════════════


class TestAgentRecommendationService:
    def test_only_open_tasks_ranked(self, recommendation_service):
        recommendations = recommendation_service.get_recommended_tasks("a-senior")
        assert [m.entity_id for m in recommendations] == ["t-nlp", "t-script", "t-ui"]

    def test_scores(self, recommendation_service):
        top = recommendation_service.get_recommended_tasks("a-senior")[0]
        assert top.match_score == 99.0
        assert top.match_breakdown["complexity_score"] == 1.0

    def test_limit(self, recommendation_service):
        assert len(recommendation_service.get_recommended_tasks("a-senior", limit=1)) == 1

    def test_every_recommendation_above_threshold(self, recommendation_service):
        for agent_id in ("a-senior", "a-junior", "a-frontend", "a-busy", "a-pricey"):
            for match in recommendation_service.get_recommended_tasks(agent_id):
                assert match.match_percentage >= 30
                assert match.entity.is_open

    def test_unknown_agent(self, recommendation_service):
        with pytest.raises(AgentNotFoundError, match="Agent profile not found: nobody"):
            recommendation_service.get_recommended_tasks("nobody")

    def test_audit_entry(self, recommendation_service, audit_records):
        recommendation_service.get_recommended_tasks("a-senior")
        assert len(audit_records) == 1
        assert AuditAction.TASKS_RECOMMENDED.value in audit_records[0]["message"]
