"""
Shared test fixtures for the MarketMatch test suite.

Sets environment variables before any marketmatch imports so logging stays
out of the working tree, then provides factory fixtures for agents and
tasks and pre-populated repositories.
"""

import os

# === Set environment BEFORE any marketmatch imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")
os.environ.setdefault("LOG_CONSOLE_OUTPUT", "false")

import json
from typing import Any, Optional

import pytest

from marketmatch.data.models import AgentCandidate, TaskRequirement
from marketmatch.data.repositories import InMemoryAgentRepository, InMemoryTaskRepository
from marketmatch.utils.constants import AvailabilityStatus, TaskComplexity, TaskStatus


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_agent():
    """Factory that returns a callable to build AgentCandidate models."""

    def _factory(
        id: str = "agent-1",
        skills: Optional[list[str]] = None,
        average_rating: float = 4.0,
        experience_years: int = 5,
        completed_tasks: int = 20,
        hourly_rate: Optional[float] = 50.0,
        availability_status: AvailabilityStatus = AvailabilityStatus.AVAILABLE,
        title: Optional[str] = None,
    ) -> AgentCandidate:
        return AgentCandidate(
            id=id,
            title=title,
            skills=skills if skills is not None else ["Python", "Machine Learning"],
            average_rating=average_rating,
            experience_years=experience_years,
            completed_tasks=completed_tasks,
            hourly_rate=hourly_rate,
            availability_status=availability_status,
        )

    return _factory


@pytest.fixture
def make_task():
    """Factory that returns a callable to build TaskRequirement models."""

    def _factory(
        id: str = "task-1",
        required_skills: Optional[list[str]] = None,
        budget_min: Optional[float] = 40.0,
        budget_max: Optional[float] = 60.0,
        complexity: TaskComplexity = TaskComplexity.MEDIUM,
        client_rating: Optional[float] = 4.0,
        status: TaskStatus = TaskStatus.OPEN,
        title: str = "",
    ) -> TaskRequirement:
        return TaskRequirement(
            id=id,
            title=title,
            required_skills=required_skills if required_skills is not None else ["Python"],
            budget_min=budget_min,
            budget_max=budget_max,
            complexity=complexity,
            client_rating=client_rating,
            status=status,
        )

    return _factory


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_agent_records() -> list[dict[str, Any]]:
    """Agent profiles as exported by the marketplace API (camelCase)."""
    return [
        {
            "id": "a-senior",
            "title": "Senior ML Agent",
            "skills": ["Python", "Machine Learning", "NLP"],
            "averageRating": 4.8,
            "experienceYears": 9,
            "completedTasks": 60,
            "hourlyRate": 55,
            "availabilityStatus": "available",
        },
        {
            "id": "a-junior",
            "title": "Junior Python Agent",
            "skills": ["Python"],
            "averageRating": 3.5,
            "experienceYears": 1,
            "completedTasks": 3,
            "hourlyRate": 30,
            "availabilityStatus": "available",
        },
        {
            "id": "a-busy",
            "title": "Busy Agent",
            "skills": ["Python", "NLP"],
            "averageRating": 5.0,
            "experienceYears": 12,
            "completedTasks": 100,
            "hourlyRate": 50,
            "availabilityStatus": "busy",
        },
        {
            "id": "a-pricey",
            "title": "Pricey Agent",
            "skills": ["Python", "Machine Learning"],
            "averageRating": 4.9,
            "experienceYears": 10,
            "completedTasks": 80,
            "hourlyRate": 150,
            "availabilityStatus": "available",
        },
        {
            "id": "a-frontend",
            "title": "Frontend Agent",
            "skills": ["JavaScript", "React"],
            "averageRating": 4.2,
            "experienceYears": 4,
            "completedTasks": 15,
            "hourlyRate": 45,
            "availabilityStatus": "available",
        },
    ]


@pytest.fixture
def sample_task_records() -> list[dict[str, Any]]:
    """Tasks as exported by the marketplace API (camelCase)."""
    return [
        {
            "id": "t-nlp",
            "title": "Build NLP pipeline",
            "status": "open",
            "requiredSkills": ["Python", "Machine Learning", "NLP"],
            "budgetMin": 40,
            "budgetMax": 70,
            "complexity": "high",
            "clientRating": 4.5,
        },
        {
            "id": "t-script",
            "title": "Python scripting",
            "status": "open",
            "requiredSkills": ["Python"],
            "budgetMin": 20,
            "budgetMax": 40,
            "complexity": "low",
            "clientRating": 4.0,
        },
        {
            "id": "t-ui",
            "title": "React dashboard",
            "status": "open",
            "requiredSkills": ["React", "TypeScript"],
            "budgetMin": 30,
            "budgetMax": 60,
            "complexity": "medium",
        },
        {
            "id": "t-done",
            "title": "Finished analysis",
            "status": "completed",
            "requiredSkills": ["Python"],
            "budgetMin": 20,
            "budgetMax": 60,
            "complexity": "low",
            "clientRating": 5.0,
        },
        {
            "id": "t-cancelled",
            "title": "Cancelled crawl",
            "status": "cancelled",
            "requiredSkills": ["Python"],
            "budgetMin": 20,
            "budgetMax": 60,
            "complexity": "low",
        },
    ]


@pytest.fixture
def agent_repository(sample_agent_records) -> InMemoryAgentRepository:
    return InMemoryAgentRepository(
        [AgentCandidate.model_validate(r) for r in sample_agent_records]
    )


@pytest.fixture
def task_repository(sample_task_records) -> InMemoryTaskRepository:
    return InMemoryTaskRepository(
        [TaskRequirement.model_validate(r) for r in sample_task_records]
    )


@pytest.fixture
def data_files(tmp_path, sample_agent_records, sample_task_records):
    """Write the sample records to JSON files and return their paths."""
    agents_file = tmp_path / "agents.json"
    tasks_file = tmp_path / "tasks.json"
    agents_file.write_text(json.dumps(sample_agent_records), encoding="utf-8")
    tasks_file.write_text(json.dumps(sample_task_records), encoding="utf-8")
    return agents_file, tasks_file
