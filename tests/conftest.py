"""
Pytest fixtures for BestChoice tests.
"""

import os
import sys
from datetime import datetime, timezone

import pytest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.append(PROJECT_ROOT)

from bestchoice.enums import PreferenceStatus  # noqa: E402
from bestchoice.types import PreferenceResponse  # noqa: E402
from core.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; reset around each test so env overrides apply."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_keyword_payload():
    return {
        "label": "Intelligence artificielle",
        "description": "Apprentissage automatique et réseaux de neurones",
        "domain": "IA",
    }


@pytest.fixture
def sample_skill_payload():
    return {
        "name": "Java",
        "description": None,
        "category": "Programmation",
        "level": 3,
    }


@pytest.fixture
def sample_preference_payload():
    return {
        "studentId": 12,
        "projectId": 4,
        "rank": 1,
        "motivation": "Le sujet correspond à mon projet professionnel",
        "comment": None,
    }


@pytest.fixture
def created_at():
    return datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def make_preference(created_at):
    """Factory for stored preferences of a student."""

    def _make(
        id: int,
        project_id: int,
        rank: int,
        student_id: int = 12,
        status: PreferenceStatus = PreferenceStatus.PENDING,
    ) -> PreferenceResponse:
        return PreferenceResponse(
            id=id,
            student_id=student_id,
            project_id=project_id,
            rank=rank,
            status=status,
            created_at=created_at,
        )

    return _make
