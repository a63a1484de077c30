# tests/conftest.py

"""
Pytest Fixtures - Shared scorers, ordinance and application payloads

Payload fixtures use the camelCase keys the application form submits.
"""

import pytest

from admission_scoring.scoring.academic_scorer import AcademicScorer
from admission_scoring.scoring.competition_catalog import CompetitionCatalog
from admission_scoring.scoring.composite_calculator import CompositeCalculator
from admission_scoring.scoring.integration_service import ApplicationScoringService
from admission_scoring.scoring.performance_scorer import PerformanceScorer
from admission_scoring.scoring.rules import ORDINANCE_2025


# =============================================================================
# SCORER FIXTURES
# =============================================================================

@pytest.fixture
def ordinance():
    """The 2025 ordinance rule tables."""
    return ORDINANCE_2025


@pytest.fixture
def academic_scorer(ordinance):
    return AcademicScorer(ordinance)


@pytest.fixture
def performance_scorer(ordinance):
    return PerformanceScorer(ordinance)


@pytest.fixture
def composite_calculator(ordinance):
    return CompositeCalculator(ordinance)


@pytest.fixture
def catalog():
    return CompetitionCatalog.default()


@pytest.fixture
def scoring_service(ordinance, catalog):
    return ApplicationScoringService(ordinance=ordinance, catalog=catalog)


# =============================================================================
# PAYLOAD FIXTURES
# =============================================================================

@pytest.fixture
def full_application_payload():
    """
    A complete application.

    Expected academic: publications 8 + patents 1.6 + competitions 7.5
    + innovation 0.5 = 17.6 → capped 15.
    Expected performance: internship 0.5 + volunteer 1.5 + honors 2
    + social work 0.9 → 4.9.
    """
    return {
        "publications": [
            {"title": "Graph Sampling at Scale", "category": "A", "authorRank": 1, "totalAuthors": 3},
        ],
        "patents": [
            {"authorRank": 1, "totalAuthors": 2},
        ],
        "competitions": [
            {
                "name": "ICPC国际大学生程序设计竞赛",
                "level": "A+类",
                "award": "国家级一等奖及以上",
                "isTeam": True,
                "teamRank": 1,
                "totalTeamMembers": 4,
                "workKey": "icpc-2024",
            },
            {
                "name": "ICPC国际大学生程序设计竞赛",
                "level": "A+类",
                "award": "国家级三等奖",
                "isTeam": True,
                "teamRank": 1,
                "totalTeamMembers": 4,
                "workKey": "icpc-2024",
            },
        ],
        "innovation": [
            {"level": "省级", "role": "组长", "status": "已结项"},
            {"level": "国家级", "role": "组长", "status": "在研"},
        ],
        "specialTalentPassed": False,
        "internship": {"duration": "SEMESTER"},
        "volunteer": {
            "hours": 220,
            "awards": [{"level": "国家级", "role": "PERSONAL"}],
        },
        "honors": [
            {"level": "国家级", "year": 2023},
            {"level": "省级", "year": 2023},
        ],
        "socialWork": [
            {"year": 2023, "level": "HEAD", "rating": 90},
        ],
        "sports": [],
    }


@pytest.fixture
def empty_application_payload():
    return {}
