"""Shared test fixtures."""

import pytest

from models.schemas.keyword import CategorizedKeyword
from models.schemas.resume_content import ResumeContent
from services.vocabulary import reset_vocabulary


@pytest.fixture(autouse=True)
def _fresh_vocabulary():
    reset_vocabulary()
    yield
    reset_vocabulary()


@pytest.fixture
def make_resume():
    """Build a ResumeContent from skill lists and free text."""

    def _make(
        hard: list[str] | None = None,
        soft: list[str] | None = None,
        tools: list[str] | None = None,
        summary: str = "",
        label: str | None = None,
        work_summaries: list[str] | None = None,
    ) -> ResumeContent:
        return ResumeContent.model_validate({
            "basics": {"name": "Test User", "email": "test@example.com", "label": label},
            "summary": summary,
            "work": [
                {"company": "Acme", "position": "Engineer", "summary": s}
                for s in (work_summaries or [])
            ],
            "skills": {
                "hard": [{"name": h} for h in (hard or [])],
                "soft": soft or [],
                "tools": tools or [],
            },
        })

    return _make


def kw(keyword: str, category: str = "hard_skill", frequency: int = 1) -> CategorizedKeyword:
    return CategorizedKeyword(keyword=keyword, category=category, frequency=frequency)
