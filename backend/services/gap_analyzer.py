"""Gap analysis: which job keywords the resume is missing, most important first."""

import logging

from models.responses import GapAnalysis, GapsByCategory, GapSuggestion
from models.schemas.keyword import CategorizedKeyword, KeywordCategory
from models.schemas.resume_content import ResumeContent
from services.keyword_extractor import extract_categorized_keywords
from services.matcher import find_matches
from services.resume_text import project_resume
from services.vocabulary import KeywordVocabulary

logger = logging.getLogger(__name__)

# 1 = highest priority
CATEGORY_PRIORITY: dict[KeywordCategory, int] = {
    "hard_skill": 1,
    "soft_skill": 2,
    "general": 3,
}


def get_priority(category: KeywordCategory) -> int:
    return CATEGORY_PRIORITY[category]


def sort_by_priority(keywords: list[CategorizedKeyword]) -> list[CategorizedKeyword]:
    """Order keywords hard skills first, then soft skills, then general.

    The sort is stable: keywords of equal priority keep their incoming
    (extraction) order. Returns a new list with the same elements.
    """
    return sorted(keywords, key=lambda k: CATEGORY_PRIORITY[k.category])


def suggestion_for(keyword: CategorizedKeyword) -> str:
    """Recommendation sentence for a missing keyword."""
    if keyword.category == "hard_skill":
        return (
            f'Add "{keyword.keyword}" to your Skills section or highlight it '
            f"in your work experience"
        )
    if keyword.category == "soft_skill":
        return (
            f'Demonstrate "{keyword.keyword}" through specific examples in '
            f"your experience descriptions"
        )
    return f'Consider mentioning "{keyword.keyword}" in your summary or relevant sections'


def build_suggestions(missing: list[CategorizedKeyword]) -> list[GapSuggestion]:
    return [
        GapSuggestion(
            keyword=kw.keyword,
            category=kw.category,
            priority=get_priority(kw.category),
            suggestion=suggestion_for(kw),
        )
        for kw in missing
    ]


def analyze_gaps(
    resume: ResumeContent,
    job_keywords: list[CategorizedKeyword],
) -> GapAnalysis:
    """Find missing job keywords and suggest how to close each gap."""
    corpus = project_resume(resume)
    partition = find_matches(job_keywords, corpus.keywords, corpus.text)
    missing = sort_by_priority(partition.missing)

    gaps = GapsByCategory(
        hard_skills=[k for k in missing if k.category == "hard_skill"],
        soft_skills=[k for k in missing if k.category == "soft_skill"],
        general=[k for k in missing if k.category == "general"],
    )

    logger.debug(
        "Gap analysis: %d missing (%d hard, %d soft, %d general)",
        len(missing), len(gaps.hard_skills), len(gaps.soft_skills), len(gaps.general),
    )

    return GapAnalysis(
        matched_keywords=partition.matched,
        missing_keywords=missing,
        gaps_by_category=gaps,
        suggestions=build_suggestions(missing),
    )


def analyze_gaps_from_job_description(
    resume: ResumeContent,
    job_description: str,
    vocabulary: KeywordVocabulary | None = None,
) -> GapAnalysis:
    """Extract keywords from raw job text, then run gap analysis."""
    job_keywords = extract_categorized_keywords(job_description, vocabulary)
    return analyze_gaps(resume, job_keywords)
