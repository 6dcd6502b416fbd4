"""ATS compatibility score.

Weighted combination of three 0-100 sub-scores:
- Hard skills: 60% (frequency-weighted share of hard-skill keywords matched)
- Soft skills: 30% (same, for soft-skill keywords)
- Keyword density: 10% (how often matched keywords recur in the resume)

The weights are a fixed business rule, not tuning knobs.
"""

import logging
import re

from models.responses import ScoreBreakdown, ScoreResult
from models.schemas.keyword import CategorizedKeyword
from models.schemas.resume_content import ResumeContent
from services.keyword_extractor import normalize_keyword
from services.matcher import find_matches
from services.resume_text import project_resume

logger = logging.getLogger(__name__)

HARD_SKILL_WEIGHT = 0.6
SOFT_SKILL_WEIGHT = 0.3
KEYWORD_DENSITY_WEIGHT = 0.1

WEIGHTS: dict[str, float] = {
    "HARD_SKILLS": HARD_SKILL_WEIGHT,
    "SOFT_SKILLS": SOFT_SKILL_WEIGHT,
    "KEYWORD_DENSITY": KEYWORD_DENSITY_WEIGHT,
}

# Occurrences per matched keyword that earn a full density score
TARGET_OCCURRENCES_PER_KEYWORD = 2


def get_weights() -> dict[str, float]:
    """Return a copy of the scoring weights."""
    return dict(WEIGHTS)


def _clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def calculate_category_score(
    keywords: list[CategorizedKeyword],
    matched: list[CategorizedKeyword],
) -> float:
    """Frequency-weighted share of a category's keywords found in the resume.

    A category with no keywords asks for nothing, so it scores 100.
    """
    total_weight = sum(k.frequency for k in keywords)
    if not keywords or total_weight == 0:
        return 100.0
    matched_weight = sum(k.frequency for k in matched)
    return _clamp(matched_weight / total_weight * 100)


def calculate_keyword_density_score(
    matched: list[CategorizedKeyword],
    resume_text: str,
) -> float:
    """Score how densely matched keywords recur in the resume text.

    Two occurrences per matched keyword earns 100. Without any matches there
    is nothing to reward, so the score is 0.
    """
    if not matched:
        return 0.0

    patterns: dict[str, re.Pattern] = {}
    total_occurrences = 0
    for kw in matched:
        normalized = normalize_keyword(kw.keyword)
        if not normalized:
            continue
        if normalized not in patterns:
            patterns[normalized] = re.compile(re.escape(normalized), re.IGNORECASE)
        total_occurrences += len(patterns[normalized].findall(resume_text))

    target = len(matched) * TARGET_OCCURRENCES_PER_KEYWORD
    return min(100.0, total_occurrences / target * 100)


def calculate_ats_score(
    resume: ResumeContent,
    job_keywords: list[CategorizedKeyword],
) -> ScoreResult:
    """Score a resume against categorized job keywords.

    Each category is matched on its own, so a hit can never leak between
    categories. Matched and missing lists are ordered hard skills, soft
    skills, then general keywords.
    """
    corpus = project_resume(resume)

    hard_keywords = [k for k in job_keywords if k.category == "hard_skill"]
    soft_keywords = [k for k in job_keywords if k.category == "soft_skill"]
    general_keywords = [k for k in job_keywords if k.category == "general"]

    hard = find_matches(hard_keywords, corpus.keywords, corpus.text)
    soft = find_matches(soft_keywords, corpus.keywords, corpus.text)
    general = find_matches(general_keywords, corpus.keywords, corpus.text)

    matched_keywords = hard.matched + soft.matched + general.matched
    missing_keywords = hard.missing + soft.missing + general.missing

    hard_score = round(calculate_category_score(hard_keywords, hard.matched))
    soft_score = round(calculate_category_score(soft_keywords, soft.matched))
    density_score = round(calculate_keyword_density_score(matched_keywords, corpus.text))

    # Weighted over the published (rounded) components so the breakdown
    # always reproduces the total
    total = round(
        hard_score * HARD_SKILL_WEIGHT
        + soft_score * SOFT_SKILL_WEIGHT
        + density_score * KEYWORD_DENSITY_WEIGHT
    )
    score = int(_clamp(total))

    logger.debug(
        "ATS score %d (hard=%d soft=%d density=%d, %d/%d keywords matched)",
        score, hard_score, soft_score, density_score,
        len(matched_keywords), len(job_keywords),
    )

    return ScoreResult(
        score=score,
        breakdown=ScoreBreakdown(
            hard_skill_score=hard_score,
            soft_skill_score=soft_score,
            keyword_density_score=density_score,
            total_score=score,
        ),
        matched_keywords=matched_keywords,
        missing_keywords=missing_keywords,
    )
