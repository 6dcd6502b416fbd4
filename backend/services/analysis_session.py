"""Live analysis for one resume-editing session.

The editor re-scores the resume a few hundred milliseconds after each edit
while the job description stays the same, so the extracted job keywords are
cached per session. The cache holds a single value and is not shared between
sessions or threads.
"""

import logging

from models.responses import AnalysisResult, GapAnalysis
from models.schemas.keyword import CategorizedKeyword
from models.schemas.resume_content import ResumeContent
from services.gap_analyzer import analyze_gaps
from services.keyword_extractor import extract_categorized_keywords
from services.score_calculator import calculate_ats_score
from services.vocabulary import KeywordVocabulary

logger = logging.getLogger(__name__)


class KeywordCache:
    """Last-value cache of extracted keywords, keyed by the exact job text."""

    def __init__(self, vocabulary: KeywordVocabulary | None = None) -> None:
        self._vocabulary = vocabulary
        self._job_description: str | None = None
        self._keywords: list[CategorizedKeyword] = []

    def get(self, job_description: str) -> list[CategorizedKeyword]:
        if job_description != self._job_description:
            logger.debug("Keyword cache miss, extracting (%d chars)", len(job_description))
            self._keywords = extract_categorized_keywords(job_description, self._vocabulary)
            self._job_description = job_description
        return list(self._keywords)

    def clear(self) -> None:
        self._job_description = None
        self._keywords = []


class AnalysisSession:
    """Scores successive resume edits against one job description."""

    def __init__(self, job_description: str, vocabulary: KeywordVocabulary | None = None) -> None:
        self.job_description = job_description
        self._cache = KeywordCache(vocabulary)
        self._last_score: int | None = None

    @property
    def job_keywords(self) -> list[CategorizedKeyword]:
        return self._cache.get(self.job_description)

    def set_job_description(self, job_description: str) -> None:
        """Switch to another job; score history starts over."""
        if job_description != self.job_description:
            self.job_description = job_description
            self._last_score = None

    def analyze(self, resume: ResumeContent) -> AnalysisResult:
        result = calculate_ats_score(resume, self.job_keywords)
        previous = self._last_score if self._last_score else None
        self._last_score = result.score
        return AnalysisResult(
            score=result.score,
            previous_score=previous,
            breakdown=result.breakdown,
            matched_keywords=result.matched_keywords,
            missing_keywords=result.missing_keywords,
        )

    def gaps(self, resume: ResumeContent) -> GapAnalysis:
        return analyze_gaps(resume, self.job_keywords)
