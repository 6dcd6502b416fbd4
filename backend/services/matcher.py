"""Lexical keyword matching against a projected resume.

A job keyword counts as present when its normalized form, or a simple
spacing/dash variant of it, is one of the resume's skill keywords or occurs
in the resume text. No synonyms and no fuzzy edit distance: matches must be
explainable by looking at the resume.
"""

import re
from collections.abc import Iterable
from typing import NamedTuple

from models.schemas.keyword import CategorizedKeyword
from services.keyword_extractor import normalize_keyword

# Keywords this short must match the resume text as whole words
SHORT_KEYWORD_LENGTH = 2


class MatchPartition(NamedTuple):
    matched: list[CategorizedKeyword]
    missing: list[CategorizedKeyword]


def keyword_variations(normalized: str) -> list[str]:
    """Spacing and dash variants of a normalized keyword.

    "next js" -> ["nextjs", "next-js"]. The keyword itself is not included.
    """
    candidates = (
        normalized.replace(" ", ""),
        normalized.replace(" ", "-"),
        normalized.replace("-", " "),
        normalized.replace("-", ""),
    )
    variations: list[str] = []
    for v in candidates:
        if v and v != normalized and v not in variations:
            variations.append(v)
    return variations


def _in_text(term: str, resume_text: str) -> bool:
    # Short terms ("c", "go") are substrings of too many words
    if len(term) <= SHORT_KEYWORD_LENGTH:
        return re.search(rf"(?<![a-z0-9]){re.escape(term)}(?![a-z0-9])", resume_text) is not None
    return term in resume_text


def is_keyword_present(keyword: str, resume_keywords: set[str], resume_text: str) -> bool:
    """Check a keyword against the resume skill set and resume text."""
    normalized = normalize_keyword(keyword)
    if not normalized:
        return False

    # 1. Exact skill match or plain substring of the resume text
    if normalized in resume_keywords or _in_text(normalized, resume_text):
        return True

    # 2. Formatting variants ("next js" vs "nextjs" vs "next-js")
    return any(v in resume_keywords or _in_text(v, resume_text) for v in keyword_variations(normalized))


def find_matches(
    job_keywords: Iterable[CategorizedKeyword],
    resume_keywords: set[str],
    resume_text: str,
) -> MatchPartition:
    """Split job keywords into matched and missing, preserving input order."""
    matched: list[CategorizedKeyword] = []
    missing: list[CategorizedKeyword] = []
    for kw in job_keywords:
        if is_keyword_present(kw.keyword, resume_keywords, resume_text):
            matched.append(kw)
        else:
            missing.append(kw)
    return MatchPartition(matched=matched, missing=missing)
