"""Keyword extraction and categorization for job descriptions.

Scans the posting against the keyword vocabulary in three tiers (hard
skills and tools, soft skills, general terms), counts how often each keyword
occurs, and deduplicates by normalized identity. Output is always ordered
hard skills first, then soft skills, then general terms.
"""

import logging
import re
from collections import Counter
from collections.abc import Iterable

from models.schemas.keyword import CATEGORY_ORDER, CategorizedKeyword, KeywordCategory
from services.vocabulary import KeywordVocabulary, get_vocabulary

logger = logging.getLogger(__name__)

# Upper bound on general (non-skill) terms kept per posting
MAX_GENERAL_TERMS = 20

# General terms must be longer than this and occur more than once
MIN_GENERAL_TERM_LENGTH = 4
MIN_GENERAL_TERM_COUNT = 2

# "C++" and "C#" both normalize to "c"; one letter is too weak an identity
MIN_KEYWORD_IDENTITY_LENGTH = 2

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")
_WHITESPACE_RE = re.compile(r"\s+")
_SOFT_SEPARATOR_RE = re.compile(r"[\s-]+")
_TOKEN_RE = re.compile(r"[a-z0-9]+")


def normalize_keyword(keyword: str) -> str:
    """Normalize a keyword for identity comparison.

    Lowercases, trims, strips everything except letters, digits and
    whitespace, and collapses whitespace: "Next.js" -> "nextjs",
    "Problem-Solving" -> "problemsolving".
    """
    text = _NON_ALNUM_RE.sub("", keyword.lower().strip())
    return _WHITESPACE_RE.sub(" ", text).strip()


def _literal_count(text: str, term: str) -> int:
    """Case-insensitive hits of a literal term not glued to letters or digits."""
    pattern = re.compile(
        rf"(?<![a-z0-9]){re.escape(term)}(?![a-z0-9])", re.IGNORECASE
    )
    return sum(1 for _ in pattern.finditer(text))


def count_occurrences(
    text: str,
    keyword: str,
    vocabulary: KeywordVocabulary | None = None,
) -> int:
    """Count a keyword in text the same way extraction counts its frequency.

    Vocabulary keywords count every spelling that shares their normalized
    identity ("Next.js", "nextjs", "NEXT.JS"), from the first tier that
    recognises them. Anything else counts as a whole-word literal.
    """
    key = normalize_keyword(keyword)
    if not key:
        return 0
    vocab = vocabulary or get_vocabulary()
    for patterns, category in (
        (vocab.hard_skill_patterns, "hard_skill"),
        (vocab.soft_skill_patterns, "soft_skill"),
    ):
        hit = _collect_pattern_hits(text, patterns, category).get(key)
        if hit:
            return hit[2]
    return _literal_count(text, keyword.strip())


def _display_form(match_text: str, category: KeywordCategory) -> str:
    """Lowercase and tidy a matched span for display."""
    text = match_text.lower().strip()
    if category == "soft_skill":
        return _SOFT_SEPARATOR_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", text)


def _collect_pattern_hits(
    text: str,
    patterns: Iterable[re.Pattern],
    category: KeywordCategory,
) -> dict[str, tuple[str, int, int]]:
    """Find every vocabulary hit for one tier.

    Returns normalized identity -> (display form, first position, count).
    Spelling variants of the same keyword ("Next.js", "nextjs") share one
    entry and one count.
    """
    hits: dict[str, tuple[str, int, int]] = {}
    for pattern in patterns:
        for match in pattern.finditer(text):
            display = _display_form(match.group(0), category)
            key = normalize_keyword(display)
            if len(key) < MIN_KEYWORD_IDENTITY_LENGTH:
                continue
            if key in hits:
                first_display, first_pos, count = hits[key]
                if match.start() < first_pos:
                    hits[key] = (display, match.start(), count + 1)
                else:
                    hits[key] = (first_display, first_pos, count + 1)
            else:
                hits[key] = (display, match.start(), 1)
    return hits


def _general_term_hits(text: str, stop_words: frozenset[str]) -> dict[str, tuple[str, int, int]]:
    """Collect repeated, non-trivial words as general keywords."""
    first_seen: dict[str, int] = {}
    counts: Counter[str] = Counter()
    for match in _TOKEN_RE.finditer(text.lower()):
        word = match.group(0)
        if len(word) < MIN_GENERAL_TERM_LENGTH or word in stop_words or word.isdigit():
            continue
        counts[word] += 1
        first_seen.setdefault(word, match.start())
    return {
        word: (word, first_seen[word], count)
        for word, count in counts.items()
        if count >= MIN_GENERAL_TERM_COUNT
    }


def _rank(hits: dict[str, tuple[str, int, int]]) -> list[tuple[str, str, int]]:
    """Order hits by frequency (desc), then first appearance in the text."""
    ranked = sorted(hits.items(), key=lambda item: (-item[1][2], item[1][1]))
    return [(key, display, count) for key, (display, _, count) in ranked]


def extract_categorized_keywords(
    job_description: str,
    vocabulary: KeywordVocabulary | None = None,
) -> list[CategorizedKeyword]:
    """Extract categorized keywords from a job description.

    Hard skills (including tools) come first, then soft skills, then general
    terms. A keyword appears at most once; the first tier that recognises it
    decides its category. Terms outside the vocabulary are only reported as
    general keywords when they repeat.
    """
    if not job_description or not job_description.strip():
        return []

    vocab = vocabulary or get_vocabulary()
    seen: set[str] = set()
    keywords: list[CategorizedKeyword] = []

    tiers: list[tuple[KeywordCategory, dict[str, tuple[str, int, int]]]] = [
        ("hard_skill", _collect_pattern_hits(job_description, vocab.hard_skill_patterns, "hard_skill")),
        ("soft_skill", _collect_pattern_hits(job_description, vocab.soft_skill_patterns, "soft_skill")),
    ]

    for category, hits in tiers:
        for key, display, count in _rank(hits):
            if key in seen:
                continue
            seen.add(key)
            keywords.append(CategorizedKeyword(keyword=display, category=category, frequency=count))

    # General terms are capped after removing anything already categorized
    general = [
        (key, display, count)
        for key, display, count in _rank(_general_term_hits(job_description, vocab.stop_words))
        if key not in seen
    ]
    for key, display, count in general[:MAX_GENERAL_TERMS]:
        seen.add(key)
        keywords.append(CategorizedKeyword(keyword=display, category="general", frequency=count))

    logger.debug(
        "Extracted %d keywords (%d hard, %d soft, %d general)",
        len(keywords),
        sum(1 for k in keywords if k.category == "hard_skill"),
        sum(1 for k in keywords if k.category == "soft_skill"),
        sum(1 for k in keywords if k.category == "general"),
    )
    return keywords


def categorize_keyword(
    keyword: str,
    vocabulary: KeywordVocabulary | None = None,
) -> KeywordCategory:
    """Categorize a single term with the same patterns used for extraction."""
    vocab = vocabulary or get_vocabulary()
    test_text = f" {keyword} "

    for pattern in vocab.hard_skill_patterns:
        if pattern.search(test_text):
            return "hard_skill"

    for pattern in vocab.soft_skill_patterns:
        if pattern.search(test_text):
            return "soft_skill"

    return "general"


def merge_keywords(*keyword_lists: Iterable[CategorizedKeyword]) -> list[CategorizedKeyword]:
    """Merge keywords from several extraction passes.

    The first occurrence of a normalized keyword wins. The result keeps the
    hard -> soft -> general order; within a category, earlier passes come
    first.
    """
    seen: set[str] = set()
    merged: list[CategorizedKeyword] = []
    for keywords in keyword_lists:
        for kw in keywords:
            key = normalize_keyword(kw.keyword)
            if key in seen:
                continue
            seen.add(key)
            merged.append(kw)
    return sorted(merged, key=lambda k: CATEGORY_ORDER.index(k.category))
