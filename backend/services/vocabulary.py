"""Keyword vocabulary used to recognise skills in job descriptions.

The vocabulary is plain configuration: three ordered tiers of regex term
groups (hard skills, tools, soft skills) plus the stop words ignored when
collecting general terms. The built-in lists can be replaced with a YAML file
of the same shape (see `load_vocabulary`).
"""

import logging
import re
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Hard skills: languages, frameworks, databases, cloud/devops, testing, data
# Each group is a list of regex fragments joined into one alternation.
# ---------------------------------------------------------------------------
HARD_SKILL_GROUPS: dict[str, tuple[str, ...]] = {
    "languages": (
        "javascript", "typescript", "python", "java", r"c\+\+", "c#", "ruby",
        "go", "rust", "php", "swift", "kotlin", "scala", "sql", "html", "css",
        "sass", "less",
    ),
    "frameworks": (
        "react", "vue", "angular", r"next\.?js", "nuxt", "svelte", "express",
        "nestjs", "django", "flask", "spring", "laravel", "rails", "fastapi",
        "gatsby",
    ),
    "databases": (
        "postgresql", "postgres", "mysql", "mongodb", "redis", "elasticsearch",
        "dynamodb", "cassandra", "sqlite", "oracle", "mariadb",
    ),
    "cloud_devops": (
        "aws", "azure", "gcp", "docker", "kubernetes", "k8s", "terraform",
        "jenkins", "gitlab", "github actions", "circleci", "ansible", "puppet",
    ),
    "technologies": (
        "git", "graphql", r"rest\s?api", "restful", "microservices", "webpack",
        "vite", "babel", "npm", "yarn", "pnpm",
    ),
    "testing": (
        "jest", "vitest", "cypress", "playwright", "selenium", "mocha",
        "pytest", "junit", "testing library",
    ),
    "data_ml": (
        "machine learning", "deep learning", "tensorflow", "pytorch", "pandas",
        "numpy", "scikit-learn", "data science",
    ),
}

# Tools are reported as hard skills
TOOL_GROUPS: dict[str, tuple[str, ...]] = {
    "productivity": (
        "jira", "confluence", "slack", "notion", "figma", "sketch", "adobe",
        "photoshop", "illustrator",
    ),
    "editors": (
        r"vs\s?code", "visual studio", "intellij", "webstorm", "xcode",
        "android studio",
    ),
    "api_tools": ("postman", "insomnia", "swagger", "openapi"),
}

SOFT_SKILL_GROUPS: dict[str, tuple[str, ...]] = {
    "core": (
        "communication", "teamwork", "leadership", r"problem[\s-]?solving",
        r"critical[\s-]?thinking",
    ),
    "work_habits": (
        r"time[\s-]?management", "adaptability", "creativity", "collaboration",
        "attention to detail",
    ),
    "character": (
        "organization", "initiative", "flexibility", "interpersonal",
        r"work[\s-]?ethic",
    ),
    "drive": (
        r"self[\s-]?motivated", "proactive", "analytical",
        r"decision[\s-]?making", "mentoring",
    ),
    "influence": (
        "presentation", "negotiation", r"conflict[\s-]?resolution", "empathy",
        "patience",
    ),
}

# Words skipped when collecting general (non-skill) terms
STOP_WORDS: frozenset[str] = frozenset({
    # Function words
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "has",
    "he", "in", "is", "it", "its", "of", "on", "that", "the", "to", "was",
    "will", "with", "we", "you", "your", "our", "can", "should", "must",
    "have", "this", "they", "their", "what", "who", "about", "into", "more",
    "other", "than", "then", "them", "these", "those", "when", "where",
    "which", "while", "would", "also", "such", "each", "some", "very",
    # Posting boilerplate
    "opportunity", "opportunities", "position", "role", "candidate",
    "candidates", "company", "team", "teams", "preferred", "required",
    "requirements", "responsibilities", "qualifications", "including",
    "looking", "join", "work", "working", "years", "year", "plus", "nice",
    "strong", "great", "ability", "experience", "knowledge", "skills",
    "benefits", "salary", "equal", "employer",
})

_BOUNDARY_BEFORE = r"(?<![a-z0-9])"
_BOUNDARY_AFTER = r"(?![a-z0-9])"


class VocabularyError(ValueError):
    """Raised when a vocabulary file does not have the expected shape."""


def compile_group(terms: tuple[str, ...]) -> re.Pattern:
    """Compile a term group into one case-insensitive alternation.

    Terms only match between non-alphanumeric characters, so "java" does not
    fire inside "javascript" and "go" does not fire inside "good".
    """
    alternation = "|".join(terms)
    return re.compile(rf"{_BOUNDARY_BEFORE}(?:{alternation}){_BOUNDARY_AFTER}", re.IGNORECASE)


@dataclass(frozen=True)
class KeywordVocabulary:
    """Ordered term groups for the three keyword tiers."""
    hard_skills: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(HARD_SKILL_GROUPS))
    tools: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(TOOL_GROUPS))
    soft_skills: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(SOFT_SKILL_GROUPS))
    stop_words: frozenset[str] = STOP_WORDS

    @cached_property
    def hard_skill_patterns(self) -> tuple[re.Pattern, ...]:
        """Hard skill groups followed by tool groups, in checking order."""
        groups = list(self.hard_skills.values()) + list(self.tools.values())
        return tuple(compile_group(g) for g in groups if g)

    @cached_property
    def soft_skill_patterns(self) -> tuple[re.Pattern, ...]:
        return tuple(compile_group(g) for g in self.soft_skills.values() if g)

    @property
    def term_count(self) -> int:
        tiers = (self.hard_skills, self.tools, self.soft_skills)
        return sum(len(terms) for tier in tiers for terms in tier.values())


DEFAULT_VOCABULARY = KeywordVocabulary()


def _read_groups(data: dict, key: str, default: dict[str, tuple[str, ...]]) -> dict[str, tuple[str, ...]]:
    """Read one tier from a parsed YAML document, validating its shape."""
    raw = data.get(key)
    if raw is None:
        return dict(default)
    if isinstance(raw, list):
        raw = {key: raw}
    if not isinstance(raw, dict):
        raise VocabularyError(f"'{key}' must be a mapping of group name -> list of terms")

    groups: dict[str, tuple[str, ...]] = {}
    for name, terms in raw.items():
        if not isinstance(terms, list) or not all(isinstance(t, str) and t.strip() for t in terms):
            raise VocabularyError(f"'{key}.{name}' must be a list of non-empty strings")
        groups[str(name)] = tuple(t.strip() for t in terms)
        try:
            compile_group(groups[str(name)])
        except re.error as e:
            raise VocabularyError(f"'{key}.{name}' contains an invalid pattern: {e}") from e
    return groups


def load_vocabulary(path: str | Path) -> KeywordVocabulary:
    """Load a vocabulary from a YAML file.

    Expected keys: `hard_skills`, `tools`, `soft_skills` (each a mapping of
    group name to a list of regex terms) and `stop_words` (a list). Missing
    keys keep the built-in defaults.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise VocabularyError(f"Vocabulary file {path} must contain a mapping")

    stop_words = data.get("stop_words")
    if stop_words is None:
        stop_words = STOP_WORDS
    elif isinstance(stop_words, list):
        stop_words = frozenset(str(w).lower() for w in stop_words)
    else:
        raise VocabularyError("'stop_words' must be a list of words")

    vocabulary = KeywordVocabulary(
        hard_skills=_read_groups(data, "hard_skills", HARD_SKILL_GROUPS),
        tools=_read_groups(data, "tools", TOOL_GROUPS),
        soft_skills=_read_groups(data, "soft_skills", SOFT_SKILL_GROUPS),
        stop_words=stop_words,
    )
    logger.info("Loaded keyword vocabulary from %s (%d terms)", path, vocabulary.term_count)
    return vocabulary


_configured: KeywordVocabulary | None = None


def get_vocabulary() -> KeywordVocabulary:
    """Return the configured vocabulary, loading it on first use."""
    global _configured
    if _configured is None:
        from config import settings

        if settings.keyword_vocabulary_path:
            _configured = load_vocabulary(settings.keyword_vocabulary_path)
        else:
            _configured = DEFAULT_VOCABULARY
    return _configured


def reset_vocabulary() -> None:
    """Forget the configured vocabulary. Useful for testing."""
    global _configured
    _configured = None
