import pytest

from conftest import kw
from models.schemas.keyword import CategorizedKeyword
from services.keyword_extractor import (
    MAX_GENERAL_TERMS,
    categorize_keyword,
    count_occurrences,
    extract_categorized_keywords,
    merge_keywords,
    normalize_keyword,
)

FRONTEND_JD = """Senior Frontend Engineer
We are looking for an engineer with React, TypeScript and Next.js experience.
You will build frontend features with our design team using Figma and Jira.
Strong communication and problem-solving skills. Experience with AWS and Docker is a plus.
Frontend testing with Jest and Cypress. Mentoring junior engineers."""


def test_extract_example_posting():
    keywords = extract_categorized_keywords(
        "Required: React, TypeScript. Nice to have: Leadership."
    )
    assert keywords == [
        CategorizedKeyword(keyword="react", category="hard_skill", frequency=1),
        CategorizedKeyword(keyword="typescript", category="hard_skill", frequency=1),
        CategorizedKeyword(keyword="leadership", category="soft_skill", frequency=1),
    ]


@pytest.mark.parametrize("text", ["", "   ", "\n\t  \n"])
def test_extract_empty_text(text):
    assert extract_categorized_keywords(text) == []


def test_extract_ignores_unknown_terms():
    assert extract_categorized_keywords("Blorp zing quux.") == []


def test_extract_category_order_and_frequency():
    text = "Python python PYTHON. Docker. Communication and teamwork. Teamwork."
    keywords = extract_categorized_keywords(text)
    assert [(k.keyword, k.category, k.frequency) for k in keywords] == [
        ("python", "hard_skill", 3),
        ("docker", "hard_skill", 1),
        ("teamwork", "soft_skill", 2),
        ("communication", "soft_skill", 1),
    ]


def test_extract_full_posting():
    keywords = extract_categorized_keywords(FRONTEND_JD)
    by_keyword = {k.keyword: k for k in keywords}

    for hard in ("react", "typescript", "next.js", "aws", "docker", "jest", "cypress", "figma", "jira"):
        assert by_keyword[hard].category == "hard_skill"
    for soft in ("communication", "problem solving", "mentoring"):
        assert by_keyword[soft].category == "soft_skill"
    assert by_keyword["frontend"].category == "general"
    assert by_keyword["frontend"].frequency == 3
    assert by_keyword["engineer"].category == "general"

    categories = [k.category for k in keywords]
    order = {"hard_skill": 0, "soft_skill": 1, "general": 2}
    assert categories == sorted(categories, key=order.get)


def test_extract_word_boundaries():
    keywords = extract_categorized_keywords("Proficient in JavaScript. Good engineer, scalable systems.")
    names = {k.keyword for k in keywords}
    assert "javascript" in names
    assert "java" not in names  # not inside "javascript"
    assert "go" not in names  # not inside "good"
    assert "scala" not in names  # not inside "scalable"


def test_extract_deduplicates_spelling_variants():
    keywords = extract_categorized_keywords("Next.js and nextjs and NEXT.JS")
    hard = [k for k in keywords if k.category == "hard_skill"]
    assert len(hard) == 1
    assert hard[0].keyword == "next.js"
    assert hard[0].frequency == 3

    normalized = [normalize_keyword(k.keyword) for k in keywords]
    assert len(normalized) == len(set(normalized))


def test_extract_soft_skill_separators_collapsed():
    keywords = extract_categorized_keywords("Problem-solving and problem solving matter.")
    soft = [k for k in keywords if k.category == "soft_skill"]
    assert soft == [CategorizedKeyword(keyword="problem solving", category="soft_skill", frequency=2)]


def test_extract_no_duplicates_in_long_posting():
    keywords = extract_categorized_keywords(FRONTEND_JD * 3)
    normalized = [normalize_keyword(k.keyword) for k in keywords]
    assert len(normalized) == len(set(normalized))
    assert all(k.frequency >= 1 for k in keywords)


def test_general_terms_require_repetition_and_are_capped():
    text = " ".join(f"alpha{i} alpha{i}" for i in range(MAX_GENERAL_TERMS + 5))
    keywords = extract_categorized_keywords(text)
    assert len(keywords) == MAX_GENERAL_TERMS
    assert all(k.category == "general" and k.frequency == 2 for k in keywords)
    # Ties keep first appearance order
    assert keywords[0].keyword == "alpha0"


def test_general_terms_skip_stop_words_and_short_words():
    text = "with with with team team data data api api"
    names = {k.keyword for k in extract_categorized_keywords(text)}
    assert "with" not in names
    assert "team" not in names
    assert "api" not in names  # too short
    assert "data" in names


# --- categorize_keyword ---

@pytest.mark.parametrize("term,expected", [
    ("react", "hard_skill"),
    ("Next.js", "hard_skill"),
    ("rest api", "hard_skill"),
    ("jira", "hard_skill"),  # tools count as hard skills
    ("vs code", "hard_skill"),
    ("leadership", "soft_skill"),
    ("problem solving", "soft_skill"),
    ("attention to detail", "soft_skill"),
    ("frontend", "general"),
    ("javascripting", "general"),
    ("", "general"),
])
def test_categorize_keyword(term, expected):
    assert categorize_keyword(term) == expected


@pytest.mark.parametrize("text", [
    FRONTEND_JD,
    "Required: React, TypeScript. Nice to have: Leadership.",
    "Next.js and nextjs; conflict-resolution, self motivated, VS Code, rest api, postgres",
    "Backend backend services with Go, Kafka-like queues; data science and machine learning.",
])
def test_categorize_agrees_with_extraction(text):
    for keyword in extract_categorized_keywords(text):
        assert categorize_keyword(keyword.keyword) == keyword.category, keyword


# --- normalization helpers ---

@pytest.mark.parametrize("raw,expected", [
    ("  Next.js  ", "nextjs"),
    ("Problem-Solving", "problemsolving"),
    ("Machine   Learning", "machine learning"),
    ("C++", "c"),
    ("", ""),
])
def test_normalize_keyword(raw, expected):
    assert normalize_keyword(raw) == expected


def test_count_occurrences_respects_boundaries():
    assert count_occurrences("Java and JavaScript and java", "java") == 2
    assert count_occurrences("Next.js, next.js", "next.js") == 2
    assert count_occurrences("Blorp, blorp and blorping", "blorp") == 2
    assert count_occurrences("anything", "") == 0


def test_count_occurrences_groups_spelling_variants():
    assert count_occurrences("Next.js and nextjs and NEXT.JS", "next.js") == 3
    assert count_occurrences("Next.js and nextjs and NEXT.JS", "nextjs") == 3
    assert count_occurrences("Problem-solving and problem solving", "problem solving") == 2


@pytest.mark.parametrize("text", [
    FRONTEND_JD,
    FRONTEND_JD * 2,
    "Next.js and nextjs and NEXT.JS; Java and JavaScript; Problem-solving, problem solving.",
    "Backend backend services with Go, Kafka-like queues; data science and machine learning.",
])
def test_count_occurrences_agrees_with_extracted_frequency(text):
    for keyword in extract_categorized_keywords(text):
        assert count_occurrences(text, keyword.keyword) == keyword.frequency, keyword


def test_single_letter_languages_are_not_extracted():
    keywords = extract_categorized_keywords("Must know C++ and C#. Rust is a plus.")
    assert [(k.keyword, k.category) for k in keywords] == [("rust", "hard_skill")]


# --- merge_keywords ---

def test_merge_keywords_keeps_first_and_category_order():
    first = [kw("react"), kw("leadership", "soft_skill")]
    second = [kw("React", frequency=4), kw("docker"), kw("agile", "general")]
    merged = merge_keywords(first, second)
    assert [(k.keyword, k.category) for k in merged] == [
        ("react", "hard_skill"),
        ("docker", "hard_skill"),
        ("leadership", "soft_skill"),
        ("agile", "general"),
    ]
    assert merged[0].frequency == 1


def test_merge_keywords_empty():
    assert merge_keywords() == []
    assert merge_keywords([], []) == []


def test_frequency_ignores_hits_inside_longer_words():
    keywords = extract_categorized_keywords("Java and JavaScript. Java again.")
    by_keyword = {k.keyword: k.frequency for k in keywords}
    assert by_keyword["java"] == 2
    assert by_keyword["javascript"] == 1
