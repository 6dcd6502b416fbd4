"""Flatten structured resume content into searchable text and skill keywords."""

from typing import NamedTuple

from models.schemas.resume_content import ResumeContent
from services.keyword_extractor import normalize_keyword


class ResumeCorpus(NamedTuple):
    text: str  # lowercase, space-joined resume text
    keywords: set[str]  # normalized skill names


def resume_to_text(resume: ResumeContent) -> str:
    """Concatenate every keyword-relevant field into one lowercase string.

    Covers the headline, summary, work entries, education entries, all
    skills (hard, soft, tools) and language names. Empty fields are skipped.
    """
    parts: list[str | None] = [resume.basics.label, resume.summary]

    for work in resume.work:
        parts.extend((work.company, work.position, work.summary))

    for edu in resume.education:
        parts.extend((edu.institution, edu.area, edu.study_type))

    parts.extend(skill.name for skill in resume.skills.hard)
    parts.extend(resume.skills.soft)
    parts.extend(resume.skills.tools)
    parts.extend(lang.language for lang in resume.languages)

    return " ".join(p.strip() for p in parts if p and p.strip()).lower()


def resume_keyword_set(resume: ResumeContent) -> set[str]:
    """Normalized skill names (hard, soft, tools) for exact lookups."""
    names = [skill.name for skill in resume.skills.hard]
    names += resume.skills.soft
    names += resume.skills.tools
    keywords = {normalize_keyword(name) for name in names}
    keywords.discard("")
    return keywords


def project_resume(resume: ResumeContent) -> ResumeCorpus:
    return ResumeCorpus(text=resume_to_text(resume), keywords=resume_keyword_set(resume))
