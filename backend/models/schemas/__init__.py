"""Pydantic data model for keyword analysis."""

from models.schemas.keyword import CATEGORY_ORDER, CategorizedKeyword, KeywordCategory
from models.schemas.resume_content import (
    ResumeBasics,
    ResumeContent,
    ResumeEducation,
    ResumeHardSkill,
    ResumeLanguage,
    ResumeLocation,
    ResumeMeta,
    ResumeProfile,
    ResumeSkills,
    ResumeWorkExperience,
)

__all__ = [
    "CATEGORY_ORDER",
    "CategorizedKeyword",
    "KeywordCategory",
    "ResumeBasics",
    "ResumeContent",
    "ResumeEducation",
    "ResumeHardSkill",
    "ResumeLanguage",
    "ResumeLocation",
    "ResumeMeta",
    "ResumeProfile",
    "ResumeSkills",
    "ResumeWorkExperience",
]
