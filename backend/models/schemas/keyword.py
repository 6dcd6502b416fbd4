"""Categorized job-description keywords shared by every analysis stage."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

KeywordCategory = Literal["hard_skill", "soft_skill", "general"]

CATEGORY_ORDER: tuple[KeywordCategory, ...] = ("hard_skill", "soft_skill", "general")


class CategorizedKeyword(BaseModel):
    """A keyword found in a job description.

    `keyword` keeps the lower-cased text as it appeared in the posting;
    identity comparisons go through `normalize_keyword()`.
    """
    model_config = ConfigDict(frozen=True)

    keyword: str
    category: KeywordCategory
    frequency: int = Field(default=1, ge=1)
