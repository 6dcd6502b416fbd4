from pydantic import BaseModel, Field, model_validator

from models.schemas.keyword import CategorizedKeyword
from models.schemas.resume_content import ResumeContent


class ExtractKeywordsRequest(BaseModel):
    job_description: str = Field(..., description="Job description text")


class CategorizeRequest(BaseModel):
    term: str = Field(..., max_length=200, description="Single keyword or phrase")


class AnalyzeRequest(BaseModel):
    """Resume plus either raw job text or keywords extracted earlier."""
    resume: ResumeContent
    job_description: str | None = Field(default=None, description="Job description text")
    job_keywords: list[CategorizedKeyword] | None = Field(
        default=None, description="Keywords from a previous /keywords/extract call"
    )

    @model_validator(mode="after")
    def _require_job_input(self) -> "AnalyzeRequest":
        if self.job_description is None and self.job_keywords is None:
            raise ValueError("Provide job_description or job_keywords")
        return self
