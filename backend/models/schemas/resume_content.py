"""Structured resume content as produced by the resume editor.

Every collection defaults to empty and every optional scalar to an empty
value, so partially filled resumes can be analyzed without special cases.
"""

from pydantic import BaseModel, ConfigDict, Field


class _ResumeModel(BaseModel):
    """Accepts both snake_case and the editor's camelCase field names."""
    model_config = ConfigDict(populate_by_name=True)


class ResumeLocation(_ResumeModel):
    city: str = ""
    region: str | None = None
    country_code: str = Field(default="", alias="countryCode")


class ResumeProfile(_ResumeModel):
    network: str = ""  # e.g. LinkedIn, GitHub
    url: str = ""


class ResumeBasics(_ResumeModel):
    name: str = ""
    email: str = ""
    phone: str | None = None
    label: str | None = None  # professional headline
    location: ResumeLocation = ResumeLocation()
    profiles: list[ResumeProfile] = []


class ResumeWorkExperience(_ResumeModel):
    id: str = ""
    company: str = ""
    position: str = ""
    start_date: str = Field(default="", alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")
    is_current: bool = Field(default=False, alias="isCurrent")
    summary: str = ""


class ResumeEducation(_ResumeModel):
    id: str = ""
    institution: str = ""
    area: str = ""  # field of study
    study_type: str = Field(default="", alias="studyType")  # Bachelor, Master, ...
    start_date: str = Field(default="", alias="startDate")
    end_date: str | None = Field(default=None, alias="endDate")


class ResumeHardSkill(_ResumeModel):
    name: str
    level: str | None = None


class ResumeSkills(_ResumeModel):
    hard: list[ResumeHardSkill] = []
    soft: list[str] = []
    tools: list[str] = []  # matched alongside hard skills


class ResumeLanguage(_ResumeModel):
    language: str = ""
    fluency: str = ""


class ResumeMeta(_ResumeModel):
    template: str = "default"
    completion_score: int = Field(default=0, ge=0, le=100, alias="completionScore")


class ResumeContent(_ResumeModel):
    basics: ResumeBasics = ResumeBasics()
    summary: str = ""
    work: list[ResumeWorkExperience] = []
    education: list[ResumeEducation] = []
    skills: ResumeSkills = ResumeSkills()
    languages: list[ResumeLanguage] = []
    meta: ResumeMeta = ResumeMeta()
