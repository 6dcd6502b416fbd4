from pydantic import BaseModel

from models.schemas.keyword import CategorizedKeyword, KeywordCategory


class ScoreBreakdown(BaseModel):
    hard_skill_score: int = 0
    soft_skill_score: int = 0
    keyword_density_score: int = 0
    total_score: int = 0


class ScoreResult(BaseModel):
    score: int = 0
    breakdown: ScoreBreakdown = ScoreBreakdown()
    matched_keywords: list[CategorizedKeyword] = []
    missing_keywords: list[CategorizedKeyword] = []


class GapSuggestion(BaseModel):
    keyword: str
    category: KeywordCategory
    priority: int  # 1 = hard skill, 2 = soft skill, 3 = general
    suggestion: str


class GapsByCategory(BaseModel):
    hard_skills: list[CategorizedKeyword] = []
    soft_skills: list[CategorizedKeyword] = []
    general: list[CategorizedKeyword] = []


class GapAnalysis(BaseModel):
    matched_keywords: list[CategorizedKeyword] = []
    missing_keywords: list[CategorizedKeyword] = []
    gaps_by_category: GapsByCategory = GapsByCategory()
    suggestions: list[GapSuggestion] = []


class AnalysisResult(BaseModel):
    """Live analysis output for an editing session."""
    score: int = 0
    previous_score: int | None = None
    breakdown: ScoreBreakdown = ScoreBreakdown()
    matched_keywords: list[CategorizedKeyword] = []
    missing_keywords: list[CategorizedKeyword] = []


class ScanSnapshot(BaseModel):
    """What the persistence layer stores against a resume version / job pair."""
    match_score: int = 0
    matched_keywords: list[CategorizedKeyword] = []
    missing_keywords: list[CategorizedKeyword] = []
    feedback: str = ""


class ExtractKeywordsResponse(BaseModel):
    keywords: list[CategorizedKeyword] = []


class CategorizeResponse(BaseModel):
    term: str
    category: KeywordCategory
