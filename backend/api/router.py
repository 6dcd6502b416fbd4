from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_vocabulary
from config import settings
from models.requests import AnalyzeRequest, CategorizeRequest, ExtractKeywordsRequest
from models.responses import (
    CategorizeResponse,
    ExtractKeywordsResponse,
    GapAnalysis,
    ScanSnapshot,
    ScoreResult,
)
from models.schemas.keyword import CategorizedKeyword
from services import gap_analyzer, keyword_extractor, scan_report, score_calculator
from services.vocabulary import KeywordVocabulary

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_length(job_description: str) -> None:
    if len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )


def _job_keywords(body: AnalyzeRequest, vocabulary: KeywordVocabulary) -> list[CategorizedKeyword]:
    """Use caller-supplied keywords, or extract them from the job text."""
    if body.job_keywords is not None:
        return body.job_keywords
    _check_length(body.job_description)
    return keyword_extractor.extract_categorized_keywords(body.job_description, vocabulary)


@router.get("/health")
def health(vocabulary: KeywordVocabulary = Depends(get_vocabulary)):
    return {
        "status": "ok",
        "vocabulary_terms": vocabulary.term_count,
    }


@router.post("/keywords/extract", response_model=ExtractKeywordsResponse)
@limiter.limit(settings.rate_limit)
def extract_keywords(
    request: Request,
    body: ExtractKeywordsRequest,
    vocabulary: KeywordVocabulary = Depends(get_vocabulary),
):
    _check_length(body.job_description)
    keywords = keyword_extractor.extract_categorized_keywords(body.job_description, vocabulary)
    return ExtractKeywordsResponse(keywords=keywords)


@router.post("/keywords/categorize", response_model=CategorizeResponse)
@limiter.limit(settings.rate_limit)
def categorize(
    request: Request,
    body: CategorizeRequest,
    vocabulary: KeywordVocabulary = Depends(get_vocabulary),
):
    return CategorizeResponse(
        term=body.term,
        category=keyword_extractor.categorize_keyword(body.term, vocabulary),
    )


@router.post("/analyze/score", response_model=ScoreResult)
@limiter.limit(settings.rate_limit)
def analyze_score(
    request: Request,
    body: AnalyzeRequest,
    vocabulary: KeywordVocabulary = Depends(get_vocabulary),
):
    return score_calculator.calculate_ats_score(body.resume, _job_keywords(body, vocabulary))


@router.post("/analyze/gaps", response_model=GapAnalysis)
@limiter.limit(settings.rate_limit)
def analyze_gaps(
    request: Request,
    body: AnalyzeRequest,
    vocabulary: KeywordVocabulary = Depends(get_vocabulary),
):
    return gap_analyzer.analyze_gaps(body.resume, _job_keywords(body, vocabulary))


@router.post("/analyze/scan", response_model=ScanSnapshot)
@limiter.limit(settings.rate_limit)
def analyze_scan(
    request: Request,
    body: AnalyzeRequest,
    vocabulary: KeywordVocabulary = Depends(get_vocabulary),
):
    job_keywords = _job_keywords(body, vocabulary)
    result = score_calculator.calculate_ats_score(body.resume, job_keywords)
    gaps = gap_analyzer.analyze_gaps(body.resume, job_keywords)
    return scan_report.build_scan_snapshot(result, gaps)
