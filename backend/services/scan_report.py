"""Template-based feedback and the snapshot handed to scan persistence.

Deterministic text only; the wording depends on nothing but the score and
keyword lists.
"""

from models.responses import GapAnalysis, ScanSnapshot, ScoreResult

# Number of missing skills / suggestions quoted in feedback
MAX_LISTED_SKILLS = 3
MAX_RECOMMENDATIONS = 3


def _assessment(score: int) -> str:
    if score >= 80:
        return "Excellent match! Your resume aligns very well with this job description."
    if score >= 60:
        return "Good match! Your resume shows relevant qualifications with some areas for improvement."
    if score >= 40:
        return "Moderate match. Consider emphasizing more relevant skills and experiences."
    return "Low match. This role may require skills or experiences not currently highlighted in your resume."


def build_feedback(result: ScoreResult, gaps: GapAnalysis) -> str:
    """Generate actionable feedback text for a scored resume."""
    parts = [_assessment(result.score)]

    hard_matches = [k for k in result.matched_keywords if k.category == "hard_skill"]
    if hard_matches:
        parts.append(
            f"Strong technical alignment: you match {len(hard_matches)} key technical requirements."
        )

    missing_skills = gaps.gaps_by_category.hard_skills[:MAX_LISTED_SKILLS]
    if missing_skills:
        parts.append(f"Key skills to add: {', '.join(k.keyword for k in missing_skills)}")

    if gaps.suggestions:
        parts.append("Top recommendations:")
        for i, s in enumerate(gaps.suggestions[:MAX_RECOMMENDATIONS], start=1):
            parts.append(f"{i}. {s.suggestion}")

    return "\n".join(parts)


def build_scan_snapshot(result: ScoreResult, gaps: GapAnalysis) -> ScanSnapshot:
    """Collect what gets stored for a resume-version / job pair.

    Missing keywords come from the gap analysis, so they are priority sorted.
    """
    return ScanSnapshot(
        match_score=result.score,
        matched_keywords=result.matched_keywords,
        missing_keywords=gaps.missing_keywords,
        feedback=build_feedback(result, gaps),
    )
