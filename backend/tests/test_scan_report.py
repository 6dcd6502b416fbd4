from conftest import kw
from services.gap_analyzer import analyze_gaps
from services.scan_report import build_feedback, build_scan_snapshot
from services.score_calculator import calculate_ats_score

JOB_KEYWORDS = [
    kw("react"),
    kw("typescript"),
    kw("docker"),
    kw("kubernetes"),
    kw("leadership", "soft_skill"),
    kw("agile", "general"),
]


def _score_and_gaps(resume):
    return calculate_ats_score(resume, JOB_KEYWORDS), analyze_gaps(resume, JOB_KEYWORDS)


def test_feedback_for_strong_resume(make_resume):
    resume = make_resume(
        hard=["React", "TypeScript", "Docker", "Kubernetes"],
        soft=["Leadership"],
        summary="Agile React TypeScript Docker Kubernetes leadership",
    )
    result, gaps = _score_and_gaps(resume)
    feedback = build_feedback(result, gaps)

    assert result.score >= 80
    assert feedback.startswith("Excellent match!")
    assert "you match 4 key technical requirements" in feedback
    assert "Key skills to add" not in feedback
    assert "Top recommendations" not in feedback


def test_feedback_for_weak_resume(make_resume):
    result, gaps = _score_and_gaps(make_resume(hard=["Java"]))
    lines = build_feedback(result, gaps).splitlines()

    assert lines[0].startswith("Low match.")
    assert "Strong technical alignment" not in "\n".join(lines)
    assert lines[1] == "Key skills to add: react, typescript, docker"
    assert lines[2] == "Top recommendations:"
    assert lines[3].startswith('1. Add "react"')
    assert lines[5].startswith("3. ")
    assert len(lines) == 6


def test_scan_snapshot(make_resume):
    resume = make_resume(hard=["React"], summary="agile")
    result, gaps = _score_and_gaps(resume)
    snapshot = build_scan_snapshot(result, gaps)

    assert snapshot.match_score == result.score
    assert [k.keyword for k in snapshot.matched_keywords] == ["react", "agile"]
    assert [k.keyword for k in snapshot.missing_keywords] == [
        "typescript", "docker", "kubernetes", "leadership",
    ]
    assert snapshot.feedback == build_feedback(result, gaps)
