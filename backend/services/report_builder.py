"""Human-readable analysis summary."""

from models.responses import AnalysisResult
from services.scoring import get_recommendation, get_score_level


def build_summary(
    ats_score: int,
    matched_skills: list[str],
    missing_skills: list[str],
    extraction_method: str | None = None,
    text_length: int | None = None,
) -> str:
    """Render the fixed summary template.

    The extraction block is only appended when the text came through the
    extraction pipeline (or manual input), i.e. when a method is known.
    """
    matched = ", ".join(matched_skills) or "None"
    missing = ", ".join(missing_skills) or "None - Great job!"
    recommendation = get_recommendation(ats_score, matched_skills, missing_skills)

    summary = (
        f"📊 ATS COMPATIBILITY SCORE: {ats_score}% - {get_score_level(ats_score)}\n"
        f"\n"
        f"✅ Matched Skills ({len(matched_skills)}): {matched}\n"
        f"\n"
        f"📋 Missing Skills ({len(missing_skills)}): {missing}\n"
        f"\n"
        f"💡 Recommendation: {recommendation}"
    )
    if extraction_method is not None:
        summary += (
            f"\n\nExtraction Method: {extraction_method}\n"
            f"Text Length: {text_length or 0} characters"
        )
    return summary


def summary_for(result: AnalysisResult) -> str:
    """Re-render the summary from a result's own fields."""
    return build_summary(
        result.ats_score,
        result.matched_skills,
        result.missing_skills,
        result.extraction_method,
        result.resume_text_length,
    )
