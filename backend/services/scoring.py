"""ATS scoring: compare JD skills against resume skills.

The score is the share of job-description skills that the resume also
mentions. Tiers and recommendations are fixed bands over that score.
"""

from models.schemas.scoring import ScoreResult

# (lower bound, label) - first band whose bound is <= score wins
SCORE_LEVELS: list[tuple[int, str]] = [
    (85, "Excellent"),
    (70, "Good"),
    (50, "Fair"),
    (0, "Needs Improvement"),
]

RECOMMENDATIONS: list[tuple[int, str]] = [
    (85, "🎉 STRONG MATCH! You should definitely apply for this position."),
    (70, "✅ GOOD MATCH! You should apply. Focus on highlighting your matching skills."),
    (50, "⚠️ MODERATE MATCH! Consider applying if you have related experience."),
    (30, "🤔 WEAK MATCH! Only apply if you have strong related experience."),
    (0, "❌ POOR MATCH! Not recommended to apply. Consider upskilling first."),
]


def compute_ats_score(matched_count: int, jd_count: int) -> int:
    """Percentage of JD skills matched, rounded half-up. 0 for an empty JD."""
    if jd_count <= 0:
        return 0
    # Integer arithmetic so x.5 always rounds up
    return (200 * matched_count + jd_count) // (2 * jd_count)


def compare_skills(resume_skills: list[str], jd_skills: list[str]) -> ScoreResult:
    """Split JD skills into matched and missing, keeping JD order."""
    resume_set = set(resume_skills)
    jd_unique = list(dict.fromkeys(jd_skills))

    matched = [s for s in jd_unique if s in resume_set]
    missing = [s for s in jd_unique if s not in resume_set]

    return ScoreResult(
        matched_skills=matched,
        missing_skills=missing,
        ats_score=compute_ats_score(len(matched), len(jd_unique)),
    )


def _band(score: int, bands: list[tuple[int, str]]) -> str:
    for lower, label in bands:
        if score >= lower:
            return label
    return bands[-1][1]


def get_score_level(score: int) -> str:
    return _band(score, SCORE_LEVELS)


def get_recommendation(
    score: int,
    matched_skills: list[str] | None = None,
    missing_skills: list[str] | None = None,
) -> str:
    """Canned guidance for a score.

    The skill lists are accepted for call-site symmetry; the tier depends
    on the score alone.
    """
    return _band(score, RECOMMENDATIONS)
