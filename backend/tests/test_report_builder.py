"""Tests for the summary template."""

from models.responses import AnalysisResult
from services.report_builder import build_summary, summary_for


def test_summary_without_extraction_block():
    summary = build_summary(33, ["python"], ["react", "aws"])
    assert summary == (
        "📊 ATS COMPATIBILITY SCORE: 33% - Needs Improvement\n"
        "\n"
        "✅ Matched Skills (1): python\n"
        "\n"
        "📋 Missing Skills (2): react, aws\n"
        "\n"
        "💡 Recommendation: 🤔 WEAK MATCH! Only apply if you have strong related experience."
    )


def test_summary_with_extraction_block():
    summary = build_summary(100, ["python", "docker"], [], "pdfplumber", 1234)
    assert summary == (
        "📊 ATS COMPATIBILITY SCORE: 100% - Excellent\n"
        "\n"
        "✅ Matched Skills (2): python, docker\n"
        "\n"
        "📋 Missing Skills (0): None - Great job!\n"
        "\n"
        "💡 Recommendation: 🎉 STRONG MATCH! You should definitely apply for this position.\n"
        "\n"
        "Extraction Method: pdfplumber\n"
        "Text Length: 1234 characters"
    )


def test_empty_matched_placeholder():
    summary = build_summary(0, [], ["python"])
    assert "✅ Matched Skills (0): None\n" in summary
    assert "❌ POOR MATCH!" in summary


def test_summary_reproducible_from_result():
    summary = build_summary(50, ["sql"], ["git"], "manual text input", 80)
    result = AnalysisResult(
        matched_skills=["sql"],
        missing_skills=["git"],
        ats_score=50,
        summary=summary,
        extraction_method="manual text input",
        resume_text_length=80,
    )
    assert summary_for(result) == result.summary
