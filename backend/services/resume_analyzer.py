"""Orchestrator: resume vs. job description skill analysis.

Pipeline:
1. Validate inputs (nothing is parsed for a rejected request)
2. Extract resume text (manual text, or the extraction fallback chain)
3. Reject degraded extraction with remediation steps
4. Detect vocabulary skills in resume and job description
5. Score JD skill coverage
6. Render the summary and assemble the AnalysisResult
"""

import logging

from config import settings
from models.responses import AnalysisResult
from models.schemas.skill_vocabulary import SkillVocabulary
from services import text_extraction
from services.errors import ExtractionFailedError, InvalidAnalysisRequest
from services.report_builder import build_summary
from services.scoring import compare_skills
from services.skill_matcher import find_skills
from services.skill_vocabulary import DEFAULT_VOCABULARY

logger = logging.getLogger(__name__)

EXTRACTION_SUGGESTIONS: list[str] = [
    "Copy and paste your resume text directly",
    "Convert the document to text using: https://tools.pdf24.org/en/pdf-to-text",
    "Save it in a different format (PDF or DOCX)",
    "Ensure the document is not password protected or scanned",
]

JOB_DESCRIPTION_SUGGESTIONS: list[str] = [
    "Paste the full job description, including required skills",
]

RESUME_SUGGESTIONS: list[str] = [
    "Upload your resume as a PDF or DOCX file",
    f"Or paste at least {settings.min_manual_text_length} characters of resume text",
]


def _validate_job_description(job_description: str | None) -> None:
    if not job_description or len(job_description.strip()) < settings.min_job_description_length:
        raise InvalidAnalysisRequest(
            "Please provide a detailed job description", JOB_DESCRIPTION_SUGGESTIONS
        )


def _is_unusable(text: str, extraction_failed: bool) -> bool:
    return (
        extraction_failed
        or len(text) < settings.min_usable_text_length
        or text == text_extraction.RECOVERY_MESSAGE
    )


def _build_result(
    resume_text: str,
    job_description: str,
    vocabulary: SkillVocabulary,
    extraction_method: str | None,
) -> AnalysisResult:
    resume_skills = find_skills(resume_text, vocabulary)
    jd_skills = find_skills(job_description, vocabulary)
    logger.info("Skills in resume: %s", resume_skills)
    logger.info("Skills in job: %s", jd_skills)

    score = compare_skills(resume_skills, jd_skills)
    logger.info(
        "ATS score %d%% (matched=%s, missing=%s)",
        score.ats_score, score.matched_skills, score.missing_skills,
    )

    summary = build_summary(
        score.ats_score,
        score.matched_skills,
        score.missing_skills,
        extraction_method,
        len(resume_text) if extraction_method is not None else None,
    )

    preview = None
    if extraction_method is not None:
        preview = resume_text[: settings.result_preview_length] + "..."

    return AnalysisResult(
        matched_skills=score.matched_skills,
        missing_skills=score.missing_skills,
        ats_score=score.ats_score,
        summary=summary,
        resume_skills_count=len(resume_skills),
        jd_skills_count=len(jd_skills),
        extraction_method=extraction_method,
        resume_text_length=len(resume_text),
        extracted_resume_preview=preview,
    )


def analyze_document(
    job_description: str,
    document: bytes | None = None,
    manual_text: str | None = None,
    vocabulary: SkillVocabulary = DEFAULT_VOCABULARY,
) -> AnalysisResult:
    """Analyze an uploaded resume (or manually pasted text) against a JD.

    Raises InvalidAnalysisRequest before any extraction when inputs are
    unusable, and ExtractionFailedError when the document yields no usable
    text.
    """
    _validate_job_description(job_description)
    if document is None and not text_extraction.uses_manual_text(manual_text):
        raise InvalidAnalysisRequest("No resume file or resume text provided", RESUME_SUGGESTIONS)

    logger.info(
        "Resume analysis started: document=%s bytes, job description=%d chars",
        len(document) if document is not None else "no", len(job_description),
    )

    extraction = text_extraction.extract_text(document, manual_text)
    resume_text = extraction.text
    logger.info("Extraction method: %s, text length: %d", extraction.method, len(resume_text))

    if _is_unusable(resume_text, extraction.failed):
        logger.warning("Insufficient text extracted (method=%s)", extraction.method)
        raise ExtractionFailedError(
            "Could not extract sufficient text from the resume document",
            EXTRACTION_SUGGESTIONS,
            extracted_preview=resume_text[: settings.preview_length],
            recovered_file_path=extraction.recovered_file_path,
        )

    return _build_result(resume_text, job_description, vocabulary, extraction.method)


def analyze_text(
    resume_text: str,
    job_description: str,
    vocabulary: SkillVocabulary = DEFAULT_VOCABULARY,
) -> AnalysisResult:
    """Analyze plain resume text against a JD, skipping extraction entirely."""
    if not resume_text or not resume_text.strip() or not job_description or not job_description.strip():
        raise InvalidAnalysisRequest("Both resume text and job description are required")

    return _build_result(resume_text, job_description, vocabulary, extraction_method=None)
