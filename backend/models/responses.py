from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    matched_skills: list[str] = []
    missing_skills: list[str] = []
    ats_score: int = 0
    summary: str = ""
    resume_skills_count: int = 0
    jd_skills_count: int = 0
    extraction_method: str | None = None  # None when plain text was supplied directly
    resume_text_length: int = 0
    extracted_resume_preview: str | None = None
    success: bool = True


class ErrorResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    error: str
    details: str | None = None
    suggestion: str | None = None
    suggestions: list[str] = []
    extracted_preview: str | None = None
    recovered_file_path: str | None = None
    success: bool = False


class HealthResponse(BaseModel):
    status: str = "Healthy"
    message: str = ""
    timestamp: str = ""
