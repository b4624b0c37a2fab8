from datetime import datetime, timezone

from fastapi import APIRouter, File, Form, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import TextAnalyzeRequest
from models.responses import AnalysisResult, HealthResponse
from services import resume_analyzer
from services.errors import InvalidAnalysisRequest

router = APIRouter(prefix="/api")
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="Healthy",
        message="Resume Analyzer API is running",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


# Plain def: FastAPI runs these in its threadpool, off the event loop.
@router.post("/resume/analyze", response_model=AnalysisResult)
@limiter.limit(settings.rate_limit)
def analyze_resume(
    request: Request,
    resume: UploadFile | None = File(None),
    job_description: str = Form("", alias="jobDescription"),
    resume_text: str = Form("", alias="resumeText"),
):
    content = None
    if resume is not None:
        content = resume.file.read()
        max_bytes = settings.max_upload_size_mb * 1024 * 1024
        if len(content) > max_bytes:
            raise InvalidAnalysisRequest(
                f"File too large. Max size: {settings.max_upload_size_mb}MB",
                ["Upload a smaller file or paste your resume text instead"],
            )

    return resume_analyzer.analyze_document(
        job_description,
        document=content,
        manual_text=resume_text,
    )


@router.post("/analyze-text", response_model=AnalysisResult)
@limiter.limit(settings.rate_limit)
def analyze_text(request: Request, body: TextAnalyzeRequest):
    return resume_analyzer.analyze_text(body.resume_text, body.job_description)
