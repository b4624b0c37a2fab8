import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import limiter, router
from config import settings
from logging_config import setup_logging
from models.responses import ErrorResponse
from services.errors import AnalysisError, ExtractionFailedError

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="ATS Skill Matcher API",
    description="Resume vs. job description skill matching and ATS scoring",
    version="1.0.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    body = ErrorResponse(error=exc.message, suggestions=exc.suggestions)
    if isinstance(exc, ExtractionFailedError):
        body = body.model_copy(update={
            "extracted_preview": exc.extracted_preview,
            "recovered_file_path": exc.recovered_file_path,
        })
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    suggestions = [
        f"{'.'.join(str(part) for part in err['loc'] if part != 'body')}: {err['msg']}"
        for err in exc.errors()
    ]
    body = ErrorResponse(error="Invalid request", suggestions=suggestions)
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True, exclude_none=True))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Analysis error on %s", request.url.path)
    body = ErrorResponse(
        error="Analysis failed",
        details=str(exc),
        suggestion="Please try pasting your resume text instead",
    )
    return JSONResponse(status_code=500, content=body.model_dump(by_alias=True, exclude_none=True))


app.include_router(router)
