import os
import tempfile
from pathlib import Path

from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    max_upload_size_mb: int = 50
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    debug: bool = False
    log_level: str = "INFO"

    rate_limit: str = "30/minute"
    rate_limit_enabled: bool = True

    # Request validation
    min_job_description_length: int = 10
    min_manual_text_length: int = 50  # manual text must be longer than this to bypass extraction

    # Extraction pipeline
    min_extracted_chars: int = 100  # a strategy's text must be longer than this
    min_usable_text_length: int = 50
    raw_scan_bytes: int = 10000
    recovery_dir: Path = Path(tempfile.gettempdir()) / "ats-skill-matcher"

    # Response previews
    preview_length: int = 200
    result_preview_length: int = 400

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
