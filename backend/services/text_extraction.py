"""Resume text extraction with an ordered fallback chain.

Strategies run from most faithful to most tolerant and the first one that
yields enough text wins:

1. pdfplumber (structured PDF parse), python-docx for Word payloads
2. pdfminer layout walk (event stream of text items)
3. raw scan of literal "(...)" runs in the first bytes of the payload
4. recovery: save the payload to disk and return guidance text

Every strategy has the same ``(payload) -> str | None`` signature and any
exception it raises is treated as "no result". Nothing escapes
``extract_text``.
"""

import io
import logging
import re
import uuid
from pathlib import Path
from typing import Callable

import pdfplumber
from docx import Document
from pdfminer.high_level import extract_pages
from pdfminer.layout import LTTextContainer

from config import settings
from models.schemas.extraction import FAILED_METHOD, ExtractionAttempt, ExtractionResult

logger = logging.getLogger(__name__)

Strategy = Callable[[bytes], str | None]

MANUAL_METHOD = "manual text input"

RECOVERY_MESSAGE = (
    "Resume received but could not extract text automatically. Please try:\n"
    "1. Convert the document to text using an online tool\n"
    "2. Save it in a different format (PDF or DOCX)\n"
    "3. Copy text manually and paste it"
)

PDF_SIGNATURE = b"%PDF-"
ZIP_SIGNATURE = b"PK\x03\x04"

# Literal strings in PDF content streams: "(Hello) Tj"
_LITERAL_RUN_RE = re.compile(r"\(([^)]+)\)")
_ESCAPE_RE = re.compile(r"\\\w+")
_WHITESPACE_RE = re.compile(r"\s+")


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def extract_with_pdfplumber(payload: bytes) -> str | None:
    """Full-fidelity PDF parse, one block of text per page."""
    with pdfplumber.open(io.BytesIO(payload)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_with_docx(payload: bytes) -> str | None:
    """Word (.docx) paragraphs. Skips anything that is not a zip container."""
    if not payload.startswith(ZIP_SIGNATURE):
        return None
    doc = Document(io.BytesIO(payload))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_with_pdfminer(payload: bytes) -> str | None:
    """Walk pdfminer's layout items and join their text with single spaces."""
    fragments: list[str] = []
    for page_layout in extract_pages(io.BytesIO(payload)):
        for element in page_layout:
            if isinstance(element, LTTextContainer):
                fragment = " ".join(element.get_text().split())
                if fragment:
                    fragments.append(fragment)
    return " ".join(fragments)


def extract_raw_text(payload: bytes) -> str | None:
    """Pull literal text runs straight out of the undecoded bytes.

    Tolerates broken xref tables and odd encodings that defeat the real
    parsers, as long as page content is stored uncompressed.
    """
    chunk = payload[: settings.raw_scan_bytes].decode("utf-8", errors="replace")
    runs = _LITERAL_RUN_RE.findall(chunk)
    text = _ESCAPE_RE.sub(" ", " ".join(runs))
    return _WHITESPACE_RE.sub(" ", text).strip()


EXTRACTION_STRATEGIES: list[tuple[str, Strategy]] = [
    ("pdfplumber", extract_with_pdfplumber),
    ("python-docx", extract_with_docx),
    ("pdfminer", extract_with_pdfminer),
    ("raw extraction", extract_raw_text),
]


# ---------------------------------------------------------------------------
# Recovery
# ---------------------------------------------------------------------------

def _guess_suffix(payload: bytes) -> str:
    if payload.startswith(PDF_SIGNATURE):
        return ".pdf"
    if payload.startswith(ZIP_SIGNATURE):
        return ".docx"
    return ".bin"


def save_for_recovery(payload: bytes, directory: Path | None = None) -> str | None:
    """Write the payload under a per-request unique name for manual processing."""
    directory = Path(directory or settings.recovery_dir)
    target = directory / f"resume-{uuid.uuid4().hex}{_guess_suffix(payload)}"
    try:
        directory.mkdir(parents=True, exist_ok=True)
        target.write_bytes(payload)
    except OSError as e:
        logger.error("Could not save resume for recovery at %s: %s", target, e)
        return None
    logger.info("Resume saved for manual processing: %s", target)
    return str(target)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def _attempt(method_name: str, strategy: Strategy, payload: bytes) -> ExtractionAttempt:
    try:
        text = strategy(payload)
    except Exception as e:
        logger.warning("Extraction method %s failed: %s", method_name, e)
        return ExtractionAttempt(method_name=method_name)

    succeeded = text is not None and len(text) > settings.min_extracted_chars
    if succeeded:
        logger.info("Extraction method %s successful: %d chars", method_name, len(text))
    else:
        logger.info(
            "Extraction method %s yielded too little text (%d chars)",
            method_name, len(text or ""),
        )
    return ExtractionAttempt(method_name=method_name, text=text, succeeded=succeeded)


def uses_manual_text(manual_text: str | None) -> bool:
    """True when pasted text is long enough to replace document parsing."""
    return bool(manual_text) and len(manual_text.strip()) > settings.min_manual_text_length


def extract_text(
    payload: bytes | None,
    manual_text: str | None = None,
    strategies: list[tuple[str, Strategy]] | None = None,
) -> ExtractionResult:
    """Turn a resume payload into lower-cased plain text.

    Manual text accepted by ``uses_manual_text`` is used as is and the
    document is never parsed.
    """
    if uses_manual_text(manual_text):
        logger.info("Using manual text input (%d chars)", len(manual_text))
        return ExtractionResult(text=manual_text, method=MANUAL_METHOD)

    payload = payload or b""
    strategies = EXTRACTION_STRATEGIES if strategies is None else strategies
    logger.info("Trying %d extraction methods on %d bytes", len(strategies), len(payload))

    attempts: list[ExtractionAttempt] = []
    for method_name, strategy in strategies:
        attempt = _attempt(method_name, strategy, payload)
        attempts.append(attempt)
        if attempt.succeeded:
            return ExtractionResult(
                text=attempt.text.lower(),
                method=method_name,
                attempts=attempts,
            )

    logger.warning("All extraction methods failed, saving resume for recovery")
    return ExtractionResult(
        text=RECOVERY_MESSAGE,
        method=FAILED_METHOD,
        recovered_file_path=save_for_recovery(payload),
        attempts=attempts,
    )
