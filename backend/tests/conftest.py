"""Shared test configuration, pytest markers and document builders."""

import io

import pytest

from config import settings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: runs the real document parsers on generated files"
    )


def build_pdf(lines: list[str]) -> bytes:
    """Build a minimal one-page PDF with uncompressed Helvetica text lines."""
    ops = ["BT", "/F1 11 Tf", "14 TL", "72 720 Td"]
    for line in lines:
        escaped = line.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        ops.append(f"({escaped}) Tj T*")
    ops.append("ET")
    stream = "\n".join(ops).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 4 0 R >> >> /Contents 5 0 R >>",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_at,
    )
    return bytes(out)


def build_docx(lines: list[str]) -> bytes:
    from docx import Document

    doc = Document()
    for line in lines:
        doc.add_paragraph(line)
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


RESUME_LINES = [
    "Jane Doe - Senior Software Engineer",
    "Built Python microservices and deployed them with Docker on AWS",
    "Developed React dashboards backed by PostgreSQL",
    "Strong communication and leadership, mentored four engineers",
]


@pytest.fixture
def resume_lines() -> list[str]:
    return list(RESUME_LINES)


@pytest.fixture
def resume_pdf() -> bytes:
    return build_pdf(RESUME_LINES)


@pytest.fixture
def resume_docx() -> bytes:
    return build_docx(RESUME_LINES)


@pytest.fixture(autouse=True)
def recovery_dir(tmp_path, monkeypatch):
    """Keep recovery writes inside the test's temp directory."""
    target = tmp_path / "recovery"
    monkeypatch.setattr(settings, "recovery_dir", target)
    return target
