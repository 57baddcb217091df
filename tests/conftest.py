import io

import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with a comment-like line."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "alice: Great post!")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a three-page PDF with one comment per page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for number in range(1, 4):
        c.drawString(72, 720, f"user{number}: comment on page {number}")
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """Generate a small PNG standing in for a screenshot."""
    buf = io.BytesIO()
    Image.new("RGB", (20, 10), color="white").save(buf, format="PNG")
    return buf.getvalue()
