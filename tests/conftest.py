"""
Test Configuration and Fixtures
"""
import fitz  # PyMuPDF
import pytest
from fastapi.testclient import TestClient

from config import get_settings


def make_pdf(*pages: str) -> bytes:
    """Build a small text PDF, one page per string"""
    doc = fitz.open()
    for text in pages or ("Hello PDF",):
        page = doc.new_page()
        page.insert_text((72, 72), text, fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    """Isolate settings from the host environment"""
    for name in ("PDF2TXT_HOST", "PDF2TXT_PORT", "PDF2TXT_LIBRARY", "PDF2TXT_PDFTOTEXT", "PDF2TXT_DEFAULT_FOLDER", "PDF2TXT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PDF2TXT_OPEN_FOLDER", "0")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def pdf_bytes():
    return make_pdf("Hello PDF")


@pytest.fixture
def pdf_factory():
    return make_pdf


@pytest.fixture
def client():
    from app import app
    return TestClient(app)
