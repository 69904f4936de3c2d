import io
import json

import pytest
from fastapi.testclient import TestClient
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from simplifier.api.deps import get_llm_provider
from simplifier.core.config import get_settings
from simplifier.core.llm import DummyLLMClient
from simplifier.main import app

CONTRACT_TEXT = (
    "This Agreement is between Acme Corp and Beta LLC. Beta LLC shall deliver "
    "monthly maintenance services. Acme Corp shall pay $2,000 per month, due on "
    "the first business day of each month. The term renews automatically for "
    "successive one-year periods unless either party gives 60 days notice."
)

FULL_SUMMARY = {
    "tldr": "Acme pays Beta $2,000 a month for maintenance; it auto-renews yearly.",
    "partiesPurpose": "Acme Corp (customer) hires Beta LLC (vendor) for maintenance.",
    "obligations": {
        "you": ["Pay $2,000 on the first business day of each month."],
        "them": ["Deliver monthly maintenance services."],
    },
    "moneyAndDates": {
        "payments": ["$2,000 per month"],
        "dates": ["60 days notice before renewal to cancel"],
    },
    "riskFlags": ["Automatic one-year renewal."],
    "actions": ["Put the renewal notice deadline in your calendar."],
    "unknowns": ["No liability cap is mentioned."],
    "excerpt": "renews automatically for successive one-year periods",
    "confidence": 0.85,
}


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def contract_text() -> str:
    return CONTRACT_TEXT


@pytest.fixture
def full_summary() -> dict:
    return json.loads(json.dumps(FULL_SUMMARY))


@pytest.fixture
def full_summary_json() -> str:
    return json.dumps(FULL_SUMMARY)


@pytest.fixture
def make_pdf():
    """Build a PDF with one page per string; '' gives a blank page."""

    def _make(*pages: str) -> bytes:
        buf = io.BytesIO()
        pdf = canvas.Canvas(buf, pagesize=A4)
        for text in pages:
            if text:
                pdf.drawString(72, 720, text)
            pdf.showPage()
        pdf.save()
        return buf.getvalue()

    return _make


@pytest.fixture
def dummy_llm() -> DummyLLMClient:
    return DummyLLMClient()


@pytest.fixture
def client(dummy_llm):
    app.dependency_overrides[get_llm_provider] = lambda: (lambda: dummy_llm)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
