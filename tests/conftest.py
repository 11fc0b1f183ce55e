import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from uicritic.models.analysis import GenerationCompletion
from uicritic.services.invoker import ModelInvoker


# --- Canned data ---

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"

IMAGE_URL = "https://x/img.png"

ANALYZE_BODY = {
    "imageUrl": IMAGE_URL,
    "prompt": "Analyze this webpage UI",
    "mimeType": "image/png",
}


def make_http_response(status_code: int = 200, content: bytes = PNG_BYTES, reason: str = "OK") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    resp.reason = reason
    return resp


@pytest.fixture
def mock_session(mocker):
    """Shared HTTP session returning a 200 PNG by default."""
    session = MagicMock()
    session.get.return_value = make_http_response()
    mocker.patch("uicritic.services.fetcher.get_session", return_value=session)
    return session


@pytest.fixture
def mock_invoker(mocker):
    """Model invoker answering "The layout is cluttered." by default."""
    invoker = MagicMock(spec=ModelInvoker)
    invoker.invoke.return_value = GenerationCompletion(text="The layout is cluttered.", finish_reason="STOP")
    mocker.patch("uicritic.services.analysis.get_invoker", return_value=invoker)
    return invoker


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests."""
    from uicritic.main import api
    return TestClient(api)
