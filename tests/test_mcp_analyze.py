import pytest

from uicritic.config import Settings
from uicritic.exceptions import ResourceFetchError, ValidationError
from uicritic.models.analysis import AnalysisResult


@pytest.fixture(autouse=True)
def mock_svc(mocker):
    return mocker.patch("uicritic.mcp_server.analysis_service")


class TestAnalyzeImage:
    def test_returns_dict(self, mock_svc):
        mock_svc.analyze_image.return_value = AnalysisResult(analysis="The layout is cluttered.")
        from uicritic.mcp_server import analyze_image
        result = analyze_image.fn(image_url="https://x/img.png", prompt="Analyze this webpage UI")
        assert result == {"analysis": "The layout is cluttered."}
        mock_svc.analyze_image.assert_called_once_with("https://x/img.png", "Analyze this webpage UI", "image/png")

    def test_validation_error_returns_dict_not_raises(self, mock_svc):
        mock_svc.analyze_image.side_effect = ValidationError("Missing imageUrl, prompt, or mimeType in request body")
        from uicritic.mcp_server import analyze_image
        result = analyze_image.fn(image_url="", prompt="p")
        assert result["error"] == "validation_error"

    def test_analysis_error_reports_stage(self, mock_svc):
        err = ResourceFetchError("Not Found")
        err.stage = "fetching"
        mock_svc.analyze_image.side_effect = err
        from uicritic.mcp_server import analyze_image
        result = analyze_image.fn(image_url="https://x/img.png", prompt="p")
        assert result == {"error": "analysis_error", "message": "Not Found", "stage": "fetching"}


class TestStatus:
    def test_not_ready_without_key(self, mocker):
        mocker.patch("uicritic.mcp_server.get_settings", return_value=Settings(gemini_api_key="", _env_file=None))
        from uicritic.mcp_server import uicritic_status
        assert uicritic_status.fn() == {"model": "gemini-1.5-flash", "ready": False}


class TestUnexpectedError:
    def test_returns_dict_not_raises(self, mock_svc):
        mock_svc.analyze_image.side_effect = RuntimeError("boom")
        from uicritic.mcp_server import analyze_image
        result = analyze_image.fn(image_url="https://x/img.png", prompt="p")
        assert result == {"error": "unknown_error", "message": "boom"}
