from fastmcp import FastMCP

from uicritic.config import get_settings
from uicritic.exceptions import AnalysisError, ValidationError
from uicritic.services import analysis as analysis_service

mcp = FastMCP("uicritic")


def _handle_mcp_error(e: Exception) -> dict:
    """Convert exceptions to agent-friendly error dicts."""
    if isinstance(e, ValidationError):
        return {"error": "validation_error", "message": str(e), "action": "Provide image_url, prompt and mime_type"}
    if isinstance(e, AnalysisError):
        return {"error": "analysis_error", "message": str(e), "stage": e.stage}
    return {"error": "unknown_error", "message": str(e)}


@mcp.tool
def analyze_image(image_url: str, prompt: str, mime_type: str = "image/png") -> dict:
    """Download an image (e.g. a web page screenshot) and return the model's critique of it.
    mime_type must match the image format: image/png, image/jpeg or image/webp."""
    try:
        return analysis_service.analyze_image(image_url, prompt, mime_type).model_dump()
    except Exception as e:
        return _handle_mcp_error(e)


@mcp.tool
def uicritic_status() -> dict:
    """Report which model is configured and whether the API key is set."""
    settings = get_settings()
    return {"model": settings.gemini_model, "ready": bool(settings.gemini_api_key)}
