import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.applications import Starlette
from starlette.routing import Mount

from uicritic.config import get_settings, validate_settings
from uicritic.exceptions import AnalysisError, ValidationError
from uicritic.mcp_server import mcp
from uicritic.models.common import ErrorResponse, StatusResponse
from uicritic.routers.analyze import router as analyze_router
from uicritic.services.analysis import MISSING_FIELDS_MESSAGE

logger = logging.getLogger(__name__)

ANALYSIS_FAILED_MESSAGE = "Failed to analyze image."


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# --- FastAPI app ---

@asynccontextmanager
async def api_lifespan(app: FastAPI):
    validate_settings()
    yield


api = FastAPI(title="uicritic", version="0.1.0", lifespan=api_lifespan)
api.include_router(analyze_router)


@api.get("/api/status")
def api_status() -> StatusResponse:
    settings = get_settings()
    return StatusResponse(model=settings.gemini_model, ready=bool(settings.gemini_api_key))


# --- Exception handlers ---

def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@api.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    return _error(400, MISSING_FIELDS_MESSAGE)


@api.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return _error(400, str(exc))


@api.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    return _error(500, ANALYSIS_FAILED_MESSAGE, str(exc))


@api.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unexpected error during analysis")
    return _error(500, ANALYSIS_FAILED_MESSAGE, str(exc) or "An unknown error occurred")


# --- Starlette root app ---

mcp_app = mcp.http_app(path="/", stateless_http=True)


@asynccontextmanager
async def lifespan(app: Starlette):
    validate_settings()
    async with mcp_app.lifespan(app):
        yield


app = Starlette(
    routes=[
        Mount("/mcp", app=mcp_app),
        Mount("/", app=api),
    ],
    lifespan=lifespan,
)


def run():
    settings = get_settings()
    _setup_logging(settings.log_level)
    validate_settings(settings)
    logger.info("Serving %s on %s:%s", settings.gemini_model, settings.host, settings.port)
    uvicorn.run(
        "uicritic.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
