"""Image analysis pipeline: fetch, encode, compose, invoke, extract."""

import logging
from enum import Enum

from uicritic.config import get_generation_config, get_safety_policy
from uicritic.exceptions import AnalysisError, ValidationError
from uicritic.models.analysis import AnalysisResult, AnalyzeRequest
from uicritic.services import composer, encoder, extractor, fetcher
from uicritic.services.invoker import ModelInvoker, get_invoker

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing imageUrl, prompt, or mimeType in request body"


class Stage(str, Enum):
    VALIDATING = "validating"
    FETCHING = "fetching"
    ENCODING = "encoding"
    COMPOSING = "composing"
    INVOKING = "invoking"
    EXTRACTING = "extracting"
    DONE = "done"
    FAILED = "failed"


def validate(req: AnalyzeRequest) -> tuple[str, str, str]:
    if not req.image_url or not req.prompt or not req.mime_type:
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    return req.image_url, req.prompt, req.mime_type


def analyze(req: AnalyzeRequest, invoker: ModelInvoker | None = None) -> AnalysisResult:
    """Run one analysis request through every stage in order.

    Any AnalysisError is tagged with the stage it occurred in and re-raised.
    There is no retry; callers re-issue the whole request.
    """
    stage = Stage.VALIDATING
    try:
        image_url, prompt, mime_type = validate(req)

        stage = Stage.FETCHING
        logger.debug("Fetching %s", image_url)
        data = fetcher.fetch(image_url)

        stage = Stage.ENCODING
        part = encoder.encode(data, mime_type)

        stage = Stage.COMPOSING
        request = composer.compose(prompt, part, get_generation_config(), get_safety_policy())

        stage = Stage.INVOKING
        logger.debug("Invoking model with %d-byte %s image", len(data), mime_type)
        completion = (invoker or get_invoker()).invoke(request)

        stage = Stage.EXTRACTING
        text = extractor.extract(completion)
    except AnalysisError as e:
        e.stage = stage.value
        logger.warning("Analysis %s while %s: %s", Stage.FAILED.value, stage.value, e)
        raise

    stage = Stage.DONE
    logger.debug("Analysis %s (%d chars)", stage.value, len(text))
    return AnalysisResult(analysis=text)


def analyze_image(image_url: str, prompt: str, mime_type: str) -> AnalysisResult:
    """Convenience wrapper taking the three fields directly."""
    return analyze(AnalyzeRequest(image_url=image_url, prompt=prompt, mime_type=mime_type))
