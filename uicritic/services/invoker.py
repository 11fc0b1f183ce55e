"""Generative model invocation: provider-neutral interface plus the Gemini backend."""

import base64
import logging
from abc import ABC, abstractmethod
from functools import lru_cache

import httpx
from google import genai
from google.genai import errors, types

from uicritic.config import get_settings
from uicritic.exceptions import ModelInvocationError
from uicritic.models.analysis import (
    GenerationCompletion,
    GenerationRequest,
    InlineMediaPart,
    Message,
    TextPart,
)

logger = logging.getLogger(__name__)


class ModelInvoker(ABC):
    @abstractmethod
    def invoke(self, request: GenerationRequest) -> GenerationCompletion:
        """Send one request and return its completion. Raises ModelInvocationError on failure."""
        ...


def _to_part(part: TextPart | InlineMediaPart) -> types.Part:
    if isinstance(part, TextPart):
        return types.Part(text=part.text)
    return types.Part(
        inline_data=types.Blob(data=base64.b64decode(part.data), mime_type=part.mime_type),
    )


def _to_content(message: Message) -> types.Content:
    return types.Content(role=message.role, parts=[_to_part(p) for p in message.parts])


def _to_config(request: GenerationRequest) -> types.GenerateContentConfig:
    config = request.generation_config
    return types.GenerateContentConfig(
        temperature=config.temperature,
        top_k=config.top_k,
        top_p=config.top_p,
        max_output_tokens=config.max_output_tokens,
        safety_settings=[
            types.SafetySetting(
                category=types.HarmCategory(rule.category.value),
                threshold=types.HarmBlockThreshold(rule.threshold.value),
            )
            for rule in request.safety_policy.rules
        ],
    )


def _enum_name(value) -> str | None:
    if value is None:
        return None
    return str(getattr(value, "value", value))


def _to_completion(response: types.GenerateContentResponse) -> GenerationCompletion:
    """Flatten the first candidate's text parts, keeping why generation stopped."""
    block_reason = None
    if response.prompt_feedback is not None:
        block_reason = _enum_name(response.prompt_feedback.block_reason)

    if not response.candidates:
        return GenerationCompletion(block_reason=block_reason)

    candidate = response.candidates[0]
    parts = candidate.content.parts if candidate.content and candidate.content.parts else []
    texts = [p.text for p in parts if p.text is not None and not p.thought]
    return GenerationCompletion(
        text="".join(texts) if texts else None,
        finish_reason=_enum_name(candidate.finish_reason),
        block_reason=block_reason,
    )


class GeminiInvoker(ModelInvoker):

    def __init__(self, api_key: str, model: str, timeout: float | None = None) -> None:
        http_options = types.HttpOptions(timeout=int(timeout * 1000)) if timeout else None
        self._client = genai.Client(api_key=api_key, http_options=http_options)
        self.model = model

    def invoke(self, request: GenerationRequest) -> GenerationCompletion:
        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=[_to_content(m) for m in request.contents],
                config=_to_config(request),
            )
            return _to_completion(response)
        except errors.APIError as e:
            logger.warning("Gemini call failed (%s %s): %s", e.code, e.status, e)
            raise ModelInvocationError(str(e), code=e.code, status=e.status) from e
        except httpx.HTTPError as e:
            logger.warning("Gemini transport failure: %s", e)
            raise ModelInvocationError(str(e) or type(e).__name__) from e
        except Exception as e:
            logger.warning("Gemini call failed unexpectedly: %s", e)
            raise ModelInvocationError(str(e) or type(e).__name__) from e


@lru_cache
def get_invoker() -> ModelInvoker:
    settings = get_settings()
    return GeminiInvoker(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        timeout=settings.model_timeout,
    )
