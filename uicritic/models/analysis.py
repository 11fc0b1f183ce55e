from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AnalyzeRequest(BaseModel):
    # Missing or empty fields are rejected by services.analysis.validate.
    model_config = ConfigDict(populate_by_name=True)

    image_url: str | None = Field(default=None, alias="imageUrl")
    prompt: str | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")


class AnalysisResult(BaseModel):
    analysis: str


class TextPart(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class InlineMediaPart(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: str  # base64
    mime_type: str


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    parts: tuple[TextPart | InlineMediaPart, ...]


class GenerationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    temperature: float = 0.4
    top_k: int = 32
    top_p: float = 1.0
    max_output_tokens: int = 4096


class HarmCategory(str, Enum):
    HARASSMENT = "HARM_CATEGORY_HARASSMENT"
    HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
    DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"


class HarmBlockThreshold(str, Enum):
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"


class SafetySetting(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: HarmCategory
    threshold: HarmBlockThreshold


class SafetyPolicy(BaseModel):
    """Moderation thresholds sent with every request.

    Every harm category must be covered; an absent category would leave it unfiltered.
    """

    model_config = ConfigDict(frozen=True)

    rules: tuple[SafetySetting, ...]

    @model_validator(mode="after")
    def _covers_all_categories(self) -> "SafetyPolicy":
        covered = {rule.category for rule in self.rules}
        missing = [c.value for c in HarmCategory if c not in covered]
        if missing:
            raise ValueError(f"Safety policy is missing categories: {', '.join(missing)}")
        return self


class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    contents: tuple[Message, ...]
    generation_config: GenerationConfig
    safety_policy: SafetyPolicy


class GenerationCompletion(BaseModel):
    text: str | None = None
    finish_reason: str | None = None
    block_reason: str | None = None
