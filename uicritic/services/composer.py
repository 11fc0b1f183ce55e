from uicritic.models.analysis import (
    GenerationConfig,
    GenerationRequest,
    InlineMediaPart,
    Message,
    SafetyPolicy,
    TextPart,
)


def compose(
    prompt: str,
    part: InlineMediaPart,
    config: GenerationConfig,
    policy: SafetyPolicy,
) -> GenerationRequest:
    """Build a single-turn request: instruction text first, then the image.

    The safety policy is attached verbatim and cannot be relaxed per request.
    """
    if not isinstance(part, InlineMediaPart):
        raise TypeError(f"part must be an InlineMediaPart, got {type(part).__name__}")
    if not isinstance(config, GenerationConfig):
        raise TypeError(f"config must be a GenerationConfig, got {type(config).__name__}")
    if not isinstance(policy, SafetyPolicy):
        raise TypeError(f"policy must be a SafetyPolicy, got {type(policy).__name__}")
    if not isinstance(prompt, str):
        raise TypeError(f"prompt must be a str, got {type(prompt).__name__}")

    message = Message(role="user", parts=(TextPart(text=prompt), part))
    return GenerationRequest(
        contents=(message,),
        generation_config=config,
        safety_policy=policy,
    )
