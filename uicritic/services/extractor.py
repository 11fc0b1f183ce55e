from uicritic.exceptions import EmptyCompletionError
from uicritic.models.analysis import GenerationCompletion


def extract(completion: GenerationCompletion) -> str:
    """Return the completion text.

    An empty string is a valid (empty) answer; ``None`` means the model gave
    no answer at all, usually because moderation blocked it.
    """
    if completion.text is not None:
        return completion.text
    if completion.block_reason:
        raise EmptyCompletionError(f"Model returned no text (prompt blocked: {completion.block_reason})")
    if completion.finish_reason:
        raise EmptyCompletionError(f"Model returned no text (finish reason: {completion.finish_reason})")
    raise EmptyCompletionError("Model returned no text")
