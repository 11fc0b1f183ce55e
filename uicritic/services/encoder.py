import base64

from uicritic.models.analysis import InlineMediaPart


def encode(data: bytes, mime_type: str) -> InlineMediaPart:
    # The declared mime type is trusted as-is; the bytes are not sniffed.
    return InlineMediaPart(
        data=base64.standard_b64encode(data).decode("ascii"),
        mime_type=mime_type,
    )
