import base64

from uicritic.models.analysis import InlineMediaPart
from uicritic.services import encoder
from conftest import PNG_BYTES


class TestEncode:
    def test_base64_encodes_bytes(self):
        part = encoder.encode(b"hello", "image/png")
        assert isinstance(part, InlineMediaPart)
        assert part.data == "aGVsbG8="

    def test_round_trips_binary(self):
        part = encoder.encode(PNG_BYTES, "image/png")
        assert base64.b64decode(part.data) == PNG_BYTES

    def test_keeps_declared_mime_type(self):
        # PNG bytes declared as JPEG are passed through untouched
        part = encoder.encode(PNG_BYTES, "image/jpeg")
        assert part.mime_type == "image/jpeg"

    def test_empty_bytes(self):
        assert encoder.encode(b"", "image/webp").data == ""

    def test_deterministic(self):
        assert encoder.encode(PNG_BYTES, "image/png") == encoder.encode(PNG_BYTES, "image/png")
