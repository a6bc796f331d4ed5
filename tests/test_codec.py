"""Tests for the MessageCodec facade and format registry."""

import pytest

from threadwire_core import MessageCodec
from threadwire_core.adapters import from_message_like
from threadwire_core.errors import UnknownFormatError, UnsupportedPartError
from threadwire_core.formats import FORMAT_REGISTRY, AuiV0Codec, get_format_codec
from threadwire_core.messages import CompleteStatus, ImagePart, TextPart, ThreadMessage


class TestGetFormatCodec:
    """Test format resolution."""

    def test_known_format(self) -> None:
        """Registered formats resolve to a codec instance."""
        codec = get_format_codec("aui/v0")

        assert isinstance(codec, AuiV0Codec)
        assert codec.format == "aui/v0"

    def test_unknown_format(self) -> None:
        """Unknown formats list what is available."""
        with pytest.raises(UnknownFormatError, match="aui/v0") as exc_info:
            get_format_codec("aui/v9")

        assert exc_info.value.format == "aui/v9"
        assert exc_info.value.available == list(FORMAT_REGISTRY)


class TestMessageCodec:
    """Test MessageCodec."""

    @pytest.fixture
    def codec(self, settings) -> MessageCodec:
        return MessageCodec(settings=settings)

    def test_encode_default_format(self, codec: MessageCodec, assistant_message) -> None:
        """Encoding tags the payload with the default format."""
        encoded = codec.encode(assistant_message)

        assert encoded.format == "aui/v0"
        assert encoded.content["role"] == "assistant"
        assert len(encoded.content["content"]) == 4

    def test_encode_default_format_from_settings(self, settings, assistant_message) -> None:
        """The default format comes from settings."""
        codec = MessageCodec(settings=settings.model_copy(update={"default_format": "aui/v9"}))

        with pytest.raises(UnknownFormatError):
            codec.encode(assistant_message)

    def test_encode_explicit_format(self, codec: MessageCodec, assistant_message) -> None:
        """An explicit format overrides the default."""
        with pytest.raises(UnknownFormatError):
            codec.encode(assistant_message, format="aui/v9")

    def test_encode_unsupported_part(self, codec: MessageCodec) -> None:
        """Unsupported parts surface from the format codec."""
        message = ThreadMessage(role="user", content=[ImagePart(image="https://example.com/a.png")])

        with pytest.raises(UnsupportedPartError):
            codec.encode(message)

    def test_decode_dispatches_on_format(self, codec: MessageCodec, make_record) -> None:
        """Records decode with the codec for their format."""
        record = make_record({"role": "user", "content": [{"type": "text", "text": "Hi"}]})

        item = codec.decode(record)

        assert item.parent_id == "p0"
        assert item.message.id == "m1"
        assert item.message.content == [TextPart(text="Hi")]

    def test_decode_unknown_format(self, codec: MessageCodec, make_record) -> None:
        """Records in unregistered formats are rejected."""
        record = make_record({"role": "user", "content": []}, format="legacy")

        with pytest.raises(UnknownFormatError, match="legacy"):
            codec.decode(record)

    def test_decode_many_keeps_order(self, codec: MessageCodec, make_record) -> None:
        """decode_many preserves record order and parent linkage."""
        records = [
            make_record({"role": "user", "content": "Question"}, id="m1", parent_id=None),
            make_record({"role": "assistant", "content": "Answer"}, id="m2", parent_id="m1"),
        ]

        items = codec.decode_many(records)

        assert [(item.parent_id, item.message.id) for item in items] == [(None, "m1"), ("m1", "m2")]
        assert all(item.message.status == CompleteStatus(reason="unknown") for item in items)

    def test_round_trip_through_store(self, codec: MessageCodec, assistant_message, make_record) -> None:
        """What the codec encodes, it decodes back to the same content."""
        encoded = codec.encode(assistant_message)

        item = codec.decode(make_record(encoded.content, format=encoded.format))

        assert item.message.content == assistant_message.content

    def test_custom_reconstructor(self, settings, make_record, mocker) -> None:
        """A custom reconstructor reaches the format codecs."""
        reconstruct = mocker.Mock(wraps=from_message_like)
        codec = MessageCodec(settings=settings, reconstruct=reconstruct)

        codec.decode(make_record({"role": "user", "content": "Hi"}))

        reconstruct.assert_called_once()
