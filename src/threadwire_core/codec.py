"""ThreadWire - versioned wire codecs for chat thread messages.

Usage:
    ```python
    from threadwire_core import MessageCodec, ThreadMessage, TextPart

    codec = MessageCodec()

    encoded = codec.encode(ThreadMessage(role="user", content=[TextPart(text="Hello")]))
    # store encoded.format and encoded.content, get back a CloudMessage record

    item = codec.decode(record)
    item.parent_id, item.message
    ```
"""

import logging
from collections.abc import Iterable

from threadwire_core.adapters import MessageReconstructor
from threadwire_core.config import CodecSettings
from threadwire_core.formats import FormatCodec, get_format_codec
from threadwire_core.messages import ThreadMessage
from threadwire_core.records import CloudMessage, EncodedMessage, MessageRepositoryItem

logger = logging.getLogger(__name__)


class MessageCodec:
    """Encodes messages for the remote store and decodes stored records.

    Encoding uses the configured default format unless one is given. Decoding
    dispatches on the format tag of each record, so threads written over time
    in different formats decode side by side.
    """

    def __init__(
        self,
        settings: CodecSettings | None = None,
        reconstruct: MessageReconstructor | None = None,
    ) -> None:
        """Initialize the codec.

        Args:
            settings: Configuration settings. Uses defaults if not provided.
            reconstruct: Reconstructor used by the decoders. Uses
                ``from_message_like`` if not provided.
        """
        self._settings = settings or CodecSettings()
        self._reconstruct = reconstruct
        self._codecs: dict[str, FormatCodec] = {}

    def _codec(self, format: str) -> FormatCodec:
        if format not in self._codecs:
            self._codecs[format] = get_format_codec(
                format, settings=self._settings, reconstruct=self._reconstruct
            )
        return self._codecs[format]

    def encode(self, message: ThreadMessage, format: str | None = None) -> EncodedMessage:
        """Encode a message.

        Args:
            message: The message to encode.
            format: Wire format tag. Defaults to ``settings.default_format``.

        Returns:
            The payload tagged with its format.

        Raises:
            UnknownFormatError: If the format is not registered.
            UnsupportedPartError: If the format cannot represent a part.
        """
        resolved = format or self._settings.default_format
        content = self._codec(resolved).encode(message)
        return EncodedMessage(format=resolved, content=content)

    def decode(self, record: CloudMessage) -> MessageRepositoryItem:
        """Decode a stored record using the codec for its format.

        Raises:
            UnknownFormatError: If the record's format is not registered.
        """
        return self._codec(record.format).decode(record)

    def decode_many(self, records: Iterable[CloudMessage]) -> list[MessageRepositoryItem]:
        """Decode records in order."""
        items = [self.decode(record) for record in records]
        logger.debug("decode_many records=%d", len(items))
        return items
