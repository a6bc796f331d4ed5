"""Protocol for wire format codecs."""

from typing import Any, Protocol

from threadwire_core.messages import ThreadMessage
from threadwire_core.records import CloudMessage, MessageRepositoryItem


class FormatCodec(Protocol):
    """Protocol for a single versioned wire format.

    Each version is its own codec. A new version is added next to the existing
    ones rather than by changing them, so records written in an older format
    stay readable.
    """

    format: str

    def encode(self, message: ThreadMessage) -> Any:
        """Encode a message into this format's JSON payload."""
        ...

    def decode(self, record: CloudMessage) -> MessageRepositoryItem:
        """Decode a record whose ``format`` matches this codec."""
        ...
