"""Exceptions raised by the message codecs."""


class CodecError(Exception):
    """Base exception for all codec errors."""

    pass


class UnsupportedPartError(CodecError):
    """A content part cannot be represented in the target wire format.

    Attributes:
        part_type: The ``type`` tag of the offending part.
        format: The wire format that rejected it.
    """

    def __init__(self, part_type: str, format: str) -> None:
        super().__init__(f"Message part type not supported by {format}: {part_type}")
        self.part_type = part_type
        self.format = format


class MetadataShapeError(CodecError):
    """Message metadata does not match the wire metadata schema."""

    pass


class MessageReconstructionError(CodecError):
    """A message-like object could not be turned into a ThreadMessage."""

    pass


class UnknownFormatError(CodecError):
    """No codec is registered for the requested wire format."""

    def __init__(self, format: str, available: list[str]) -> None:
        super().__init__(f"Unknown message format {format!r}. Available: {available}")
        self.format = format
        self.available = available
