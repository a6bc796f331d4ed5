"""Versioned wire formats.

Formats are looked up by their tag. Every stored record carries the tag of the
format its payload was written in.
"""

from typing import Any

from threadwire_core.adapters import MessageReconstructor
from threadwire_core.config import CodecSettings
from threadwire_core.errors import UnknownFormatError
from threadwire_core.formats.aui_v0 import AUI_V0, AuiV0Codec, AuiV0Message, aui_v0_decode, aui_v0_encode
from threadwire_core.formats.protocol import FormatCodec

FORMAT_REGISTRY: dict[str, Any] = {
    AUI_V0: AuiV0Codec,
}


def get_format_codec(
    format: str,
    settings: CodecSettings | None = None,
    reconstruct: MessageReconstructor | None = None,
) -> FormatCodec:
    """Resolve a codec by its format tag.

    Args:
        format: A key from FORMAT_REGISTRY (e.g. "aui/v0").
        settings: Settings handed to the codec.
        reconstruct: Reconstructor handed to the codec.

    Returns:
        A codec instance for the format.

    Raises:
        UnknownFormatError: If the format is not registered.
    """
    if format not in FORMAT_REGISTRY:
        raise UnknownFormatError(format, list(FORMAT_REGISTRY))
    return FORMAT_REGISTRY[format](settings=settings, reconstruct=reconstruct)


__all__ = [
    "AUI_V0",
    "FORMAT_REGISTRY",
    "AuiV0Codec",
    "AuiV0Message",
    "FormatCodec",
    "aui_v0_decode",
    "aui_v0_encode",
    "get_format_codec",
]
