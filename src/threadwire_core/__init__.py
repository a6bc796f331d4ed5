from threadwire_core.adapters import MessageReconstructor, from_message_like
from threadwire_core.codec import MessageCodec
from threadwire_core.config import CodecSettings
from threadwire_core.errors import (
    CodecError,
    MessageReconstructionError,
    MetadataShapeError,
    UnknownFormatError,
    UnsupportedPartError,
)
from threadwire_core.formats import (
    AUI_V0,
    FORMAT_REGISTRY,
    AuiV0Codec,
    FormatCodec,
    aui_v0_decode,
    aui_v0_encode,
    get_format_codec,
)
from threadwire_core.messages import (
    Attachment,
    AudioPart,
    CompleteStatus,
    ContentPart,
    FilePart,
    ImagePart,
    IncompleteStatus,
    MessageMetadata,
    MessageStatus,
    ReasoningPart,
    RequiresActionStatus,
    RunningStatus,
    SourcePart,
    StepMetadata,
    StepUsage,
    TextPart,
    ThreadMessage,
    ToolCallPart,
)
from threadwire_core.records import CloudMessage, EncodedMessage, MessageRepositoryItem

__all__ = [
    # Main class
    "MessageCodec",
    # Config
    "CodecSettings",
    # Messages
    "ThreadMessage",
    "MessageMetadata",
    "StepMetadata",
    "StepUsage",
    "Attachment",
    # Messages - Content parts
    "ContentPart",
    "TextPart",
    "ReasoningPart",
    "SourcePart",
    "ToolCallPart",
    "ImagePart",
    "FilePart",
    "AudioPart",
    # Messages - Status
    "MessageStatus",
    "RunningStatus",
    "RequiresActionStatus",
    "CompleteStatus",
    "IncompleteStatus",
    # Records
    "CloudMessage",
    "EncodedMessage",
    "MessageRepositoryItem",
    # Formats
    "AUI_V0",
    "FORMAT_REGISTRY",
    "FormatCodec",
    "AuiV0Codec",
    "aui_v0_encode",
    "aui_v0_decode",
    "get_format_codec",
    # Reconstruction
    "MessageReconstructor",
    "from_message_like",
    # Errors
    "CodecError",
    "UnsupportedPartError",
    "MetadataShapeError",
    "MessageReconstructionError",
    "UnknownFormatError",
]
