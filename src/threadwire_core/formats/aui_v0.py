"""Wire format "aui/v0".

A compact, JSON-safe projection of a ThreadMessage used to persist messages in
the remote store. The projection is lossy on purpose:

- ``id`` and ``created_at`` are not encoded; the store's values are used on
  decode.
- Attachments are dropped; image, file and audio parts are rejected.
- A running status is persisted as cancelled, and every decoded message is
  considered complete.

Encoding then decoding keeps every text, reasoning, source and tool-call field
intact, including the exact argument text of tool calls whose arguments are not
in compact JSON form.
"""

import logging
from typing import Any, Literal, assert_never, cast

from pydantic import ConfigDict, JsonValue, TypeAdapter, ValidationError, with_config
from typing_extensions import NotRequired, TypedDict

from threadwire_core.adapters import MessageReconstructor, from_message_like
from threadwire_core.config import CodecSettings
from threadwire_core.errors import CodecError, MetadataShapeError, UnsupportedPartError
from threadwire_core.json_values import is_json_value, is_present, stringify_json
from threadwire_core.messages import (
    AudioPart,
    CompleteStatus,
    ContentPart,
    FilePart,
    ImagePart,
    MessageMetadata,
    MessageStatus,
    ReasoningPart,
    RunningStatus,
    SourcePart,
    TextPart,
    ThreadMessage,
    ToolCallPart,
)
from threadwire_core.records import CloudMessage, MessageRepositoryItem

logger = logging.getLogger(__name__)

AUI_V0 = "aui/v0"


# Wire schema


class AuiV0TextPart(TypedDict):
    type: Literal["text"]
    text: str


class AuiV0ReasoningPart(TypedDict):
    type: Literal["reasoning"]
    text: str


class AuiV0SourcePart(TypedDict):
    type: Literal["source"]
    sourceType: Literal["url"]
    id: str
    url: str
    title: NotRequired[str]


class AuiV0ToolCallArgsPart(TypedDict):
    type: Literal["tool-call"]
    toolCallId: str
    toolName: str
    args: dict[str, JsonValue]
    result: NotRequired[JsonValue]
    isError: NotRequired[Literal[True]]


class AuiV0ToolCallArgsTextPart(TypedDict):
    type: Literal["tool-call"]
    toolCallId: str
    toolName: str
    argsText: str
    result: NotRequired[JsonValue]
    isError: NotRequired[Literal[True]]


AuiV0Part = (
    AuiV0TextPart
    | AuiV0ReasoningPart
    | AuiV0SourcePart
    | AuiV0ToolCallArgsPart
    | AuiV0ToolCallArgsTextPart
)


@with_config(ConfigDict(extra="forbid"))
class AuiV0StepUsage(TypedDict):
    promptTokens: int
    completionTokens: int


@with_config(ConfigDict(extra="forbid"))
class AuiV0Step(TypedDict):
    usage: NotRequired[AuiV0StepUsage | None]


@with_config(ConfigDict(extra="forbid"))
class AuiV0Metadata(TypedDict):
    unstable_state: NotRequired[JsonValue]
    unstable_annotations: list[JsonValue]
    unstable_data: list[JsonValue]
    steps: list[AuiV0Step]
    custom: dict[str, JsonValue]


class AuiV0Status(TypedDict):
    type: Literal["running", "requires-action", "complete", "incomplete"]
    reason: NotRequired[str]
    error: NotRequired[JsonValue]


class AuiV0Message(TypedDict):
    role: Literal["assistant", "user", "system"]
    status: NotRequired[AuiV0Status]
    content: list[AuiV0Part]
    metadata: AuiV0Metadata


_metadata_adapter = TypeAdapter(AuiV0Metadata)


# Encoding


def _encode_tool_call(part: ToolCallPart, warn_on_non_json_result: bool) -> AuiV0Part:
    if warn_on_non_json_result and not is_json_value(part.result):
        logger.warning(
            "tool-call result is not JSON! tool_call_id=%s tool_name=%s result=%r",
            part.tool_call_id,
            part.tool_name,
            part.result,
        )

    encoded: dict[str, Any] = {
        "type": "tool-call",
        "toolCallId": part.tool_call_id,
        "toolName": part.tool_name,
    }
    # Keep the raw text whenever the parsed form would not reproduce it exactly
    if stringify_json(part.args) == part.args_text:
        encoded["args"] = part.args
    else:
        encoded["argsText"] = part.args_text
    if is_present(part.result):
        encoded["result"] = part.result
    if part.is_error:
        encoded["isError"] = True
    return cast(AuiV0Part, encoded)


def _encode_part(part: ContentPart, warn_on_non_json_result: bool) -> AuiV0Part:
    if isinstance(part, TextPart):
        return {"type": "text", "text": part.text}
    elif isinstance(part, ReasoningPart):
        return {"type": "reasoning", "text": part.text}
    elif isinstance(part, SourcePart):
        source: AuiV0SourcePart = {
            "type": "source",
            "sourceType": part.source_type,
            "id": part.id,
            "url": part.url,
        }
        if part.title:
            source["title"] = part.title
        return source
    elif isinstance(part, ToolCallPart):
        return _encode_tool_call(part, warn_on_non_json_result)
    elif isinstance(part, (ImagePart, FilePart, AudioPart)):
        raise UnsupportedPartError(part.type, AUI_V0)
    else:
        assert_never(part)


def _encode_metadata(metadata: MessageMetadata, validate: bool) -> AuiV0Metadata:
    dumped = metadata.model_dump(by_alias=True)
    if not validate:
        return cast(AuiV0Metadata, dumped)
    try:
        return _metadata_adapter.validate_python(dumped)
    except ValidationError as exc:
        raise MetadataShapeError(f"Metadata does not match the {AUI_V0} schema: {exc}") from exc


def _encode_status(status: MessageStatus) -> AuiV0Status:
    if isinstance(status, RunningStatus):
        # A persisted run is no longer live
        return {"type": "incomplete", "reason": "cancelled"}
    encoded = status.model_dump()
    if encoded.get("error") is None:
        encoded.pop("error", None)
    return cast(AuiV0Status, encoded)


def aui_v0_encode(
    message: ThreadMessage,
    *,
    validate_metadata: bool = True,
    warn_on_non_json_result: bool = True,
) -> AuiV0Message:
    """Encode a message into the aui/v0 wire format.

    Args:
        message: The message to encode.
        validate_metadata: Check the metadata against the wire schema.
        warn_on_non_json_result: Log a warning for tool-call results that are
            not plain JSON. Such results are written through either way.

    Returns:
        The wire message. It has no ``status`` key when the message has no
        status.

    Raises:
        UnsupportedPartError: If the message has an image, file or audio part.
        MetadataShapeError: If metadata validation is on and fails.
    """
    encoded: AuiV0Message = {
        "role": message.role,
        "content": [_encode_part(part, warn_on_non_json_result) for part in message.content],
        "metadata": _encode_metadata(message.metadata, validate_metadata),
    }
    if message.status is not None:
        encoded["status"] = _encode_status(message.status)

    logger.debug(
        "aui_v0_encode id=%s role=%s parts=%d dropped_attachments=%d",
        message.id,
        message.role,
        len(encoded["content"]),
        len(message.attachments),
    )
    return encoded


# Decoding


def aui_v0_decode(
    record: CloudMessage,
    reconstruct: MessageReconstructor = from_message_like,
) -> MessageRepositoryItem:
    """Decode a stored aui/v0 record.

    The identifier and creation time come from the record, never from the
    payload, and the status is always complete with reason "unknown".

    Args:
        record: A record whose ``format`` is "aui/v0".
        reconstruct: Builds the typed message from the message-like payload.

    Returns:
        The decoded message with its parent linkage.

    Raises:
        CodecError: If the record is tagged with another format.
    """
    if record.format != AUI_V0:
        raise CodecError(f"Expected a {AUI_V0} record, got {record.format!r}")

    payload = cast(AuiV0Message, record.content)
    like: dict[str, Any] = {key: value for key, value in payload.items() if key != "status"}
    like["id"] = record.id
    like["createdAt"] = record.created_at

    message = reconstruct(like, record.id, CompleteStatus(reason="unknown"))

    logger.debug("aui_v0_decode id=%s parent_id=%s", record.id, record.parent_id)
    return MessageRepositoryItem(parent_id=record.parent_id, message=message)


class AuiV0Codec:
    """The aui/v0 codec bound to a set of settings."""

    format = AUI_V0

    def __init__(
        self,
        settings: CodecSettings | None = None,
        reconstruct: MessageReconstructor | None = None,
    ) -> None:
        self._settings = settings or CodecSettings()
        self._reconstruct = reconstruct or from_message_like

    def encode(self, message: ThreadMessage) -> AuiV0Message:
        return aui_v0_encode(
            message,
            validate_metadata=self._settings.validate_metadata,
            warn_on_non_json_result=self._settings.warn_on_non_json_result,
        )

    def decode(self, record: CloudMessage) -> MessageRepositoryItem:
        return aui_v0_decode(record, reconstruct=self._reconstruct)
