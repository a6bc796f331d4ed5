"""In-memory thread message representation.

These are the rich, application-side message types. Wire formats under
``threadwire_core.formats`` project them into compact JSON and back.

Attributes use snake_case; the camelCase names used on the wire
(``toolCallId``, ``argsText``, ``createdAt``...) are accepted as aliases.
"""

from datetime import UTC, datetime
from typing import Annotated, Any, Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from threadwire_core.json_values import JSONObject, JSONValue

MessageRole = Literal["assistant", "user", "system"]


class _CamelModel(BaseModel):
    """Base for models whose wire names are camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Content parts


class TextPart(_CamelModel):
    type: Literal["text"] = "text"
    text: str


class ReasoningPart(_CamelModel):
    type: Literal["reasoning"] = "reasoning"
    text: str


class SourcePart(_CamelModel):
    """A cited source. Only URL sources exist today."""

    type: Literal["source"] = "source"
    source_type: Literal["url"] = "url"
    id: str
    url: str
    title: str | None = None


class ToolCallPart(_CamelModel):
    """A tool invocation and, once available, its result.

    Both argument forms are always carried: ``args`` is the parsed object and
    ``args_text`` the raw text it was parsed from. They can disagree in
    formatting (whitespace, key spacing) or, while streaming, in completeness.
    """

    type: Literal["tool-call"] = "tool-call"
    tool_call_id: str
    tool_name: str
    args: JSONObject = Field(default_factory=dict)
    args_text: str = ""
    result: Any = None
    is_error: bool | None = None


class ImagePart(_CamelModel):
    type: Literal["image"] = "image"
    image: str


class FilePart(_CamelModel):
    type: Literal["file"] = "file"
    data: str
    mime_type: str


class AudioData(BaseModel):
    data: str
    format: Literal["mp3", "wav"]


class AudioPart(_CamelModel):
    type: Literal["audio"] = "audio"
    audio: AudioData


ContentPart = Annotated[
    TextPart | ReasoningPart | SourcePart | ToolCallPart | ImagePart | FilePart | AudioPart,
    Field(discriminator="type"),
]


# Run status


class RunningStatus(BaseModel):
    type: Literal["running"] = "running"


class RequiresActionStatus(BaseModel):
    type: Literal["requires-action"] = "requires-action"
    reason: Literal["tool-calls", "interrupt"] = "tool-calls"


class CompleteStatus(BaseModel):
    type: Literal["complete"] = "complete"
    reason: Literal["stop", "unknown"] = "stop"


class IncompleteStatus(BaseModel):
    type: Literal["incomplete"] = "incomplete"
    reason: Literal["cancelled", "tool-calls", "length", "content-filter", "other", "error"]
    error: JSONValue = None


MessageStatus = Annotated[
    RunningStatus | RequiresActionStatus | CompleteStatus | IncompleteStatus,
    Field(discriminator="type"),
]


# Metadata


class StepUsage(_CamelModel):
    prompt_tokens: int
    completion_tokens: int


class StepMetadata(BaseModel):
    """Per-step bookkeeping for a multi-step assistant run."""

    usage: StepUsage | None = None


class MessageMetadata(BaseModel):
    """Metadata bag attached to every message.

    Attributes:
        unstable_state: Opaque state snapshot for the run.
        unstable_annotations: Free-form annotations streamed alongside content.
        unstable_data: Free-form data items streamed alongside content.
        steps: One entry per model step, with optional token usage.
        custom: Application-defined values.
    """

    unstable_state: JSONValue = None
    unstable_annotations: list[JSONValue] = Field(default_factory=list)
    unstable_data: list[JSONValue] = Field(default_factory=list)
    steps: list[StepMetadata] = Field(default_factory=list)
    custom: JSONObject = Field(default_factory=dict)


class Attachment(_CamelModel):
    """A file attached to a user message."""

    id: str
    type: Literal["image", "document", "file"]
    name: str
    content_type: str | None = None


class ThreadMessage(_CamelModel):
    """A single message in a conversation thread.

    Attributes:
        id: Stable identifier of the message.
        created_at: Creation time.
        role: Who produced the message.
        content: Ordered content parts.
        status: Run status, normally only set on assistant messages.
        metadata: Annotations, usage and custom values.
        attachments: Files attached by the user.
    """

    id: str = Field(default_factory=lambda: uuid4().hex)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    role: MessageRole
    content: list[ContentPart] = Field(default_factory=list)
    status: MessageStatus | None = None
    metadata: MessageMetadata = Field(default_factory=MessageMetadata)
    attachments: list[Attachment] = Field(default_factory=list)
