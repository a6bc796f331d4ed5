"""Storage-side envelopes around encoded messages."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from threadwire_core.messages import ThreadMessage


class CloudMessage(BaseModel):
    """A message record as held by the remote store.

    The store owns ``id``, ``created_at`` and the parent linkage; ``content``
    is the encoded payload, interpreted according to ``format``.

    Attributes:
        id: Stable identifier assigned by the store.
        parent_id: Identifier of the parent message, None for a thread root.
        height: Depth of the message in the thread tree.
        created_at: Creation time assigned by the store.
        updated_at: Last modification time, if the store tracks it.
        format: Wire format tag of ``content`` (e.g. "aui/v0").
        content: Encoded message payload.
    """

    id: str
    parent_id: str | None = None
    height: int = 0
    created_at: datetime
    updated_at: datetime | None = None
    format: str
    content: dict[str, Any] = Field(default_factory=dict)


class EncodedMessage(BaseModel):
    """An encoded payload tagged with the format that produced it."""

    format: str
    content: dict[str, Any]


class MessageRepositoryItem(BaseModel):
    """A decoded message together with its position in the thread tree."""

    parent_id: str | None
    message: ThreadMessage
