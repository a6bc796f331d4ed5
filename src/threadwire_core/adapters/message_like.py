"""Message-like reconstruction.

Turns a loosely-typed, message-like mapping (a decoded wire payload, a hand
written fixture, ...) into a fully-typed ThreadMessage. This is where wire
content parts are expanded back into internal parts, including restoring both
tool-call argument forms from whichever one the wire carried.
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ValidationError

from threadwire_core.errors import MessageReconstructionError
from threadwire_core.json_values import parse_partial_json, stringify_json
from threadwire_core.messages import MessageStatus, ThreadMessage

logger = logging.getLogger(__name__)

ASSISTANT_PART_TYPES = frozenset({"text", "reasoning", "source", "tool-call", "image", "file"})
USER_PART_TYPES = frozenset({"text", "image", "file", "audio"})


def _as_mapping(part: Any) -> Mapping[str, Any]:
    if isinstance(part, BaseModel):
        return part.model_dump(by_alias=True)
    if isinstance(part, Mapping):
        return part
    raise MessageReconstructionError(f"Message part must be a mapping, got {type(part).__name__}")


def _expand_tool_call(part: Mapping[str, Any]) -> dict[str, Any]:
    """Fill in whichever argument form the part is missing."""
    args = part.get("args")
    args_text = part.get("argsText")
    if args is not None:
        if args_text is None:
            args_text = stringify_json(args)
    else:
        args_text = args_text or ""
        parsed = parse_partial_json(args_text) if args_text else None
        args = parsed if isinstance(parsed, dict) else {}

    return {
        **part,
        "toolCallId": part.get("toolCallId") or f"tool-{uuid4().hex[:12]}",
        "args": args,
        "argsText": args_text,
    }


def _expand_parts(role: str, content: Any) -> list[Mapping[str, Any]]:
    if isinstance(content, str):
        return [{"type": "text", "text": content}]

    parts = [_as_mapping(part) for part in content]

    if role == "assistant":
        allowed = ASSISTANT_PART_TYPES
    elif role == "user":
        allowed = USER_PART_TYPES
    else:
        if len(parts) != 1 or parts[0].get("type") != "text":
            raise MessageReconstructionError(
                "System messages must have exactly one text message part."
            )
        return parts

    expanded = []
    for part in parts:
        part_type = part.get("type")
        if part_type not in allowed:
            raise MessageReconstructionError(
                f"Unsupported {role} message part type: {part_type}"
            )
        expanded.append(_expand_tool_call(part) if part_type == "tool-call" else part)
    return expanded


def from_message_like(
    like: Mapping[str, Any],
    fallback_id: str,
    fallback_status: MessageStatus,
) -> ThreadMessage:
    """Build a ThreadMessage from a message-like mapping.

    Args:
        like: Mapping with ``role``, ``content`` (a string or a list of parts)
            and optionally ``id``, ``createdAt``, ``status``, ``metadata`` and
            ``attachments``. Parts use wire (camelCase) field names.
        fallback_id: Identifier used when ``like`` has no ``id``.
        fallback_status: Status used when ``like`` has no ``status``.

    Returns:
        The reconstructed message.

    Raises:
        MessageReconstructionError: If the role is unknown, a part is not
            allowed for the role, or the result fails validation.
    """
    role = like.get("role")
    if role not in ("assistant", "user", "system"):
        raise MessageReconstructionError(f"Unknown message role: {role!r}")

    content = _expand_parts(role, like.get("content") or [])

    try:
        message = ThreadMessage.model_validate(
            {
                "id": like.get("id") or fallback_id,
                "createdAt": like.get("createdAt") or datetime.now(UTC),
                "role": role,
                "content": content,
                "status": like.get("status") or fallback_status,
                "metadata": like.get("metadata") or {},
                "attachments": like.get("attachments") or [],
            }
        )
    except ValidationError as exc:
        raise MessageReconstructionError(f"Invalid {role} message: {exc}") from exc

    logger.debug("from_message_like id=%s role=%s parts=%d", message.id, role, len(content))
    return message
