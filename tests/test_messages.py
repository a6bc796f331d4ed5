from datetime import datetime

import pytest
from pydantic import ValidationError

from threadwire_core.messages import (
    CompleteStatus,
    IncompleteStatus,
    MessageMetadata,
    SourcePart,
    StepUsage,
    ThreadMessage,
    ToolCallPart,
)


class TestContentParts:
    """Test content part models."""

    def test_tool_call_defaults(self) -> None:
        """ToolCallPart has empty arguments and no result by default."""
        part = ToolCallPart(tool_call_id="call_1", tool_name="search")

        assert part.args == {}
        assert part.args_text == ""
        assert part.result is None
        assert part.is_error is None

    def test_tool_call_accepts_wire_names(self) -> None:
        """camelCase wire names are accepted as aliases."""
        part = ToolCallPart.model_validate(
            {"toolCallId": "call_1", "toolName": "search", "argsText": "{}", "isError": True}
        )

        assert part.tool_call_id == "call_1"
        assert part.args_text == "{}"
        assert part.is_error is True

    def test_source_defaults(self) -> None:
        """Sources are URL sources with no title by default."""
        part = SourcePart(id="s1", url="https://example.com")

        assert part.source_type == "url"
        assert part.title is None

    def test_usage_aliases(self) -> None:
        """Step usage dumps with camelCase names."""
        usage = StepUsage(prompt_tokens=1, completion_tokens=2)

        assert usage.model_dump(by_alias=True) == {"promptTokens": 1, "completionTokens": 2}


class TestThreadMessage:
    """Test ThreadMessage."""

    def test_defaults(self) -> None:
        """ThreadMessage should have auto-generated defaults."""
        message = ThreadMessage(role="user")

        assert isinstance(message.id, str)
        assert isinstance(message.created_at, datetime)
        assert message.content == []
        assert message.status is None
        assert message.metadata == MessageMetadata()
        assert message.attachments == []

    def test_content_discriminated_by_type(self) -> None:
        """Parts given as dicts become the matching model."""
        message = ThreadMessage.model_validate(
            {
                "role": "assistant",
                "content": [
                    {"type": "text", "text": "Hi"},
                    {"type": "source", "id": "s1", "url": "https://example.com"},
                ],
            }
        )

        assert [type(part).__name__ for part in message.content] == ["TextPart", "SourcePart"]

    def test_status_discriminated_by_type(self) -> None:
        """Status dicts become the matching model."""
        message = ThreadMessage.model_validate(
            {"role": "assistant", "status": {"type": "complete", "reason": "unknown"}}
        )

        assert message.status == CompleteStatus(reason="unknown")

    def test_unknown_part_type_rejected(self) -> None:
        """Unknown part types fail validation."""
        with pytest.raises(ValidationError):
            ThreadMessage.model_validate({"role": "user", "content": [{"type": "video"}]})

    def test_incomplete_reason_validated(self) -> None:
        """Incomplete reasons are a closed set."""
        with pytest.raises(ValidationError):
            IncompleteStatus(reason="bored")
