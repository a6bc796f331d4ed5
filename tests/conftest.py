from datetime import UTC, datetime

import pytest

from threadwire_core.config import CodecSettings
from threadwire_core.messages import (
    MessageMetadata,
    ReasoningPart,
    SourcePart,
    StepMetadata,
    StepUsage,
    TextPart,
    ThreadMessage,
    ToolCallPart,
)
from threadwire_core.records import CloudMessage


@pytest.fixture
def created_at() -> datetime:
    """Provide a fixed record creation time."""
    return datetime(2025, 3, 14, 9, 26, 53, tzinfo=UTC)


@pytest.fixture
def settings() -> CodecSettings:
    """Provide settings that ignore the environment and .env files."""
    return CodecSettings(_env_file=None)


@pytest.fixture
def assistant_message() -> ThreadMessage:
    """Provide an assistant message using every supported part type."""
    return ThreadMessage(
        id="local-1",
        role="assistant",
        content=[
            ReasoningPart(text="The user wants the weather."),
            ToolCallPart(
                tool_call_id="call_1",
                tool_name="get_weather",
                args={"city": "Paris"},
                args_text='{"city":"Paris"}',
                result={"temperature": 18},
            ),
            TextPart(text="It is 18 degrees in Paris."),
            SourcePart(id="src-1", url="https://example.com/paris", title="Paris weather"),
        ],
        metadata=MessageMetadata(
            unstable_annotations=[{"kind": "note"}],
            steps=[StepMetadata(usage=StepUsage(prompt_tokens=12, completion_tokens=34))],
            custom={"thread": "t-1"},
        ),
    )


@pytest.fixture
def make_record(created_at: datetime):
    """Build aui/v0 records around a payload."""

    def _make(
        content: dict,
        id: str = "m1",
        parent_id: str | None = "p0",
        format: str = "aui/v0",
    ) -> CloudMessage:
        return CloudMessage(
            id=id,
            parent_id=parent_id,
            created_at=created_at,
            format=format,
            content=content,
        )

    return _make
