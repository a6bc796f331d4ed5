"""Protocol for message-like reconstruction."""

from collections.abc import Mapping
from typing import Any, Protocol

from threadwire_core.messages import MessageStatus, ThreadMessage


class MessageReconstructor(Protocol):
    """Protocol for building a ThreadMessage from a message-like mapping.

    Decoders hand over the wire payload merged with the record's identity and
    leave every per-part decision to the reconstructor.
    """

    def __call__(
        self,
        like: Mapping[str, Any],
        fallback_id: str,
        fallback_status: MessageStatus,
    ) -> ThreadMessage:
        """Build a fully-typed message.

        Args:
            like: Message-like mapping using wire (camelCase) field names.
            fallback_id: Identifier used when ``like`` carries none.
            fallback_status: Status used when ``like`` carries none.

        Returns:
            The reconstructed ThreadMessage.
        """
        ...
