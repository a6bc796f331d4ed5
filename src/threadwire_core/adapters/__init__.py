"""Adapters that turn loosely-typed message-like objects into ThreadMessages.

Available adapters:
    - from_message_like: The default reconstructor used by the decoders.

Usage:
    ```python
    from threadwire_core.adapters import from_message_like
    from threadwire_core.messages import CompleteStatus

    message = from_message_like(
        {"role": "user", "content": "Hello"},
        fallback_id="msg-1",
        fallback_status=CompleteStatus(reason="unknown"),
    )
    ```
"""

from threadwire_core.adapters.message_like import from_message_like
from threadwire_core.adapters.protocol import MessageReconstructor

__all__ = ["MessageReconstructor", "from_message_like"]
