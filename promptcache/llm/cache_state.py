"""
Tracks which prefix of a conversation has already been sent to the provider.

Comparison is positional: the caller must never rewrite or reorder history it
has already sent. A conversation shorter than the recorded prefix is a
contract violation and raises instead of resyncing.
"""

from typing import List, Sequence, Tuple

from .exceptions import CachePrefixMismatchError
from .messages import Message


class CacheStateTracker:
    def __init__(self):
        self._messages: List[Message] = []

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    def diff_new(self, conversation: Sequence[Message]) -> List[Message]:
        cached_count = len(self._messages)
        if len(conversation) < cached_count:
            raise CachePrefixMismatchError(
                f"Conversation has {len(conversation)} messages but {cached_count} were already sent",
                cached_count=cached_count,
                conversation_count=len(conversation),
            )
        return list(conversation[cached_count:])

    def commit(self, sent_messages: Sequence[Message]) -> None:
        self._messages.extend(sent_messages)

    def __len__(self):
        return len(self._messages)

    def __repr__(self):
        return f"CacheStateTracker(cached={len(self._messages)})"
