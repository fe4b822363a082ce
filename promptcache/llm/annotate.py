"""
Cache boundary placement.

Prefix caching providers read a cache marker as "cache everything up to and
including this block". Marking only the latest user turn gives the longest
reusable prefix, and moves forward as soon as new content is appended.
"""

from typing import List, Optional, Sequence

from .chunks import BlockChunk, CacheChunk, TextChunk
from .messages import Message, ROLE_USER
from .types import ContentChunk


def _mark_chunk(chunk: ContentChunk) -> ContentChunk:
    if isinstance(chunk, CacheChunk):
        return CacheChunk(chunk.content, cacheable=True, ttl=chunk.ttl)
    elif isinstance(chunk, TextChunk):
        return CacheChunk(chunk.content, cacheable=True)
    elif isinstance(chunk, BlockChunk):
        return BlockChunk(chunk.type, chunk.data, cacheable=True)
    raise TypeError(f"Unsupported content chunk: {chunk!r}")


def make_message_ephemeral(message: Message) -> Message:
    if isinstance(message.content, list):
        content = [_mark_chunk(chunk) for chunk in message.content]
    else:
        content = [CacheChunk(message.content, cacheable=True)]
    return message.with_content(content)


def last_user_message_index(messages: Sequence[Message]) -> Optional[int]:
    for index in range(len(messages) - 1, -1, -1):
        if messages[index].role == ROLE_USER:
            return index
    return None


def annotate(
    prior_cached: Sequence[Message], new_messages: Sequence[Message]
) -> List[Message]:
    prepared_messages = [*prior_cached, *new_messages]

    index = last_user_message_index(prepared_messages)
    if index is not None:
        prepared_messages[index] = make_message_ephemeral(prepared_messages[index])

    return prepared_messages
