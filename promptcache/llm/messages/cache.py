from typing import List

from ..chunks import CacheChunk, TextChunk, BlockChunk
from ..types import ContentType, ContentChunk


def get_content_as_string(content: ContentType) -> str:
    if isinstance(content, str):
        return content
    elif isinstance(content, list):
        text_parts = []
        for chunk in content:
            if isinstance(chunk, (TextChunk, CacheChunk)):
                text_parts.append(chunk.content)
        return "".join(text_parts)
    else:
        return str(content)


def has_cacheable_content(content: ContentType) -> bool:
    if isinstance(content, list):
        return any(
            isinstance(chunk, (CacheChunk, BlockChunk)) and chunk.cacheable
            for chunk in content
        )
    return False


def get_chunks(content: ContentType) -> List[ContentChunk]:
    if isinstance(content, str):
        return [TextChunk(content)]
    elif isinstance(content, list):
        return list(content)
    else:
        return [TextChunk(str(content))]


def get_block_chunks(content: ContentType, block_type: str) -> List[BlockChunk]:
    if isinstance(content, str):
        return []
    return [
        chunk
        for chunk in content
        if isinstance(chunk, BlockChunk) and chunk.type == block_type
    ]
