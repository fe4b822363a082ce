"""
Cacheable text content.

A CacheChunk is text that carries the cache marker: when ``cacheable`` is
set, providers with prompt caching treat everything up to and including
this chunk as a reusable prefix.
"""

from datetime import timedelta
from typing import Optional


class CacheChunk:
    """
    Represents a chunk of text that can be cached by LLM providers.
    """

    def __init__(
        self, content: str, cacheable: bool = False, ttl: Optional[timedelta] = None
    ):
        """
        Initialize a cache chunk.

        :param content: The text content of this chunk
        :param cacheable: Whether this chunk marks a cache boundary
        :param ttl: Time-to-live for the cache (provider-specific interpretation)
        """
        self.content = content
        self.cacheable = cacheable
        self.ttl = ttl

    def __repr__(self):
        cache_info = f", cacheable={self.cacheable}"
        if self.ttl:
            cache_info += f", ttl={self.ttl}"
        content_preview = (
            self.content[:50] + "..." if len(self.content) > 50 else self.content
        )
        return f'CacheChunk("{content_preview}"{cache_info})'
