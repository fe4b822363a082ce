"""
Content chunks for message construction.

Provides unified imports for the three chunk types used to build
message content: plain text, cacheable text and any other typed block.
"""

from .cache import CacheChunk
from .text import TextChunk
from .block import BlockChunk

__all__ = ["CacheChunk", "TextChunk", "BlockChunk"]
