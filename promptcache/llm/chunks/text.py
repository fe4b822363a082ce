"""
Text chunk handling for regular text content in messages.
"""


class TextChunk:
    """
    Represents a chunk of plain text content.

    Provides a consistent interface for text content alongside CacheChunk
    and BlockChunk, making message content lists visually scannable.
    """

    def __init__(self, content: str):
        self.content = content

    def __repr__(self):
        content_preview = (
            self.content[:50] + "..." if len(self.content) > 50 else self.content
        )
        return f'TextChunk("{content_preview}")'
