"""
Type definitions shared across the llm package.
"""

from .tool_types import (
    ToolFunctionParameters,
    ToolFunction,
    Tool,
    AnthropicTool,
    ToolDefinition,
    AnthropicToolDefinition,
)

from .chunks import CacheChunk, TextChunk, BlockChunk

from typing import Union, List, Optional

ContentChunk = Union[TextChunk, CacheChunk, BlockChunk]
ContentType = Union[str, List[ContentChunk]]
Tools = Optional[Union[ToolDefinition, AnthropicToolDefinition]]
