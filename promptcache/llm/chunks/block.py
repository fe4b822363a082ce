"""
Non-text content blocks.

Images, tool calls and tool results travel through the conversation as
BlockChunks: a block type plus the provider fields of that block, kept in
the Anthropic wire layout (``{"type": ..., **data}``).
"""

import copy
from typing import Optional


class BlockChunk:
    def __init__(self, type: str, data: Optional[dict] = None, cacheable: bool = False):
        self.type = type
        self.data = {} if data is None else data
        self.cacheable = cacheable

    @classmethod
    def tool_use(cls, id: str, name: str, input: dict) -> "BlockChunk":
        return cls("tool_use", {"id": id, "name": name, "input": input})

    @classmethod
    def tool_result(
        cls, tool_use_id: str, content: str, is_error: bool = False
    ) -> "BlockChunk":
        data = {"tool_use_id": tool_use_id, "content": content}
        if is_error:
            data["is_error"] = True
        return cls("tool_result", data)

    @classmethod
    def image(cls, media_type: str, data: str) -> "BlockChunk":
        return cls(
            "image",
            {"source": {"type": "base64", "media_type": media_type, "data": data}},
        )

    def to_dict(self) -> dict:
        return {"type": self.type, **copy.deepcopy(self.data)}

    def __repr__(self):
        cache_info = ", cacheable=True" if self.cacheable else ""
        return f'BlockChunk("{self.type}"{cache_info})'
