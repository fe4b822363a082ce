import copy
from typing import List

from ..chunks import BlockChunk
from ..types import ContentType, ContentChunk
from .roles import ROLE_USER, ROLES
from .exceptions import UnknownRoleError
from .cache import (
    get_content_as_string,
    has_cacheable_content,
    get_chunks,
    get_block_chunks,
)


class Message:

    def __init__(self, content: ContentType, role: str = ROLE_USER):
        if role not in ROLES:
            raise UnknownRoleError(f"Unknown message role: {role}")
        self.content = content
        self.role = role

    def with_content(self, content: ContentType) -> "Message":
        new_message = copy.copy(self)
        new_message.content = content
        return new_message

    def get_content_as_string(self) -> str:
        return get_content_as_string(self.content)

    def has_cacheable_content(self) -> bool:
        return has_cacheable_content(self.content)

    def get_chunks(self) -> List[ContentChunk]:
        return get_chunks(self.content)

    @property
    def tool_uses(self) -> List[BlockChunk]:
        return get_block_chunks(self.content, "tool_use")

    def __repr__(self, truncate=True):
        content_str = self.get_content_as_string()
        if content_str:
            content = (
                content_str
                if len(content_str) < 50 or truncate is False
                else f"{content_str[:50]}..."
            )
        else:
            content = "null"
        return f'{self.role.capitalize()}Message("{content}")'
