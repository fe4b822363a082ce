from typing import Optional

from ..types import ContentType
from .base import Message
from .roles import ROLE_ASSISTANT


class AssistantMessage(Message):

    def __init__(self, content: ContentType, stop_reason: Optional[str] = None):
        super().__init__(content, ROLE_ASSISTANT)
        self.stop_reason = stop_reason

    @property
    def is_tool_call(self) -> bool:
        return len(self.tool_uses) > 0
