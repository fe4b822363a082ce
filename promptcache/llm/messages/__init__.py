"""Message types for conversations."""

from .roles import ROLE_USER, ROLE_ASSISTANT
from .base import Message
from .user import UserMessage
from .assistant import AssistantMessage
from .exceptions import UnknownRoleError

__all__ = [
    "ROLE_USER",
    "ROLE_ASSISTANT",
    "Message",
    "UserMessage",
    "AssistantMessage",
    "UnknownRoleError",
]
