from ..types import ContentType
from .base import Message
from .roles import ROLE_USER


class UserMessage(Message):

    def __init__(self, content: ContentType):
        super().__init__(content, ROLE_USER)
