from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from promptcache.llm.catalog import ModelDescriptor
from promptcache.llm.dispatch import PreparedRequest
from promptcache.llm.messages import AssistantMessage, Message
from promptcache.llm.types import Tools


class HandlerNotImplemented(Exception):
    pass


@dataclass
class ApiHandlerMessageResponse:
    message: Any
    assistant_message: Optional[AssistantMessage] = None
    cost: Optional[float] = None


# Called with the prepared request before it is sent; returning False cancels the turn
ConfirmCallback = Callable[[PreparedRequest], bool]


class ApiHandler(ABC):
    @abstractmethod
    def create_message(
        self,
        system_prompt: str,
        messages: List[Message],
        tools: Tools = None,
    ) -> ApiHandlerMessageResponse:
        raise HandlerNotImplemented("You need to use a provider-specific handler")

    @abstractmethod
    def get_model(self) -> ModelDescriptor:
        raise HandlerNotImplemented("Handlers need to implement the get_model() method")

    @staticmethod
    @abstractmethod
    def get_name() -> str:
        raise HandlerNotImplemented("Handlers need to implement the get_name() method")
