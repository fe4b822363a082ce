import json
import threading
from typing import List, Optional

from promptcache.config.api import ApiHandlerOptions
from promptcache.config.providers.anthropic import get_anthropic_client
from promptcache.llm.cache_state import CacheStateTracker
from promptcache.llm.catalog import ModelDescriptor, resolve
from promptcache.llm.chunks import BlockChunk, TextChunk
from promptcache.llm.cost import estimate_cost
from promptcache.llm.dispatch import PreparedRequest, build_request
from promptcache.llm.exceptions import RequestCancelledError
from promptcache.llm.handlers.base import (
    ApiHandler,
    ApiHandlerMessageResponse,
    ConfirmCallback,
)
from promptcache.llm.messages import AssistantMessage, Message
from promptcache.llm.types import Tools
from promptcache.logger import logger_llm


class AnthropicMissingConfigurationError(Exception):
    pass


class AnthropicHandler(ApiHandler):
    """
    Anthropic Messages API handler with incremental prompt caching.

    Each handler owns a CacheStateTracker unless one is passed in, so a
    session that outlives its handler can keep its cache state.
    """

    def __init__(
        self,
        options: Optional[ApiHandlerOptions] = None,
        client=None,
        cache_state: Optional[CacheStateTracker] = None,
        confirm: Optional[ConfirmCallback] = None,
    ):
        self.options = ApiHandlerOptions() if options is None else options

        if client is None:
            client = get_anthropic_client(
                self.options.api_key, self.options.anthropic_base_url
            )
        if client is None:
            raise AnthropicMissingConfigurationError(
                "Anthropic was not initialized correctly, did you set the api key?"
            )

        self.client = client
        self.cache_state = CacheStateTracker() if cache_state is None else cache_state
        self.confirm = confirm
        self._lock = threading.Lock()

    def get_model(self) -> ModelDescriptor:
        return resolve(self.options.api_model_id)

    def create_message(
        self,
        system_prompt: str,
        messages: List[Message],
        tools: Tools = None,
    ) -> ApiHandlerMessageResponse:
        model = self.get_model()

        with self._lock:
            new_messages = self.cache_state.diff_new(messages)
            request = build_request(
                system_prompt, self.cache_state.messages, new_messages, tools, model
            )

            if self.confirm is not None and not self.confirm(request):
                raise RequestCancelledError(
                    f"Request to {model.id} was cancelled before it was sent"
                )

            response = self._send(request)
            self.cache_state.commit(request.new_messages)

        logger_llm.debug(
            f"[ANTHROPIC] {model.id} cached={request.cached} "
            f"new_messages={len(request.new_messages)} stop_reason={getattr(response, 'stop_reason', None)}"
        )

        return ApiHandlerMessageResponse(
            message=response,
            assistant_message=self._to_assistant_message(response),
            cost=estimate_cost(model, getattr(response, "usage", None)),
        )

    def _send(self, request: PreparedRequest):
        logger_llm.debug(
            f"[ANTHROPIC] Request:\n{json.dumps(request.payload, indent=2, default=str)}"
        )
        if request.cached and request.headers:
            return self.client.messages.create(
                **request.payload, extra_headers=request.headers
            )
        return self.client.messages.create(**request.payload)

    @staticmethod
    def _to_assistant_message(response) -> AssistantMessage:
        content = []
        for block in getattr(response, "content", None) or []:
            if block.type == "text":
                content.append(TextChunk(block.text))
            elif block.type == "tool_use":
                content.append(BlockChunk.tool_use(block.id, block.name, block.input))
        return AssistantMessage(content, stop_reason=getattr(response, "stop_reason", None))

    @staticmethod
    def get_name():
        return "Anthropic"
