import json
from typing import List, Optional

from promptcache.config.api import ApiHandlerOptions
from promptcache.config.defaults import REQUEST_TEMPERATURE
from promptcache.config.providers.openai import OPENAI_MODEL_ID, get_openai_client
from promptcache.llm.catalog import ModelDescriptor, openai_model_descriptor
from promptcache.llm.chunks import BlockChunk, CacheChunk, TextChunk
from promptcache.llm.cost import estimate_cost
from promptcache.llm.dispatch import PreparedRequest, convert_tools_to_anthropic
from promptcache.llm.exceptions import RequestCancelledError
from promptcache.llm.handlers.base import (
    ApiHandler,
    ApiHandlerMessageResponse,
    ConfirmCallback,
)
from promptcache.llm.messages import ROLE_ASSISTANT, AssistantMessage, Message
from promptcache.llm.types import Tools
from promptcache.logger import logger_llm


class OpenAiMissingConfigurationError(Exception):
    pass


class OpenAiHandler(ApiHandler):
    """
    Handler for OpenAI-compatible chat completion endpoints.

    OpenAI caches prompt prefixes on its own without markers, so this handler
    keeps no cache state and sends the whole conversation on every call.
    """

    def __init__(
        self,
        options: Optional[ApiHandlerOptions] = None,
        client=None,
        confirm: Optional[ConfirmCallback] = None,
    ):
        self.options = ApiHandlerOptions() if options is None else options

        if client is None:
            client = get_openai_client(
                self.options.openai_api_key, self.options.openai_base_url
            )
        if client is None:
            raise OpenAiMissingConfigurationError(
                "OpenAi was not initialized correctly, did you set the api key?"
            )

        self.client = client
        self.confirm = confirm

    def get_model(self) -> ModelDescriptor:
        return openai_model_descriptor(self.options.openai_model_id or OPENAI_MODEL_ID)

    def build_payload(
        self,
        system_prompt: str,
        messages: List[Message],
        tools: Tools = None,
    ) -> dict:
        model = self.get_model()
        payload = {
            "model": model.id,
            "temperature": REQUEST_TEMPERATURE,
            "messages": [{"role": "system", "content": system_prompt}]
            + self._convert_messages_to_openai(messages),
        }
        if model.max_tokens:
            payload["max_tokens"] = model.max_tokens

        openai_tools = self._convert_tools_to_openai(tools)
        if openai_tools:
            payload["tools"] = openai_tools
            payload["tool_choice"] = "auto"
        return payload

    def create_message(
        self,
        system_prompt: str,
        messages: List[Message],
        tools: Tools = None,
    ) -> ApiHandlerMessageResponse:
        model = self.get_model()
        payload = self.build_payload(system_prompt, messages, tools)
        request = PreparedRequest(
            payload=payload, cached=False, new_messages=list(messages)
        )

        if self.confirm is not None and not self.confirm(request):
            raise RequestCancelledError(
                f"Request to {model.id} was cancelled before it was sent"
            )

        logger_llm.debug(f"[OPENAI] Request:\n{json.dumps(payload, indent=2, default=str)}")
        completion = self.client.chat.completions.create(**payload)

        assistant_message = self._to_assistant_message(completion)
        logger_llm.debug(
            f"[OPENAI] {model.id} stop_reason={assistant_message.stop_reason}"
        )

        return ApiHandlerMessageResponse(
            message=completion,
            assistant_message=assistant_message,
            cost=estimate_cost(model, getattr(completion, "usage", None)),
        )

    def _convert_messages_to_openai(self, messages: List[Message]) -> List[dict]:
        openai_messages = []

        for message in messages:
            if isinstance(message.content, str):
                openai_messages.append(
                    {"role": message.role, "content": message.content}
                )
                continue

            if message.role == ROLE_ASSISTANT:
                openai_messages.append(self._convert_assistant_message(message))
                continue

            # Tool results must directly follow the assistant tool calls they answer
            parts = []
            for chunk in message.content:
                if isinstance(chunk, BlockChunk) and chunk.type == "tool_result":
                    openai_messages.append(
                        {
                            "role": "tool",
                            "tool_call_id": chunk.data["tool_use_id"],
                            "content": self._tool_result_content(chunk.data.get("content")),
                        }
                    )
                elif isinstance(chunk, (TextChunk, CacheChunk)):
                    parts.append({"type": "text", "text": chunk.content})
                elif isinstance(chunk, BlockChunk) and chunk.type == "image":
                    source = chunk.data["source"]
                    parts.append(
                        {
                            "type": "image_url",
                            "image_url": {
                                "url": f"data:{source['media_type']};base64,{source['data']}"
                            },
                        }
                    )
            if parts:
                openai_messages.append({"role": message.role, "content": parts})

        return openai_messages

    @staticmethod
    def _convert_assistant_message(message: Message) -> dict:
        text = message.get_content_as_string()
        tool_calls = [
            {
                "id": chunk.data["id"],
                "type": "function",
                "function": {
                    "name": chunk.data["name"],
                    "arguments": json.dumps(chunk.data.get("input") or {}),
                },
            }
            for chunk in message.tool_uses
        ]
        converted = {"role": ROLE_ASSISTANT, "content": text or None}
        if tool_calls:
            converted["tool_calls"] = tool_calls
        return converted

    @staticmethod
    def _tool_result_content(content) -> str:
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            return "".join(
                part.get("text", "") for part in content if isinstance(part, dict)
            )
        return "" if content is None else str(content)

    @staticmethod
    def _convert_tools_to_openai(
        tools: Tools,
    ) -> List[dict]:
        return [
            {
                "type": "function",
                "function": {
                    "name": tool["name"],
                    "description": tool.get("description", ""),
                    "parameters": tool.get(
                        "input_schema", {"type": "object", "properties": {}}
                    ),
                },
            }
            for tool in convert_tools_to_anthropic(tools)
        ]

    @staticmethod
    def _to_assistant_message(completion) -> AssistantMessage:
        choice = completion.choices[0]
        content = []
        if choice.message.content:
            content.append(TextChunk(choice.message.content))

        for tool_call in choice.message.tool_calls or []:
            arguments = tool_call.function.arguments or "{}"
            try:
                tool_input = json.loads(arguments)
            except json.JSONDecodeError:
                tool_input = {"raw_arguments": arguments}
            content.append(
                BlockChunk.tool_use(tool_call.id, tool_call.function.name, tool_input)
            )

        stop_reason = {
            "stop": "end_turn",
            "length": "max_tokens",
            "tool_calls": "tool_use",
        }.get(choice.finish_reason, choice.finish_reason)
        return AssistantMessage(content, stop_reason=stop_reason)

    @staticmethod
    def get_name():
        return "OpenAI"
