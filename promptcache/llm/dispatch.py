"""
Request shape selection and payload assembly.

Models with prompt caching get the cached shape: a cache-marked system
prompt, the full history with the boundary on the last user turn, and any
beta header the model needs. Models without it get the plain shape, which
only carries the messages that are new since the last call.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Dict, List, Optional, Sequence

from promptcache.config.defaults import (
    CACHE_CONTROL_EPHEMERAL,
    REQUEST_TEMPERATURE,
    TOOL_CHOICE_AUTO,
)
from promptcache.config.providers.anthropic import ANTHROPIC_BETA_HEADER
from .annotate import annotate
from .catalog import ModelDescriptor
from .chunks import BlockChunk, CacheChunk, TextChunk
from .messages import Message
from .types import Tools


@dataclass(frozen=True)
class PreparedRequest:
    payload: dict
    cached: bool
    headers: Dict[str, str] = field(default_factory=dict)
    new_messages: List[Message] = field(default_factory=list)


def _cache_control(ttl: Optional[timedelta] = None) -> dict:
    cache_control = dict(CACHE_CONTROL_EPHEMERAL)
    if ttl is not None and ttl >= timedelta(hours=1):
        cache_control["ttl"] = "1h"
    return cache_control


def convert_chunk_to_anthropic(chunk) -> dict:
    if isinstance(chunk, CacheChunk):
        content_block = {"type": "text", "text": chunk.content}
        if chunk.cacheable:
            content_block["cache_control"] = _cache_control(chunk.ttl)
        return content_block
    elif isinstance(chunk, TextChunk):
        return {"type": "text", "text": chunk.content}
    elif isinstance(chunk, BlockChunk):
        content_block = chunk.to_dict()
        if chunk.cacheable:
            content_block["cache_control"] = _cache_control()
        return content_block
    raise TypeError(f"Unsupported content chunk: {chunk!r}")


def convert_message_to_anthropic(message: Message) -> dict:
    if isinstance(message.content, list):
        content = [convert_chunk_to_anthropic(chunk) for chunk in message.content]
    else:
        content = message.content
    return {"role": message.role, "content": content}


def convert_tools_to_anthropic(
    tools: Tools,
) -> List[dict]:
    anthropic_tools = []
    for tool in tools or []:
        if tool.get("type") == "function" and "function" in tool:
            func = tool["function"]
            anthropic_tools.append(
                {
                    "name": func["name"],
                    "description": func.get("description", ""),
                    "input_schema": func.get(
                        "parameters", {"type": "object", "properties": {}}
                    ),
                }
            )
        else:
            anthropic_tools.append(dict(tool))
    return anthropic_tools


def build_request(
    system_prompt: str,
    prior_cached: Sequence[Message],
    new_messages: Sequence[Message],
    tools: Tools,
    descriptor: ModelDescriptor,
) -> PreparedRequest:
    headers = {}
    if descriptor.supports_caching:
        system = [
            {
                "type": "text",
                "text": system_prompt,
                "cache_control": _cache_control(),
            }
        ]
        messages = annotate(prior_cached, new_messages)
        if descriptor.required_beta_header:
            headers[ANTHROPIC_BETA_HEADER] = descriptor.required_beta_header
    else:
        system = [{"type": "text", "text": system_prompt}]
        messages = list(new_messages)

    payload = {
        "model": descriptor.id,
        "max_tokens": descriptor.max_tokens,
        "temperature": REQUEST_TEMPERATURE,
        "system": system,
        "messages": [convert_message_to_anthropic(message) for message in messages],
    }

    anthropic_tools = convert_tools_to_anthropic(tools)
    if anthropic_tools:
        payload["tools"] = anthropic_tools
        payload["tool_choice"] = dict(TOOL_CHOICE_AUTO)

    return PreparedRequest(
        payload=payload,
        cached=descriptor.supports_caching,
        headers=headers,
        new_messages=list(new_messages),
    )
