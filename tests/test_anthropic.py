import threading
import time

import pytest
from types import SimpleNamespace
from unittest.mock import Mock

from promptcache.config.api import ApiHandlerOptions
from promptcache.llm.cache_state import CacheStateTracker
from promptcache.llm.chunks import BlockChunk, TextChunk
from promptcache.llm.exceptions import CachePrefixMismatchError, RequestCancelledError
from promptcache.llm.handlers.anthropic import AnthropicHandler
from promptcache.llm.messages import AssistantMessage, UserMessage


class TransportError(Exception):
    pass


def make_response(*blocks, stop_reason="end_turn"):
    if not blocks:
        blocks = (SimpleNamespace(type="text", text="hello"),)
    return SimpleNamespace(
        content=list(blocks),
        stop_reason=stop_reason,
        usage=SimpleNamespace(
            input_tokens=1_000_000,
            output_tokens=0,
            cache_creation_input_tokens=0,
            cache_read_input_tokens=0,
        ),
    )


def make_handler(model_id="claude-3-5-sonnet-20240620", **kwargs):
    client = Mock()
    client.messages.create.return_value = make_response()
    handler = AnthropicHandler(ApiHandlerOptions(api_model_id=model_id), client=client, **kwargs)
    return handler, client


class TestCreateMessage:
    def test_first_turn(self):
        handler, client = make_handler()
        conversation = [UserMessage("hi")]

        response = handler.create_message("system", conversation, [])

        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["extra_headers"] == {"anthropic-beta": "prompt-caching-2024-07-31"}
        assert kwargs["messages"] == [
            {"role": "user", "content": [{"type": "text", "text": "hi", "cache_control": {"type": "ephemeral"}}]}
        ]
        assert handler.cache_state.messages == (conversation[0],)
        assert response.message is client.messages.create.return_value
        assert response.assistant_message.get_content_as_string() == "hello"
        assert response.cost == pytest.approx(3.0)

    def test_second_turn_resends_history_and_commits_new(self):
        handler, client = make_handler()
        hi, hello, how = UserMessage("hi"), AssistantMessage("hello"), UserMessage("how are you")

        handler.create_message("system", [hi], [])
        handler.create_message("system", [hi, hello, how], [])

        messages = client.messages.create.call_args.kwargs["messages"]
        assert [message["role"] for message in messages] == ["user", "assistant", "user"]
        assert messages[0]["content"] == "hi"
        assert "cache_control" in messages[2]["content"][0]
        assert len(handler.cache_state) == 3

    def test_model_without_caching_uses_plain_shape(self):
        handler, client = make_handler("claude-3-sonnet-20240229")
        hi, hello, how = UserMessage("hi"), AssistantMessage("hello"), UserMessage("how are you")

        handler.create_message("system", [hi], [])
        handler.create_message("system", [hi, hello, how], [])

        kwargs = client.messages.create.call_args.kwargs
        assert "extra_headers" not in kwargs
        assert kwargs["system"] == [{"type": "text", "text": "system"}]
        assert kwargs["messages"] == [
            {"role": "assistant", "content": "hello"},
            {"role": "user", "content": "how are you"},
        ]
        assert len(handler.cache_state) == 3

    def test_opus_is_cached_without_headers(self):
        handler, client = make_handler("claude-3-opus-20240229")
        handler.create_message("system", [UserMessage("hi")], [])
        kwargs = client.messages.create.call_args.kwargs
        assert "extra_headers" not in kwargs
        assert kwargs["system"][0]["cache_control"] == {"type": "ephemeral"}

    def test_tool_use_response(self):
        handler, client = make_handler()
        client.messages.create.return_value = make_response(
            SimpleNamespace(type="text", text="Reading"),
            SimpleNamespace(type="tool_use", id="toolu_1", name="read_file", input={"path": "a.py"}),
            stop_reason="tool_use",
        )
        response = handler.create_message("system", [UserMessage("read a.py")], [])

        message = response.assistant_message
        assert message.stop_reason == "tool_use"
        assert message.is_tool_call
        assert isinstance(message.content[0], TextChunk)
        assert message.tool_uses[0].to_dict() == BlockChunk.tool_use("toolu_1", "read_file", {"path": "a.py"}).to_dict()


class TestFailures:
    def test_transport_error_propagates_without_commit(self):
        handler, client = make_handler()
        client.messages.create.side_effect = TransportError("rate limited")

        with pytest.raises(TransportError):
            handler.create_message("system", [UserMessage("hi")], [])
        assert len(handler.cache_state) == 0

    def test_retry_after_failure_recomputes_same_turn(self):
        handler, client = make_handler()
        hi, hello, how = UserMessage("hi"), AssistantMessage("hello"), UserMessage("how are you")
        handler.create_message("system", [hi], [])

        client.messages.create.side_effect = TransportError("overloaded")
        with pytest.raises(TransportError):
            handler.create_message("system", [hi, hello, how], [])
        assert len(handler.cache_state) == 1

        client.messages.create.side_effect = None
        client.messages.create.return_value = make_response()
        handler.create_message("system", [hi, hello, how], [])
        assert handler.cache_state.messages == (hi, hello, how)

    def test_shorter_conversation_raises_before_sending(self):
        handler, client = make_handler()
        a, b = UserMessage("a"), AssistantMessage("b")
        handler.cache_state.commit([a, b])

        with pytest.raises(CachePrefixMismatchError):
            handler.create_message("system", [a], [])
        client.messages.create.assert_not_called()
        assert handler.cache_state.messages == (a, b)

    def test_cancelled_request_is_not_sent_or_committed(self):
        seen = []

        def confirm(request):
            seen.append(request)
            return False

        handler, client = make_handler(confirm=confirm)
        with pytest.raises(RequestCancelledError):
            handler.create_message("system", [UserMessage("hi")], [])

        assert seen[0].cached is True
        assert seen[0].payload["model"] == "claude-3-5-sonnet-20240620"
        client.messages.create.assert_not_called()
        assert len(handler.cache_state) == 0

    def test_confirmed_request_is_sent(self):
        handler, client = make_handler(confirm=lambda request: True)
        handler.create_message("system", [UserMessage("hi")], [])
        client.messages.create.assert_called_once()


class TestConfiguration:
    def test_shared_cache_state(self):
        cache_state = CacheStateTracker()
        handler, _ = make_handler(cache_state=cache_state)
        handler.create_message("system", [UserMessage("hi")], [])
        assert len(cache_state) == 1

    def test_get_model_defaults(self):
        handler, _ = make_handler(model_id="not-a-model")
        assert handler.get_model().id == "claude-3-5-sonnet-20240620"

    def test_client_built_from_options(self):
        handler = AnthropicHandler(
            ApiHandlerOptions(api_key="sk-test", anthropic_base_url="https://example.invalid")
        )
        assert str(handler.client.base_url).startswith("https://example.invalid")

    def test_name(self):
        assert AnthropicHandler.get_name() == "Anthropic"


class TestConcurrency:
    def test_overlapping_turns_do_not_duplicate_prefix(self):
        handler, client = make_handler()
        first_call_started = threading.Event()
        release_first_call = threading.Event()
        payloads = []

        def create(**kwargs):
            payloads.append(kwargs)
            if len(payloads) == 1:
                first_call_started.set()
                release_first_call.wait(timeout=5)
            return make_response()

        client.messages.create.side_effect = create
        hi, hello, how = UserMessage("hi"), AssistantMessage("hello"), UserMessage("how are you")
        errors = []

        def turn(conversation):
            try:
                handler.create_message("system", conversation, [])
            except Exception as error:
                errors.append(error)

        first = threading.Thread(target=turn, args=([hi],))
        second = threading.Thread(target=turn, args=([hi, hello, how],))

        first.start()
        assert first_call_started.wait(timeout=5)
        second.start()
        time.sleep(0.05)
        # The second turn must still be waiting for the first to finish
        assert len(payloads) == 1
        release_first_call.set()
        first.join(timeout=5)
        second.join(timeout=5)

        assert errors == []
        assert handler.cache_state.messages == (hi, hello, how)
        assert len(payloads[1]["messages"]) == 3
