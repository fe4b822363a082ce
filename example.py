from pathlib import Path

from promptcache.config import ApiConfiguration
from promptcache.llm.chunks import BlockChunk
from promptcache.llm.handlers import build_api_handler
from promptcache.llm.messages import UserMessage


TOOLS = [
    {
        "type": "function",
        "function": {
            "name": "read_file",
            "description": "Read a text file from the current directory",
            "parameters": {
                "type": "object",
                "properties": {"path": {"type": "string"}},
                "required": ["path"],
            },
        },
    }
]


def read_file(path: str) -> str:
    return Path(path).read_text()


# You need to have PC_ANTHROPIC_API_KEY (or PC_OPENAI_API_KEY with PC_API_PROVIDER=openai) set to run this example
if __name__ == "__main__":
    handler = build_api_handler(ApiConfiguration.from_env())

    conversation = [UserMessage("What does setup.py in this directory install?")]

    while True:
        response = handler.create_message(
            "You are a concise assistant that can read files.", conversation, TOOLS
        )
        assistant_message = response.assistant_message
        conversation.append(assistant_message)
        print(f"{assistant_message.get_content_as_string()} (~${response.cost or 0:.4f})")

        if not assistant_message.is_tool_call:
            break

        results = []
        for tool_use in assistant_message.tool_uses:
            try:
                results.append(
                    BlockChunk.tool_result(tool_use.data["id"], read_file(**tool_use.data["input"]))
                )
            except OSError as error:
                results.append(
                    BlockChunk.tool_result(tool_use.data["id"], str(error), is_error=True)
                )
        conversation.append(UserMessage(results))
