import os

DEFAULT_PROVIDER = "anthropic"

API_PROVIDER = os.getenv("PC_API_PROVIDER") or DEFAULT_PROVIDER
API_MODEL_ID = os.getenv("PC_API_MODEL_ID", None)

# Low temperature keeps tool use close to deterministic
REQUEST_TEMPERATURE = 0.2

TOOL_CHOICE_AUTO = {"type": "auto"}

CACHE_CONTROL_EPHEMERAL = {"type": "ephemeral"}
