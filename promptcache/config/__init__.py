from .defaults import (
    DEFAULT_PROVIDER,
    API_PROVIDER,
    API_MODEL_ID,
    REQUEST_TEMPERATURE,
    TOOL_CHOICE_AUTO,
    CACHE_CONTROL_EPHEMERAL,
)

from .providers.anthropic import (
    ANTHROPIC_API_KEY,
    ANTHROPIC_BASE_URL,
    ANTHROPIC_BETA_HEADER,
    get_anthropic_client,
)

from .providers.openai import (
    OPENAI_API_KEY,
    OPENAI_BASE_URL,
    OPENAI_MODEL_ID,
    get_openai_client,
)

from .providers import (
    get_available_providers,
    is_provider_available,
)

from .api import ApiConfiguration, ApiHandlerOptions
