from typing import Dict, Optional, Type

from promptcache.config.api import ApiConfiguration
from promptcache.config.defaults import DEFAULT_PROVIDER
from promptcache.logger import logger
from .base import ApiHandler, ApiHandlerMessageResponse
from .anthropic import AnthropicHandler
from .openai import OpenAiHandler

HANDLERS: Dict[str, Type[ApiHandler]] = {
    "anthropic": AnthropicHandler,
    "openai": OpenAiHandler,
}


def build_api_handler(
    configuration: Optional[ApiConfiguration] = None, **kwargs
) -> ApiHandler:
    """
    Unknown or missing provider ids fall back to the default provider
    instead of failing, which silently switches providers on a typo.
    """
    if configuration is None:
        configuration = ApiConfiguration.from_env()

    provider = configuration.api_provider
    handler_class = HANDLERS.get(provider) if provider else None
    if handler_class is None:
        if provider:
            logger.warning(
                f"Unknown api provider {provider!r}, falling back to {DEFAULT_PROVIDER!r}"
            )
        handler_class = HANDLERS[DEFAULT_PROVIDER]

    return handler_class(configuration.options(), **kwargs)


__all__ = [
    "ApiHandler",
    "ApiHandlerMessageResponse",
    "AnthropicHandler",
    "OpenAiHandler",
    "HANDLERS",
    "build_api_handler",
]
