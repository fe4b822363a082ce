"""
Configuration record consumed by the handler factory.

The provider identifier selects the handler class, everything else is
handed to the handler as its options.
"""

import dataclasses
from dataclasses import dataclass
from typing import Optional

from .defaults import API_PROVIDER, API_MODEL_ID
from .providers.anthropic import ANTHROPIC_API_KEY, ANTHROPIC_BASE_URL
from .providers.openai import OPENAI_API_KEY, OPENAI_BASE_URL, OPENAI_MODEL_ID


@dataclass(frozen=True)
class ApiHandlerOptions:
    api_model_id: Optional[str] = None
    api_key: Optional[str] = None
    anthropic_base_url: Optional[str] = None
    openai_api_key: Optional[str] = None
    openai_base_url: Optional[str] = None
    openai_model_id: Optional[str] = None


@dataclass(frozen=True)
class ApiConfiguration(ApiHandlerOptions):
    api_provider: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ApiConfiguration":
        return cls(
            api_provider=API_PROVIDER,
            api_model_id=API_MODEL_ID,
            api_key=ANTHROPIC_API_KEY,
            anthropic_base_url=ANTHROPIC_BASE_URL,
            openai_api_key=OPENAI_API_KEY,
            openai_base_url=OPENAI_BASE_URL,
            openai_model_id=OPENAI_MODEL_ID,
        )

    def options(self) -> ApiHandlerOptions:
        values = {
            field.name: getattr(self, field.name)
            for field in dataclasses.fields(ApiHandlerOptions)
        }
        return ApiHandlerOptions(**values)
