import os
from typing import Optional

ANTHROPIC_API_KEY = os.getenv("PC_ANTHROPIC_API_KEY", None)
ANTHROPIC_BASE_URL = os.getenv("PC_ANTHROPIC_BASE_URL", None)
ANTHROPIC_BETA_HEADER = "anthropic-beta"

_anthropic_client = None


def get_anthropic_client(
    api_key: Optional[str] = None, base_url: Optional[str] = None
):
    global _anthropic_client

    if not (api_key or ANTHROPIC_API_KEY):
        return None

    if api_key or base_url:
        from anthropic import Anthropic

        return Anthropic(
            api_key=api_key or ANTHROPIC_API_KEY,
            base_url=base_url or ANTHROPIC_BASE_URL,
        )

    if _anthropic_client is None:
        from anthropic import Anthropic

        _anthropic_client = Anthropic(
            api_key=ANTHROPIC_API_KEY, base_url=ANTHROPIC_BASE_URL
        )
    return _anthropic_client


def is_anthropic_available() -> bool:
    return ANTHROPIC_API_KEY is not None
