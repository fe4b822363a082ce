from typing import List

from . import anthropic, openai

PROVIDERS = {
    "anthropic": anthropic,
    "openai": openai,
}


def get_available_providers() -> List[str]:
    available = []
    for name, provider in PROVIDERS.items():
        if getattr(provider, f"is_{name}_available")():
            available.append(name)
    return available


def is_provider_available(provider_name: str) -> bool:
    if provider_name not in PROVIDERS:
        return False
    return getattr(PROVIDERS[provider_name], f"is_{provider_name}_available")()
