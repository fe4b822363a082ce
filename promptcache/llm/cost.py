"""
Rough cost estimates from provider usage counters.

Not token-accurate: prices come from the model catalog and only the
counters the provider reports are taken into account.
"""

from typing import Any, Optional

from .catalog import ModelDescriptor


def _count(usage: Any, name: str) -> int:
    if isinstance(usage, dict):
        value = usage.get(name)
    else:
        value = getattr(usage, name, None)
    return value if isinstance(value, int) else 0


def estimate_cost(descriptor: ModelDescriptor, usage: Any) -> Optional[float]:
    if usage is None:
        return None

    input_tokens = _count(usage, "input_tokens") or _count(usage, "prompt_tokens")
    output_tokens = _count(usage, "output_tokens") or _count(
        usage, "completion_tokens"
    )
    cache_writes = _count(usage, "cache_creation_input_tokens")
    cache_reads = _count(usage, "cache_read_input_tokens")

    return (
        descriptor.input_price * input_tokens
        + descriptor.output_price * output_tokens
        + descriptor.cache_writes_price * cache_writes
        + descriptor.cache_reads_price * cache_reads
    ) / 1_000_000
