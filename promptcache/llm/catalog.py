"""
Static model catalog.

Everything that varies per model (token limits, prompt caching support,
required beta headers, prices) lives in the descriptors below, so adding a
model is a data change.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ModelDescriptor:
    id: str
    max_tokens: Optional[int]
    supports_caching: bool
    required_beta_header: Optional[str] = None
    # USD per million tokens
    input_price: float = 0.0
    output_price: float = 0.0
    cache_writes_price: float = 0.0
    cache_reads_price: float = 0.0


PROMPT_CACHING_BETA = "prompt-caching-2024-07-31"

ANTHROPIC_MODELS: Dict[str, ModelDescriptor] = {
    descriptor.id: descriptor
    for descriptor in [
        ModelDescriptor(
            id="claude-3-5-sonnet-20240620",
            max_tokens=8192,
            supports_caching=True,
            required_beta_header=PROMPT_CACHING_BETA,
            input_price=3.0,
            output_price=15.0,
            cache_writes_price=3.75,
            cache_reads_price=0.3,
        ),
        ModelDescriptor(
            id="claude-3-opus-20240229",
            max_tokens=4096,
            supports_caching=True,
            input_price=15.0,
            output_price=75.0,
            cache_writes_price=18.75,
            cache_reads_price=1.5,
        ),
        ModelDescriptor(
            id="claude-3-sonnet-20240229",
            max_tokens=4096,
            supports_caching=False,
            input_price=3.0,
            output_price=15.0,
        ),
        ModelDescriptor(
            id="claude-3-haiku-20240307",
            max_tokens=4096,
            supports_caching=True,
            required_beta_header=PROMPT_CACHING_BETA,
            input_price=0.25,
            output_price=1.25,
            cache_writes_price=0.3,
            cache_reads_price=0.03,
        ),
    ]
}

ANTHROPIC_DEFAULT_MODEL_ID = "claude-3-5-sonnet-20240620"


def resolve(requested_id: Optional[str] = None) -> ModelDescriptor:
    if requested_id and requested_id in ANTHROPIC_MODELS:
        return ANTHROPIC_MODELS[requested_id]
    return ANTHROPIC_MODELS[ANTHROPIC_DEFAULT_MODEL_ID]


def openai_model_descriptor(model_id: str) -> ModelDescriptor:
    """
    OpenAI-compatible endpoints serve arbitrary model ids, so the descriptor
    is built from sane defaults rather than looked up.
    """
    return ModelDescriptor(
        id=model_id,
        max_tokens=None,
        supports_caching=False,
    )
