import os
from typing import Optional

OPENAI_API_KEY = os.getenv("PC_OPENAI_API_KEY", None)
OPENAI_BASE_URL = os.getenv("PC_OPENAI_BASE_URL", None)
OPENAI_MODEL_ID = os.getenv("PC_OPENAI_MODEL_ID") or "gpt-4o"

_openai_client = None


def get_openai_client(api_key: Optional[str] = None, base_url: Optional[str] = None):
    global _openai_client

    if api_key:
        from openai import OpenAI

        return OpenAI(api_key=api_key, base_url=base_url or OPENAI_BASE_URL)

    if _openai_client is None and OPENAI_API_KEY:
        from openai import OpenAI

        _openai_client = OpenAI(api_key=OPENAI_API_KEY, base_url=OPENAI_BASE_URL)
    return _openai_client


def is_openai_available() -> bool:
    return OPENAI_API_KEY is not None
