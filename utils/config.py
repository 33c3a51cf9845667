# utils/config.py
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"
GROQ_MODEL = "llama3-8b-8192"

# UI bounds (slider / traveller counter)
MAX_TRAVELERS = 20
MIN_BUDGET = 500
MAX_BUDGET = 15000

ITINERARY_SESSION_KEY = "travelData"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class TravelConfig:
    """
    Static settings for the completion endpoint.
    Values come from the environment (or a .env file); nothing is per-call.
    """
    api_key: Optional[str] = field(default=None, repr=False)
    api_url: str = GROQ_API_URL
    model: str = GROQ_MODEL
    temperature: float = 0.7
    max_tokens: int = 1000
    timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "TravelConfig":
        load_dotenv()
        return cls(
            api_key=os.getenv("GROQ_API_KEY") or None,
            api_url=os.getenv("GROQ_API_URL") or GROQ_API_URL,
            model=os.getenv("GROQ_MODEL") or GROQ_MODEL,
            temperature=_env_float("GROQ_TEMPERATURE", 0.7),
            max_tokens=_env_int("GROQ_MAX_TOKENS", 1000),
            timeout=_env_float("GROQ_TIMEOUT", 30.0),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )
