# clients/completion_client.py
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

from clients.errors import HttpError, ProtocolError, TransportError
from utils.config import TravelConfig

logger = logging.getLogger(__name__)


class CompletionClient:
    """
    Sends one prompt to an OpenAI-compatible chat completion endpoint (Groq by default)
    and returns the text of the first choice. No streaming, no retries.
    """

    def __init__(self, config: Optional[TravelConfig] = None):
        self.config = config or TravelConfig.from_env()

    def enabled(self) -> bool:
        return bool(self.config.api_key)

    def complete(self, prompt: str) -> str:
        if not self.config.api_key:
            raise ValueError("GROQ_API_KEY is missing.")

        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        logger.info("Requesting completion from %s (prompt: %d chars)", self.config.model, len(prompt))

        try:
            res = requests.post(
                self.config.api_url,
                headers=headers,
                json=self._payload(prompt),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            # The exception text never includes request headers.
            logger.error("Completion request failed: %s", type(e).__name__)
            raise TransportError(f"Completion request failed: {type(e).__name__}") from e

        # Only 2xx counts; an unfollowed redirect is a failure too.
        if not 200 <= res.status_code < 300:
            logger.error("Completion endpoint returned HTTP %s", res.status_code)
            raise HttpError(res.status_code)

        try:
            data = res.json()
        except ValueError as e:
            raise ProtocolError("Response body is not JSON.") from e

        return self._first_choice_content(data)

    def _payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.config.model,
            "messages": [
                {
                    "role": "user",
                    "content": prompt,
                }
            ],
            "temperature": self.config.temperature,
            "max_tokens": self.config.max_tokens,
        }

    def _first_choice_content(self, data: Any) -> str:
        if not isinstance(data, dict):
            raise ProtocolError("Response is not a JSON object.")
        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            raise ProtocolError("Response has no choices.")
        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise ProtocolError("choices[0].message.content is missing.")
        return content
