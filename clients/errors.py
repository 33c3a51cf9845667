# clients/errors.py
from __future__ import annotations


class CompletionError(Exception):
    """Terminal failure of a single completion request."""


class TransportError(CompletionError):
    """DNS failure, timeout, connection reset, ..."""


class HttpError(CompletionError):
    def __init__(self, status: int, message: str = ""):
        self.status = status
        super().__init__(message or f"HTTP error! status: {status}")


class ProtocolError(CompletionError):
    """The endpoint answered 2xx but the envelope isn't a chat completion."""
