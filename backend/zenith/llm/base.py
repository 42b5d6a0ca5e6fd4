"""Generative-model client seam used by the relay handlers."""
from __future__ import annotations


class ModelCallError(Exception):
    """Any failure talking to the model provider (transport, auth, quota, SDK)."""

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class ModelClient:
    """Base interface for generative-model providers.

    ``is_available`` is a cheap local check (is a credential configured?);
    ``submit`` performs exactly one request and returns the raw reply text.
    """

    provider: str = "base"

    def __init__(self, *, api_key: str | None, model: str):
        self.api_key = (api_key or "").strip() or None
        self.model = model

    def is_available(self) -> bool:
        return self.api_key is not None

    def submit(self, prompt_text: str) -> str:
        raise NotImplementedError

    def masked_key(self) -> str:
        if not self.api_key:
            return "(missing)"
        if len(self.api_key) < 9:
            return f"(short key) (Length: {len(self.api_key)})"
        return f"{self.api_key[:5]}...{self.api_key[-4:]} (Length: {len(self.api_key)})"
