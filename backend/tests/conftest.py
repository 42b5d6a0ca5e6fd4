from __future__ import annotations

from typing import List

import pytest

from zenith.llm.base import ModelCallError, ModelClient


class FakeModelClient(ModelClient):
    """In-memory model client that records every prompt it is sent."""

    provider = "fake"

    def __init__(self, reply: str | None = None, error: Exception | None = None, available: bool = True):
        super().__init__(api_key="fake-key" if available else None, model="fake-model")
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    def submit(self, prompt_text: str) -> str:
        self.prompts.append(prompt_text)
        if self.error is not None:
            raise self.error
        return self.reply or ""


@pytest.fixture()
def fake_model():
    def _build(reply: str | None = None, *, error: Exception | None = None, available: bool = True) -> FakeModelClient:
        return FakeModelClient(reply=reply, error=error, available=available)

    return _build


@pytest.fixture()
def call_error() -> ModelCallError:
    return ModelCallError("fake", "429 Resource exhausted")
