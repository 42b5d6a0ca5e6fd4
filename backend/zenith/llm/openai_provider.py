"""OpenAI chat-completions provider."""
from __future__ import annotations

import logging

import openai

from zenith.llm.base import ModelCallError, ModelClient

logger = logging.getLogger(__name__)


class OpenAIModelClient(ModelClient):
    provider = "openai"

    def submit(self, prompt_text: str) -> str:
        if not self.api_key:
            raise ModelCallError(self.provider, "OPENAI_API_KEY is not configured")
        try:
            client = openai.OpenAI(api_key=self.api_key)
            completion = client.chat.completions.create(
                model=self.model,
                response_format={"type": "json_object"},
                messages=[{"role": "user", "content": prompt_text}],
            )
        except Exception as exc:
            raise ModelCallError(self.provider, str(exc)) from exc
        text = completion.choices[0].message.content or ""
        logger.debug("OpenAI %s replied with %d chars", self.model, len(text))
        return text
