"""Google Gemini provider backed by the google-genai SDK."""
from __future__ import annotations

import logging

from google import genai

from zenith.llm.base import ModelCallError, ModelClient

logger = logging.getLogger(__name__)


class GeminiModelClient(ModelClient):
    provider = "gemini"

    def submit(self, prompt_text: str) -> str:
        if not self.api_key:
            raise ModelCallError(self.provider, "GEMINI_API_KEY is not configured")
        try:
            client = genai.Client(api_key=self.api_key)
            response = client.models.generate_content(model=self.model, contents=prompt_text)
        except Exception as exc:
            raise ModelCallError(self.provider, str(exc)) from exc
        text = response.text or ""
        logger.debug("Gemini %s replied with %d chars", self.model, len(text))
        return text
