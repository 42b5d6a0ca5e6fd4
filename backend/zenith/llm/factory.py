"""Model client factory."""
from __future__ import annotations

import logging
from functools import lru_cache

from zenith.core.config import settings
from zenith.llm.base import ModelClient
from zenith.llm.gemini_provider import GeminiModelClient
from zenith.llm.openai_provider import OpenAIModelClient

logger = logging.getLogger(__name__)


@lru_cache
def get_model_client() -> ModelClient:
    provider = settings.model_provider.strip().lower()
    if provider == "openai":
        return OpenAIModelClient(api_key=settings.openai_api_key, model=settings.openai_model)
    if provider != "gemini":
        logger.warning("Unknown MODEL_PROVIDER %r; using gemini", settings.model_provider)
    return GeminiModelClient(api_key=settings.gemini_api_key, model=settings.gemini_model)
