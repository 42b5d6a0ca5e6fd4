"""Shared call-and-parse step for every model-backed relay operation."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from zenith.llm.base import ModelClient
from zenith.observability.metrics import log_metric
from zenith.observability.tracing import annotate, trace
from zenith.services.response_sanitizer import extract_json_object

logger = logging.getLogger(__name__)


class FailureKind(str, Enum):
    MISSING_CREDENTIAL = "missing_credential"
    MODEL_CALL_FAILURE = "model_call_failure"
    UNPARSABLE_RESPONSE = "unparsable_response"
    INVALID_SHAPE = "invalid_shape"


@dataclass(frozen=True)
class ModelOutcome:
    payload: Optional[Dict[str, Any]] = None
    failure: Optional[FailureKind] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, payload: Dict[str, Any]) -> "ModelOutcome":
        return cls(payload=payload)

    @classmethod
    def failed(cls, failure: FailureKind, detail: str = "") -> "ModelOutcome":
        return cls(failure=failure, detail=detail)


def request_json_object(client: ModelClient, prompt_text: str, *, operation: str) -> ModelOutcome:
    """Submit one prompt and parse the reply into a JSON object.

    Never raises. A missing credential short-circuits before any network call.
    """
    if not client.is_available():
        return ModelOutcome.failed(FailureKind.MISSING_CREDENTIAL, f"no {client.provider} credential configured")

    with trace(operation, metadata={"provider": client.provider, "model": client.model}) as span:
        try:
            raw_text = client.submit(prompt_text)
        except Exception as exc:
            outcome = ModelOutcome.failed(FailureKind.MODEL_CALL_FAILURE, str(exc))
        else:
            outcome = parse_json_object(raw_text)
        annotate(span, outcome=outcome.failure.value if outcome.failure else "ok")
    return outcome


def parse_json_object(raw_text: str) -> ModelOutcome:
    candidate = extract_json_object(raw_text)
    if candidate is None:
        return ModelOutcome.failed(FailureKind.UNPARSABLE_RESPONSE, "no JSON object in model reply")
    try:
        payload = json.loads(candidate)
    except (ValueError, RecursionError) as exc:
        # Also covers oversized integer literals and deeply nested arrays.
        return ModelOutcome.failed(FailureKind.UNPARSABLE_RESPONSE, f"invalid JSON: {exc}")
    if not isinstance(payload, dict):  # pragma: no cover - a {...} span always decodes to a dict
        return ModelOutcome.failed(FailureKind.UNPARSABLE_RESPONSE, "model reply is not a JSON object")
    return ModelOutcome.success(payload)


def record_fallback(operation: str, outcome: ModelOutcome) -> None:
    """Log why an operation is falling back and count it."""
    if outcome.failure is None:
        return
    if outcome.failure is FailureKind.MISSING_CREDENTIAL:
        logger.info("%s: %s; using fallback result", operation, outcome.detail)
    else:
        logger.warning("%s failed (%s): %s; using fallback result", operation, outcome.failure.value, outcome.detail)
    log_metric(f"{operation}.fallback.used", 1, {"reason": outcome.failure.value})
