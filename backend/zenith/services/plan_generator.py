"""Model-backed study plan generation with a deterministic offline fallback."""
from __future__ import annotations

from typing import Any, Dict

from zenith.llm.base import ModelClient
from zenith.observability.metrics import log_metric
from zenith.services.model_outcome import FailureKind, ModelOutcome, record_fallback, request_json_object
from zenith.services.synthetic_planner import generate_synthetic_plan

PLAN_OPERATION = "plan.generate"

PLAN_INSTRUCTION = """You are an expert study planner.
Create a detailed task list based on the user's goal and duration.

CRITICAL: Return ONLY valid JSON. No markdown, no explanations, no code blocks.

Structure:
{
  "durationDays": NUMBER (total days for the plan),
  "tasks": [
    { "id": "t1", "text": "Specific actionable task", "done": false },
    { "id": "t2", "text": "Another specific task", "done": false }
  ]
}

Generate enough tasks to fill the duration. For example:
- 7 days = 14-21 tasks (2-3 per day)
- 30 days = 30-60 tasks (1-2 per day)

DO NOT use "Week 1", "Week 2" in task text. Make each task standalone and actionable."""


def build_plan_prompt(raw_prompt: str) -> str:
    return f"{PLAN_INSTRUCTION}\n\nUser Goal: {raw_prompt}"


def check_plan_shape(outcome: ModelOutcome) -> ModelOutcome:
    """Only the top-level ``tasks`` list is checked; task entries pass through untouched."""
    if not outcome.ok or outcome.payload is None:
        return outcome
    if not isinstance(outcome.payload.get("tasks"), list):
        return ModelOutcome.failed(FailureKind.INVALID_SHAPE, "'tasks' missing or not a list")
    return outcome


class PlanRequestHandler:
    """Turn a free-text goal into a task plan; never raises to the caller."""

    def __init__(self, client: ModelClient):
        self.client = client

    def handle(self, raw_prompt: str) -> Dict[str, Any]:
        outcome = request_json_object(self.client, build_plan_prompt(raw_prompt), operation=PLAN_OPERATION)
        outcome = check_plan_shape(outcome)
        if outcome.ok and outcome.payload is not None:
            log_metric(f"{PLAN_OPERATION}.tasks", len(outcome.payload["tasks"]), {"provider": self.client.provider})
            return outcome.payload

        record_fallback(PLAN_OPERATION, outcome)
        return generate_synthetic_plan(raw_prompt).model_dump()
