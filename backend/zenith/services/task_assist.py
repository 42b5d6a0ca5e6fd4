"""Per-task helpers: subtask breakdown and learning-resource lookup."""
from __future__ import annotations

from typing import Any, Dict

from zenith.llm.base import ModelClient
from zenith.services.model_outcome import record_fallback, request_json_object


class TaskAssistHandler:
    """Ask the model about a single task and return a ``{result_key: [...]}`` object.

    The parsed reply is passed through verbatim; items inside the list are
    not validated. Any failure degrades to an empty list.
    """

    operation: str = ""
    result_key: str = ""
    instruction: str = ""

    def __init__(self, client: ModelClient):
        self.client = client

    def build_prompt(self, task_text: str) -> str:
        return f"{self.instruction}\n\nTask: {task_text}"

    def empty_result(self) -> Dict[str, Any]:
        return {self.result_key: []}

    def handle(self, task_text: str) -> Dict[str, Any]:
        outcome = request_json_object(self.client, self.build_prompt(task_text), operation=self.operation)
        if not outcome.ok or outcome.payload is None:
            record_fallback(self.operation, outcome)
            return self.empty_result()

        result = dict(outcome.payload)
        result.setdefault(self.result_key, [])
        return result


class TaskAtomizationHandler(TaskAssistHandler):
    operation = "task.atomize"
    result_key = "subtasks"
    instruction = (
        "Break down the given task into 3-5 small, actionable sub-tasks.\n"
        "Return ONLY valid JSON.\n"
        'Structure: { "subtasks": ["subtask 1", "subtask 2", ...] }'
    )


class ResourceLookupHandler(TaskAssistHandler):
    operation = "task.resources"
    result_key = "resources"
    instruction = (
        "Provide 2-3 high-quality learning resources (documentation, tutorials, or articles) for the given task.\n"
        "Return ONLY valid JSON.\n"
        'Structure: { "resources": [{ "title": "Resource Name", "url": "Link" }, ...] }'
    )
