"""Deterministic offline study planner used when the model path is unavailable."""
from __future__ import annotations

import re
from typing import List

from pydantic import BaseModel, Field

DEFAULT_MONTHS = 3
WEEKS_PER_MONTH = 4
TOPIC_CYCLE = 6
MAX_MONTHS = 120

MONTHS_PATTERN = re.compile(r"(\d+)\s*month", re.IGNORECASE)

WEEK_TASK_TEMPLATES = (
    "Learn/Review core concept {topic}",
    "Solve 3 coding problems focused on concept {topic}",
    "Build a tiny project or component applying concept {topic}",
)


class GeneratedTask(BaseModel):
    id: str
    text: str = Field(..., min_length=1)
    done: bool = False


class WeekBlock(BaseModel):
    id: str
    title: str
    tasks: List[GeneratedTask] = Field(..., min_length=3, max_length=3)


class SyntheticPlanMeta(BaseModel):
    months: int = Field(..., ge=1)
    weeks: int = Field(..., ge=1)
    prompt: str


class SyntheticPlan(BaseModel):
    """Week-by-week plan plus the same tasks flattened in schedule order."""

    meta: SyntheticPlanMeta
    plan: List[WeekBlock]
    tasks: List[GeneratedTask]


def parse_months(prompt_text: str | None) -> int:
    """Return the first "<n> month" figure in the prompt, or the default."""
    match = MONTHS_PATTERN.search(prompt_text or "")
    if not match:
        return DEFAULT_MONTHS
    digits = match.group(1).lstrip("0") or "0"
    # Clamped to 1..MAX_MONTHS; long digit runs are never handed to int().
    if len(digits) > len(str(MAX_MONTHS)):
        return MAX_MONTHS
    return min(max(int(digits), 1), MAX_MONTHS)


def build_week(week_number: int) -> WeekBlock:
    topic = ((week_number - 1) % TOPIC_CYCLE) + 1
    tasks = [
        GeneratedTask(id=f"w{week_number}-{slot}", text=template.format(topic=topic))
        for slot, template in enumerate(WEEK_TASK_TEMPLATES, start=1)
    ]
    return WeekBlock(id=f"week-{week_number}", title=f"Week {week_number}", tasks=tasks)


def generate_synthetic_plan(prompt_text: str) -> SyntheticPlan:
    months = parse_months(prompt_text)
    weeks = months * WEEKS_PER_MONTH
    plan = [build_week(week_number) for week_number in range(1, weeks + 1)]
    return SyntheticPlan(
        meta=SyntheticPlanMeta(months=months, weeks=weeks, prompt=prompt_text),
        plan=plan,
        tasks=[task for week in plan for task in week.tasks],
    )
