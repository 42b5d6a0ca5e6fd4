"""Schemas for the per-task atomize/resources endpoints."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskTextRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    task_text: Optional[str] = Field(default=None, alias="taskText")
