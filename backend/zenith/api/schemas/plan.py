"""Schemas for the plan generation endpoint."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class PlanRequest(BaseModel):
    prompt: Optional[str] = None
