"""FastAPI dependency providers for the relay handlers."""
from __future__ import annotations

from fastapi import Depends

from zenith.llm.base import ModelClient
from zenith.llm.factory import get_model_client
from zenith.services.plan_generator import PlanRequestHandler
from zenith.services.task_assist import ResourceLookupHandler, TaskAtomizationHandler


def get_plan_handler(client: ModelClient = Depends(get_model_client)) -> PlanRequestHandler:
    return PlanRequestHandler(client)


def get_atomize_handler(client: ModelClient = Depends(get_model_client)) -> TaskAtomizationHandler:
    return TaskAtomizationHandler(client)


def get_resource_handler(client: ModelClient = Depends(get_model_client)) -> ResourceLookupHandler:
    return ResourceLookupHandler(client)
