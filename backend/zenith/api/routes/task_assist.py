"""Per-task atomize and resources endpoints."""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request, status

from zenith.api.deps import get_atomize_handler, get_resource_handler
from zenith.api.schemas.task_assist import TaskTextRequest
from zenith.observability.tracing import annotate, trace
from zenith.services.task_assist import ResourceLookupHandler, TaskAssistHandler, TaskAtomizationHandler

router = APIRouter()


@router.post("/atomize", tags=["tasks"])
def atomize_task_endpoint(
    http_request: Request,
    payload: TaskTextRequest | None = None,
    handler: TaskAtomizationHandler = Depends(get_atomize_handler),
) -> Dict[str, Any]:
    """Break one task into subtasks; an empty list means none could be produced."""
    return _run_task_assist(handler, payload, http_request, route="/atomize")


@router.post("/resources", tags=["tasks"])
def task_resources_endpoint(
    http_request: Request,
    payload: TaskTextRequest | None = None,
    handler: ResourceLookupHandler = Depends(get_resource_handler),
) -> Dict[str, Any]:
    """Suggest learning resources for one task."""
    return _run_task_assist(handler, payload, http_request, route="/resources")


def _run_task_assist(
    handler: TaskAssistHandler,
    payload: TaskTextRequest | None,
    http_request: Request,
    *,
    route: str,
) -> Dict[str, Any]:
    task_text = payload.task_text if payload else None
    if not task_text or not task_text.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing taskText")

    request_id = getattr(http_request.state, "request_id", None)
    metadata = {"route": route, "task_text_length": len(task_text)}
    with trace(f"{handler.operation}.request", metadata=metadata, request_id=request_id) as span:
        result = handler.handle(task_text)
        items = result.get(handler.result_key)
        annotate(span, **metadata, items_returned=len(items) if isinstance(items, list) else 0)
    return result
