"""Plan generation endpoint."""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request, status

from zenith.api.deps import get_plan_handler
from zenith.api.schemas.plan import PlanRequest
from zenith.observability.tracing import annotate, trace
from zenith.services.plan_generator import PlanRequestHandler

router = APIRouter()


@router.post("/generate-plan", tags=["plans"])
def generate_plan_endpoint(
    http_request: Request,
    payload: PlanRequest | None = None,
    handler: PlanRequestHandler = Depends(get_plan_handler),
) -> Dict[str, Any]:
    """Return a model-written plan, or the offline plan when the model can't deliver one."""
    prompt = payload.prompt if payload else None
    if not prompt or not prompt.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing prompt")

    request_id = getattr(http_request.state, "request_id", None)
    metadata = {"route": "/generate-plan", "prompt_length": len(prompt)}
    with trace("plan.request", metadata=metadata, request_id=request_id) as span:
        result = handler.handle(prompt)
        annotate(span, **metadata, tasks_returned=len(result.get("tasks") or []))
    return result
