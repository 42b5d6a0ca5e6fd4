"""Main FastAPI application for the Zenith backend."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from zenith.api.routes.plan import router as plan_router
from zenith.api.routes.task_assist import router as task_assist_router
from zenith.core.config import settings
from zenith.core.logging import configure_logging
from zenith.core.middleware import REQUEST_ID_HEADER, RequestIDMiddleware
from zenith.llm.factory import get_model_client
from zenith.observability.client import init_opik

configure_logging(log_level=settings.log_level)

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[REQUEST_ID_HEADER],
)
app.add_middleware(RequestIDMiddleware)
app.include_router(plan_router, prefix=settings.api_prefix)
app.include_router(task_assist_router, prefix=settings.api_prefix)


@app.on_event("startup")
async def startup() -> None:
    """Initialize tracing and report which model path is live."""
    init_opik()
    client = get_model_client()
    if client.is_available():
        logger.info("Model relay ready (provider=%s, model=%s)", client.provider, client.model)
    else:
        logger.warning("No %s credential configured; serving offline fallbacks only", client.provider)


@app.get(f"{settings.api_prefix}/health", tags=["health"], summary="Liveness probe")
async def health_check() -> dict[str, bool]:
    return {"ok": True}
