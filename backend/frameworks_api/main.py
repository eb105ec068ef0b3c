from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import Response
from starlette.middleware.cors import CORSMiddleware

from .config import settings
from .db import check_db_connection, init_db
from .logging_utils import configure_logging
from .metrics import CONTENT_TYPE_LATEST, REQUESTS_TOTAL, generate_latest
from .routers.frameworks import router as frameworks_router

configure_logging()
logger = logging.getLogger("frameworks.app")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    check_db_connection()
    init_db()
    logger.info("Frameworks API ready", extra={"event": "startup", "db_backend": settings.db_backend})
    yield


app = FastAPI(title="Frameworks API", version="1.0.0", debug=settings.debug, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(frameworks_router)


@app.middleware("http")
async def count_requests(request: Request, call_next):
    response = await call_next(request)
    REQUESTS_TOTAL.labels(
        method=request.method,
        path=request.url.path,
        status=str(response.status_code),
    ).inc()
    return response


@app.get("/health")
@app.get("/api/health")
async def healthcheck() -> dict[str, str]:
    check_db_connection()
    return {"status": "ok", "ts": datetime.now(timezone.utc).isoformat()}


@app.get("/metrics")
async def metrics() -> Response:
    if not settings.enable_prometheus_metrics:
        raise HTTPException(status_code=404, detail="Metrics disabled")
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
