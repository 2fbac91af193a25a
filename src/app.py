"""Shiptrack FastAPI application.

Processes tracking commands synchronously over HTTP. Every request runs
inside the tracking domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# Initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from tracking/domain.toml.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from tracking.domain import tracking
from tracking.utils.logging import clear_context

tracking.init()

app = FastAPI(
    title="Shiptrack API",
    description="Shipment custody tracking under role-based access control",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the tracking domain context for each request."""
    try:
        with tracking.domain_context():
            return await call_next(request)
    finally:
        clear_context()


from tracking.api import access_control_router, shipment_router  # noqa: E402

app.include_router(access_control_router)
app.include_router(shipment_router)


@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": tracking.name})
