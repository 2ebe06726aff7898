"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from comingsoon.api.v1.dependencies.
"""

from fastapi import APIRouter

from comingsoon.api.v1.endpoints import (
    early_access,
    health,
    launching,
    websocket as ws_endpoint,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(launching.router, prefix="/launching", tags=["launching"])
api_router.include_router(
    early_access.router, prefix="/early-access", tags=["early-access"]
)
api_router.include_router(ws_endpoint.router, prefix="/ws", tags=["websocket"])
