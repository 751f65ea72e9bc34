"""API v1 router aggregation."""

from fastapi import APIRouter

from app.api.v1.endpoints import charts, entries, health, tools

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(entries.router, prefix="/entries", tags=["entries"])
api_router.include_router(charts.router, prefix="/charts", tags=["charts"])
api_router.include_router(tools.router, prefix="/tools", tags=["tools"])
