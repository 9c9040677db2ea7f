"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from metapixel.api import analyze

api_router = APIRouter(prefix="/api")

api_router.include_router(analyze.router)
