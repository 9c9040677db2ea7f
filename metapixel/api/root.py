"""GET / — service name and endpoint usage."""

from __future__ import annotations

from fastapi import APIRouter

from metapixel import __version__

router = APIRouter()


@router.get("/")
async def root() -> dict:
    return {
        "name": "Meta Pixel Calculator API",
        "version": __version__,
        "endpoints": {
            "/api/analyze": {
                "methods": ["GET", "POST"],
                "description": "Analyze meta title and description pixel widths",
                "parameters": {
                    "title": "Meta title to analyze (optional)",
                    "description": "Meta description to analyze (optional)",
                },
                "examples": {
                    "get": "/api/analyze?title=Your%20Meta%20Title&description=Your%20meta%20description%20here",
                    "post": 'POST to /api/analyze with JSON body: {"title": "Your Meta Title", '
                    '"description": "Your meta description here"}',
                },
            },
            "/api/analyze/batch": {
                "methods": ["POST"],
                "description": "Analyze many items; malformed items get a per-item error",
                "examples": {
                    "post": 'POST to /api/analyze/batch with JSON body: '
                    '[{"id": 1, "title": "Your Meta Title"}] or {"items": [...]}',
                },
            },
        },
    }
