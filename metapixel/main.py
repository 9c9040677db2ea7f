"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from metapixel import __version__
from metapixel.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.metapixel_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Meta Pixel Calculator",
        description="Pixel width and truncation analysis for SEO meta titles and descriptions",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from metapixel.api.error_handlers import general_exception_handler, validation_exception_handler

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    from metapixel.api import root
    from metapixel.api.router import api_router

    app.include_router(root.router)
    app.include_router(api_router)

    return app


app = create_app()
