"""Run the API server: ``python -m metapixel``."""

from __future__ import annotations

import uvicorn

from metapixel.config import settings


def main() -> None:
    uvicorn.run(
        "metapixel.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.metapixel_log_level.lower(),
    )


if __name__ == "__main__":
    main()
