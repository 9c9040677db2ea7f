"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from metapixel.config import settings
from metapixel.engine.analyzer import MetaFieldAnalyzer
from metapixel.engine.metrics import create_metrics
from metapixel.engine.profiles import profiles_from_settings


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_analyzer() -> MetaFieldAnalyzer:
    return MetaFieldAnalyzer(
        metrics=create_metrics(settings),
        profiles=profiles_from_settings(settings),
        ellipsis_reserve=settings.ellipsis_reserve,
        ellipsis_marker=settings.ellipsis_marker,
    )
