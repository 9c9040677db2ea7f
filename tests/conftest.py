"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from metapixel.dependencies import get_analyzer
from metapixel.engine.analyzer import MetaFieldAnalyzer
from metapixel.engine.metrics import FixedWidthMetrics
from metapixel.engine.profiles import DisplayProfile, ProfileSet
from metapixel.main import app


# Fixed advance of half an em: 10px per char for titles (20px), 7px for descriptions (14px)
TITLE_PROFILE = DisplayProfile(font_family="Arial", font_size=20, max_pixels=600)
DESCRIPTION_PROFILE = DisplayProfile(
    font_family="Arial", font_size=14, max_pixels=920, min_pixels=430
)
PROFILES = ProfileSet(title=TITLE_PROFILE, description=DESCRIPTION_PROFILE)

SHORT_TITLE = "Your Meta Title"
LONG_DESCRIPTION = (
    "Learn how Google measures meta descriptions in pixels rather than characters, "
    "why long snippets get cut off with an ellipsis, and how to write copy that fits "
    "on every results page."
)[:200].ljust(200, "x")
SHORT_DESCRIPTION = "Tiny desc."


class ExplodingMetrics(FixedWidthMetrics):
    """Fails to measure any text containing ``trigger``."""

    def __init__(self, trigger: str = "boom", exc: Exception | None = None) -> None:
        super().__init__()
        self.trigger = trigger
        self.exc = exc

    def measure(self, text: str, font_family: str, font_size: float) -> float:
        if self.trigger in text:
            from metapixel.errors import MeasurementError

            raise self.exc or MeasurementError(f"cannot render {font_family}")
        return super().measure(text, font_family, font_size)


@pytest.fixture
def metrics() -> FixedWidthMetrics:
    return FixedWidthMetrics(advance=0.5)


@pytest.fixture
def analyzer(metrics: FixedWidthMetrics) -> MetaFieldAnalyzer:
    return MetaFieldAnalyzer(metrics=metrics, profiles=PROFILES)


@pytest.fixture
def client(analyzer: MetaFieldAnalyzer):
    app.dependency_overrides[get_analyzer] = lambda: analyzer
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
