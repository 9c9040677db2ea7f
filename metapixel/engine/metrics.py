"""Glyph metrics providers — rendered width of a string in a given font.

Two providers:
    PillowGlyphMetrics   real FreeType advances (kerning included) via Pillow
    FixedWidthMetrics    constant per-character advance, additive, no font files

The analyzer only needs ``measure(text, font_family, font_size) -> float`` and
the ``additive`` flag telling it whether prefix widths can be summed.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Iterable, Mapping
from typing import Protocol

from PIL import ImageFont

from metapixel.errors import MeasurementError

logger = logging.getLogger(__name__)

# Metric-compatible open substitutes for the usual web fonts
_SUBSTITUTES: dict[str, list[str]] = {
    "arial": ["LiberationSans-Regular.ttf", "Arimo-Regular.ttf"],
    "helvetica": ["LiberationSans-Regular.ttf", "Arimo-Regular.ttf"],
    "times new roman": ["LiberationSerif-Regular.ttf", "Tinos-Regular.ttf"],
    "times": ["LiberationSerif-Regular.ttf", "Tinos-Regular.ttf"],
    "courier new": ["LiberationMono-Regular.ttf", "Cousine-Regular.ttf"],
    "roboto": ["Roboto-Regular.ttf"],
}

_FontType = ImageFont.FreeTypeFont | ImageFont.ImageFont


class GlyphMetrics(Protocol):
    additive: bool

    def measure(self, text: str, font_family: str, font_size: float) -> float: ...


class PillowGlyphMetrics:
    """Measures text with Pillow's FreeType bindings.

    Fonts are resolved once per (family, size) and cached per thread, so
    concurrent measurements never share a font object. A family that cannot be
    found falls back to a substitute, then to the configured fallback files,
    then to Pillow's bundled default font.
    """

    # Kerning makes prefix widths non-additive
    additive = False

    def __init__(
        self,
        font_dirs: Iterable[str] = (),
        fallback_fonts: Iterable[str] = ("LiberationSans-Regular.ttf", "DejaVuSans.ttf"),
    ) -> None:
        self.font_dirs = list(font_dirs)
        self.fallback_fonts = list(fallback_fonts)
        self._local = threading.local()
        self._warned: set[str] = set()

    def measure(self, text: str, font_family: str, font_size: float) -> float:
        if not text:
            return 0.0
        font = self._get_font(font_family, font_size)
        try:
            return float(font.getlength(text))
        except (OSError, ValueError) as e:
            raise MeasurementError(
                f"Could not measure text in {font_family!r} at {font_size}px: {e}",
                font_family=font_family,
                font_size=font_size,
            ) from e

    def _get_font(self, font_family: str, font_size: float) -> _FontType:
        cache: dict[tuple[str, float], _FontType] | None = getattr(self._local, "fonts", None)
        if cache is None:
            cache = self._local.fonts = {}
        key = (font_family, font_size)
        font = cache.get(key)
        if font is None:
            font = self._load_font(font_family, font_size)
            cache[key] = font
        return font

    def _load_font(self, font_family: str, font_size: float) -> _FontType:
        for name in self._candidates(font_family):
            try:
                font = ImageFont.truetype(name, size=font_size)
            except OSError:
                continue
            logger.debug("Font %r at %.1fpx resolved to %s", font_family, font_size, name)
            return font

        if font_family not in self._warned:
            self._warned.add(font_family)
            logger.warning("Font not found: %r; using Pillow default font", font_family)
        try:
            return ImageFont.load_default(size=font_size)
        except (OSError, ValueError) as e:
            raise MeasurementError(
                f"No usable font for {font_family!r}, default font unavailable: {e}",
                font_family=font_family,
                font_size=font_size,
            ) from e

    def _candidates(self, font_family: str) -> list[str]:
        """File names to try for a family, most specific first."""
        if os.path.isfile(font_family):
            return [font_family]

        base = font_family.strip()
        names = [
            f"{base}.ttf",
            f"{base.lower()}.ttf",
            f"{base.replace(' ', '')}.ttf",
            f"{base.replace(' ', '')}-Regular.ttf",
            base,
        ]
        names.extend(_SUBSTITUTES.get(base.lower(), []))
        names.extend(self.fallback_fonts)

        candidates: list[str] = []
        for directory in self.font_dirs:
            candidates.extend(os.path.join(directory, n) for n in names)
        # Bare names go through Pillow's own system font search
        candidates.extend(names)
        return list(dict.fromkeys(candidates))


class FixedWidthMetrics:
    """Every character advances by a fixed fraction of the em, with overrides.

    Widths are ``advance * font_size`` pixels per character and sum exactly, so
    a prefix scan can keep a running total.
    """

    additive = True

    def __init__(self, advance: float = 0.5, overrides: Mapping[str, float] | None = None) -> None:
        self.advance = advance
        self.overrides = dict(overrides or {})

    def char_width(self, char: str, font_size: float) -> float:
        return self.overrides.get(char, self.advance) * font_size

    def measure(self, text: str, font_family: str, font_size: float) -> float:
        return sum((self.char_width(c, font_size) for c in text), 0.0)


def create_metrics(settings) -> PillowGlyphMetrics:
    """Factory for the deployment's metrics provider."""
    return PillowGlyphMetrics(
        font_dirs=settings.font_dirs,
        fallback_fonts=settings.fallback_fonts,
    )
