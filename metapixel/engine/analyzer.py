"""Meta-field analyzer — pixel width, truncation preview and character budget."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from metapixel.engine.metrics import GlyphMetrics
from metapixel.engine.profiles import DisplayProfile, ProfileSet

logger = logging.getLogger(__name__)

# Width kept free for the ellipsis when cutting a truncated preview
ELLIPSIS_RESERVE = 5.0
ELLIPSIS_MARKER = "..."


@dataclass
class AnalysisResult:
    pixel_width: int
    character_count: int
    is_truncated: bool
    truncated_text: str
    is_optimal: bool
    recommended_max_chars: int
    max_pixels: int
    # Description-like fields only
    min_pixels: int | None = None
    is_too_short: bool | None = None


def round_half_up(value: float) -> int:
    """Round like the browser does (0.5 goes up), not to even."""
    return math.floor(value + 0.5)


class MetaFieldAnalyzer:
    """Analyzes one text field against a display profile.

    Stateless apart from its collaborators: the metrics provider, the
    built-in profiles used by ``analyze_field`` and the ellipsis settings.
    """

    def __init__(
        self,
        metrics: GlyphMetrics,
        profiles: ProfileSet | None = None,
        ellipsis_reserve: float = ELLIPSIS_RESERVE,
        ellipsis_marker: str = ELLIPSIS_MARKER,
    ) -> None:
        self.metrics = metrics
        self.profiles = profiles
        self.ellipsis_reserve = ellipsis_reserve
        self.ellipsis_marker = ellipsis_marker

    def analyze_field(self, kind: str, text: str) -> AnalysisResult:
        """Analyze ``text`` with the built-in profile for ``kind`` ("title" or "description")."""
        if self.profiles is None:
            raise KeyError(f"No profiles configured for field kind {kind!r}")
        profile = self.profiles.get(kind)
        return self.analyze(text, profile, ProfileSet.is_description_like(kind))

    def analyze(
        self,
        text: str,
        profile: DisplayProfile,
        is_description_like: bool = False,
    ) -> AnalysisResult:
        character_count = len(text)
        raw_width = self.metrics.measure(text, profile.font_family, profile.font_size)
        pixel_width = round_half_up(raw_width)

        is_truncated = pixel_width > profile.max_pixels
        if is_truncated:
            cut = self.truncation_length(text, profile)
            truncated_text = text[:cut] + self.ellipsis_marker
        else:
            truncated_text = text

        recommended = self.recommended_max_chars(pixel_width, character_count, profile.max_pixels)

        if is_description_like:
            min_pixels = profile.min_pixels
            is_too_short = min_pixels is not None and pixel_width < min_pixels
            is_optimal = not is_truncated and not is_too_short
        else:
            min_pixels = None
            is_too_short = None
            is_optimal = not is_truncated

        logger.debug(
            "Analyzed %d chars: %dpx / %dpx (truncated=%s)",
            character_count,
            pixel_width,
            profile.max_pixels,
            is_truncated,
        )

        return AnalysisResult(
            pixel_width=pixel_width,
            character_count=character_count,
            is_truncated=is_truncated,
            truncated_text=truncated_text,
            is_optimal=is_optimal,
            recommended_max_chars=recommended,
            max_pixels=profile.max_pixels,
            min_pixels=min_pixels,
            is_too_short=is_too_short,
        )

    def truncation_length(self, text: str, profile: DisplayProfile) -> int:
        """Length of the longest prefix that still fits beside the ellipsis.

        Prefixes are grown one character at a time; the scan stops at the first
        one whose width strictly exceeds ``max_pixels - ellipsis_reserve``.
        """
        budget = profile.max_pixels - self.ellipsis_reserve

        if self.metrics.additive:
            width = 0.0
            for i, char in enumerate(text):
                width += self.metrics.measure(char, profile.font_family, profile.font_size)
                if width > budget:
                    return i
            return len(text)

        # Kerning-aware providers: remeasure each prefix, O(n^2) in characters
        for i in range(len(text)):
            width = self.metrics.measure(text[: i + 1], profile.font_family, profile.font_size)
            if width > budget:
                return i
        return len(text)

    @staticmethod
    def recommended_max_chars(pixel_width: int, character_count: int, max_pixels: int) -> int:
        """Character budget at ``max_pixels`` assuming the text's average glyph width."""
        if character_count == 0 or pixel_width == 0:
            return 0
        avg_char_width = pixel_width / character_count
        return math.floor(max_pixels / avg_char_width)
