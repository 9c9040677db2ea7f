"""Text measurement and truncation analysis engine."""

from metapixel.engine.analyzer import AnalysisResult, MetaFieldAnalyzer
from metapixel.engine.metrics import FixedWidthMetrics, GlyphMetrics, PillowGlyphMetrics
from metapixel.engine.profiles import DisplayProfile, ProfileSet

__all__ = [
    "AnalysisResult",
    "MetaFieldAnalyzer",
    "FixedWidthMetrics",
    "GlyphMetrics",
    "PillowGlyphMetrics",
    "DisplayProfile",
    "ProfileSet",
]
