"""Meta Pixel Calculator: SERP pixel-width analysis for meta titles and descriptions."""

__version__ = "0.1.0"
