"""Exception hierarchy shared by the engine and the API layer."""

from __future__ import annotations


class MetaPixelError(Exception):
    """Base error for the meta pixel calculator."""


class MeasurementError(MetaPixelError):
    """Raised when no font, not even the built-in fallback, can measure a string."""

    def __init__(self, message: str, font_family: str = "", font_size: float = 0.0) -> None:
        self.font_family = font_family
        self.font_size = font_size
        super().__init__(message)


class ProfileError(MetaPixelError, ValueError):
    """Raised for a display profile whose pixel budgets are inconsistent."""
