"""Display profiles — the font and pixel budget Google uses for each meta field."""

from __future__ import annotations

from dataclasses import dataclass

from metapixel.errors import ProfileError

TITLE = "title"
DESCRIPTION = "description"


@dataclass(frozen=True)
class DisplayProfile:
    """How one kind of field is rendered on the results page."""

    font_family: str
    font_size: float
    max_pixels: int
    # Only description-like fields have a lower bound
    min_pixels: int | None = None

    def __post_init__(self) -> None:
        if self.font_size <= 0:
            raise ProfileError(f"font_size must be positive, got {self.font_size}")
        if self.max_pixels <= 0:
            raise ProfileError(f"max_pixels must be positive, got {self.max_pixels}")
        if self.min_pixels is not None and not 0 < self.min_pixels < self.max_pixels:
            raise ProfileError(
                f"min_pixels must be in (0, {self.max_pixels}), got {self.min_pixels}"
            )


@dataclass(frozen=True)
class ProfileSet:
    """The pair of built-in profiles, keyed by field kind."""

    title: DisplayProfile
    description: DisplayProfile

    def get(self, kind: str) -> DisplayProfile:
        if kind == TITLE:
            return self.title
        if kind == DESCRIPTION:
            return self.description
        raise KeyError(f"Unknown field kind: {kind!r}")

    @staticmethod
    def is_description_like(kind: str) -> bool:
        return kind == DESCRIPTION


def profiles_from_settings(settings) -> ProfileSet:
    """Build the title/description profiles from deployment settings."""
    return ProfileSet(
        title=DisplayProfile(
            font_family=settings.title_font_family,
            font_size=settings.title_font_size,
            max_pixels=settings.title_max_pixels,
        ),
        description=DisplayProfile(
            font_family=settings.description_font_family,
            font_size=settings.description_font_size,
            max_pixels=settings.description_max_pixels,
            min_pixels=settings.description_min_pixels,
        ),
    )
