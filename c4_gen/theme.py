# c4_gen/theme.py
from __future__ import annotations

from dataclasses import dataclass, field, replace

from .constants import THEME_CATEGORIES


@dataclass(frozen=True)
class Palette:
    background_color: str
    font_color: str


DEFAULT_SYSTEM_PALETTE = Palette(background_color="#4E668A", font_color="#F5F5F5")
DEFAULT_CONTAINER_PALETTE = Palette(background_color="#6C8EBF", font_color="#262626")
DEFAULT_COMPONENT_PALETTE = Palette(background_color="#94B3E0", font_color="#262626")
DEFAULT_PERSON_PALETTE = Palette(background_color="#455A7A", font_color="#ffffff")


@dataclass(frozen=True)
class Theme:
    """Per-category colors applied through UpdateElementStyle.

    Categories left out fall back to the built-in palette for that category,
    so Theme(system=Palette("red", "white")) only restyles systems.
    """

    system: Palette = field(default=DEFAULT_SYSTEM_PALETTE)
    container: Palette = field(default=DEFAULT_CONTAINER_PALETTE)
    component: Palette = field(default=DEFAULT_COMPONENT_PALETTE)
    person: Palette = field(default=DEFAULT_PERSON_PALETTE)

    def with_overrides(self, **palettes: Palette) -> "Theme":
        """Return a copy with the given categories replaced."""
        return replace(self, **palettes)

    def palettes(self) -> tuple[tuple[str, Palette], ...]:
        """(category, palette) pairs in preamble order."""
        return tuple((category, getattr(self, category)) for category in THEME_CATEGORIES)


def default_theme() -> Theme:
    """The styles used for diagrams without an explicit theme."""
    return Theme()
