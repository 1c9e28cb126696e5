"""Console theme definitions and selection helpers.

Themes are ANSI palettes for the banner, report rows and error lines. The
plain theme carries empty codes and is used whenever color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the console sink."""

    name: str
    reset: str
    banner: str
    tree_dir: str
    tree_file: str
    success: str
    error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    banner="\033[33m",
    tree_dir="\033[32m",
    tree_file="\033[34m",
    success="\033[32m",
    error="\033[31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    banner="\033[1;38;5;45m",
    tree_dir="\033[1;38;5;39m",
    tree_file="\033[38;5;117m",
    success="\033[38;5;84m",
    error="\033[38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    banner="",
    tree_dir="",
    tree_file="",
    success="",
    error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
