"""Stylesheet analysis: variables, media queries, animations, colors, minification."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

__all__ = [
    "StylesheetAnalysis",
    "analyze_stylesheet",
    "extract_css_variables",
    "extract_media_queries",
    "extract_animations",
    "extract_color_palette",
    "minify_css",
]

_VARIABLE_RE = re.compile(r"--(?P<name>[a-zA-Z0-9_-]+)\s*:\s*(?P<value>[^;}]+)")
_MEDIA_RE = re.compile(r"@media\s*(?P<query>[^{]+)")
_KEYFRAMES_RE = re.compile(r"@keyframes\s+(?P<name>[a-zA-Z0-9_-]+)")
_COLOR_RE = re.compile(
    r"""
    \#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})\b             # hex
    | rgb\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*\)            # rgb()
    | rgba\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*,\s*[0-9.]+\s*\)  # rgba()
    """,
    re.VERBOSE,
)
_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


@dataclass(frozen=True)
class StylesheetAnalysis:
    """Facts gathered from a raw stylesheet alongside the translation."""

    variables: dict[str, str] = field(default_factory=dict)
    media_queries: list[str] = field(default_factory=list)
    animations: list[str] = field(default_factory=list)
    color_palette: dict[str, str] = field(default_factory=dict)


def extract_css_variables(css: str) -> dict[str, str]:
    """Map custom property names (without ``--``) to their values."""
    return {
        match.group("name"): match.group("value").strip()
        for match in _VARIABLE_RE.finditer(css)
    }


def extract_media_queries(css: str) -> list[str]:
    return [match.group("query").strip() for match in _MEDIA_RE.finditer(css)]


def extract_animations(css: str) -> list[str]:
    """Names of the ``@keyframes`` rules, in source order."""
    return [match.group("name") for match in _KEYFRAMES_RE.finditer(css)]


def extract_color_palette(css: str) -> dict[str, str]:
    """Collect distinct color literals as ``color-1``, ``color-2``, ..."""
    palette: dict[str, str] = {}
    for match in _COLOR_RE.finditer(css):
        color = match.group(0)
        if color not in palette.values():
            palette[f"color-{len(palette) + 1}"] = color
    return palette


def minify_css(css: str) -> str:
    """Strip comments and redundant whitespace for production output."""
    css = _COMMENT_RE.sub("", css)
    css = re.sub(r"\s+", " ", css)
    css = re.sub(r";\s*}", "}", css)
    return css.strip()


def analyze_stylesheet(css: str) -> StylesheetAnalysis:
    return StylesheetAnalysis(
        variables=extract_css_variables(css),
        media_queries=extract_media_queries(css),
        animations=extract_animations(css),
        color_palette=extract_color_palette(css),
    )
