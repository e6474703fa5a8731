"""Lookup tables and bucket ladders used by the property translator."""

from __future__ import annotations

import re

# Keyword properties: exact value -> utility class.
KEYWORD_CLASSES: dict[str, dict[str, str]] = {
    "display": {
        "flex": "flex",
        "block": "block",
        "inline": "inline",
        "inline-block": "inline-block",
        "inline-flex": "inline-flex",
        "grid": "grid",
        "none": "hidden",
    },
    "flex-direction": {
        "column": "flex-col",
        "row": "flex-row",
        "column-reverse": "flex-col-reverse",
        "row-reverse": "flex-row-reverse",
    },
    "justify-content": {
        "center": "justify-center",
        "space-between": "justify-between",
        "space-around": "justify-around",
        "flex-start": "justify-start",
        "flex-end": "justify-end",
    },
    "align-items": {
        "center": "items-center",
        "flex-start": "items-start",
        "flex-end": "items-end",
        "stretch": "items-stretch",
        "baseline": "items-baseline",
    },
    "text-align": {
        "center": "text-center",
        "left": "text-left",
        "right": "text-right",
        "justify": "text-justify",
    },
}

# Spacing properties and their class prefix.
SPACING_PREFIXES: dict[str, str] = {
    "padding": "p",
    "margin": "m",
    "gap": "gap",
}

# (threshold, scale step); values above the last threshold use SPACING_MAX_STEP.
SPACING_LADDER: tuple[tuple[float, str], ...] = (
    (4, "1"),
    (8, "2"),
    (12, "3"),
    (16, "4"),
    (24, "6"),
)
SPACING_MAX_STEP = "8"

RADIUS_LADDER: tuple[tuple[float, str], ...] = (
    (2, "rounded-sm"),
    (4, "rounded"),
    (8, "rounded-md"),
    (12, "rounded-lg"),
)
RADIUS_MAX_CLASS = "rounded-xl"

FONT_SIZE_CLASSES: dict[str, str] = {
    "12": "text-xs",
    "14": "text-sm",
    "16": "text-base",
    "18": "text-lg",
    "20": "text-xl",
    "24": "text-2xl",
    "30": "text-3xl",
    "36": "text-4xl",
    "48": "text-5xl",
    "60": "text-6xl",
}

FONT_WEIGHT_CLASSES: dict[str, str] = {
    "100": "font-thin",
    "200": "font-extralight",
    "300": "font-light",
    "400": "font-normal",
    "500": "font-medium",
    "600": "font-semibold",
    "700": "font-bold",
    "800": "font-extrabold",
    "900": "font-black",
}

# Color property -> (class prefix, fallback class under the palette policy).
COLOR_PROPERTIES: dict[str, tuple[str, str]] = {
    "color": ("text", "text-gray-900"),
    "background-color": ("bg", "bg-gray-100"),
}

# Literal colors that keep a named class under every policy.
NAMED_COLORS: dict[str, str] = {
    "#ffffff": "white",
    "white": "white",
    "#000000": "black",
    "black": "black",
}

SIZE_PREFIXES: dict[str, str] = {
    "width": "w",
    "height": "h",
}

# First "<number>px" token in a value.
PX_RE = re.compile(r"(?P<number>\d+(?:\.\d+)?)px")

# A bare unitless number, e.g. a font weight.
NUMBER_RE = re.compile(r"^(?P<number>\d+)$")

# border shorthand: <width>px solid <color>
BORDER_RE = re.compile(
    r"""
    ^(?P<width>\d+(?:\.\d+)?)px   # border width
    \s+solid\s+                    # only solid borders translate
    (?P<color>.+)$                 # any color literal
    """,
    re.VERBOSE,
)
