"""Property translator: CSS declarations -> utility classes.

Each declaration is checked against an ordered rule table.  A rule converts
a single (property, value) pair into zero or more utility classes; pairs no
rule recognizes are dropped.  Two policies select between the translation
strategies the converter supports:

    ColorPolicy.PALETTE    white/black keep named classes, every other color
                           collapses onto one generic gray class.
    ColorPolicy.ARBITRARY  non-palette colors become arbitrary-value classes
                           embedding the literal (``bg-[#6366f1]``).

    SpacingPolicy.BUCKET   pixel values snap onto a fixed bucket ladder.
    SpacingPolicy.SCALE    multiples of 4px map onto the numbered scale
                           (``value / 4``), everything else becomes an
                           arbitrary-value class.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Mapping

from figwind.translate.rules import (
    BORDER_RE,
    COLOR_PROPERTIES,
    FONT_SIZE_CLASSES,
    FONT_WEIGHT_CLASSES,
    KEYWORD_CLASSES,
    NAMED_COLORS,
    NUMBER_RE,
    PX_RE,
    RADIUS_LADDER,
    RADIUS_MAX_CLASS,
    SIZE_PREFIXES,
    SPACING_LADDER,
    SPACING_MAX_STEP,
    SPACING_PREFIXES,
)

__all__ = [
    "ColorPolicy",
    "SpacingPolicy",
    "Rule",
    "RULES",
    "translate_to_utility_classes",
    "px_to_utility",
    "font_size_class",
    "font_weight_class",
]

logger = logging.getLogger(__name__)


class ColorPolicy(StrEnum):
    PALETTE = "palette"
    ARBITRARY = "arbitrary"


class SpacingPolicy(StrEnum):
    BUCKET = "bucket"
    SCALE = "scale"


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------


def px_to_utility(prefix: str, px: str) -> str:
    """Convert a pixel literal to a scale class, or an arbitrary-value class.

    >>> px_to_utility("p", "16")
    'p-4'
    >>> px_to_utility("gap", "10")
    'gap-[10px]'
    """
    step = float(px) / 4
    if step == int(step):
        return f"{prefix}-{int(step)}"
    return f"{prefix}-[{px}px]"


def font_size_class(value: str) -> str | None:
    match = PX_RE.search(value)
    if match is None:
        return None
    number = match.group("number")
    return FONT_SIZE_CLASSES.get(number, f"text-[{number}px]")


def font_weight_class(value: str) -> str | None:
    match = NUMBER_RE.match(value.strip())
    if match is None:
        return None
    number = match.group("number")
    return FONT_WEIGHT_CLASSES.get(number, f"font-[{number}]")


def _first_px(value: str) -> str | None:
    match = PX_RE.search(value)
    return match.group("number") if match else None


def _bucket(value: float, ladder: tuple[tuple[float, str], ...], largest: str) -> str:
    """Return the label of the smallest threshold >= *value*, else *largest*."""
    for threshold, label in ladder:
        if value <= threshold:
            return label
    return largest


def _arbitrary(value: str) -> str:
    # Arbitrary values cannot contain spaces; underscores stand in for them.
    return re.sub(r"\s+", "_", value.strip())


def _named_color(value: str) -> str | None:
    return NAMED_COLORS.get(value.strip())


# ---------------------------------------------------------------------------
# Rule handlers
# ---------------------------------------------------------------------------


def _keyword(prop: str, value: str, color: ColorPolicy, spacing: SpacingPolicy) -> list[str]:
    cls = KEYWORD_CLASSES[prop].get(value.strip())
    return [cls] if cls else []


def _spacing(prop: str, value: str, color: ColorPolicy, spacing: SpacingPolicy) -> list[str]:
    px = _first_px(value)
    if px is None:
        return []
    prefix = SPACING_PREFIXES[prop]
    if spacing is SpacingPolicy.SCALE:
        return [px_to_utility(prefix, px)]
    step = _bucket(float(px), SPACING_LADDER, SPACING_MAX_STEP)
    return [f"{prefix}-{step}"]


def _radius(prop: str, value: str, color: ColorPolicy, spacing: SpacingPolicy) -> list[str]:
    px = _first_px(value)
    if px is None:
        return []
    if spacing is SpacingPolicy.SCALE:
        return [px_to_utility("rounded", px)]
    return [_bucket(float(px), RADIUS_LADDER, RADIUS_MAX_CLASS)]


def _font_size(prop: str, value: str, color: ColorPolicy, spacing: SpacingPolicy) -> list[str]:
    cls = font_size_class(value)
    return [cls] if cls else []


def _font_weight(prop: str, value: str, color: ColorPolicy, spacing: SpacingPolicy) -> list[str]:
    cls = font_weight_class(value)
    return [cls] if cls else []


def _color(prop: str, value: str, color: ColorPolicy, spacing: SpacingPolicy) -> list[str]:
    prefix, fallback = COLOR_PROPERTIES[prop]
    named = _named_color(value)
    if named:
        return [f"{prefix}-{named}"]
    if color is ColorPolicy.ARBITRARY:
        return [f"{prefix}-[{_arbitrary(value)}]"]
    return [fallback]


def _border(prop: str, value: str, color: ColorPolicy, spacing: SpacingPolicy) -> list[str]:
    match = BORDER_RE.match(value.strip())
    if match is None:
        return []
    width = match.group("width")
    classes = ["border" if width == "1" else f"border-[{width}px]"]
    named = _named_color(match.group("color"))
    if named:
        classes.append(f"border-{named}")
    elif color is ColorPolicy.ARBITRARY:
        classes.append(f"border-[{_arbitrary(match.group('color'))}]")
    return classes


def _size(prop: str, value: str, color: ColorPolicy, spacing: SpacingPolicy) -> list[str]:
    prefix = SIZE_PREFIXES[prop]
    value = value.strip()
    if value == "100%":
        return [f"{prefix}-full"]
    match = PX_RE.match(value)
    if match is None:
        return []
    return [f"{prefix}-[{match.group('number')}px]"]


# ---------------------------------------------------------------------------
# Rule table
# ---------------------------------------------------------------------------

Converter = Callable[[str, str, ColorPolicy, SpacingPolicy], list[str]]


@dataclass(frozen=True)
class Rule:
    """One translation category: the properties it covers and its converter."""

    category: str
    properties: frozenset[str]
    convert: Converter

    def applies_to(self, prop: str) -> bool:
        return prop in self.properties


RULES: tuple[Rule, ...] = (
    Rule("keyword", frozenset(KEYWORD_CLASSES), _keyword),
    Rule("spacing", frozenset(SPACING_PREFIXES), _spacing),
    Rule("radius", frozenset({"border-radius"}), _radius),
    Rule("font-size", frozenset({"font-size"}), _font_size),
    Rule("font-weight", frozenset({"font-weight"}), _font_weight),
    Rule("color", frozenset(COLOR_PROPERTIES), _color),
    Rule("border", frozenset({"border"}), _border),
    Rule("size", frozenset(SIZE_PREFIXES), _size),
)


def _dedupe(classes: list[str]) -> list[str]:
    return list(dict.fromkeys(classes))


def translate_to_utility_classes(
    declarations: Mapping[str, str],
    *,
    color_policy: ColorPolicy = ColorPolicy.PALETTE,
    spacing_policy: SpacingPolicy = SpacingPolicy.BUCKET,
) -> list[str]:
    """Translate a declaration map into an ordered, duplicate-free class list.

    Declarations that no rule recognizes are skipped; translation never
    fails, it only yields fewer classes.
    """
    classes: list[str] = []
    for prop, value in declarations.items():
        key = prop.strip()
        produced: list[str] = []
        for rule in RULES:
            if rule.applies_to(key):
                produced.extend(rule.convert(key, value, color_policy, spacing_policy))
        if not produced:
            logger.debug("No utility class for declaration %s: %s", prop, value)
        classes.extend(produced)
    return _dedupe(classes)
