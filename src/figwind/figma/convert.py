"""Convert Figma nodes into declarations, utility classes and design tokens."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from figwind.component.tokens import DesignTokens
from figwind.figma.nodes import (
    Color,
    ContainerNode,
    FigmaNode,
    LayoutMode,
    NodeType,
    Paint,
    ShapeNode,
    TextNode,
    walk,
)
from figwind.translate import ColorPolicy, SpacingPolicy, translate_to_utility_classes

__all__ = [
    "FigmaComponent",
    "color_to_hex",
    "color_to_rgba",
    "convert_to_components",
    "extract_design_tokens",
    "node_declarations",
]

logger = logging.getLogger(__name__)

_COMPONENT_TYPES = {NodeType.COMPONENT, NodeType.FRAME}

_JUSTIFY = {
    "MIN": "flex-start",
    "CENTER": "center",
    "MAX": "flex-end",
    "SPACE_BETWEEN": "space-between",
}
_ALIGN = {
    "MIN": "flex-start",
    "CENTER": "center",
    "MAX": "flex-end",
    "BASELINE": "baseline",
}
_TEXT_ALIGN = {
    "LEFT": "left",
    "CENTER": "center",
    "RIGHT": "right",
    "JUSTIFIED": "justify",
}


def _channel(value: float) -> int:
    return round(value * 255)


def color_to_hex(color: Color) -> str:
    """``Color(1, 1, 1)`` -> ``"#ffffff"``; alpha is ignored."""
    return f"#{_channel(color.r):02x}{_channel(color.g):02x}{_channel(color.b):02x}"


def color_to_rgba(color: Color) -> str:
    return f"rgba({_channel(color.r)}, {_channel(color.g)}, {_channel(color.b)}, {color.a:g})"


def _px(value: float) -> str:
    return f"{value:g}px"


def _solid_color(paints: tuple[Paint, ...]) -> Color | None:
    for paint in paints:
        if paint.visible and paint.type == "SOLID" and paint.color is not None:
            return paint.color
    return None


def node_declarations(node: FigmaNode) -> dict[str, str]:
    """Describe a node's visual properties as CSS declarations."""
    declarations: dict[str, str] = {}

    if isinstance(node, ContainerNode) and node.layout is not None:
        layout = node.layout
        declarations["display"] = "flex"
        declarations["flex-direction"] = (
            "row" if layout.mode is LayoutMode.HORIZONTAL else "column"
        )
        if layout.primary_axis_align in _JUSTIFY:
            declarations["justify-content"] = _JUSTIFY[layout.primary_axis_align]
        if layout.counter_axis_align in _ALIGN:
            declarations["align-items"] = _ALIGN[layout.counter_axis_align]
        if layout.item_spacing:
            declarations["gap"] = _px(layout.item_spacing)
        paddings = (
            layout.padding_top,
            layout.padding_right,
            layout.padding_bottom,
            layout.padding_left,
        )
        if any(paddings):
            declarations["padding"] = " ".join(_px(p) for p in paddings)

    if isinstance(node, TextNode):
        color = _solid_color(node.fills)
        if color is not None:
            declarations["color"] = color_to_hex(color)
        if node.style.font_size is not None:
            declarations["font-size"] = _px(node.style.font_size)
        if node.style.font_weight is not None:
            declarations["font-weight"] = str(node.style.font_weight)
        if node.style.text_align in _TEXT_ALIGN:
            declarations["text-align"] = _TEXT_ALIGN[node.style.text_align]

    if isinstance(node, (ContainerNode, ShapeNode)):
        fill = _solid_color(node.fills)
        if fill is not None:
            declarations["background-color"] = color_to_hex(fill)
        stroke = _solid_color(node.strokes)
        if stroke is not None:
            weight = node.stroke_weight or 1
            declarations["border"] = f"{_px(weight)} solid {color_to_hex(stroke)}"
        if node.corner_radius:
            declarations["border-radius"] = _px(node.corner_radius)

    box = getattr(node, "bounding_box", None)
    if box is not None:
        declarations["width"] = _px(box.width)
        declarations["height"] = _px(box.height)

    return declarations


@dataclass(frozen=True)
class FigmaComponent:
    """A COMPONENT or FRAME node translated into utility classes."""

    id: str
    name: str
    type: NodeType
    declarations: dict[str, str]
    classes: list[str]
    children: list[dict[str, str]] = field(default_factory=list)


def convert_to_components(
    document: FigmaNode,
    *,
    color_policy: ColorPolicy = ColorPolicy.PALETTE,
    spacing_policy: SpacingPolicy = SpacingPolicy.BUCKET,
) -> list[FigmaComponent]:
    """Translate every COMPONENT and FRAME node beneath *document*."""
    components: list[FigmaComponent] = []
    for node in walk(document):
        if node.type not in _COMPONENT_TYPES:
            continue
        declarations = node_declarations(node)
        classes = translate_to_utility_classes(
            declarations, color_policy=color_policy, spacing_policy=spacing_policy
        )
        components.append(
            FigmaComponent(
                id=node.id,
                name=node.name,
                type=node.type,
                declarations=declarations,
                classes=classes,
                children=[
                    {"id": child.id, "name": child.name, "type": str(child.type)}
                    for child in node.children
                ],
            )
        )
    logger.debug("Converted %d Figma components", len(components))
    return components


def extract_design_tokens(
    document: FigmaNode, styles: Mapping[str, Mapping[str, Any]] | None = None
) -> DesignTokens:
    """Collect colors, typography, spacing and effects from a Figma file.

    Published styles are recorded by name against their style key; node fills,
    text styles and bounding boxes contribute literal values.
    """
    tokens = DesignTokens()

    for key, style in (styles or {}).items():
        style_type = style.get("styleType")
        name = style.get("name", key)
        if style_type == "FILL":
            tokens.colors[name] = key
        elif style_type == "TEXT":
            tokens.typography[name] = key
        elif style_type == "EFFECT":
            tokens.effects[name] = key

    for node in walk(document):
        for index, paint in enumerate(getattr(node, "fills", ())):
            if paint.type == "SOLID" and paint.color is not None:
                tokens.colors[f"{node.name}-fill-{index}"] = color_to_hex(paint.color)
        if isinstance(node, TextNode) and node.style.font_size is not None:
            typography: dict[str, Any] = {"fontSize": _px(node.style.font_size)}
            if node.style.font_weight is not None:
                typography["fontWeight"] = str(node.style.font_weight)
            if node.style.font_family:
                typography["fontFamily"] = node.style.font_family
            tokens.typography[node.name] = typography
        box = getattr(node, "bounding_box", None)
        if box is not None:
            tokens.spacing[f"{node.name}-width"] = _px(box.width)
            tokens.spacing[f"{node.name}-height"] = _px(box.height)

    return tokens
