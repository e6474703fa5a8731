"""Figma document model: tagged node variants built from REST API JSON.

Each node kind only carries the fields the Figma API guarantees for it:

    DocumentNode   DOCUMENT, CANVAS           children only
    ContainerNode  FRAME, GROUP, COMPONENT,   paints, bounds, radius, auto layout
                   COMPONENT_SET, INSTANCE,
                   SECTION
    ShapeNode      RECTANGLE, ELLIPSE,        paints, bounds, radius
                   VECTOR, LINE, ...
    TextNode       TEXT                       paints, bounds, typography
    UnknownNode    anything else              children only
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Union


class NodeType(StrEnum):
    DOCUMENT = "DOCUMENT"
    CANVAS = "CANVAS"
    SECTION = "SECTION"
    FRAME = "FRAME"
    GROUP = "GROUP"
    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"
    TEXT = "TEXT"
    RECTANGLE = "RECTANGLE"
    ELLIPSE = "ELLIPSE"
    VECTOR = "VECTOR"
    LINE = "LINE"
    STAR = "STAR"
    POLYGON = "POLYGON"
    BOOLEAN_OPERATION = "BOOLEAN_OPERATION"
    OTHER = "OTHER"


class LayoutMode(StrEnum):
    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


@dataclass(frozen=True)
class Color:
    """An RGBA color with channels in the 0..1 range."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Color:
        return cls(
            r=float(data.get("r", 0)),
            g=float(data.get("g", 0)),
            b=float(data.get("b", 0)),
            a=float(data.get("a", 1)),
        )


@dataclass(frozen=True)
class Paint:
    """A fill or stroke.  Only SOLID paints carry a color."""

    type: str
    color: Color | None = None
    visible: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Paint:
        color = data.get("color")
        return cls(
            type=data.get("type", ""),
            color=Color.from_dict(color) if color else None,
            visible=data.get("visible", True),
        )


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class AutoLayout:
    """Auto layout settings of a frame-like node."""

    mode: LayoutMode
    item_spacing: float = 0
    padding_top: float = 0
    padding_right: float = 0
    padding_bottom: float = 0
    padding_left: float = 0
    primary_axis_align: str = "MIN"
    counter_axis_align: str = "MIN"


@dataclass(frozen=True)
class TextStyle:
    font_family: str = ""
    font_size: float | None = None
    font_weight: int | None = None
    text_align: str = ""


@dataclass(frozen=True)
class DocumentNode:
    id: str
    name: str
    type: NodeType
    children: tuple[FigmaNode, ...] = ()


@dataclass(frozen=True)
class ContainerNode:
    id: str
    name: str
    type: NodeType
    children: tuple[FigmaNode, ...] = ()
    fills: tuple[Paint, ...] = ()
    strokes: tuple[Paint, ...] = ()
    stroke_weight: float | None = None
    bounding_box: BoundingBox | None = None
    corner_radius: float | None = None
    layout: AutoLayout | None = None


@dataclass(frozen=True)
class ShapeNode:
    id: str
    name: str
    type: NodeType
    children: tuple[FigmaNode, ...] = ()
    fills: tuple[Paint, ...] = ()
    strokes: tuple[Paint, ...] = ()
    stroke_weight: float | None = None
    bounding_box: BoundingBox | None = None
    corner_radius: float | None = None


@dataclass(frozen=True)
class TextNode:
    id: str
    name: str
    type: NodeType
    characters: str = ""
    children: tuple[FigmaNode, ...] = ()
    fills: tuple[Paint, ...] = ()
    bounding_box: BoundingBox | None = None
    style: TextStyle = field(default_factory=TextStyle)


@dataclass(frozen=True)
class UnknownNode:
    id: str
    name: str
    type: NodeType
    raw_type: str = ""
    children: tuple[FigmaNode, ...] = ()


FigmaNode = Union[DocumentNode, ContainerNode, ShapeNode, TextNode, UnknownNode]

_DOCUMENT_TYPES = {NodeType.DOCUMENT, NodeType.CANVAS}
_CONTAINER_TYPES = {
    NodeType.SECTION,
    NodeType.FRAME,
    NodeType.GROUP,
    NodeType.COMPONENT,
    NodeType.COMPONENT_SET,
    NodeType.INSTANCE,
}
_SHAPE_TYPES = {
    NodeType.RECTANGLE,
    NodeType.ELLIPSE,
    NodeType.VECTOR,
    NodeType.LINE,
    NodeType.STAR,
    NodeType.POLYGON,
    NodeType.BOOLEAN_OPERATION,
}


# ---------------------------------------------------------------------------
# JSON -> node parsing
# ---------------------------------------------------------------------------


def _node_type(raw: str) -> NodeType:
    try:
        return NodeType(raw)
    except ValueError:
        return NodeType.OTHER


def _paints(data: dict[str, Any], key: str) -> tuple[Paint, ...]:
    return tuple(Paint.from_dict(p) for p in data.get(key) or ())


def _bounding_box(data: dict[str, Any]) -> BoundingBox | None:
    box = data.get("absoluteBoundingBox")
    if not box:
        return None
    return BoundingBox(
        x=float(box.get("x", 0)),
        y=float(box.get("y", 0)),
        width=float(box.get("width", 0)),
        height=float(box.get("height", 0)),
    )


def _auto_layout(data: dict[str, Any]) -> AutoLayout | None:
    mode = data.get("layoutMode")
    if mode not in (LayoutMode.HORIZONTAL, LayoutMode.VERTICAL):
        return None
    return AutoLayout(
        mode=LayoutMode(mode),
        item_spacing=float(data.get("itemSpacing", 0)),
        padding_top=float(data.get("paddingTop", 0)),
        padding_right=float(data.get("paddingRight", 0)),
        padding_bottom=float(data.get("paddingBottom", 0)),
        padding_left=float(data.get("paddingLeft", 0)),
        primary_axis_align=data.get("primaryAxisAlignItems", "MIN"),
        counter_axis_align=data.get("counterAxisAlignItems", "MIN"),
    )


def _text_style(data: dict[str, Any]) -> TextStyle:
    style = data.get("style") or {}
    weight = style.get("fontWeight")
    size = style.get("fontSize")
    return TextStyle(
        font_family=style.get("fontFamily", ""),
        font_size=float(size) if size is not None else None,
        font_weight=int(weight) if weight is not None else None,
        text_align=style.get("textAlignHorizontal", ""),
    )


def _optional_float(data: dict[str, Any], key: str) -> float | None:
    value = data.get(key)
    return float(value) if value is not None else None


def parse_node(data: dict[str, Any]) -> FigmaNode:
    """Build the node variant matching ``data["type"]``, recursing into children."""
    raw_type = data.get("type", "")
    node_type = _node_type(raw_type)
    children = tuple(parse_node(child) for child in data.get("children") or ())
    common = {"id": data.get("id", ""), "name": data.get("name", ""), "type": node_type}

    if node_type in _DOCUMENT_TYPES:
        return DocumentNode(children=children, **common)
    if node_type in _CONTAINER_TYPES:
        return ContainerNode(
            children=children,
            fills=_paints(data, "fills"),
            strokes=_paints(data, "strokes"),
            stroke_weight=_optional_float(data, "strokeWeight"),
            bounding_box=_bounding_box(data),
            corner_radius=_optional_float(data, "cornerRadius"),
            layout=_auto_layout(data),
            **common,
        )
    if node_type in _SHAPE_TYPES:
        return ShapeNode(
            children=children,
            fills=_paints(data, "fills"),
            strokes=_paints(data, "strokes"),
            stroke_weight=_optional_float(data, "strokeWeight"),
            bounding_box=_bounding_box(data),
            corner_radius=_optional_float(data, "cornerRadius"),
            **common,
        )
    if node_type is NodeType.TEXT:
        return TextNode(
            characters=data.get("characters", ""),
            children=children,
            fills=_paints(data, "fills"),
            bounding_box=_bounding_box(data),
            style=_text_style(data),
            **common,
        )
    return UnknownNode(raw_type=raw_type, children=children, **common)


def walk(node: FigmaNode):
    """Yield *node* and all of its descendants, depth first."""
    yield node
    for child in node.children:
        yield from walk(child)


@dataclass(frozen=True)
class FigmaFile:
    """A Figma file as returned by ``GET /v1/files/:key``."""

    name: str
    document: FigmaNode
    last_modified: str = ""
    version: str = ""
    components: dict[str, dict[str, Any]] = field(default_factory=dict)
    styles: dict[str, dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FigmaFile:
        return cls(
            name=data.get("name", ""),
            document=parse_node(data.get("document") or {"type": "DOCUMENT"}),
            last_modified=data.get("lastModified", ""),
            version=data.get("version", ""),
            components=dict(data.get("components") or {}),
            styles=dict(data.get("styles") or {}),
        )
