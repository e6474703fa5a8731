from figwind.figma.client import FigmaClient, FigmaFileRef, parse_figma_url
from figwind.figma.convert import (
    FigmaComponent,
    color_to_hex,
    color_to_rgba,
    convert_to_components,
    extract_design_tokens,
    node_declarations,
)
from figwind.figma.nodes import FigmaFile, FigmaNode, NodeType, parse_node

__all__ = [
    "FigmaClient",
    "FigmaComponent",
    "FigmaFile",
    "FigmaFileRef",
    "FigmaNode",
    "NodeType",
    "color_to_hex",
    "color_to_rgba",
    "convert_to_components",
    "extract_design_tokens",
    "node_declarations",
    "parse_figma_url",
    "parse_node",
]
