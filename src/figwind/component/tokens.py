"""Render design tokens as a TypeScript module."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


@dataclass
class DesignTokens:
    """Design tokens gathered from a design document."""

    colors: dict[str, str] = field(default_factory=dict)
    typography: dict[str, Any] = field(default_factory=dict)
    spacing: dict[str, str] = field(default_factory=dict)
    effects: dict[str, Any] = field(default_factory=dict)


def _js(value: dict[str, Any]) -> str:
    return json.dumps(value, indent=2)


def render_design_tokens(tokens: DesignTokens) -> str:
    """Render *tokens* as an ``export const designTokens`` module."""
    return (
        "// Design Tokens\n"
        "export const designTokens = {\n"
        f"  colors: {_js(tokens.colors)},\n"
        f"  typography: {_js(tokens.typography)},\n"
        f"  spacing: {_js(tokens.spacing)},\n"
        f"  effects: {_js(tokens.effects)}\n"
        "};"
    )
