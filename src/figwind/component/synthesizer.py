"""Component synthesizer: builds a component scaffold from translated classes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from figwind.component.model import ComponentDescriptor, ComponentStats
from figwind.css.declarations import serialize_declarations

__all__ = ["synthesize_component", "compute_statistics"]

BREAKPOINT_PREFIXES = ("sm:", "md:", "lg:", "xl:", "2xl:")
ANIMATION_MARKER = "animate-"


def _is_custom_value(cls: str) -> bool:
    return "[" in cls and "]" in cls


def compute_statistics(
    classes: Sequence[str], declarations: Mapping[str, str]
) -> ComponentStats:
    return ComponentStats(
        declaration_count=len(declarations),
        responsive_class_count=sum(
            1 for cls in classes if any(prefix in cls for prefix in BREAKPOINT_PREFIXES)
        ),
        animation_class_count=sum(1 for cls in classes if ANIMATION_MARKER in cls),
        custom_value_class_count=sum(1 for cls in classes if _is_custom_value(cls)),
    )


def _props_contract(name: str) -> str:
    return (
        f"interface {name}Props {{\n"
        "  children?: React.ReactNode;\n"
        "  className?: string;\n"
        "}"
    )


def _react_code(name: str, props: str, class_string: str) -> str:
    return (
        "import React from 'react';\n"
        "import { cn } from '@/lib/utils';\n"
        "\n"
        f"{props}\n"
        "\n"
        f"const {name} = ({{ children, className }}: {name}Props) => {{\n"
        "  return (\n"
        f'    <div className={{cn("{class_string}", className)}}>\n'
        "      {children}\n"
        "    </div>\n"
        "  );\n"
        "};\n"
        "\n"
        f"export default {name};"
    )


def _markup(class_string: str) -> str:
    return f'<div class="{class_string}">\n  <!-- Component content -->\n</div>'


def synthesize_component(
    name: str,
    classes: Sequence[str],
    declarations: Mapping[str, str],
) -> ComponentDescriptor:
    """Combine a name, its utility classes and declarations into a descriptor."""
    class_string = " ".join(classes)
    props = _props_contract(name)
    body = serialize_declarations(declarations, indent="  ")
    styled = f".{name.lower()} {{\n{body}\n}}" if body else f".{name.lower()} {{\n}}"
    return ComponentDescriptor(
        name=name,
        props_contract=props,
        utility_classes=tuple(classes),
        utility_class_string=class_string,
        original_declarations_text=styled,
        markup_template=_markup(class_string),
        react_code=_react_code(name, props, class_string),
        custom_value_classes=tuple(cls for cls in classes if _is_custom_value(cls)),
        statistics=compute_statistics(classes, declarations),
    )
