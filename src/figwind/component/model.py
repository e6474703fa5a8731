"""Component model: the synthesizer's output types."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ComponentStats:
    """Counts derived from a component's declarations and classes."""

    declaration_count: int = 0
    responsive_class_count: int = 0
    animation_class_count: int = 0
    custom_value_class_count: int = 0


@dataclass(frozen=True)
class ComponentDescriptor:
    """A generated component scaffold.

    Attributes:
        name: Alphanumeric component identifier.
        props_contract: TypeScript props interface for the component.
        utility_classes: Ordered, duplicate-free utility classes.
        utility_class_string: ``utility_classes`` joined with spaces.
        original_declarations_text: Declarations re-serialized under a
            ``.{name}`` rule with the lowercased component name.
        markup_template: Plain HTML markup carrying the classes.
        react_code: A React component scaffold using the classes.
        custom_value_classes: The arbitrary-value classes, e.g. ``w-[320px]``.
        statistics: Derived counts.
    """

    name: str
    props_contract: str
    utility_classes: tuple[str, ...]
    utility_class_string: str
    original_declarations_text: str
    markup_template: str
    react_code: str
    custom_value_classes: tuple[str, ...]
    statistics: ComponentStats

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["utility_classes"] = list(self.utility_classes)
        data["custom_value_classes"] = list(self.custom_value_classes)
        return data
