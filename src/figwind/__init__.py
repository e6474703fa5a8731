"""figwind: translate design-tool CSS into utility classes and component scaffolds."""
from __future__ import annotations

__version__ = "0.1.0"

from figwind.component import ComponentDescriptor, ComponentStats, synthesize_component
from figwind.config import FigwindConfig
from figwind.css import extract_component_name, extract_declarations, split_into_blocks
from figwind.errors import (
    EmptyInputError,
    FigmaApiError,
    FigwindError,
    InvalidFigmaUrlError,
    NoDeclarationBlockError,
)
from figwind.pipeline import TranslatedBlock, process_stylesheet, translate_stylesheet
from figwind.translate import ColorPolicy, SpacingPolicy, translate_to_utility_classes

__all__ = [
    "__version__",
    "ColorPolicy",
    "ComponentDescriptor",
    "ComponentStats",
    "EmptyInputError",
    "FigmaApiError",
    "FigwindConfig",
    "FigwindError",
    "InvalidFigmaUrlError",
    "NoDeclarationBlockError",
    "SpacingPolicy",
    "TranslatedBlock",
    "extract_component_name",
    "extract_declarations",
    "process_stylesheet",
    "split_into_blocks",
    "synthesize_component",
    "translate_stylesheet",
    "translate_to_utility_classes",
]
