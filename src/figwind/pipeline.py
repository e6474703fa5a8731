"""Pipeline entry point: raw CSS text -> component descriptor.

    text -> blocks -> (name, declarations) -> classes -> descriptor

Every call works on its own input and allocates fresh results; nothing is
cached or shared between calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from figwind.component import ComponentDescriptor, synthesize_component
from figwind.config import FigwindConfig
from figwind.css import (
    block_selector,
    extract_component_name,
    extract_declarations,
    split_into_blocks,
)
from figwind.errors import EmptyInputError, NoDeclarationBlockError
from figwind.translate import translate_to_utility_classes

__all__ = ["TranslatedBlock", "process_stylesheet", "translate_stylesheet"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslatedBlock:
    """One CSS block with its declarations and translated classes."""

    selector: str
    declarations: dict[str, str]
    classes: list[str]


def _check_input(text: str) -> None:
    if not text or not text.strip():
        raise EmptyInputError()


def process_stylesheet(
    text: str, config: FigwindConfig | None = None
) -> ComponentDescriptor:
    """Translate the first block of *text* into a component descriptor.

    Raises :class:`EmptyInputError` for blank text and
    :class:`NoDeclarationBlockError` when no brace-balanced block exists.
    """
    config = config or FigwindConfig()
    _check_input(text)

    main_block = next(iter(split_into_blocks(text)), None)
    if main_block is None:
        raise NoDeclarationBlockError()

    name = extract_component_name(text, default=config.default_component_name)
    declarations = extract_declarations(main_block)
    classes = translate_to_utility_classes(
        declarations,
        color_policy=config.color_policy,
        spacing_policy=config.spacing_policy,
    )
    logger.debug(
        "Processed %s: %d declarations -> %d classes",
        name,
        len(declarations),
        len(classes),
    )
    return synthesize_component(name, classes, declarations)


def translate_stylesheet(
    text: str, config: FigwindConfig | None = None
) -> list[TranslatedBlock]:
    """Translate every block of *text*, in source order."""
    config = config or FigwindConfig()
    _check_input(text)

    results: list[TranslatedBlock] = []
    for block in split_into_blocks(text):
        declarations = extract_declarations(block)
        classes = translate_to_utility_classes(
            declarations,
            color_policy=config.color_policy,
            spacing_policy=config.spacing_policy,
        )
        results.append(
            TranslatedBlock(
                selector=block_selector(block),
                declarations=declarations,
                classes=classes,
            )
        )
    if not results:
        raise NoDeclarationBlockError()
    return results
