"""Component name extraction from raw CSS text."""

from __future__ import annotations

import re

__all__ = ["DEFAULT_COMPONENT_NAME", "extract_component_name"]

DEFAULT_COMPONENT_NAME = "Component"

# Design tools annotate flex containers with this comment; it never names a layer.
_NOISE_PHRASE = "Auto layout"
_MAX_COMMENT_LENGTH = 50

_COMMENT_RE = re.compile(r"/\*\s*(?P<content>[^*]+?)\s*\*/")
_CLASS_SELECTOR_RE = re.compile(r"\.(?P<name>[a-zA-Z][a-zA-Z0-9_-]*)")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")


def _name_from_comment(text: str) -> str | None:
    # Only the first comment is considered; later ones annotate layout.
    match = _COMMENT_RE.search(text)
    if match is None:
        return None
    content = match.group("content").strip()
    if _NOISE_PHRASE in content or len(content) >= _MAX_COMMENT_LENGTH:
        return None
    return _NON_ALNUM_RE.sub("", content) or None


def _name_from_selector(text: str) -> str | None:
    match = _CLASS_SELECTOR_RE.search(text)
    if match is None:
        return None
    return re.sub(r"[-_]", "", match.group("name"))


def extract_component_name(text: str, default: str = DEFAULT_COMPONENT_NAME) -> str:
    """Derive a component identifier from *text*.

    Priority: the first comment, when it is not a layout annotation, is under
    50 characters and keeps some alphanumerics, then the first class selector
    with hyphens and underscores removed, then *default*.
    """
    return _name_from_comment(text) or _name_from_selector(text) or default
