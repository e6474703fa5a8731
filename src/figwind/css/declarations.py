"""Declaration extractor: turns a block body into a property -> value map."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping

__all__ = ["extract_declarations", "serialize_declarations"]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Splits a line around braces, keeping the braces as separate items.
_BRACE_SPLIT_RE = re.compile(r"([{}])")


def _candidates(block: str) -> Iterator[str]:
    """Yield the fragments of *block* that may hold a declaration."""
    for line in _COMMENT_RE.sub("", block).splitlines():
        if "{" not in line and "}" not in line:
            yield line
            continue
        # One-line rules: ".btn { display: flex; padding: 16px; }".
        parts = _BRACE_SPLIT_RE.split(line)
        for index in range(0, len(parts), 2):
            following = parts[index + 1] if index + 1 < len(parts) else ""
            if following == "{":
                continue  # selector text
            yield from parts[index].split(";")


def extract_declarations(block: str) -> dict[str, str]:
    """Extract ``property: value`` pairs from a CSS block.

    Each candidate is split at its first ``:``; both sides are trimmed and a
    single trailing ``;`` is removed from the value.  Pairs with an empty side
    are skipped, and a repeated property keeps its last value.
    """
    declarations: dict[str, str] = {}
    for candidate in _candidates(block):
        line = candidate.strip()
        if ":" not in line:
            continue
        prop, _, value = line.partition(":")
        prop = prop.strip()
        value = value.strip()
        if value.endswith(";"):
            value = value[:-1].rstrip()
        if prop and value:
            declarations[prop] = value
    return declarations


def serialize_declarations(declarations: Mapping[str, str], indent: str = "") -> str:
    """Render one ``property: value;`` line per declaration, in order."""
    return "\n".join(f"{indent}{prop}: {value};" for prop, value in declarations.items())
