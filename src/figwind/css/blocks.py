"""Block splitter: partitions raw CSS text into brace-balanced blocks."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["BlockSequence", "split_into_blocks", "block_selector"]


class BlockSequence:
    """Lazy, restartable sequence of CSS blocks.

    Every iteration rescans the source text, so the sequence can be walked
    any number of times.  Lines are buffered until the running brace balance
    returns to zero with at least one ``{`` seen; the trimmed buffer is then
    yielded as one block.  A trailing unbalanced fragment is dropped.
    """

    def __init__(self, text: str) -> None:
        self._text = text

    def __iter__(self) -> Iterator[str]:
        buffer: list[str] = []
        balance = 0
        opened = False
        for line in self._text.splitlines():
            stripped = line.strip()
            if not stripped:
                continue
            buffer.append(line)
            for char in stripped:
                if char == "{":
                    balance += 1
                    opened = True
                elif char == "}":
                    balance -= 1
            if balance == 0 and opened:
                block = "\n".join(buffer).strip()
                buffer = []
                opened = False
                if block:
                    yield block

    def __repr__(self) -> str:
        return f"BlockSequence({self._text[:40]!r})"


def split_into_blocks(text: str) -> BlockSequence:
    """Split *text* into brace-balanced blocks.

    Text without any ``{`` yields no blocks; callers treat that as "no
    extractable declarations" rather than an error here.
    """
    return BlockSequence(text)


def block_selector(block: str) -> str:
    """Return the selector text preceding a block's first ``{``."""
    head = block.split("{", 1)[0]
    lines = [line.strip() for line in head.splitlines() if line.strip()]
    # Comments ahead of the rule are not part of the selector.
    lines = [line for line in lines if not line.startswith("/*")]
    return " ".join(lines)
