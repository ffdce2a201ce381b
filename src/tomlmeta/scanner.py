"""Delimiter scanning for the leading metadata block."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tomlmeta.config import DEFAULT_DELIMITER


@dataclass(frozen=True)
class RawBlock:
    """Undecoded interior of a metadata block.

    Attributes:
        text: Interior lines, each terminated by ``\\n``. Delimiters excluded.
        line: 1-based line number of the opening delimiter.
        end_line: Number of source lines the block occupies, delimiters included.
        closed: Whether a closing delimiter was found.
    """

    text: str
    line: int = 1
    end_line: int = 1
    closed: bool = True


def scan(lines: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> RawBlock | None:
    """Isolate a metadata block from the first lines of a document.

    *lines* must start at the very beginning of the document and carry no
    line endings. Lines are pulled lazily and scanning stops at the closing
    delimiter, so the rest of the document is never read.

    Args:
        lines: Document lines, first line first.
        delimiter: Literal opening and closing line.

    Returns:
        The block, or *None* if the first line is not exactly *delimiter*.
    """
    it = iter(lines)
    if next(it, None) != delimiter:
        return None

    interior: list[str] = []
    closed = False
    for line in it:
        if line == delimiter:
            closed = True
            break
        interior.append(line)

    # opening line, interior, and the closing line when present
    end_line = 1 + len(interior) + (1 if closed else 0)
    return RawBlock(
        text="".join(f"{line}\n" for line in interior),
        line=1,
        end_line=end_line,
        closed=closed,
    )


def split_lines(source: str) -> list[str]:
    """Split *source* the way markdown-it counts lines (``\\n`` only)."""
    lines = source.replace("\r\n", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def scan_source(source: str, delimiter: str = DEFAULT_DELIMITER) -> RawBlock | None:
    """Run :func:`scan` over a whole document string."""
    return scan(split_lines(source), delimiter)
