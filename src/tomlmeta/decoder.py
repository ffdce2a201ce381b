"""TOML decoding of raw metadata blocks.

:func:`decode` never raises for malformed content. Decoder failures are
normalised into a :class:`MetaResult` carrying a :class:`MetaDecodeError`,
so a broken block can never abort the surrounding markdown conversion.
"""

from __future__ import annotations

import logging
import re
import tomllib
from dataclasses import dataclass
from typing import Any

from tomlmeta.exceptions import MetaDecodeError
from tomlmeta.scanner import RawBlock

logger = logging.getLogger(__name__)

_POSITION_RE = re.compile(r"\s*\((?:at line (?P<line>\d+), column (?P<column>\d+)|at end of document)\)$")
_BARE_OR_QUOTED = r"""(?:[A-Za-z0-9_-]+|"[^"]*"|'[^']*')"""
_KEY_RE = re.compile(rf"^\s*(?P<key>{_BARE_OR_QUOTED}(?:\s*\.\s*{_BARE_OR_QUOTED})*)\s*=")
_TABLE_RE = re.compile(rf"^\s*\[\[?\s*(?P<key>{_BARE_OR_QUOTED}(?:\s*\.\s*{_BARE_OR_QUOTED})*)\s*\]\]?")
_KEY_PART_RE = re.compile(_BARE_OR_QUOTED)


@dataclass(frozen=True)
class MetaResult:
    """Outcome of decoding one metadata block: exactly one of *data* / *error*."""

    data: dict[str, Any] | None = None
    error: MetaDecodeError | None = None

    def __post_init__(self) -> None:
        if (self.data is None) == (self.error is None):
            raise ValueError("MetaResult needs exactly one of data or error")

    @property
    def ok(self) -> bool:
        return self.error is None


def _key_path(raw: str) -> list[str]:
    return [part.strip("\"'") for part in _KEY_PART_RE.findall(raw)]


def _last_key(text: str, line: int | None) -> str | None:
    """Best-effort dotted path of the last key assigned up to *line*."""
    lines = text.splitlines()
    if line is not None:
        lines = lines[:line]
    table: list[str] = []
    last: list[str] | None = None
    for source_line in lines:
        table_match = _TABLE_RE.match(source_line)
        if table_match:
            table = _key_path(table_match.group("key"))
            last = table
            continue
        key_match = _KEY_RE.match(source_line)
        if key_match:
            last = table + _key_path(key_match.group("key"))
    return ".".join(last) if last else None


def _error_position(exc: tomllib.TOMLDecodeError, text: str) -> tuple[str, int | None, int | None]:
    message = getattr(exc, "msg", None)
    if isinstance(message, str):
        return message, getattr(exc, "lineno", None), getattr(exc, "colno", None)

    # Older interpreters only carry the position inside the message text.
    raw = str(exc)
    match = _POSITION_RE.search(raw)
    if match is None:
        return raw, None, None
    message = raw[: match.start()]
    if match.group("line") is None:
        return message, text.count("\n") + 1, None
    return message, int(match.group("line")), int(match.group("column"))


def decode(raw: RawBlock | str) -> MetaResult:
    """Decode the interior of a metadata block.

    Args:
        raw: A scanned block or its interior text.

    Returns:
        A result holding either the decoded mapping or the decode error.
    """
    text = raw.text if isinstance(raw, RawBlock) else raw
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        message, line, column = _error_position(exc, text)
        error = MetaDecodeError(message, line=line, column=column, last_key=_last_key(text, line))
        error.__cause__ = exc
        logger.warning("metadata block is not valid TOML: %s", error)
        return MetaResult(error=error)
    except RecursionError as exc:
        # pure-Python tomllib recurses once per nested array or inline table
        error = MetaDecodeError("value nesting too deep", last_key=_last_key(text, None))
        error.__cause__ = exc
        logger.warning("metadata block is not valid TOML: %s", error)
        return MetaResult(error=error)

    logger.debug("decoded metadata block with %d keys", len(data))
    return MetaResult(data=data)
