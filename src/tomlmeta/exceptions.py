"""Custom exception hierarchy for tomlmeta.

All tomlmeta exceptions inherit from :class:`TomlMetaError`, making it easy
to catch any library error with a single ``except`` clause while still allowing
callers to handle specific failure modes.
"""

from __future__ import annotations


class TomlMetaError(Exception):
    """Base exception for all tomlmeta errors."""


class ConfigError(TomlMetaError):
    """Raised when plugin options cannot be read or validated."""


class MetaDecodeError(TomlMetaError):
    """Raised when a metadata block is not valid TOML.

    Attributes:
        message: The decoder's message, without position suffix.
        line: 1-based line within the block interior, or *None*.
        column: 1-based column within that line, or *None*.
        last_key: Dotted path of the last key assigned before the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        last_key: str | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.last_key = last_key
        super().__init__(self._format())

    def _format(self) -> str:
        context: list[str] = []
        if self.line is not None:
            context.append(f"line {self.line}")
        if self.last_key:
            context.append(f'(last key "{self.last_key}")')
        if not context:
            return f"toml: {self.message}"
        return f"toml: {' '.join(context)}: {self.message}"


class MissingMetaError(TomlMetaError):
    """Raised by strict accessors when the document had no metadata block."""


class MetaKeyError(TomlMetaError, KeyError):
    """Raised when a requested metadata key is absent."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"metadata has no key {key!r}")

    def __str__(self) -> str:
        return str(self.args[0])


class MetaTypeError(TomlMetaError, TypeError):
    """Raised when a metadata value does not have the requested shape.

    Attributes:
        key: The metadata key that was looked up.
        expected: Name of the requested shape (e.g. ``"string"``).
        actual: The Python type name of the stored value.
    """

    def __init__(self, key: str, expected: str, actual: str) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(f"metadata key {key!r} is {actual}, expected {expected}")
