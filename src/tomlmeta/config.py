"""Plugin options and option-file loading.

:class:`MetaOptions` carries every setting the block handler and renderer
need. Options can be built in code, from keyword overrides, or from a JSON
file via :func:`load_options`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from tomlmeta.exceptions import ConfigError

DEFAULT_DELIMITER = "+++"


class MetaOptions(BaseModel):
    """Options for the TOML metadata plugin.

    Attributes:
        delimiter: Literal line that opens and closes the block. Default ``+++``.
        table_mode: Render decoded metadata as an HTML table ahead of the body.
        stores_in_document: Attach the decoded mapping to the parsed token stream.
        stores_in_context: Store the result in the per-call ``env`` mapping.
    """

    delimiter: str = DEFAULT_DELIMITER
    table_mode: bool = Field(default=False, alias="tableMode")
    stores_in_document: bool = Field(default=False, alias="storesInDocument")
    stores_in_context: bool = Field(default=True, alias="storesInContext")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "forbid"}

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, value: str) -> str:
        if not value:
            raise ValueError("delimiter must not be empty")
        if any(ch.isspace() for ch in value):
            raise ValueError("delimiter must not contain whitespace")
        return value


def resolve_options(options: MetaOptions | None = None, **overrides: Any) -> MetaOptions:
    """Merge keyword overrides into *options* (or the defaults).

    Raises:
        ConfigError: If an override is unknown or has an invalid value.
    """
    base = options if options is not None else MetaOptions()
    if not overrides:
        return base
    aliases = {field.alias: name for name, field in MetaOptions.model_fields.items() if field.alias}
    normalized = {aliases.get(key, key): value for key, value in overrides.items()}
    try:
        return MetaOptions.model_validate({**base.model_dump(), **normalized})
    except ValidationError as exc:
        raise ConfigError(f"invalid options: {exc}") from exc


def load_options(path: str | Path) -> MetaOptions:
    options_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(options_path.read_text(encoding="utf-8"))
        return MetaOptions.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading options file: {options_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in options file: {options_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid options: {exc}") from exc
