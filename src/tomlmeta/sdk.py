"""Convenience entry points for converting documents with metadata.

:func:`create_markdown` builds a ready-to-use parser; :func:`convert` and
:func:`parse_document` cover the two delivery modes (per-call ``env`` storage
and attachment to the parsed token stream).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.token import Token

from tomlmeta.config import MetaOptions, resolve_options
from tomlmeta.plugin import toml_meta_plugin
from tomlmeta.store import document_meta, get, try_get


@dataclass
class Conversion:
    """Rendered HTML together with the per-call environment it produced."""

    html: str
    env: dict[str, Any] = field(default_factory=dict)

    @property
    def meta(self) -> dict[str, Any]:
        """Decoded metadata; empty when absent or broken."""
        return get(self.env)

    def try_meta(self) -> dict[str, Any] | None:
        """Decoded metadata, *None* when absent; raises ``MetaDecodeError`` when broken."""
        return try_get(self.env)


def create_markdown(options: MetaOptions | None = None, **overrides: Any) -> MarkdownIt:
    """Return a CommonMark parser with tables and the metadata plugin enabled."""
    resolved = resolve_options(options, **overrides)
    return MarkdownIt("commonmark").enable("table").use(toml_meta_plugin, resolved)


def convert(
    source: str,
    *,
    options: MetaOptions | None = None,
    env: dict[str, Any] | None = None,
    md: MarkdownIt | None = None,
    **overrides: Any,
) -> Conversion:
    """Render *source* to HTML and keep its metadata.

    Args:
        source: Markdown text, optionally starting with a metadata block.
        options: Plugin options used when *md* is not given.
        env: Environment to populate; a fresh dict is used when omitted.
        md: A parser that already has :func:`toml_meta_plugin` installed.
        **overrides: Individual option values used when *md* is not given.

    Returns:
        The rendered HTML and the populated environment.
    """
    parser = md if md is not None else create_markdown(options, **overrides)
    call_env: dict[str, Any] = env if env is not None else {}
    html = parser.render(source, call_env)
    return Conversion(html=html, env=call_env)


def parse_document(
    source: str,
    *,
    options: MetaOptions | None = None,
    md: MarkdownIt | None = None,
    **overrides: Any,
) -> tuple[list[Token], dict[str, Any]]:
    """Parse *source* with document storage enabled.

    Returns:
        The token stream and the metadata attached to it.
    """
    if md is None:
        resolved = resolve_options(options, **overrides)
        md = create_markdown(resolved.model_copy(update={"stores_in_document": True}))
    tokens = md.parse(source, {})
    return tokens, document_meta(tokens)
