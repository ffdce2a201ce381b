"""markdown-it-py plugin recognising a leading TOML metadata block.

Usage::

    from markdown_it import MarkdownIt
    from tomlmeta import get, toml_meta_plugin

    md = MarkdownIt().use(toml_meta_plugin, table_mode=True)
    env = {}
    html = md.render(source, env)
    title = get(env).get("Title")
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from functools import partial
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.rules_block import StateBlock

from tomlmeta.config import MetaOptions, resolve_options
from tomlmeta.decoder import decode
from tomlmeta.rendering import RESULT_META_KEY, TABLE_MODE_KEY, render_toml_meta
from tomlmeta.scanner import scan
from tomlmeta.store import TOKEN_TYPE, ContextSink, DocumentSink, MetaSink

logger = logging.getLogger(__name__)


def build_sinks(options: MetaOptions) -> list[MetaSink]:
    """Return the sinks selected by *options*, in write order."""
    sinks: list[MetaSink] = []
    if options.stores_in_context:
        sinks.append(ContextSink())
    if options.stores_in_document:
        sinks.append(DocumentSink())
    return sinks


def _source_lines(state: StateBlock, start: int, end: int) -> Iterator[str]:
    for line in range(start, end):
        yield state.src[state.bMarks[line] : state.eMarks[line]]


def toml_meta_block(
    state: StateBlock,
    startLine: int,
    endLine: int,
    silent: bool,
    *,
    options: MetaOptions,
    sinks: list[MetaSink],
) -> bool:
    # only the first line of the document itself, never nested containers
    if startLine != 0 or state.parentType != "root" or state.level != 0:
        return False

    raw = scan(_source_lines(state, startLine, endLine), options.delimiter)
    if raw is None:
        return False
    if silent:
        return True

    if not raw.closed:
        logger.debug("metadata block is not closed; decoding to end of document")
    result = decode(raw)

    token = None
    if options.table_mode or options.stores_in_document or not result.ok:
        token = state.push(TOKEN_TYPE, "", 0)
        token.block = True
        token.markup = options.delimiter
        token.content = raw.text
        token.map = [startLine, startLine + raw.end_line]
        token.meta = {RESULT_META_KEY: result, TABLE_MODE_KEY: options.table_mode}

    for sink in sinks:
        sink.write(result, env=state.env, token=token)

    state.line = startLine + raw.end_line
    return True


def toml_meta_plugin(md: MarkdownIt, options: MetaOptions | None = None, **overrides: Any) -> None:
    """Install the metadata block rule and its renderer on *md*.

    Args:
        md: The parser to extend.
        options: Plugin options; defaults to :class:`MetaOptions`.
        **overrides: Individual option values, e.g. ``table_mode=True``.

    Raises:
        ConfigError: If *overrides* contain unknown or invalid options.
    """
    resolved = resolve_options(options, **overrides)
    rule = partial(toml_meta_block, options=resolved, sinks=build_sinks(resolved))
    md.block.ruler.before("table", TOKEN_TYPE, rule, {"alt": []})
    md.add_render_rule(TOKEN_TYPE, render_toml_meta)
