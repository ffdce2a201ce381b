"""HTML rendering of the ``toml_meta`` placeholder token.

The placeholder renders to one of three things:

* the escaped block text followed by an HTML comment carrying the decode
  error, when decoding failed;
* a two-row table of keys and values, when table mode is on;
* nothing, otherwise.

Tables are built as regular markdown-it table tokens and handed back to the
host renderer, so their markup matches tables written in the document body.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from markdown_it.common.utils import escapeHtml
from markdown_it.renderer import RendererHTML
from markdown_it.token import Token
from markdown_it.utils import OptionsDict

from tomlmeta.decoder import MetaResult
from tomlmeta.values import stringify

TABLE_MODE_KEY = "table"
RESULT_META_KEY = "result"


def _cell(tag: str, text: str) -> list[Token]:
    inline = Token("inline", "", 0, content=text, children=[Token("text", "", 0, content=text)])
    return [
        Token(f"{tag}_open", tag, 1, block=True),
        inline,
        Token(f"{tag}_close", tag, -1, block=True),
    ]


def _row(tag: str, cells: list[str]) -> list[Token]:
    tokens = [Token("tr_open", "tr", 1, block=True)]
    for text in cells:
        tokens.extend(_cell(tag, text))
    tokens.append(Token("tr_close", "tr", -1, block=True))
    return tokens


def table_tokens(data: Mapping[str, Any]) -> list[Token]:
    """Build table tokens with a header row of keys and a body row of values.

    Args:
        data: Decoded metadata; column order follows its iteration order.

    Returns:
        Tokens for a complete table, or an empty list for empty metadata.
    """
    if not data:
        return []
    return [
        Token("table_open", "table", 1, block=True),
        Token("thead_open", "thead", 1, block=True),
        *_row("th", list(data)),
        Token("thead_close", "thead", -1, block=True),
        Token("tbody_open", "tbody", 1, block=True),
        *_row("td", [stringify(value) for value in data.values()]),
        Token("tbody_close", "tbody", -1, block=True),
        Token("table_close", "table", -1, block=True),
    ]


def error_comment(message: str) -> str:
    """Wrap *message* in an HTML comment that cannot be closed early."""
    return f"<!-- {message.replace('-->', '--&gt;')} -->\n"


def render_toml_meta(
    self: RendererHTML,
    tokens: Sequence[Token],
    idx: int,
    options: OptionsDict,
    env: MutableMapping[str, Any],
) -> str:
    token = tokens[idx]
    result = token.meta.get(RESULT_META_KEY)
    if not isinstance(result, MetaResult):
        return ""
    if result.error is not None:
        return escapeHtml(token.content) + error_comment(str(result.error))
    if token.meta.get(TABLE_MODE_KEY) and result.data:
        return self.render(table_tokens(result.data), options, env)
    return ""
