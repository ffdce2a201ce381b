"""Where decoded metadata lives after parsing.

Two independent sinks receive the decode result:

* :class:`ContextSink` writes into the per-call markdown-it ``env`` mapping,
  read back with :func:`get`, :func:`try_get`, :func:`lookup` and
  :func:`require`.
* :class:`DocumentSink` attaches the decoded mapping to the parsed token
  stream, read back with :func:`document_meta`.
"""

from __future__ import annotations

from collections.abc import MutableMapping, Sequence
from typing import Any, Protocol

from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode

from tomlmeta.decoder import MetaResult
from tomlmeta.exceptions import MissingMetaError

RESULT_KEY = "tomlmeta.result"
TOKEN_TYPE = "toml_meta"
DOCUMENT_META_KEY = "document"


class MetaSink(Protocol):
    """Structural-typing protocol for decode-result destinations."""

    def write(self, result: MetaResult, *, env: MutableMapping[str, Any], token: Token | None) -> None:
        """Record *result* for later consumers.

        Args:
            result: The decode outcome for the document's metadata block.
            env: The per-call markdown-it environment.
            token: The placeholder token, if the handler emitted one.
        """
        ...


class ContextSink:
    """Stores the result in the per-call ``env`` mapping."""

    def write(self, result: MetaResult, *, env: MutableMapping[str, Any], token: Token | None) -> None:
        put(env, result)


class DocumentSink:
    """Attaches successfully decoded metadata to the placeholder token."""

    def write(self, result: MetaResult, *, env: MutableMapping[str, Any], token: Token | None) -> None:
        if token is None or result.data is None:
            return
        token.meta[DOCUMENT_META_KEY] = result.data


def put(env: MutableMapping[str, Any], result: MetaResult) -> None:
    env[RESULT_KEY] = result


def lookup(env: MutableMapping[str, Any] | None) -> MetaResult | None:
    """Return the stored result, or *None* if no metadata block was seen."""
    if env is None:
        return None
    result = env.get(RESULT_KEY)
    return result if isinstance(result, MetaResult) else None


def get(env: MutableMapping[str, Any] | None) -> dict[str, Any]:
    """Return decoded metadata, or an empty dict when absent or broken."""
    result = lookup(env)
    if result is None or result.data is None:
        return {}
    return result.data


def try_get(env: MutableMapping[str, Any] | None) -> dict[str, Any] | None:
    """Return decoded metadata, *None* when absent; raise when broken.

    Raises:
        MetaDecodeError: If the document's metadata block failed to decode.
    """
    result = lookup(env)
    if result is None:
        return None
    if result.error is not None:
        raise result.error
    return result.data


def require(env: MutableMapping[str, Any] | None) -> dict[str, Any]:
    """Like :func:`try_get`, but treat a missing block as an error.

    Raises:
        MissingMetaError: If no metadata block was recorded.
        MetaDecodeError: If the metadata block failed to decode.
    """
    data = try_get(env)
    if data is None:
        raise MissingMetaError("document has no metadata block")
    return data


def document_meta(tree: Sequence[Token] | SyntaxTreeNode) -> dict[str, Any]:
    """Return metadata attached to a parsed document, or an empty dict.

    Args:
        tree: Tokens from ``MarkdownIt.parse`` or a ``SyntaxTreeNode`` built from them.
    """
    tokens = tree.to_tokens() if isinstance(tree, SyntaxTreeNode) else tree
    for token in tokens:
        if token.type == TOKEN_TYPE:
            data = token.meta.get(DOCUMENT_META_KEY)
            return data if isinstance(data, dict) else {}
    return {}
