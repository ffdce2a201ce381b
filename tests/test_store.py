"""Tests for the metadata result store and sinks."""

from __future__ import annotations

from typing import Any

import pytest
from markdown_it import MarkdownIt
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode

from tomlmeta import toml_meta_plugin
from tomlmeta.decoder import MetaResult
from tomlmeta.exceptions import MetaDecodeError, MissingMetaError
from tomlmeta.store import (
    RESULT_KEY,
    TOKEN_TYPE,
    ContextSink,
    DocumentSink,
    document_meta,
    get,
    lookup,
    put,
    require,
    try_get,
)


def _ok(data: dict[str, Any]) -> MetaResult:
    return MetaResult(data=data)


def _broken() -> MetaResult:
    return MetaResult(error=MetaDecodeError("Invalid value", line=1))


class TestContextStore:
    def test_empty_env_has_no_entry(self) -> None:
        env: dict[str, Any] = {}
        assert lookup(env) is None
        assert get(env) == {}
        assert try_get(env) is None
        assert lookup(None) is None
        assert get(None) == {}

    def test_put_then_query_success(self) -> None:
        env: dict[str, Any] = {}
        put(env, _ok({"Title": "x"}))

        assert get(env) == {"Title": "x"}
        assert try_get(env) == {"Title": "x"}
        assert require(env) == {"Title": "x"}

    def test_put_overwrites_previous_entry(self) -> None:
        env: dict[str, Any] = {}
        put(env, _ok({"a": 1}))
        put(env, _ok({"b": 2}))

        assert get(env) == {"b": 2}
        assert list(env) == [RESULT_KEY]

    def test_errors_are_lenient_in_get_and_strict_in_try_get(self) -> None:
        env: dict[str, Any] = {}
        result = _broken()
        put(env, result)

        assert get(env) == {}
        with pytest.raises(MetaDecodeError) as exc_info:
            try_get(env)
        assert exc_info.value is result.error

    def test_require_raises_when_absent(self) -> None:
        with pytest.raises(MissingMetaError):
            require({})

    def test_result_key_is_namespaced(self) -> None:
        env: dict[str, Any] = {}
        put(env, _ok({}))
        assert list(env) == ["tomlmeta.result"]

    def test_foreign_values_under_key_are_ignored(self) -> None:
        assert lookup({RESULT_KEY: {"Title": "x"}}) is None


class TestSinks:
    def test_context_sink_writes_env(self) -> None:
        env: dict[str, Any] = {}
        ContextSink().write(_ok({"a": 1}), env=env, token=None)
        assert get(env) == {"a": 1}

    def test_document_sink_attaches_to_token(self) -> None:
        token = Token(TOKEN_TYPE, "", 0)
        env: dict[str, Any] = {}
        DocumentSink().write(_ok({"a": 1}), env=env, token=token)

        assert document_meta([token]) == {"a": 1}
        assert env == {}

    def test_document_sink_skips_errors_and_missing_token(self) -> None:
        token = Token(TOKEN_TYPE, "", 0)
        DocumentSink().write(_broken(), env={}, token=token)
        DocumentSink().write(_ok({"a": 1}), env={}, token=None)

        assert document_meta([token]) == {}


class TestDocumentMeta:
    def test_no_placeholder_means_empty(self) -> None:
        tokens = MarkdownIt().parse("# Title\n")
        assert document_meta(tokens) == {}

    def test_reads_from_token_list_and_tree(self, meta_source: str) -> None:
        md = MarkdownIt().use(toml_meta_plugin, stores_in_document=True)
        tokens = md.parse(meta_source)

        assert document_meta(tokens)["Title"] == "tomlmeta"
        assert document_meta(SyntaxTreeNode(tokens))["Tags"] == ["markdown", "toml"]
