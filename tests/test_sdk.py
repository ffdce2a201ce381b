"""Tests for the convenience conversion API."""

from __future__ import annotations

from typing import Any

import pytest
from markdown_it import MarkdownIt

from tomlmeta import MetaDecodeError, MetaOptions, toml_meta_plugin
from tomlmeta.sdk import Conversion, convert, create_markdown, parse_document


def test_create_markdown_enables_tables_and_plugin(meta_source: str):
    md = create_markdown()

    assert md.render("| a |\n| - |\n| 1 |\n").startswith("<table>")
    assert md.render(meta_source) == "<h1>Hello tomlmeta</h1>\n"


def test_convert_returns_html_and_meta(meta_source: str):
    conversion = convert(meta_source)

    assert isinstance(conversion, Conversion)
    assert conversion.html == "<h1>Hello tomlmeta</h1>\n"
    assert conversion.meta["Title"] == "tomlmeta"
    assert conversion.try_meta() == conversion.meta


def test_convert_with_options(meta_source: str, meta_table_html: str):
    assert convert(meta_source, table_mode=True).html.startswith(meta_table_html)
    assert convert(meta_source, options=MetaOptions(table_mode=True)).html.startswith(meta_table_html)


def test_convert_populates_given_env(meta_source: str):
    env: dict[str, Any] = {"other": 1}
    conversion = convert(meta_source, env=env)

    assert conversion.env is env
    assert env["other"] == 1
    assert conversion.meta["Title"] == "tomlmeta"


def test_convert_uses_given_parser(meta_source: str, meta_table_html: str):
    md = MarkdownIt().use(toml_meta_plugin, table_mode=True)

    assert convert(meta_source, md=md).html.startswith(meta_table_html)


def test_convert_broken_block(broken_source: str):
    conversion = convert(broken_source)

    assert conversion.meta == {}
    assert "<!-- toml: line 3" in conversion.html
    with pytest.raises(MetaDecodeError):
        conversion.try_meta()


def test_convert_without_block():
    conversion = convert("plain\n")

    assert conversion.html == "<p>plain</p>\n"
    assert conversion.meta == {}
    assert conversion.try_meta() is None


def test_parse_document_attaches_meta(meta_source: str):
    tokens, meta = parse_document(meta_source)

    assert meta["Tags"] == ["markdown", "toml"]
    assert any(token.type == "heading_open" for token in tokens)


def test_parse_document_respects_delimiter():
    _, meta = parse_document("---\na = 1\n---\n", options=MetaOptions(delimiter="---"))

    assert meta == {"a": 1}
