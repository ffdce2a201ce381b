"""Shared test fixtures for tomlmeta tests."""

from __future__ import annotations

import pytest
from markdown_it import MarkdownIt

from tomlmeta import toml_meta_plugin

META_SOURCE = """+++
Title = "tomlmeta"
Summary = "Add TOML metadata to the document"
Tags = ["markdown", "toml"]
+++

# Hello tomlmeta
"""

BROKEN_SOURCE = """+++
Title = "tomlmeta"
Summary = "Add TOML metadata to the document"
Tags = [- "markdown", "toml"]
+++

# Hello tomlmeta
"""

META_TABLE_HTML = """<table>
<thead>
<tr>
<th>Title</th>
<th>Summary</th>
<th>Tags</th>
</tr>
</thead>
<tbody>
<tr>
<td>tomlmeta</td>
<td>Add TOML metadata to the document</td>
<td>[markdown toml]</td>
</tr>
</tbody>
</table>
"""


@pytest.fixture
def meta_source() -> str:
    """A document with a well-formed metadata block."""
    return META_SOURCE


@pytest.fixture
def broken_source() -> str:
    """A document whose metadata block is not valid TOML."""
    return BROKEN_SOURCE


@pytest.fixture
def md() -> MarkdownIt:
    """A CommonMark parser with the plugin in its default configuration."""
    return MarkdownIt("commonmark").use(toml_meta_plugin)


@pytest.fixture
def table_md() -> MarkdownIt:
    """A CommonMark parser with the plugin in table mode."""
    return MarkdownIt("commonmark").use(toml_meta_plugin, table_mode=True)


@pytest.fixture
def meta_table_html() -> str:
    """Table markup rendered for :data:`META_SOURCE` in table mode."""
    return META_TABLE_HTML
