"""Public API surface for tomlmeta."""

__version__ = "0.1.0"

from tomlmeta.config import DEFAULT_DELIMITER, MetaOptions, load_options, resolve_options
from tomlmeta.decoder import MetaResult, decode
from tomlmeta.exceptions import (
    ConfigError,
    MetaDecodeError,
    MetaKeyError,
    MetaTypeError,
    MissingMetaError,
    TomlMetaError,
)
from tomlmeta.plugin import toml_meta_plugin
from tomlmeta.scanner import RawBlock, scan, scan_source
from tomlmeta.sdk import Conversion, convert, create_markdown, parse_document
from tomlmeta.store import ContextSink, DocumentSink, MetaSink, document_meta, get, lookup, put, require, try_get
from tomlmeta.values import (
    get_bool,
    get_datetime,
    get_float,
    get_int,
    get_list,
    get_str,
    get_table,
    stringify,
)

__all__ = [
    "DEFAULT_DELIMITER",
    "ConfigError",
    "ContextSink",
    "Conversion",
    "DocumentSink",
    "MetaDecodeError",
    "MetaKeyError",
    "MetaOptions",
    "MetaResult",
    "MetaSink",
    "MetaTypeError",
    "MissingMetaError",
    "RawBlock",
    "TomlMetaError",
    "__version__",
    "convert",
    "create_markdown",
    "decode",
    "document_meta",
    "get",
    "get_bool",
    "get_datetime",
    "get_float",
    "get_int",
    "get_list",
    "get_str",
    "get_table",
    "load_options",
    "lookup",
    "parse_document",
    "put",
    "require",
    "resolve_options",
    "scan",
    "scan_source",
    "stringify",
    "toml_meta_plugin",
    "try_get",
]
