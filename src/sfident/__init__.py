"""sfident: parse and format quoted, dot-delimited warehouse identifiers."""

from sfident._sql_utils import (
    double_quotes,
    is_simple_name,
    quote_for_statement,
    quote_identifier,
    trim_circumfix,
    undouble_quotes,
)
from sfident._version import __version__
from sfident.core import QualifiedName, format_name, parse, parse_strict
from sfident.errors import (
    MalformedSeparatorError,
    SfidentConfigError,
    SfidentError,
    SfidentSplitError,
    SfidentTemplateError,
    SfidentValidationError,
    UnterminatedQuoteError,
)
from sfident.splitter import (
    find_next_standalone_char,
    split_qualified_string,
    try_split_qualified_string,
)

__all__ = [
    "MalformedSeparatorError",
    "QualifiedName",
    "SfidentConfigError",
    "SfidentError",
    "SfidentSplitError",
    "SfidentTemplateError",
    "SfidentValidationError",
    "UnterminatedQuoteError",
    "__version__",
    "double_quotes",
    "find_next_standalone_char",
    "format_name",
    "is_simple_name",
    "parse",
    "parse_strict",
    "quote_for_statement",
    "quote_identifier",
    "split_qualified_string",
    "trim_circumfix",
    "try_split_qualified_string",
    "undouble_quotes",
]
