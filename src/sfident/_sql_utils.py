"""Shared identifier quoting and escaping helpers."""

from __future__ import annotations

import re
import string
from collections.abc import Sequence

from sfident._constants import ESCAPED_QUOTE, QUOTE
from sfident.errors import SfidentTemplateError, template_mismatch_error

_SIMPLE_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def double_quotes(value: str) -> str:
    """Escape every quote character by doubling it.

    Example: it"s -> it""s
    """
    return value.replace(QUOTE, ESCAPED_QUOTE)


def undouble_quotes(value: str) -> str:
    """Collapse every doubled quote pair back to a single quote."""
    return value.replace(ESCAPED_QUOTE, QUOTE)


def trim_circumfix(value: str) -> str:
    """Strip one leading and one trailing quote, only when both are present."""
    if len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE):
        return value[1:-1]
    return value


def quote_identifier(name: str) -> str:
    """Quote a single identifier segment.

    Wraps the name in double quotes and escapes any internal double quotes.
    Example: my col -> "my col", it"s -> "it""s"
    """
    return QUOTE + double_quotes(name) + QUOTE


def is_simple_name(name: str) -> bool:
    """Return True if ``name`` can be emitted without quoting.

    A simple name starts with a letter or underscore and contains only
    letters, digits and underscores.
    """
    return _SIMPLE_NAME.fullmatch(name) is not None


def _placeholders(template: str) -> list[tuple[str, str, str | None]]:
    try:
        parsed = list(string.Formatter().parse(template))
    except ValueError as exc:
        raise SfidentTemplateError(
            f"Invalid statement template {template!r}: {exc}"
        ) from exc
    fields = [
        (field, spec, conversion)
        for _, field, spec, conversion in parsed
        if field is not None
    ]
    # Specs and conversions would re-process the quoted identifier
    if any(field or spec or conversion for field, spec, conversion in fields):
        raise SfidentTemplateError(
            f"Statement template {template!r} must only use positional '{{}}' placeholders."
        )
    return fields


def quote_for_statement(
    template: str, values: Sequence[str], *, quote_simple: bool = True
) -> str:
    """Substitute identifier values into a statement template.

    Each value is quoted and escaped on its own before being placed into the
    next ``{}`` placeholder, so a value containing quotes or dots cannot break
    out of its identifier.

    Args:
        template: Statement text with one ``{}`` per value. Literal braces
            are written ``{{`` and ``}}``.
        values: Decoded identifier values, in placeholder order.
        quote_simple: When False, values that are already simple names are
            substituted bare (the warehouse then resolves them upper-cased).

    Raises:
        SfidentTemplateError: If the placeholder count differs from ``len(values)``.
    """
    expected = len(_placeholders(template))
    if expected != len(values):
        raise template_mismatch_error(template, expected, len(values))

    rendered = [
        v if not quote_simple and is_simple_name(v) else quote_identifier(v)
        for v in values
    ]
    return template.format(*rendered)
