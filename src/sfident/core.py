"""Core data model: QualifiedName, plus parsing and formatting of full names."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sfident._constants import LEVELS, MAX_DEPTH, SEPARATOR
from sfident._sql_utils import quote_identifier, trim_circumfix, undouble_quotes
from sfident.errors import SfidentSplitError, SfidentValidationError
from sfident.splitter import split_qualified_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QualifiedName:
    """A database.schema.table.column name with optional levels.

    Levels are filled from the outside in. ``None`` means the level is
    absent, which is different from an empty-string segment. Values are
    stored decoded: no surrounding quotes, no doubled quotes.

    Use ``dataclasses.replace`` to derive a modified copy.
    """

    database: str | None = None
    schema: str | None = None
    table: str | None = None
    column: str | None = None

    @classmethod
    def from_parts(cls, *parts: str) -> QualifiedName:
        """Create a QualifiedName from decoded segment values, outermost first.

        Example:
            >>> QualifiedName.from_parts("DB", "PUBLIC").full_name()
            'DB.PUBLIC'
        """
        if len(parts) > MAX_DEPTH:
            raise SfidentValidationError(
                f"A qualified name has at most {MAX_DEPTH} levels "
                f"({', '.join(LEVELS)}), got {len(parts)}: {list(parts)}"
            )
        return cls(**dict(zip(LEVELS, parts)))

    @classmethod
    def parse(cls, raw: str) -> QualifiedName:
        """Parse ``raw``; see :func:`parse`."""
        return parse(raw)

    @property
    def parts(self) -> tuple[str, ...]:
        """Populated levels, stopping at the first absent one."""
        result = []
        for level in LEVELS:
            value = getattr(self, level)
            if value is None:
                break
            result.append(value)
        return tuple(result)

    @property
    def depth(self) -> int:
        return len(self.parts)

    @property
    def is_empty(self) -> bool:
        return self.database is None

    @property
    def is_prefix_closed(self) -> bool:
        """True when no level is present below an absent one."""
        present = [getattr(self, level) is not None for level in LEVELS]
        return present == sorted(present, reverse=True)

    def full_name(self, with_quotes: bool = False) -> str:
        """Render the dotted name; see :func:`format_name`."""
        return format_name(self, with_quotes)

    def __str__(self) -> str:
        return self.full_name()


def _decode_segment(segment: str) -> str:
    return undouble_quotes(trim_circumfix(segment))


def _from_segments(raw: str, segments: list[str]) -> QualifiedName:
    if len(segments) > MAX_DEPTH:
        logger.debug(
            "Qualified name %r has %d segments, keeping the first %d",
            raw,
            len(segments),
            MAX_DEPTH,
        )
    return QualifiedName.from_parts(
        *(_decode_segment(s) for s in segments[:MAX_DEPTH])
    )


def parse_strict(raw: str) -> QualifiedName:
    """Parse a full name, raising on structural errors.

    Raises:
        UnterminatedQuoteError: A quoted segment is never closed.
        MalformedSeparatorError: A separator is missing or dangling.
    """
    return _from_segments(raw, split_qualified_string(raw))


def parse(raw: str) -> QualifiedName:
    """Parse a full name such as ``"db"."sch""ema".TABLE`` into a QualifiedName.

    Best effort: malformed input yields an empty QualifiedName instead of an
    error. Segments beyond the fourth are ignored. Use :func:`parse_strict`
    to reject malformed input.
    """
    try:
        return parse_strict(raw)
    except SfidentSplitError as exc:
        logger.debug("Could not parse qualified name %r: %s", raw, exc)
        return QualifiedName()


def format_name(name: QualifiedName, with_quotes: bool = False) -> str:
    """Render a QualifiedName as a dotted string.

    With ``with_quotes`` every level is quoted and its quotes doubled, which
    :func:`parse` reverses exactly. Without it values are joined as-is and
    the caller must know they need no escaping. Rendering stops at the first
    absent level, so a name without a database renders as ``""``.
    """
    parts = name.parts
    if with_quotes:
        parts = tuple(quote_identifier(p) for p in parts)
    return SEPARATOR.join(parts)
