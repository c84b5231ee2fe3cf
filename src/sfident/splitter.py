"""Split dotted, optionally quoted qualified names into raw segments.

A segment is either bare (``PUBLIC``) or quoted (``"my.table"``). Inside a
quoted segment a doubled quote (``""``) is a literal quote and dots are
literal; a single quote closes the segment. Segments may be mixed freely:
``"db".PUBLIC."a""b"`` splits into ``['"db"', 'PUBLIC', '"a""b"']``.

Returned segments keep their surrounding quotes and doubled quotes; decoding
is left to :mod:`sfident.core`.
"""

from __future__ import annotations

import logging

from sfident._constants import QUOTE, SEPARATOR
from sfident.errors import (
    SfidentSplitError,
    missing_separator_error,
    trailing_separator_error,
    unexpected_characters_error,
    unterminated_quote_error,
)

logger = logging.getLogger(__name__)


def find_next_standalone_char(text: str, char: str = QUOTE) -> int:
    """Return the index of the first ``char`` that is not part of a doubled pair.

    Like ``str.find`` but a doubled ``char`` is skipped as a unit, so
    ``find_next_standalone_char('ngaaba', 'a')`` is 5 where ``find`` gives 2.
    Returns -1 if there is none.
    """
    i = 0
    n = len(text)
    while i < n:
        if text[i] == char:
            if i + 1 < n and text[i + 1] == char:
                i += 2
                continue
            return i
        i += 1
    return -1


def split_qualified_string(raw: str) -> list[str]:
    """Split ``raw`` into its raw segments, outermost first.

    Raises:
        UnterminatedQuoteError: A quoted segment is never closed.
        MalformedSeparatorError: The input ends in a bare dot, or a closing
            quote is followed by something other than a dot.

    The exception's ``segments`` holds what was recovered before the failure.
    """
    segments: list[str] = []
    rest = raw

    while rest:
        if not rest.startswith(QUOTE):
            i = rest.find(SEPARATOR)
            if i == -1:
                segments.append(rest)
                break
            segments.append(rest[:i])
            if i == len(rest) - 1:
                raise trailing_separator_error(raw, segments)
            rest = rest[i + 1 :]
            continue

        close = find_next_standalone_char(rest[1:])
        if close == -1:
            segments.append(rest)
            raise unterminated_quote_error(raw, rest, segments)

        # Absolute position of the closing quote within rest
        close += 1
        tail = rest[close + 1 :]
        if not tail:
            segments.append(rest)
            break

        dot = tail.find(SEPARATOR)
        if dot == -1:
            raise missing_separator_error(raw, tail, segments)
        if dot > 0:
            segments.append(rest)
            raise unexpected_characters_error(raw, tail, segments)

        segments.append(rest[: close + 1])
        rest = tail[1:]

    return segments


def try_split_qualified_string(
    raw: str,
) -> tuple[list[str], SfidentSplitError | None]:
    """Split ``raw`` without raising.

    Returns ``(segments, None)`` on success and ``(partial, error)`` on
    failure. A non-None error means the input is rejected; the partial
    segments are for reporting only.
    """
    try:
        return split_qualified_string(raw), None
    except SfidentSplitError as exc:
        logger.debug("Could not split %r: %s", raw, exc)
        return exc.segments, exc
