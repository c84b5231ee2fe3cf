"""sfident error hierarchy.

Every error follows the format:
  WHAT happened → WHY it matters → WHERE (input) → HOW to fix
"""

from __future__ import annotations


class SfidentError(Exception):
    """Base error for all sfident operations."""


class SfidentSplitError(SfidentError):
    """A qualified name could not be split into segments.

    Args:
        message: Human-readable description.
        raw: The full input that failed to split.
        segments: Segments recovered before the failure. Diagnostics only;
            never treat them as a valid split.
    """

    raw: str
    segments: list[str]

    def __init__(
        self, message: str, raw: str = "", segments: list[str] | None = None
    ):
        super().__init__(message)
        self.raw = raw
        self.segments = list(segments or [])


class UnterminatedQuoteError(SfidentSplitError):
    """A quoted segment has no closing quote before the end of input."""


class MalformedSeparatorError(SfidentSplitError):
    """A separator dot is missing where one is required, or dangles at the end."""


class SfidentValidationError(SfidentError):
    """General validation failure on inputs."""


class SfidentTemplateError(SfidentError):
    """Statement template does not match the values supplied for it."""


class SfidentConfigError(SfidentError):
    """Invalid or unreadable sfident.yaml."""


def unterminated_quote_error(
    raw: str, remainder: str, segments: list[str]
) -> UnterminatedQuoteError:
    """Build an error for a quoted segment that never closes."""
    msg = f"Unterminated quoted segment in {raw!r}.\n\n"
    msg += "  Every segment that opens with '\"' needs a closing '\"' that is not\n"
    msg += "  part of a doubled '\"\"' pair. Without it the segment boundaries are unknown.\n\n"
    msg += f"  Unterminated from: {remainder!r}\n"
    msg += "\n  Fix: Close the segment with '\"', and write literal quotes as '\"\"'.\n"
    return UnterminatedQuoteError(msg, raw=raw, segments=segments)


def trailing_separator_error(
    raw: str, segments: list[str]
) -> MalformedSeparatorError:
    """Build an error for an input that ends in a bare dot."""
    msg = f"Malformed qualified name {raw!r}: trailing separator without following content.\n\n"
    msg += "  An unquoted name cannot end with '.', the next level would be empty.\n\n"
    msg += "  Fix: Remove the trailing '.' or quote the last segment.\n"
    return MalformedSeparatorError(msg, raw=raw, segments=segments)


def missing_separator_error(
    raw: str, tail: str, segments: list[str]
) -> MalformedSeparatorError:
    """Build an error for content after a closing quote with no dot following it."""
    msg = f"Malformed qualified name {raw!r}: content after closing quote must be followed by a separator.\n\n"
    msg += f"  Trailing content: {tail!r}\n"
    msg += "\n  Fix: Put '.' directly after the closing '\"', or move the text inside the quotes.\n"
    return MalformedSeparatorError(msg, raw=raw, segments=segments)


def unexpected_characters_error(
    raw: str, tail: str, segments: list[str]
) -> MalformedSeparatorError:
    """Build an error for text sitting between a closing quote and the next dot."""
    unexpected = tail.split(".", 1)[0]
    msg = f"Malformed qualified name {raw!r}: unexpected characters between closing quote and separator.\n\n"
    msg += f"  Unexpected: {unexpected!r}\n"
    msg += "\n  Fix: Put '.' directly after the closing '\"', or move the text inside the quotes.\n"
    return MalformedSeparatorError(msg, raw=raw, segments=segments)


def template_mismatch_error(
    template: str, expected: int, actual: int
) -> SfidentTemplateError:
    """Build an error for a placeholder/value count mismatch."""
    msg = f"Template expects {expected} value(s) but {actual} were supplied.\n\n"
    msg += f"  Template: {template!r}\n"
    msg += "\n  Fix: Use one '{}' per value, and write literal braces as '{{' and '}}'.\n"
    return SfidentTemplateError(msg)
