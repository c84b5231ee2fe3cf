"""Tests for splitting qualified names into raw segments."""

from __future__ import annotations

import pytest

from sfident.errors import (
    MalformedSeparatorError,
    SfidentSplitError,
    UnterminatedQuoteError,
)
from sfident.splitter import (
    find_next_standalone_char,
    split_qualified_string,
    try_split_qualified_string,
)


class TestFindNextStandaloneChar:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ('dkdkd"""."ADULT"', 7),
            ('dkdkd"""""."ADULT"', 9),
            ('d ""kdkd"""."ADULT"', 10),
            ('d ""kdkddf"."ADULT"', 10),
            ('d ""kdkddf.', -1),
            ('d ""kdkddf."', 11),
        ],
    )
    def test_quote(self, text, expected):
        assert find_next_standalone_char(text, '"') == expected

    def test_defaults_to_double_quote(self):
        assert find_next_standalone_char('ab"c') == 2

    def test_other_char(self):
        assert find_next_standalone_char("ngaaba", "a") == 5

    def test_empty(self):
        assert find_next_standalone_char("") == -1

    def test_only_pairs(self):
        assert find_next_standalone_char('""""') == -1

    def test_last_char(self):
        assert find_next_standalone_char('abc"') == 3


class TestSplitValid:
    def test_unquoted(self):
        assert split_qualified_string("A.B.C.D.E.F") == ["A", "B", "C", "D", "E", "F"]

    def test_single_bare_segment(self):
        assert split_qualified_string("db") == ["db"]

    def test_empty_input(self):
        assert split_qualified_string("") == []

    def test_mixed_quoting(self):
        assert split_qualified_string('ONE."TWO".THREE."FOUR".FIVE') == [
            "ONE",
            '"TWO"',
            "THREE",
            '"FOUR"',
            "FIVE",
        ]

    def test_escaped_quotes_at_edges(self):
        raw = 'ONE."TWO".THREE."FOUR".FIVE."""SIX"."SEVEN""""EIGHT"""'
        assert split_qualified_string(raw) == [
            "ONE",
            '"TWO"',
            "THREE",
            '"FOUR"',
            "FIVE",
            '"""SIX"',
            '"SEVEN""""EIGHT"""',
        ]

    def test_dots_and_pairs_inside_quotes(self):
        raw = 'ONE."TWO".THREE."FOUR"."""...""""."".""."""""".".FIVE."""SIX"."SEVEN""""EIGHT"""'
        assert split_qualified_string(raw) == [
            "ONE",
            '"TWO"',
            "THREE",
            '"FOUR"',
            '"""..."""".""."".""""""."',
            "FIVE",
            '"""SIX"',
            '"SEVEN""""EIGHT"""',
        ]

    def test_punctuation_inside_quotes(self):
        raw = 'ONE."TWO".THREE."FOUR".""".,.""|""."".""."""""".".FIVE'
        assert split_qualified_string(raw) == [
            "ONE",
            '"TWO"',
            "THREE",
            '"FOUR"',
            '""".,.""|"".""."".""""""."',
            "FIVE",
        ]

    def test_unicode(self):
        raw = '"db🫘"."🛟schema"."ta🥹ble"."c🫶olumn"'
        assert split_qualified_string(raw) == [
            '"db🫘"',
            '"🛟schema"',
            '"ta🥹ble"',
            '"c🫶olumn"',
        ]

    def test_doubled_quote_single_segment(self):
        assert split_qualified_string('"a""b"') == ['"a""b"']

    def test_two_quoted_segments(self):
        assert split_qualified_string('"a"."b"') == ['"a"', '"b"']

    def test_empty_quoted_segment(self):
        assert split_qualified_string('"".x') == ['""', "x"]

    def test_segments_keep_quotes(self):
        segments = split_qualified_string('"my.db"."sch""ema"')
        assert segments == ['"my.db"', '"sch""ema"']

    def test_dot_after_closing_quote_at_end(self):
        assert split_qualified_string('"a".') == ['"a"']


class TestSplitMalformed:
    def test_trailing_dot(self):
        with pytest.raises(MalformedSeparatorError, match="trailing separator"):
            split_qualified_string("A.B.C.D.E.F.")

    def test_trailing_dot_keeps_partial(self):
        with pytest.raises(MalformedSeparatorError) as exc_info:
            split_qualified_string("A.B.")
        assert exc_info.value.segments == ["A", "B"]
        assert exc_info.value.raw == "A.B."

    def test_unterminated_quote(self):
        with pytest.raises(UnterminatedQuoteError) as exc_info:
            split_qualified_string('A.B.C.D.E."F')
        assert exc_info.value.segments == ["A", "B", "C", "D", "E", '"F']

    def test_lone_quote(self):
        with pytest.raises(UnterminatedQuoteError):
            split_qualified_string('"')

    def test_only_escaped_pairs_never_close(self):
        with pytest.raises(UnterminatedQuoteError):
            split_qualified_string('"ab""')

    def test_garbage_after_closing_quote(self):
        with pytest.raises(MalformedSeparatorError, match="followed by a separator"):
            split_qualified_string('A.B.C.D.E."LAST"aaa')

    def test_garbage_before_next_dot(self):
        with pytest.raises(MalformedSeparatorError) as exc_info:
            split_qualified_string('A.B.C.D.E."LAST"aaa.a')
        assert "unexpected characters" in str(exc_info.value)
        assert exc_info.value.segments[-1] == '"LAST"aaa.a'

    def test_errors_share_base(self):
        assert issubclass(UnterminatedQuoteError, SfidentSplitError)
        assert issubclass(MalformedSeparatorError, SfidentSplitError)


class TestTrySplit:
    def test_success(self):
        segments, error = try_split_qualified_string('"db".schema')
        assert segments == ['"db"', "schema"]
        assert error is None

    def test_failure_returns_partial_and_error(self):
        segments, error = try_split_qualified_string('A."B')
        assert isinstance(error, UnterminatedQuoteError)
        assert segments == ["A", '"B']

    def test_malformed_separator(self):
        segments, error = try_split_qualified_string("A.B.C.D.E.F.")
        assert isinstance(error, MalformedSeparatorError)
        assert segments == ["A", "B", "C", "D", "E", "F"]
