"""Tests for good_codegen.core.text."""

from good_codegen.core.text import (
    indent_continuation,
    leading_whitespace,
    normalize_newlines,
    normalize_text,
    strip_whitespace_lines,
    trim_layout,
)


class TestLineHelpers:
    def test_normalize_newlines(self):
        assert normalize_newlines("a\r\nb\rc\n") == "a\nb\nc\n"
        assert normalize_newlines("plain") == "plain"

    def test_leading_whitespace_keeps_tabs_and_spaces_verbatim(self):
        assert leading_whitespace("  \tx = 1") == "  \t"
        assert leading_whitespace("x") == ""
        assert leading_whitespace("   ") == "   "

    def test_indent_continuation_skips_first_line(self):
        assert indent_continuation("L1\nL2\nL3", "  ") == "L1\n  L2\n  L3"

    def test_indent_continuation_single_line_unchanged(self):
        assert indent_continuation("only", "    ") == "only"

    def test_indent_continuation_prefixes_empty_lines(self):
        assert indent_continuation("a\n\nb", "  ") == "a\n  \n  b"

    def test_strip_whitespace_lines(self):
        assert strip_whitespace_lines("a\n   \n\t\nb  ") == "a\n\n\nb  "

    def test_normalize_text(self):
        assert normalize_text("a\r\n  \nb\n\n") == "a\n\nb"
        assert normalize_text("a\n  \nb\n", strip_whitespace=False) == "a\n  \nb"


class TestTrimLayout:
    """Layout trimming of indented triple-quoted templates"""

    def test_non_heredoc_segments_untouched(self):
        segments = ("A\n  ", "\n  tail\n  ")
        assert trim_layout(segments) == list(segments)

    def test_single_segment_heredoc(self):
        text = "\n    line one\n      line two\n    "
        assert trim_layout([text]) == ["line one\n  line two"]

    def test_trailing_newline_without_padding(self):
        assert trim_layout(["\n    abc\n"]) == ["abc"]

    def test_placeholder_lines_count_for_common_prefix(self):
        segments = ["\n        class ", "\n        {\n            ", "\n        }\n        "]
        assert trim_layout(segments) == ["class ", "\n{\n    ", "\n}"]

    def test_placeholder_continuation_is_not_a_line_start(self):
        # "  rest" follows a placeholder on the same line and keeps its spaces
        segments = ["\n    a ", "  rest\n    b\n    "]
        assert trim_layout(segments) == ["a ", "  rest\nb"]

    def test_blank_lines_shorter_than_prefix_become_empty(self):
        text = "\n        first\n  \n        second\n        "
        assert trim_layout([text]) == ["first\n\nsecond"]

    def test_blank_lines_keep_whitespace_beyond_prefix(self):
        text = "\n    first\n      \n    second\n    "
        assert trim_layout([text]) == ["first\n  \nsecond"]

    def test_mixed_tabs_and_spaces_use_common_prefix(self):
        text = "\n\t  one\n\t    two\n\t  "
        assert trim_layout([text]) == ["one\n  two"]

    def test_last_segment_without_newline_is_kept(self):
        segments = ["\n    value: ", ";"]
        assert trim_layout(segments) == ["value: ", ";"]
