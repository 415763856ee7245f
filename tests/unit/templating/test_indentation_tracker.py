from good_codegen.templating import IndentationTracker


class TestIndentationTracker:
    def test_starts_at_column_zero(self):
        tracker = IndentationTracker()
        assert tracker.current_column == 0
        assert tracker.current_indent == ""
        assert tracker.at_line_start

    def test_column_counts_characters_since_last_newline(self):
        tracker = IndentationTracker()
        tracker.feed("abc\n  de")
        assert tracker.current_column == 4
        tracker.feed("f")
        assert tracker.current_column == 5

    def test_indent_is_leading_whitespace_of_current_line(self):
        tracker = IndentationTracker()
        tracker.feed("class A:\n    x = ")
        assert tracker.current_indent == "    "

    def test_indent_grows_across_whitespace_only_writes(self):
        tracker = IndentationTracker()
        tracker.feed("\n\t")
        tracker.feed("  ")
        assert tracker.current_indent == "\t  "
        tracker.feed("code   ")
        assert tracker.current_indent == "\t  "
        assert tracker.current_column == 10

    def test_newline_resets_indent(self):
        tracker = IndentationTracker()
        tracker.feed("    a\n")
        assert tracker.current_indent == ""
        assert tracker.at_line_start

    def test_reset(self):
        tracker = IndentationTracker()
        tracker.feed("  x")
        tracker.reset()
        assert tracker.current_column == 0
        assert tracker.current_indent == ""


class TestIndentFor:
    """Indent applied to continuation lines of an expanded value"""

    def test_uses_whitespace_after_last_line_break(self):
        tracker = IndentationTracker()
        assert tracker.indent_for("A\n  ") == "  "
        assert tracker.indent_for("A\n    return ") == "    "

    def test_first_segment_measured_from_start(self):
        tracker = IndentationTracker()
        assert tracker.indent_for("   ", first=True) == "   "

    def test_later_segment_without_break_uses_tracked_indent(self):
        tracker = IndentationTracker()
        tracker.feed("\n      call(")
        assert tracker.indent_for(", ") == "      "

    def test_tabs_and_mixed_indents_are_copied_verbatim(self):
        tracker = IndentationTracker()
        assert tracker.indent_for("x\n\t") == "\t"
        assert tracker.indent_for("x\n \t ") == " \t "


class TestLineIsBlank:
    def test_blank_until_text_appears(self):
        tracker = IndentationTracker()
        assert tracker.line_is_blank
        tracker.feed("  \t")
        assert tracker.line_is_blank
        tracker.feed("x")
        assert not tracker.line_is_blank

    def test_new_line_starts_blank(self):
        tracker = IndentationTracker()
        tracker.feed("code\n    ")
        assert tracker.line_is_blank
