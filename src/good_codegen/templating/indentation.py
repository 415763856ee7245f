from good_codegen.core.text import leading_whitespace


class IndentationTracker:
    """Follows the column and the indent of the line currently being emitted.

    The indent of a line is its leading whitespace: it grows while the line
    holds nothing but spaces/tabs and is frozen by the first other character.
    State is relative to whatever baseline the owner chose; nested templates
    get a fresh tracker and are re-indented by their caller.
    """

    __slots__ = ("_column", "_indent", "_line_blank")

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._column = 0
        self._indent = ""
        self._line_blank = True

    @property
    def current_column(self) -> int:
        """Characters emitted since the last line break."""
        return self._column

    @property
    def current_indent(self) -> str:
        return self._indent

    @property
    def at_line_start(self) -> bool:
        return self._column == 0

    @property
    def line_is_blank(self) -> bool:
        """True while the current line holds nothing but spaces/tabs."""
        return self._line_blank

    def feed(self, text: str) -> None:
        if not text:
            return
        _, newline, tail = text.rpartition("\n")
        if newline:
            self._column = 0
            self._indent = ""
            self._line_blank = True
        if self._line_blank:
            indent = leading_whitespace(tail)
            self._indent += indent
            if len(indent) < len(tail):
                self._line_blank = False
        self._column += len(tail)

    def indent_for(self, preceding_segment: str, first: bool = False) -> str:
        """Indent for continuation lines of a value that follows ``preceding_segment``.

        With a line break in the segment, the indent is the leading
        whitespace after the last break. Without one, the first segment of a
        template is measured from its own start; any later segment continues
        a line that began earlier, so the tracked indent applies.
        """
        _, newline, tail = preceding_segment.rpartition("\n")
        if newline or first:
            return leading_whitespace(tail)
        return self._indent

