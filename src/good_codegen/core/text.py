"""Line-oriented text helpers shared by the renderer and the output buffers.

Whitespace here always means spaces and tabs. Line breaks are ``\\n`` once
text has passed through :func:`normalize_newlines`.
"""

from __future__ import annotations

from collections.abc import Sequence
from os.path import commonprefix

WHITESPACE = " \t"


def normalize_newlines(text: str) -> str:
    if "\r" not in text:
        return text
    return text.replace("\r\n", "\n").replace("\r", "\n")


def is_blank(line: str) -> bool:
    return not line.strip(WHITESPACE)


def leading_whitespace(line: str) -> str:
    return line[: len(line) - len(line.lstrip(WHITESPACE))]


def indent_continuation(text: str, indent: str) -> str:
    """Prefix every line of ``text`` except the first with ``indent``.

    The first line continues whatever line the text is spliced into, so it
    is left alone.
    """
    if not indent or "\n" not in text:
        return text
    first, *rest = text.split("\n")
    return first + "".join(f"\n{indent}{line}" for line in rest)


def strip_whitespace_lines(text: str) -> str:
    """Reduce every whitespace-only line to an empty line."""
    if " " not in text and "\t" not in text:
        return text
    return "\n".join("" if is_blank(line) else line for line in text.split("\n"))


def normalize_text(text: str, strip_whitespace: bool = True) -> str:
    """Canonical form used when comparing generated output with golden text.

    Line endings are unified, whitespace-only lines are emptied (when
    ``strip_whitespace`` is set) and trailing line breaks are dropped.
    """
    text = normalize_newlines(text)
    if strip_whitespace:
        text = strip_whitespace_lines(text)
    return text.rstrip("\n")


def _line_pieces(segments: Sequence[str]):
    """Yield ``(segment_index, piece_index, piece, kind)`` for literal line starts.

    ``kind`` is ``"blank"`` for whitespace-only lines that end inside the
    literal text, ``"text"`` otherwise. A whitespace-only piece followed by a
    placeholder is a ``"text"`` line: the placeholder gives it content.
    """
    last = len(segments) - 1
    for seg_index, segment in enumerate(segments):
        pieces = segment.split("\n")
        for piece_index, piece in enumerate(pieces):
            if piece_index == 0 and seg_index > 0:
                # continues the line of the preceding placeholder
                continue
            ends_in_literal = piece_index < len(pieces) - 1 or seg_index == last
            if ends_in_literal and is_blank(piece):
                yield seg_index, piece_index, piece, "blank"
            else:
                yield seg_index, piece_index, piece, "text"


def trim_layout(segments: Sequence[str]) -> list[str]:
    """Remove source-layout padding from a template's literal segments.

    Applies only when the first literal line is blank, which is how an
    indented triple-quoted template looks::

        '''
            public class {{ name }}
            {
            }
            '''

    In that case the blank first line is dropped, a whitespace-only last
    line is dropped together with the line break before it, and the common
    leading whitespace of the remaining literal lines is removed. Blank
    lines shorter than the common prefix become empty. Segments of any
    other shape are returned unchanged.
    """
    segments = list(segments)
    first_line, newline, rest = segments[0].partition("\n")
    if not newline or not is_blank(first_line):
        return segments
    segments[0] = rest

    head, newline, tail = segments[-1].rpartition("\n")
    if newline and is_blank(tail):
        segments[-1] = head
    elif len(segments) == 1 and not newline and is_blank(tail):
        segments[-1] = ""

    prefix = commonprefix(
        [
            leading_whitespace(piece)
            for _, _, piece, kind in _line_pieces(segments)
            if kind == "text"
        ]
    )
    if not prefix:
        return segments

    split = [segment.split("\n") for segment in segments]
    for seg_index, piece_index, piece, kind in _line_pieces(segments):
        if piece.startswith(prefix):
            split[seg_index][piece_index] = piece[len(prefix) :]
        elif kind == "blank":
            split[seg_index][piece_index] = ""
    return ["\n".join(pieces) for pieces in split]
