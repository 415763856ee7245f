"""Named output buffers that collect rendered text, one per generated file."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Self

from good_codegen.config import DEFAULT_OPTIONS, RenderOptions
from good_codegen.core.text import (
    indent_continuation,
    normalize_newlines,
    normalize_text,
    strip_whitespace_lines,
)
from good_codegen.errors import UnknownBuffer
from good_codegen.templating.indentation import IndentationTracker
from good_codegen.templating.registry import (
    TEMPLATE_REGISTRY,
    TemplateFactory,
    TemplateFunction,
    TemplateRegistry,
)
from good_codegen.templating.renderer import TemplateRenderer
from good_codegen.templating.values import Template

logger = logging.getLogger(__name__)


class OutputBuffer:
    """Append-only text accumulator for one logical output file.

    The buffer tracks the line being written, so a template rendered in the
    middle of a line continues at that line's indent. Inside
    :meth:`indented` every new non-empty line is prefixed with one more
    ``indent_unit``; empty lines never receive indentation.

    A buffer is a single-writer resource: concurrent writers must be
    serialized by the caller.
    """

    def __init__(
        self,
        name: str,
        options: RenderOptions | None = None,
        renderer: TemplateRenderer | None = None,
    ):
        self.name = name
        self.options = options or DEFAULT_OPTIONS
        self._renderer = renderer or TemplateRenderer(self.options)
        self._parts: list[str] = []
        self._tracker = IndentationTracker()
        self._level = 0

    @property
    def contents(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    @property
    def level_indent(self) -> str:
        return self.options.indent_unit * self._level

    @property
    def current_column(self) -> int:
        return self._tracker.current_column

    def write(self, text: str) -> Self:
        """Append ``text`` as-is, adding the block indent at line starts."""
        text = normalize_newlines(text)
        prefix = self.level_indent
        if prefix:
            lines = text.split("\n")
            at_start = self._tracker.at_line_start
            for index, line in enumerate(lines):
                if line and (index > 0 or at_start):
                    lines[index] = prefix + line
            text = "\n".join(lines)
        self._append(text)
        return self

    def write_line(self, text: str = "") -> Self:
        return self.write(text + "\n")

    def render(self, template: Any) -> Self:
        """Render ``template`` and splice it at the current position.

        Anything that is not a :class:`Template` is wrapped as a single
        placeholder, so sequences or scalars can be written directly.
        """
        if not isinstance(template, Template):
            template = Template.from_parts("", template, "")
        text = self._renderer.render(template)

        # block indent is re-applied by write(); carry only what the
        # current line adds on top of it
        indent = self._tracker.current_indent
        prefix = self.level_indent
        if prefix and indent.startswith(prefix):
            indent = indent[len(prefix) :]
        text = indent_continuation(text, indent)
        if self.options.strip_whitespace_on_empty_lines:
            text = strip_whitespace_lines(text)
        return self.write(text)

    def load_template(
        self,
        template: str | TemplateFactory,
        registry: TemplateRegistry | None = None,
    ) -> BoundTemplate:
        """Bind a template factory (or registry key) to this buffer.

        ``buffer.load_template(PocoTemplate).render(table)`` renders the
        template produced for ``table`` into the buffer.
        """
        function = (registry or TEMPLATE_REGISTRY).load(template)
        return BoundTemplate(function=function, buffer=self)

    @contextmanager
    def indented(self, levels: int = 1) -> Iterator[Self]:
        self._level += levels
        try:
            yield self
        finally:
            self._level -= levels

    def reset(self) -> None:
        """Drop everything written so far; an open indented() block stays open."""
        self._parts.clear()
        self._tracker.reset()

    def matches(self, expected: str) -> bool:
        """Compare with ``expected`` after normalizing both sides."""
        strip = self.options.strip_whitespace_on_empty_lines
        return normalize_text(self.contents, strip) == normalize_text(expected, strip)

    def _append(self, text: str) -> None:
        if text:
            self._parts.append(text)
            self._tracker.feed(text)

    def __str__(self) -> str:
        return self.contents

    def __repr__(self) -> str:
        return f"OutputBuffer({self.name!r}, chars={len(self.contents)})"


@dataclass(frozen=True)
class BoundTemplate:
    """A template function paired with the buffer it renders into."""

    function: TemplateFunction
    buffer: OutputBuffer

    def render(self, *models: Any) -> OutputBuffer:
        return self.buffer.render(self.function(*models))


class OutputBufferManager:
    """Owns the named output buffers of one generation session.

    Buffers are created on first reference through :meth:`buffer` (or
    ``manager[name]``). The name-based operations :meth:`write`,
    :meth:`render`, :meth:`get_contents` and :meth:`reset` require an
    existing buffer and raise :class:`UnknownBuffer` otherwise; which buffer
    a render targets is always the caller's choice.

    Example::

        manager = OutputBufferManager()
        manager["Users.cs"].load_template("poco").render(users)
        manager.save_to_folder("generated")
    """

    def __init__(self, options: RenderOptions | None = None):
        self.options = options or DEFAULT_OPTIONS
        self._renderer = TemplateRenderer(self.options)
        self._buffers: dict[str, OutputBuffer] = {}

    def buffer(self, name: str) -> OutputBuffer:
        if name not in self._buffers:
            logger.debug("Creating output buffer %r", name)
            self._buffers[name] = OutputBuffer(
                name, options=self.options, renderer=self._renderer
            )
        return self._buffers[name]

    def __getitem__(self, name: str) -> OutputBuffer:
        return self.buffer(name)

    def _require(self, name: str) -> OutputBuffer:
        try:
            return self._buffers[name]
        except KeyError:
            raise UnknownBuffer(name) from None

    def write(self, name: str, text: str) -> OutputBuffer:
        return self._require(name).write(text)

    def render(self, name: str, template: Any) -> OutputBuffer:
        return self._require(name).render(template)

    def get_contents(self, name: str) -> str:
        return self._require(name).contents

    def reset(self, name: str) -> None:
        self._require(name).reset()

    def discard(self, name: str) -> None:
        self._buffers.pop(name, None)

    def contents_equal(self, name: str, expected: str) -> bool:
        return self._require(name).matches(expected)

    def load_template(
        self,
        template: str | TemplateFactory,
        name: str,
        registry: TemplateRegistry | None = None,
    ) -> BoundTemplate:
        return self.buffer(name).load_template(template, registry=registry)

    @property
    def names(self) -> list[str]:
        return list(self._buffers)

    def __contains__(self, name: object) -> bool:
        return name in self._buffers

    def __iter__(self) -> Iterator[OutputBuffer]:
        return iter(list(self._buffers.values()))

    def __len__(self) -> int:
        return len(self._buffers)

    def save_to_folder(self, folder: str | Path) -> list[Path]:
        """Write every buffer to ``folder / name`` and return the written paths."""
        folder = Path(folder)
        written: list[Path] = []
        for output in self:
            path = folder / output.name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(output.contents, encoding="utf-8")
            written.append(path)
        logger.info("Saved %d output file(s) to %s", len(written), folder)
        return written
