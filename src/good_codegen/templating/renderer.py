from __future__ import annotations

import logging

from good_codegen.config import DEFAULT_OPTIONS, RenderOptions
from good_codegen.core.text import (
    WHITESPACE,
    indent_continuation,
    normalize_newlines,
    strip_whitespace_lines,
    trim_layout,
)
from good_codegen.errors import NestingDepthExceeded, UnsupportedValueKind
from good_codegen.templating.context import RenderContext
from good_codegen.templating.resolver import ValueResolver
from good_codegen.templating.values import Template

logger = logging.getLogger(__name__)


class TemplateRenderer:
    """Expands a template tree into text.

    Literal segments are emitted verbatim. Each placeholder is resolved and
    spliced at the current position: its first line continues the current
    line, later lines take the indent of the line holding the placeholder.
    Nested templates are rendered independently and spliced the same way.

    Normalization happens once per top-level :meth:`render`:

    - templates laid out as indented triple-quoted text lose their blank
      first line, whitespace-only last line and common left padding
      (``trim_template_padding``); substituted text is never trimmed
    - whitespace-only lines become empty (``strip_whitespace_on_empty_lines``)

    Literal line breaks are normalized to ``\\n``. A placeholder that resolves
    to nothing and is alone on its line removes that line, so an empty
    collection leaves no blank line behind.

    A renderer holds no per-render state, so one instance can serve several
    threads as long as each render targets its own output.

    Example::

        renderer = TemplateRenderer()
        renderer.render(t("class {{ name }}:\\n    {{ body }}", name="A", body=lines))
    """

    def __init__(self, options: RenderOptions | None = None):
        self.options = options or DEFAULT_OPTIONS
        self._resolver = ValueResolver(self._render_template)

    @property
    def resolver(self) -> ValueResolver:
        return self._resolver

    def render(self, template: Template) -> str:
        if not isinstance(template, Template):
            raise UnsupportedValueKind(template)

        logger.debug("Rendering template with %d placeholders", template.placeholders)
        try:
            text = self._render_template(template, RenderContext(options=self.options))
        except RecursionError as e:
            # max_nesting_depth set above what the interpreter stack allows
            raise NestingDepthExceeded(self.options.max_nesting_depth) from e
        if self.options.strip_whitespace_on_empty_lines:
            text = strip_whitespace_lines(text)
        return text

    def _render_template(self, template: Template, context: RenderContext) -> str:
        with context.entering(template):
            segments = [normalize_newlines(segment) for segment in template.segments]
            if self.options.trim_template_padding:
                segments = trim_layout(segments)
            tracker = context.tracker
            parts: list[str] = []

            for index, value in enumerate(template.values):
                segment = segments[index]
                parts.append(segment)
                tracker.feed(segment)

                indent = tracker.indent_for(segment, first=index == 0)
                expanded = indent_continuation(
                    self._resolver.resolve_block(value, context), indent
                )
                if not expanded and tracker.line_is_blank:
                    following = segments[index + 1].lstrip(WHITESPACE)
                    if following.startswith("\n"):
                        # an empty value alone on its line removes the line
                        _drop_blank_tail(parts)
                        segments[index + 1] = following[1:]
                        tracker.feed("\n")
                        continue
                parts.append(expanded)
                tracker.feed(expanded)

            parts.append(segments[-1])
            return "".join(parts)


def _drop_blank_tail(parts: list[str]) -> None:
    """Remove the spaces/tabs emitted since the last line break."""
    while parts and not parts[-1].strip(WHITESPACE):
        parts.pop()
    if parts:
        parts[-1] = parts[-1].rstrip(WHITESPACE)


def render(template: Template, options: RenderOptions | None = None) -> str:
    """Render ``template`` to text with a throwaway :class:`TemplateRenderer`."""
    return TemplateRenderer(options).render(template)
