from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from good_codegen.config import DEFAULT_OPTIONS, RenderOptions
from good_codegen.errors import CyclicTemplateError, NestingDepthExceeded
from good_codegen.templating.indentation import IndentationTracker
from good_codegen.templating.values import Template


@dataclass
class RenderContext:
    """Mutable state of one in-flight render.

    ``stack`` holds the templates currently being expanded, outermost first,
    and is shared by every nested context derived with :meth:`child`. The
    tracker is per template, so each nested template starts from a fresh
    baseline.
    """

    options: RenderOptions = DEFAULT_OPTIONS
    tracker: IndentationTracker = field(default_factory=IndentationTracker)
    stack: list[Template] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self.stack)

    def child(self) -> RenderContext:
        return RenderContext(options=self.options, stack=self.stack)

    @contextmanager
    def entering(self, template: Template) -> Iterator[None]:
        if any(active is template for active in self.stack):
            raise CyclicTemplateError(self.depth)
        if self.depth >= self.options.max_nesting_depth:
            raise NestingDepthExceeded(self.options.max_nesting_depth)
        self.stack.append(template)
        try:
            yield
        finally:
            self.stack.pop()
