from __future__ import annotations

import logging
from collections.abc import Callable

from good_codegen.core.text import indent_continuation, normalize_newlines
from good_codegen.errors import NestingDepthExceeded, UnsupportedValueKind
from good_codegen.templating.context import RenderContext
from good_codegen.templating.values import (
    Deferred,
    Empty,
    NestedTemplate,
    PlaceholderValue,
    Scalar,
    Sequence,
    Template,
    as_value,
)

logger = logging.getLogger(__name__)

NestedRenderer = Callable[[Template, RenderContext], str]


class ValueResolver:
    """Turns one placeholder value into the text spliced at its position.

    Nested templates are handed back to ``render_nested`` with a child
    context, which gives them a fresh indentation baseline but keeps the
    shared template stack used for cycle and depth checks.
    """

    def __init__(self, render_nested: NestedRenderer):
        self._render_nested = render_nested

    def resolve(
        self, value: PlaceholderValue, indent: str, context: RenderContext
    ) -> str:
        """Resolve ``value``; every line after the first is prefixed with ``indent``."""
        return indent_continuation(self.resolve_block(value, context), indent)

    def resolve_lines(
        self, value: PlaceholderValue, indent: str, context: RenderContext
    ) -> list[str]:
        text = self.resolve(value, indent, context)
        return text.split("\n") if text else []

    def resolve_block(self, value: PlaceholderValue, context: RenderContext) -> str:
        """Resolve ``value`` relative to column zero, without any indent.

        Sequences are flattened with an explicit work list, so list nesting
        adds no Python frames; only nested templates recurse.
        """
        blocks: list[str] = []
        pending = [value]
        while pending:
            item = self._unwrap(pending.pop(), context)
            match item:
                case Sequence(items=items):
                    pending.extend(reversed(items))
                    continue
                case Scalar(text=text):
                    block = normalize_newlines(text)
                case NestedTemplate(template=template):
                    block = self._render_nested(template, context.child())
                case Empty():
                    continue
                case _:
                    raise UnsupportedValueKind(item)
            # empty items add neither text nor a separator
            if block:
                blocks.append(block)
        return "\n".join(blocks)

    @staticmethod
    def _unwrap(value: PlaceholderValue, context: RenderContext) -> PlaceholderValue:
        limit = context.options.max_nesting_depth
        hops = 0
        while isinstance(value, Deferred):
            hops += 1
            if hops > limit:
                raise NestingDepthExceeded(limit)
            produced = value.factory()
            logger.debug(
                "Deferred placeholder produced %s", type(produced).__name__
            )
            value = as_value(produced)
        return value
