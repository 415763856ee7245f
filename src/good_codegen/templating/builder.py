"""Build templates from text with ``{{ name }}`` slots.

Only slot substitution is supported: a slot names a keyword argument,
optionally followed by ``.key``/``.attr`` steps. There are no expressions,
filters or control flow; compose those in Python and pass the result in.
Text that merely looks like braces (``{{ 1 + 1 }}``, ``{{{``) stays literal.
"""

import re
from collections.abc import Mapping
from typing import Any

from good_codegen.errors import MissingPlaceholderValue
from good_codegen.templating.values import Template, as_value

SLOT_PATTERN = re.compile(r"\{\{\s*([A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)\s*\}\}")


def _lookup(path: str, values: Mapping[str, Any]) -> Any:
    root, *steps = path.split(".")
    if root not in values:
        raise MissingPlaceholderValue(path)
    obj = values[root]
    for step in steps:
        if isinstance(obj, Mapping):
            if step not in obj:
                raise MissingPlaceholderValue(path, f"no key {step!r}")
            obj = obj[step]
        else:
            try:
                obj = getattr(obj, step)
            except AttributeError:
                raise MissingPlaceholderValue(
                    path, f"{type(obj).__name__} has no attribute {step!r}"
                ) from None
    return obj


def t(text: str, /, **values: Any) -> Template:
    """Split ``text`` on its slots and fill each slot from ``values``.

    ``t("public class {{ table.name }}", table=table)`` yields a template
    with one placeholder holding ``Scalar(table.name)``. Values may be text,
    numbers, ``None``, templates, iterables of those, or zero-argument
    callables; anything else raises :class:`UnsupportedValueKind`.
    """
    pieces = SLOT_PATTERN.split(text)
    segments = tuple(pieces[0::2])
    placeholders = tuple(as_value(_lookup(path, values)) for path in pieces[1::2])
    return Template(segments=segments, values=placeholders)
