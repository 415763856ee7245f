"""Template data model: literal segments interleaved with placeholder values.

A :class:`Template` is inert data. Building one never renders anything; the
tree is walked only when handed to a renderer. Placeholder values form a
closed, tagged set discriminated on ``kind``:

- :class:`Scalar` - plain text
- :class:`NestedTemplate` - a full template spliced in place
- :class:`Sequence` - an ordered list of values, one block per item
- :class:`Empty` - contributes nothing
- :class:`Deferred` - a zero-argument callable evaluated at render time

Everything except :class:`Deferred` round-trips through JSON, so a tree
produced by another tool can be loaded with ``Template.model_validate_json``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    field_validator,
    model_validator,
)

from good_codegen.errors import UnsupportedValueKind


VALUE_KINDS = frozenset({"scalar", "template", "sequence", "empty", "deferred"})


def _known_kinds(items: Any) -> Any:
    """Reject raw (e.g. JSON-loaded) items that are not placeholder values.

    Runs before the discriminated union, so an unknown ``kind`` surfaces as
    :class:`UnsupportedValueKind` like any other unsupported value.
    """
    if isinstance(items, (list, tuple)):
        for item in items:
            if isinstance(item, PLACEHOLDER_TYPES):
                continue
            if not isinstance(item, Mapping) or item.get("kind") not in VALUE_KINDS:
                raise UnsupportedValueKind(item)
    return items


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class Scalar(_Frozen):
    kind: Literal["scalar"] = "scalar"
    text: str


class NestedTemplate(_Frozen):
    kind: Literal["template"] = "template"
    template: Template


class Sequence(_Frozen):
    kind: Literal["sequence"] = "sequence"
    items: tuple[PlaceholderValue, ...] = ()

    _check_items = field_validator("items", mode="before")(_known_kinds)


class Empty(_Frozen):
    kind: Literal["empty"] = "empty"


class Deferred(_Frozen):
    """Value produced lazily by ``factory()`` when the placeholder is rendered."""

    kind: Literal["deferred"] = "deferred"
    factory: Callable[[], Any]


PlaceholderValue = Annotated[
    Scalar | NestedTemplate | Sequence | Empty | Deferred,
    Discriminator("kind"),
]

PLACEHOLDER_TYPES = (Scalar, NestedTemplate, Sequence, Empty, Deferred)

EMPTY = Empty()


class Template(_Frozen):
    """Ordered literal segments and the placeholder values between them.

    ``segments[i]`` precedes ``values[i]``; the last segment follows the last
    value, so there is always exactly one more segment than values.
    """

    segments: tuple[str, ...] = ("",)
    values: tuple[PlaceholderValue, ...] = ()

    _check_values = field_validator("values", mode="before")(_known_kinds)

    @model_validator(mode="after")
    def _check_shape(self) -> Template:
        if len(self.segments) != len(self.values) + 1:
            raise ValueError(
                f"a template needs exactly one more segment than values "
                f"(got {len(self.segments)} segments, {len(self.values)} values)"
            )
        return self

    @classmethod
    def literal(cls, text: str) -> Template:
        return cls(segments=(text,))

    @classmethod
    def from_parts(cls, *parts: Any) -> Template:
        """Build a template from alternating literal strings and values.

        ``Template.from_parts("class ", name, " {}")`` has one placeholder.
        Values go through :func:`as_value`; a trailing value gets an empty
        closing segment.
        """
        segments: list[str] = []
        values: list[Any] = []
        for index, part in enumerate(parts):
            if index % 2 == 0:
                if not isinstance(part, str):
                    raise TypeError(
                        f"part {index} must be literal text, got {type(part).__name__}"
                    )
                segments.append(part)
            else:
                values.append(as_value(part))
        if len(segments) == len(values):
            segments.append("")
        return cls(segments=tuple(segments), values=tuple(values))

    @property
    def placeholders(self) -> int:
        return len(self.values)

    @property
    def is_literal(self) -> bool:
        return not self.values

    def pairs(self) -> Iterable[tuple[str, PlaceholderValue]]:
        """Yield ``(preceding_segment, value)`` for every placeholder."""
        return zip(self.segments, self.values)


NestedTemplate.model_rebuild()
Sequence.model_rebuild()
Template.model_rebuild()


def as_value(obj: Any) -> PlaceholderValue:
    """Convert an application object into a placeholder value.

    Raises :class:`UnsupportedValueKind` for objects outside the supported
    kinds instead of stringifying them.
    """
    match obj:
        case Scalar() | NestedTemplate() | Sequence() | Empty() | Deferred():
            return obj
        case Template():
            return NestedTemplate(template=obj)
        case None:
            return EMPTY
        case str():
            return Scalar(text=obj)
        case bool() | int() | float() | Decimal():
            return Scalar(text=str(obj))
        case bytes() | bytearray() | Mapping() | BaseModel():
            raise UnsupportedValueKind(obj)
        case Iterable():
            return Sequence(items=tuple(as_value(item) for item in obj))
        case _ if callable(obj):
            return Deferred(factory=obj)
        case _:
            raise UnsupportedValueKind(obj)
