from __future__ import annotations

import logging
from collections import ChainMap
from collections.abc import Callable, Iterator
from typing import Any, Protocol, TypeAlias, runtime_checkable

from good_codegen.errors import TemplateNotFound, UnsupportedValueKind
from good_codegen.templating.values import Template

logger = logging.getLogger(__name__)

TemplateFunction = Callable[..., Template]


@runtime_checkable
class StringTemplate(Protocol):
    """A class whose ``render(model)`` returns a :class:`Template`."""

    def render(self, *models: Any) -> Template: ...


TemplateFactory: TypeAlias = type[StringTemplate] | StringTemplate | Callable[..., Any]


def as_template_function(factory: TemplateFactory) -> TemplateFunction:
    """Normalize anything that can produce templates into ``(*models) -> Template``.

    Accepts a :class:`StringTemplate` class (instantiated without arguments),
    an instance of one, or a plain callable. The returned function checks the
    result: plain ``str`` becomes a literal template, other non-templates
    raise :class:`UnsupportedValueKind`.
    """
    if isinstance(factory, type):
        factory = factory()
    if isinstance(factory, StringTemplate):
        produce = factory.render
    elif callable(factory):
        produce = factory
    else:
        raise TypeError(
            f"{type(factory).__name__} is neither a template class nor a callable"
        )

    def render(*models: Any) -> Template:
        result = produce(*models)
        if isinstance(result, Template):
            return result
        if isinstance(result, str):
            return Template.literal(result)
        raise UnsupportedValueKind(result)

    render.__name__ = getattr(produce, "__name__", "render")
    render.__wrapped__ = produce  # type: ignore[attr-defined]
    return render


class TemplateRegistry:
    """Maps keys to template factories, falling back to a parent registry.

    Local entries shadow the parent's without modifying it::

        local = TemplateRegistry(parent=TEMPLATE_REGISTRY)

        @local.register("poco")
        def poco(table):
            return t("public class {{ table.name }} {}", table=table)

        local.load("poco")(users_table)
    """

    def __init__(self, parent: TemplateRegistry | None = None):
        self.parent = parent
        parent_maps = parent.templates.maps if parent is not None else []
        self._templates: ChainMap[str, TemplateFactory] = ChainMap({}, *parent_maps)

    @property
    def templates(self) -> ChainMap[str, TemplateFactory]:
        return self._templates

    def add_template(
        self, key: str, factory: TemplateFactory, replace: bool = False
    ) -> TemplateFactory:
        local = self._templates.maps[0]
        if key in local:
            if not replace:
                raise ValueError(f"Template {key!r} is already registered")
            logger.warning("Replacing registered template %r", key)
        local[key] = factory
        logger.debug("Registered template %r", key)
        return factory

    def register(
        self, key: str | None = None, *, replace: bool = False
    ) -> Callable[[TemplateFactory], TemplateFactory]:
        """Decorator form of :meth:`add_template`; defaults to ``__name__`` as key."""

        def decorator(factory: TemplateFactory) -> TemplateFactory:
            name = key or getattr(factory, "__name__", None)
            if not name:
                raise ValueError("A key is required for factories without __name__")
            self.add_template(name, factory, replace=replace)
            return factory

        return decorator

    def remove_template(self, key: str) -> None:
        try:
            del self._templates.maps[0][key]
        except KeyError:
            raise TemplateNotFound(key) from None

    def get_template(self, key: str) -> TemplateFactory:
        try:
            return self._templates[key]
        except KeyError:
            raise TemplateNotFound(key) from None

    def load(self, template: str | TemplateFactory) -> TemplateFunction:
        """Look up ``template`` (when given a key) and return its render function."""
        factory = self.get_template(template) if isinstance(template, str) else template
        return as_template_function(factory)

    def list_templates(self) -> list[str]:
        return sorted(self._templates)

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self.list_templates())

    def __len__(self) -> int:
        return len(self._templates)


TEMPLATE_REGISTRY = TemplateRegistry()


def register_template(
    key: str | None = None, *, replace: bool = False
) -> Callable[[TemplateFactory], TemplateFactory]:
    """Register a factory in the global :data:`TEMPLATE_REGISTRY`."""
    return TEMPLATE_REGISTRY.register(key, replace=replace)


def add_named_template(
    key: str, factory: TemplateFactory, replace: bool = False
) -> TemplateFactory:
    return TEMPLATE_REGISTRY.add_template(key, factory, replace=replace)


def get_named_template(key: str) -> TemplateFactory:
    return TEMPLATE_REGISTRY.get_template(key)
