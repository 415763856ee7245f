from .builder import t
from .context import RenderContext
from .indentation import IndentationTracker
from .registry import (
    TEMPLATE_REGISTRY,
    StringTemplate,
    TemplateFactory,
    TemplateRegistry,
    as_template_function,
    add_named_template,
    get_named_template,
    register_template,
)
from .renderer import TemplateRenderer, render
from .resolver import ValueResolver
from .values import (
    EMPTY,
    Deferred,
    Empty,
    NestedTemplate,
    PlaceholderValue,
    Scalar,
    Sequence,
    Template,
    as_value,
)

__all__ = [
    # Data model
    "Template",
    "PlaceholderValue",
    "Scalar",
    "NestedTemplate",
    "Sequence",
    "Empty",
    "Deferred",
    "EMPTY",
    "as_value",
    "t",
    # Engine
    "IndentationTracker",
    "RenderContext",
    "ValueResolver",
    "TemplateRenderer",
    "render",
    # Registry
    "StringTemplate",
    "TemplateFactory",
    "TemplateRegistry",
    "TEMPLATE_REGISTRY",
    "as_template_function",
    "register_template",
    "add_named_template",
    "get_named_template",
]
