"""good_codegen - code generation from composable, indentation-aware templates."""

import logging

from .config import DEFAULT_OPTIONS, RenderOptions
from .errors import (
    CodegenError,
    CyclicTemplateError,
    GoldenMismatch,
    MissingPlaceholderValue,
    NestingDepthExceeded,
    TemplateNotFound,
    UnknownBuffer,
    UnsupportedValueKind,
)
from .output import BoundTemplate, OutputBuffer, OutputBufferManager
from .templating import (
    EMPTY,
    TEMPLATE_REGISTRY,
    Deferred,
    Empty,
    NestedTemplate,
    Scalar,
    Sequence,
    StringTemplate,
    Template,
    TemplateRegistry,
    TemplateRenderer,
    as_value,
    register_template,
    render,
    t,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Configuration
    "RenderOptions",
    "DEFAULT_OPTIONS",
    # Templates
    "Template",
    "Scalar",
    "NestedTemplate",
    "Sequence",
    "Empty",
    "Deferred",
    "EMPTY",
    "as_value",
    "t",
    "TemplateRenderer",
    "render",
    "StringTemplate",
    "TemplateRegistry",
    "TEMPLATE_REGISTRY",
    "register_template",
    # Output
    "OutputBuffer",
    "OutputBufferManager",
    "BoundTemplate",
    # Errors
    "CodegenError",
    "UnsupportedValueKind",
    "CyclicTemplateError",
    "NestingDepthExceeded",
    "UnknownBuffer",
    "MissingPlaceholderValue",
    "TemplateNotFound",
    "GoldenMismatch",
]
