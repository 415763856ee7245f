from typing import Any


class CodegenError(Exception):
    """Base class for every error raised by good_codegen."""


class UnsupportedValueKind(CodegenError, TypeError):
    """A placeholder value is not one of the supported kinds."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"Unsupported placeholder value of type {type(value).__name__!r}: "
            f"{value!r:.80}"
        )


class CyclicTemplateError(CodegenError):
    """A template instance (directly or transitively) embeds itself."""

    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(
            f"Template re-entered while already being rendered "
            f"(cycle found at nesting depth {depth})"
        )


class NestingDepthExceeded(CodegenError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Template nesting exceeded max_nesting_depth={limit}")


class UnknownBuffer(CodegenError, KeyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown output buffer {self.name!r}"


class MissingPlaceholderValue(CodegenError, KeyError):
    """A ``{{ slot }}`` in builder text has no matching value."""

    def __init__(self, name: str, reason: str | None = None):
        self.name = name
        self.reason = reason
        super().__init__(name)

    def __str__(self) -> str:
        message = f"No value for placeholder {{{{ {self.name} }}}}"
        if self.reason:
            message += f": {self.reason}"
        return message


class TemplateNotFound(CodegenError, LookupError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Template {key!r} is not registered")


class GoldenMismatch(CodegenError, AssertionError):
    """Rendered output differs from the expected text."""

    def __init__(self, message: str, diff: str):
        self.diff = diff
        super().__init__(f"{message}\n{diff}" if diff else message)
