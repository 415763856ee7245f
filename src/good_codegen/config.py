from pydantic import BaseModel, ConfigDict, Field, field_validator


class RenderOptions(BaseModel):
    """Options threaded explicitly into every render call.

    Instances are frozen; derive variations with ``model_copy(update=...)``::

        options = DEFAULT_OPTIONS.model_copy(
            update={"strip_whitespace_on_empty_lines": False}
        )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strip_whitespace_on_empty_lines: bool = Field(
        default=True,
        description="Reduce lines holding only spaces/tabs to empty lines.",
    )
    indent_unit: str = Field(
        default="    ",
        description="Whitespace added per level by OutputBuffer.indented().",
    )
    max_nesting_depth: int = Field(
        default=256,
        ge=1,
        description="Ceiling on nested template depth for a single render.",
    )
    trim_template_padding: bool = Field(
        default=True,
        description=(
            "Drop the blank first line, whitespace-only last line and common "
            "left padding of templates laid out as indented triple-quoted text."
        ),
    )

    @field_validator("indent_unit")
    @classmethod
    def _validate_indent_unit(cls, value: str) -> str:
        if not value or value.strip(" \t"):
            raise ValueError("indent_unit must be a non-empty run of spaces/tabs")
        return value


DEFAULT_OPTIONS = RenderOptions()
