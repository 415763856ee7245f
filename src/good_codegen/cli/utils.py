import importlib
import json
import sys
from pathlib import Path
from typing import Any

from good_codegen.templating.registry import (
    TEMPLATE_REGISTRY,
    TemplateRegistry,
    as_template_function,
)
from good_codegen.templating.values import Template


def load_object_from_path(path_str: str) -> Any:
    """
    Load an object from a string path 'module:object'.

    Args:
        path_str: String in format 'module.submodule:variable_name'

    Returns:
        The object found at the path

    Raises:
        ValueError: If path format is incorrect
        ImportError: If module cannot be imported
        AttributeError: If object cannot be found in module
    """
    # Add CWD to sys.path to allow loading local modules if not already there
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    if ":" not in path_str:
        raise ValueError(
            f"Invalid object path format '{path_str}'. Expected 'module:object'."
        )

    module_path, object_name = path_str.split(":", 1)
    module = import_module(module_path)

    obj: Any = module
    for attribute in object_name.split("."):
        try:
            obj = getattr(obj, attribute)
        except AttributeError:
            raise AttributeError(
                f"Module '{module_path}' has no attribute '{object_name}'"
            ) from None
    return obj


def import_module(module_path: str):
    try:
        return importlib.import_module(module_path)
    except ImportError as e:
        raise ImportError(f"Could not import module '{module_path}': {e}") from e


def load_model(source: str) -> Any:
    """Load a model from a JSON file path or a 'module:object' path."""
    path = Path(source)
    if path.suffix == ".json" and path.is_file():
        return json.loads(path.read_text(encoding="utf-8"))
    return load_object_from_path(source)


def resolve_template(
    target: str,
    models: list[Any] | None = None,
    registry: TemplateRegistry | None = None,
) -> Template:
    """
    Produce the Template named by ``target``.

    ``target`` is checked as, in order: a JSON file holding a serialized
    template tree, a registry key, a 'module:object' path to a Template or
    a template-producing callable/class. Models are passed to the callable.
    """
    registry = registry or TEMPLATE_REGISTRY
    models = models or []

    path = Path(target)
    if path.suffix == ".json" and path.is_file():
        return Template.model_validate_json(path.read_text(encoding="utf-8"))

    if target in registry:
        return registry.load(target)(*models)

    if ":" in target:
        obj = load_object_from_path(target)
        if isinstance(obj, Template):
            return obj
        return as_template_function(obj)(*models)

    raise ValueError(
        f"Unknown template '{target}'. Use a registered key, 'module:object' "
        "or a .json template file."
    )
