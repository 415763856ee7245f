from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from good_codegen.cli.utils import import_module, load_model, resolve_template
from good_codegen.config import RenderOptions
from good_codegen.errors import CodegenError, GoldenMismatch
from good_codegen.output import OutputBufferManager
from good_codegen.templating.registry import TEMPLATE_REGISTRY
from good_codegen.testing import assert_matches_golden
from good_codegen.utilities.logger import (
    configure_library_logging,
    level_for_verbosity,
)

app = typer.Typer(help="good-codegen: render code templates into files")

console = Console()
err_console = Console(stderr=True)

_LOAD_ERRORS = (CodegenError, ValidationError, ValueError, ImportError, AttributeError)


def _prepare(imports: list[str] | None) -> None:
    for module_path in imports or []:
        import_module(module_path)


def _options(keep_whitespace: bool) -> RenderOptions:
    return RenderOptions(strip_whitespace_on_empty_lines=not keep_whitespace)


def _fail(error: Exception, code: int = 1) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(code)


@app.callback()
def main(
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="Increase log verbosity"
    ),
):
    configure_library_logging(level_for_verbosity(verbose))


@app.command()
def render(
    target: str = typer.Argument(
        ..., help="Registry key, module:object, or a .json template tree"
    ),
    models: list[str] = typer.Option(
        None, "--model", "-m", help="Model passed to the template (module:object or .json)"
    ),
    output: str = typer.Option(
        "output.txt", "--output", "-o", help="Buffer/file name used with --out-dir"
    ),
    out_dir: Path = typer.Option(
        None, "--out-dir", "-d", help="Write the result under this folder"
    ),
    keep_whitespace: bool = typer.Option(
        False, "--keep-whitespace", help="Keep whitespace on empty lines"
    ),
    imports: list[str] = typer.Option(
        None, "--import", "-i", help="Module to import first (registers templates)"
    ),
):
    """
    Render a template and print it, or save it with --out-dir.
    """
    manager = OutputBufferManager(_options(keep_whitespace))
    try:
        _prepare(imports)
        template = resolve_template(target, [load_model(m) for m in models or []])
        manager[output].render(template)
    except _LOAD_ERRORS as e:
        raise _fail(e)

    if out_dir is None:
        typer.echo(manager.get_contents(output))
        return

    for path in manager.save_to_folder(out_dir):
        console.print(f"Wrote [bold]{escape(str(path))}[/bold]")


@app.command()
def check(
    target: str = typer.Argument(
        ..., help="Registry key, module:object, or a .json template tree"
    ),
    golden: Path = typer.Argument(..., help="File holding the expected output"),
    models: list[str] = typer.Option(
        None, "--model", "-m", help="Model passed to the template (module:object or .json)"
    ),
    keep_whitespace: bool = typer.Option(
        False, "--keep-whitespace", help="Keep whitespace on empty lines"
    ),
    imports: list[str] = typer.Option(
        None, "--import", "-i", help="Module to import first (registers templates)"
    ),
):
    """
    Render a template and compare it with a golden file.
    """
    manager = OutputBufferManager(_options(keep_whitespace))
    buffer = manager[golden.name]
    try:
        _prepare(imports)
        buffer.render(resolve_template(target, [load_model(m) for m in models or []]))
        assert_matches_golden(
            buffer, golden, strip_whitespace=not keep_whitespace, update=False
        )
    except GoldenMismatch as e:
        err_console.print(f"[red]Mismatch:[/red] {escape(golden.name)}")
        err_console.print(Syntax(e.diff, "diff", theme="ansi_dark"))
        raise typer.Exit(1)
    except FileNotFoundError as e:
        raise _fail(e, code=2)
    except _LOAD_ERRORS as e:
        raise _fail(e, code=2)

    console.print(f"[green]OK[/green] {escape(golden.name)} matches")


@app.command("list")
def list_templates(
    imports: list[str] = typer.Option(
        None, "--import", "-i", help="Module to import first (registers templates)"
    ),
):
    """
    List registered template keys.
    """
    try:
        _prepare(imports)
    except ImportError as e:
        raise _fail(e)

    table = Table(title="Registered templates")
    table.add_column("Key")
    table.add_column("Factory")
    for key in TEMPLATE_REGISTRY.list_templates():
        factory = TEMPLATE_REGISTRY.get_template(key)
        table.add_row(key, getattr(factory, "__qualname__", type(factory).__name__))
    console.print(table)


if __name__ == "__main__":
    app()
