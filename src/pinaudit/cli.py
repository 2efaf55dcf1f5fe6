"""pinaudit CLI - Find dependency pins in Dart packages."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pinaudit import __version__
from pinaudit.analysis.pins import inspect_version_for_pins
from pinaudit.audit import audit_package, report_results
from pinaudit.config import allow_pins, get_excludes, get_ignored_packages, load_config
from pinaudit.errors import ConstraintParseError, PinauditError
from pinaudit.exclusion import compile_globs, list_files_with_extension
from pinaudit.log import configure_logging
from pinaudit.manifest import load_manifest
from pinaudit.models.results import AuditResults
from pinaudit.output.json_writer import write_results
from pinaudit.output.tree import build_pins_tree, display_tree
from pinaudit.paths import get_manifest_path

app = typer.Typer(
    name="pinaudit",
    help="Find overly restrictive dependency version constraints in Dart packages",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"pinaudit version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Find overly restrictive dependency version constraints."""


@app.command()
def check(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the package to audit",
    ),
    ignore: Optional[list[str]] = typer.Option(
        None,
        "--ignore",
        "-i",
        help="Package to skip during pin checks (repeatable)",
    ),
    exclude: Optional[list[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Glob of files to skip when scanning (repeatable)",
    ),
    allow_pins_flag: bool = typer.Option(
        False,
        "--allow-pins",
        help="Report pins without failing",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Path for results JSON output",
    ),
    tree: bool = typer.Option(
        False,
        "--tree",
        "-t",
        help="Show pins as a tree grouped by reason",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging",
    ),
) -> None:
    """Check a package's dependencies for pins."""
    configure_logging(verbose)
    path = path.resolve()

    try:
        config = load_config(path)
        manifest = load_manifest(get_manifest_path(path))
        ignored = get_ignored_packages(config) + list(ignore or [])
        excludes = compile_globs(get_excludes(config) + list(exclude or []))
        pins_allowed = allow_pins_flag or allow_pins(config)
        results = audit_package(path, manifest, config, ignored, excludes)
    except PinauditError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(2)

    report_results(results)

    if output is not None:
        write_results(results, output)
        console.print(f"\n[green]Results saved to:[/] {output}")

    if tree:
        display_tree(build_pins_tree(results))
    else:
        _display_summary(results)

    if results.has_pins and not pins_allowed:
        raise typer.Exit(1)


@app.command()
def files(
    path: Path = typer.Argument(
        Path("."),
        help="Directory to scan",
    ),
    ext: str = typer.Option(
        "dart",
        "--ext",
        "-e",
        help="File extension to list",
    ),
    exclude: Optional[list[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Glob of files to skip, relative to PATH (repeatable)",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on unreadable directories instead of skipping them",
    ),
) -> None:
    """List source files with an extension, skipping hidden directories."""
    globs = compile_globs(exclude or [])
    try:
        found = list_files_with_extension(path, globs, ext, strict=strict, base=path)
    except PinauditError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(2)

    for file_path in sorted(found):
        typer.echo(file_path.relative_to(path).as_posix())


@app.command()
def classify(
    constraints: list[str] = typer.Argument(
        ...,
        help="Version constraints to classify, e.g. '>=1.0.0 <1.2.4'",
    ),
) -> None:
    """Classify version constraints without reading a manifest."""
    failed = False
    for constraint in constraints:
        try:
            evaluation = inspect_version_for_pins(constraint)
        except ConstraintParseError as e:
            console.print(f"[red]{escape(constraint)}[/]: {escape(e.reason)}", highlight=False)
            failed = True
            continue

        color = "yellow" if evaluation.is_pin else "green"
        console.print(
            f"[{color}]{escape(constraint)}[/] {evaluation.name}: {evaluation.message}",
            highlight=False,
        )

    if failed:
        raise typer.Exit(2)


def _display_summary(results: AuditResults) -> None:
    """Display audit summary."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Pinned dependencies", str(len(results.infractions)))
    table.add_row("Unparseable constraints", str(len(results.unparseable)))
    if results.analysis_options_include:
        table.add_row("Analysis options from", escape(results.analysis_options_include))

    table.add_row("", "")
    table.add_row("Files scanned:", "")
    for extension, count in sorted(results.files_scanned.items()):
        table.add_row(f"  .{extension}", str(count))

    console.print(Panel(table, title=f"[bold]{escape(results.package)}[/]", border_style="blue"))


if __name__ == "__main__":
    app()
