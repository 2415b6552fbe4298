"""
Command line interface for the app skeleton generator.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import DEFAULT_APP, AppConfig, ConfigError, get_settings, load_config
from .scaffold import FilesystemError, ScaffoldOptions, ScaffoldReport, generate_app, resolve_app_dir
from .scaffold.writer import SUPPORTED_EXTENSIONS
from .template import MalformedTemplate, PageDescriptor, parse_template

console = Console()
app = typer.Typer(help="Generate React Native app skeletons from page templates.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = get_settings().log_level
    level_str = (env_override or level_name or "info").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_file_path(value: Optional[Path]) -> Optional[Path]:
    """Ensure a file path exists and return the absolute path."""
    if value is None:
        return None
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Path must be a file, got directory: {resolved}")
    return resolved


def _validate_extension(value: str) -> str:
    normalized = value.lower().lstrip(".")
    if normalized not in SUPPORTED_EXTENSIONS:
        raise typer.BadParameter(f"Expected one of: {', '.join(SUPPORTED_EXTENSIONS)}")
    return normalized


def _load_app_or_exit(path: Optional[Path]) -> AppConfig:
    if path is None:
        logger.info("No config given; using built-in descriptor for %s", DEFAULT_APP.name)
        return DEFAULT_APP
    try:
        return load_config(path)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _load_pages_or_exit(path: Path) -> List[PageDescriptor]:
    try:
        markup = path.read_text(encoding="utf-8")
    except OSError as exc:
        console.print(f"[bold red]Unable to read template:[/] {exc}")
        raise typer.Exit(code=1) from exc
    try:
        return parse_template(markup)
    except MalformedTemplate as exc:
        console.print(f"[bold red]Malformed template:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _print_pages(pages: List[PageDescriptor], title: str) -> None:
    table = Table(title=title)
    table.add_column("Page")
    table.add_column("Title")
    table.add_column("Components", overflow="fold")
    for page in pages:
        table.add_row(page.name, page.title, ", ".join(page.components) or "-")
    console.print(table)


def _print_scaffold_report(report: ScaffoldReport) -> None:
    table = Table(title="Scaffold Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show rnscaffold version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]rnscaffold[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(
            "[bold yellow]rnscaffold[/] is ready. Run "
            "[cyan]rnscaffold generate --template path/to/pages.html[/] to build an app skeleton.",
        )


@app.command()
def generate(
    template: Path = typer.Option(
        ...,
        "--template",
        "-t",
        help="Path to the page template markup.",
        callback=_resolve_file_path,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the app descriptor TOML (defaults to the built-in MyApp descriptor).",
        callback=_resolve_file_path,
    ),
    output_root: Optional[Path] = typer.Option(
        None,
        "--output-root",
        "-o",
        help="Directory that receives <app name>/ (defaults to RNSCAFFOLD_OUTPUT_ROOT or ./apps).",
    ),
    extension: str = typer.Option(
        "tsx",
        "--extension",
        help="File extension for generated sources (tsx, jsx, js).",
        callback=_validate_extension,
    ),
    with_app_component: bool = typer.Option(
        False,
        "--with-app-component",
        help="Also write a minimal App component for the entry point to import.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Parse the template and show the plan without writing files.",
    ),
) -> None:
    """
    Parse the template and write the app skeleton.
    """
    app_config = _load_app_or_exit(config)
    pages = _load_pages_or_exit(template)
    options = ScaffoldOptions(
        output_root=output_root or get_settings().output_root,
        extension=extension,
        include_app_component=with_app_component,
    )

    _print_pages(pages, title=f"Pages for {app_config.name}")

    if dry_run:
        console.print(
            f"[bold blue]Dry run complete.[/] Would write to {resolve_app_dir(app_config, options)}; "
            "no filesystem changes made."
        )
        return

    try:
        report = generate_app(app_config, pages, options)
    except FilesystemError as exc:
        done = ", ".join(stage.value for stage in exc.completed_stages) or "none"
        console.print(f"[bold red]Generation failed during {exc.stage.value}:[/] {exc}")
        console.print(f"[yellow]Stages already applied (not rolled back): {done}[/]")
        raise typer.Exit(code=1) from exc

    _print_scaffold_report(report)
    if not with_app_component:
        console.print(
            f"[yellow]Note:[/] index.{extension} imports ./App, which is not generated. "
            "Add it yourself or rerun with --with-app-component."
        )
    console.print("[bold green]Scaffold complete.[/]")


@app.command()
def pages(
    template: Path = typer.Option(
        ...,
        "--template",
        "-t",
        help="Path to the page template markup.",
        callback=_resolve_file_path,
    ),
) -> None:
    """
    List the pages and components declared in a template.
    """
    parsed = _load_pages_or_exit(template)
    if not parsed:
        console.print("[yellow]No pages declared in template.[/]")
        return
    _print_pages(parsed, title="Template Pages")


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
