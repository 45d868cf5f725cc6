"""
activity-template CLI.

Command-line interface for rendering the Custom Activity template outside the IDE.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .core.config import get_config
from .core.exceptions import ActivityTemplateError
from .core.logging import setup_logging
from .models.artifacts import ArtifactKind, GenerationPlan
from .naming import activity_name_from_layout, layout_name_from_activity
from .wizard import ACTIVITY_TEMPLATE, WizardState

app = typer.Typer(
    name="activity-template",
    help="Generate a new Android activity from the Custom Activity template",
    add_completion=False,
)

console = Console()

MANIFEST_FRAGMENT_NAME = "AndroidManifest.fragment.xml"

DEFAULT_ACTIVITY_NAME = ACTIVITY_TEMPLATE.get_parameter("activity_name").default
DEFAULT_GENERATE_LAYOUT = ACTIVITY_TEMPLATE.get_parameter("generate_layout").default
DEFAULT_IS_LAUNCHER = ACTIVITY_TEMPLATE.get_parameter("is_launcher").default


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        console.print(f"activity-template v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """activity-template: Custom Activity wizard template."""
    pass


def _build_plan(
    activity_name: Optional[str],
    package_name: str,
    generate_layout: bool,
    layout_name: Optional[str],
    is_launcher: bool,
    creation_date: Optional[str],
) -> GenerationPlan:
    """Resolve CLI options into a plan, exiting on invalid input.

    Names are resolved the way the wizard does: an omitted activity or layout
    name is suggested from the one that was given.
    """
    from .services.generation import ActivityTemplateService, ModuleLayout, format_creation_date

    config = get_config()
    setup_logging(config)

    state = WizardState(package_name=package_name, generate_layout=generate_layout, is_launcher=is_launcher)
    if activity_name is not None:
        state.set_activity_name(activity_name)
    if layout_name is not None:
        state.set_layout_name(layout_name)

    try:
        request = state.to_request(creation_date or format_creation_date(date.today()))
    except ActivityTemplateError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    service = ActivityTemplateService(config.render, ModuleLayout.from_config(config.module))
    result = service.generate(request)
    if not result.success:
        console.print(f"[red]Generation failed: {escape(result.error or '')}[/red]")
        raise typer.Exit(1)
    return result.data


@app.command()
def render(
    activity_name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help=f"Activity class name (default: derived from the layout name, else {DEFAULT_ACTIVITY_NAME})",
    ),
    package_name: str = typer.Option(..., "--package", "-p", help="Package of the activity"),
    generate_layout: bool = typer.Option(
        DEFAULT_GENERATE_LAYOUT, "--layout/--no-layout", help="Generate a data-binding layout file"
    ),
    layout_name: Optional[str] = typer.Option(
        None, "--layout-name", "-l", help="Layout name (default: derived from the activity name)"
    ),
    is_launcher: bool = typer.Option(DEFAULT_IS_LAUNCHER, "--launcher", help="Add a LAUNCHER intent filter"),
    creation_date: Optional[str] = typer.Option(
        None, "--date", help="Creation date for the source header (default: today)"
    ),
    plain: bool = typer.Option(False, "--plain", help="Print raw text without highlighting"),
) -> None:
    """Print the generated artifacts."""
    plan = _build_plan(activity_name, package_name, generate_layout, layout_name, is_launcher, creation_date)

    for artifact in plan.artifacts:
        if plain:
            typer.echo(f"# {artifact.relative_path}")
            typer.echo(artifact.content)
            continue
        lexer = "kotlin" if artifact.kind == ArtifactKind.SOURCE else "xml"
        console.print(Panel(
            Syntax(artifact.content, lexer),
            title=artifact.relative_path,
            subtitle="merge" if artifact.merge else "save",
            border_style="blue",
        ))


@app.command()
def generate(
    activity_name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help=f"Activity class name (default: derived from the layout name, else {DEFAULT_ACTIVITY_NAME})",
    ),
    package_name: str = typer.Option(..., "--package", "-p", help="Package of the activity"),
    generate_layout: bool = typer.Option(
        DEFAULT_GENERATE_LAYOUT, "--layout/--no-layout", help="Generate a data-binding layout file"
    ),
    layout_name: Optional[str] = typer.Option(
        None, "--layout-name", "-l", help="Layout name (default: derived from the activity name)"
    ),
    is_launcher: bool = typer.Option(DEFAULT_IS_LAUNCHER, "--launcher", help="Add a LAUNCHER intent filter"),
    creation_date: Optional[str] = typer.Option(
        None, "--date", help="Creation date for the source header (default: today)"
    ),
    output_dir: Path = typer.Option(
        Path("."),
        "--output",
        "-o",
        help="Module root to write into",
        file_okay=False,
        resolve_path=True,
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite existing files"),
) -> None:
    """Write the generated artifacts into a module directory.

    The manifest fragment is written next to the module manifest as
    AndroidManifest.fragment.xml for manual merging.
    """
    plan = _build_plan(activity_name, package_name, generate_layout, layout_name, is_launcher, creation_date)

    targets: list[tuple[Path, str]] = []
    for artifact in plan.artifacts:
        target = output_dir / artifact.relative_path
        if artifact.merge:
            target = target.with_name(MANIFEST_FRAGMENT_NAME)
        if target.exists() and not force:
            console.print(f"[red]Refusing to overwrite {target} (use --force)[/red]")
            raise typer.Exit(1)
        targets.append((target, artifact.content))

    for target, content in targets:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    table = Table(title="Generated Files")
    table.add_column("Kind", style="cyan")
    table.add_column("Path")
    for artifact, (target, _) in zip(plan.artifacts, targets):
        table.add_row(artifact.kind.value, str(target))
    console.print(table)

    if plan.files_to_open:
        console.print("\n[bold]Open next:[/bold]")
        for path in plan.files_to_open:
            console.print(f"  • {path}")


@app.command()
def suggest(
    activity_name: Optional[str] = typer.Option(None, "--activity", "-a", help="Activity name"),
    layout_name: Optional[str] = typer.Option(None, "--layout", "-l", help="Layout name"),
) -> None:
    """Show the suggested counterpart of an activity or layout name."""
    if activity_name is None and layout_name is None:
        console.print("[red]Pass --activity or --layout[/red]")
        raise typer.Exit(1)

    table = Table(title="Suggested Names")
    table.add_column("Input", style="cyan")
    table.add_column("Suggestion", style="green")
    if activity_name is not None:
        table.add_row(activity_name, layout_name_from_activity(activity_name))
    if layout_name is not None:
        table.add_row(layout_name, activity_name_from_layout(layout_name))
    console.print(table)


@app.command()
def config() -> None:
    """Show current configuration."""
    cfg = get_config()

    table = Table(title="Current Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Log Level", cfg.log_level)
    table.add_row("App Package", cfg.render.app_package)
    table.add_row("Base Activity", cfg.render.base_activity)
    table.add_row("Author", cfg.render.author)
    table.add_row("Layout Background", cfg.render.layout_background)
    table.add_row("Source Root", cfg.module.source_root)
    table.add_row("Resource Root", cfg.module.resource_root)

    console.print(table)

    console.print("\n[dim]Configure via environment variables:[/dim]")
    console.print("  ACTIVITY_TEMPLATE_LOG_LEVEL, ACTIVITY_TEMPLATE_APP_PACKAGE")
    console.print("  ACTIVITY_TEMPLATE_BASE_ACTIVITY, ACTIVITY_TEMPLATE_AUTHOR")
    console.print("  ACTIVITY_TEMPLATE_LAYOUT_BACKGROUND")


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
