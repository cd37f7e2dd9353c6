"""CLI interface for the release tools."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import get_settings
from .exceptions import CommandFailedError, ManifestError
from .executor import get_executor
from .logging_config import get_logger, setup_logging
from .release import run_release
from .version_guard import EXIT_MALFORMED, GuardResult, Runtime, check_version

logger = get_logger("release_tools.cli")

app = typer.Typer(
    name="release-tools",
    help="Release APK installer and runtime version guard",
)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _init_logging() -> None:
    settings = get_settings()
    setup_logging(
        level=settings.log_level,
        log_to_file=settings.log_to_file,
        log_dir=settings.log_dir,
    )


def _print_guard_result(result: GuardResult) -> None:
    for message in result.messages:
        target = err_console if message.level == "error" else console
        target.print(message.text, markup=False, highlight=False)


@app.command()
def install():
    """Bump, push and/or install the release APK according to the environment."""
    _init_logging()
    settings = get_settings()

    try:
        report = run_release(settings, get_executor())
    except CommandFailedError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=e.return_code)
    except ManifestError as e:
        err_console.print(f"[red]✗[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=EXIT_MALFORMED)

    console.print(f"[bold]Artifact:[/bold] {escape(report.artifact.artifact_name)}", highlight=False)

    if not settings.wants_devices:
        console.print("[dim]Nothing to do: set HAS_INSTALL_APK or HAS_INSTALL.[/dim]")
        return

    if not report.devices:
        console.print("[yellow]No matching devices connected.[/yellow]")
        return

    table = Table(title="Devices")
    table.add_column("Device")
    table.add_column("Pushed")
    table.add_column("Installed")
    for device_id in report.devices:
        table.add_row(
            device_id,
            "✓" if device_id in report.pushed else "-",
            "✓" if device_id in report.installed else "-",
        )
    console.print(table)


@app.command("check-version")
def check_version_command(
    pin_file: Path | None = typer.Option(
        None,
        "--pin-file",
        help="Pinned version file (default: PIN_FILE or .node-version)",
    ),
    runtime: Runtime = typer.Option(
        Runtime.NODE,
        "--runtime",
        help="Runtime whose installed version is checked",
    ),
):
    """Check the installed runtime's major version against the pin file."""
    _init_logging()
    settings = get_settings()

    result = check_version(
        pin_file or settings.pin_file,
        runtime,
        get_executor(),
        node_bin=settings.node_bin,
    )
    _print_guard_result(result)
    raise typer.Exit(code=result.exit_code)


def check_node_version() -> None:
    """Entry point for the check-node-version script."""
    _init_logging()
    settings = get_settings()
    result = check_version(settings.pin_file, Runtime.NODE, get_executor(), settings.node_bin)
    _print_guard_result(result)
    raise SystemExit(result.exit_code)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
