"""CLI interface for quack using Typer framework."""

import json as jsonlib
import logging
import sys
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from quack import __description__, __version__
from quack.config import LogLevel, OutputFormat, load_config
from quack.faults import Fault, Severity, fault_distribution, filter_by_severity
from quack.messages import MESSAGES
from quack.resources import ReferenceFetchError, ReferenceResolver, fetch_document
from quack.validation import ValidationContext, documents_faults
from quack.validation.dispatch import SHAPES

app = typer.Typer(
    name="quack",
    help=__description__,
    add_completion=False,
    rich_markup_mode="rich"
)

console = Console()

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARN.value: logging.WARNING,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}

_SEVERITY_COLOURS = {
    Severity.INFO: "dim",
    Severity.MINOR: "green",
    Severity.SHOULD: "yellow",
    Severity.MUST: "red",
    Severity.CRITICAL: "bold red",
}

EXIT_INPUT_ERROR = 2


def version_callback(value: bool) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"quack version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, help="Show version and exit")
    ] = False,
) -> None:
    """quack - if it walks like a duck, and it quacks like a duck..."""
    pass


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=_LOG_LEVELS[level],
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_source(source: str | None, timeout: float) -> Any:
    """Read and parse the JSON at `source`: a path, a URI, or stdin."""
    if source is None or source == "-":
        return jsonlib.loads(sys.stdin.read())
    if source.startswith(("http://", "https://", "file:")):
        return fetch_document(source, timeout)
    with open(Path(source), encoding="utf-8") as f:
        return jsonlib.load(f)


def _parse_severity(value: str | None, option: str) -> Severity | None:
    if value is None:
        return None
    try:
        return Severity(value)
    except ValueError:
        valid = ", ".join(s.value for s in Severity)
        console.print(f"[red]Error:[/red] Invalid {option} '{value}'. Must be one of: {valid}")
        raise typer.Exit(EXIT_INPUT_ERROR)


def _output_table(reports: list[list[Fault]], source_name: str) -> None:
    for index, found in enumerate(reports):
        title = source_name if len(reports) == 1 else f"{source_name} [{index}]"
        if not found:
            console.print(f"[green]No faults found in {title}[/green]")
            continue

        table = Table(title=f"Validation report for {title}")
        table.add_column("Severity", style="white")
        table.add_column("Fault", style="cyan")
        table.add_column("Narrative", style="white")
        for fault in found:
            colour = _SEVERITY_COLOURS[fault.severity]
            table.add_row(f"[{colour}]{fault.severity.value.upper()}[/{colour}]", fault.fault, fault.narrative)
        console.print(table)

        summary = ", ".join(f"{code}: {count}" for code, count in sorted(fault_distribution(found).items()))
        console.print(f"Found {len(found)} faults ({summary})")


def _output_json(reports: list[list[Fault]]) -> None:
    records = [[fault.to_dict() for fault in faults] for faults in reports]
    payload = records[0] if len(records) == 1 else records
    typer.echo(jsonlib.dumps(payload, indent=2))


@app.command()
def validate(
    source: Annotated[
        Optional[str],
        typer.Argument(help="File path or URI of the document to validate (default: standard input)")
    ] = None,
    severity: Annotated[
        Optional[str],
        typer.Option("--severity", "-s", help="Minimum severity of faults to report: info, minor, should, must, critical")
    ] = None,
    format: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: table, json (default: table)")
    ] = None,
    shape: Annotated[
        Optional[str],
        typer.Option("--as", help="Validate as: object, actor, activity, link, collection (default: from type)")
    ] = None,
    reify_refs: Annotated[
        Optional[bool],
        typer.Option("--reify-refs/--no-reify-refs", help="Fetch and validate referenced objects")
    ] = None,
    reject_severity: Annotated[
        Optional[str],
        typer.Option("--reject-severity", help="Severity at or above which the document is rejected")
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Configuration file path (default: search for .quack.json)")
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Logging level: error, warn, info, debug")
    ] = None,
) -> None:
    """Validate an ActivityStreams document and report its faults."""
    try:
        quack_config = load_config(config)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(EXIT_INPUT_ERROR)

    level = log_level or quack_config.logging.level
    valid_levels = [lvl.value for lvl in LogLevel]
    if level not in valid_levels:
        console.print(f"[red]Error:[/red] Invalid log level '{level}'. Must be one of: {', '.join(valid_levels)}")
        raise typer.Exit(EXIT_INPUT_ERROR)
    _configure_logging(level)

    output_format = format or quack_config.output.format.value
    valid_formats = [f.value for f in OutputFormat]
    if output_format not in valid_formats:
        console.print(f"[red]Error:[/red] Invalid format '{output_format}'. Must be one of: {', '.join(valid_formats)}")
        raise typer.Exit(EXIT_INPUT_ERROR)

    if shape is not None and shape not in SHAPES:
        console.print(f"[red]Error:[/red] Invalid shape '{shape}'. Must be one of: {', '.join(SHAPES)}")
        raise typer.Exit(EXIT_INPUT_ERROR)

    report_severity = _parse_severity(severity, "severity") or quack_config.output.severity
    overrides = {}
    if reify_refs is not None:
        overrides["reify_refs"] = reify_refs
    parsed_reject = _parse_severity(reject_severity, "reject severity")
    if parsed_reject is not None:
        overrides["reject_severity"] = parsed_reject
    settings = quack_config.validation.model_copy(update=overrides)

    try:
        document = _read_source(source, settings.fetch_timeout)
    except (OSError, ValueError, ReferenceFetchError) as e:
        console.print(f"[red]Error:[/red] Could not read {source or 'standard input'}: {e}")
        raise typer.Exit(EXIT_INPUT_ERROR)

    ctx = ValidationContext(
        settings=settings,
        resolver=ReferenceResolver(timeout=settings.fetch_timeout),
    )
    logger.debug(f"Validating {source or 'standard input'} as {shape or 'declared type'}, reify_refs={settings.reify_refs}")
    results = documents_faults(document, shape, ctx)
    reports = [filter_by_severity(found, report_severity) for found in results]

    if output_format == OutputFormat.JSON.value:
        _output_json(reports)
    else:
        _output_table(reports, source or "standard input")

    rejected = any(filter_by_severity(found, settings.reject_severity) for found in results)
    raise typer.Exit(1 if rejected else 0)


@app.command()
def faults() -> None:
    """List every fault code quack can report, with its narrative."""
    table = Table(title="Fault codes")
    table.add_column("Fault", style="cyan")
    table.add_column("Narrative", style="white")
    for code, narrative in sorted(MESSAGES.items()):
        table.add_row(code, narrative)
    console.print(table)


if __name__ == "__main__":
    app()
