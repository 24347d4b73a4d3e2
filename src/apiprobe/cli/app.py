"""Main CLI application using Typer."""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from apiprobe.version import __version__
from apiprobe.core.config import get_settings, validate_settings
from apiprobe.core.exceptions import ApiProbeError, ConfigurationError
from apiprobe.core.logging import setup_logging
from apiprobe.models import ScanReport

app = typer.Typer(
    name="apiprobe",
    help="apiprobe - heuristic security checks for an HTTP API endpoint",
    no_args_is_help=True,
)

console = Console()

# Exit code when --fail-on matches a finding
FINDINGS_EXIT_CODE = 2


def version_callback(value: bool) -> None:
    if value:
        console.print(f"apiprobe version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """apiprobe - probe an API endpoint for common security weaknesses."""
    setup_logging()


def parse_header_lines(lines: list[str]) -> dict[str, str]:
    """Parse ``Key: Value`` lines; lines missing either part are skipped."""
    headers: dict[str, str] = {}
    for line in lines:
        key, _, value = line.partition(":")
        key, value = key.strip(), value.strip()
        if key and value:
            headers[key] = value
    return headers


def parse_probe_ids(value: str | None) -> list[str]:
    """Split a comma-separated probe list."""
    if not value:
        return []
    return [p.strip().lower() for p in value.split(",") if p.strip()]


@app.command()
def scan(
    url: Annotated[str, typer.Argument(help="Endpoint URL, e.g. https://api.example.com/v1/users")],
    method: Annotated[
        str,
        typer.Option("--method", "-X", help="HTTP method: GET, POST, PUT, DELETE, PATCH"),
    ] = "GET",
    header: Annotated[
        Optional[list[str]],
        typer.Option("--header", "-H", help="Request header 'Key: Value' (repeatable)"),
    ] = None,
    data: Annotated[
        Optional[str],
        typer.Option("--data", "-d", help="JSON request body"),
    ] = None,
    probes: Annotated[
        Optional[str],
        typer.Option(
            "--probes",
            "-p",
            help="Probes: auth-check,sensitive-data,cors-check,security-headers,rate-limit (default: all)",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the JSON report to this file"),
    ] = None,
    format_type: Annotated[
        str,
        typer.Option("--format", help="Output format: table, json"),
    ] = "table",
    show_raw: Annotated[
        bool,
        typer.Option("--raw", help="Show the baseline response body"),
    ] = False,
    fail_on: Annotated[
        str,
        typer.Option(
            "--fail-on",
            help="Exit with code 2 when a finding is 'failed' or 'warning' (or worse); 'never' to disable",
        ),
    ] = "never",
    timeout: Annotated[
        Optional[float],
        typer.Option("--timeout", help="Request timeout in seconds (default: APIPROBE_HTTP_TIMEOUT)"),
    ] = None,
    retries: Annotated[
        Optional[int],
        typer.Option("--retries", help="Connection retries per request (default: APIPROBE_HTTP_RETRIES)"),
    ] = None,
) -> None:
    """
    Scan an API endpoint for common security weaknesses.

    Examples:
        apiprobe scan https://api.example.com/v1/users
        apiprobe scan https://api.example.com/v1/users -H "Authorization: Bearer x"
        apiprobe scan https://api.example.com/v1/items -X POST -d '{"name": "a"}'
        apiprobe scan https://api.example.com/v1/users --probes cors-check,rate-limit
    """
    from apiprobe.models import EndpointSpec
    from apiprobe.orchestration.coordinator import ScanCoordinator

    if fail_on not in ("never", "failed", "warning"):
        console.print(f"[red]Invalid --fail-on value: {escape(fail_on)}[/red]")
        raise typer.Exit(1)

    try:
        endpoint = EndpointSpec(
            url=url,
            method=method,
            headers=parse_header_lines(header or []),
            body=data,
        )
    except PydanticValidationError as e:
        console.print(f"[red]Invalid endpoint: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    try:
        coordinator = ScanCoordinator(timeout=timeout, retries=retries)
    except PydanticValidationError as e:
        console.print(f"[red]Invalid options: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    if format_type != "json":
        console.print(
            Panel(
                f"[bold blue]apiprobe Scan[/bold blue]\n"
                f"Endpoint: [green]{endpoint.method.value} {endpoint.url}[/green]",
                title="Starting Scan",
            )
        )

    try:
        with console.status("[bold green]Scanning...[/bold green]"):
            report = asyncio.run(coordinator.run_scan(endpoint, parse_probe_ids(probes)))
    except ApiProbeError as e:
        console.print(f"[red]Scan failed: {escape(e.message)}[/red]")
        raise typer.Exit(1) from None

    if output:
        from apiprobe.cli.formatters.json_fmt import export_json

        export_json(report, output)
        console.print(f"[green]Report saved to {output}[/green]")
    else:
        _display_report(report, format_type, show_raw)

    if _should_fail(report, fail_on):
        raise typer.Exit(FINDINGS_EXIT_CODE)


def _display_report(report: ScanReport, format_type: str, show_raw: bool) -> None:
    """Display a scan report."""
    from apiprobe.cli.formatters import format_json, format_scan_report

    if format_type == "json":
        format_json(console, report)
    else:
        format_scan_report(console, report, show_raw=show_raw)


def _should_fail(report: ScanReport, fail_on: str) -> bool:
    if fail_on == "failed":
        return report.failed_count > 0
    if fail_on == "warning":
        return report.failed_count > 0 or report.warning_count > 0
    return False


@app.command(name="probes")
def list_probes() -> None:
    """List the available probes."""
    from apiprobe.cli.formatters.table import format_probe_list
    from apiprobe.probes import ProbeRegistry

    format_probe_list(console, ProbeRegistry.list_info())


@app.command()
def config(
    show: Annotated[
        bool,
        typer.Option("--show", "-s", help="Show current configuration"),
    ] = False,
    validate: Annotated[
        bool,
        typer.Option("--validate", help="Validate configuration"),
    ] = False,
) -> None:
    """Manage configuration settings."""
    settings = get_settings()

    if show or not validate:
        table = Table(title="Configuration")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("HTTP Timeout", f"{settings.http_timeout_ms}ms")
        table.add_row("HTTP Retries", str(settings.http_retries))
        table.add_row("Verify TLS", str(settings.verify_tls))
        table.add_row("Follow Redirects", str(settings.follow_redirects))
        table.add_row("API Host", settings.api_host)
        table.add_row("API Port", str(settings.api_port))
        table.add_row("Log Level", settings.log_level)
        table.add_row("Log Format", settings.log_format)

        console.print(table)

    if validate:
        try:
            validate_settings(settings)
        except ConfigurationError as e:
            console.print("[red]Configuration errors:[/red]")
            for error in e.details.get("errors", []):
                console.print(f"  - {escape(error)}")
            raise typer.Exit(1) from None
        console.print("[green]Configuration is valid[/green]")


@app.command()
def serve(
    host: Annotated[
        Optional[str],
        typer.Option("--host", "-h", help="Host to bind to"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="Port to bind to"),
    ] = None,
    reload: Annotated[
        bool,
        typer.Option("--reload", "-r", help="Enable auto-reload for development"),
    ] = False,
) -> None:
    """Start the REST API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(
        Panel(
            f"[bold blue]Starting API Server[/bold blue]\n"
            f"Host: [green]{host}[/green]\n"
            f"Port: [green]{port}[/green]\n"
            f"Docs: [cyan]http://{host}:{port}/docs[/cyan]",
            title="API Server",
        )
    )

    uvicorn.run(
        "apiprobe.api.app:app",
        host=host,
        port=port,
        reload=reload,
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
