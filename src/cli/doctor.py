"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from cli.ui_components import mask_secret, print_error
from core.config import load_settings
from core.domain.errors import ConfigurationError
from core.services.deploy_pipeline import plan_deployment

app = typer.Typer(no_args_is_help=True, help="Configuration checks (no network calls).")

_console = Console()
_err_console = Console(stderr=True)


@app.command()
def run() -> None:
    """Show the resolved configuration and whether it would pass validation."""

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=exc.exit_code) from exc

    table = Table(title="Dokploy Deploy Doctor")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("DOKPLOY_AUTH_TOKEN", mask_secret(settings.auth_token))
    table.add_row("DOKPLOY_RESOURCE_ID", settings.resource_id or "(unset)")
    table.add_row("DOKPLOY_BASE_URL", settings.base_url or "(unset)")
    table.add_row("DOKPLOY_DEPLOYMENT_TYPE", settings.deployment_type or "(unset -> application)")
    table.add_row("DOKPLOY_HTTP_TIMEOUT_SECONDS", f"{settings.http_timeout_seconds:g}")

    try:
        request, endpoint = plan_deployment(settings.to_deployment_config())
    except ConfigurationError as exc:
        table.add_row("Validation", "FAIL")
        _console.print(table)
        _console.print(f"\n[yellow]Fix:[/yellow] {exc}", soft_wrap=True)
        raise typer.Exit(code=exc.exit_code) from exc

    table.add_row("Validation", "OK")
    table.add_row("Endpoint", f"POST {request.base_url}{endpoint.path}")
    _console.print(table)
