"""Dokploy deploy CLI (Typer).

Resolves configuration (flags over `DOKPLOY_*` settings), hands an explicit
`DeploymentConfig` to the pipeline and maps error kinds to exit codes:
0 success, 1 rejected, 2 configuration, 3 transport.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.http_client import HttpxDispatcher, build_client
from cli import doctor
from cli.ui_components import build_request_table, print_error, print_success
from core.config import load_settings
from core.domain.errors import ConfigurationError, DeployError
from core.services.deploy_pipeline import build_http_request, plan_deployment, trigger_deployment

app = typer.Typer(
    no_args_is_help=True,
    help="Trigger a redeploy of a Dokploy application or compose project.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False, show_time=False)],
        force=True,
    )


@app.command()
def deploy(
    auth_token: str | None = typer.Option(
        None, "--auth-token", help="API token (default: DOKPLOY_AUTH_TOKEN).", show_default=False
    ),
    resource_id: str | None = typer.Option(
        None,
        "--resource-id",
        "--application-id",
        help="Application or compose id (default: DOKPLOY_RESOURCE_ID).",
        show_default=False,
    ),
    base_url: str | None = typer.Option(
        None, "--base-url", help="Dokploy URL, no trailing slash (default: DOKPLOY_BASE_URL).", show_default=False
    ),
    deployment_type: str | None = typer.Option(
        None,
        "--deployment-type",
        help="application or compose (default: DOKPLOY_DEPLOYMENT_TYPE, else application).",
        show_default=False,
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", help="Request timeout in seconds (default: 30).", show_default=False
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Validate and print the request without sending it."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Send one deploy request; exit 0 only on HTTP 200."""

    configure_logging(verbose)
    try:
        settings = load_settings()
        if timeout is not None and timeout <= 0:
            raise ConfigurationError("timeout must be greater than 0", field="timeout")
        config = settings.to_deployment_config(
            auth_token=auth_token,
            resource_id=resource_id,
            base_url=base_url,
            deployment_type=deployment_type,
        )

        if dry_run:
            request, endpoint = plan_deployment(config)
            _console.print(build_request_table(build_http_request(request, endpoint)))
            return

        with build_client(settings, timeout_seconds=timeout) as client:
            result = trigger_deployment(config, HttpxDispatcher(client))
    except DeployError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=exc.exit_code) from exc

    print_success(_err_console, result)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
