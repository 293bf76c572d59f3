"""Rich renderers shared by `deploy` and `doctor`.

Nothing here prints the bearer token in clear: tables use `mask_secret` and
`PlannedRequest.redacted_headers`.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.errors import DeployError, DeploymentRejectedError
from core.domain.models import DispatchResult
from core.services.deploy_pipeline import PlannedRequest


def mask_secret(value: str | None) -> str:
    """Show at most the first two characters of a secret."""

    if not value:
        return "(unset)"
    if len(value) <= 4:
        return "****"
    return f"{value[:2]}…{'*' * 4}"


def build_request_table(planned: PlannedRequest) -> Table:
    """Table describing the request a deploy would send (token masked)."""

    table = Table(title="Planned deploy request")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Method", planned.method)
    table.add_row("URL", planned.url)
    for name, value in planned.redacted_headers().items():
        table.add_row(f"Header {name}", value)
    for key, value in planned.json.items():
        table.add_row(f"Body {key}", value)
    return table


def print_success(console: Console, result: DispatchResult) -> None:
    line = Text.assemble(
        ("Deployment triggered", "bold green"),
        f" (HTTP {result.status_code}) {result.url}",
    )
    console.print(line, soft_wrap=True)


def print_error(console: Console, exc: DeployError) -> None:
    """One line: `<kind>: <message>`, plus the status code for rejections."""

    line = Text.assemble((f"{exc.kind}: ", "bold red"), str(exc))
    if isinstance(exc, DeploymentRejectedError):
        line.append(f" [status={exc.status_code}]", style="dim")
    console.print(line, soft_wrap=True)
