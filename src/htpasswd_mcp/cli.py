"""Root Typer application for the htpasswd MCP server."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from htpasswd_mcp.audit import audit
from htpasswd_mcp.config import get_config
from htpasswd_mcp.errors import HtpasswdError, ValidationError
from htpasswd_mcp.logs import configure_logging
from htpasswd_mcp.operations import build_registry
from htpasswd_mcp.server import serve_stdio
from htpasswd_mcp.services import htpasswd

log = logging.getLogger(__name__)

app = typer.Typer(
    name="htpasswd-mcp",
    help="MCP server that generates bcrypt htpasswd entries.",
    no_args_is_help=True,
)
console = Console(stderr=True)


@app.command()
def serve(
    log_level: Optional[str] = typer.Option(None, help="Log level (defaults to HTPASSWD_MCP_LOG_LEVEL)"),
) -> None:
    """Run the MCP server on stdio."""
    cfg = get_config()
    configure_logging(log_level or cfg.log_level)

    try:
        asyncio.run(serve_stdio(cfg))
    except KeyboardInterrupt:
        log.info("Interrupted, shutting down")
    except Exception as exc:
        log.exception("Failed to start server: %s", exc)
        raise typer.Exit(getattr(exc, "exit_code", 1))


@app.command()
def generate(
    user: str = typer.Option(..., help="Username"),
    password: str = typer.Option(
        ..., prompt=True, hide_input=True, confirmation_prompt=True, help="Password"
    ),
) -> None:
    """Print a bcrypt htpasswd entry for USER."""
    cfg = get_config()

    try:
        with audit("cli.generate_htpasswd", target=user):
            line = htpasswd.create_htpasswd(user, password, rounds=cfg.bcrypt_rounds)
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(exc.exit_code)
    except HtpasswdError as exc:
        console.print(f"[red]Fatal:[/red] {exc}")
        raise typer.Exit(exc.exit_code)

    typer.echo(line)


@app.command(name="list")
def list_operations() -> None:
    """List the tools and prompts the server exposes."""
    registry = build_registry(get_config())

    table = Table(title="Operations")
    table.add_column("Kind", style="magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Arguments", style="green")

    for tool in registry.list_tools():
        table.add_row("tool", tool.name, ", ".join(tool.required_fields))
    for prompt in registry.list_prompts():
        table.add_row("prompt", prompt.name, ", ".join(arg.name for arg in prompt.arguments))

    Console().print(table)


if __name__ == "__main__":
    app()
