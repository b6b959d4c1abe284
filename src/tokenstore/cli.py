"""Token store admin CLI using Typer.

Operator utilities for the token database: schema creation, counting,
revoking a single user's token and wiping all tokens.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

import typer
from rich.console import Console

from tokenstore.exceptions import TokenStoreError
from tokenstore.logging_config import configure_logging
from tokenstore.services import TokenStore

T = TypeVar("T")

app = typer.Typer(
    name="tokenstore",
    help="Passwordless token store administration",
    no_args_is_help=True,
)
console = Console()


def _run(ctx: typer.Context, operation: Callable[[TokenStore], Awaitable[T]]) -> T:
    """Run an operation against a store connected to the selected database."""

    async def _with_store() -> T:
        async with TokenStore.connect(ctx.obj) as store:
            return await operation(store)

    try:
        return asyncio.run(_with_store())
    except TokenStoreError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1) from e


@app.callback()
def main(
    ctx: typer.Context,
    database_url: str | None = typer.Option(
        None,
        "--database-url",
        "-d",
        help="SQLAlchemy async URL (defaults to the configured database)",
    ),
) -> None:
    """Select the token database for all subcommands."""
    ctx.obj = database_url


@app.command("init-db")
def init_db(ctx: typer.Context) -> None:
    """Create the token table if it does not exist."""
    # Connecting creates the table
    count = _run(ctx, lambda store: store.count())
    console.print(f"[green]Token table ready[/green] ({count} records)")


@app.command("count")
def count_tokens(ctx: typer.Context) -> None:
    """Print the number of stored tokens, expired ones included."""
    console.print(_run(ctx, lambda store: store.count()))


@app.command("revoke")
def revoke_token(
    ctx: typer.Context,
    uid: str = typer.Argument(..., help="User id whose token is removed"),
) -> None:
    """Remove the token of one user."""
    _run(ctx, lambda store: store.revoke(uid))
    console.print(f"Revoked token for [cyan]{uid}[/cyan]")


@app.command("clear")
def clear_tokens(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Remove every stored token."""
    if not yes:
        typer.confirm("Remove all stored tokens?", abort=True)
    _run(ctx, lambda store: store.clear())
    console.print("[yellow]All tokens removed[/yellow]")


def cli() -> None:
    """Entry point for the CLI application."""
    configure_logging()
    app()


if __name__ == "__main__":
    cli()
