"""Todo list CLI application using Typer.

Command-line utilities for operating the backend: secret generation,
schema initialization and running the API server.
"""

import asyncio
import secrets

import typer
import uvicorn
from rich.console import Console

from todolist.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_tables,
    drop_tables,
)
from todolist_config.settings import get_settings

app = typer.Typer(
    name="todolist",
    help="Todo List backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database schema utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for the backend configuration.

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Todo List Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _run_schema_action(drop_first: bool) -> None:
    engine = create_engine(get_settings().sqlalchemy_url)
    try:
        if drop_first:
            await drop_tables(engine)
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init(
    reset: bool = typer.Option(
        False,
        "--reset",
        help="Drop all tables first (DELETES ALL DATA)",
    ),
) -> None:
    """Create all database tables (idempotent)."""
    if reset:
        typer.confirm(
            "This will DELETE ALL DATA in the database. Continue?",
            abort=True,
        )
    asyncio.run(_run_schema_action(drop_first=reset))
    console.print("[bold green]Database schema is up to date.[/bold green]")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "todolist.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
