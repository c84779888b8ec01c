"""Database schema CLI commands."""

import typer
from rich.console import Console
from rich.prompt import Confirm

from src.app.core.services import DbManageService

console = Console()

db_app = typer.Typer(help="Manage the inventory database schema")


@db_app.command("init")
def init_db() -> None:
    """Create the database tables."""
    service = DbManageService()
    service.create_all()
    console.print(
        f"[green]✅ Tables ready: {', '.join(service.table_names())}[/green]"
    )


@db_app.command("drop")
def drop_db(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Drop the database tables and everything in them."""
    if not force and not Confirm.ask("Drop all inventory tables?"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=1)

    DbManageService().drop_all()
    console.print("[green]✅ Tables dropped[/green]")
