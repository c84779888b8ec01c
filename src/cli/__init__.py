"""Main CLI application module."""

import typer

from .db_commands import db_app
from .product_commands import products_app

app = typer.Typer(
    help="📦 Inventory API CLI - database and server management",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(products_app, name="products")


@app.command(name="serve")
def serve(
    host: str | None = typer.Option(None, help="Host to bind the server to"),
    port: int | None = typer.Option(None, help="Port to bind the server to"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the HTTP server."""
    import uvicorn

    from src.app.runtime.context import get_config

    config = get_config().app
    uvicorn.run(
        "src.app.api.http.app:app",
        host=host or config.host,
        port=port or config.port,
        reload=reload,
        access_log=False,  # We handle access logging in middleware
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
