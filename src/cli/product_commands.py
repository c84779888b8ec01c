"""Inventory inspection CLI commands."""

import typer
from rich.console import Console
from rich.table import Table

from src.app.core.services import DbSessionService
from src.app.entities.service.product import Product, ProductRepository

console = Console()

products_app = typer.Typer(help="Inspect products in the inventory database")


def _render(products: list[Product], title: str) -> None:
    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("SKU", style="blue")
    table.add_column("Category", style="magenta")
    table.add_column("Quantity", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Last updated", style="dim")

    for product in products:
        table.add_row(
            str(product.id),
            product.name,
            product.sku or "",
            product.category,
            str(product.quantity),
            f"{product.price:.2f}",
            product.last_updated.isoformat(sep=" ", timespec="seconds")
            if product.last_updated
            else "",
        )

    console.print(table)


@products_app.command("list")
def list_products(
    category: str | None = typer.Option(
        None, "--category", "-c", help="Only products in this category"
    ),
) -> None:
    """List products, optionally filtered by category."""
    with DbSessionService().session_scope() as session:
        repository = ProductRepository(session)
        if category:
            products = repository.find_by_category(category)
        else:
            products = repository.list_all()
    _render(products, "Products")


@products_app.command("low-stock")
def low_stock(
    threshold: int = typer.Option(10, "--threshold", "-t", help="Highest quantity considered low"),
) -> None:
    """List products at or below the stock threshold."""
    with DbSessionService().session_scope() as session:
        products = ProductRepository(session).find_low_stock(threshold)
    _render(products, f"Products with quantity ≤ {threshold}")
