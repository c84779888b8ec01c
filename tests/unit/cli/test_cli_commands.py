"""Tests for the inventory command line interface."""

from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from src.app.core.services import DbManageService, DbSessionService
from src.app.entities.service.product import ProductCreate, ProductRepository
from src.app.runtime.config.config_data import ConfigData, DatabaseConfig
from src.app.runtime.context import with_context
from src.cli import app, product_commands

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep table cells on one line regardless of the runner's terminal
    monkeypatch.setattr(product_commands.console, "width", 200)


@pytest.fixture
def database_file(tmp_path: Path) -> Generator[Path]:
    """Point the CLI at a throwaway SQLite file."""
    path = tmp_path / "cli.db"
    with with_context(ConfigData(database=DatabaseConfig(url=f"sqlite:///{path}"))):
        yield path


def _seed() -> None:
    DbManageService().create_all()
    with DbSessionService().session_scope() as session:
        repository = ProductRepository(session)
        repository.create(ProductCreate(name="Laptop", category="Electronics", quantity=5, price=999))
        repository.create(ProductCreate(name="Desk Lamp", category="Lighting", quantity=25, price=19.5))
        repository.create(ProductCreate(name="Chair", category="Furniture", quantity=3, price=85))


def test_db_init_creates_tables(database_file: Path):
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0, result.output
    assert "products" in result.output
    assert database_file.exists()


def test_db_drop_requires_confirmation(database_file: Path):
    _seed()

    result = runner.invoke(app, ["db", "drop"], input="n\n")

    assert result.exit_code == 1
    assert "Laptop" in runner.invoke(app, ["products", "list"]).output


def test_db_drop_force(database_file: Path):
    _seed()

    result = runner.invoke(app, ["db", "drop", "--force"])

    assert result.exit_code == 0, result.output
    assert "dropped" in result.output


def test_products_list(database_file: Path):
    _seed()

    result = runner.invoke(app, ["products", "list"])

    assert result.exit_code == 0, result.output
    for name in ("Laptop", "Desk Lamp", "Chair"):
        assert name in result.output


def test_products_list_by_category(database_file: Path):
    _seed()

    result = runner.invoke(app, ["products", "list", "--category", "lighting"])

    assert result.exit_code == 0, result.output
    assert "Desk Lamp" in result.output
    assert "Laptop" not in result.output


def test_products_low_stock(database_file: Path):
    _seed()

    result = runner.invoke(app, ["products", "low-stock", "--threshold", "5"])

    assert result.exit_code == 0, result.output
    assert "Laptop" in result.output
    assert "Chair" in result.output
    assert "Desk Lamp" not in result.output


def test_products_list_empty(database_file: Path):
    DbManageService().create_all()

    result = runner.invoke(app, ["products", "list"])

    assert result.exit_code == 0, result.output
    assert "No products found" in result.output
