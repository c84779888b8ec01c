"""Schema management for the application database."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from src.app.core.services.database.db_session import build_engine
from src.app.runtime.config.config_data import ConfigData
from src.app.runtime.context import get_config


class DbManageService:
    def __init__(self, config: ConfigData | None = None, engine: Engine | None = None):
        self._engine = engine or build_engine(config or get_config())

    def _register_tables(self) -> None:
        from src.app.entities.service.product import ProductTable  # noqa: F401

    def create_all(self) -> None:
        """Create all database tables."""
        self._register_tables()
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        self._register_tables()
        SQLModel.metadata.drop_all(self._engine)
        logger.info("Database tables dropped.")

    def table_names(self) -> list[str]:
        self._register_tables()
        return sorted(SQLModel.metadata.tables)
