"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from src.app.runtime.config.config_data import ConfigData
from src.app.runtime.context import get_config


def build_engine(config: ConfigData) -> Engine:
    """Create the SQLAlchemy engine described by ``config.database``."""
    db_config = config.database
    engine_kwargs: dict = {
        "pool_pre_ping": True,  # Validate connections before use
        "connect_args": _get_connect_args(config),
    }

    if db_config.is_sqlite:
        if config.app.environment == "production":
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )
    else:
        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
            }
        )

    logger.info("Initializing database engine for {}", db_config.url.split("://", 1)[0])
    return create_engine(db_config.connection_string, **engine_kwargs)


def _get_connect_args(config: ConfigData) -> dict:
    """Get database-specific connection arguments."""
    if config.database.is_sqlite:
        # Request handlers run in a threadpool
        return {"check_same_thread": False, "timeout": 20}
    if "postgresql" in config.database.url:
        return {
            "application_name": f"{config.app.name}-{config.app.environment}",
            "connect_timeout": 30,
        }
    return {}


class DbSessionService:
    def __init__(self, config: ConfigData | None = None, engine: Engine | None = None):
        """Initialize the shared database engine and session factory."""
        self._engine = engine or build_engine(config or get_config())

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database health check failed: {}: {}", type(e).__name__, e)
            return False

    def dispose(self) -> None:
        self._engine.dispose()
