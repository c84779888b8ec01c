from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Current UTC time without tzinfo, as stored by the database."""
    return datetime.now(UTC).replace(tzinfo=None)


class Entity(BaseModel):
    """Base class for API-facing models, serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EntityTable(SQLModel, table=False):
    """Base persistence model with a database-generated integer key."""

    id: int | None = Field(default=None, primary_key=True)
    # Stored as naive UTC
    last_updated: datetime | None = Field(
        default=None, sa_type=DateTime, nullable=False
    )
