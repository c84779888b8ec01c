"""Product database table model."""

from sqlalchemy import event
from sqlmodel import Field

from src.app.entities.core import EntityTable, utcnow
from src.app.entities.service.product.entity import validate_product


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together.
    """

    __tablename__ = "products"
    # Never hand out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    name: str = Field(index=True)
    sku: str | None = None
    category: str = Field(index=True)
    quantity: int = 0
    price: float = 0.0


@event.listens_for(ProductTable, "before_insert")
@event.listens_for(ProductTable, "before_update")
def _before_write(mapper, connection, target: ProductTable) -> None:
    """Validate and stamp every row the session flushes."""
    validate_product(target)
    target.last_updated = utcnow()
