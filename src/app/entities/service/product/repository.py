"""Product repository: CRUD and query operations over the products table."""

import math

from loguru import logger
from sqlalchemy import func
from sqlmodel import Session, col, select

from src.app.core.exceptions import (
    ProductNotFoundError,
    ProductValidationError,
)
from src.app.entities.service.product.entity import (
    EDITABLE_FIELDS,
    Product,
    ProductCreate,
    ProductPage,
    ProductUpdate,
    validate_product,
)
from src.app.entities.service.product.table import ProductTable

# JSON names map to columns as well as the column names themselves
SORTABLE_COLUMNS = {
    "id": ProductTable.id,
    "name": ProductTable.name,
    "sku": ProductTable.sku,
    "category": ProductTable.category,
    "quantity": ProductTable.quantity,
    "price": ProductTable.price,
    "last_updated": ProductTable.last_updated,
    "lastUpdated": ProductTable.last_updated,
}


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProductRepository:
    """Data-access layer for products.

    Writes are flushed but not committed; the caller owns the transaction.
    A write that fails validation raises before the session is modified.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def _to_entity(self, row: ProductTable) -> Product:
        return Product.model_validate(row, from_attributes=True)

    def _list(self, statement) -> list[Product]:
        rows = self._session.exec(statement.order_by(col(ProductTable.id))).all()
        return [self._to_entity(row) for row in rows]

    def _check(self, candidate) -> None:
        # Reject before the session is touched so nothing is left to roll back
        try:
            validate_product(candidate)
        except ProductValidationError as e:
            logger.info("Rejected product write: {} ({})", e.message, e.field)
            raise

    def _flush(self, row: ProductTable) -> Product:
        self._session.flush()
        return self._to_entity(row)

    def create(self, product: ProductCreate | Product) -> Product:
        """Insert a new product; the database assigns the id."""
        row = ProductTable(**product.model_dump(include=set(EDITABLE_FIELDS)))
        self._check(row)
        self._session.add(row)
        created = self._flush(row)
        logger.info("Created product {}", created.id)
        return created

    def save(self, product: Product) -> Product:
        """Insert or overwrite a product.

        Without an id this is ``create``. With an id the row holding that id
        is overwritten, or inserted under that id when none exists.
        """
        if product.id is None:
            return self.create(product)

        self._check(product)
        row = self._session.get(ProductTable, product.id)
        if row is None:
            row = ProductTable(id=product.id)
            self._session.add(row)
            logger.info("Inserting product under client id {}", product.id)
        for field in EDITABLE_FIELDS:
            setattr(row, field, getattr(product, field))
        row.last_updated = None
        saved = self._flush(row)
        logger.info("Saved product {}", saved.id)
        return saved

    def get(self, product_id: int) -> Product | None:
        logger.debug("Loading product {}", product_id)
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return self._to_entity(row)

    def get_or_raise(self, product_id: int) -> Product:
        product = self.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def list_all(self) -> list[Product]:
        return self._list(select(ProductTable))

    def list_page(
        self, page: int, size: int, sort_by: str = "id", order: str = "asc"
    ) -> ProductPage:
        """Return one page of products sorted by ``sort_by``.

        ``order`` equal to "desc" in any case sorts descending; any other
        value sorts ascending. Rows with equal sort keys are ordered by id.
        """
        if page < 0:
            raise ProductValidationError(
                "page", "Page index must not be negative", location="query"
            )
        if size < 1:
            raise ProductValidationError(
                "size", "Page size must be at least 1", location="query"
            )
        column = SORTABLE_COLUMNS.get(sort_by)
        if column is None:
            raise ProductValidationError(
                "sortBy", f"Cannot sort by unknown field '{sort_by}'", location="query"
            )

        descending = order.lower() == "desc"
        ordering = col(column).desc() if descending else col(column).asc()
        tiebreak = col(ProductTable.id).desc() if descending else col(ProductTable.id).asc()

        total = self._session.exec(select(func.count()).select_from(ProductTable)).one()
        statement = (
            select(ProductTable)
            .order_by(ordering, tiebreak)
            .offset(page * size)
            .limit(size)
        )
        rows = self._session.exec(statement).all()
        logger.debug(
            "Listed page {} (size {}) sorted by {} {}", page, size, sort_by, order
        )
        return ProductPage(
            content=[self._to_entity(row) for row in rows],
            total_elements=total,
            total_pages=math.ceil(total / size),
            number=page,
            size=size,
        )

    def find_by_category(self, category: str) -> list[Product]:
        return self._list(
            select(ProductTable).where(
                func.lower(col(ProductTable.category)) == func.lower(category)
            )
        )

    def find_by_name_containing(self, text: str) -> list[Product]:
        pattern = f"%{_escape_like(text)}%"
        return self._list(
            select(ProductTable).where(
                col(ProductTable.name).ilike(pattern, escape="\\")
            )
        )

    def find_by_price_at_most(self, price: float) -> list[Product]:
        return self._list(select(ProductTable).where(ProductTable.price <= price))

    def find_by_price_at_least(self, price: float) -> list[Product]:
        return self._list(select(ProductTable).where(ProductTable.price >= price))

    def find_low_stock(self, threshold: int) -> list[Product]:
        return self._list(select(ProductTable).where(ProductTable.quantity <= threshold))

    def update(self, product_id: int, changes: ProductUpdate) -> Product:
        """Overwrite the editable fields present in ``changes`` and re-stamp the row."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            raise ProductNotFoundError(product_id)

        values = changes.changes()
        self._check(self._to_entity(row).model_copy(update=values))
        for field, value in values.items():
            setattr(row, field, value)
        # Re-stamp even when no column value changed
        row.last_updated = None
        updated = self._flush(row)
        logger.info("Updated product {}", product_id)
        return updated

    def delete(self, product_id: int) -> bool:
        """Delete a product; returns False when no such product exists."""
        row = self._session.get(ProductTable, product_id)
        if row is None:
            logger.debug("Delete of unknown product {} ignored", product_id)
            return False
        self._session.delete(row)
        self._session.flush()
        logger.info("Deleted product {}", product_id)
        return True
