"""Product API router with CRUD and query operations."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from src.app.api.http.deps import get_product_repository
from src.app.core.exceptions import ProductNotFoundError
from src.app.entities.service.product import (
    Product,
    ProductCreate,
    ProductPage,
    ProductRepository,
    ProductUpdate,
)
from src.app.runtime.context import get_config

router = APIRouter(tags=["products"])


@router.get("", response_model=list[Product])
def list_products(
    repository: ProductRepository = Depends(get_product_repository),
) -> list[Product]:
    """List all products."""
    return repository.list_all()


@router.get("/page", response_model=ProductPage)
def list_products_page(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int | None = Query(None, ge=1, description="Page size"),
    sort_by: str | None = Query(None, alias="sortBy", description="Field to sort by"),
    order: str = Query("asc", description="'desc' for descending, anything else ascending"),
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductPage:
    """List one page of products, sorted."""
    pagination = get_config().api.pagination
    page_size = min(size or pagination.default_page_size, pagination.max_page_size)
    return repository.list_page(
        page, page_size, sort_by or pagination.default_sort, order
    )


@router.get("/low-stock", response_model=list[Product])
def list_low_stock(
    threshold: int = Query(10, description="Highest quantity still considered low"),
    repository: ProductRepository = Depends(get_product_repository),
) -> list[Product]:
    """List products whose quantity is at or below the threshold."""
    return repository.find_low_stock(threshold)


@router.get("/category/{category}", response_model=list[Product])
def list_by_category(
    category: str,
    repository: ProductRepository = Depends(get_product_repository),
) -> list[Product]:
    return repository.find_by_category(category)


@router.get("/search/{name}", response_model=list[Product])
def search_by_name(
    name: str,
    repository: ProductRepository = Depends(get_product_repository),
) -> list[Product]:
    return repository.find_by_name_containing(name)


@router.get("/price/less-than/{price}", response_model=list[Product])
def list_by_max_price(
    price: float,
    repository: ProductRepository = Depends(get_product_repository),
) -> list[Product]:
    return repository.find_by_price_at_most(price)


@router.get("/price/greater-than/{price}", response_model=list[Product])
def list_by_min_price(
    price: float,
    repository: ProductRepository = Depends(get_product_repository),
) -> list[Product]:
    return repository.find_by_price_at_least(price)


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int,
    repository: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Get a product by ID."""
    try:
        return repository.get_or_raise(product_id)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    product: ProductCreate,
    repository: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Create a new product."""
    created_product = repository.create(product)
    repository.session.commit()
    return created_product


@router.put("/{product_id}", response_model=Product)
def update_product(
    product_id: int,
    product_update: ProductUpdate,
    repository: ProductRepository = Depends(get_product_repository),
) -> Product:
    """Update a product; fields missing from the body are left unchanged."""
    try:
        updated_product = repository.update(product_id, product_update)
    except ProductNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    repository.session.commit()
    return updated_product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    repository: ProductRepository = Depends(get_product_repository),
) -> Response:
    """Delete a product. Deleting an unknown id is a no-op."""
    if repository.delete(product_id):
        repository.session.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
