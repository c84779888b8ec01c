"""Entity package: Product."""

from .entity import Product, ProductCreate, ProductPage, ProductUpdate
from .repository import ProductRepository
from .table import ProductTable

__all__ = [
    "Product",
    "ProductCreate",
    "ProductPage",
    "ProductRepository",
    "ProductTable",
    "ProductUpdate",
]
