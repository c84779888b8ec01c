"""Entities module with hybrid entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain and request models with validation
- table.py: Database persistence model and its write hooks
- repository.py: Data access layer
"""

from .service.product import Product, ProductRepository, ProductTable

__all__ = [
    "Product",
    "ProductTable",
    "ProductRepository",
]
