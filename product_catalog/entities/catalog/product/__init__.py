"""Entity package: Product."""

from .entity import NewProduct, Product
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["NewProduct", "Product", "ProductRepository", "ProductTable"]
