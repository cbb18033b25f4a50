# Repository pattern: all upstream catalog access goes through these

from gateway.repositories.brand_repository import BrandRepository
from gateway.repositories.product_repository import ProductRepository

__all__ = ["BrandRepository", "ProductRepository"]
