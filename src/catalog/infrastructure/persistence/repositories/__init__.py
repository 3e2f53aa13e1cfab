from catalog.infrastructure.persistence.repositories.product_repository import ProductRepository

__all__ = ["ProductRepository"]
