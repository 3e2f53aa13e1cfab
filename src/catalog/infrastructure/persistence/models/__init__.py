from catalog.infrastructure.persistence.models.product_model import ProductModel

__all__ = ["ProductModel"]
