from catalog.domain.entities.product import Product

__all__ = ["Product"]
