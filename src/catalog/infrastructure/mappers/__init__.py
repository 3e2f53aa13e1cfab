from catalog.infrastructure.mappers.product_mapper import ProductMapper

__all__ = ["ProductMapper"]
