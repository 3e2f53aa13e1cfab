"""
Product Mapper
Product aggregate ↔ ProductModel
"""
from __future__ import annotations

from typing import Any

from shared.infrastructure.database.base_mapper import AggregateMapper
from catalog.domain.entities.product import Product
from catalog.infrastructure.persistence.models.product_model import ProductModel


class ProductMapper(AggregateMapper[Product, ProductModel]):
    model_type = ProductModel

    def to_model(self, aggregate: Product) -> ProductModel:
        model = ProductModel(id=aggregate.id)
        self.apply(aggregate, model)
        return model

    def to_domain(self, model: ProductModel) -> Product:
        return Product.rehydrate(
            id=model.id,
            name=model.name,
            description=model.description,
            price=model.price,
            image_file=model.image_file,
            categories=list(model.categories or []),
            stock_quantity=model.stock_quantity,
            is_deleted=model.is_deleted,
            deleted_at=model.deleted_at,
            deleted_by=model.deleted_by,
            created_at=model.created_at,
            created_by=model.created_by,
            last_modified_at=model.last_modified_at,
            last_modified_by=model.last_modified_by,
        )

    def apply(self, aggregate: Product, model: ProductModel) -> None:
        model.name = aggregate.name
        model.description = aggregate.description
        model.price = aggregate.price
        model.image_file = aggregate.image_file
        model.categories = list(aggregate.categories)
        model.stock_quantity = aggregate.stock_quantity
        model.is_available = aggregate.is_available
        self.copy_audit(aggregate, model)

    def snapshot(self, aggregate: Product) -> Any:
        return (
            aggregate.name,
            aggregate.description,
            aggregate.price,
            aggregate.image_file,
            aggregate.categories,
            aggregate.stock_quantity,
            aggregate.is_deleted,
            aggregate.deleted_at,
            aggregate.deleted_by,
        )
