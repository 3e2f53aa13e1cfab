"""
Shopping Cart Mapper
ShoppingCart aggregate ↔ cart, item and discount models
"""
from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy.orm import selectinload

from shared.infrastructure.database.base_mapper import AggregateMapper
from basket.domain.entities.shopping_cart import (
    CartDiscount,
    CartItem,
    CartStatus,
    DiscountType,
    ShoppingCart,
)
from basket.infrastructure.persistence.models.basket_models import (
    CartDiscountModel,
    ShoppingCartItemModel,
    ShoppingCartModel,
)


class ShoppingCartMapper(AggregateMapper[ShoppingCart, ShoppingCartModel]):
    """
    Maps the whole cart graph.

    Child rows are matched by id on ``apply``: new lines are inserted,
    changed lines updated and lines no longer in the cart are orphaned
    (and deleted by the relationship cascade).
    """

    model_type = ShoppingCartModel

    def load_options(self) -> Sequence[Any]:
        return (
            selectinload(ShoppingCartModel.items),
            selectinload(ShoppingCartModel.discounts),
        )

    def to_model(self, aggregate: ShoppingCart) -> ShoppingCartModel:
        model = ShoppingCartModel(id=aggregate.id, items=[], discounts=[])
        self.apply(aggregate, model)
        return model

    def to_domain(self, model: ShoppingCartModel) -> ShoppingCart:
        return ShoppingCart.rehydrate(
            id=model.id,
            user_name=model.user_name,
            session_id=model.session_id,
            status=CartStatus(model.status),
            items=[self._item_to_domain(item) for item in model.items],
            discounts=[self._discount_to_domain(discount) for discount in model.discounts],
            created_at=model.created_at,
            created_by=model.created_by,
            last_modified_at=model.last_modified_at,
            last_modified_by=model.last_modified_by,
        )

    @staticmethod
    def _item_to_domain(model: ShoppingCartItemModel) -> CartItem:
        return CartItem(
            id=model.id,
            cart_id=model.cart_id,
            product_id=model.product_id,
            product_name=model.product_name,
            product_price=model.product_price,
            unit_price=model.unit_price,
            quantity=model.quantity,
            variant=model.variant,
            added_at=model.added_at,
            last_modified_at=model.last_modified_at,
        )

    @staticmethod
    def _discount_to_domain(model: CartDiscountModel) -> CartDiscount:
        return CartDiscount(
            id=model.id,
            cart_id=model.cart_id,
            code=model.code,
            discount_type=DiscountType(model.discount_type),
            value=model.value,
            applied_at=model.applied_at,
        )

    def apply(self, aggregate: ShoppingCart, model: ShoppingCartModel) -> None:
        model.user_name = aggregate.user_name
        model.session_id = aggregate.session_id
        model.status = aggregate.status.value
        self.copy_audit(aggregate, model)

        stamp = aggregate.last_modified_at or aggregate.created_at
        existing_items = {item.id: item for item in model.items}
        items: list[ShoppingCartItemModel] = []
        for item in aggregate.items:
            row = existing_items.get(item.id)
            if row is None:
                row = ShoppingCartItemModel(id=item.id, cart_id=aggregate.id, added_at=item.added_at or stamp)
            elif row.quantity != item.quantity:
                row.last_modified_at = stamp
            row.product_id = item.product_id
            row.product_name = item.product_name
            row.product_price = item.product_price
            row.unit_price = item.unit_price
            row.quantity = item.quantity
            row.variant = item.variant
            items.append(row)
        model.items = items

        existing_discounts = {discount.id: discount for discount in model.discounts}
        discounts: list[CartDiscountModel] = []
        for discount in aggregate.discounts:
            row = existing_discounts.get(discount.id)
            if row is None:
                row = CartDiscountModel(id=discount.id, cart_id=aggregate.id, applied_at=discount.applied_at or stamp)
            row.code = discount.code
            row.discount_type = discount.discount_type.value
            row.value = discount.value
            discounts.append(row)
        model.discounts = discounts

    def snapshot(self, aggregate: ShoppingCart) -> Any:
        return (
            aggregate.user_name,
            aggregate.session_id,
            aggregate.status,
            tuple(
                (item.id, item.product_id, item.product_name, item.product_price, item.unit_price, item.quantity, item.variant)
                for item in aggregate.items
            ),
            tuple((d.id, d.code, d.discount_type, d.value) for d in aggregate.discounts),
        )
