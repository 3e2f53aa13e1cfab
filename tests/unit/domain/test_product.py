from __future__ import annotations

from decimal import Decimal

import pytest

from catalog.domain.entities.product import Product
from catalog.domain.events import (
    ProductCategoriesUpdatedEvent,
    ProductCreatedEvent,
    ProductDeletedEvent,
    ProductPriceChangedEvent,
    ProductRestoredEvent,
)
from catalog.domain.exceptions import (
    InvalidDiscountError,
    InvalidProductCategoryError,
    InvalidProductNameError,
    InvalidProductPriceError,
    InvalidStockQuantityError,
)


def make_product(price: str = "100.00", **kwargs) -> Product:
    product = Product.create(
        name=kwargs.pop("name", "Espresso Machine"),
        description=kwargs.pop("description", "Fifteen bar pump"),
        price=Decimal(price),
        image_file=kwargs.pop("image_file", "espresso.png"),
        **kwargs,
    )
    product.drain_events()
    return product


def test_create_raises_created_event():
    product = Product.create("Mug", "Stoneware", Decimal("9.5"), "mug.png", categories=["Kitchen"])

    events = product.drain_events()
    assert len(events) == 1
    assert isinstance(events[0], ProductCreatedEvent)
    assert events[0].price == Decimal("9.50")
    assert product.price == Decimal("9.50")


@pytest.mark.parametrize("price", ["0", "-1", "abc"])
def test_create_rejects_invalid_price(price):
    with pytest.raises(InvalidProductPriceError):
        Product.create("Mug", "Stoneware", price, "mug.png")


def test_create_rejects_blank_name():
    with pytest.raises(InvalidProductNameError):
        Product.create("  ", "Stoneware", Decimal("1"), "mug.png")


def test_price_change_raises_one_event_with_snapshot():
    product = make_product(categories=["Coffee"])

    product.update_price(Decimal("80.00"), "sale")

    events = product.drain_events()
    assert len(events) == 1
    event = events[0]
    assert isinstance(event, ProductPriceChangedEvent)
    assert (event.old_price, event.new_price, event.reason) == (Decimal("100.00"), Decimal("80.00"), "sale")
    assert event.name == "Espresso Machine"
    assert event.categories == ("Coffee",)


def test_setting_same_price_raises_nothing():
    product = make_product()

    product.update_price(Decimal("100"), "noop")

    assert product.domain_events == ()


def test_rejected_price_leaves_state_and_events_untouched():
    product = make_product()

    with pytest.raises(InvalidProductPriceError):
        product.update_price(Decimal("-5"), "oops")

    assert product.price == Decimal("100.00")
    assert product.domain_events == ()


def test_discount_reduces_price_through_price_change():
    product = make_product()

    product.apply_discount(Decimal("25"), "promo")

    assert product.price == Decimal("75.00")
    (event,) = product.drain_events()
    assert event.reason == "promo"


def test_discount_out_of_range_is_rejected():
    product = make_product()
    with pytest.raises(InvalidDiscountError):
        product.apply_discount(Decimal("120"))


def test_categories_are_case_insensitively_unique():
    product = make_product(categories=["Coffee"])

    product.add_categories(["coffee", "Kitchen", "KITCHEN", " "])

    assert product.categories == ("Coffee", "Kitchen")
    (event,) = product.drain_events()
    assert isinstance(event, ProductCategoriesUpdatedEvent)
    assert event.new_categories == ("Coffee", "Kitchen")


def test_adding_known_category_raises_nothing():
    product = make_product(categories=["Coffee"])
    product.add_category("COFFEE")
    assert product.domain_events == ()


def test_remove_category_ignores_case():
    product = make_product(categories=["Coffee", "Kitchen"])
    product.remove_category("kitchen")
    assert product.categories == ("Coffee",)


def test_overlong_category_is_rejected():
    product = make_product()
    with pytest.raises(InvalidProductCategoryError):
        product.add_category("x" * 101)


def test_availability_follows_stock():
    product = make_product()
    assert not product.is_available

    product.update_stock(3)
    assert product.is_available

    with pytest.raises(InvalidStockQuantityError):
        product.update_stock(-1)
    assert product.stock_quantity == 3


def test_soft_delete_and_restore():
    product = make_product(stock_quantity=5)

    product.soft_delete()
    product.soft_delete()
    assert product.is_deleted
    assert not product.is_available

    product.restore()
    assert not product.is_deleted
    assert product.deleted_at is None

    events = product.drain_events()
    assert [type(e) for e in events] == [ProductDeletedEvent, ProductRestoredEvent]


def test_rehydrate_records_no_events():
    product = make_product()
    copy = Product.rehydrate(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        image_file=product.image_file,
        categories=list(product.categories),
    )
    assert copy.domain_events == ()
    assert copy == product
