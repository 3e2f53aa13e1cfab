from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from basket.domain.entities.shopping_cart import CartStatus, DiscountType, ShoppingCart
from basket.domain.events import (
    CartItemAddedEvent,
    CartItemQuantityUpdatedEvent,
    CartItemRemovedEvent,
    DiscountAppliedEvent,
    ShoppingCartCheckedOutEvent,
    ShoppingCartClearedEvent,
    ShoppingCartCreatedEvent,
)
from basket.domain.exceptions import (
    InvalidCartDiscountError,
    InvalidCartItemError,
    InvalidCartOperationError,
)

PRODUCT_X = uuid4()
PRODUCT_Y = uuid4()


def make_cart() -> ShoppingCart:
    cart = ShoppingCart.create("alice")
    cart.drain_events()
    return cart


def expected_total(cart: ShoppingCart) -> Decimal:
    subtotal = sum((i.unit_price * i.quantity for i in cart.items), Decimal("0"))
    return subtotal - cart.discount_amount


def test_create_raises_created_event():
    cart = ShoppingCart.create("alice", session_id="s-1")

    (event,) = cart.drain_events()
    assert isinstance(event, ShoppingCartCreatedEvent)
    assert event.user_name == "alice"
    assert cart.status is CartStatus.ACTIVE
    assert cart.total == Decimal("0")


def test_create_requires_owner():
    with pytest.raises(InvalidCartOperationError):
        ShoppingCart.create(" ")


def test_adding_same_product_increments_quantity():
    cart = make_cart()
    cart.add_item(PRODUCT_X, 2, Decimal("10.00"), "Mug")

    cart.add_item(PRODUCT_X, 3, Decimal("10.00"), "Mug")

    assert len(cart.items) == 1
    assert cart.items[0].quantity == 5
    assert cart.total == Decimal("50.00")
    events = cart.drain_events()
    assert [type(e) for e in events] == [CartItemAddedEvent, CartItemQuantityUpdatedEvent]
    assert events[1].new_quantity == 5


def test_variants_are_separate_lines():
    cart = make_cart()
    cart.add_item(PRODUCT_X, 1, Decimal("10.00"), "Mug", variant="Red")
    cart.add_item(PRODUCT_X, 1, Decimal("10.00"), "Mug", variant="Blue")
    cart.add_item(PRODUCT_X, 2, Decimal("10.00"), "Mug", variant="Red")

    assert sorted((i.variant, i.quantity) for i in cart.items) == [("Blue", 1), ("Red", 3)]
    assert cart.item_count == 4


def test_item_validation():
    cart = make_cart()
    with pytest.raises(InvalidCartItemError):
        cart.add_item(PRODUCT_X, 0, Decimal("1.00"), "Mug")
    with pytest.raises(InvalidCartItemError):
        cart.add_item(PRODUCT_X, 1, Decimal("-1.00"), "Mug")
    assert cart.items == ()
    assert cart.domain_events == ()


def test_remove_item_and_missing_item_noop():
    cart = make_cart()
    cart.add_item(PRODUCT_X, 1, Decimal("5.00"), "Mug")
    cart.drain_events()

    cart.remove_item(PRODUCT_Y)
    assert cart.domain_events == ()

    cart.remove_item(PRODUCT_X)
    assert cart.items == ()
    (event,) = cart.drain_events()
    assert isinstance(event, CartItemRemovedEvent)


def test_update_quantity_to_zero_removes_line():
    cart = make_cart()
    cart.add_item(PRODUCT_X, 4, Decimal("5.00"), "Mug")

    cart.update_item_quantity(PRODUCT_X, 2)
    assert cart.items[0].quantity == 2

    cart.update_item_quantity(PRODUCT_X, 0)
    assert cart.items == ()


def test_percentage_and_fixed_discounts_are_capped():
    cart = make_cart()
    cart.add_item(PRODUCT_X, 2, Decimal("10.00"), "Mug")

    cart.apply_discount("spring", "Percentage", Decimal("10"))
    assert cart.discount_amount == Decimal("2.00")
    assert cart.total == Decimal("18.00")

    cart.apply_discount("big", DiscountType.FIXED, Decimal("500"))
    assert cart.discount_amount == Decimal("20.00")
    assert cart.total == Decimal("0.00")


def test_reapplying_code_replaces_discount():
    cart = make_cart()
    cart.add_item(PRODUCT_X, 1, Decimal("100.00"), "Kettle")

    cart.apply_discount("SAVE", "fixed", Decimal("5"))
    cart.apply_discount("save", "fixed", Decimal("15"))

    assert len(cart.discounts) == 1
    assert cart.total == Decimal("85.00")
    assert all(isinstance(e, DiscountAppliedEvent) for e in cart.drain_events()[1:])


def test_invalid_discounts():
    cart = make_cart()
    with pytest.raises(InvalidCartDiscountError):
        cart.apply_discount("", "Fixed", Decimal("1"))
    with pytest.raises(InvalidCartDiscountError):
        cart.apply_discount("X", "Bogus", Decimal("1"))
    with pytest.raises(InvalidCartDiscountError):
        cart.apply_discount("X", "Percentage", Decimal("101"))


def test_total_invariant_after_mixed_operations():
    cart = make_cart()
    cart.add_item(PRODUCT_X, 3, Decimal("2.50"), "Pen")
    cart.add_item(PRODUCT_Y, 1, Decimal("12.00"), "Notebook")
    cart.apply_discount("TEN", "Percentage", Decimal("10"))
    cart.update_item_quantity(PRODUCT_X, 1)
    cart.add_item(PRODUCT_Y, 2, Decimal("12.00"), "Notebook")
    cart.remove_item(PRODUCT_X)

    assert cart.total == expected_total(cart)
    assert cart.total == Decimal("32.40")


def test_clear_removes_items_and_discounts():
    cart = make_cart()
    cart.add_item(PRODUCT_X, 1, Decimal("5.00"), "Mug")
    cart.apply_discount("A", "Fixed", Decimal("1"))
    cart.drain_events()

    cart.clear()

    assert cart.items == () and cart.discounts == ()
    (event,) = cart.drain_events()
    assert isinstance(event, ShoppingCartClearedEvent)


def test_checkout_empty_cart_fails_and_cart_stays_active():
    cart = make_cart()

    with pytest.raises(InvalidCartOperationError, match="Cannot checkout empty cart"):
        cart.checkout()

    assert cart.status is CartStatus.ACTIVE
    assert cart.items == ()
    assert cart.domain_events == ()


def test_checkout_raises_event_with_totals():
    cart = make_cart()
    cart.add_item(PRODUCT_X, 2, Decimal("10.00"), "Mug")
    cart.drain_events()

    cart.checkout()

    assert cart.status is CartStatus.CHECKED_OUT
    (event,) = cart.drain_events()
    assert isinstance(event, ShoppingCartCheckedOutEvent)
    assert (event.total, event.item_count) == (Decimal("20.00"), 2)


@pytest.mark.parametrize(
    "mutate",
    [
        lambda cart: cart.add_item(PRODUCT_Y, 1, Decimal("1.00"), "Other"),
        lambda cart: cart.remove_item(PRODUCT_X),
        lambda cart: cart.update_item_quantity(PRODUCT_X, 7),
        lambda cart: cart.apply_discount("LATE", "Fixed", Decimal("1")),
        lambda cart: cart.clear(),
        lambda cart: cart.checkout(),
    ],
)
def test_checked_out_cart_rejects_every_mutation(mutate):
    cart = make_cart()
    cart.add_item(PRODUCT_X, 2, Decimal("10.00"), "Mug")
    cart.checkout()
    cart.drain_events()

    with pytest.raises(InvalidCartOperationError, match="Cannot modify cart with status: CheckedOut"):
        mutate(cart)

    assert [(i.product_id, i.quantity) for i in cart.items] == [(PRODUCT_X, 2)]
    assert cart.discounts == ()
    assert cart.status is CartStatus.CHECKED_OUT
    assert cart.domain_events == ()
