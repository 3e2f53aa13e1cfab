from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from basket.application.commands import UpdateItemPriceInBasketCommand, UpdateItemPriceInBasketHandler
from basket.domain.entities.shopping_cart import CartStatus, ShoppingCart
from basket.domain.exceptions import InvalidCartItemError
from basket.infrastructure.persistence.models import ShoppingCartItemModel

pytestmark = pytest.mark.anyio

MUG = uuid4()
LAMP = uuid4()


async def save_new_cart(uow_factory, user_name: str = "swn") -> ShoppingCart:
    cart = ShoppingCart.create(user_name)
    cart.add_item(MUG, 2, Decimal("100.00"), "Mug")
    cart.add_item(LAMP, 1, Decimal("40.00"), "Lamp", variant="Blue")
    async with uow_factory() as uow:
        uow.carts.add(cart)
        await uow.commit()
    return cart


async def test_cart_graph_round_trips(basket_uow_factory):
    cart = ShoppingCart.create("swn", session_id="sess-1")
    cart.add_item(MUG, 2, Decimal("12.50"), "Mug")
    cart.add_item(MUG, 1, Decimal("12.50"), "Mug", variant="Red")
    cart.apply_discount("save10", "Percentage", Decimal("10"))
    async with basket_uow_factory() as uow:
        uow.carts.add(cart)
        await uow.commit()

    async with basket_uow_factory() as uow:
        loaded = await uow.carts.get(cart.id)

    assert loaded.user_name == "swn"
    assert loaded.session_id == "sess-1"
    assert loaded.status is CartStatus.ACTIVE
    assert sorted((i.quantity, i.variant or "") for i in loaded.items) == [(1, "Red"), (2, "")]
    assert [(d.code, d.value) for d in loaded.discounts] == [("SAVE10", Decimal("10.00"))]
    assert loaded.subtotal == Decimal("37.50")
    assert loaded.total == Decimal("33.75")
    assert loaded.created_by == "test-system"


async def test_line_changes_are_synchronised(basket_uow_factory):
    cart = await save_new_cart(basket_uow_factory)

    async with basket_uow_factory() as uow:
        loaded = await uow.carts.get(cart.id)
        loaded.update_item_quantity(MUG, 5)
        loaded.remove_item(LAMP, variant="Blue")
        loaded.add_item(LAMP, 1, Decimal("40.00"), "Lamp", variant="Green")
        await uow.commit()

    async with basket_uow_factory() as uow:
        loaded = await uow.carts.get(cart.id)
        line_count = await uow.session.scalar(select(func.count()).select_from(ShoppingCartItemModel))

    assert [(i.product_id, i.quantity, i.variant) for i in loaded.items] == [
        (MUG, 5, None),
        (LAMP, 1, "Green"),
    ]
    assert loaded.find_item(MUG).last_modified_at is not None
    assert line_count == 2


async def test_deleting_a_cart_removes_its_lines(basket_uow_factory):
    cart = await save_new_cart(basket_uow_factory)

    async with basket_uow_factory() as uow:
        uow.carts.remove(await uow.carts.get(cart.id))
        await uow.commit()

    async with basket_uow_factory() as uow:
        assert await uow.carts.get(cart.id) is None
        line_count = await uow.session.scalar(select(func.count()).select_from(ShoppingCartItemModel))
    assert line_count == 0


async def test_list_for_user_can_skip_checked_out_carts(basket_uow_factory):
    active = await save_new_cart(basket_uow_factory)
    done = await save_new_cart(basket_uow_factory)
    await save_new_cart(basket_uow_factory, user_name="someone-else")
    async with basket_uow_factory() as uow:
        (await uow.carts.get(done.id)).checkout()
        await uow.commit()

    async with basket_uow_factory() as uow:
        all_carts = await uow.carts.list_for_user("swn")
        active_carts = await uow.carts.list_for_user("swn", active_only=True)

    assert {c.id for c in all_carts} == {active.id, done.id}
    assert [c.id for c in active_carts] == [active.id]


async def test_price_reconciliation_touches_every_cart(basket_uow_factory):
    active = await save_new_cart(basket_uow_factory)
    done = await save_new_cart(basket_uow_factory, user_name="jdoe")
    async with basket_uow_factory() as uow:
        (await uow.carts.get(done.id)).checkout()
        await uow.commit()

    handler = UpdateItemPriceInBasketHandler(basket_uow_factory())
    updated = await handler.handle(UpdateItemPriceInBasketCommand(MUG, Decimal("80.00"), "Mug v2"))

    async with basket_uow_factory() as uow:
        refreshed = await uow.carts.get(active.id)
        checked_out = await uow.carts.get(done.id)

    assert updated == 2
    mug = refreshed.find_item(MUG)
    assert mug.unit_price == Decimal("80.00")
    assert mug.product_price == Decimal("80.00")
    assert mug.product_name == "Mug v2"
    assert refreshed.find_item(LAMP, "Blue").unit_price == Decimal("40.00")
    assert checked_out.status is CartStatus.CHECKED_OUT
    assert checked_out.find_item(MUG).unit_price == Decimal("80.00")


@pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1.00")])
async def test_price_reconciliation_rejects_non_positive_price(basket_uow_factory, price):
    cart = await save_new_cart(basket_uow_factory)

    with pytest.raises(InvalidCartItemError):
        await UpdateItemPriceInBasketHandler(basket_uow_factory()).handle(UpdateItemPriceInBasketCommand(MUG, price))

    async with basket_uow_factory() as uow:
        loaded = await uow.carts.get(cart.id)
    assert loaded.find_item(MUG).unit_price == Decimal("100.00")


async def test_price_reconciliation_is_idempotent(basket_uow_factory):
    cart = await save_new_cart(basket_uow_factory)
    command = UpdateItemPriceInBasketCommand(MUG, Decimal("80.00"))

    await UpdateItemPriceInBasketHandler(basket_uow_factory()).handle(command)
    async with basket_uow_factory() as uow:
        first = [(i.product_id, i.unit_price, i.quantity) for i in (await uow.carts.get(cart.id)).items]

    await UpdateItemPriceInBasketHandler(basket_uow_factory()).handle(command)
    async with basket_uow_factory() as uow:
        second = [(i.product_id, i.unit_price, i.quantity) for i in (await uow.carts.get(cart.id)).items]

    assert first == second
    assert first[0] == (MUG, Decimal("80.00"), 2)


async def test_reconciliation_without_matching_lines_updates_nothing(basket_uow_factory):
    await save_new_cart(basket_uow_factory)

    updated = await UpdateItemPriceInBasketHandler(basket_uow_factory()).handle(
        UpdateItemPriceInBasketCommand(uuid4(), Decimal("1.00"))
    )

    assert updated == 0


async def test_lines_for_product_reads_every_cart(basket_uow_factory):
    first = await save_new_cart(basket_uow_factory, user_name="ann")
    second = await save_new_cart(basket_uow_factory, user_name="bob")

    async with basket_uow_factory() as uow:
        lines = await uow.carts.lines_for_product(MUG)

    assert [(line.cart_id, line.user_name, line.quantity) for line in lines] == [
        (first.id, "ann", 2),
        (second.id, "bob", 2),
    ]
    assert all(line.status == CartStatus.ACTIVE.value for line in lines)
