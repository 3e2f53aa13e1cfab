from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from shared.request_context import acting_as
from catalog.application.event_handlers import ProductPriceChangedBridgeHandler
from catalog.domain.entities.product import Product
from catalog.domain.events import ProductCreatedEvent, ProductPriceChangedEvent

pytestmark = pytest.mark.anyio


def new_product(name: str = "Espresso Cup", price: str = "100.00", categories=("Kitchen",)) -> Product:
    return Product.create(
        name=name,
        description="Porcelain cup",
        price=Decimal(price),
        image_file="cup.png",
        categories=categories,
        stock_quantity=5,
    )


async def test_product_round_trips_through_the_database(catalog_uow_factory):
    product = new_product(categories=("Kitchen", "Gifts"))
    async with catalog_uow_factory() as uow:
        uow.products.add(product)
        await uow.commit()

    async with catalog_uow_factory() as uow:
        loaded = await uow.products.get(product.id)

    assert loaded is not None
    assert loaded.name == "Espresso Cup"
    assert loaded.price == Decimal("100.00")
    assert loaded.categories == ("Kitchen", "Gifts")
    assert loaded.stock_quantity == 5
    assert loaded.created_by == "test-system"
    assert loaded.created_at is not None


async def test_audit_actor_comes_from_the_bound_request_actor(catalog_uow_factory):
    product = new_product()
    with acting_as("alice"):
        async with catalog_uow_factory() as uow:
            uow.products.add(product)
            await uow.commit()

    with acting_as("bob"):
        async with catalog_uow_factory() as uow:
            loaded = await uow.products.get(product.id)
            loaded.update_stock(9)
            await uow.commit()

    async with catalog_uow_factory() as uow:
        loaded = await uow.products.get(product.id)

    assert loaded.created_by == "alice"
    assert loaded.last_modified_by == "bob"
    assert loaded.last_modified_at is not None


async def test_price_change_reaches_the_bus_after_commit(catalog_uow_factory, dispatcher, bus):
    dispatcher.register(ProductPriceChangedEvent, ProductPriceChangedBridgeHandler(bus))
    product = new_product()
    async with catalog_uow_factory() as uow:
        uow.products.add(product)
        await uow.commit()

    async with catalog_uow_factory() as uow:
        loaded = await uow.products.get(product.id)
        loaded.update_price(Decimal("80.00"))
        assert bus.published == []
        await uow.commit()

    assert len(bus.published) == 1
    published = bus.published[0]
    assert published.product_id == product.id
    assert published.price == Decimal("80.00")
    assert published.name == "Espresso Cup"
    assert published.category == ["Kitchen"]


async def test_soft_delete_hides_the_product_until_restored(catalog_uow_factory):
    product = new_product()
    async with catalog_uow_factory() as uow:
        uow.products.add(product)
        await uow.commit()

    async with catalog_uow_factory() as uow:
        uow.products.remove(await uow.products.get(product.id))
        await uow.commit()

    async with catalog_uow_factory() as uow:
        assert await uow.products.get(product.id) is None
        deleted = await uow.products.get(product.id, include_deleted=True)
        assert deleted.is_deleted
        assert deleted.deleted_by == "test-system"
        deleted.restore()
        await uow.commit()

    async with catalog_uow_factory() as uow:
        restored = await uow.products.get(product.id)

    assert restored is not None
    assert not restored.is_deleted


async def test_list_page_filters_by_category_and_skips_deleted(catalog_uow_factory):
    mug = new_product("Mug", categories=("Kitchen",))
    lamp = new_product("Lamp", categories=("Lighting",))
    bowl = new_product("Bowl", categories=("kitchen", "Gifts"))
    gone = new_product("Glass", categories=("Kitchen",))
    async with catalog_uow_factory() as uow:
        for product in (mug, lamp, bowl, gone):
            uow.products.add(product)
        await uow.commit()

    async with catalog_uow_factory() as uow:
        uow.products.remove(await uow.products.get(gone.id))
        await uow.commit()

    async with catalog_uow_factory() as uow:
        kitchen, total = await uow.products.list_page(category="KITCHEN")
        everything, grand_total = await uow.products.list_page(page=1, page_size=2)

    assert [p.name for p in kitchen] == ["Bowl", "Mug"]
    assert total == 2
    assert [p.name for p in everything] == ["Bowl", "Lamp"]
    assert grand_total == 3


async def test_failed_commit_dispatches_nothing(catalog_uow_factory, dispatcher):
    seen = []

    async def record(event):
        seen.append(event)

    dispatcher.register(ProductCreatedEvent, record)
    product = new_product()
    async with catalog_uow_factory() as uow:
        uow.products.add(product)
        await uow.commit()
    assert len(seen) == 1

    duplicate = Product.create(
        name="Copy",
        description="Same id",
        price=Decimal("5.00"),
        image_file="copy.png",
        id=product.id,
    )
    with pytest.raises(IntegrityError):
        async with catalog_uow_factory() as uow:
            uow.products.add(duplicate)
            await uow.commit()

    assert len(seen) == 1
    async with catalog_uow_factory() as uow:
        assert (await uow.products.get(product.id)).name == "Espresso Cup"


async def test_failed_price_update_commit_publishes_nothing(catalog_uow_factory, dispatcher, bus):
    dispatcher.register(ProductPriceChangedEvent, ProductPriceChangedBridgeHandler(bus))
    product = new_product()
    other = new_product("Saucer")
    async with catalog_uow_factory() as uow:
        uow.products.add(product)
        uow.products.add(other)
        await uow.commit()

    clash = Product.create(
        name="Clash",
        description="Same id as the saucer",
        price=Decimal("5.00"),
        image_file="clash.png",
        id=other.id,
    )
    with pytest.raises(IntegrityError):
        async with catalog_uow_factory() as uow:
            loaded = await uow.products.get(product.id)
            loaded.update_price(Decimal("80.00"))
            uow.products.add(clash)
            await uow.commit()

    assert bus.published == []
    async with catalog_uow_factory() as uow:
        assert (await uow.products.get(product.id)).price == Decimal("100.00")


class UnreachableBus:
    def __init__(self) -> None:
        self.attempts = 0

    async def publish(self, event) -> None:
        self.attempts += 1
        raise ConnectionError("broker unreachable")


async def test_publish_failure_does_not_undo_the_commit(catalog_uow_factory, dispatcher):
    broken = UnreachableBus()
    dispatcher.register(ProductPriceChangedEvent, ProductPriceChangedBridgeHandler(broken))
    product = new_product()
    async with catalog_uow_factory() as uow:
        uow.products.add(product)
        await uow.commit()

    async with catalog_uow_factory() as uow:
        loaded = await uow.products.get(product.id)
        loaded.update_price(Decimal("80.00"))
        await uow.commit()

    assert broken.attempts == 1
    async with catalog_uow_factory() as uow:
        assert (await uow.products.get(product.id)).price == Decimal("80.00")


async def test_unknown_product_is_none(catalog_uow_factory):
    async with catalog_uow_factory() as uow:
        assert await uow.products.get(uuid4()) is None
