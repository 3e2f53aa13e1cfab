from __future__ import annotations

import json
from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from shared.messaging.events import ProductPriceChangedIntegrationEvent
from shared.messaging.integration_event import IntegrationEvent, from_message, integration_event


def make_event(**overrides) -> ProductPriceChangedIntegrationEvent:
    data = dict(
        product_id=uuid4(),
        name="Espresso Machine",
        category=["Coffee"],
        description="Fifteen bar pump",
        image_file="espresso.png",
        price=Decimal("80"),
    )
    data.update(overrides)
    return ProductPriceChangedIntegrationEvent(**data)


def test_wire_shape_is_flat_camel_case():
    event = make_event()

    message = json.loads(event.to_json())

    assert message["eventType"] == "ProductPriceChangedIntegrationEvent"
    assert message["productId"] == str(event.product_id)
    assert message["imageFile"] == "espresso.png"
    assert message["category"] == ["Coffee"]
    assert message["price"] == "80.00"
    assert set(message) >= {"eventId", "creationDate"}


def test_from_message_rebuilds_the_registered_class():
    event = make_event(price=Decimal("19.999"))

    parsed = from_message(event.to_json())

    assert isinstance(parsed, ProductPriceChangedIntegrationEvent)
    assert parsed.event_id == event.event_id
    assert parsed.price == Decimal("20.00")
    assert parsed.product_id == event.product_id


def test_large_price_survives_the_wire_exactly():
    event = make_event(price=Decimal("1234567890123456.78"))

    parsed = from_message(event.to_json())

    assert parsed.price == Decimal("1234567890123456.78")


@pytest.mark.parametrize("price", ["0", "-5.00"])
def test_non_positive_price_is_unreadable(price):
    message = make_event().to_message()
    message["price"] = price

    with pytest.raises(ValidationError):
        from_message(message)


def test_unknown_fields_are_ignored():
    message = make_event().to_message()
    message["addedLater"] = {"anything": True}

    parsed = from_message(message)

    assert parsed.event_type == "ProductPriceChangedIntegrationEvent"


def test_unknown_event_type_is_a_lookup_error():
    with pytest.raises(LookupError):
        from_message({"eventType": "NoSuchEvent"})
    with pytest.raises(LookupError):
        from_message("{}")


def test_registering_two_classes_under_one_name_fails():
    with pytest.raises(ValueError):

        @integration_event
        class ProductPriceChangedIntegrationEvent(IntegrationEvent):  # noqa: F811
            pass
