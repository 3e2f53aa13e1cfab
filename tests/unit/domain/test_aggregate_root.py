from __future__ import annotations

from dataclasses import dataclass

import pytest

from shared.domain.base_aggregate_root import BaseAggregateRoot
from shared.domain.base_entity import SoftDeletable
from shared.domain.domain_event import DomainEvent


@dataclass(frozen=True)
class SomethingHappened(DomainEvent):
    value: int


class Thing(BaseAggregateRoot):
    def touch(self, value: int) -> None:
        self.add_domain_event(SomethingHappened(value=value))


def test_events_are_kept_in_raise_order():
    thing = Thing()
    thing.touch(1)
    thing.touch(2)

    assert [e.value for e in thing.domain_events] == [1, 2]
    assert thing.has_domain_events


def test_drain_empties_buffer_and_does_not_resurrect_events():
    thing = Thing()
    thing.touch(1)

    first = thing.drain_events()
    assert [e.value for e in first] == [1]
    assert thing.domain_events == ()
    assert not thing.has_domain_events

    thing.touch(2)
    second = thing.drain_events()
    assert [e.value for e in second] == [2]
    assert thing.drain_events() == []


def test_event_carries_id_timestamp_and_type():
    event = SomethingHappened(value=3)

    assert event.event_type == "SomethingHappened"
    assert event.occurred_on.tzinfo is not None
    assert SomethingHappened(value=3).event_id != event.event_id
    assert event.to_dict()["value"] == 3


def test_entities_compare_by_identity():
    a = Thing()
    b = Thing(id=a.id)

    assert a == b
    assert hash(a) == hash(b)
    assert a != Thing()


def test_soft_deletable_requires_a_soft_delete_override():
    class Forgetful(BaseAggregateRoot, SoftDeletable):
        pass

    with pytest.raises(TypeError):
        Forgetful()
