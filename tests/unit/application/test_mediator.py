from __future__ import annotations

from dataclasses import dataclass

import pytest

from shared.application.base_command import BaseCommand
from shared.application.base_query import BaseQuery
from shared.application.command_handler import CommandHandler
from shared.application.mediator import Mediator
from shared.application.query_handler import QueryHandler

pytestmark = pytest.mark.anyio


@dataclass(frozen=True)
class Ping(BaseCommand):
    value: int


@dataclass(frozen=True)
class CountPings(BaseQuery):
    pass


class PingHandler(CommandHandler[Ping, int]):
    instances = 0

    def __init__(self) -> None:
        PingHandler.instances += 1

    async def handle(self, command: Ping) -> int:
        return command.value * 2


class FailingHandler(CommandHandler[Ping, int]):
    async def handle(self, command: Ping) -> int:
        raise ValueError("nope")


class CountPingsHandler(QueryHandler[CountPings, int]):
    async def handle(self, query: CountPings) -> int:
        return 42


async def test_send_routes_to_a_fresh_handler_per_message():
    mediator = Mediator()
    mediator.register(Ping, PingHandler)
    before = PingHandler.instances

    assert await mediator.send(Ping(value=2)) == 4
    assert await mediator.send(Ping(value=5)) == 10
    assert PingHandler.instances == before + 2


async def test_queries_go_through_the_same_table():
    mediator = Mediator()
    mediator.register(CountPings, CountPingsHandler)
    assert await mediator.send(CountPings()) == 42
    assert mediator.is_registered(CountPings)
    assert not mediator.is_registered(Ping)


async def test_unknown_message_type_raises_lookup_error():
    with pytest.raises(LookupError):
        await Mediator().send(Ping(value=1))


def test_duplicate_registration_is_rejected():
    mediator = Mediator()
    mediator.register(Ping, PingHandler)
    with pytest.raises(ValueError):
        mediator.register(Ping, FailingHandler)


async def test_handler_errors_propagate_to_the_sender():
    mediator = Mediator()
    mediator.register(Ping, FailingHandler)
    with pytest.raises(ValueError, match="nope"):
        await mediator.send(Ping(value=1))


def test_command_metadata_is_keyword_only():
    command = Ping(3, issued_by="alice")
    assert command.issued_by == "alice"
    assert command.command_id is None
