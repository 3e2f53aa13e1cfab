"""
Mediator
Routes each command or query to exactly one registered handler
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Protocol, Type

from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class MessageHandler(Protocol):
    def __call__(self, message: Any) -> Awaitable[Any]: ...


HandlerFactory = Callable[[], MessageHandler]


class Mediator:
    """
    Explicit message-type → handler-factory table.

    A factory is called once per ``send`` so every request gets a fresh
    handler (and with it a fresh unit of work).

    Attributes:
        _factories: Registered factories keyed by exact message class
    """

    def __init__(self) -> None:
        self._factories: Dict[Type[Any], HandlerFactory] = {}

    def register(self, message_type: Type[Any], factory: HandlerFactory) -> None:
        """
        Register the single handler factory for a command or query type.

        Raises:
            ValueError: If the type already has a handler
        """
        if message_type in self._factories:
            raise ValueError(f"Handler already registered for {message_type.__name__}")
        self._factories[message_type] = factory
        logger.debug("Registered handler", message_type=message_type.__name__)

    def is_registered(self, message_type: Type[Any]) -> bool:
        return message_type in self._factories

    async def send(self, message: Any) -> Any:
        """
        Resolve the handler for ``type(message)`` and await it.

        Raises:
            LookupError: If no handler is registered for the message type
        """
        factory = self._factories.get(type(message))
        if factory is None:
            raise LookupError(f"No handler registered for {type(message).__name__}")
        handler = factory()
        return await handler(message)
