"""
Base Command Contract for CQRS
All commands (write operations) inherit from this
"""
from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class BaseCommand:
    """
    Base class for all commands in the system.

    Commands represent write operations (create, update, delete).
    They are immutable data structures that carry all necessary information.

    Each command type is registered with exactly one handler on the Mediator.

    Example:
        @dataclass(frozen=True)
        class UpdateProductPriceCommand(BaseCommand):
            product_id: UUID
            new_price: Decimal
            reason: str
    """

    # Optional: command metadata
    command_id: UUID | None = field(default=None, kw_only=True)
    issued_by: str | None = field(default=None, kw_only=True)  # Actor who issued the command
