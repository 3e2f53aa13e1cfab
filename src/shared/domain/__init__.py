"""
Shared Domain Layer
Pure domain contracts with no framework dependencies
"""
from shared.domain.base_aggregate_root import BaseAggregateRoot
from shared.domain.base_entity import BaseEntity, SoftDeletable
from shared.domain.domain_event import DomainEvent, utc_now

__all__ = [
    "BaseEntity",
    "BaseAggregateRoot",
    "SoftDeletable",
    "DomainEvent",
    "utc_now",
]
