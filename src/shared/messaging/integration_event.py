"""
Integration Event Base
Serializable cross-module notification with a flat camelCase wire shape
"""
from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, Type, TypeVar, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from shared.domain.domain_event import utc_now

TIntegrationEvent = TypeVar("TIntegrationEvent", bound="IntegrationEvent")

_REGISTRY: Dict[str, Type["IntegrationEvent"]] = {}


class IntegrationEvent(BaseModel):
    """
    Base class for integration events.

    Wire format (JSON object):
        eventId: UUID string
        creationDate: UTC ISO-8601 timestamp
        eventType: concrete class name
        ...event-specific camelCase fields

    Unknown fields are ignored on read so producers can add fields later.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    event_id: UUID = Field(default_factory=uuid4)
    creation_date: datetime = Field(default_factory=utc_now)

    @computed_field(alias="eventType")  # type: ignore[prop-decorator]
    @property
    def event_type(self) -> str:
        return type(self).__name__

    def to_message(self) -> Dict[str, Any]:
        """Wire representation as a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return json.dumps(self.to_message(), separators=(",", ":"))


def integration_event(cls: Type[TIntegrationEvent]) -> Type[TIntegrationEvent]:
    """Class decorator adding an event to the eventType → class registry."""
    existing = _REGISTRY.get(cls.__name__)
    if existing is not None and existing is not cls:
        raise ValueError(f"Integration event type {cls.__name__} already registered")
    _REGISTRY[cls.__name__] = cls
    return cls


def resolve_event_type(event_type: str) -> Type[IntegrationEvent]:
    try:
        return _REGISTRY[event_type]
    except KeyError:
        raise LookupError(f"Unknown integration event type: {event_type}") from None


def from_message(message: Union[str, bytes, Dict[str, Any]]) -> IntegrationEvent:
    """
    Parse a wire message into its registered integration event class.

    Raises:
        LookupError: If ``eventType`` is missing or unknown
        pydantic.ValidationError: If the payload does not match the class
    """
    data = json.loads(message) if isinstance(message, (str, bytes)) else message
    if not isinstance(data, dict):
        raise ValueError("Integration event message must be a JSON object")
    event_type = data.get("eventType")
    if not isinstance(event_type, str):
        raise LookupError("Integration event message has no eventType")
    return resolve_event_type(event_type).model_validate(data)
