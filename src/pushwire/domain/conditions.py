"""Push conditions: an internally tagged union keyed by ``kind``.

The discriminator is always read first and routes to a per-variant
structural decoder.  Each variant declares its wire ``kind`` token and its
ordered set of required string fields::

    {"kind": "event_match", "key": "content.body", "pattern": "*foo*"}
    {"kind": "contains_display_name"}
    {"kind": "room_member_count", "is": ">=2"}
    {"kind": "sender_notification_permission", "key": "room"}

Conditions describe representation only; matching them against an event is
not this module's concern.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, ClassVar

from pydantic import PlainSerializer, PlainValidator

from pushwire.domain.errors import (
    InvalidConditionShapeError,
    InvalidFieldError,
    MissingFieldError,
    UnknownConditionKindError,
)

KIND_KEY = "kind"


@dataclass(frozen=True, slots=True)
class EventMatch:
    """Glob-style pattern match on a dot-separated field of the event."""

    kind: ClassVar[str] = "event_match"
    wire_fields: ClassVar[tuple[tuple[str, str], ...]] = (("key", "key"), ("pattern", "pattern"))

    key: str
    pattern: str


@dataclass(frozen=True, slots=True)
class ContainsDisplayName:
    """Matches messages whose body contains the owner's display name."""

    kind: ClassVar[str] = "contains_display_name"
    wire_fields: ClassVar[tuple[tuple[str, str], ...]] = ()


@dataclass(frozen=True, slots=True)
class RoomMemberCount:
    """Matches the current number of members in the room.

    ``is_`` is a decimal integer optionally prefixed by ``==``, ``<``, ``>``,
    ``>=`` or ``<=``.  It is kept verbatim; no numeric parsing happens here.
    """

    kind: ClassVar[str] = "room_member_count"
    wire_fields: ClassVar[tuple[tuple[str, str], ...]] = (("is", "is_"),)

    is_: str


@dataclass(frozen=True, slots=True)
class SenderNotificationPermission:
    """Requires the sender to hold the power level named by ``key``."""

    kind: ClassVar[str] = "sender_notification_permission"
    wire_fields: ClassVar[tuple[tuple[str, str], ...]] = (("key", "key"),)

    key: str


PushCondition = EventMatch | ContainsDisplayName | RoomMemberCount | SenderNotificationPermission

CONDITION_KINDS: dict[str, type[PushCondition]] = {
    cls.kind: cls
    for cls in (EventMatch, ContainsDisplayName, RoomMemberCount, SenderNotificationPermission)
}


def encode_condition(condition: PushCondition) -> dict[str, Any]:
    """Encode a condition: ``kind`` first, then the variant's fields in order."""
    encoded: dict[str, Any] = {KIND_KEY: condition.kind}
    for wire_name, attr in condition.wire_fields:
        encoded[wire_name] = getattr(condition, attr)
    return encoded


def decode_condition(raw: Any) -> PushCondition:
    """Decode a condition object.

    Unknown extra fields are ignored.

    Raises:
        InvalidConditionShapeError: *raw* is not an object.
        UnknownConditionKindError: ``kind`` is absent or not recognised.
        MissingFieldError: A field required by the variant is absent.
        InvalidFieldError: A required field is present but not a string.
    """
    if isinstance(raw, tuple(CONDITION_KINDS.values())):
        return raw
    if not isinstance(raw, dict):
        raise InvalidConditionShapeError(raw)

    kind = raw.get(KIND_KEY)
    cls = CONDITION_KINDS.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise UnknownConditionKindError(kind)

    values: dict[str, str] = {}
    for wire_name, attr in cls.wire_fields:
        if wire_name not in raw:
            raise MissingFieldError(wire_name)
        value = raw[wire_name]
        if not isinstance(value, str):
            raise InvalidFieldError(wire_name, f"expected a string, got {type(value).__name__}")
        values[attr] = value
    return cls(**values)


ConditionField = Annotated[
    PushCondition,
    PlainValidator(decode_condition),
    PlainSerializer(encode_condition, return_type=dict[str, Any]),
]
