"""Push rule actions: a hybrid string-or-object wire encoding.

Three actions travel as bare strings, ``set_tweak`` travels as an object::

    "notify"
    "dont_notify"
    "coalesce"
    {"set_tweak": "sound", "value": "default"}
    {"set_tweak": "highlight"}

Decoding therefore sniffs the JSON kind of the input first (string vs.
object) and only then looks at content.  Within an object, field order is
not significant and unknown fields are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from pushwire.domain.errors import (
    InvalidActionShapeError,
    InvalidSimpleActionError,
    InvalidTweakKindError,
    MissingTweakDiscriminatorError,
)

SET_TWEAK_KEY = "set_tweak"
VALUE_KEY = "value"


class SimpleAction(StrEnum):
    """Actions without a payload."""

    NOTIFY = "notify"
    DONT_NOTIFY = "dont_notify"
    COALESCE = "coalesce"


class Tweak(StrEnum):
    """Tweaks defined by the protocol."""

    SOUND = "sound"
    HIGHLIGHT = "highlight"


_WELL_KNOWN_TWEAKS = frozenset(tweak.value for tweak in Tweak)


@dataclass(frozen=True, slots=True)
class CustomTweak:
    """Any homeserver-specific tweak name outside :class:`Tweak`."""

    name: str

    def __post_init__(self) -> None:
        if self.name in _WELL_KNOWN_TWEAKS:
            msg = f"{self.name!r} is a well-known tweak; use Tweak({self.name!r})"
            raise ValueError(msg)


TweakKind = Tweak | CustomTweak


def tweak_from_token(token: str) -> TweakKind:
    """Map a ``set_tweak`` token to a well-known tweak or a custom one."""
    try:
        return Tweak(token)
    except ValueError:
        return CustomTweak(token)


def tweak_to_token(kind: TweakKind) -> str:
    if isinstance(kind, CustomTweak):
        return kind.name
    return kind.value


@dataclass(frozen=True, slots=True)
class SetTweak:
    """Sets an entry in the ``tweaks`` dictionary sent to the push gateway.

    ``value`` is opaque JSON and is not interpreted here; ``None`` means the
    tweak carries no value.
    """

    kind: TweakKind
    value: Any = None

    def __post_init__(self) -> None:
        if isinstance(self.kind, str) and not isinstance(self.kind, Tweak):
            object.__setattr__(self, "kind", tweak_from_token(self.kind))


Action = SimpleAction | SetTweak


def encode_action(action: Action) -> str | dict[str, Any]:
    """Encode an action to its wire form.

    Simple actions become bare strings.  ``SetTweak`` becomes an object whose
    ``value`` field is present only when the tweak has a value.
    """
    if isinstance(action, SetTweak):
        encoded: dict[str, Any] = {SET_TWEAK_KEY: tweak_to_token(action.kind)}
        if action.value is not None:
            encoded[VALUE_KEY] = action.value
        return encoded
    return SimpleAction(action).value


def decode_action(raw: Any) -> Action:
    """Decode a wire action by dispatching on its JSON kind.

    Raises:
        InvalidSimpleActionError: A string that is not a known simple action.
        InvalidTweakKindError: ``set_tweak`` present but not a string.
        MissingTweakDiscriminatorError: An object without ``set_tweak``.
        InvalidActionShapeError: Neither a string nor an object.
    """
    if isinstance(raw, SimpleAction | SetTweak):
        return raw
    if isinstance(raw, str):
        return _decode_simple(raw)
    if isinstance(raw, dict):
        return _decode_tweak(raw)
    raise InvalidActionShapeError(raw)


def _decode_simple(token: str) -> SimpleAction:
    try:
        return SimpleAction(token)
    except ValueError:
        raise InvalidSimpleActionError(token) from None


def _decode_tweak(fields: dict[str, Any]) -> SetTweak:
    kind: TweakKind | None = None
    value: Any = None
    for key, item in fields.items():
        if key == SET_TWEAK_KEY:
            if not isinstance(item, str):
                raise InvalidTweakKindError(item)
            kind = tweak_from_token(item)
        elif key == VALUE_KEY:
            value = item
    if kind is None:
        raise MissingTweakDiscriminatorError(sorted(str(k) for k in fields))
    return SetTweak(kind, value)


ActionField = Annotated[
    Action,
    PlainValidator(decode_action),
    PlainSerializer(encode_action, return_type=Any),
]
