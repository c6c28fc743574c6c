"""Codec error taxonomy.

Every decode failure raises a :class:`CodecError` subclass.  Each carries a
stable machine-readable ``code``, a human message, and a ``detail`` dict
holding the offending raw token or field name.

``CodecError`` extends :class:`ValueError` so that the codecs can be used as
pydantic validators: pydantic wraps a ``ValueError`` raised inside a
validator into its ``ValidationError`` and keeps the original instance in
the error context, which :func:`pushwire.domain.validation.decode_model` unwraps.
"""

from __future__ import annotations

from typing import Any


class CodecError(ValueError):
    """Base class for every wire decode failure."""

    code: str = "CODEC_ERROR"

    def __init__(
        self,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        loc: tuple[str | int, ...] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = dict(detail or {})
        self.loc = loc

    def at(self, loc: tuple[str | int, ...]) -> CodecError:
        """Prefix *loc* onto this error's location and return it."""
        self.loc = (*loc, *self.loc)
        return self

    @property
    def path(self) -> str:
        """Dotted JSON path of the offending element (empty at the root)."""
        return ".".join(str(part) for part in self.loc)

    def __str__(self) -> str:
        if self.loc:
            return f"{self.path}: {self.message}"
        return self.message


# --- Composite key ids ---


class UnknownAlgorithmError(CodecError):
    code = "UNKNOWN_ALGORITHM"

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown key algorithm: {token!r}", detail={"token": token})
        self.token = token


class MissingSeparatorError(CodecError):
    code = "MISSING_SEPARATOR"

    def __init__(self, raw: str) -> None:
        super().__init__(f"Key id {raw!r} has no ':' separator", detail={"raw": raw})


class TooManySeparatorsError(CodecError):
    code = "TOO_MANY_SEPARATORS"

    def __init__(self, raw: str) -> None:
        super().__init__(
            f"Key id {raw!r} has more than one ':' separator",
            detail={"raw": raw, "separators": raw.count(":")},
        )


# --- Actions ---


class InvalidSimpleActionError(CodecError):
    code = "INVALID_SIMPLE_ACTION"

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown action: {token!r}", detail={"token": token})
        self.token = token


class InvalidTweakKindError(CodecError):
    code = "INVALID_TWEAK_KIND"

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"'set_tweak' must be a string, got {type(value).__name__}",
            detail={"value": value},
        )


class MissingTweakDiscriminatorError(CodecError):
    code = "MISSING_TWEAK_DISCRIMINATOR"

    def __init__(self, keys: list[str]) -> None:
        super().__init__(
            "Action object has no 'set_tweak' field",
            detail={"keys": keys},
        )


class InvalidActionShapeError(CodecError):
    code = "INVALID_ACTION_SHAPE"

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Action must be a string or an object, got {_json_kind(value)}",
            detail={"shape": _json_kind(value)},
        )


# --- Conditions and records ---


class UnknownConditionKindError(CodecError):
    code = "UNKNOWN_CONDITION_KIND"

    def __init__(self, kind: Any) -> None:
        if kind is None:
            message = "Push condition has no 'kind' field"
        else:
            message = f"Unknown push condition kind: {kind!r}"
        super().__init__(message, detail={"kind": kind})
        self.kind = kind


class InvalidConditionShapeError(CodecError):
    code = "INVALID_CONDITION_SHAPE"

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Push condition must be an object, got {_json_kind(value)}",
            detail={"shape": _json_kind(value)},
        )


class MissingFieldError(CodecError):
    code = "MISSING_FIELD"

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required field {name!r}", detail={"field": name})
        self.field = name


class InvalidFieldError(CodecError):
    code = "INVALID_FIELD"

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid field {name!r}: {reason}", detail={"field": name})
        self.field = name


class InvalidOneTimeKeyError(CodecError):
    code = "INVALID_ONE_TIME_KEY"

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"One-time key must be a string or an object, got {_json_kind(value)}",
            detail={"shape": _json_kind(value)},
        )


class InvalidRecordError(CodecError):
    code = "INVALID_RECORD"


def _json_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value (``bool`` checked before numbers)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
