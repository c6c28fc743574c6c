"""Key algorithms and composite ``<algorithm>:<device_id>`` key ids.

Key management payloads use colon-delimited strings as mapping keys, for
example ``{"signed_curve25519:AAAAHQ": {...}}``.  The wire form reserves the
first colon as the only separator:

- ``"ed25519:JLAFKJWSCS"`` decodes to ``KeyId(ED25519, "JLAFKJWSCS")``.
- ``"ed25519"`` is missing a separator.
- ``"ed25519:AB:CD"`` is rejected, never read as a device id containing ':'.

INVARIANT: ``decode_key_id(encode_key_id(k)) == k`` for every constructible
``KeyId``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from pushwire.domain.errors import (
    InvalidRecordError,
    MissingSeparatorError,
    TooManySeparatorsError,
    UnknownAlgorithmError,
)

KEY_ID_SEPARATOR = ":"


class KeyAlgorithm(StrEnum):
    """The basic key algorithms of the key management endpoints."""

    ED25519 = "ed25519"
    CURVE25519 = "curve25519"
    SIGNED_CURVE25519 = "signed_curve25519"


def algorithm_to_token(algorithm: KeyAlgorithm) -> str:
    """Return the canonical lowercase token for *algorithm*."""
    return algorithm.value


def algorithm_from_token(token: str) -> KeyAlgorithm:
    """Parse an algorithm token.

    Exact, case-sensitive match: no trimming and no case folding.

    Raises:
        UnknownAlgorithmError: If *token* is not a recognised algorithm.
    """
    if isinstance(token, KeyAlgorithm):
        return token
    if not isinstance(token, str):
        raise UnknownAlgorithmError(repr(token))
    try:
        return KeyAlgorithm(token)
    except ValueError:
        raise UnknownAlgorithmError(token) from None


@dataclass(frozen=True, slots=True)
class KeyId:
    """An algorithm and a device id, combined on the wire with a ':'."""

    algorithm: KeyAlgorithm
    device_id: str

    def __post_init__(self) -> None:
        if not isinstance(self.algorithm, KeyAlgorithm):
            object.__setattr__(self, "algorithm", algorithm_from_token(self.algorithm))
        if KEY_ID_SEPARATOR in self.device_id:
            msg = f"Device id {self.device_id!r} must not contain {KEY_ID_SEPARATOR!r}"
            raise ValueError(msg)

    @classmethod
    def parse(cls, raw: str) -> KeyId:
        """Alias for :func:`decode_key_id`."""
        return decode_key_id(raw)

    def __str__(self) -> str:
        return encode_key_id(self)


def encode_key_id(key_id: KeyId) -> str:
    """Combine an algorithm and a device id with a ':'."""
    return f"{algorithm_to_token(key_id.algorithm)}{KEY_ID_SEPARATOR}{key_id.device_id}"


def decode_key_id(raw: str) -> KeyId:
    """Parse an algorithm and a device id from a ':'-combined string.

    The device id is returned verbatim; it is not validated further.

    Raises:
        MissingSeparatorError: *raw* contains no ':'.
        TooManySeparatorsError: *raw* contains more than one ':'.
        UnknownAlgorithmError: The left segment is not a known algorithm.
    """
    parts = raw.split(KEY_ID_SEPARATOR)
    if len(parts) == 1:
        raise MissingSeparatorError(raw)
    if len(parts) > 2:
        raise TooManySeparatorsError(raw)
    algorithm_token, device_id = parts
    return KeyId(algorithm_from_token(algorithm_token), device_id)


# ---------------------------------------------------------------------------
# Pydantic field types
# ---------------------------------------------------------------------------


def coerce_key_id(value: Any) -> KeyId:
    """Accept a ``KeyId`` as-is or decode its string form."""
    if isinstance(value, KeyId):
        return value
    if not isinstance(value, str):
        msg = f"Key id must be a string, got {type(value).__name__}"
        raise InvalidRecordError(msg, detail={"value": value})
    return decode_key_id(value)


KeyIdField = Annotated[
    KeyId,
    PlainValidator(coerce_key_id),
    PlainSerializer(encode_key_id, return_type=str),
]
"""A ``KeyId`` that travels as its string form; valid as a ``dict`` key type."""

AlgorithmField = Annotated[
    KeyAlgorithm,
    PlainValidator(algorithm_from_token),
    PlainSerializer(algorithm_to_token, return_type=str),
]
