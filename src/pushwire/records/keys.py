"""Key management request and response bodies (upload, query, claim).

Plain structural records.  Composite ``<algorithm>:<device_id>`` mapping
keys use :data:`~pushwire.domain.keys.KeyIdField`, so in memory they are
``KeyId`` values and on the wire they are strings.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, Field, PlainSerializer, PlainValidator

from pushwire.domain.errors import InvalidOneTimeKeyError
from pushwire.domain.keys import AlgorithmField, KeyIdField
from pushwire.domain.validation import decode_model

Signatures = dict[str, dict[KeyIdField, str]]
"""Signatures keyed by user id, then by composite key id."""


class UnsignedDeviceInfo(BaseModel):
    """Data added by intermediate servers, not covered by the signatures."""

    model_config = {"frozen": True}

    device_display_name: str


class DeviceKeys(BaseModel):
    """Identity keys for a device."""

    model_config = {"frozen": True}

    user_id: str
    device_id: str
    algorithms: list[str]
    keys: dict[KeyIdField, str]
    signatures: Signatures
    unsigned: UnsignedDeviceInfo | None = None


class SignedKey(BaseModel):
    """A ``signed_curve25519`` one-time key with its signatures."""

    model_config = {"frozen": True}

    key: str
    signatures: Signatures


def decode_one_time_key(raw: Any) -> SignedKey | str:
    """Decode an untagged one-time key: a string is a plain key, an object is signed.

    Raises:
        InvalidOneTimeKeyError: *raw* is neither a string nor an object.
    """
    if isinstance(raw, SignedKey | str):
        return raw
    if isinstance(raw, dict):
        return decode_model(SignedKey, raw)
    raise InvalidOneTimeKeyError(raw)


def encode_one_time_key(key: SignedKey | str) -> Any:
    if isinstance(key, SignedKey):
        return key.model_dump(mode="json")
    return key


OneTimeKey = Annotated[
    SignedKey | str,
    PlainValidator(decode_one_time_key),
    PlainSerializer(encode_one_time_key, return_type=Any),
]


# --- POST /keys/upload ---


class UploadKeysRequest(BaseModel):
    """Publishes end-to-end encryption keys for the device."""

    model_config = {"frozen": True}

    device_keys: DeviceKeys | None = None
    one_time_keys: dict[KeyIdField, OneTimeKey] | None = None


class UploadKeysResponse(BaseModel):
    model_config = {"frozen": True}

    # Unclaimed one-time keys held on the server, per algorithm.
    one_time_key_counts: dict[AlgorithmField, int]


# --- POST /keys/query ---


class QueryKeysRequest(BaseModel):
    """Requests the current devices and identity keys for the given users.

    An empty device list for a user means all of that user's devices.
    """

    model_config = {"frozen": True}

    timeout: int | None = Field(default=None, ge=0)
    device_keys: dict[str, list[str]]
    token: str | None = None


class QueryKeysResponse(BaseModel):
    model_config = {"frozen": True}

    # Unreachable remote servers, keyed by server name.
    failures: dict[str, Any] = Field(default_factory=dict)
    device_keys: dict[str, dict[str, DeviceKeys]] = Field(default_factory=dict)


# --- POST /keys/claim ---


class ClaimKeysRequest(BaseModel):
    """Claims one-time keys for use in pre-key messages."""

    model_config = {"frozen": True}

    timeout: int | None = Field(default=None, ge=0)
    one_time_keys: dict[str, dict[str, AlgorithmField]]


class ClaimKeysResponse(BaseModel):
    model_config = {"frozen": True}

    failures: dict[str, Any] = Field(default_factory=dict)
    one_time_keys: dict[str, dict[str, dict[KeyIdField, OneTimeKey]]] = Field(
        default_factory=dict
    )
