"""CodecService: decode, encode, and normalize wire payloads by name.

Wraps the pure codecs in :mod:`pushwire.domain` and the records in
:mod:`pushwire.records` behind a single registry keyed by payload type
(``"action"``, ``"ruleset"``, ``"claim_keys_response"``, ...).

Decode failures never raise out of this layer: they become a failed
:class:`ServiceResult` whose error code is the codec error kind and whose
detail holds the offending token or field name.
"""

from __future__ import annotations

import functools
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, RootModel

from pushwire.domain.actions import SetTweak, SimpleAction, decode_action, encode_action
from pushwire.domain.conditions import PushCondition, decode_condition, encode_condition
from pushwire.domain.errors import CodecError
from pushwire.domain.keys import KeyId, coerce_key_id, encode_key_id
from pushwire.domain.rules import (
    PushRule,
    Ruleset,
    decode_push_rule,
    decode_ruleset,
    encode_push_rule,
    encode_ruleset,
)
from pushwire.domain.validation import decode_model
from pushwire.records.keys import (
    ClaimKeysRequest,
    ClaimKeysResponse,
    QueryKeysRequest,
    QueryKeysResponse,
    UploadKeysRequest,
    UploadKeysResponse,
)
from pushwire.records.login import GetLoginTypesResponse
from pushwire.records.notifications import GetNotificationsRequest, GetNotificationsResponse
from pushwire.records.pushers import Pusher
from pushwire.records.pushrules import DeviceRulesResponse, GetPushRulesResponse
from pushwire.services.result import ServiceError, ServiceResult
from pushwire.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayloadCodec:
    """Decode/encode pair for one payload type plus a short summary builder."""

    decode: Callable[[Any], Any]
    encode: Callable[[Any], Any]
    summarize: Callable[[Any], dict[str, Any]]


# ---------------------------------------------------------------------------
# Summaries (human output)
# ---------------------------------------------------------------------------


def _summarize_key_id(key_id: KeyId) -> dict[str, Any]:
    return {"algorithm": key_id.algorithm.value, "device_id": key_id.device_id}


def _summarize_action(action: SimpleAction | SetTweak) -> dict[str, Any]:
    if isinstance(action, SimpleAction):
        return {"variant": action.value}
    return {
        "variant": "set_tweak",
        "tweak": encode_action(action)["set_tweak"],
        "has_value": action.value is not None,
    }


def _summarize_condition(condition: PushCondition) -> dict[str, Any]:
    return {"kind": condition.kind}


def _summarize_rule(rule: PushRule) -> dict[str, Any]:
    return {
        "rule_id": rule.rule_id,
        "enabled": rule.enabled,
        "actions": len(rule.actions),
        "conditions": len(rule.conditions or []),
    }


def _summarize_ruleset(ruleset: Ruleset) -> dict[str, Any]:
    return {name: len(rules) for name, rules in ruleset.categories().items()}


def _summarize_model(model: BaseModel) -> dict[str, Any]:
    fields = model.root if isinstance(model, RootModel) else dict(model)
    return {"model": type(model).__name__, "fields": sorted(str(key) for key in fields)}


# ---------------------------------------------------------------------------
# Record helpers
# ---------------------------------------------------------------------------


def encode_record(model: BaseModel) -> Any:
    """Encode a record for the wire: aliases applied, ``None`` fields omitted."""
    to_wire = getattr(model, "to_wire", None)
    if callable(to_wire):
        return to_wire()
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


def _record_codec(model_cls: type[BaseModel]) -> PayloadCodec:
    return PayloadCodec(
        decode=functools.partial(decode_model, model_cls),
        encode=encode_record,
        summarize=_summarize_model,
    )


PAYLOAD_TYPES: dict[str, PayloadCodec] = {
    "key_id": PayloadCodec(coerce_key_id, encode_key_id, _summarize_key_id),
    "action": PayloadCodec(decode_action, encode_action, _summarize_action),
    "condition": PayloadCodec(decode_condition, encode_condition, _summarize_condition),
    "push_rule": PayloadCodec(decode_push_rule, encode_push_rule, _summarize_rule),
    "ruleset": PayloadCodec(decode_ruleset, encode_ruleset, _summarize_ruleset),
    "pushrules_response": _record_codec(GetPushRulesResponse),
    "device_rules": _record_codec(DeviceRulesResponse),
    "pusher": _record_codec(Pusher),
    "notifications_request": _record_codec(GetNotificationsRequest),
    "notifications_response": _record_codec(GetNotificationsResponse),
    "upload_keys_request": _record_codec(UploadKeysRequest),
    "upload_keys_response": _record_codec(UploadKeysResponse),
    "query_keys_request": _record_codec(QueryKeysRequest),
    "query_keys_response": _record_codec(QueryKeysResponse),
    "claim_keys_request": _record_codec(ClaimKeysRequest),
    "claim_keys_response": _record_codec(ClaimKeysResponse),
    "login_types": _record_codec(GetLoginTypesResponse),
}


# ---------------------------------------------------------------------------
# CodecService
# ---------------------------------------------------------------------------


class CodecService:
    """Decode/encode operations over the payload registry.

    Usage::

        result = CodecService().decode("action", {"set_tweak": "sound"})
        if result.ok:
            result.data["value"]  # {"set_tweak": "sound"}
    """

    def __init__(self, payload_types: dict[str, PayloadCodec] | None = None) -> None:
        self._payload_types = payload_types if payload_types is not None else PAYLOAD_TYPES

    @property
    def payload_types(self) -> list[str]:
        return sorted(self._payload_types)

    def decode_value(self, payload_type: str, raw: Any) -> Any:
        """Decode *raw* and return the typed value.

        Raises:
            KeyError: If *payload_type* is not registered.
            CodecError: If *raw* is malformed.
        """
        return self._payload_types[payload_type].decode(raw)

    def encode_value(self, payload_type: str, value: Any) -> Any:
        """Encode an already-valid typed value; never fails for valid values."""
        return self._payload_types[payload_type].encode(value)

    # ------------------------------------------------------------------
    # ServiceResult API
    # ------------------------------------------------------------------

    @traced
    def decode(self, payload_type: str, raw: Any) -> ServiceResult:
        """Decode *raw*; on success ``data`` holds a summary and the canonical wire form."""
        op = f"decode_{payload_type}"
        codec = self._payload_types.get(payload_type)
        if codec is None:
            return self._unknown_type(op, payload_type)

        with trace_span("decode") as span:
            try:
                value = codec.decode(raw)
            except CodecError as exc:
                return self._codec_failure(op, payload_type, exc)
            if span is not None:
                span.annotate("payload_type", payload_type)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "payload_type": payload_type,
                "summary": codec.summarize(value),
                "value": codec.encode(value),
            },
        )

    @traced
    def encode(self, payload_type: str, value: Any) -> ServiceResult:
        """Encode a typed value; ``data["value"]`` holds the wire form."""
        op = f"encode_{payload_type}"
        codec = self._payload_types.get(payload_type)
        if codec is None:
            return self._unknown_type(op, payload_type)
        return ServiceResult(
            ok=True,
            op=op,
            data={"payload_type": payload_type, "value": codec.encode(value)},
        )

    @traced
    def normalize(self, payload_type: str, raw: Any) -> ServiceResult:
        """Decode then re-encode *raw*, reporting whether the wire form changed."""
        op = f"normalize_{payload_type}"
        codec = self._payload_types.get(payload_type)
        if codec is None:
            return self._unknown_type(op, payload_type)
        try:
            value = codec.decode(raw)
        except CodecError as exc:
            return self._codec_failure(op, payload_type, exc)

        canonical = codec.encode(value)
        warnings: list[str] = []
        if canonical != raw:
            warnings.append("Wire form changed during normalization")
        return ServiceResult(
            ok=True,
            op=op,
            data={"payload_type": payload_type, "value": canonical},
            warnings=warnings,
        )

    def decode_json(self, payload_type: str, text: str) -> ServiceResult:
        """Parse JSON *text* and decode it as *payload_type*."""
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            return ServiceResult(
                ok=False,
                op=f"decode_{payload_type}",
                error=ServiceError(
                    code="INVALID_JSON",
                    message=f"Input is not valid JSON: {exc.msg}",
                    detail={"line": exc.lineno, "column": exc.colno},
                ),
            )
        return self.decode(payload_type, raw)

    # ------------------------------------------------------------------
    # Failure helpers
    # ------------------------------------------------------------------

    def _codec_failure(self, op: str, payload_type: str, exc: CodecError) -> ServiceResult:
        logger.debug("Decode failed for %s: %s (%s)", payload_type, exc.code, exc)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_codec_error(exc))

    def _unknown_type(self, op: str, payload_type: str) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="UNKNOWN_PAYLOAD_TYPE",
                message=f"Unknown payload type: {payload_type!r}",
                detail={"known": self.payload_types},
            ),
        )
