"""ServiceResult and ServiceError: the service-layer contract.

INVARIANT: CodecService methods never raise for bad input; they return a
ServiceResult whose ``error.code`` is the codec error kind.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from pushwire.domain.errors import CodecError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``detail`` carries the offending raw token or field name; ``path`` is the
    dotted location of the failing element inside the payload.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    path: str = ""
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_codec_error(cls, exc: CodecError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, path=exc.path, detail=exc.detail)


class ServiceResult(BaseModel):
    """Universal return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"decode_action"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry, payload type).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None
