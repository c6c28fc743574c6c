"""Bridge between pydantic validation and the codec error taxonomy."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from pushwire.domain.errors import (
    CodecError,
    InvalidFieldError,
    InvalidRecordError,
    MissingFieldError,
)

_SHAPE_ERRORS = frozenset({"model_type", "model_attributes_type", "dataclass_type"})


def decode_model[M: BaseModel](model_cls: type[M], raw: Any) -> M:
    """Validate *raw* into *model_cls*, re-raising failures as a CodecError.

    A codec error raised by a nested field validator surfaces unchanged,
    with the JSON path of the offending element attached.
    """
    try:
        return model_cls.model_validate(raw)
    except ValidationError as exc:
        raise codec_error_from_validation(exc) from exc


def codec_error_from_validation(exc: ValidationError) -> CodecError:
    """Translate the first pydantic error into the codec error taxonomy."""
    first = exc.errors()[0]
    loc = tuple(first["loc"])
    original = first.get("ctx", {}).get("error")
    if isinstance(original, CodecError):
        return original.at(loc)

    error_type = first["type"]
    if error_type in _SHAPE_ERRORS or not loc:
        return InvalidRecordError(first["msg"], loc=loc)
    field_name = str(loc[-2] if loc[-1] == "[key]" and len(loc) > 1 else loc[-1])
    if error_type == "missing":
        return MissingFieldError(field_name).at(loc[:-1])
    return InvalidFieldError(field_name, first["msg"]).at(loc[:-1])
