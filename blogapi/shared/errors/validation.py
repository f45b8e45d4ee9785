# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NoReturn, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        if field_path:
            fields_set.add(field_path)

        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
                "msg": error.get("msg", ""),
            }
        )

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    """Re-raise a pydantic failure as a 422 carrying the first field message.

    Pydantic reports errors in field declaration order, so payload models
    declare their fields in the order they should be reported.
    """
    context = format_pydantic_errors(exc)
    errors = context["errors"]
    message = errors[0]["msg"] if errors else "validation_error"
    raise ValidationError(message, context=context) from exc


def parse_payload(model: type[ModelT], payload: Mapping[str, Any]) -> ModelT:
    try:
        return model.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise_validation_error(exc)


__all__ = [
    "format_pydantic_errors",
    "parse_payload",
    "raise_validation_error",
]
