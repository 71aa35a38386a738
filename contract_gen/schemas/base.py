"""Shared helpers for step input schemas."""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from contract_gen.exceptions import FieldValidationError

ROOT_FIELD = "__root__"

SchemaT = TypeVar("SchemaT", bound="StepSchema")


class StepSchema(BaseModel):
    """Base for raw step input; unknown keys are ignored."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    def to_model(self) -> Any:
        raise NotImplementedError


def collect_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Flatten pydantic errors into ``{"field.path": [messages]}``."""
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        key = ".".join(str(part) for part in err["loc"]) or ROOT_FIELD
        if err["type"] == "value_error" and "error" in err.get("ctx", {}):
            message = str(err["ctx"]["error"])
        else:
            message = err["msg"]
        errors.setdefault(key, []).append(message)
    return errors


def validate_input(schema: type[SchemaT], raw: Mapping[str, Any] | None) -> SchemaT:
    """Validate ``raw`` against ``schema`` as a whole.

    Raises
    ------
    FieldValidationError
        With every field-level message; nothing is partially normalized.
    """
    try:
        return schema.model_validate(dict(raw or {}))
    except ValidationError as exc:
        raise FieldValidationError(collect_errors(exc)) from exc


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value
