from __future__ import annotations

from typing import Any, Mapping, Type, TypeVar

import pydantic

from ..core.exceptions import ValidationError

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required", {field_name: "required"})
    return value.strip()


def require_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")
    return payload


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "body"


def parse_payload(schema: Type[SchemaT], payload: Any) -> SchemaT:
    """Validate a JSON payload against an entity schema.

    Every failing field is reported, keyed by its JSON (camelCase) name.
    """

    data = require_mapping(payload)
    try:
        return schema.model_validate(dict(data))
    except pydantic.ValidationError as exc:
        fields = {_field_path(err["loc"]): err["msg"] for err in exc.errors()}
        raise ValidationError(
            "Invalid fields: " + ", ".join(sorted(fields)),
            fields,
        ) from exc


def to_aliases(schema: Type[pydantic.BaseModel], payload: Mapping[str, Any]) -> dict[str, Any]:
    """Rename snake_case field names in ``payload`` to the schema's camelCase aliases."""

    aliases = {name: field.alias or name for name, field in schema.model_fields.items()}
    return {aliases.get(key, key): value for key, value in payload.items()}
