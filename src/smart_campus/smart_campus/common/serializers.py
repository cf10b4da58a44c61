from __future__ import annotations

import dataclasses
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Iterable, Optional

from pydantic.alias_generators import to_camel


def to_json_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, dict):
        return {k: to_json_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    return value


def to_api_dict(entity: Any, *, exclude: Optional[Iterable[str]] = None) -> dict:
    """Serialize a domain dataclass into the camelCase JSON shape of the API."""

    skip = set(exclude or ())
    out: dict = {}
    for f in dataclasses.fields(entity):
        if f.name in skip:
            continue
        out[to_camel(f.name)] = to_json_value(getattr(entity, f.name))
    return out


def to_api_list(entities: Iterable[Any]) -> list[dict]:
    return [to_api_dict(e) for e in entities]
