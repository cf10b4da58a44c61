"""Declarative description of a tenant-owned entity.

One ``EntityDefinition`` per table ties together the storage layout (table,
JSON/bool columns, unique keys), the domain dataclass, the hand-written
pydantic schema used to validate writes, and the activity-log template.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Type

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from ..core.exceptions import ConflictError

# Columns the store manages itself; they never come from a payload.
MANAGED_COLUMNS = frozenset({"id", "institution_id", "created_at", "updated_at"})


@dataclass(frozen=True)
class ActivityTemplate:
    """How a mutation of this entity is summarized in the activity log."""

    entity: str
    describe: Callable[[Any], str]
    metadata: Callable[[Any], dict] = lambda e: {}
    create_action: Optional[str] = None

    def action_for(self, verb: str) -> str:
        if verb == "created" and self.create_action:
            return self.create_action
        return f"{self.entity}_{verb}"


@dataclass(frozen=True)
class EntityDefinition:
    name: str
    table: str
    model: Type[Any]
    schema: Type[BaseModel]
    json_columns: frozenset = field(default_factory=frozenset)
    bool_columns: frozenset = field(default_factory=frozenset)
    unique_columns: tuple = ()
    activity: Optional[ActivityTemplate] = None

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(self.model))

    @property
    def writable_columns(self) -> tuple[str, ...]:
        return tuple(c for c in self.columns if c not in MANAGED_COLUMNS)

    @property
    def label(self) -> str:
        return self.name.replace("_", " ")

    def build(self, row: dict) -> Any:
        return self.model(**{c: row.get(c) for c in self.columns})

    def duplicate_error(self, values: Mapping[str, Any]) -> ConflictError:
        """Conflict naming the unique field(s) of ``values`` by their JSON name."""

        fields = [to_camel(c) for c in self.unique_columns if c in values] or [to_camel(c) for c in self.unique_columns]
        if not fields:
            return ConflictError(f"Duplicate {self.label}")
        return ConflictError(
            f"Duplicate value for {', '.join(fields)}",
            {name: "already exists" for name in fields},
        )
