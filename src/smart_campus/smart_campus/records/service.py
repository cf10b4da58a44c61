from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from pydantic.alias_generators import to_camel

from ..activities.service import ActivityService
from ..common.serializers import to_api_dict
from ..common.validators import parse_payload, require_mapping, to_aliases
from ..core.exceptions import AuthorizationError, NotFoundError
from ..users.model import User
from .definition import MANAGED_COLUMNS, EntityDefinition
from .repository import EntityStore, TenantRepository

logger = logging.getLogger(__name__)


class EntityService:
    """Use cases shared by every tenant-owned entity: list, get, create, update, delete."""

    def __init__(
        self,
        store: EntityStore,
        definition: EntityDefinition,
        activities: Optional[ActivityService] = None,
    ):
        self._store = store
        self._definition = definition
        self._activities = activities

    @property
    def definition(self) -> EntityDefinition:
        return self._definition

    def _repo(self, institution_id: int) -> TenantRepository:
        return self._store.for_tenant(self._definition, int(institution_id))

    def _log(self, actor: User, entity: Any, verb: str) -> None:
        template = self._definition.activity
        if template is None or self._activities is None:
            return
        metadata = {f"{to_camel(template.entity)}Id": entity.id}
        metadata.update(template.metadata(entity))
        self._activities.record(
            institution_id=entity.institution_id,
            user_id=actor.id,
            action=template.action_for(verb),
            description=f"{template.describe(entity)} {verb}",
            metadata=metadata,
        )

    def list(self, institution_id: int) -> Sequence[Any]:
        return self._repo(institution_id).list()

    def list_where(self, institution_id: int, **filters: Any) -> Sequence[Any]:
        return self._repo(institution_id).list_where(**filters)

    def count(self, institution_id: int) -> int:
        return self._repo(institution_id).count()

    def get(self, institution_id: int, entity_id: int) -> Any:
        entity = self._repo(institution_id).get(int(entity_id))
        if entity is None:
            raise NotFoundError(f"{self._definition.label.capitalize()} not found")
        return entity

    def create(self, *, actor: User, payload: Any, institution_id: Optional[int] = None) -> Any:
        data = to_aliases(self._definition.schema, require_mapping(payload))
        if institution_id is not None:
            data["institutionId"] = int(institution_id)

        values = parse_payload(self._definition.schema, data).model_dump()
        tenant_id = values.pop("institution_id")

        entity = self._repo(tenant_id).create(values)
        logger.info("%s %s created in institution %s", self._definition.name, entity.id, tenant_id)
        self._log(actor, entity, "created")
        return entity

    def update(self, *, actor: User, institution_id: int, entity_id: int, payload: Any) -> Any:
        partial = to_aliases(self._definition.schema, require_mapping(payload))
        repo = self._repo(institution_id)
        existing = self.get(institution_id, entity_id)

        # Validate the merged row so a partial update cannot break required fields.
        merged = to_api_dict(existing, exclude=MANAGED_COLUMNS - {"institution_id"})
        merged.update({k: v for k, v in partial.items() if k not in ("id", "institutionId")})
        values = parse_payload(self._definition.schema, merged).model_dump()

        changes = {
            c: values[c]
            for c in self._definition.writable_columns
            if c in values and values[c] != getattr(existing, c)
        }
        if not changes:
            return existing

        entity = repo.update(int(entity_id), changes)
        if entity is None:
            raise NotFoundError(f"{self._definition.label.capitalize()} not found")
        logger.info("%s %s updated: %s", self._definition.name, entity_id, sorted(changes))
        self._log(actor, entity, "updated")
        return entity

    def delete(self, *, actor: User, institution_id: int, entity_id: int) -> None:
        existing = self.get(institution_id, entity_id)
        if not self._repo(institution_id).delete(int(entity_id)):
            raise NotFoundError(f"{self._definition.label.capitalize()} not found")
        logger.info("%s %s deleted", self._definition.name, entity_id)
        self._log(actor, existing, "deleted")


def require_tenant(user: User) -> int:
    """Institution of the caller, for routes that infer the tenant from context."""

    if not user.institution_id:
        raise AuthorizationError("No institution is linked to this account")
    return int(user.institution_id)
