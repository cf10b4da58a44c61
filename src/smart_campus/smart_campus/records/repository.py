from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .definition import EntityDefinition


class TenantRepository(Protocol):
    """CRUD over one entity table, bound to a single institution.

    Every query carries ``institution_id = <bound id>``; there is no method
    that reaches rows of another tenant.
    """

    institution_id: int

    def list(self) -> Sequence[Any]:
        raise NotImplementedError

    def list_where(self, **filters: Any) -> Sequence[Any]:
        raise NotImplementedError

    def get(self, entity_id: int) -> Optional[Any]:
        raise NotImplementedError

    def create(self, values: Mapping[str, Any]) -> Any:
        """Insert with the bound institution id and return the stored entity."""

        raise NotImplementedError

    def update(self, entity_id: int, changes: Mapping[str, Any]) -> Optional[Any]:
        """Return the updated entity, or None when no row of this tenant has the id."""

        raise NotImplementedError

    def delete(self, entity_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError


class EntityStore(Protocol):
    def for_tenant(self, definition: EntityDefinition, institution_id: int) -> TenantRepository:
        raise NotImplementedError
