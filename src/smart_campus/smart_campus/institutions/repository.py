from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from .model import Institution


class InstitutionRepository(Protocol):
    def get_by_id(self, institution_id: int) -> Optional[Institution]:
        raise NotImplementedError

    def create(self, values: Mapping[str, Any]) -> int:
        """Insert with ``is_configured`` false; returns the new id."""

        raise NotImplementedError

    def update(self, institution_id: int, changes: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def mark_configured(self, institution_id: int) -> bool:
        raise NotImplementedError
