from __future__ import annotations

import logging
import math
from typing import Any

from ..academics.definitions import ACADEMIC_STAFF, COURSE, STUDENT
from ..activities.service import ActivityService
from ..common.validators import parse_payload
from ..core.constants import WEEKLY_SLOTS_PER_CLASSROOM
from ..core.exceptions import NotFoundError
from ..facilities.definitions import CLASSROOM, TIMETABLE_SLOT
from ..records.repository import EntityStore
from ..users.model import User
from ..users.repository import UserRepository
from .model import Institution, InstitutionStats
from .repository import InstitutionRepository
from .schemas import InstitutionCreate, InstitutionUpdate

logger = logging.getLogger(__name__)


class InstitutionService:
    """Use cases: create an institution, edit its settings, mark it configured."""

    def __init__(self, institutions: InstitutionRepository, users: UserRepository, activities: ActivityService):
        self._institutions = institutions
        self._users = users
        self._activities = activities

    def get(self, institution_id: int) -> Institution:
        institution = self._institutions.get_by_id(int(institution_id))
        if institution is None:
            raise NotFoundError("Institution not found")
        return institution

    def create(self, *, actor: User, payload: Any) -> Institution:
        values = parse_payload(InstitutionCreate, payload).model_dump()
        institution_id = self._institutions.create(values)
        # The creator becomes a member of the new tenant.
        self._users.set_institution(actor.id, institution_id=institution_id)

        institution = self.get(institution_id)
        logger.info("institution %s (%s) created by user %s", institution.id, institution.name, actor.id)
        self._activities.record(
            institution_id=institution.id,
            user_id=actor.id,
            action="institution_created",
            description=f"Institution {institution.name} created",
            metadata={"institutionType": institution.type, "educationSystem": institution.education_system},
        )
        return institution

    def update(self, *, actor: User, institution_id: int, payload: Any) -> Institution:
        self.get(institution_id)
        changes = parse_payload(InstitutionUpdate, payload).model_dump(exclude_unset=True)
        # Explicit nulls on required columns are ignored rather than written.
        for column in ("name", "type", "education_system"):
            if changes.get(column, "") is None:
                changes.pop(column)
        if changes:
            self._institutions.update(int(institution_id), changes)
            logger.info("institution %s updated by user %s: %s", institution_id, actor.id, sorted(changes))
        return self.get(institution_id)

    def configure(self, *, actor: User, institution_id: int) -> Institution:
        institution = self.get(institution_id)
        if not institution.is_configured:
            self._institutions.mark_configured(institution.id)
            logger.info("institution %s configured", institution.id)
        self._activities.record(
            institution_id=institution.id,
            user_id=actor.id,
            action="institution_configured",
            description=f"Institution {institution.name} configured",
        )
        return self.get(institution_id)


def compute_classroom_usage(timetable_slots: int, classrooms: int) -> int:
    """Percentage of the assumed weekly classroom capacity that is scheduled.

    Rounded half up and capped at 100; 0 without classrooms.
    """

    if classrooms <= 0:
        return 0
    ratio = timetable_slots / (classrooms * WEEKLY_SLOTS_PER_CLASSROOM) * 100
    return min(100, int(math.floor(ratio + 0.5)))


class StatsService:
    """Dashboard counters of one institution."""

    def __init__(self, store: EntityStore, institutions: InstitutionRepository):
        self._store = store
        self._institutions = institutions

    def _count(self, definition, institution_id: int) -> int:
        return self._store.for_tenant(definition, institution_id).count()

    def for_institution(self, institution_id: int) -> InstitutionStats:
        institution_id = int(institution_id)
        if self._institutions.get_by_id(institution_id) is None:
            raise NotFoundError("Institution not found")

        return InstitutionStats(
            total_students=self._count(STUDENT, institution_id),
            active_courses=self._count(COURSE, institution_id),
            faculty_members=self._count(ACADEMIC_STAFF, institution_id),
            classroom_usage=compute_classroom_usage(
                self._count(TIMETABLE_SLOT, institution_id),
                self._count(CLASSROOM, institution_id),
            ),
        )
