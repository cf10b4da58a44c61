from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .academics.definitions import ACADEMIC_STAFF, COURSE, DEPARTMENT, ENROLLMENT, FACULTY, GRADE_RECORD, STUDENT
from .activities.mysql_activity_repository import MySQLActivityRepository
from .activities.repository import ActivityRepository
from .activities.service import ActivityService
from .attendance.definitions import ATTENDANCE_RECORD
from .auth.service import AuthService
from .auth.tokens import TokenService
from .core.constants import DEFAULT_POOL_SIZE, TOKEN_TTL_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .facilities.definitions import CLASSROOM, TIME_SLOT, TIMETABLE_SLOT
from .institutions.mysql_institution_repository import MySQLInstitutionRepository
from .institutions.repository import InstitutionRepository
from .institutions.service import InstitutionService, StatsService
from .integrations.definitions import API_INTEGRATION
from .records.mysql_repository import MySQLEntityStore
from .records.repository import EntityStore
from .records.service import EntityService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    institutions_repo: InstitutionRepository
    activities_repo: ActivityRepository
    entity_store: EntityStore

    tokens: TokenService
    activity_service: ActivityService
    auth_service: AuthService
    user_service: UserService
    institution_service: InstitutionService
    stats_service: StatsService

    faculty_service: EntityService
    department_service: EntityService
    staff_service: EntityService
    student_service: EntityService
    course_service: EntityService
    enrollment_service: EntityService
    grade_service: EntityService
    classroom_service: EntityService
    time_slot_service: EntityService
    timetable_service: EntityService
    attendance_service: EntityService
    integration_service: EntityService


def assemble_container(
    *,
    users_repo: UserRepository,
    institutions_repo: InstitutionRepository,
    activities_repo: ActivityRepository,
    entity_store: EntityStore,
    tokens: TokenService,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of the given repositories (MySQL or in-memory)."""

    activity_service = ActivityService(activities_repo)

    def entity_service(definition) -> EntityService:
        return EntityService(entity_store, definition, activity_service)

    return Container(
        conn=conn,
        users_repo=users_repo,
        institutions_repo=institutions_repo,
        activities_repo=activities_repo,
        entity_store=entity_store,
        tokens=tokens,
        activity_service=activity_service,
        auth_service=AuthService(users_repo, institutions_repo, tokens),
        user_service=UserService(users_repo, activity_service),
        institution_service=InstitutionService(institutions_repo, users_repo, activity_service),
        stats_service=StatsService(entity_store, institutions_repo),
        faculty_service=entity_service(FACULTY),
        department_service=entity_service(DEPARTMENT),
        staff_service=entity_service(ACADEMIC_STAFF),
        student_service=entity_service(STUDENT),
        course_service=entity_service(COURSE),
        enrollment_service=entity_service(ENROLLMENT),
        grade_service=entity_service(GRADE_RECORD),
        classroom_service=entity_service(CLASSROOM),
        time_slot_service=entity_service(TIME_SLOT),
        timetable_service=entity_service(TIMETABLE_SLOT),
        attendance_service=entity_service(ATTENDANCE_RECORD),
        integration_service=entity_service(API_INTEGRATION),
    )


def build_container(*, db_config: dict, jwt_secret: str, token_ttl_hours: int = TOKEN_TTL_HOURS) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
    )
    conn = DatabaseConnection.get_instance(config)

    return assemble_container(
        users_repo=MySQLUserRepository(conn),
        institutions_repo=MySQLInstitutionRepository(conn),
        activities_repo=MySQLActivityRepository(conn),
        entity_store=MySQLEntityStore(conn),
        tokens=TokenService(jwt_secret, ttl_hours=token_ttl_hours),
        conn=conn,
    )
