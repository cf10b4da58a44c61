from __future__ import annotations

from ..records.definition import ActivityTemplate, EntityDefinition
from .model import AcademicStaff, Course, Department, Enrollment, Faculty, GradeRecord, Student
from .schemas import (
    AcademicStaffCreate,
    CourseCreate,
    DepartmentCreate,
    EnrollmentCreate,
    FacultyCreate,
    GradeRecordCreate,
    StudentCreate,
)

FACULTY = EntityDefinition(
    name="faculty",
    table="faculties",
    model=Faculty,
    schema=FacultyCreate,
    activity=ActivityTemplate(
        entity="faculty",
        describe=lambda f: f'Faculty "{f.name}"',
        metadata=lambda f: {"name": f.name},
    ),
)

DEPARTMENT = EntityDefinition(
    name="department",
    table="departments",
    model=Department,
    schema=DepartmentCreate,
    activity=ActivityTemplate(
        entity="department",
        describe=lambda d: f'Department "{d.name}"',
        metadata=lambda d: {"name": d.name, "facultyId": d.faculty_id},
    ),
)

ACADEMIC_STAFF = EntityDefinition(
    name="academic_staff",
    table="academic_staff",
    model=AcademicStaff,
    schema=AcademicStaffCreate,
    json_columns=frozenset({"specializations", "research_areas"}),
    activity=ActivityTemplate(
        entity="staff",
        describe=lambda s: "Academic staff member",
        metadata=lambda s: {"userId": s.user_id, "departmentId": s.department_id},
    ),
)

STUDENT = EntityDefinition(
    name="student",
    table="students",
    model=Student,
    schema=StudentCreate,
    unique_columns=("student_id",),
    activity=ActivityTemplate(
        entity="student",
        describe=lambda s: f"Student {s.student_id}",
        # studentId is already the row id in the metadata; keep the public number apart.
        metadata=lambda s: {"studentNumber": s.student_id, "program": s.program},
    ),
)

COURSE = EntityDefinition(
    name="course",
    table="courses",
    model=Course,
    schema=CourseCreate,
    json_columns=frozenset({"prerequisites", "assessment_structure"}),
    activity=ActivityTemplate(
        entity="course",
        describe=lambda c: f'Course "{c.name}" ({c.course_code})',
        metadata=lambda c: {"courseCode": c.course_code, "name": c.name},
    ),
)

# Enrollments and grades are bulk academic records; they are not audited.
ENROLLMENT = EntityDefinition(
    name="enrollment",
    table="student_enrollments",
    model=Enrollment,
    schema=EnrollmentCreate,
)

GRADE_RECORD = EntityDefinition(
    name="grade_record",
    table="grade_records",
    model=GradeRecord,
    schema=GradeRecordCreate,
    json_columns=frozenset({"grades"}),
)
