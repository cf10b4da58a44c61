from __future__ import annotations

from flask import Flask, g, jsonify

from ..auth.middleware import token_required
from ..common.http import json_body, json_endpoint
from ..common.serializers import to_api_dict, to_api_list
from ..container import Container
from .service import EntityService, require_tenant


def register_entity_routes(app: Flask, container: Container, *, collection: str, service: EntityService) -> None:
    """Standard routes of one tenant-owned collection.

    ``/api/institutions/<id>/<collection>`` lists and creates inside the path
    institution; ``/api/<collection>`` creates inside the payload's
    ``institutionId``; ``/api/<collection>/<id>`` works inside the caller's
    own institution.
    """

    auth = token_required(container)
    prefix = collection.replace("-", "_")

    @app.route(f"/api/institutions/<int:institution_id>/{collection}", methods=["GET"], endpoint=f"{prefix}_list")
    @auth
    @json_endpoint
    def list_entities(institution_id: int):
        return jsonify(to_api_list(service.list(institution_id)))

    @app.route(f"/api/institutions/<int:institution_id>/{collection}", methods=["POST"], endpoint=f"{prefix}_create_scoped")
    @auth
    @json_endpoint
    def create_scoped(institution_id: int):
        entity = service.create(actor=g.current_user, payload=json_body(), institution_id=institution_id)
        return jsonify(to_api_dict(entity)), 201

    @app.route(f"/api/{collection}", methods=["POST"], endpoint=f"{prefix}_create")
    @auth
    @json_endpoint
    def create_entity():
        entity = service.create(actor=g.current_user, payload=json_body())
        return jsonify(to_api_dict(entity)), 201

    @app.route(f"/api/{collection}/<int:entity_id>", methods=["GET"], endpoint=f"{prefix}_get")
    @auth
    @json_endpoint
    def get_entity(entity_id: int):
        entity = service.get(require_tenant(g.current_user), entity_id)
        return jsonify(to_api_dict(entity))

    @app.route(f"/api/{collection}/<int:entity_id>", methods=["PUT"], endpoint=f"{prefix}_update")
    @auth
    @json_endpoint
    def update_entity(entity_id: int):
        entity = service.update(
            actor=g.current_user,
            institution_id=require_tenant(g.current_user),
            entity_id=entity_id,
            payload=json_body(),
        )
        return jsonify(to_api_dict(entity))

    @app.route(f"/api/{collection}/<int:entity_id>", methods=["DELETE"], endpoint=f"{prefix}_delete")
    @auth
    @json_endpoint
    def delete_entity(entity_id: int):
        service.delete(actor=g.current_user, institution_id=require_tenant(g.current_user), entity_id=entity_id)
        return jsonify({"message": f"{service.definition.label.capitalize()} deleted successfully"})


def register(app: Flask, container: Container) -> None:
    collections = {
        "faculties": container.faculty_service,
        "departments": container.department_service,
        "staff": container.staff_service,
        "students": container.student_service,
        "courses": container.course_service,
        "enrollments": container.enrollment_service,
        "grades": container.grade_service,
        "classrooms": container.classroom_service,
        "time-slots": container.time_slot_service,
        "timetable": container.timetable_service,
    }
    for collection, service in collections.items():
        register_entity_routes(app, container, collection=collection, service=service)

    auth = token_required(container)

    @app.route("/api/faculties/<int:faculty_id>/departments", methods=["GET"], endpoint="faculty_departments")
    @auth
    @json_endpoint
    def faculty_departments(faculty_id: int):
        tenant_id = require_tenant(g.current_user)
        faculty = container.faculty_service.get(tenant_id, faculty_id)
        return jsonify(to_api_list(container.department_service.list_where(tenant_id, faculty_id=faculty.id)))

    @app.route("/api/departments/<int:department_id>/courses", methods=["GET"], endpoint="department_courses")
    @auth
    @json_endpoint
    def department_courses(department_id: int):
        tenant_id = require_tenant(g.current_user)
        department = container.department_service.get(tenant_id, department_id)
        return jsonify(to_api_list(container.course_service.list_where(tenant_id, department_id=department.id)))

    @app.route("/api/students/<int:student_id>/enrollments", methods=["GET"], endpoint="student_enrollments")
    @auth
    @json_endpoint
    def student_enrollments(student_id: int):
        tenant_id = require_tenant(g.current_user)
        student = container.student_service.get(tenant_id, student_id)
        return jsonify(to_api_list(container.enrollment_service.list_where(tenant_id, student_id=student.id)))

    @app.route("/api/students/<int:student_id>/grades", methods=["GET"], endpoint="student_grades")
    @auth
    @json_endpoint
    def student_grades(student_id: int):
        tenant_id = require_tenant(g.current_user)
        student = container.student_service.get(tenant_id, student_id)
        return jsonify(to_api_list(container.grade_service.list_where(tenant_id, student_id=student.id)))

    @app.route("/api/courses/<int:course_id>/enrollments", methods=["GET"], endpoint="course_enrollments")
    @auth
    @json_endpoint
    def course_enrollments(course_id: int):
        tenant_id = require_tenant(g.current_user)
        course = container.course_service.get(tenant_id, course_id)
        return jsonify(to_api_list(container.enrollment_service.list_where(tenant_id, course_id=course.id)))
