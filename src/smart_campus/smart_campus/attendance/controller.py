from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..auth.middleware import token_required
from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, json_endpoint
from ..common.serializers import to_api_dict, to_api_list
from ..container import Container
from ..records.service import require_tenant


def register(app: Flask, container: Container) -> None:
    auth = token_required(container)
    service = container.attendance_service

    @app.route("/api/attendance/institution/<int:institution_id>", methods=["GET"], endpoint="attendance_by_institution")
    @auth
    @json_endpoint
    def attendance_by_institution(institution_id: int):
        raw_date = request.args.get("date")
        if raw_date:
            records = service.list_where(institution_id, date=parse_iso_date(raw_date))
        else:
            records = service.list(institution_id)
        return jsonify(to_api_list(records))

    @app.route("/api/attendance/student/<int:student_id>", methods=["GET"], endpoint="attendance_by_student")
    @auth
    @json_endpoint
    def attendance_by_student(student_id: int):
        records = service.list_where(require_tenant(g.current_user), student_id=student_id)
        return jsonify(to_api_list(records))

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_create")
    @auth
    @json_endpoint
    def create_attendance():
        record = service.create(actor=g.current_user, payload=json_body())
        return jsonify(to_api_dict(record)), 201

    @app.route("/api/attendance/<int:record_id>", methods=["PUT"], endpoint="attendance_update")
    @auth
    @json_endpoint
    def update_attendance(record_id: int):
        record = service.update(
            actor=g.current_user,
            institution_id=require_tenant(g.current_user),
            entity_id=record_id,
            payload=json_body(),
        )
        return jsonify(to_api_dict(record))

    @app.route("/api/attendance/<int:record_id>", methods=["DELETE"], endpoint="attendance_delete")
    @auth
    @json_endpoint
    def delete_attendance(record_id: int):
        service.delete(actor=g.current_user, institution_id=require_tenant(g.current_user), entity_id=record_id)
        return jsonify({"message": "Attendance record deleted successfully"})
