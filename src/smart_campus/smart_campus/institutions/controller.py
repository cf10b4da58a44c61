from __future__ import annotations

from flask import Flask, g, jsonify

from ..auth.middleware import token_required
from ..common.http import json_body, json_endpoint
from ..common.serializers import to_api_dict
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth = token_required(container)

    @app.route("/api/institutions", methods=["POST"], endpoint="institutions_create")
    @auth
    @json_endpoint
    def create_institution():
        institution = container.institution_service.create(actor=g.current_user, payload=json_body())
        return jsonify(to_api_dict(institution)), 201

    @app.route("/api/institutions/<int:institution_id>", methods=["GET"], endpoint="institutions_get")
    @auth
    @json_endpoint
    def get_institution(institution_id: int):
        return jsonify(to_api_dict(container.institution_service.get(institution_id)))

    @app.route("/api/institutions/<int:institution_id>", methods=["PUT"], endpoint="institutions_update")
    @auth
    @json_endpoint
    def update_institution(institution_id: int):
        institution = container.institution_service.update(
            actor=g.current_user, institution_id=institution_id, payload=json_body()
        )
        return jsonify(to_api_dict(institution))

    @app.route("/api/institutions/<int:institution_id>/configure", methods=["POST"], endpoint="institutions_configure")
    @auth
    @json_endpoint
    def configure_institution(institution_id: int):
        institution = container.institution_service.configure(actor=g.current_user, institution_id=institution_id)
        return jsonify({"message": "Institution configured successfully", "institution": to_api_dict(institution)})

    @app.route("/api/institutions/<int:institution_id>/stats", methods=["GET"], endpoint="institutions_stats")
    @auth
    @json_endpoint
    def institution_stats(institution_id: int):
        stats = container.stats_service.for_institution(institution_id)
        return jsonify(to_api_dict(stats))
