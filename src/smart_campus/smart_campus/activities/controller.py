from __future__ import annotations

from flask import Flask, jsonify

from ..auth.middleware import token_required
from ..common.http import json_endpoint, query_int
from ..common.serializers import to_api_list
from ..container import Container
from ..core.constants import DEFAULT_ACTIVITY_LIMIT


def register(app: Flask, container: Container) -> None:
    auth = token_required(container)

    @app.route("/api/institutions/<int:institution_id>/activities", methods=["GET"], endpoint="institutions_activities")
    @auth
    @json_endpoint
    def institution_activities(institution_id: int):
        limit = query_int("limit", DEFAULT_ACTIVITY_LIMIT)
        return jsonify(to_api_list(container.activity_service.recent(institution_id, limit=limit)))
