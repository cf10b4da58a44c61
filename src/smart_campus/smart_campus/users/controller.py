from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..auth.middleware import token_required
from ..common.http import json_body, json_endpoint
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth = token_required(container)

    @app.route("/api/users/institution/<int:institution_id>", methods=["GET"], endpoint="users_by_institution")
    @auth
    @json_endpoint
    def users_by_institution(institution_id: int):
        users = container.user_service.list_for_institution(institution_id, role=request.args.get("role"))
        return jsonify([u.public_view() for u in users])

    @app.route("/api/users/<int:user_id>/role", methods=["PUT"], endpoint="users_update_role")
    @auth
    @json_endpoint
    def update_role(user_id: int):
        user = container.user_service.update_role(actor=g.current_user, user_id=user_id, payload=json_body())
        return jsonify(user.public_view())
