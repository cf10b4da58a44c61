from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import json_body, json_endpoint
from ..common.serializers import to_api_dict
from ..container import Container
from .middleware import token_required


def register(app: Flask, container: Container) -> None:
    auth = token_required(container)

    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    @json_endpoint
    def register_user():
        result = container.auth_service.register(json_body())
        return jsonify({"user": result.user.public_view(), "token": result.token}), 201

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    @json_endpoint
    def login():
        result = container.auth_service.login(json_body())
        return jsonify({"user": result.user.public_view(), "token": result.token})

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    @auth
    @json_endpoint
    def me():
        user, institution = container.auth_service.me(g.current_user)
        return jsonify({
            "user": user.public_view(),
            "institution": to_api_dict(institution) if institution else None,
        })
