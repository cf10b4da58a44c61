from __future__ import annotations

from flask import Flask, g, jsonify

from ..auth.middleware import token_required
from ..common.http import json_body, json_endpoint
from ..common.serializers import to_api_dict
from ..container import Container
from ..records.service import require_tenant
from .model import ApiIntegration


def _public(integration: ApiIntegration) -> dict:
    # The stored key is a secret; clients only learn whether one is set.
    data = to_api_dict(integration, exclude={"api_key"})
    data["hasApiKey"] = bool(integration.api_key)
    return data


def register(app: Flask, container: Container) -> None:
    auth = token_required(container)
    service = container.integration_service

    @app.route("/api/integrations/<int:institution_id>", methods=["GET"], endpoint="integrations_list")
    @auth
    @json_endpoint
    def list_integrations(institution_id: int):
        return jsonify([_public(i) for i in service.list(institution_id)])

    @app.route("/api/integrations", methods=["POST"], endpoint="integrations_create")
    @auth
    @json_endpoint
    def create_integration():
        integration = service.create(actor=g.current_user, payload=json_body())
        return jsonify(_public(integration)), 201

    @app.route("/api/integrations/<int:integration_id>", methods=["PUT"], endpoint="integrations_update")
    @auth
    @json_endpoint
    def update_integration(integration_id: int):
        integration = service.update(
            actor=g.current_user,
            institution_id=require_tenant(g.current_user),
            entity_id=integration_id,
            payload=json_body(),
        )
        return jsonify(_public(integration))

    @app.route("/api/integrations/<int:integration_id>", methods=["DELETE"], endpoint="integrations_delete")
    @auth
    @json_endpoint
    def delete_integration(integration_id: int):
        service.delete(actor=g.current_user, institution_id=require_tenant(g.current_user), entity_id=integration_id)
        return jsonify({"message": "Integration deleted successfully"})
