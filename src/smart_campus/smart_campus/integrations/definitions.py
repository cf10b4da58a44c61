from __future__ import annotations

from ..records.definition import EntityDefinition
from .model import ApiIntegration
from .schemas import ApiIntegrationCreate

API_INTEGRATION = EntityDefinition(
    name="api_integration",
    table="api_integrations",
    model=ApiIntegration,
    schema=ApiIntegrationCreate,
    json_columns=frozenset({"configuration"}),
    bool_columns=frozenset({"is_active"}),
)
