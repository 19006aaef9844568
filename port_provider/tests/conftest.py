from typing import Any

import pytest

from port_provider.clients.port.client import PortClient
from port_provider.core.models import Blueprint
from port_provider.tests.helpers.port_api import BASE_URL


@pytest.fixture
def port_client() -> PortClient:
    return PortClient(BASE_URL, "client-id", "client-secret")


@pytest.fixture
def raw_blueprint() -> dict[str, Any]:
    return {
        "identifier": "microservice",
        "title": "Microservice",
        "icon": "Microservice",
        "schema": {
            "properties": {
                "env": {"type": "string", "title": "Environment"},
                "replicas": {"type": "number"},
                "public": {"type": "boolean"},
                "config": {"type": "object"},
                "tags": {"type": "array", "items": {"type": "string"}},
                "owners": {"type": "array", "items": {"type": "string"}},
                "ports": {"type": "array", "items": {"type": "number"}},
                "flags": {"type": "array", "items": {"type": "boolean"}},
                "configs": {"type": "array", "items": {"type": "object"}},
                "legacy": {"type": "array"},
            },
            "required": [],
        },
        "relations": {
            "owner": {"target": "team", "many": False, "required": False},
            "depends_on": {"target": "microservice", "many": True, "required": False},
        },
        "mirrorProperties": {},
        "calculationProperties": {},
        "aggregationProperties": {},
    }


@pytest.fixture
def blueprint(raw_blueprint: dict[str, Any]) -> Blueprint:
    return Blueprint.parse_obj(raw_blueprint)


@pytest.fixture
def raw_entity() -> dict[str, Any]:
    return {
        "identifier": "svc-1",
        "title": "Service 1",
        "blueprint": "microservice",
        "team": ["platform"],
        "properties": {"env": "prod", "replicas": 3, "public": True},
        "relations": {"owner": "team-x", "depends_on": ["svc-2", "svc-3"]},
        "createdAt": "2023-05-01T10:00:00.000Z",
        "createdBy": "user-1",
        "updatedAt": "2023-05-02T10:00:00.000Z",
        "updatedBy": "user-2",
    }
