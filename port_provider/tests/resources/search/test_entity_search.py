import json
from typing import Any

import pytest
from pytest_httpx import HTTPXMock

from port_provider.clients.port.client import PortClient
from port_provider.exceptions.mapping import InvalidJsonAttributeError
from port_provider.resources.search import EntitySearch, SearchModel
from port_provider.tests.helpers.port_api import API_URL, add_token_response

SEARCH_URL = f"{API_URL}/entities/search"
QUERY = {
    "combinator": "and",
    "rules": [{"operator": "=", "property": "$blueprint", "value": "microservice"}],
}


@pytest.fixture
def raw_team_blueprint() -> dict[str, Any]:
    return {
        "identifier": "team",
        "schema": {
            "properties": {
                "members": {"type": "array", "items": {"type": "string"}}
            }
        },
    }


async def test_search_maps_entities_against_their_blueprint(
    httpx_mock: HTTPXMock,
    port_client: PortClient,
    raw_entity: dict[str, Any],
    raw_blueprint: dict[str, Any],
    raw_team_blueprint: dict[str, Any],
) -> None:
    other_service = {**raw_entity, "identifier": "svc-2", "properties": {"tags": ["a"]}}
    team = {
        "identifier": "team-x",
        "blueprint": "team",
        "properties": {"members": ["alice", "bob"]},
        "relations": {},
    }
    add_token_response(httpx_mock)
    httpx_mock.add_response(
        method="POST",
        url=(
            f"{SEARCH_URL}?exclude_calculated_properties=false"
            "&attach_title_to_relation=false"
        ),
        json={
            "ok": True,
            "matchingBlueprints": ["microservice", "team"],
            "entities": [raw_entity, other_service, team],
        },
    )
    httpx_mock.add_response(
        method="GET",
        url=f"{API_URL}/blueprints/microservice",
        json={"ok": True, "blueprint": raw_blueprint},
    )
    httpx_mock.add_response(
        method="GET",
        url=f"{API_URL}/blueprints/team",
        json={"ok": True, "blueprint": raw_team_blueprint},
    )

    async with port_client:
        state = await EntitySearch(port_client).read(
            SearchModel(query=json.dumps(QUERY))
        )

    assert state.id == json.dumps(QUERY, separators=(",", ":"), sort_keys=True)
    assert state.matching_blueprints == ["microservice", "team"]
    assert state.entities is not None
    assert [entity.identifier for entity in state.entities] == [
        "svc-1",
        "svc-2",
        "team-x",
    ]
    service, other, team_state = state.entities
    assert service.properties is not None
    assert service.properties.string_props == {"env": "prod"}
    assert service.relations is not None
    assert service.relations.many_relations == {"depends_on": ["svc-2", "svc-3"]}
    assert other.properties is not None
    assert other.properties.array_props is not None
    assert other.properties.array_props.string_items == {"tags": ["a"]}
    assert team_state.blueprint == "team"
    assert team_state.relations is None
    assert team_state.properties is not None
    assert team_state.properties.array_props is not None
    assert team_state.properties.array_props.string_items == {
        "members": ["alice", "bob"]
    }
    blueprint_requests = [
        request
        for request in httpx_mock.get_requests()
        if request.method == "GET"
    ]
    assert len(blueprint_requests) == 2


async def test_search_always_includes_identifier_and_blueprint(
    httpx_mock: HTTPXMock, port_client: PortClient
) -> None:
    add_token_response(httpx_mock)
    httpx_mock.add_response(
        method="POST", json={"ok": True, "matchingBlueprints": [], "entities": []}
    )

    async with port_client:
        state = await EntitySearch(port_client).read(
            SearchModel(
                query=json.dumps(QUERY),
                exclude_calculated_properties=True,
                include=["properties.env"],
                exclude=["team"],
                attach_title_to_relation=True,
            )
        )

    assert state.entities == []
    assert state.include == ["properties.env"]
    params = httpx_mock.get_requests()[-1].url.params
    assert params.get_list("include") == ["properties.env", "identifier", "blueprint"]
    assert params.get_list("exclude") == ["team"]
    assert params["exclude_calculated_properties"] == "true"
    assert params["attach_title_to_relation"] == "true"


async def test_search_with_invalid_query_sends_nothing(
    port_client: PortClient,
) -> None:
    async with port_client:
        with pytest.raises(InvalidJsonAttributeError):
            await EntitySearch(port_client).read(SearchModel(query="[1, 2]"))
