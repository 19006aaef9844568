from typing import Any

import pytest

from port_provider.core.models import Blueprint, Entity
from port_provider.exceptions.mapping import (
    ArrayItemTypeMismatchError,
    RelationShapeError,
    UnknownArrayItemTypeError,
)
from port_provider.resources.entity.refresh_state import refresh_entity_state


def _entity(**overrides: Any) -> Entity:
    return Entity.parse_obj(
        {"identifier": "svc-1", "title": "Service 1", "blueprint": "microservice"}
        | overrides
    )


def test_refresh_scalar_properties_and_relations(
    raw_entity: dict[str, Any], blueprint: Blueprint
) -> None:
    state = refresh_entity_state(Entity.parse_obj(raw_entity), blueprint)

    assert state.id == "svc-1"
    assert state.identifier == "svc-1"
    assert state.title == "Service 1"
    assert state.blueprint == "microservice"
    assert state.teams == ["platform"]
    assert state.properties is not None
    assert state.properties.string_props == {"env": "prod"}
    assert state.properties.number_props == {"replicas": 3.0}
    assert state.properties.boolean_props == {"public": True}
    assert state.properties.object_props is None
    assert state.properties.array_props is None
    assert state.relations is not None
    assert state.relations.single_relations == {"owner": "team-x"}
    assert state.relations.many_relations == {"depends_on": ["svc-2", "svc-3"]}


def test_refresh_audit_fields(raw_entity: dict[str, Any], blueprint: Blueprint) -> None:
    state = refresh_entity_state(Entity.parse_obj(raw_entity), blueprint)

    assert state.created_at is not None
    assert state.created_at.startswith("2023-05-01T10:00:00")
    assert state.created_by == "user-1"
    assert state.updated_at is not None
    assert state.updated_at.startswith("2023-05-02T10:00:00")
    assert state.updated_by == "user-2"


def test_refresh_takes_blueprint_identifier(blueprint: Blueprint) -> None:
    state = refresh_entity_state(_entity(blueprint=None), blueprint)

    assert state.blueprint == "microservice"


def test_refresh_without_team_properties_or_relations(blueprint: Blueprint) -> None:
    state = refresh_entity_state(
        _entity(team=[], properties={}, relations={}), blueprint
    )

    assert state.teams is None
    assert state.properties is None
    assert state.relations is None


def test_refresh_object_property_is_json_encoded(blueprint: Blueprint) -> None:
    state = refresh_entity_state(
        _entity(properties={"config": {"b": [1, 2], "a": {"nested": True}}}),
        blueprint,
    )

    assert state.properties is not None
    assert state.properties.object_props == {
        "config": '{"a":{"nested":true},"b":[1,2]}'
    }


def test_refresh_null_property_is_omitted(blueprint: Blueprint) -> None:
    state = refresh_entity_state(
        _entity(properties={"env": None, "replicas": 1}), blueprint
    )

    assert state.properties is not None
    assert state.properties.string_props is None
    assert state.properties.number_props == {"replicas": 1.0}


def test_refresh_boolean_is_not_a_number(blueprint: Blueprint) -> None:
    state = refresh_entity_state(_entity(properties={"public": False}), blueprint)

    assert state.properties is not None
    assert state.properties.boolean_props == {"public": False}
    assert state.properties.number_props is None


def test_refresh_string_array(blueprint: Blueprint) -> None:
    state = refresh_entity_state(_entity(properties={"tags": ["a", "b"]}), blueprint)

    assert state.properties is not None
    assert state.properties.array_props is not None
    assert state.properties.array_props.string_items == {"tags": ["a", "b"]}
    assert state.properties.array_props.number_items is None


def test_refresh_numeric_looking_strings_stay_strings(blueprint: Blueprint) -> None:
    state = refresh_entity_state(_entity(properties={"tags": ["1", "2"]}), blueprint)

    assert state.properties is not None
    assert state.properties.array_props is not None
    assert state.properties.array_props.string_items == {"tags": ["1", "2"]}


def test_refresh_number_and_boolean_arrays(blueprint: Blueprint) -> None:
    state = refresh_entity_state(
        _entity(properties={"ports": [80, 443.5], "flags": [True, False]}),
        blueprint,
    )

    assert state.properties is not None
    assert state.properties.array_props is not None
    assert state.properties.array_props.number_items == {"ports": [80.0, 443.5]}
    assert state.properties.array_props.boolean_items == {"flags": [True, False]}


def test_refresh_object_array_items_are_json_encoded(blueprint: Blueprint) -> None:
    state = refresh_entity_state(
        _entity(properties={"configs": [{"k": 1}, {"k": 2}, "raw"]}), blueprint
    )

    assert state.properties is not None
    assert state.properties.array_props is not None
    assert state.properties.array_props.object_items == {
        "configs": ['{"k":1}', '{"k":2}', '"raw"']
    }


def test_refresh_keeps_every_array_of_the_same_item_type(
    blueprint: Blueprint,
) -> None:
    state = refresh_entity_state(
        _entity(properties={"tags": ["a"], "owners": ["team-x", "team-y"]}),
        blueprint,
    )

    assert state.properties is not None
    assert state.properties.array_props is not None
    assert state.properties.array_props.string_items == {
        "tags": ["a"],
        "owners": ["team-x", "team-y"],
    }


def test_refresh_array_item_type_mismatch(blueprint: Blueprint) -> None:
    with pytest.raises(ArrayItemTypeMismatchError) as exc_info:
        refresh_entity_state(_entity(properties={"ports": [80, "443"]}), blueprint)

    assert exc_info.value.property_name == "ports"
    assert exc_info.value.declared_type == "number"
    assert exc_info.value.item == "443"


def test_refresh_boolean_items_in_number_array_mismatch(blueprint: Blueprint) -> None:
    with pytest.raises(ArrayItemTypeMismatchError):
        refresh_entity_state(_entity(properties={"ports": [True]}), blueprint)


@pytest.mark.parametrize("name", ["legacy", "undeclared"])
def test_refresh_array_without_declared_item_type(
    blueprint: Blueprint, name: str
) -> None:
    with pytest.raises(UnknownArrayItemTypeError):
        refresh_entity_state(_entity(properties={name: ["a"]}), blueprint)


def test_refresh_every_property_lands_in_exactly_one_container(
    blueprint: Blueprint,
) -> None:
    properties = {
        "env": "prod",
        "replicas": 2,
        "public": True,
        "config": {"k": "v"},
        "tags": ["a"],
        "owners": ["b"],
        "ports": [1],
        "flags": [True],
        "configs": [{"k": 1}],
    }

    state = refresh_entity_state(_entity(properties=properties), blueprint)

    assert state.properties is not None
    names = state.properties.property_names()
    assert sorted(names) == sorted(properties)


def test_refresh_empty_relations_are_dropped(blueprint: Blueprint) -> None:
    state = refresh_entity_state(
        _entity(relations={"owner": "", "depends_on": [], "parent": None}),
        blueprint,
    )

    assert state.relations is not None
    assert state.relations.single_relations is None
    assert state.relations.many_relations is None


def test_refresh_relation_cardinality_is_exclusive(blueprint: Blueprint) -> None:
    state = refresh_entity_state(
        _entity(relations={"owner": "team-x", "depends_on": ["svc-2"]}), blueprint
    )

    assert state.relations is not None
    single = set(state.relations.single_relations or {})
    many = set(state.relations.many_relations or {})
    assert single == {"owner"}
    assert many == {"depends_on"}
    assert not single & many


@pytest.mark.parametrize("value", [3, {"identifier": "x"}, ["svc-2", 3]])
def test_refresh_relation_of_unexpected_shape(
    blueprint: Blueprint, value: object
) -> None:
    with pytest.raises(RelationShapeError):
        refresh_entity_state(_entity(relations={"owner": value}), blueprint)
