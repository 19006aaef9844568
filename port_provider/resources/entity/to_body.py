from typing import Any

from port_provider.core.json_value import load_json_attribute
from port_provider.core.models import Entity
from port_provider.resources.entity.models import (
    EntityModel,
    EntityPropertiesModel,
    RelationModel,
)


def _array_props_to_body(properties: EntityPropertiesModel) -> dict[str, Any]:
    array_props = properties.array_props
    if array_props is None:
        return {}

    body: dict[str, Any] = {}
    for items in (
        array_props.string_items,
        array_props.number_items,
        array_props.boolean_items,
    ):
        for name, values in (items or {}).items():
            body[name] = list(values)

    for name, values in (array_props.object_items or {}).items():
        body[name] = [
            load_json_attribute(f"properties.array_props.object_items.{name}", value)
            for value in values
        ]
    return body


def properties_to_body(properties: EntityPropertiesModel | None) -> dict[str, Any]:
    if properties is None:
        return {}

    body: dict[str, Any] = {}
    body.update(properties.string_props or {})
    body.update(properties.number_props or {})
    body.update(properties.boolean_props or {})
    for name, value in (properties.object_props or {}).items():
        body[name] = load_json_attribute(f"properties.object_props.{name}", value)
    body.update(_array_props_to_body(properties))
    return body


def relations_to_body(relations: RelationModel | None) -> dict[str, Any]:
    if relations is None:
        return {}

    body: dict[str, Any] = dict(relations.single_relations or {})
    for name, identifiers in (relations.many_relations or {}).items():
        body[name] = list(identifiers)
    return body


def entity_model_to_port_body(model: EntityModel) -> Entity:
    """
    Build the create/update request entity out of the configuration model.

    Object properties and object array items are decoded from their JSON text, a malformed
    value raises InvalidJsonAttributeError and nothing should be sent.
    """
    return Entity(
        identifier=model.identifier,
        title=model.title,
        blueprint=model.blueprint,
        icon=model.icon,
        team=list(model.teams) if model.teams is not None else None,
        properties=properties_to_body(model.properties),
        relations=relations_to_body(model.relations),
    )
