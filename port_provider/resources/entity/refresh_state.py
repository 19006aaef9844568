from typing import Any, Callable

from loguru import logger

from port_provider.core.json_value import JsonKind, classify, dump_json
from port_provider.core.models import Blueprint, Entity
from port_provider.exceptions.mapping import (
    ArrayItemTypeMismatchError,
    RelationShapeError,
    UnknownArrayItemTypeError,
)
from port_provider.resources.entity.models import (
    ArrayPropsModel,
    EntityModel,
    EntityPropertiesModel,
    RelationModel,
)
from port_provider.utils.misc import format_timestamp

# Declared items type -> (container, expected item kind, conversion)
ARRAY_ITEMS_CONTAINERS: dict[str, tuple[str, JsonKind | None, Callable[[Any], Any]]] = {
    "string": ("string_items", JsonKind.STRING, str),
    "number": ("number_items", JsonKind.NUMBER, float),
    "boolean": ("boolean_items", JsonKind.BOOLEAN, bool),
    "object": ("object_items", None, dump_json),
}

# Property value kind -> (container, conversion)
SCALAR_CONTAINERS: dict[JsonKind, tuple[str, Callable[[Any], Any]]] = {
    JsonKind.NUMBER: ("number_props", float),
    JsonKind.STRING: ("string_props", str),
    JsonKind.BOOLEAN: ("boolean_props", bool),
    JsonKind.OBJECT: ("object_props", dump_json),
}


def _set_item(model: Any, container: str, key: str, value: Any) -> None:
    values = getattr(model, container)
    if values is None:
        values = {}
        setattr(model, container, values)
    values[key] = value


def refresh_array_property(
    properties: EntityPropertiesModel,
    name: str,
    items: list[Any],
    blueprint: Blueprint,
) -> None:
    """
    Place an array property in the container matching the item type the blueprint declares.

    The declared type decides, not the items themselves: an item of another kind is an error.
    """
    item_type = blueprint.array_item_type(name)
    if item_type not in ARRAY_ITEMS_CONTAINERS:
        raise UnknownArrayItemTypeError(name, blueprint.identifier, item_type)

    container, expected_kind, convert = ARRAY_ITEMS_CONTAINERS[item_type]
    values = []
    for item in items:
        if expected_kind is not None and classify(item) is not expected_kind:
            raise ArrayItemTypeMismatchError(name, item_type, item)
        values.append(convert(item))

    if properties.array_props is None:
        properties.array_props = ArrayPropsModel()
    _set_item(properties.array_props, container, name, values)


def refresh_properties_state(
    entity_properties: dict[str, Any], blueprint: Blueprint
) -> EntityPropertiesModel:
    properties = EntityPropertiesModel()
    for name, value in entity_properties.items():
        kind = classify(value)
        if kind is JsonKind.NULL:
            continue
        if kind is JsonKind.LIST:
            refresh_array_property(properties, name, value, blueprint)
            continue

        container, convert = SCALAR_CONTAINERS[kind]
        _set_item(properties, container, name, convert(value))
    return properties


def refresh_relations_state(entity_relations: dict[str, Any]) -> RelationModel:
    relations = RelationModel()
    for name, value in entity_relations.items():
        kind = classify(value)
        if kind is JsonKind.NULL:
            continue
        if kind is JsonKind.STRING:
            if value:
                _set_item(relations, "single_relations", name, value)
        elif kind is JsonKind.LIST:
            if any(classify(identifier) is not JsonKind.STRING for identifier in value):
                raise RelationShapeError(name, value)
            if value:
                _set_item(relations, "many_relations", name, list(value))
        else:
            raise RelationShapeError(name, value)
    return relations


def refresh_entity_state(entity: Entity, blueprint: Blueprint) -> EntityModel:
    """
    Build the configuration model out of an entity read from Port.

    The returned model is fresh, nothing of a previous state is reused. The blueprint is only
    consulted for array properties, where the JSON value alone cannot tell the items type.
    """
    logger.debug(
        f"Refreshing state of entity: {entity.identifier} of blueprint: {blueprint.identifier}"
    )
    state = EntityModel(
        id=entity.identifier,
        identifier=entity.identifier,
        blueprint=blueprint.identifier,
        title=entity.title,
        icon=entity.icon,
        created_at=format_timestamp(entity.created_at),
        created_by=entity.created_by,
        updated_at=format_timestamp(entity.updated_at),
        updated_by=entity.updated_by,
    )

    if entity.team:
        state.teams = list(entity.team)

    if entity.properties:
        state.properties = refresh_properties_state(entity.properties, blueprint)

    if entity.relations:
        state.relations = refresh_relations_state(entity.relations)

    return state
