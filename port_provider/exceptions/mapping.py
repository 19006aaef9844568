from typing import Any

from port_provider.exceptions.base import BasePortProviderException


class MappingException(BasePortProviderException):
    pass


class InvalidJsonAttributeError(MappingException):
    def __init__(self, attribute: str, value: str, reason: str):
        self.attribute = attribute
        self.value = value
        super().__init__(f"Attribute {attribute} holds invalid JSON ({reason}): {value}")


class ArrayItemTypeMismatchError(MappingException):
    def __init__(self, property_name: str, declared_type: str, item: Any):
        self.property_name = property_name
        self.declared_type = declared_type
        self.item = item
        super().__init__(
            f"Array property {property_name} declares items of type {declared_type}, "
            f"got {type(item).__name__}: {item!r}"
        )


class UnknownArrayItemTypeError(MappingException):
    def __init__(self, property_name: str, blueprint: str, declared_type: Any):
        self.property_name = property_name
        self.declared_type = declared_type
        super().__init__(
            f"Cannot determine item type of array property {property_name} "
            f"in blueprint {blueprint}, declared items type: {declared_type!r}"
        )


class RelationShapeError(MappingException):
    def __init__(self, relation: str, value: Any):
        self.relation = relation
        self.value = value
        super().__init__(
            f"Relation {relation} must be a string or a list of strings, got: {value!r}"
        )
