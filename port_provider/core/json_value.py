import json
from enum import Enum
from typing import Any

from port_provider.exceptions.mapping import InvalidJsonAttributeError


class JsonKind(Enum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    LIST = "list"
    OBJECT = "object"
    NULL = "null"


def classify(value: Any) -> JsonKind:
    """
    Classify a value decoded from JSON.

    bool is checked before int/float since it is a subclass of int in Python.
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.LIST
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Value of type {type(value).__name__} is not a JSON value")


def dump_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True)


def load_json_attribute(attribute: str, value: str, expect_object: bool = False) -> Any:
    """
    Decode a JSON encoded configuration attribute into the structured value Port expects.

    :param attribute: Path of the attribute, used in the error message
    :param value: The JSON text
    :param expect_object: Whether anything other than a JSON object should be refused
    """
    try:
        decoded = json.loads(value)
    except (json.JSONDecodeError, TypeError) as e:
        raise InvalidJsonAttributeError(attribute, value, str(e)) from e
    if expect_object and classify(decoded) is not JsonKind.OBJECT:
        raise InvalidJsonAttributeError(attribute, value, "expected a JSON object")
    return decoded
