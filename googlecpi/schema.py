"""Field tables and the JSON schemas generated from them.

A property bag is described once, as a sequence of :py:class:`Field`. The
same table drives the JSON schema used to check the raw map, the decoding
into the typed value and the encoding back to a raw map.
"""
from typing import Any, Dict, NamedTuple, Sequence

from jsonschema import Draft7Validator, validators

from googlecpi.instance.tags import Tags

JSON_SCHEMA = "http://json-schema.org/draft-07/schema#"

STRING = "string"
INTEGER = "integer"
BOOLEAN = "boolean"
# Tri-state: unset (None) is distinguishable from an explicit False
OPTIONAL_BOOLEAN = "optional_boolean"
STRING_LIST = "string_list"
TAGS = "tags"

# Go int on 64 bits platforms
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# null is accepted everywhere and means "absent"
KIND_SCHEMAS: Dict[str, Dict] = {
    STRING: {"type": ["string", "null"]},
    INTEGER: {
        "type": ["integer", "null"],
        "minimum": INT64_MIN,
        "maximum": INT64_MAX,
    },
    BOOLEAN: {"type": ["boolean", "null"]},
    OPTIONAL_BOOLEAN: {"type": ["boolean", "null"]},
    STRING_LIST: {"type": ["array", "null"], "items": {"type": "string"}},
    TAGS: {"type": ["array", "null"], "items": {"type": "string"}},
}

KIND_DEFAULTS: Dict[str, Any] = {
    STRING: "",
    INTEGER: 0,
    BOOLEAN: False,
    OPTIONAL_BOOLEAN: None,
    STRING_LIST: (),
    TAGS: Tags(),
}


class Field(NamedTuple):
    attribute: str
    key: str
    kind: str
    description: str = ""

    @property
    def default(self) -> Any:
        return KIND_DEFAULTS[self.kind]

    def decode(self, value: Any) -> Any:
        if value is None:
            return self.default
        if self.kind == STRING_LIST:
            return tuple(value)
        if self.kind == TAGS:
            return Tags(value)
        return value

    def encode(self, value: Any) -> Any:
        if self.kind in (STRING_LIST, TAGS):
            return list(value)
        return value

    def is_default(self, value: Any) -> bool:
        if self.kind == OPTIONAL_BOOLEAN:
            return value is None
        if self.kind == BOOLEAN:
            return value is False
        return value == self.default


def schema_from_fields(title: str, fields: Sequence[Field]) -> Dict:
    properties = {}
    for f in fields:
        prop = dict(KIND_SCHEMAS[f.kind])
        if f.description:
            prop["description"] = f.description
        properties[f.key] = prop
    return {
        "type": "object",
        "title": title,
        "$schema": JSON_SCHEMA,
        "properties": properties,
    }


def close_schema(schema: Dict) -> Dict:
    """Same schema, rejecting the keys it doesn't declare."""
    return dict(schema, additionalProperties=False)


def is_json_integer(checker, instance) -> bool:
    # 2.0 or 1e20 are floats once parsed, not integers
    return isinstance(instance, int) and not isinstance(instance, bool)


CPITypeChecker = Draft7Validator.TYPE_CHECKER.redefine("integer", is_json_integer)

_CloudPropertiesValidator = validators.extend(
    Draft7Validator, type_checker=CPITypeChecker
)


def CloudPropertiesValidator(schema: Dict):
    return _CloudPropertiesValidator(schema)
