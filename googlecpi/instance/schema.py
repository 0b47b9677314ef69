import re
from typing import Dict

from jsonschema import Draft7Validator, FormatChecker

from googlecpi.errors import InvalidTagError
from .constants import (
    RULE_CHARS,
    RULE_FIRST_CHAR,
    RULE_LAST_CHAR,
    RULE_LENGTH,
    RULE_TYPE,
    TAG_CHARS_PATTERN,
    TAG_FIRST_CHAR_PATTERN,
    TAG_MAX_LENGTH,
    TAG_MIN_LENGTH,
    TAG_PATTERN,
)

# items aren't typed: the format reports the non-string tags too
TAGS_SCHEMA = {
    "type": "array",
    "title": "Tags",
    "items": {"format": "tag"},
}

CPIFormatChecker = FormatChecker()

_TAG_RE = re.compile(TAG_PATTERN)


def _broken_rule(tag: str) -> str:
    if re.match(TAG_FIRST_CHAR_PATTERN, tag) is None:
        return RULE_FIRST_CHAR
    if re.match(TAG_CHARS_PATTERN, tag) is None:
        return RULE_CHARS
    return RULE_LAST_CHAR


@CPIFormatChecker.checks("tag", raises=InvalidTagError)
def is_valid_tag(instance) -> bool:
    if not isinstance(instance, str):
        raise InvalidTagError(instance, RULE_TYPE)
    if not TAG_MIN_LENGTH <= len(instance) <= TAG_MAX_LENGTH:
        raise InvalidTagError(instance, RULE_LENGTH)
    if _TAG_RE.match(instance) is None:
        raise InvalidTagError(instance, _broken_rule(instance))
    return True


def TagsValidator(schema: Dict):
    return Draft7Validator(schema, format_checker=CPIFormatChecker)
