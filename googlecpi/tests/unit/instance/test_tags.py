from ddt import data, ddt, unpack
from jsonschema.exceptions import ValidationError

from googlecpi.errors import CloudPropertiesValidationError, InvalidTagError
from googlecpi.instance import constants
from googlecpi.instance.schema import (
    TAGS_SCHEMA,
    CPIFormatChecker,
    TagsValidator,
    is_valid_tag,
)
from googlecpi.instance.tags import Tags, check_tag
from googlecpi.tests.unit import CPITest


@ddt
class TestCheckTag(CPITest):
    @data("web", "db-1", "a", "a1", "x" * 63, "a-b-c")
    def test_valid(self, tag):
        check_tag(tag)

    @data(
        ("", constants.RULE_LENGTH),
        ("x" * 64, constants.RULE_LENGTH),
        ("Invalid_Tag!", constants.RULE_FIRST_CHAR),
        ("1web", constants.RULE_FIRST_CHAR),
        ("-web", constants.RULE_FIRST_CHAR),
        ("web_1", constants.RULE_CHARS),
        ("weB", constants.RULE_CHARS),
        ("web-", constants.RULE_LAST_CHAR),
        (42, constants.RULE_TYPE),
    )
    @unpack
    def test_invalid(self, tag, rule):
        with self.assertRaises(InvalidTagError) as ctx:
            check_tag(tag)
        self.assertEqual(tag, ctx.exception.tag)
        self.assertEqual(rule, ctx.exception.rule)
        self.assertEqual("tags", ctx.exception.field)


class TestTags(CPITest):
    def test_empty(self):
        Tags().validate()

    def test_all_valid(self):
        Tags(["web", "db-1"]).validate()

    def test_keeps_order(self):
        self.assertEqual(("b", "a", "c"), Tags(["b", "a", "c"]))

    def test_first_invalid_is_reported(self):
        with self.assertRaises(InvalidTagError) as ctx:
            Tags(["web", "Bad", "worse_"]).validate()
        self.assertEqual("Bad", ctx.exception.tag)
        self.assertIn("Bad", str(ctx.exception))
        self.assertIn(constants.RULE_FIRST_CHAR, str(ctx.exception))

    def test_is_a_validation_error(self):
        with self.assertRaises(CloudPropertiesValidationError):
            Tags(["Bad"]).validate()

    def test_field_name(self):
        with self.assertRaises(InvalidTagError) as ctx:
            Tags(["Bad"]).validate(field="network.tags")
        self.assertEqual("network.tags", ctx.exception.field)


class TestTagFormat(CPITest):
    def test_format_checker(self):
        self.assertTrue(CPIFormatChecker.conforms("web-1", "tag"))
        self.assertFalse(CPIFormatChecker.conforms("Web", "tag"))
        self.assertTrue(is_valid_tag("a" * constants.TAG_MAX_LENGTH))

    def test_validator_reports_every_tag_in_order(self):
        errors = list(TagsValidator(TAGS_SCHEMA).iter_errors(["Bad", "ok", "x-"]))
        self.assertEqual([0, 2], [e.path[0] for e in errors])
        self.assertEqual(constants.RULE_FIRST_CHAR, errors[0].cause.rule)
        self.assertEqual(constants.RULE_LAST_CHAR, errors[1].cause.rule)

    def test_error_chained_to_schema_error(self):
        with self.assertRaises(InvalidTagError) as ctx:
            Tags(["ok", "Bad"]).validate()
        self.assertIsInstance(ctx.exception.__cause__, ValidationError)
