from googlecpi.instance.tags import Tags
from googlecpi.schema import (
    BOOLEAN,
    INTEGER,
    JSON_SCHEMA,
    OPTIONAL_BOOLEAN,
    STRING,
    STRING_LIST,
    TAGS,
    CloudPropertiesValidator,
    Field,
    close_schema,
    schema_from_fields,
)
from googlecpi.tests.unit import CPITest


class TestField(CPITest):
    def test_defaults(self):
        self.assertEqual("", Field("a", "a", STRING).default)
        self.assertEqual(0, Field("a", "a", INTEGER).default)
        self.assertIs(False, Field("a", "a", BOOLEAN).default)
        self.assertIsNone(Field("a", "a", OPTIONAL_BOOLEAN).default)
        self.assertEqual((), Field("a", "a", STRING_LIST).default)
        self.assertEqual(Tags(), Field("a", "a", TAGS).default)

    def test_decode_null(self):
        self.assertEqual("", Field("a", "a", STRING).decode(None))
        self.assertIsNone(Field("a", "a", OPTIONAL_BOOLEAN).decode(None))

    def test_decode(self):
        self.assertEqual(2, Field("a", "a", INTEGER).decode(2))
        self.assertEqual(("x", "y"), Field("a", "a", STRING_LIST).decode(["x", "y"]))
        self.assertIsInstance(Field("a", "a", TAGS).decode(["x"]), Tags)

    def test_encode(self):
        self.assertEqual(["x"], Field("a", "a", TAGS).encode(Tags(["x"])))
        self.assertEqual("x", Field("a", "a", STRING).encode("x"))

    def test_is_default(self):
        self.assertTrue(Field("a", "a", BOOLEAN).is_default(False))
        self.assertFalse(Field("a", "a", OPTIONAL_BOOLEAN).is_default(False))
        self.assertTrue(Field("a", "a", OPTIONAL_BOOLEAN).is_default(None))
        self.assertTrue(Field("a", "a", INTEGER).is_default(0))
        self.assertTrue(Field("a", "a", STRING_LIST).is_default(()))


class TestSchemaFromFields(CPITest):
    def test_schema(self):
        fields = (
            Field("disk_type", "type", STRING, "Disk type"),
            Field("size", "size", INTEGER),
        )
        schema = schema_from_fields("Test", fields)
        self.assertEqual("object", schema["type"])
        self.assertEqual("Test", schema["title"])
        self.assertEqual(JSON_SCHEMA, schema["$schema"])
        self.assertEqual(["type", "size"], list(schema["properties"].keys()))
        self.assertEqual("Disk type", schema["properties"]["type"]["description"])
        self.assertNotIn("description", schema["properties"]["size"])
        self.assertNotIn("additionalProperties", schema)

    def test_close_schema(self):
        schema = schema_from_fields("Test", (Field("a", "a", STRING),))
        closed = close_schema(schema)
        self.assertFalse(closed["additionalProperties"])
        # the original is left untouched
        self.assertNotIn("additionalProperties", schema)


class TestCloudPropertiesValidator(CPITest):
    def setUp(self):
        super().setUp()
        schema = schema_from_fields("Test", (Field("cpu", "cpu", INTEGER),))
        self.validator = CloudPropertiesValidator(schema)

    def test_integers(self):
        for value in [0, 2, -1, 2**63 - 1, -(2**63), None]:
            self.assertTrue(self.validator.is_valid({"cpu": value}), value)

    def test_floats_are_not_integers(self):
        for value in [2.0, 1e20, 2.5]:
            self.assertFalse(self.validator.is_valid({"cpu": value}), value)

    def test_booleans_are_not_integers(self):
        self.assertFalse(self.validator.is_valid({"cpu": True}))

    def test_int64_bounds(self):
        self.assertFalse(self.validator.is_valid({"cpu": 2**63}))
        self.assertFalse(self.validator.is_valid({"cpu": -(2**63) - 1}))
