"""
Test cases for the value tree variants.
"""

import copy
import dataclasses
import pickle
import unittest

from jsoncomb.model.values import (
    NULL,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)


class TestScalars(unittest.TestCase):
    """Test scalar variants."""

    def test_null_is_singleton(self):
        self.assertIs(JsonNull(), NULL)
        self.assertIs(copy.deepcopy(NULL), NULL)
        self.assertIs(pickle.loads(pickle.dumps(NULL)), NULL)

    def test_number_is_float(self):
        number = JsonNumber(3)
        self.assertIsInstance(number.value, float)
        self.assertEqual(number, JsonNumber(3.0))

    def test_equality_and_hashing(self):
        self.assertEqual(JsonString("a"), JsonString("a"))
        self.assertNotEqual(JsonString("a"), JsonString("b"))
        self.assertNotEqual(JsonBoolean(True), JsonNumber(1))
        self.assertEqual(len({JsonBoolean(True), JsonBoolean(True), NULL}), 2)

    def test_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            JsonString("a").value = "b"

    def test_all_variants_are_values(self):
        for value in (NULL, JsonBoolean(False), JsonNumber(0), JsonString(""),
                      JsonArray(), JsonObject()):
            with self.subTest(value=value):
                self.assertIsInstance(value, JsonValue)


class TestJsonArray(unittest.TestCase):
    """Test the array variant."""

    def test_stores_tuple(self):
        array = JsonArray([JsonNumber(1), NULL])
        self.assertEqual(array.values, (JsonNumber(1), NULL))
        self.assertEqual(len(array), 2)
        self.assertEqual(array[1], NULL)

    def test_accepts_generator(self):
        array = JsonArray(JsonNumber(i) for i in range(3))
        self.assertEqual(len(array), 3)

    def test_rejects_non_values(self):
        with self.assertRaises(TypeError):
            JsonArray([1, 2])

    def test_hashable(self):
        self.assertEqual(hash(JsonArray([NULL])), hash(JsonArray([NULL])))


class TestJsonObject(unittest.TestCase):
    """Test the object variant."""

    def test_string_keys_are_wrapped(self):
        obj = JsonObject({"a": JsonNumber(1)})
        self.assertEqual(list(obj.values), [JsonString("a")])
        self.assertEqual(obj["a"], JsonNumber(1))
        self.assertEqual(obj[JsonString("a")], JsonNumber(1))

    def test_duplicate_keys_last_write_wins(self):
        obj = JsonObject([("k", JsonNumber(1)), ("k", JsonNumber(2))])
        self.assertEqual(len(obj), 1)
        self.assertEqual(obj["k"], JsonNumber(2))

    def test_insertion_order_kept(self):
        obj = JsonObject([("b", NULL), ("a", NULL)])
        self.assertEqual([key.value for key in obj.values], ["b", "a"])

    def test_read_only(self):
        obj = JsonObject({"a": NULL})
        with self.assertRaises(TypeError):
            obj.values[JsonString("b")] = NULL

    def test_source_mapping_is_copied(self):
        source = {"a": NULL}
        obj = JsonObject(source)
        source["b"] = NULL
        self.assertEqual(len(obj), 1)

    def test_get_with_default(self):
        obj = JsonObject({"a": NULL})
        self.assertIs(obj.get("a"), NULL)
        self.assertIsNone(obj.get("missing"))
        self.assertEqual(obj.get("missing", JsonNumber(0)), JsonNumber(0))

    def test_invalid_entries(self):
        with self.assertRaises(TypeError):
            JsonObject({1: NULL})
        with self.assertRaises(TypeError):
            JsonObject({"a": "not a value"})

    def test_equality_and_hash(self):
        first = JsonObject([("a", NULL), ("b", JsonBoolean(True))])
        second = JsonObject([("b", JsonBoolean(True)), ("a", NULL)])
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))


class TestStringForms(unittest.TestCase):
    """Test str() and pretty rendering hooks on values."""

    def test_str_is_compact(self):
        value = JsonArray([JsonNumber(1), JsonString("x")])
        self.assertEqual(str(value), '[1,"x"]')

    def test_pretty_string(self):
        value = JsonArray([NULL])
        self.assertEqual(value.to_pretty_string(), "[\n  null\n]")


if __name__ == "__main__":
    unittest.main()
