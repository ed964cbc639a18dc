import math
import unittest
from datetime import date

from nytgames.core.exceptions import CardinalityError, ShapeError
from nytgames.decoding.grid import chunk_rows, flatten_rows
from nytgames.decoding.json_node import JsonNode


class JsonNodeTests(unittest.TestCase):
    def test_missing_field_names_the_path(self) -> None:
        node = JsonNode.parse('{"body": [{"dimensions": {"height": 5}}]}')
        with self.assertRaises(ShapeError) as ctx:
            node.field("body").exactly_one().at("dimensions", "width")
        self.assertEqual(ctx.exception.path, "$.body[0].dimensions")
        self.assertIn("width", str(ctx.exception))

    def test_wrong_type_is_reported(self) -> None:
        node = JsonNode({"id": "abc"})
        with self.assertRaises(ShapeError) as ctx:
            node.field("id").as_int()
        self.assertIn("$.id", str(ctx.exception))
        self.assertIn('"abc"', str(ctx.exception))

    def test_optional_treats_null_as_missing(self) -> None:
        node = JsonNode({"editor": None})
        self.assertIsNone(node.optional("editor"))
        self.assertIsNone(node.optional("constructors"))
        self.assertIsNone(node.optional_at("today", "editor"))

    def test_int_accepts_numeric_strings_but_not_bools(self) -> None:
        self.assertEqual(JsonNode("12").as_int(), 12)
        self.assertEqual(JsonNode(7.0).as_int(), 7)
        with self.assertRaises(ShapeError):
            JsonNode(True).as_int()

    def test_char_requires_single_character(self) -> None:
        self.assertEqual(JsonNode("e").as_char(), "e")
        with self.assertRaises(ShapeError):
            JsonNode("ee").as_char()

    def test_date_keeps_calendar_day(self) -> None:
        self.assertEqual(JsonNode("2026-10-18").as_date(), date(2026, 10, 18))
        self.assertEqual(JsonNode("2026-10-18T23:30:00Z").as_date(), date(2026, 10, 18))
        self.assertEqual(JsonNode("2026-10-18 00:00:00").as_date(), date(2026, 10, 18))
        with self.assertRaises(ShapeError):
            JsonNode("yesterday").as_date()

    def test_exactly_one_reports_actual_count(self) -> None:
        for items in ([], [{}, {}]):
            with self.subTest(count=len(items)):
                with self.assertRaises(CardinalityError) as ctx:
                    JsonNode({"body": items}).field("body").exactly_one()
                self.assertEqual(ctx.exception.actual, len(items))
                self.assertEqual(ctx.exception.expected, 1)
                self.assertIn(f"but got {len(items)} entries", str(ctx.exception))

    def test_invalid_json_is_a_shape_error(self) -> None:
        with self.assertRaises(ShapeError):
            JsonNode.parse("<html>")

    def test_entries_carry_key_paths(self) -> None:
        entries = JsonNode({"easy": 1, "hard": 2}).entries()
        self.assertEqual([(key, node.path) for key, node in entries], [("easy", "$.easy"), ("hard", "$.hard")])


class GridReshapeTests(unittest.TestCase):
    def test_chunk_then_flatten_restores_order(self) -> None:
        for width, count in ((5, 25), (3, 9), (4, 10), (15, 225)):
            with self.subTest(width=width, count=count):
                cells = [None if i % 7 == 0 else chr(65 + i % 26) for i in range(count)]
                rows = chunk_rows(cells, width)
                self.assertEqual(len(rows), math.ceil(count / width))
                self.assertTrue(all(len(row) == width for row in rows[:-1]))
                self.assertEqual(flatten_rows(rows), cells)

    def test_chunk_rejects_non_positive_width(self) -> None:
        with self.assertRaises(ValueError):
            chunk_rows([1, 2, 3], 0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
