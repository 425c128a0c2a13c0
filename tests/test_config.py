import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from input_mask.config import (
    DEBUG_LOG_ENV,
    DEFAULT_FORMAT_CHARS,
    FORMAT_CHARS_ENV,
    debug_log_enabled,
    format_chars_from_env,
    load_format_chars,
)
from input_mask.error_codes import MaskError, format_error
from input_mask.parse_mask import compile_mask
from input_mask.predicates import is_character_filling_position


class TestFormatChars(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, name, payload):
        p = self.dir / name
        p.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
        return p

    def test_defaults_are_read_only(self):
        self.assertEqual(set(DEFAULT_FORMAT_CHARS), {"9", "a", "*"})
        with self.assertRaises(TypeError):
            DEFAULT_FORMAT_CHARS["#"] = "[0-9]"  # type: ignore[index]

    def test_load_merges_over_defaults(self):
        table = load_format_chars(self._write("chars.json", {"#": "[0-9a-f]"}))
        self.assertIn("9", table)
        self.assertEqual(table["#"], "[0-9a-f]")
        self.assertNotIn("#", DEFAULT_FORMAT_CHARS)
        c = compile_mask("##", format_chars=table)
        self.assertTrue(is_character_filling_position(c, "f", 1))

    def test_load_errors(self):
        with self.assertRaises(MaskError) as ctx:
            load_format_chars(self._write("bad.json", "{not json"))
        self.assertEqual(ctx.exception.code, "M005")
        with self.assertRaises(MaskError) as ctx:
            load_format_chars(self.dir / "missing.json")
        self.assertEqual(ctx.exception.code, "M005")
        with self.assertRaises(MaskError) as ctx:
            load_format_chars(self._write("key.json", {"ab": "[0-9]"}))
        self.assertEqual(ctx.exception.code, "M004")
        with self.assertRaises(MaskError) as ctx:
            load_format_chars(self._write("re.json", {"#": "["}))
        self.assertEqual(ctx.exception.code, "M004")
        with self.assertRaises(MaskError) as ctx:
            load_format_chars(self._write("list.json", ["9"]))
        self.assertEqual(ctx.exception.code, "M004")

    def test_from_env(self):
        path = self._write("env.json", {"#": "[xyz]"})
        with mock.patch.dict(os.environ, {FORMAT_CHARS_ENV: str(path)}):
            self.assertEqual(format_chars_from_env()["#"], "[xyz]")
        with mock.patch.dict(os.environ, {FORMAT_CHARS_ENV: ""}):
            self.assertIs(format_chars_from_env(), DEFAULT_FORMAT_CHARS)

    def test_debug_toggle(self):
        with mock.patch.dict(os.environ, {DEBUG_LOG_ENV: "yes"}):
            self.assertTrue(debug_log_enabled())
        with mock.patch.dict(os.environ, {DEBUG_LOG_ENV: "0"}):
            self.assertFalse(debug_log_enabled())


class TestErrorCodes(unittest.TestCase):
    def test_format_error(self):
        self.assertEqual(
            format_error("M002", "compile", "entry 0: 'ab'"),
            "Error [M002]: Literal mask entry must be a single character. Stage: compile. Details: entry 0: 'ab'",
        )
        self.assertEqual(format_error("X999", "", None), "Error [X999]: Unknown error. Stage: -.")

    def test_mask_error_is_value_error(self):
        err = MaskError("M001", "compile")
        self.assertIsInstance(err, ValueError)
        self.assertTrue(str(err).startswith("Error [M001]"))


if __name__ == "__main__":
    unittest.main()
