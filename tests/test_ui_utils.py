import unittest

from input_mask.ui_utils import caret_column, display_width, truncate_to_width, visible_window


class TestUiUtils(unittest.TestCase):
    def test_display_width(self):
        self.assertEqual(display_width("abc"), 3)
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(display_width("a\u200bb"), 2)
        self.assertEqual(display_width(""), 0)

    def test_truncate_to_width(self):
        self.assertEqual(truncate_to_width("日本語", 5), "日本")
        self.assertEqual(truncate_to_width("abc", 0), "")

    def test_caret_column(self):
        self.assertEqual(caret_column("日本x", 2), 4)
        self.assertEqual(caret_column("abc", 99), 3)

    def test_visible_window(self):
        self.assertEqual(visible_window("abc", 1, 10), (0, "abc", 1))
        self.assertEqual(visible_window("abcdef", 6, 4), (3, "def", 3))


if __name__ == "__main__":
    unittest.main()
