import unittest

from input_mask.parse_mask import NO_MASK, compile_mask
from input_mask.predicates import (
    get_filled_length,
    get_left_editable_position,
    get_right_editable_position,
    is_character_allowed_at_position,
    is_character_filling_position,
    is_position_editable,
    is_value_empty,
    is_value_filled,
)


PHONE = compile_mask("+7 (999) 999 99 99", "_")
PHONE_COMPACT = compile_mask("+7 (999) 999 99 99")


class TestPredicates(unittest.TestCase):
    def test_is_position_editable(self):
        self.assertFalse(is_position_editable(PHONE, 0))
        self.assertTrue(is_position_editable(PHONE, 4))
        self.assertFalse(is_position_editable(PHONE, 7))
        self.assertFalse(is_position_editable(PHONE, 18))
        self.assertFalse(is_position_editable(PHONE, -1))
        self.assertFalse(is_position_editable(PHONE, None))
        self.assertFalse(is_position_editable(NO_MASK, 0))

    def test_is_character_filling_position(self):
        self.assertTrue(is_character_filling_position(PHONE, "5", 4))
        self.assertFalse(is_character_filling_position(PHONE, "x", 4))
        self.assertTrue(is_character_filling_position(PHONE, "(", 3))
        self.assertFalse(is_character_filling_position(PHONE, "5", 3))
        self.assertFalse(is_character_filling_position(PHONE, "", 4))
        self.assertFalse(is_character_filling_position(PHONE, "5", 18))
        self.assertFalse(is_character_filling_position(NO_MASK, "5", 0))

    def test_is_character_allowed_at_position(self):
        self.assertTrue(is_character_allowed_at_position(PHONE, "5", 4))
        self.assertTrue(is_character_allowed_at_position(PHONE, "_", 4))
        self.assertFalse(is_character_allowed_at_position(PHONE, "x", 4))
        self.assertFalse(is_character_allowed_at_position(PHONE_COMPACT, "_", 4))

    def test_value_empty_and_filled(self):
        self.assertTrue(is_value_empty(PHONE, "+7 (___) ___ __ __"))
        self.assertFalse(is_value_empty(PHONE, "+7 (4__) ___ __ __"))
        self.assertTrue(is_value_empty(PHONE_COMPACT, "+7 ("))
        self.assertTrue(is_value_filled(PHONE, "+7 (495) 315 64 54"))
        self.assertFalse(is_value_filled(PHONE, "+7 (495) 315 64 5_"))
        self.assertFalse(is_value_filled(NO_MASK, "anything"))
        self.assertFalse(is_value_filled(compile_mask("+-"), "+-"))

    def test_get_filled_length(self):
        self.assertEqual(get_filled_length(PHONE, "+7 (495) 3__ __ __"), 10)
        self.assertEqual(get_filled_length(PHONE, "+7 (___) ___ __ __"), 0)
        self.assertEqual(get_filled_length(PHONE, "+7 (495) 315 64 54"), 18)
        self.assertEqual(get_filled_length(PHONE_COMPACT, ""), 0)

    def test_editable_position_search(self):
        self.assertEqual(get_right_editable_position(PHONE, 7), 9)
        self.assertEqual(get_right_editable_position(PHONE, 0), 4)
        self.assertEqual(get_right_editable_position(PHONE, 9), 9)
        self.assertIsNone(get_right_editable_position(PHONE, 18))
        self.assertEqual(get_left_editable_position(PHONE, 8), 6)
        self.assertEqual(get_left_editable_position(PHONE, 30), 17)
        self.assertIsNone(get_left_editable_position(PHONE, 3))
        self.assertIsNone(get_left_editable_position(PHONE, None))
        self.assertIsNone(get_right_editable_position(NO_MASK, 0))


if __name__ == "__main__":
    unittest.main()
