import unittest

from input_mask.selection_editor import SelectEditor
from input_mask.state import ChangeState, Selection


class TestSelectEditor(unittest.TestCase):
    def test_round_trip_state(self):
        ed = SelectEditor.from_state(ChangeState("hello", Selection(1, 3)))
        self.assertEqual(ed.snapshot(), ChangeState("hello", Selection(1, 3)))
        ed = SelectEditor.from_state(ChangeState("hello", Selection()))
        self.assertEqual(ed.snapshot().selection, Selection(5, 5))

    def test_insert_replaces_selection(self):
        ed = SelectEditor("hello world", 11, 6, 11)
        ed.insert("there")
        self.assertEqual(ed.snapshot(), ChangeState("hello there", Selection(11, 11)))

    def test_backspace_and_delete(self):
        ed = SelectEditor("abc", 2, 2, 2)
        ed.backspace()
        self.assertEqual(ed.snapshot(), ChangeState("ac", Selection(1, 1)))
        ed.delete()
        self.assertEqual(ed.snapshot(), ChangeState("a", Selection(1, 1)))
        ed.delete()
        self.assertEqual(ed.text, "a")

    def test_cut(self):
        ed = SelectEditor("abcdef", 4, 1, 4)
        self.assertEqual(ed.cut(), "bcd")
        self.assertEqual(ed.snapshot(), ChangeState("aef", Selection(1, 1)))
        self.assertEqual(ed.cut(), "")

    def test_select_keeps_anchor(self):
        ed = SelectEditor("abcdef", 3, 3, 3)
        ed.select_right()
        ed.select_right()
        self.assertEqual(ed.bounds(), (3, 5))
        ed.select_left()
        self.assertEqual(ed.bounds(), (3, 4))
        ed = SelectEditor.from_state(ChangeState("abcdef", Selection(2, 4)), caret=2)
        ed.select_left()
        self.assertEqual(ed.bounds(), (1, 4))


if __name__ == "__main__":
    unittest.main()
