import unittest

from app_state import FocusEditor, Model, SaveDocument, initial_model, update
from cell import Numeric, Text, parse_user_input
from input_state import BulkTextSelection, InputState, select, selected_ref
from intents import (
    CancelEdit,
    Commit,
    DeleteCol,
    DeleteRow,
    EditBuffer,
    InsertCol,
    InsertRow,
    KeyPressed,
    MoveSelection,
    Select,
    SelectBulkText,
    StartEdit,
)
from navigation import Direction
from persistence import decode_document
from table import CellRef, Table


def _table(rows):
    return Table.from_rows([[parse_user_input(v) for v in row] for row in rows])


def _run(model, *intents):
    effects = []
    for intent in intents:
        transition = update(model, intent)
        model = transition.model
        effects.extend(transition.effects)
    return model, effects


class CommitTests(unittest.TestCase):
    def setUp(self):
        self.model = initial_model(_table([["Name", "Age"], ["Bob", "18"]]))

    def test_commit_numeric_text(self):
        model, effects = _run(self.model, StartEdit(None, ""), EditBuffer("3.14"), Commit())
        self.assertEqual(model.table.rows[0][0], Numeric(3.14))
        self.assertEqual(model.input, select(CellRef(0, 0)))
        saves = [e for e in effects if isinstance(e, SaveDocument)]
        self.assertEqual(len(saves), 1)
        self.assertEqual(decode_document(saves[0].document), model.table)

    def test_commit_plain_text(self):
        model, _ = _run(self.model, StartEdit(None, "abc"), Commit())
        self.assertEqual(model.table.rows[0][0], Text("abc"))

    def test_start_edit_requests_focus(self):
        transition = update(self.model, StartEdit(CellRef(1, 1), "18"))
        self.assertEqual(transition.effects, [FocusEditor()])
        self.assertTrue(transition.model.input.is_editing)

    def test_cancel_discards_buffer_without_saving(self):
        model, effects = _run(self.model, StartEdit(None, "zzz"), CancelEdit())
        self.assertEqual(model.table, self.model.table)
        self.assertFalse(any(isinstance(e, SaveDocument) for e in effects))
        self.assertEqual(model.input, select(CellRef(0, 0)))

    def test_commit_while_idle_is_noop(self):
        transition = update(self.model, Commit())
        self.assertIs(transition.model, self.model)
        self.assertEqual(transition.effects, [])

    def test_commit_outside_table_does_not_save(self):
        model, effects = _run(self.model, StartEdit(CellRef(5, 5), "x"), Commit())
        self.assertIs(model.table, self.model.table)
        self.assertEqual(effects, [FocusEditor()])
        self.assertEqual(model.input, select(CellRef(5, 5)))


class BulkTextTests(unittest.TestCase):
    def setUp(self):
        self.model = initial_model(_table([["Name", "Age"], ["Bob", "18"]]))

    def test_select_bulk_text_seeds_csv(self):
        model, _ = _run(self.model, SelectBulkText())
        self.assertIsInstance(model.input.selected, BulkTextSelection)
        self.assertEqual(model.input.text, "Name,Age\nBob,18")

    def test_bulk_commit_replaces_table(self):
        model, effects = _run(
            self.model, SelectBulkText(), EditBuffer("a,b\n1.50,x\n2"), Commit()
        )
        self.assertEqual(model.table, _table([["a", "b"], ["1.5", "x"], ["2", ""]]))
        self.assertEqual(model.input.text, "a,b\n1.5,x\n2,")
        self.assertEqual(len([e for e in effects if isinstance(e, SaveDocument)]), 1)

    def test_bulk_commit_of_equal_table_does_not_save(self):
        model, effects = _run(
            self.model, SelectBulkText(), EditBuffer("Name,Age\nBob,18.0"), Commit()
        )
        self.assertIs(model.table, self.model.table)
        self.assertEqual(model.input.text, "Name,Age\nBob,18")
        self.assertEqual(effects, [])

    def test_keys_are_ignored_on_bulk_text(self):
        model, _ = _run(self.model, SelectBulkText())
        for key in ("x", "Enter", "ArrowDown", "Escape"):
            self.assertIs(update(model, KeyPressed(key)).model, model)

    def test_structural_ops_need_a_selected_cell(self):
        model, _ = _run(self.model, SelectBulkText())
        for intent in (InsertRow(), DeleteRow(), InsertCol(), DeleteCol()):
            transition = update(model, intent)
            self.assertIs(transition.model, model)
            self.assertEqual(transition.effects, [])


class KeyTests(unittest.TestCase):
    def setUp(self):
        self.model = initial_model(_table([["a", "b"], ["c", "d"]]))

    def test_printable_key_starts_edit_seeded(self):
        model, effects = _run(self.model, KeyPressed("7"))
        self.assertEqual(model.input, InputState(select(CellRef(0, 0)).selected, True, "7"))
        self.assertEqual(effects, [FocusEditor()])

    def test_enter_starts_edit_with_empty_buffer(self):
        model, _ = _run(self.model, Select(CellRef(1, 1)), KeyPressed("Enter"))
        self.assertTrue(model.input.is_editing)
        self.assertEqual(model.input.text, "")
        self.assertEqual(selected_ref(model.input), CellRef(1, 1))

    def test_arrows_move_selection(self):
        model, _ = _run(self.model, KeyPressed("ArrowDown"), KeyPressed("ArrowRight"))
        self.assertEqual(selected_ref(model.input), CellRef(1, 1))
        model, _ = _run(model, KeyPressed("ArrowDown"))
        self.assertEqual(selected_ref(model.input), CellRef(1, 1))

    def test_keys_suppressed_while_editing_except_escape(self):
        model, _ = _run(self.model, KeyPressed("x"))
        self.assertIs(update(model, KeyPressed("ArrowDown")).model, model)
        self.assertIs(update(model, KeyPressed("y")).model, model)
        cancelled, _ = _run(model, KeyPressed("Escape"))
        self.assertEqual(cancelled.input, select(CellRef(0, 0)))

    def test_unknown_key_is_noop(self):
        self.assertIs(update(self.model, KeyPressed("F12")).model, self.model)

    def test_move_selection_intent(self):
        model, effects = _run(self.model, MoveSelection(Direction.DOWN))
        self.assertEqual(selected_ref(model.input), CellRef(1, 0))
        self.assertEqual(effects, [])


class StructuralTests(unittest.TestCase):
    def setUp(self):
        self.model = Model(_table([["a", "b"], ["c", "d"]]), select(CellRef(1, 1)))

    def _saves(self, effects):
        return [e for e in effects if isinstance(e, SaveDocument)]

    def test_insert_row_before_and_after(self):
        before, effects = _run(self.model, InsertRow(after=False))
        self.assertEqual(before.table.rows[1], (Text(""), Text("")))
        self.assertEqual(selected_ref(before.input), CellRef(1, 1))
        self.assertEqual(len(self._saves(effects)), 1)

        after, _ = _run(self.model, InsertRow(after=True))
        self.assertEqual(after.table.rows[2], (Text(""), Text("")))
        self.assertEqual(selected_ref(after.input), CellRef(2, 1))

    def test_insert_col_before_and_after(self):
        before, _ = _run(self.model, InsertCol(after=False))
        self.assertEqual(before.table.rows[0], (Text("a"), Text(""), Text("b")))
        after, _ = _run(self.model, InsertCol(after=True))
        self.assertEqual(after.table.rows[0], (Text("a"), Text("b"), Text("")))
        self.assertEqual(selected_ref(after.input), CellRef(1, 2))

    def test_delete_row_clamps_selection(self):
        model, effects = _run(self.model, DeleteRow())
        self.assertEqual(model.table.rows, ((Text("a"), Text("b")),))
        self.assertEqual(selected_ref(model.input), CellRef(0, 1))
        self.assertEqual(len(self._saves(effects)), 1)

    def test_delete_col_clamps_selection(self):
        model, _ = _run(self.model, DeleteCol())
        self.assertEqual(model.table.size(), (2, 1))
        self.assertEqual(selected_ref(model.input), CellRef(1, 0))

    def test_delete_everything_then_rebuild(self):
        model, effects = _run(self.model, DeleteRow(), DeleteRow())
        self.assertEqual(model.table, Table.empty())
        self.assertEqual(selected_ref(model.input), CellRef(0, 0))
        self.assertEqual(len(self._saves(effects)), 2)
        noop = update(model, DeleteRow())
        self.assertEqual(noop.effects, [])
        model, _ = _run(model, InsertRow(), InsertCol())
        self.assertEqual(model.table.size(), (1, 1))

    def test_structural_op_discards_edit(self):
        model, _ = _run(self.model, StartEdit(None, "pending"), InsertRow())
        self.assertFalse(model.input.is_editing)
        self.assertEqual(model.input.text, "")

    def test_unknown_intent_raises(self):
        with self.assertRaises(TypeError):
            update(self.model, object())


if __name__ == "__main__":
    unittest.main()
