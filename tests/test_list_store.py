import unittest

from todo_lists.models.lists import SessionState, Todo, TodoList
from todo_lists.services.list_store import (
    DuplicateName,
    InvalidLength,
    ListNotFound,
    ListStore,
    TodoNotFound,
    display_order,
    is_list_complete,
    list_class,
    sort_lists,
    sort_todos,
    todos_remaining_count,
    validate_list_name,
    validate_todo_text,
)


class ValidationTestCase(unittest.TestCase):

    def test_list_name_length_bounds(self):
        self.assertIsInstance(validate_list_name("", []), InvalidLength)
        self.assertIsInstance(validate_list_name("x" * 101, []), InvalidLength)
        self.assertIsNone(validate_list_name("x", []))
        self.assertIsNone(validate_list_name("x" * 100, []))

    def test_list_name_must_be_unique(self):
        lists = [TodoList(id=0, name="Groceries")]
        error = validate_list_name("Groceries", lists)
        self.assertIsInstance(error, DuplicateName)
        self.assertEqual(error.message, "The list name must be unique.")
        self.assertIsNone(validate_list_name("groceries", lists))

    def test_todo_text_length_bounds(self):
        self.assertIsInstance(validate_todo_text(""), InvalidLength)
        self.assertIsInstance(validate_todo_text("x" * 101), InvalidLength)
        self.assertIsNone(validate_todo_text("Milk"))


class ListStoreTestCase(unittest.TestCase):

    def setUp(self):
        self.store = ListStore()

    def test_duplicate_list_is_rejected(self):
        self.store.create_list("A")
        with self.assertRaises(DuplicateName):
            self.store.create_list("A")
        self.assertEqual(len(self.store.lists), 1)

    def test_invalid_name_does_not_create_list(self):
        with self.assertRaises(InvalidLength):
            self.store.create_list("")
        self.assertEqual(self.store.lists, [])

    def test_delete_list_shifts_later_lists_down(self):
        for name in ["A", "B", "C", "D"]:
            self.store.create_list(name)
        self.store.delete_list(self.store.lists[1].id)
        self.assertEqual([l.name for l in self.store.lists], ["A", "C", "D"])

    def test_ids_are_not_reused_after_delete(self):
        first = self.store.create_list("A")
        self.store.delete_list(first.id)
        second = self.store.create_list("B")
        self.assertNotEqual(first.id, second.id)
        with self.assertRaises(ListNotFound):
            self.store.find_list(first.id)

    def test_rename_list(self):
        todo_list = self.store.create_list("Old")
        self.store.rename_list(todo_list.id, "New")
        self.assertEqual(self.store.find_list(todo_list.id).name, "New")

    def test_rename_to_existing_name_is_rejected(self):
        self.store.create_list("A")
        b = self.store.create_list("B")
        with self.assertRaises(DuplicateName):
            self.store.rename_list(b.id, "A")
        self.assertEqual(b.name, "B")

    def test_rename_unknown_list(self):
        with self.assertRaises(ListNotFound):
            self.store.rename_list(7, "Anything")

    def test_todo_operations(self):
        todo_list = self.store.create_list("Chores")
        dishes = self.store.add_todo(todo_list.id, "Dishes")
        laundry = self.store.add_todo(todo_list.id, "Laundry")
        self.assertFalse(dishes.completed)

        self.store.set_todo_completion(todo_list.id, laundry.id, True)
        self.assertTrue(laundry.completed)

        self.store.delete_todo(todo_list.id, dishes.id)
        self.assertEqual([t.name for t in todo_list.todos], ["Laundry"])
        with self.assertRaises(TodoNotFound):
            self.store.find_todo(todo_list.id, dishes.id)

    def test_completed_todo_can_be_reopened(self):
        todo_list = self.store.create_list("Chores")
        dishes = self.store.add_todo(todo_list.id, "Dishes")
        self.store.add_todo(todo_list.id, "Laundry")

        self.store.set_todo_completion(todo_list.id, dishes.id, True)
        self.assertEqual([t.name for t in sort_todos(todo_list.todos)], ["Laundry", "Dishes"])

        self.store.set_todo_completion(todo_list.id, dishes.id, False)
        self.assertFalse(dishes.completed)
        self.assertEqual([t.name for t in sort_todos(todo_list.todos)], ["Dishes", "Laundry"])

    def test_invalid_todo_is_not_added(self):
        todo_list = self.store.create_list("Chores")
        with self.assertRaises(InvalidLength):
            self.store.add_todo(todo_list.id, "")
        self.assertEqual(todo_list.todos, [])

    def test_complete_all(self):
        todo_list = self.store.create_list("Chores")
        self.store.add_todo(todo_list.id, "Dishes")
        self.store.add_todo(todo_list.id, "Laundry")
        self.store.complete_all(todo_list.id)
        self.assertTrue(all(t.completed for t in todo_list.todos))
        self.assertTrue(is_list_complete(todo_list))
        self.assertEqual(list_class(todo_list), "complete")

    def test_groceries_scenario(self):
        groceries = self.store.create_list("Groceries")
        milk = self.store.add_todo(groceries.id, "Milk")
        self.store.add_todo(groceries.id, "Eggs")
        self.store.set_todo_completion(groceries.id, milk.id, True)
        self.assertEqual([t.name for t in sort_todos(groceries.todos)], ["Eggs", "Milk"])
        self.assertEqual(todos_remaining_count(groceries), 1)

    def test_state_survives_serialization(self):
        todo_list = self.store.create_list("Chores")
        self.store.add_todo(todo_list.id, "Dishes")
        self.store.state.error = "oops"

        restored = ListStore(SessionState.from_dict(self.store.state.to_dict()))
        self.assertEqual(restored.state, self.store.state)
        self.assertEqual(restored.create_list("Next").id, 1)
        self.assertEqual(restored.add_todo(todo_list.id, "Laundry").id, 1)


class DisplayOrderTestCase(unittest.TestCase):

    def test_empty_list_is_never_complete(self):
        self.assertFalse(is_list_complete(TodoList(id=0, name="Empty")))
        self.assertEqual(list_class(TodoList(id=0, name="Empty")), "")

    def test_stable_partition(self):
        todos = [
            Todo(id=0, name="a", completed=True),
            Todo(id=1, name="b"),
            Todo(id=2, name="c", completed=True),
            Todo(id=3, name="d"),
        ]
        ordered = sort_todos(todos)
        self.assertEqual([t.name for t in ordered], ["b", "d", "a", "c"])
        self.assertEqual(sort_todos(ordered), ordered)

    def test_lists_partition_on_completeness(self):
        done = TodoList(id=0, name="Done", todos=[Todo(id=0, name="x", completed=True)])
        empty = TodoList(id=1, name="Empty")
        open_list = TodoList(id=2, name="Open", todos=[Todo(id=0, name="y")])
        self.assertEqual([l.name for l in sort_lists([done, empty, open_list])], ["Empty", "Open", "Done"])

    def test_display_order_with_custom_predicate(self):
        self.assertEqual(display_order([1, 2, 3, 4, 5], lambda n: n % 2 == 0), [1, 3, 5, 2, 4])


class FlashTestCase(unittest.TestCase):

    def test_pop_flash_clears_messages(self):
        state = SessionState(error="bad", success="good")
        self.assertEqual(state.pop_flash(), {"error": "bad", "success": "good"})
        self.assertEqual(state.pop_flash(), {"error": None, "success": None})


if __name__ == "__main__":
    unittest.main()
