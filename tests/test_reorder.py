import unittest

from support import InMemoryRecordStore, make_session, task_texts

from dayplan.service import reorder


class TestDropIndex(unittest.TestCase):
    def test_drop_onto_itself_keeps_position(self):
        self.assertEqual(reorder.compute_drop_index(2, 2, True), 2)
        self.assertEqual(reorder.compute_drop_index(2, 2, False), 2)

    def test_drop_downwards_accounts_for_removal(self):
        self.assertEqual(reorder.compute_drop_index(0, 2, True), 1)
        self.assertEqual(reorder.compute_drop_index(0, 2, False), 2)

    def test_drop_upwards(self):
        self.assertEqual(reorder.compute_drop_index(3, 1, True), 1)
        self.assertEqual(reorder.compute_drop_index(3, 1, False), 2)

    def test_drop_below_last_row(self):
        self.assertEqual(reorder.compute_drop_index(0, 3, False), 3)

    def test_zone_indices(self):
        self.assertEqual(reorder.compute_zone_index(2, "top", 4), 0)
        self.assertEqual(reorder.compute_zone_index(1, "bottom", 4), 3)
        self.assertEqual(reorder.compute_zone_index(3, "bottom", 4), 3)

    def test_remap_selection(self):
        self.assertIsNone(reorder.remap_selection(None, 0, 2))
        self.assertEqual(reorder.remap_selection(0, 0, 2), 2)
        self.assertEqual(reorder.remap_selection(1, 0, 2), 0)
        self.assertEqual(reorder.remap_selection(2, 0, 2), 1)
        self.assertEqual(reorder.remap_selection(3, 0, 2), 3)
        self.assertEqual(reorder.remap_selection(0, 3, 1), 0)
        self.assertEqual(reorder.remap_selection(1, 3, 1), 2)
        self.assertEqual(reorder.remap_selection(2, 3, 1), 3)


class TestReorderTask(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.store = InMemoryRecordStore()
        self.store.put("2024-03-15", ["a", "b", "c", "d"])
        self.session = make_session(self.store)
        await self.session.open()

    async def test_drop_on_task_moves_and_saves(self):
        moved = await reorder.drop_on_task(self.session, 0, 2, drop_above=False)

        self.assertTrue(moved)
        self.assertEqual(task_texts(self.session.record), ["b", "c", "a", "d"])
        self.assertEqual(task_texts(self.store.records["2024-03-15"]), ["b", "c", "a", "d"])

    async def test_reorder_keeps_every_task(self):
        ids_before = sorted(task["id"] for task in self.session.record["todos"])

        await reorder.drop_on_zone(self.session, 1, "bottom")

        self.assertEqual(sorted(task["id"] for task in self.session.record["todos"]), ids_before)
        self.assertEqual(task_texts(self.session.record), ["a", "c", "d", "b"])

    async def test_drop_on_top_zone(self):
        await reorder.drop_on_zone(self.session, 3, "top")

        self.assertEqual(task_texts(self.session.record), ["d", "a", "b", "c"])

    async def test_noop_drop_does_not_save(self):
        moved = await reorder.drop_on_task(self.session, 1, 2, drop_above=True)

        self.assertFalse(moved)
        self.assertEqual(self.store.saves, [])

    async def test_selection_follows_the_selected_task(self):
        self.session.selection = 2

        await reorder.drop_on_task(self.session, 0, 3, drop_above=False)

        self.assertEqual(self.session.selection, 1)
        self.assertEqual(self.session.record["todos"][1]["text"], "c")

    async def test_dragged_selection_moves_with_it(self):
        self.session.selection = 0

        await reorder.drop_on_zone(self.session, 0, "bottom")

        self.assertEqual(self.session.selection, 3)

    async def test_moving_selected_first_task_to_end(self):
        store = InMemoryRecordStore()
        store.put("2024-03-20", ["A", "B", "C"])
        session = make_session(store, current_date="2024-03-20")
        await session.open()
        session.selection = 0

        await reorder.drop_on_zone(session, 0, "bottom")

        self.assertEqual(task_texts(session.record), ["B", "C", "A"])
        self.assertEqual(session.selection, 2)

    async def test_any_sequence_of_drops_keeps_identity_and_selection(self):
        store = InMemoryRecordStore()
        store.put("2024-03-21", ["a", "b", "c", "d", "e"])
        session = make_session(store, current_date="2024-03-21")
        await session.open()
        ids = sorted(task["id"] for task in session.record["todos"])
        session.selection = 1
        selected_id = session.record["todos"][1]["id"]

        for dragged in range(5):
            for target in range(5):
                for drop_above in (True, False):
                    dragged_id = session.record["todos"][dragged]["id"]
                    new_index = reorder.compute_drop_index(dragged, target, drop_above)

                    await reorder.drop_on_task(session, dragged, target, drop_above)

                    todos = session.record["todos"]
                    self.assertEqual(sorted(task["id"] for task in todos), ids)
                    self.assertEqual(todos[new_index]["id"], dragged_id)
                    self.assertEqual(todos[session.selection]["id"], selected_id)
            for zone in ("top", "bottom"):
                dragged_id = session.record["todos"][dragged]["id"]

                await reorder.drop_on_zone(session, dragged, zone)

                todos = session.record["todos"]
                self.assertEqual(sorted(task["id"] for task in todos), ids)
                self.assertEqual(todos[0 if zone == "top" else -1]["id"], dragged_id)
                self.assertEqual(todos[session.selection]["id"], selected_id)

        self.assertEqual(
            sorted(task["id"] for task in store.records["2024-03-21"]["todos"]), ids
        )

    async def test_out_of_range_raises(self):
        with self.assertRaises(IndexError):
            await reorder.reorder_task(self.session, 5, 0)
        with self.assertRaises(IndexError):
            await reorder.reorder_task(self.session, 0, 4)


if __name__ == "__main__":
    unittest.main(verbosity=2)
