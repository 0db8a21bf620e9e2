import unittest

from support import InMemoryRecordStore, make_session, task_texts

from dayplan.service import task_list
from dayplan.service.task_list import TaskMoveError, TaskValidationError


class TestMoveTask(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.store = InMemoryRecordStore()
        self.store.put("2024-03-15", ["a", "b", "c"])
        self.store.put("2024-03-16", ["existing"])
        self.session = make_session(self.store)
        await self.session.open()
        self.store.saves.clear()

    async def test_move_to_next_day_resets_completion(self):
        await task_list.toggle_completed(self.session, 1)
        self.store.saves.clear()
        self.session.record["todos"][1]["move_to_next_day"] = True

        moved = await task_list.move_to_next_day(self.session, 1)

        self.assertEqual(moved["id"], "2024-03-15-1")
        self.assertFalse(moved["completed"])
        self.assertFalse(moved["move_to_next_day"])
        self.assertEqual(task_texts(self.store.records["2024-03-16"]), ["existing", "b"])
        self.assertEqual(task_texts(self.store.records["2024-03-15"]), ["a", "c"])
        self.assertEqual(task_texts(self.session.record), ["a", "c"])
        # The target is written before the task leaves the source
        self.assertEqual(self.store.saved_dates(), ["2024-03-16", "2024-03-15"])

    async def test_move_there_and_back_restores_the_task(self):
        task_id = self.session.record["todos"][0]["id"]

        await task_list.move_to_date(self.session, task_id, "2024-03-15", "2024-03-16")
        await task_list.move_to_date(self.session, task_id, "2024-03-16", "2024-03-15")

        self.assertEqual(task_texts(self.session.record), ["b", "c", "a"])
        self.assertEqual(task_texts(self.store.records["2024-03-16"]), ["existing"])

    async def test_round_trip_of_completed_task_arrives_not_completed(self):
        await task_list.toggle_completed(self.session, 0)
        task_id = self.session.record["todos"][0]["id"]

        await task_list.move_to_date(self.session, task_id, "2024-03-15", "2024-03-16")
        await task_list.move_to_date(self.session, task_id, "2024-03-16", "2024-03-15")

        self.assertFalse(self.session.record["todos"][-1]["completed"])
        self.assertEqual(self.session.record["todos"][-1]["id"], task_id)

    async def test_target_save_failure_keeps_task_on_source(self):
        self.store.failing_saves.add("2024-03-16")

        with self.assertRaises(TaskMoveError):
            await task_list.move_to_next_day(self.session, 0)

        self.assertEqual(task_texts(self.session.record), ["a", "b", "c"])
        self.assertEqual(task_texts(self.store.records["2024-03-15"]), ["a", "b", "c"])
        self.assertEqual(task_texts(self.store.records["2024-03-16"]), ["existing"])

    async def test_source_save_failure_keeps_task_on_target(self):
        self.store.failing_saves.add("2024-03-15")

        with self.assertLogs("dayplan.service.task_list", level="ERROR"):
            with self.assertRaises(TaskMoveError):
                await task_list.move_to_next_day(self.session, 0)

        self.assertEqual(task_texts(self.store.records["2024-03-16"]), ["existing", "a"])
        self.assertEqual(task_texts(self.store.records["2024-03-15"]), ["a", "b", "c"])

    async def test_target_load_failure_raises_move_error(self):
        self.store.failing_loads.add("2024-03-16")

        with self.assertRaises(TaskMoveError):
            await task_list.move_to_next_day(self.session, 0)

        self.assertEqual(task_texts(self.session.record), ["a", "b", "c"])
        self.assertEqual(self.store.saves, [])

    async def test_move_to_same_date_is_rejected(self):
        task_id = self.session.record["todos"][0]["id"]

        with self.assertRaises(TaskValidationError):
            await task_list.move_to_date(self.session, task_id, "2024-03-15", "2024-03-15")

    async def test_unknown_task_is_rejected(self):
        with self.assertRaises(TaskMoveError):
            await task_list.move_to_date(self.session, "missing", "2024-03-15", "2024-03-16")

    async def test_move_remaps_selection(self):
        task_list.select_task(self.session, 2)

        await task_list.move_to_next_day(self.session, 0)

        self.assertEqual(self.session.selection, 1)
        self.assertEqual(self.session.record["todos"][1]["text"], "c")

    async def test_move_updates_both_calendar_counts(self):
        await task_list.move_to_next_day(self.session, 0)

        self.assertEqual(self.session.calendar.get_count("2024-03-15")["total"], 2)
        self.assertEqual(self.session.calendar.get_count("2024-03-16")["total"], 2)


if __name__ == "__main__":
    unittest.main(verbosity=2)
