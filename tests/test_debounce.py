import asyncio
import unittest

from support import InMemoryRecordStore, make_session, task_texts

from dayplan.service import task_list
from dayplan.service.debounce import DebounceChannel


class TestDebounceChannel(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.calls = []

    def action(self, value):
        async def run():
            self.calls.append(value)

        return run

    async def test_burst_runs_last_action_once(self):
        channel = DebounceChannel("test", 20)

        for value in range(10):
            channel.schedule(self.action(value))
        await asyncio.sleep(0.1)
        await channel.drain()

        self.assertEqual(self.calls, [9])
        self.assertFalse(channel.pending)

    async def test_flush_runs_pending_action_now(self):
        channel = DebounceChannel("test", 10_000)
        channel.schedule(self.action("now"))

        await channel.flush()

        self.assertEqual(self.calls, ["now"])
        self.assertFalse(channel.pending)

    async def test_cancel_drops_pending_action(self):
        channel = DebounceChannel("test", 20)
        channel.schedule(self.action("never"))

        channel.cancel()
        await asyncio.sleep(0.06)

        self.assertEqual(self.calls, [])

    async def test_failed_action_is_logged(self):
        channel = DebounceChannel("test", 10)

        async def fail():
            raise RuntimeError("boom")

        with self.assertLogs("dayplan.service.debounce", level="ERROR"):
            channel.schedule(fail)
            await asyncio.sleep(0.05)
            await channel.drain()


class TestNotesDebounce(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self):
        self.store = InMemoryRecordStore()
        self.session = make_session(self.store, notes_debounce_ms=20)
        await self.session.open()

    async def test_typing_burst_saves_once_with_final_text(self):
        text = ""
        for char in "meeting at 3":
            text += char
            self.session.update_notes(text)
        await asyncio.sleep(0.1)
        await self.session.notes_channel.drain()

        self.assertEqual(self.store.saved_dates(), ["2024-03-15"])
        self.assertEqual(self.store.records["2024-03-15"]["notes"], "meeting at 3")
        self.assertTrue(self.session.calendar.get_count("2024-03-15")["has_notes"])

    async def test_close_persists_pending_notes(self):
        self.session.update_notes("unsaved")

        await self.session.close()

        self.assertEqual(self.store.records["2024-03-15"]["notes"], "unsaved")

    async def test_pending_notes_stay_with_their_date(self):
        self.session.update_notes("for the 15th")

        await self.session.navigate_day(1)
        await self.session.close()

        self.assertEqual(self.store.records["2024-03-15"]["notes"], "for the 15th")
        self.assertEqual(self.session.record["notes"], "")

    async def test_pending_notes_do_not_overwrite_a_later_add(self):
        self.session.update_notes("typed")

        await self.session.navigate_day(1)
        await task_list.add_to_date(self.session, "2024-03-15", "added later")
        await asyncio.sleep(0.1)
        await self.session.close()

        record = self.store.records["2024-03-15"]
        self.assertEqual(task_texts(record), ["added later"])
        self.assertEqual(record["notes"], "typed")

    async def test_pending_notes_do_not_overwrite_a_moved_task(self):
        self.session.update_notes("typed")

        await self.session.navigate_day(1)
        await task_list.create_task(self.session, "carry back")
        task_id = self.session.record["todos"][0]["id"]
        await task_list.move_to_date(self.session, task_id, "2024-03-16", "2024-03-15")
        await asyncio.sleep(0.1)
        await self.session.close()

        self.assertEqual(task_texts(self.store.records["2024-03-15"]), ["carry back"])
        self.assertEqual(self.store.records["2024-03-16"]["todos"], [])


if __name__ == "__main__":
    unittest.main(verbosity=2)
