import unittest

from gdrivereader.client import EventEmitter, EventType


class TestEventEmitter(unittest.TestCase):
    def test_emit_calls_listeners_in_order(self) -> None:
        emitter = EventEmitter()
        seen = []
        emitter.on(EventType.FOUND_FILE, lambda p: seen.append(("first", p)))
        emitter.on(EventType.FOUND_FILE, lambda p: seen.append(("second", p)))

        emitter.emit(EventType.FOUND_FILE, "a.txt")

        self.assertEqual(seen, [("first", "a.txt"), ("second", "a.txt")])

    def test_emit_without_listeners_is_dropped(self) -> None:
        emitter = EventEmitter()
        emitter.emit(EventType.REFRESHED_ACCESS_TOKEN)
        self.assertEqual(emitter.listener_count(EventType.REFRESHED_ACCESS_TOKEN), 0)

    def test_late_subscriber_sees_no_history(self) -> None:
        emitter = EventEmitter()
        emitter.emit(EventType.FOUND_FILE, "early")

        seen = []
        emitter.on(EventType.FOUND_FILE, seen.append)
        self.assertEqual(seen, [])

        emitter.emit(EventType.FOUND_FILE, "late")
        self.assertEqual(seen, ["late"])

    def test_off_removes_listener(self) -> None:
        emitter = EventEmitter()
        seen = []
        emitter.on(EventType.FOUND_FILE, seen.append)
        emitter.off(EventType.FOUND_FILE, seen.append)
        emitter.off(EventType.FILE_NOT_FOUND, seen.append)

        emitter.emit(EventType.FOUND_FILE, "x")

        self.assertEqual(seen, [])

    def test_listeners_are_per_event(self) -> None:
        emitter = EventEmitter()
        seen = []
        emitter.on(EventType.REFRESH_TOKEN_ERROR, seen.append)

        emitter.emit(EventType.FOUND_FILE, "x")

        self.assertEqual(seen, [])


if __name__ == "__main__":
    unittest.main()
