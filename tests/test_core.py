"""Tests for the screen state machine and the event bus."""

import asyncio
import unittest

from dalarun.core.events import Event, EventBus, EventType, action_event, tick_event
from dalarun.core.state import ScreenState, ScreenStateMachine


class TestScreenStateMachine(unittest.TestCase):

    def test_starts_on_title_screen(self):
        machine = ScreenStateMachine()
        self.assertIs(machine.state, ScreenState.START)
        self.assertFalse(machine.is_terminal)

    def test_valid_path_to_game_over(self):
        machine = ScreenStateMachine()
        self.assertTrue(machine.transition(ScreenState.PLAYING))
        self.assertTrue(machine.transition(ScreenState.GAME_OVER))
        self.assertTrue(machine.is_terminal)

    def test_valid_path_to_win(self):
        machine = ScreenStateMachine()
        machine.transition(ScreenState.PLAYING)
        self.assertTrue(machine.transition(ScreenState.WIN))
        self.assertTrue(machine.is_terminal)

    def test_invalid_transitions_rejected(self):
        machine = ScreenStateMachine()
        self.assertFalse(machine.transition(ScreenState.WIN))
        self.assertFalse(machine.transition(ScreenState.GAME_OVER))
        self.assertIs(machine.state, ScreenState.START)

    def test_terminal_states_have_no_exit(self):
        machine = ScreenStateMachine()
        machine.transition(ScreenState.PLAYING)
        machine.transition(ScreenState.WIN)
        for state in ScreenState:
            self.assertFalse(machine.can_transition(state))
        self.assertFalse(machine.transition(ScreenState.GAME_OVER))
        self.assertIs(machine.state, ScreenState.WIN)

    def test_listeners(self):
        machine = ScreenStateMachine()
        seen = []
        machine.add_listener(lambda old, new: seen.append((old, new)))
        machine.transition(ScreenState.PLAYING)
        machine.transition(ScreenState.PLAYING)  # rejected, not announced
        machine.transition(ScreenState.WIN)
        self.assertEqual(seen, [
            (ScreenState.START, ScreenState.PLAYING),
            (ScreenState.PLAYING, ScreenState.WIN),
        ])

    def test_failing_listener_does_not_block_transition(self):
        machine = ScreenStateMachine()

        def broken(old, new):
            raise RuntimeError("boom")

        machine.add_listener(broken)
        with self.assertLogs("dalarun.core.state", level="ERROR"):
            self.assertTrue(machine.transition(ScreenState.PLAYING))
        self.assertIs(machine.state, ScreenState.PLAYING)


class TestEventBus(unittest.TestCase):

    def test_emit_reaches_subscribers(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.ACTION, received.append)
        bus.emit(action_event())
        self.assertEqual(len(received), 1)
        self.assertEqual(received[0].source, "keyboard")

    def test_unsubscribe(self):
        bus = EventBus()
        received = []
        unsubscribe = bus.subscribe(EventType.ACTION, received.append)
        unsubscribe()
        bus.emit(action_event())
        self.assertEqual(received, [])

    def test_queued_events_wait_for_processing(self):
        bus = EventBus()
        received = []
        bus.subscribe(EventType.ACTION, received.append)

        bus.queue_event(action_event())
        self.assertEqual(received, [])
        self.assertEqual(bus.pending, 1)

        asyncio.run(bus.process_queue())
        self.assertEqual(len(received), 1)
        self.assertEqual(bus.pending, 0)
        self.assertEqual(len(bus.get_history(EventType.ACTION)), 1)

    def test_handler_errors_are_contained(self):
        bus = EventBus()
        received = []

        def broken(event):
            raise ValueError("bad handler")

        bus.subscribe(EventType.TICK, broken)
        bus.subscribe(EventType.TICK, received.append)
        with self.assertLogs("dalarun.core.events", level="ERROR"):
            bus.emit(tick_event(0.016, 1))
        self.assertEqual(len(received), 1)

    def test_queued_events_reach_async_handlers(self):
        bus = EventBus()
        received = []

        async def handler(event):
            received.append(event.data["frame"])

        bus.subscribe(EventType.TICK, handler)
        bus.queue_event(tick_event(0.016, 7))
        asyncio.run(bus.process_queue())
        self.assertEqual(received, [7])

    def test_emit_skips_async_handlers(self):
        bus = EventBus()

        async def handler(event):
            raise AssertionError("async handler called synchronously")

        bus.subscribe(EventType.ACTION, handler)
        bus.emit(action_event())

    def test_history(self):
        bus = EventBus(history_limit=3)
        for frame in range(5):
            bus.emit(tick_event(0.016, frame))
        bus.emit(Event(EventType.SHUTDOWN))

        history = bus.get_history(limit=10)
        self.assertEqual(len(history), 3)
        self.assertEqual([e.data["frame"] for e in bus.get_history(EventType.TICK)], [3, 4])


if __name__ == "__main__":
    unittest.main()
