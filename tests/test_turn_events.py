import unittest
from dice_turn.core.event_listener import EventListener
from dice_turn.core.random_source import ScriptedRandomSource
from dice_turn.core.turn_event import TurnEvent, TurnEventType
from dice_turn.core.turn_state import TurnPhase
from dice_turn.core.turn_state_machine import TurnStateMachine
from tests.test_utils import EventCollector


class TurnEventTests(unittest.TestCase):
    def setUp(self):
        self.listener = EventListener()
        self.collector = EventCollector()
        self.listener.subscribe(self.collector.on_event)

    def make(self, values):
        return TurnStateMachine.create(rng=ScriptedRandomSource(values), event_listener=self.listener)

    def test_turn_start_on_create(self):
        self.make([])
        self.assertEqual(self.collector.types(), [TurnEventType.TURN_START])

    def test_reroll_then_done_sequence(self):
        m = self.make([6, 4])
        m.roll_once()
        m.roll_once()
        self.assertEqual(self.collector.types(), [
            TurnEventType.TURN_START,
            TurnEventType.DIE_ROLLED,
            TurnEventType.REROLL,
            TurnEventType.DIE_ROLLED,
            TurnEventType.STATE_CHANGED,
            TurnEventType.TURN_DONE,
        ])

    def test_payloads(self):
        m = self.make([6, 4])
        m.roll_once()
        m.roll_once()
        rolled = [e for e in self.collector.events if e.type == TurnEventType.DIE_ROLLED]
        self.assertEqual([(e.get('value'), e.get('roll_index')) for e in rolled], [(6, 1), (4, 2)])
        changed = next(e for e in self.collector.events if e.type == TurnEventType.STATE_CHANGED)
        self.assertEqual(changed.get('old'), TurnPhase.WAITING_TO_ROLL)
        self.assertEqual(changed.get('new'), TurnPhase.DONE)
        done = self.collector.events[-1]
        self.assertEqual(done.get('result'), 4)
        self.assertEqual(done.get('rolls'), (6, 4))
        self.assertIs(done.source, m)

    def test_rejected_roll_publishes_nothing(self):
        m = self.make([1])
        m.roll_once()
        self.collector.clear()
        with self.assertRaises(RuntimeError):
            m.roll_once()
        self.assertEqual(self.collector.events, [])

    def test_get_default_without_payload(self):
        ev = TurnEvent(TurnEventType.TURN_START)
        self.assertIsNone(ev.get('result'))
        self.assertEqual(ev.get('result', 0), 0)


class EventListenerTests(unittest.TestCase):
    def test_type_filtered_subscription(self):
        listener = EventListener()
        seen = []
        listener.subscribe(lambda e: seen.append(e.type), types={TurnEventType.TURN_DONE})
        listener.publish(TurnEvent(TurnEventType.DIE_ROLLED))
        listener.publish(TurnEvent(TurnEventType.TURN_DONE))
        self.assertEqual(seen, [TurnEventType.TURN_DONE])

    def test_duplicate_subscribe_ignored_and_unsubscribe(self):
        listener = EventListener()
        seen = []
        cb = seen.append
        listener.subscribe(cb)
        listener.subscribe(cb)
        listener.publish(TurnEvent(TurnEventType.REROLL))
        self.assertEqual(len(seen), 1)
        listener.unsubscribe(cb)
        listener.publish(TurnEvent(TurnEventType.REROLL))
        self.assertEqual(len(seen), 1)

    def test_failing_subscriber_does_not_stop_dispatch(self):
        listener = EventListener()
        seen = []
        def boom(e):
            raise ValueError("bad subscriber")
        listener.subscribe(boom)
        listener.subscribe(seen.append)
        listener.publish(TurnEvent(TurnEventType.TURN_START))
        self.assertEqual(len(seen), 1)

    def test_nested_publish_is_queued(self):
        listener = EventListener()
        order = []
        def first(e):
            order.append(e.type)
            if e.type == TurnEventType.DIE_ROLLED:
                listener.publish(TurnEvent(TurnEventType.REROLL))
                order.append("after-publish")
        listener.subscribe(first)
        listener.publish(TurnEvent(TurnEventType.DIE_ROLLED))
        self.assertEqual(order, [TurnEventType.DIE_ROLLED, "after-publish", TurnEventType.REROLL])


if __name__ == '__main__':
    unittest.main()
