import pytest
from dice_turn import Done, TurnSession, WaitingToRoll
from dice_turn.core.random_source import ScriptedRandomSource
from dice_turn.core.turn_event import TurnEventType
from tests.test_utils import EventCollector


@pytest.fixture
def session():
    return TurnSession(rng=ScriptedRandomSource([6, 3, 2, 6, 5]))


def test_no_turn_before_first_roll(session):
    assert session.machine is None
    assert session.current_state() is None


def test_roll_starts_turn_and_rolls_on(session):
    assert session.roll() == 6
    assert session.current_state() == WaitingToRoll()
    first = session.machine
    assert session.roll() == 3
    assert session.current_state() == Done(3)
    # Next roll begins a fresh turn instead of rolling a finished one
    assert session.roll() == 2
    assert session.machine is not first
    assert session.current_state() == Done(2)


def test_play_turn_uses_shared_die(session):
    assert session.play_turn() == 3
    assert session.play_turn() == 2
    assert session.play_turn() == 5
    assert session.machine.rolls == (6, 5)


def test_machines_publish_to_session_listener(session):
    collector = EventCollector()
    session.event_listener.subscribe(collector.on_event)
    session.play_turn()
    assert collector.types()[0] == TurnEventType.TURN_START
    assert collector.types()[-1] == TurnEventType.TURN_DONE


def test_seeded_sessions_agree():
    a = TurnSession(rng_seed=42)
    b = TurnSession(rng_seed=42)
    assert [a.play_turn() for _ in range(10)] == [b.play_turn() for _ in range(10)]
