import json
import pytest
from dice_turn.core.random_source import ScriptedRandomSource
from dice_turn.demo import format_turn, main, run_headless
from dice_turn.session import TurnSession


def test_format_turn():
    assert format_turn(2, (6, 6, 3), 3) == "Turn 2: rolled 6, 6, 3 -> 3"


def test_run_headless_transcript():
    session = TurnSession(rng=ScriptedRandomSource([6, 6, 3, 2]))
    lines = run_headless(session, 2)
    assert lines[0] == "Turn 1: rolled 6, 6, 3 -> 3"
    assert lines[1] == "Turn 2: rolled 2 -> 2"
    assert lines[2] == "Dice rolled: 4, sixes rerolled: 2, average result: 2.50"


def test_main_headless_saves_stats(tmp_path, capsys):
    stats_file = tmp_path / "stats.json"
    assert main(["--headless", "--seed", "9", "--turns", "3", "--stats", str(stats_file)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 4
    assert out[0].startswith("Turn 1: rolled ")
    data = json.loads(stats_file.read_text(encoding="utf-8"))
    assert data["total_sessions"] == 1
    assert data["lifetime_turns"] == 3


def test_main_headless_is_deterministic_with_seed(capsys):
    main(["--headless", "--seed", "1", "--turns", "5", "--no-save"])
    first = capsys.readouterr().out
    main(["--headless", "--seed", "1", "--turns", "5", "--no-save"])
    assert capsys.readouterr().out == first


def test_main_rejects_zero_turns():
    with pytest.raises(SystemExit):
        main(["--headless", "--turns", "0", "--no-save"])


def test_main_headless_recovers_from_mistyped_stats_file(tmp_path, capsys):
    stats_file = tmp_path / "stats.json"
    stats_file.write_text('{"lifetime_turns": "many"}', encoding="utf-8")
    assert main(["--headless", "--seed", "1", "--stats", str(stats_file)]) == 0
    out = capsys.readouterr().out
    assert "Warning: Could not load stats" in out
    data = json.loads(stats_file.read_text(encoding="utf-8"))
    assert data["total_sessions"] == 1
    assert data["lifetime_turns"] == 1
