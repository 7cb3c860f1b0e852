"""Entry point: play reroll-on-six turns in a pygame window or headless."""
from __future__ import annotations
import argparse
from typing import Sequence

from dice_turn.meta.persistence import PersistenceManager
from dice_turn.session import TurnSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dice_turn", description="Roll a die until it is not a six.")
    parser.add_argument("--seed", type=int, default=None, help="seed for deterministic rolls")
    parser.add_argument("--headless", action="store_true", help="play in the terminal without a window")
    parser.add_argument("--turns", type=int, default=1, help="turns to play in headless mode (default: 1)")
    parser.add_argument("--stats", default=None, help="lifetime stats file (default: ~/.dice_turn/stats.json)")
    parser.add_argument("--no-save", action="store_true", help="do not record lifetime statistics")
    return parser


def format_turn(index: int, rolls: Sequence[int], result: int) -> str:
    return f"Turn {index}: rolled {', '.join(str(v) for v in rolls)} -> {result}"


def run_headless(session: TurnSession, turns: int) -> list[str]:
    lines = []
    for i in range(1, turns + 1):
        result = session.play_turn()
        lines.append(format_turn(i, session.machine.rolls, result))
    stats = session.statistics_tracker.get_statistics()
    lines.append(f"Dice rolled: {stats.dice_rolled}, sixes rerolled: {stats.sixes_rerolled}, "
                 f"average result: {stats.average_result():.2f}")
    return lines


def run_window(session: TurnSession, persistence: PersistenceManager | None) -> None:
    import pygame
    from dice_turn.ui.screens.app import App
    from dice_turn.ui.settings import WIDTH, HEIGHT

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Reroll on Six")
    font = pygame.font.SysFont("Arial", 26)
    clock = pygame.time.Clock()
    App(screen, font, clock, session=session, persistence=persistence).run()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.turns < 1:
        build_parser().error("--turns must be at least 1")
    session = TurnSession(rng_seed=args.seed)
    persistence = None if args.no_save else PersistenceManager(args.stats)

    if args.headless:
        for line in run_headless(session, args.turns):
            print(line)
        if persistence is not None:
            persistence.merge_and_save(session.statistics_tracker.export_summary())
    else:
        run_window(session, persistence)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
