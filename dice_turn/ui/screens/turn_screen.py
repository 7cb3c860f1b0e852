"""Main play screen: one die, a Roll button and a Next Turn button."""
import pygame
from .base_screen import SimpleScreen
from dice_turn.core.turn_state import Done
from dice_turn.session import TurnSession
from dice_turn.ui.sprites.die_sprite import DieSprite
from dice_turn.ui.settings import (
    WIDTH, HEIGHT, BG_COLOR, TEXT_PRIMARY, TEXT_ACCENT, TEXT_MUTED, TEXT_RESULT,
    BTN_ROLL_COLOR, BTN_NEXT_COLOR, BTN_DISABLED_COLOR, BTN_BORDER,
    BORDER_RADIUS_BUTTON, BORDER_WIDTH_BUTTON, FONT_SIZE_STATUS, FONT_SIZE_SMALL,
    ROLL_BTN, NEXT_BTN, DIE_POS,
)

MSG_READY = "Roll the die. A six means roll again."
MSG_SIX = "Rolled a six, roll again!"


class TurnScreen(SimpleScreen):
    """Drives a TurnSession from mouse and keyboard input.

    Controls:
    - Roll button / SPACE: roll while the turn is waiting
    - Next Turn button / N: start a new turn once the current one is done
    - ESC: leave
    """

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, session: TurnSession):
        super().__init__()
        self.screen = screen
        self.font = font
        self.status_font = pygame.font.SysFont("Arial", FONT_SIZE_STATUS, bold=True)
        self.small_font = pygame.font.SysFont("Arial", FONT_SIZE_SMALL)
        self.session = session
        if self.session.machine is None:
            self.session.new_turn()
        self.die = DieSprite(*DIE_POS)
        self.message = MSG_READY

    @property
    def turn_done(self) -> bool:
        return self.session.machine is not None and self.session.machine.is_done

    def roll(self) -> int | None:
        """Roll once; does nothing and returns None when the turn is already over."""
        if self.turn_done:
            return None
        value = self.session.machine.roll_once()
        state = self.session.machine.current_state()
        if isinstance(state, Done):
            self.die.show(value, is_result=True)
            self.message = f"Turn over: {state.result}"
        else:
            self.die.show(value, is_result=False)
            self.message = MSG_SIX
        return value

    def next_turn(self) -> bool:
        if not self.turn_done:
            return False
        self.session.new_turn()
        self.die.clear()
        self.message = MSG_READY
        return True

    def handle_event(self, event: pygame.event.Event) -> None:  # type: ignore[override]
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if ROLL_BTN.collidepoint(event.pos):
                self.roll()
            elif NEXT_BTN.collidepoint(event.pos):
                self.next_turn()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_SPACE:
                self.roll()
            elif event.key == pygame.K_n:
                self.next_turn()
            elif event.key == pygame.K_ESCAPE:
                self.finish()

    def _draw_button(self, surface: pygame.Surface, rect: pygame.Rect, label: str, color, enabled: bool):
        pygame.draw.rect(surface, color if enabled else BTN_DISABLED_COLOR, rect, border_radius=BORDER_RADIUS_BUTTON)
        pygame.draw.rect(surface, BTN_BORDER, rect, BORDER_WIDTH_BUTTON, border_radius=BORDER_RADIUS_BUTTON)
        text = self.font.render(label, True, TEXT_PRIMARY if enabled else TEXT_MUTED)
        surface.blit(text, text.get_rect(center=rect.center))

    def draw(self, surface: pygame.Surface) -> None:  # type: ignore[override]
        surface.fill(BG_COLOR)

        status_color = TEXT_RESULT if self.turn_done else TEXT_ACCENT
        status = self.status_font.render(self.message, True, status_color)
        surface.blit(status, status.get_rect(center=(WIDTH // 2, 45)))

        surface.blit(self.die.image, self.die.rect)

        machine = self.session.machine
        rolls = ", ".join(str(v) for v in machine.rolls) if machine and machine.rolls else "-"
        rolls_surf = self.small_font.render(f"Rolls this turn: {rolls}", True, TEXT_PRIMARY)
        surface.blit(rolls_surf, rolls_surf.get_rect(center=(WIDTH // 2, self.die.rect.bottom + 30)))

        stats = self.session.statistics_tracker.get_statistics()
        stats_text = (f"Turns: {stats.turns_played}   Dice rolled: {stats.dice_rolled}   "
                      f"Average result: {stats.average_result():.2f}")
        stats_surf = self.small_font.render(stats_text, True, TEXT_MUTED)
        surface.blit(stats_surf, stats_surf.get_rect(center=(WIDTH // 2, HEIGHT - 140)))

        self._draw_button(surface, ROLL_BTN, "Roll", BTN_ROLL_COLOR, not self.turn_done)
        self._draw_button(surface, NEXT_BTN, "Next Turn", BTN_NEXT_COLOR, self.turn_done)
