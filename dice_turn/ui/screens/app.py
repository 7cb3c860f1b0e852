import pygame
from typing import Optional
from .turn_screen import TurnScreen
from dice_turn.meta.persistence import PersistenceManager
from dice_turn.session import TurnSession
from dice_turn.ui.settings import FPS


class App:
    """Application controller running the turn screen loop.

    On exit the session summary is merged into lifetime statistics when a
    PersistenceManager is attached.
    """
    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, clock: pygame.time.Clock,
                 session: Optional[TurnSession] = None,
                 persistence: Optional[PersistenceManager] = None):
        self.screen = screen
        self.font = font
        self.clock = clock
        self.session = session or TurnSession()
        self.persistence = persistence
        self.turn_screen = TurnScreen(self.screen, self.font, self.session)
        self._saved = False

    def save_session(self) -> None:
        if self.persistence is None or self._saved:
            return
        summary = self.session.statistics_tracker.export_summary()
        if summary['turns']['played'] == 0:
            return
        self.persistence.merge_and_save(summary)
        self._saved = True

    def step(self, dt: float) -> bool:
        """Process one frame. Returns False once the app should stop."""
        active = self.turn_screen
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            active.handle_event(event)
        if active.is_done():
            return False
        active.update(dt)
        active.draw(self.screen)
        pygame.display.flip()
        return True

    def run(self):
        running = True
        try:
            while running:
                dt = self.clock.tick(FPS) / 1000.0
                running = self.step(dt)
        finally:
            self.save_session()
            pygame.quit()
