import pygame

class SimpleScreen:
    """Minimal concrete base class implementing done logic."""
    def __init__(self):
        self._done = False
    def handle_event(self, event: pygame.event.Event) -> None: pass
    def update(self, dt: float) -> None: pass
    def draw(self, surface: pygame.Surface) -> None: pass
    def is_done(self) -> bool: return self._done
    def finish(self):
        self._done = True
