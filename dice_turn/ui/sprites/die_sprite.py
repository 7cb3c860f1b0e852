import pygame
from dice_turn.ui.settings import (
    DICE_SIZE, DICE_NORMAL, DICE_RESULT, DICE_BORDER, DICE_PIPS,
    DICE_WAITING_ALPHA, BORDER_RADIUS_DICE, BORDER_WIDTH_DICE, DICE_PIP_RADIUS_RATIO,
)

# Precomputed pip layout (fractional positions within die square)
PIP_POSITIONS = {
    1: [(0.5, 0.5)],
    2: [(0.25, 0.25), (0.75, 0.75)],
    3: [(0.25, 0.25), (0.5, 0.5), (0.75, 0.75)],
    4: [(0.25, 0.25), (0.25, 0.75), (0.75, 0.25), (0.75, 0.75)],
    5: [(0.25, 0.25), (0.25, 0.75), (0.75, 0.25), (0.75, 0.75), (0.5, 0.5)],
    6: [(0.25, 0.25), (0.25, 0.5), (0.25, 0.75), (0.75, 0.25), (0.75, 0.5), (0.75, 0.75)],
}

# Rendered faces keyed by (value, is_result, rolled)
_die_sprite_cache: dict[tuple[int, bool, bool], pygame.Surface] = {}


class DieSprite(pygame.sprite.Sprite):
    """Visual sprite for the single turn die.

    Shows the last face rolled. Before any roll it shows a dimmed one; the face
    that ended the turn is drawn in the result colour.
    """
    def __init__(self, x: int, y: int, *groups):
        super().__init__(*groups)
        self.value = 1
        self.rolled = False
        self.is_result = False
        self.image = pygame.Surface((DICE_SIZE, DICE_SIZE), pygame.SRCALPHA)
        self.rect = self.image.get_rect(topleft=(x, y))
        self.sync()

    def show(self, value: int, is_result: bool) -> None:
        self.value = value
        self.rolled = True
        self.is_result = is_result
        self.sync()

    def clear(self) -> None:
        self.value = 1
        self.rolled = False
        self.is_result = False
        self.sync()

    def sync(self) -> None:
        key = (self.value, self.is_result, self.rolled)
        cached = _die_sprite_cache.get(key)
        if cached is None:
            color = DICE_RESULT if self.is_result else DICE_NORMAL
            surf = pygame.Surface((DICE_SIZE, DICE_SIZE), pygame.SRCALPHA)
            pygame.draw.rect(surf, color, surf.get_rect(), border_radius=BORDER_RADIUS_DICE)
            pygame.draw.rect(surf, DICE_BORDER, surf.get_rect(), BORDER_WIDTH_DICE, border_radius=BORDER_RADIUS_DICE)
            pip_radius = int(DICE_SIZE * DICE_PIP_RADIUS_RATIO)
            for px, py in PIP_POSITIONS[self.value]:
                pygame.draw.circle(surf, DICE_PIPS, (px * DICE_SIZE, py * DICE_SIZE), pip_radius)
            if not self.rolled:
                surf.set_alpha(DICE_WAITING_ALPHA)
            _die_sprite_cache[key] = surf
            cached = surf
        self.image = cached


__all__ = ["DieSprite", "PIP_POSITIONS"]
