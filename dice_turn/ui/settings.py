"""Central settings and UI constants for the dice turn window."""
import pygame

WIDTH, HEIGHT = 640, 480
DICE_SIZE = 140
FPS = 30

# === COLOR PALETTE ===

# Background
BG_COLOR = (22, 38, 46)

# Button colors
BTN_ROLL_COLOR = (180, 140, 60)
BTN_DISABLED_COLOR = (70, 70, 90)
BTN_NEXT_COLOR = (60, 120, 80)
BTN_BORDER = (200, 200, 200)

# Text colors
TEXT_PRIMARY = (235, 225, 210)
TEXT_ACCENT = (255, 170, 80)
TEXT_MUTED = (160, 170, 165)
TEXT_RESULT = (100, 220, 100)

# Dice colors
DICE_NORMAL = (230, 230, 230)
DICE_RESULT = (255, 215, 120)  # Face that ended the turn
DICE_BORDER = (0, 0, 0)
DICE_PIPS = (0, 0, 0)
DICE_WAITING_ALPHA = 130  # Dimmed before the first roll

# Font sizes
FONT_SIZE_STATUS = 32
FONT_SIZE_SMALL = 22

# Border radius / widths
BORDER_RADIUS_DICE = 12
BORDER_RADIUS_BUTTON = 6
BORDER_WIDTH_DICE = 3
BORDER_WIDTH_BUTTON = 2

# Dice rendering
DICE_PIP_RADIUS_RATIO = 0.07  # Pips are 7% of die size
DIE_POS = (WIDTH // 2 - DICE_SIZE // 2, 90)

# Button rectangles (created once at import)
ROLL_BTN = pygame.Rect(WIDTH // 2 - 130, HEIGHT - 100, 120, 50)
NEXT_BTN = pygame.Rect(WIDTH // 2 + 10, HEIGHT - 100, 120, 50)
