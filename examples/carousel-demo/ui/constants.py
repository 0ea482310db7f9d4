"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 60

# Layout dimensions
CAROUSEL_W = 640
CAROUSEL_H = 360
PLOT_W = 180
STATUS_H = 36

SCREEN_W = CAROUSEL_W + PLOT_W
SCREEN_H = CAROUSEL_H + STATUS_H

# Colors
BG_COLOR = (20, 20, 30)
PLOT_BG = (15, 15, 25)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
CURVE_COLOR = (220, 80, 220)

# Slide background / label colors
SLIDES: list[tuple[str, tuple[int, int, int], tuple[int, int, int]]] = [
    ("Container 1", (1, 20, 47), (116, 135, 0)),
    ("Container 2", (5, 37, 85), (216, 102, 77)),
    ("Container 3", (0, 45, 109), (255, 0, 92)),
    ("Container 4", (30, 30, 45), (0, 220, 220)),
]
