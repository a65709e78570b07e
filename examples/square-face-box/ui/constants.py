"""Window and timing constants."""

# Timing
FPS = 60

# Window
SCREEN_W = 480
SCREEN_H = 480
CAPTION = "Square Face Box — tap to step"
