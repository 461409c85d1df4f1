"""
Global tunables used across the project.

- Palette size default
- Swatch glyphs and terminal escape sequences
- ANSI 256-colour cube / grayscale ramp limits
"""
from __future__ import annotations

# =========================
# Palette extraction
# =========================
DEFAULT_PALETTE_SIZE: int = 8

CHANNEL_MIN: int = 0
CHANNEL_MAX: int = 255

# =========================
# Rendering
# =========================
SWATCH_GLYPH: str = "█"
SWATCH_WIDTH: int = 10
SWATCH_BLOCK: str = SWATCH_GLYPH * SWATCH_WIDTH

ESC: str = "\x1b"
TRUECOLOR_FG: str = ESC + "[38;2;{r};{g};{b}m"
ANSI256_FG: str = ESC + "[38;5;{index}m"
TRUECOLOR_RESET: str = ESC + "[0m"
ANSI256_RESET: str = ESC + "[0;00m"

ANSI_MODE_ARG: str = "ANSI"
ANSI_FOOTER: str = "\nANSI\n"

# =========================
# ANSI 256-colour approximation
# =========================
CUBE_OFFSET: int = 16
CUBE_STEPS: int = 5  # 6 levels per channel: 0..5

GREY_BLACK_INDEX: int = 16
GREY_WHITE_INDEX: int = 231
GREY_RAMP_OFFSET: int = 232
GREY_RAMP_STEPS: int = 24
GREY_LOW_CUTOFF: int = 8  # below -> black
GREY_HIGH_CUTOFF: int = 248  # above -> white
GREY_RAMP_SPAN: float = 247.0
