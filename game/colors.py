"""Color palette, fade curve and distance severity ramp.

Colors travel as lowercase `#rrggbb` strings. A `ColorFader` walks a cell
from its severity color back to the neutral `unclicked` color over a fixed
number of steps.
"""
from __future__ import annotations

import math
import regex as re

from .exceptions import ColorError


COLORS = {
    "wumpus": "#ffd700",
    "unclicked": "#c0c0c0",
    "grid_background": "#606060",
    "border": "#999999",
    "border_highlight": "#ffff00",
}

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def parse_hex(color: str) -> tuple[int, int, int]:
    """Parse `#rgb` or `#rrggbb` into an (r, g, b) tuple. Raises ValueError."""
    if not isinstance(color, str) or not _HEX_RE.match(color):
        raise ValueError(f"not a hex color: {color!r}")
    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def to_hex(r: float, g: float, b: float) -> str:
    channels = (max(0, min(255, _round_half_up(c))) for c in (r, g, b))
    return "#" + "".join(f"{c:02x}" for c in channels)


class ColorFader:
    """Linear per-channel fade from `start` to `end` in `steps` steps."""

    def __init__(self, start: str, end: str, steps: int = 0):
        try:
            self.start = parse_hex(start)
        except ValueError:
            raise ColorError(f"Start color string invalid. Got {start!r}")
        try:
            self.end = parse_hex(end)
        except ValueError:
            raise ColorError(f"End color string invalid. Got {end!r}")
        if isinstance(steps, bool) or not isinstance(steps, int) or steps < 0:
            raise ColorError("Steps must be a non-negative integer")

        self.steps = steps
        self.current_step = 0

    def color_at(self, fade_amount: float) -> str:
        """Color at `fade_amount` percent (0 = start color, 100 = end color)."""
        t = fade_amount / 100
        return to_hex(*(s - (s - e) * t for s, e in zip(self.start, self.end)))

    def color(self) -> str:
        fade = self.current_step / self.steps * 100 if self.steps > 0 else 0
        return self.color_at(fade)

    def next(self) -> int:
        """Advance one step, never past `steps`. Returns the new step."""
        self.current_step = min(self.steps, self.current_step + 1)
        return self.current_step

    @property
    def finished(self) -> bool:
        return self.current_step >= self.steps

    def __repr__(self) -> str:
        return f"ColorFader({to_hex(*self.start)} -> {to_hex(*self.end)}, {self.current_step}/{self.steps})"


def distance_color(distance: int, max_distance: int) -> str:
    """Severity color for a revealed distance: green (near), yellow, red (far)."""
    ratio = distance / max_distance if max_distance > 0 else 0.0
    ratio = max(0.0, min(1.0, ratio))

    if ratio < 0.5:
        t = ratio * 2
        r, g = 255 * t, 255
    else:
        t = (ratio - 0.5) * 2
        r, g = 255, 255 * (1 - t)
    return to_hex(r, g, 0)
