"""An in-memory 160x128 colour screen and the three-section view layout."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional

SCREEN_WIDTH = 160
SCREEN_HEIGHT = 128
CHAR_WIDTH = 6
CHAR_HEIGHT = 8


class Color(IntEnum):
    """RGB565 colours used by the views."""

    BLACK = 0x0000
    BLUE = 0x001F
    RED = 0xF800
    GREEN = 0x07E0
    WHITE = 0xFFFF


@dataclass(frozen=True)
class TextRun:
    """Text printed in one call, with where and how it was drawn."""

    text: str
    x: int
    y: int
    size: int
    color: int


class Screen:
    """A landscape screen that records filled pixels and printed text.

    Text is kept as runs; a run disappears once a fill covers the point
    where it started.
    """

    def __init__(self) -> None:
        self.width = SCREEN_WIDTH
        self.height = SCREEN_HEIGHT
        self.pixels: list[list[int]] = [
            [Color.BLACK] * self.width for _ in range(self.height)
        ]
        self.runs: list[TextRun] = []
        self.text_size = 1
        self.text_color: int = Color.WHITE
        self.cursor: tuple[int, int] = (0, 0)

    def fill_screen(self, color: int) -> None:
        """Paint the whole screen and drop all text."""
        self.pixels = [[color] * self.width for _ in range(self.height)]
        self.runs.clear()

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Paint a rectangle, clipped to the screen, and drop the text it covers."""
        x0, x1 = max(x, 0), min(x + width, self.width)
        y0, y1 = max(y, 0), min(y + height, self.height)
        for row in self.pixels[y0:y1]:
            row[x0:x1] = [color] * max(x1 - x0, 0)
        self.runs = [
            run
            for run in self.runs
            if not (x <= run.x < x + width and y <= run.y < y + height)
        ]

    def set_text_size(self, size: int) -> None:
        self.text_size = max(size, 1)

    def set_text_color(self, color: int) -> None:
        self.text_color = color

    def set_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def print(self, text: str) -> None:
        """Print at the cursor and move it past the text, wrapping at the edge."""
        x, y = self.cursor
        self.runs.append(TextRun(text, x, y, self.text_size, self.text_color))
        char_w = CHAR_WIDTH * self.text_size
        char_h = CHAR_HEIGHT * self.text_size
        for char in text:
            if char == "\n":
                x, y = 0, y + char_h
            elif char != "\r":
                if x + char_w > self.width:
                    x, y = 0, y + char_h
                x += char_w
        self.cursor = (x, y)

    def printed(self) -> list[str]:
        """The text still visible, in the order it was printed."""
        return [run.text for run in self.runs]


StateCallback = Callable[..., None]


class BaseView(ABC):
    """A view laid out as an info bar, a main section and a control line."""

    def __init__(
        self, screen: Screen, on_state_change: Optional[StateCallback] = None
    ) -> None:
        self.screen = screen
        self.on_state_change = on_state_change
        self.frames = 0

    @abstractmethod
    def render(self) -> None:
        """Draw the view from scratch."""

    def refresh(self) -> None:
        """Redraw what changes over time."""

    def update(self) -> None:
        """Count one pass of the main loop; views add their per-tick work."""
        self.frames += 1

    def handle_input(self, key: str, key_state=None) -> None:
        """React to a key press."""

    def _write(self, text: str, x: int, y: int, size: int, color: int) -> None:
        """Print ``text`` at (x, y) with the given size and colour."""
        screen = self.screen
        screen.set_text_size(size)
        screen.set_text_color(color)
        screen.set_cursor(x, y)
        screen.print(text)

    def draw_info_section(self, text: str, text_color: int, bg_color: int) -> None:
        self.screen.fill_rect(0, 0, 160, 26, bg_color)
        self._write(text, 5, 5, 2, text_color)

    def draw_main_section(self, content: str, text_color: int, bg_color: int) -> None:
        self.screen.fill_rect(0, 30, 160, 112, bg_color)
        self._write(content, 10, 50, 4, text_color)

    def draw_control_section(
        self, controls: str, text_color: int, bg_color: int
    ) -> None:
        self.screen.fill_rect(0, 145, 160, 20, bg_color)
        self._write(controls, 5, 120, 1, text_color)