"""Choosing which game the prop runs."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from bombprop.bomb import BasicBombGame, BombGame
from bombprop.chess import ChessClockGame
from bombprop.display import BaseView, Color, Screen
from bombprop.hardware import Clock, Keypad, system_millis


class GameMode(IntEnum):
    """The games on offer, numbered as on the selection screen."""

    BASIC = 1
    CHESS_CLOCK = 2


def create_game(
    mode: int, keypad: Keypad, screen: Screen, clock: Clock = system_millis
) -> BombGame:
    """Build the game for ``mode``; an unknown mode raises ``ValueError``."""
    try:
        game_mode = GameMode(mode)
    except ValueError:
        raise ValueError(f"unknown game mode: {mode!r}") from None
    if game_mode is GameMode.BASIC:
        return BasicBombGame(keypad, screen, clock)
    return ChessClockGame(keypad, screen, clock)


class InitializeGameView(BaseView):
    """The opening menu where the game mode is picked."""

    _MODES = {"1": GameMode.BASIC, "2": GameMode.CHESS_CLOCK}

    def __init__(
        self, screen: Screen, keypad: Keypad, clock: Clock = system_millis
    ) -> None:
        super().__init__(screen)
        self.keypad = keypad
        self.clock = clock
        self.game: Optional[BombGame] = None

    def render(self) -> None:
        self.draw_info_section("Game mode:", Color.WHITE, Color.BLUE)
        self.draw_main_section(
            "(1) plant and destroy\n------------------\n(2) Control",
            Color.WHITE,
            Color.BLACK,
        )
        self.draw_control_section("Press 1 or 2", Color.WHITE, Color.BLACK)

    def draw_main_section(self, content: str, text_color: int, bg_color: int) -> None:
        screen = self.screen
        screen.set_text_size(1)
        screen.set_text_color(text_color)
        screen.set_cursor(0, 60)
        screen.fill_rect(0, 30, 160, 112, bg_color)
        screen.print(content)

    def handle_input(self, key: str, key_state=None) -> None:
        mode = self._MODES.get(key)
        if mode is not None:
            self.game = create_game(mode, self.keypad, self.screen, self.clock)