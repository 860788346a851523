"""The chess-clock control game: hold a team's key to take control and run its clock."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from bombprop.bomb import BombGame
from bombprop.display import BaseView, Color, Screen
from bombprop.hardware import Clock, Horn, Keypad, KeyState, system_millis

TICK_MS = 1000
TAKE_CONTROL_MS = 2500
CONTROL_BEEPS = 3

_BLUE_KEYS = frozenset("0123456789")
_RED_KEYS = frozenset("ABCD#")

_MAIN_Y = 30
_SPLIT_HEIGHT = 90
_TIME_TEXT_LIMIT = 5


class ActiveTeam(Enum):
    """The team whose clock is running."""

    NONE = "none"
    BLUE = "blue"
    RED = "red"


def team_for_key(key: str) -> ActiveTeam:
    """The team a keypad key belongs to: digits are blue, letters and ``#`` red."""
    if key in _BLUE_KEYS:
        return ActiveTeam.BLUE
    if key in _RED_KEYS:
        return ActiveTeam.RED
    return ActiveTeam.NONE


def _time_text(seconds: int) -> str:
    return str(seconds)[:_TIME_TEXT_LIMIT]


class ChessClockGame(BombGame):
    """Each team's clock counts the seconds that team has held control."""

    def __init__(
        self, keypad: Keypad, screen: Screen, clock: Clock = system_millis
    ) -> None:
        super().__init__(keypad, screen, clock)
        self.blue_time = 0
        self.red_time = 0
        self.last_update_time = 0
        self.active_team = ActiveTeam.NONE

    def begin(self) -> None:
        self.active_team = ActiveTeam.NONE
        self.blue_time = 0
        self.red_time = 0
        self.current_view = ChessClockView(self)
        self.current_view.render()

    def update(self) -> None:
        if self.current_view is not None:
            key = self.keypad.get_key()
            self.current_view.handle_input(key, self.keypad.get_state())

        if self.active_team is ActiveTeam.NONE:
            return
        now = self.clock()
        if now - self.last_update_time < TICK_MS:
            return
        self.last_update_time = now

        if self.active_team is ActiveTeam.BLUE:
            self.blue_time += 1
        elif self.active_team is ActiveTeam.RED:
            self.red_time += 1

        self._require_view().refresh()

    def switch_team(self, team: ActiveTeam) -> None:
        """Hand control to ``team`` and restart the one-second tick."""
        if team is self.active_team:
            return
        self.active_team = team
        self.last_update_time = self.clock()
        self._require_view().refresh()


class ChessClockView(BaseView):
    """Shows both clocks, or the running clock full screen."""

    def __init__(self, game: ChessClockGame) -> None:
        super().__init__(game.screen)
        self.game = game
        self.horn = Horn(game.clock)
        self.info_content = ""
        self._last_key = ""
        self._press_start: Optional[int] = None
        self._current_team = ActiveTeam.NONE

    def render(self) -> None:
        self.draw_info_section("", Color.WHITE, Color.BLACK)
        self.draw_main_section("", Color.WHITE, Color.BLACK)

    def refresh(self) -> None:
        self.horn.update()
        self.draw_info_section("", Color.WHITE, Color.BLACK)
        self.draw_main_section("", Color.WHITE, Color.BLACK)
        self.draw_control_section("Choose color key", Color.WHITE, Color.BLACK)

    def draw_main_section(self, content: str, text_color: int, bg_color: int) -> None:
        if self.game.active_team is ActiveTeam.NONE:
            self._draw_split_main_section()
            self.info_content = ""
            return
        self._draw_active_team_main_section()

    def draw_info_section(self, text: str, text_color: int, bg_color: int) -> None:
        if not self.info_content:
            self.info_content = "Control game"
        screen = self.screen
        screen.fill_rect(0, 0, 160, 26, bg_color)
        screen.set_text_size(1)
        screen.set_text_color(text_color)
        screen.set_cursor(5, 5)
        screen.print(self.info_content)

    def _draw_active_team_main_section(self) -> None:
        game = self.game
        if game.active_team is ActiveTeam.BLUE:
            text, bg_color = _time_text(game.blue_time), Color.BLUE
        elif game.active_team is ActiveTeam.RED:
            text, bg_color = _time_text(game.red_time), Color.RED
        else:
            text, bg_color = "", Color.BLACK

        screen = self.screen
        screen.fill_rect(0, _MAIN_Y, 160, 112, bg_color)
        screen.set_text_size(4)
        char_width, char_height = 6 * 4, 8 * 4
        x = int((160 - len(text) * char_width) / 2)
        y = 20 + (112 - char_height) // 2
        screen.set_text_color(Color.WHITE)
        screen.set_cursor(x, y)
        screen.print(text)

    def _draw_split_main_section(self) -> None:
        game = self.game
        width = self.screen.width
        half = _SPLIT_HEIGHT // 2
        red_active = game.active_team is ActiveTeam.RED
        blue_active = game.active_team is ActiveTeam.BLUE

        self._draw_half(
            _MAIN_Y,
            half,
            _time_text(game.red_time),
            Color.WHITE if red_active else Color.RED,
            Color.RED if red_active else Color.WHITE,
            width,
        )
        self._draw_half(
            _MAIN_Y + half,
            half,
            _time_text(game.blue_time),
            Color.WHITE if blue_active else Color.BLUE,
            Color.BLUE if blue_active else Color.WHITE,
            width,
        )

    def _draw_half(
        self, top: int, height: int, text: str, bg: int, fg: int, width: int
    ) -> None:
        screen = self.screen
        screen.fill_rect(0, top, width, height, bg)
        screen.set_text_size(2)
        screen.set_text_color(fg)
        screen.set_cursor((width - 40) // 2, top + height // 2 - 8)
        screen.print(text)

    def handle_input(self, key: str, key_state=None) -> None:
        if not self._last_key:
            self._last_key = key

        if key_state is KeyState.HOLD:
            self.info_content = "Taking control!"
            now = self.game.clock()
            if self._press_start is None:
                self._press_start = now
            if now - self._press_start > TAKE_CONTROL_MS:
                team = team_for_key(self._last_key)
                if team is not self._current_team:
                    self._current_team = team
                    self.game.switch_team(team)
                    if team is not ActiveTeam.NONE:
                        self.horn.beep(CONTROL_BEEPS)
        elif key_state is KeyState.IDLE:
            self._last_key = ""
            self._press_start = None
            self.info_content = ""