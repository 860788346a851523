"""The plant-and-defuse bomb game: its states, its views and its countdown."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from bombprop.display import BaseView, Color, Screen
from bombprop.hardware import Clock, Horn, Keypad, system_millis

CODE_LENGTH = 6
DEFAULT_CODE = "0" * CODE_LENGTH
DEFAULT_MINUTES = 30
TICK_MS = 1000
EXPLOSION_SOUND_MS = 7000
ARMED_BEEPS = 3

_DIGITS = frozenset("0123456789")
_CODE_CONTROLS = "(B)ack (D)elete (C)ontinue"


class BombState(Enum):
    """The stages a bomb game goes through."""

    INIT = "init"
    ARMING = "arming"
    ARMED = "armed"
    DISARMING = "disarming"
    DISARMED = "disarmed"
    EXPLODED = "exploded"


class BombGame(ABC):
    """A game run by the prop: it owns the keypad, the screen and the current view."""

    def __init__(
        self, keypad: Keypad, screen: Screen, clock: Clock = system_millis
    ) -> None:
        self.keypad = keypad
        self.screen = screen
        self.clock = clock
        self.current_view: Optional[BaseView] = None

    @abstractmethod
    def begin(self) -> None:
        """Show the first view."""

    @abstractmethod
    def update(self) -> None:
        """Run one pass of the main loop."""

    def _require_view(self) -> BaseView:
        if self.current_view is None:
            raise RuntimeError("the game has not been started; call begin() first")
        return self.current_view


class BasicBombGame(BombGame):
    """Arm the bomb with a six-digit code, then defuse it before time runs out."""

    def __init__(
        self, keypad: Keypad, screen: Screen, clock: Clock = system_millis
    ) -> None:
        super().__init__(keypad, screen, clock)
        self._state = BombState.INIT
        self._bomb_code = DEFAULT_CODE
        self.minutes = DEFAULT_MINUTES
        self.seconds = 0
        self.last_update_time = 0
        self._render_time = False

    @property
    def state(self) -> BombState:
        return self._state

    def begin(self) -> None:
        self.current_view = InitView(self)
        self.current_view.render()

    def update(self) -> None:
        view = self._require_view()
        key = self.keypad.get_key()
        if key:
            view.handle_input(key)

        self._require_view().update()

        if self._state in (BombState.ARMED, BombState.DISARMING):
            self.update_countdown()
            if self._render_time:
                self._require_view().refresh()
                self._render_time = False

        if self._state is BombState.EXPLODED:
            self._require_view().refresh()

    def change_state(self, new_state: BombState) -> None:
        """Move to ``new_state`` and show its view; staying put does nothing."""
        if new_state is self._state:
            return
        self._state = new_state
        self.current_view = _VIEWS[new_state](self)
        self.current_view.render()

    def update_countdown(self) -> None:
        """Take a second off the timer once a second has passed; explode at zero."""
        now = self.clock()
        if now - self.last_update_time < TICK_MS:
            return
        self.last_update_time = now

        if self.seconds == 0:
            if self.minutes > 0:
                self.minutes -= 1
                self.seconds = 59
        else:
            self.seconds -= 1
            self._render_time = True

        if self.minutes == 0 and self.seconds == 0:
            self.change_state(BombState.EXPLODED)

    def set_bomb_code(self, code: str) -> None:
        self._bomb_code = code[:CODE_LENGTH]

    def bomb_code(self) -> str:
        return self._bomb_code

    def set_time(self, seconds: int, minutes: int) -> None:
        self.seconds = seconds
        self.minutes = minutes

    @property
    def time_display(self) -> str:
        return f"{self.minutes:02d}:{self.seconds:02d}"


class _GameView(BaseView):
    """A view that belongs to a bomb game and reports state changes to it."""

    def __init__(self, game: BasicBombGame) -> None:
        super().__init__(game.screen, game.change_state)
        self.game = game


class InitView(_GameView):
    """Choose how long the countdown will be."""

    _DURATIONS = {"1": 5, "2": 10, "3": 30}

    def __init__(self, game: BasicBombGame) -> None:
        super().__init__(game)

    def render(self) -> None:
        self.screen.fill_screen(Color.BLACK)
        self.draw_info_section("Select Mode", Color.WHITE, Color.BLUE)
        self.draw_main_section(
            "(1) 5 mins\n----------\n(2) 10 mins\n----------\n(3) 30 mins",
            Color.WHITE,
            Color.BLACK,
        )
        self.draw_control_section("Press number", Color.WHITE, Color.BLUE)

    def draw_main_section(self, content: str, text_color: int, bg_color: int) -> None:
        self._write(content, 0, 33, 2, text_color)

    def handle_input(self, key: str, key_state=None) -> None:
        minutes = self._DURATIONS.get(key)
        if minutes is not None:
            self.game.set_time(0, minutes)
            self.on_state_change(BombState.ARMING)


class _CodeEntryView(_GameView):
    """A view where a six-digit code is typed in and edited."""

    def __init__(self, game: BasicBombGame) -> None:
        super().__init__(game)
        self._digits: list[str] = []

    @property
    def code(self) -> str:
        return "".join(self._digits)

    def _edit_code(self, key: str) -> bool:
        """Apply a digit or a delete; return whether the key was one of those."""
        if key in _DIGITS:
            if len(self._digits) < CODE_LENGTH:
                self._digits.append(key)
                self._update_code_display()
            return True
        if key == "D":
            if self._digits:
                self._digits.pop()
                self._update_code_display()
            return True
        return False

    @property
    def _code_complete(self) -> bool:
        return len(self._digits) == CODE_LENGTH

    def _update_code_display(self) -> None:
        self.draw_main_section(
            self.code.ljust(CODE_LENGTH, "_"), Color.WHITE, Color.BLACK
        )
        self.draw_control_section(_CODE_CONTROLS, Color.WHITE, Color.BLACK)


class ArmingView(_CodeEntryView):
    """Type the code that will later defuse the bomb."""

    def __init__(self, game: BasicBombGame) -> None:
        super().__init__(game)

    def render(self) -> None:
        self.draw_info_section("Enter Code:", Color.WHITE, Color.BLUE)
        self._update_code_display()

    def handle_input(self, key: str, key_state=None) -> None:
        if self._edit_code(key):
            return
        if key == "C" and self._code_complete:
            self.game.set_bomb_code(self.code)
            self.on_state_change(BombState.ARMED)
        elif key == "B":
            self.on_state_change(BombState.INIT)


class ArmedView(_GameView):
    """The bomb is ticking: show the time left."""

    def __init__(self, game: BasicBombGame) -> None:
        super().__init__(game)
        self.horn = Horn(game.clock)

    def render(self) -> None:
        self.horn.beep(ARMED_BEEPS)
        self.screen.fill_screen(Color.BLACK)
        self.draw_info_section("Bomb Armed!", Color.WHITE, Color.RED)
        self._draw_time()

    def refresh(self) -> None:
        self.horn.update()
        self._draw_time()

    def _draw_time(self) -> None:
        self.draw_main_section(self.game.time_display, Color.WHITE, Color.BLACK)
        self.draw_control_section("(D)isarm", Color.WHITE, Color.BLACK)

    def handle_input(self, key: str, key_state=None) -> None:
        if key == "D":
            self.on_state_change(BombState.DISARMING)

    def draw_main_section(self, content: str, text_color: int, bg_color: int) -> None:
        self.screen.fill_rect(10, 50, 140, 40, bg_color)
        self._write(content, 10, 50, 4, text_color)


class DisarmView(_CodeEntryView):
    """Type the code to defuse the bomb while the time runs on."""

    def __init__(self, game: BasicBombGame) -> None:
        super().__init__(game)

    def render(self) -> None:
        self.screen.fill_screen(Color.BLACK)
        self._update_code_display()
        self.draw_control_section(_CODE_CONTROLS, Color.WHITE, Color.BLACK)
        self.refresh()

    def refresh(self) -> None:
        self.draw_info_section(self.game.time_display, Color.WHITE, Color.BLUE)

    def draw_info_section(self, text: str, text_color: int, bg_color: int) -> None:
        self.screen.fill_rect(0, 0, 160, 26, bg_color)
        self._write(text, 0, 5, 2, text_color)

    def handle_input(self, key: str, key_state=None) -> None:
        if self._edit_code(key):
            return
        if key == "C" and self._code_complete:
            if self.code == self.game.bomb_code():
                self.on_state_change(BombState.DISARMED)
            else:
                self.draw_info_section("Wrong Code!", Color.WHITE, Color.RED)
        elif key == "B":
            self.on_state_change(BombState.ARMED)


class SuccessView(_GameView):
    """The bomb was defused."""

    def __init__(self, game: BasicBombGame) -> None:
        super().__init__(game)

    def render(self) -> None:
        self.screen.fill_screen(Color.GREEN)
        self.draw_info_section("", Color.WHITE, Color.GREEN)
        self.draw_main_section("--------Disarmed--------", Color.WHITE, Color.GREEN)
        self.draw_control_section("(A) Restart", Color.WHITE, Color.BLACK)

    def draw_main_section(self, content: str, text_color: int, bg_color: int) -> None:
        self._write(content, 0, 25, 3, text_color)

    def handle_input(self, key: str, key_state=None) -> None:
        if key == "A":
            self.on_state_change(BombState.INIT)


class ExplodedView(BaseView):
    """The timer ran out."""

    def __init__(self, game: BasicBombGame) -> None:
        super().__init__(game.screen)
        self.game = game
        self.horn = Horn(game.clock)

    def render(self) -> None:
        self.draw_info_section("Game won", Color.WHITE, Color.BLACK)
        self.draw_main_section("BoOOoM", Color.RED, Color.WHITE)
        self.horn.sound(EXPLOSION_SOUND_MS)

    def refresh(self) -> None:
        self.horn.update()


_VIEWS = {
    BombState.INIT: InitView,
    BombState.ARMING: ArmingView,
    BombState.ARMED: ArmedView,
    BombState.DISARMING: DisarmView,
    BombState.DISARMED: SuccessView,
    BombState.EXPLODED: ExplodedView,
}