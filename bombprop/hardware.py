"""Simulated prop hardware: a relay-driven horn and a 4x4 matrix keypad."""

from __future__ import annotations

import time
from collections import deque
from enum import Enum
from typing import Callable

Clock = Callable[[], int]

KEY_LAYOUT: tuple[str, ...] = (
    "123A",
    "456B",
    "789C",
    "*0#D",
)

_VALID_KEYS = frozenset("".join(KEY_LAYOUT))

BEEP_INTERVAL_MS = 1000


def system_millis() -> int:
    """Milliseconds from a monotonic clock."""
    return time.monotonic_ns() // 1_000_000


class KeyState(Enum):
    """State of the keypad, as reported by the matrix scanner."""

    IDLE = "idle"
    PRESSED = "pressed"
    HOLD = "hold"
    RELEASED = "released"


class Horn:
    """A horn behind an active-low relay, driven without blocking.

    ``sound`` keeps it on for a fixed time; ``beep`` gives a number of
    one-second-on, one-second-off beeps. ``update`` must be called
    regularly to advance either pattern.
    """

    def __init__(self, clock: Clock = system_millis) -> None:
        self._clock = clock
        self._on = False

        self._sounding = False
        self._sound_start = 0
        self._sound_duration = 0

        self._beeping = False
        self._total_beeps = 0
        self._current_beep = 0
        self._beep_on = False
        self._last_toggle = 0

    def is_on(self) -> bool:
        """Whether the relay is currently driving the horn."""
        return self._on

    def sound(self, duration_ms: int) -> None:
        """Turn the horn on for ``duration_ms`` milliseconds."""
        self._sounding = True
        self._sound_start = self._clock()
        self._sound_duration = duration_ms
        self._on = True

    def beep(self, times: int) -> None:
        """Start ``times`` beeps, the first one immediately."""
        self._beeping = True
        self._total_beeps = times
        self._current_beep = 0
        self._beep_on = True
        self._last_toggle = self._clock()
        self._on = True

    def update(self) -> None:
        """Advance the running sound or beep pattern."""
        now = self._clock()

        if self._sounding and now - self._sound_start >= self._sound_duration:
            self._on = False
            self._sounding = False

        if not self._beeping or now - self._last_toggle < BEEP_INTERVAL_MS:
            return

        if self._beep_on:
            self._on = False
            self._beep_on = False
            self._last_toggle = now
        else:
            self._current_beep += 1
            if self._current_beep >= self._total_beeps:
                self._beeping = False
                return
            self._on = True
            self._beep_on = True
            self._last_toggle = now


class Keypad:
    """A 4x4 keypad whose presses are fed in by ``press``, ``hold`` and ``release``."""

    def __init__(self) -> None:
        self._events: deque[str] = deque()
        self._keys: dict[str, KeyState] = {}

    def press(self, key: str) -> None:
        """Press ``key``; it is reported once by ``get_key``."""
        if key not in _VALID_KEYS:
            raise ValueError(f"no such key on the keypad: {key!r}")
        self._events.append(key)
        self._keys[key] = KeyState.PRESSED

    def hold(self) -> None:
        """Mark every key that is down as held."""
        for key in self._keys:
            self._keys[key] = KeyState.HOLD

    def release(self) -> None:
        """Let go of every key."""
        self._keys.clear()

    def get_key(self) -> str:
        """The next newly pressed key, or an empty string when there is none."""
        return self._events.popleft() if self._events else ""

    def get_keys(self) -> str:
        """All keys currently in the pressed state, in the order they went down."""
        return "".join(k for k, s in self._keys.items() if s is KeyState.PRESSED)

    def get_state(self) -> KeyState:
        """Overall keypad state: held beats pressed, nothing down is idle."""
        states = set(self._keys.values())
        if KeyState.HOLD in states:
            return KeyState.HOLD
        if KeyState.PRESSED in states:
            return KeyState.PRESSED
        return KeyState.IDLE