# bombprop

The game logic behind an airsoft bomb prop that has a 4x4 keypad, a small
160x128 colour screen and a relay-driven horn. The hardware is modelled in
software, so the games can be run and tested without a device.

## Modules

- `bombprop.hardware` has `Keypad` (a 4x4 keypad fed with `press`, `hold`
  and `release`, read with `get_key`, `get_keys` and `get_state`),
  `KeyState`, `Horn` (a relay horn with `sound` and `beep`, advanced by
  `update`, with `is_on` telling whether it is sounding) and
  `system_millis`, a monotonic millisecond clock.
- `bombprop.display` has `Screen`, which keeps the pixels filled on it and
  the text printed on it (`printed()` returns the text still visible),
  `Color`, and `BaseView`, the three-section layout (info bar, main
  section, control line) that every view shares.
- `bombprop.bomb` has `BasicBombGame` and its views. The player picks a
  time (5, 10 or 30 minutes), enters a six-digit code to arm the bomb, and
  the other side has to enter the same code before the countdown reaches
  zero. `BombState` names the stages; `game.state` gives the current one.
- `bombprop.chess` has `ChessClockGame` and `ChessClockView`. Holding a
  digit key for more than 2.5 seconds gives control to blue, holding
  `A`–`D` or `#` gives it to red, holding `*` takes control away from both.
  Each team's clock counts up the seconds that team has held control
  (`blue_time`, `red_time`); `team_for_key` maps a key to its team.
- `bombprop.factory` has `GameMode`, `create_game` (which raises
  `ValueError` for an unknown mode) and `InitializeGameView`, the start
  menu: pressing `1` or `2` builds the chosen game and stores it in the
  view's `game` attribute.

## Installation

```
pip install .
```

## Examples

Arming the bomb:

```python
from bombprop.bomb import BasicBombGame, BombState
from bombprop.display import Screen
from bombprop.hardware import Keypad

now = 0
keypad = Keypad()
game = BasicBombGame(keypad, Screen(), lambda: now)
game.begin()

for key in "1123456C":      # 5 minutes, code 123456, continue
    keypad.press(key)
    game.update()
    keypad.release()

assert game.state is BombState.ARMED
```

Taking control in the chess-clock game:

```python
from bombprop.chess import ActiveTeam, ChessClockGame
from bombprop.display import Screen
from bombprop.hardware import Keypad

now = 0
keypad = Keypad()
game = ChessClockGame(keypad, Screen(), lambda: now)
game.begin()

keypad.press("5")
game.update()
keypad.hold()
game.update()               # the hold starts at 0 ms
now = 2600
game.update()               # held for more than 2.5 s: blue takes control
now = 3600
game.update()               # one second of blue control

assert game.active_team is ActiveTeam.BLUE
assert game.blue_time == 1
```

The clock is any callable that returns milliseconds. Pass
`bombprop.hardware.system_millis` to run in real time, or a function of
your own to drive the game step by step, as above.

## What the package does not do

There is no command to run and no main loop: the caller creates a game,
calls `begin()` once and then `update()` as often as it likes. Nothing
talks to a real keypad, screen or relay; keys are fed in through
`Keypad`, drawing goes to the in-memory `Screen`, and `Horn` only keeps
track of whether it would be on. `InitializeGameView` builds the chosen
game but does not start it.

## Running the tests

```
pip install .[test]
pytest
```