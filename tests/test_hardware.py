from unittest.mock import Mock

import pytest

from bombprop.hardware import Horn, Keypad, KeyState, system_millis


@pytest.fixture
def clock():
    return Mock(return_value=0)


def states_over(horn, clock, times):
    """Advance the clock through ``times`` and record whether the horn is on."""
    observed = []
    for t in times:
        clock.return_value = t
        horn.update()
        observed.append(horn.is_on())
    return observed


def test_horn_starts_off(clock):
    assert Horn(clock).is_on() is False


def test_sound_stays_on_until_duration(clock):
    horn = Horn(clock)
    horn.sound(7000)
    assert horn.is_on()
    assert states_over(horn, clock, [6999, 7000]) == [True, False]


def test_beep_three_times_pattern(clock):
    horn = Horn(clock)
    horn.beep(3)
    observed = [horn.is_on()] + states_over(horn, clock, range(1000, 8000, 1000))
    assert observed == [True, False, True, False, True, False, False, False]


def test_beep_does_not_toggle_before_interval(clock):
    horn = Horn(clock)
    horn.beep(2)
    assert states_over(horn, clock, [999]) == [True]


def test_beep_once_ends_off(clock):
    horn = Horn(clock)
    horn.beep(1)
    assert states_over(horn, clock, [1000, 2000, 3000, 10000]) == [False] * 4


def test_keypad_reports_each_press_once():
    keypad = Keypad()
    keypad.press("5")
    keypad.press("D")
    assert [keypad.get_key() for _ in range(3)] == ["5", "D", ""]


def test_keypad_state_transitions():
    keypad = Keypad()
    observed = [keypad.get_state()]
    for action in (lambda: keypad.press("1"), keypad.hold, keypad.release):
        action()
        observed.append(keypad.get_state())
    assert observed == [KeyState.IDLE, KeyState.PRESSED, KeyState.HOLD, KeyState.IDLE]


def test_get_keys_lists_pressed_only():
    keypad = Keypad()
    keypad.press("1")
    keypad.press("A")
    assert keypad.get_keys() == "1A"
    keypad.hold()
    assert keypad.get_keys() == ""


@pytest.mark.parametrize("key", ["X", "", "12", "a"])
def test_press_rejects_unknown_key(key):
    with pytest.raises(ValueError):
        Keypad().press(key)


@pytest.mark.parametrize("key", list("0123456789ABCD*#"))
def test_every_layout_key_is_accepted(key):
    keypad = Keypad()
    keypad.press(key)
    assert keypad.get_key() == key


def test_system_millis_is_monotonic():
    first = system_millis()
    second = system_millis()
    assert second >= first