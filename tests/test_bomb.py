from unittest.mock import Mock

import pytest

from bombprop.bomb import (
    ArmedView,
    ArmingView,
    BasicBombGame,
    BombState,
    DisarmView,
    ExplodedView,
    InitView,
    SuccessView,
)
from bombprop.display import Screen
from bombprop.hardware import Keypad


@pytest.fixture
def clock():
    return Mock(return_value=0)


@pytest.fixture
def game(clock):
    g = BasicBombGame(Keypad(), Screen(), clock)
    g.begin()
    return g


def press(game, keys):
    for key in keys:
        game.keypad.press(key)
        game.update()


def arm(game, code="123456"):
    press(game, "1")
    press(game, code)
    press(game, "C")


def tick_at(game, clock, ms):
    clock.return_value = ms
    game.update()


def test_defaults(clock):
    g = BasicBombGame(Keypad(), Screen(), clock)
    assert (g.minutes, g.seconds) == (30, 0)
    assert g.bomb_code() == "000000"
    assert g.state is BombState.INIT


def test_update_before_begin_raises(clock):
    g = BasicBombGame(Keypad(), Screen(), clock)
    with pytest.raises(RuntimeError):
        g.update()


def test_begin_shows_mode_selection(game):
    assert isinstance(game.current_view, InitView)
    printed = game.screen.printed()
    assert "Select Mode" in printed
    assert "Press number" in printed


@pytest.mark.parametrize("key,minutes", [("1", 5), ("2", 10), ("3", 30)])
def test_mode_selection_sets_time(game, key, minutes):
    press(game, key)
    assert game.state is BombState.ARMING
    assert (game.minutes, game.seconds) == (minutes, 0)
    assert isinstance(game.current_view, ArmingView)


def test_other_key_on_init_does_nothing(game):
    press(game, "A")
    assert game.state is BombState.INIT


def test_arming_shows_partial_code(game):
    press(game, "1")
    assert "Enter Code:" in game.screen.printed()
    press(game, "12")
    assert "12____" in game.screen.printed()
    assert game.current_view.code == "12"


def test_arming_delete_removes_last_digit(game):
    press(game, "1")
    press(game, "789D")
    assert game.current_view.code == "78"


def test_arming_ignores_extra_digits_and_short_continue(game):
    press(game, "1")
    press(game, "123C")
    assert game.state is BombState.ARMING
    press(game, "4567")
    assert game.current_view.code == "123456"


def test_arming_back_returns_to_init(game):
    press(game, "1")
    press(game, "B")
    assert game.state is BombState.INIT
    assert isinstance(game.current_view, InitView)


def test_arming_sets_code_and_arms(game):
    arm(game, "654321")
    assert game.state is BombState.ARMED
    assert game.bomb_code() == "654321"
    view = game.current_view
    assert isinstance(view, ArmedView)
    assert view.horn.is_on()
    assert {"05:00", "Bomb Armed!"} <= set(game.screen.printed())


def test_set_bomb_code_keeps_six_characters(game):
    game.set_bomb_code("98765432")
    assert game.bomb_code() == "987654"


def test_change_state_to_same_state_keeps_view(game):
    view = game.current_view
    game.change_state(BombState.INIT)
    assert game.current_view is view


def test_views_count_main_loop_passes(game):
    press(game, "A")
    press(game, "B")
    assert game.current_view.frames == 2


def test_countdown_waits_a_full_second(game, clock):
    arm(game)
    before = (game.minutes, game.seconds)
    tick_at(game, clock, 999)
    assert (game.minutes, game.seconds) == before


def test_countdown_rolls_over_minute(game, clock):
    arm(game)
    game.set_time(0, 1)
    tick_at(game, clock, 1000)
    assert (game.minutes, game.seconds) == (0, 59)
    assert game.state is BombState.ARMED


@pytest.mark.parametrize(
    "extra_keys,state", [("", BombState.ARMED), ("D", BombState.DISARMING)]
)
def test_countdown_decrements_seconds_and_refreshes(game, clock, extra_keys, state):
    arm(game)
    press(game, extra_keys)
    game.set_time(10, 2)
    tick_at(game, clock, 1000)
    assert game.state is state
    assert (game.minutes, game.seconds) == (2, 9)
    assert "02:09" in game.screen.printed()


def test_countdown_reaches_zero_and_explodes(game, clock):
    arm(game)
    game.set_time(2, 0)
    tick_at(game, clock, 1000)
    assert game.state is BombState.ARMED
    tick_at(game, clock, 2000)
    assert game.state is BombState.EXPLODED
    view = game.current_view
    assert isinstance(view, ExplodedView)
    assert "BoOOoM" in game.screen.printed()
    assert view.horn.is_on()


def test_explosion_horn_stops_after_sound(game, clock):
    arm(game)
    game.set_time(1, 0)
    tick_at(game, clock, 1000)
    horn = game.current_view.horn
    tick_at(game, clock, 8000)
    assert not horn.is_on()


def test_armed_to_disarming_shows_time(game):
    arm(game)
    press(game, "D")
    assert game.state is BombState.DISARMING
    assert isinstance(game.current_view, DisarmView)
    assert "05:00" in game.screen.printed()


def test_disarm_back_returns_to_armed(game):
    arm(game)
    press(game, "DB")
    assert game.state is BombState.ARMED


def test_wrong_code_stays_disarming(game):
    arm(game, "123456")
    press(game, "D111111C")
    assert game.state is BombState.DISARMING
    assert "Wrong Code!" in game.screen.printed()


def test_right_code_disarms_and_restart(game):
    arm(game, "246802")
    press(game, "D246802C")
    assert game.state is BombState.DISARMED
    assert isinstance(game.current_view, SuccessView)
    assert "--------Disarmed--------" in game.screen.printed()
    press(game, "A")
    assert game.state is BombState.INIT
    assert game.bomb_code() == "246802"


def test_success_ignores_other_keys(game):
    arm(game)
    press(game, "D123456CB")
    assert game.state is BombState.DISARMED