import pytest

from solong.game import (
    ARROW_LEFT,
    ARROW_RIGHT,
    ESC,
    IDLE_PERIOD,
    KEY_D,
    KEY_S,
    KEY_W,
    Facing,
    Game,
    Outcome,
)
from solong.mapfile import GameMap


def make_game(*rows):
    return Game(GameMap.from_lines([row + "\n" for row in rows]))


def simple():
    return make_game("111111", "1PC0E1", "111111")


def test_initial_state():
    game = simple()
    assert game.player == (1, 1)
    assert game.coins_total == 1
    assert game.moves == 0
    assert game.outcome is Outcome.PLAYING
    assert game.sprite_at(1, 1) == game.player_sprite
    assert game.facing is Facing.RIGHT


def test_collect_coin():
    game = simple()
    assert game.move(0, 1) is Outcome.PLAYING
    assert game.player == (1, 2)
    assert game.coins_taken == 1
    assert game.moves == 1
    assert game.map[1, 2] == "0"
    assert game.map[1, 1] == "0"


def test_wall_blocks_move():
    game = simple()
    game.move(-1, 0)
    assert game.player == (1, 1)
    assert game.moves == 0


def test_win_after_all_coins():
    game = simple()
    for _ in range(3):
        game.move(0, 1)
    assert game.outcome is Outcome.WON
    assert game.player == (1, 3)
    assert game.moves == 2


def test_exit_without_coins_is_walkable():
    game = make_game("111111", "1PEC01", "111111")
    assert game.move(0, 1) is Outcome.PLAYING
    assert game.player == (1, 2)
    assert game.map[1, 2] == "E"
    assert game.sprite_at(2, 1) == game.player_sprite
    game.move(0, 1)
    assert game.map[1, 2] == "E"
    assert game.sprite_at(2, 1) == "exit"
    assert game.move(0, -1) is Outcome.WON


def test_foe_loses():
    game = make_game("1111111", "1PF0CE1", "1000001", "1111111")
    assert game.handle_key(ARROW_RIGHT) is Outcome.LOST
    assert game.player == (1, 1)
    assert game.move(1, 0) is Outcome.LOST
    assert game.player == (1, 1)


def test_keys_move_and_face():
    game = make_game("1111111", "10P0CE1", "1000001", "1111111")
    game.handle_key(ARROW_LEFT)
    assert game.facing is Facing.LEFT
    assert game.player == (1, 1)
    assert game.player_sprite.startswith("play_left")
    game.handle_key(KEY_S)
    assert game.player == (2, 1)
    game.handle_key(KEY_W)
    assert game.player == (1, 1)
    game.handle_key(KEY_D)
    assert game.facing is Facing.RIGHT
    assert game.player == (1, 2)
    assert game.moves == 4


def test_escape_quits_and_stops_moves():
    game = simple()
    assert game.handle_key(ESC) is Outcome.QUIT
    assert game.handle_key(ARROW_RIGHT) is Outcome.QUIT
    assert game.player == (1, 1)


def test_invalid_step():
    game = simple()
    with pytest.raises(ValueError):
        game.move(0, 2)


def test_tick_animates():
    game = make_game("1111111", "1PF0CE1", "1000001", "1111111")
    foe_before = game.sprite_at(2, 1)
    player_before = game.sprite_at(1, 1)
    results = [game.tick() for _ in range(IDLE_PERIOD)]
    assert results.count(True) == 1
    assert results[-1] is True
    assert game.timer == 0
    assert game.sprite_at(2, 1) != foe_before
    assert game.sprite_at(1, 1) != player_before
    for _ in range(IDLE_PERIOD):
        game.tick()
    assert game.sprite_at(2, 1) == foe_before
    assert game.sprite_at(1, 1) == player_before


def test_counter_lags_until_redraw():
    game = simple()
    game.move(0, 1)
    assert game.counter == 0
    for _ in range(IDLE_PERIOD):
        game.tick()
    assert game.counter == game.moves


def test_static_sprites():
    game = simple()
    assert game.sprite_at(0, 0) == "wall"
    assert game.sprite_at(2, 1) == "coin"
    assert game.sprite_at(3, 1) == "floor"
    assert game.sprite_at(4, 1) == "exit"