import math

import pytest

from cubcaster.raycast import (
    DEMO_MAP,
    HEIGHT,
    MINIMAP_PLAYER,
    MINIMAP_SCALE,
    MINIMAP_WALL,
    ROT_SPEED,
    SPEED,
    TILE_SIZE,
    WALL_COLOR,
    WIDTH,
    Frame,
    Game,
    Key,
    Player,
    player_from_scene,
)


def make_game():
    return Game(DEMO_MAP, player_from_scene(3.5, 3.5, "N"))


@pytest.mark.parametrize(
    "facing, angle",
    [("N", 0.0), ("E", math.pi / 2), ("S", math.pi), ("W", 3 * math.pi / 2), ("X", 0.0)],
)
def test_player_from_scene_facing(facing, angle):
    player = player_from_scene(2.5, 1.5, facing)
    assert player.angle == pytest.approx(angle)
    assert player.x == pytest.approx(2.5 * TILE_SIZE)
    assert player.y == pytest.approx(1.5 * TILE_SIZE)


def test_frame_put_and_read_pixel():
    frame = Frame(4, 3)
    frame.put_pixel(2, 1, 0x123456)
    assert frame[2, 1] == 0x123456
    assert sum(frame.pixels) == 0x123456


def test_frame_ignores_out_of_bounds():
    frame = Frame(4, 3)
    frame.put_pixel(-1, 0, 7)
    frame.put_pixel(4, 0, 7)
    frame.put_pixel(0, 3, 7)
    assert set(frame.pixels) == {0}
    with pytest.raises(IndexError):
        frame[4, 0]


def test_frame_clear():
    frame = Frame(3, 3)
    frame.draw_square(0, 0, 3, 9)
    frame.clear()
    assert set(frame.pixels) == {0}


def test_vertical_line_is_clipped():
    frame = Frame(5, 6)
    frame.draw_vertical_line(2, -10, 100, 5)
    assert [frame[2, y] for y in range(6)] == [5] * 6
    assert all(frame[x, y] == 0 for x in (0, 1, 3, 4) for y in range(6))


def test_vertical_line_partial():
    frame = Frame(3, 6)
    frame.draw_vertical_line(0, 2, 4, 1)
    assert [frame[0, y] for y in range(6)] == [0, 0, 1, 1, 1, 0]


def test_draw_square_area():
    frame = Frame(6, 6)
    frame.draw_square(4, 4, 4, 3)
    assert frame.pixels.count(3) == 4
    assert frame[5, 5] == 3


@pytest.mark.parametrize(
    "angle, cells",
    [(0.0, 1.5), (math.pi, 2.5), (math.pi / 2, 0.5), (-math.pi / 2, 1.5)],
)
def test_cast_ray_axis_directions(angle, cells):
    game = make_game()
    assert game.cast_ray(angle) == pytest.approx(cells * TILE_SIZE)


def test_cast_ray_is_positive_in_every_direction():
    game = make_game()
    lengths = [game.cast_ray(step * math.pi / 16) for step in range(32)]
    assert all(length > 0 for length in lengths)


def test_render_draws_walls_and_minimap():
    game = make_game()
    game.render()
    assert all(game.frame[x, HEIGHT // 2] == WALL_COLOR for x in range(100, WIDTH))
    assert game.frame[0, 0] == MINIMAP_WALL
    assert game.frame[3 * MINIMAP_SCALE, 3 * MINIMAP_SCALE] == MINIMAP_PLAYER


def test_try_move_zero_does_nothing():
    game = make_game()
    assert game.try_move(0, 0, "+") is False
    assert (game.player.x, game.player.y) == (3.5 * TILE_SIZE, 3.5 * TILE_SIZE)


def test_try_move_into_free_cell():
    game = make_game()
    start_x = game.player.x
    assert game.try_move(TILE_SIZE, 0, "+") is True
    assert game.player.x == pytest.approx(start_x + TILE_SIZE)
    assert game.frame[4 * MINIMAP_SCALE, 3 * MINIMAP_SCALE] == MINIMAP_PLAYER


def test_try_move_into_wall_is_refused():
    game = make_game()
    start = (game.player.x, game.player.y)
    assert game.try_move(2 * TILE_SIZE, 0, "+") is False
    assert (game.player.x, game.player.y) == start


def test_try_move_minus_goes_backwards():
    game = make_game()
    start_x = game.player.x
    assert game.try_move(-TILE_SIZE, 0, "-") is True
    assert game.player.x == pytest.approx(start_x + TILE_SIZE)


def test_try_move_off_screen_is_refused():
    game = make_game()
    start = (game.player.x, game.player.y)
    assert game.try_move(-10 * TILE_SIZE, 0, "+") is False
    assert (game.player.x, game.player.y) == start


def test_try_move_bad_sign():
    game = make_game()
    with pytest.raises(ValueError):
        game.try_move(1, 0, "*")


def test_handle_key_forward_and_back():
    game = make_game()
    start_x = game.player.x
    assert game.handle_key(Key.W) is True
    assert game.player.x == pytest.approx(start_x + SPEED)
    game.handle_key(Key.S)
    assert game.player.x == pytest.approx(start_x)


def test_handle_key_strafe():
    game = make_game()
    start_y = game.player.y
    game.handle_key(Key.A)
    assert game.player.y == pytest.approx(start_y - SPEED)
    game.handle_key(Key.D)
    assert game.player.y == pytest.approx(start_y)


def test_handle_key_rotation():
    game = make_game()
    game.handle_key(Key.LEFT)
    assert game.player.angle == pytest.approx(-ROT_SPEED)
    game.handle_key(Key.RIGHT)
    game.handle_key(Key.RIGHT)
    assert game.player.angle == pytest.approx(ROT_SPEED)


def test_handle_key_escape_stops():
    game = make_game()
    assert game.handle_key(Key.ESC) is False


def test_handle_unknown_key_keeps_player():
    game = Game(DEMO_MAP, Player(200.0, 200.0, 1.0))
    assert game.handle_key(99) is True
    assert (game.player.x, game.player.y, game.player.angle) == (200.0, 200.0, 1.0)