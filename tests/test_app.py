import pygame
import pytest

from solong.app import (
    CLEAR_COLOR,
    TEXT_COLOR,
    TEXTURE_FILES,
    draw_counter,
    load_textures,
    main,
    render_map,
)
from solong.game import TILE_SIZE, Game
from solong.mapfile import GameMap
from solong.xpm import XpmError

XPM = (
    "static char *img[] = {\n"
    '"2 2 2 1",\n'
    '"a c #FF0000",\n'
    '"b c #0000FF",\n'
    '"ab",\n'
    '"ba"};\n'
)

MAP_LINES = ["11111\n", "1PCE1\n", "11111\n"]

COLORS = {
    "wall": (10, 10, 10),
    "floor": (20, 20, 20),
    "coin": (30, 30, 30),
    "exit": (40, 40, 40),
    "play_left_1": (50, 50, 50),
    "play_left_2": (60, 60, 60),
    "play_right_1": (70, 70, 70),
    "play_right_2": (80, 80, 80),
    "foes_1": (90, 90, 90),
    "foes_2": (100, 100, 100),
}


def _rgb(color):
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def _solid_textures():
    textures = {}
    for name, color in COLORS.items():
        surf = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surf.fill(color)
        textures[name] = surf
    return textures


def _tile(surface, x, y):
    centre = (x * TILE_SIZE + TILE_SIZE // 2, y * TILE_SIZE + TILE_SIZE // 2)
    return tuple(surface.get_at(centre))[:3]


def _game():
    return Game(GameMap.from_lines(MAP_LINES))


def _write_textures(directory, skip=None):
    for name, filename in TEXTURE_FILES.items():
        if name != skip:
            (directory / filename).write_text(XPM)


def test_load_textures_reads_every_file(tmp_path):
    _write_textures(tmp_path)
    textures = load_textures(tmp_path)
    assert set(textures) == set(TEXTURE_FILES)
    wall = textures["wall"]
    assert wall.get_size() == (2, 2)
    assert tuple(wall.get_at((0, 0)))[:3] == (255, 0, 0)
    assert tuple(wall.get_at((1, 0)))[:3] == (0, 0, 255)
    assert tuple(wall.get_at((0, 1)))[:3] == (0, 0, 255)


def test_load_textures_fails_when_one_is_missing(tmp_path):
    _write_textures(tmp_path, skip="exit")
    with pytest.raises(XpmError, match="Textures loading error"):
        load_textures(tmp_path)


def test_render_map_draws_each_tile():
    game = _game()
    surface = pygame.Surface((game.map.width * TILE_SIZE, game.map.height * TILE_SIZE))
    render_map(surface, game, _solid_textures())
    assert _tile(surface, 0, 0) == COLORS["wall"]
    assert _tile(surface, 1, 1) == COLORS["play_right_1"]
    assert _tile(surface, 2, 1) == COLORS["coin"]
    assert _tile(surface, 3, 1) == COLORS["exit"]
    assert _tile(surface, 4, 2) == COLORS["wall"]


def test_render_map_follows_player_moves():
    game = _game()
    game.move(0, 1)
    surface = pygame.Surface((game.map.width * TILE_SIZE, game.map.height * TILE_SIZE))
    render_map(surface, game, _solid_textures())
    assert _tile(surface, 1, 1) == COLORS["floor"]
    assert _tile(surface, 2, 1) == COLORS[game.player_sprite]


def test_draw_counter_clears_box_and_writes_text():
    pygame.font.init()
    font = pygame.font.Font(None, 20)
    background = (1, 2, 3)
    surface = pygame.Surface((100, 100))
    surface.fill(background)
    draw_counter(surface, _game(), font)
    assert tuple(surface.get_at((10, 10)))[:3] == _rgb(CLEAR_COLOR)
    assert tuple(surface.get_at((10 + TILE_SIZE - 1, 10 + TILE_SIZE - 1)))[:3] == _rgb(
        CLEAR_COLOR
    )
    assert tuple(surface.get_at((9, 9)))[:3] == background
    text_pixels = [
        (x, y)
        for x in range(30, 80)
        for y in range(0, 45)
        if tuple(surface.get_at((x, y)))[:3] == _rgb(TEXT_COLOR)
    ]
    assert text_pixels


def test_main_rejects_wrong_argument_count(capsys):
    assert main([]) == 1
    out, err = capsys.readouterr()
    assert out == "Error\n"
    assert err == "Invalid number of argument\n"


def test_main_rejects_wrong_extension(capsys, tmp_path):
    path = tmp_path / "level.txt"
    path.write_text("".join(MAP_LINES))
    assert main([str(path)]) == 1
    out, err = capsys.readouterr()
    assert out == "Error\n"
    assert err == "Wrong file format !\n"


def test_main_reports_invalid_map(capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad.ber").write_text("11111\n1P0E1\n11111\n")
    assert main(["bad.ber"]) == 1
    out, err = capsys.readouterr()
    assert out == "Error\n"
    assert err == "Invalid number of elements !\n"


def test_main_reports_missing_textures(capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "ok.ber").write_text("".join(MAP_LINES))
    assert main(["ok.ber"]) == 1
    out, err = capsys.readouterr()
    assert out == "Map successfully checked\nError\n"
    assert err == "Textures loading error !\n"