"""The game window: textures, drawing, the event loop and the command entry point."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

import pygame

from solong.formatting import print_message
from solong.game import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    ESC,
    KEY_A,
    KEY_D,
    KEY_S,
    KEY_W,
    TILE_SIZE,
    Game,
    Outcome,
)
from solong.image import Image
from solong.mapfile import MapError, load_map
from solong.xpm import XpmError, load_xpm

TEXTURE_DIR = Path("srcs/textures")
WINDOW_TITLE = "so_long"

CLEAR_COLOR = 0xD4D29B
TEXT_COLOR = 0x4F3818
COUNTER_ORIGIN = (10, 10)
COUNTER_TEXT_POS = (30, 35)
FONT_SIZE = 20

TEXTURE_FILES: dict[str, str] = {
    "wall": "wall.xpm",
    "floor": "floor.xpm",
    "coin": "tresure.xpm",
    "play_left_1": "play_left_1.xpm",
    "play_right_1": "play_right_1.xpm",
    "play_left_2": "play_left_2.xpm",
    "play_right_2": "play_right_2.xpm",
    "exit": "exit.xpm",
    "foes_1": "skeleton.xpm",
    "foes_2": "skeleton2.xpm",
}

_KEYS: dict[int, int] = {
    pygame.K_UP: ARROW_UP,
    pygame.K_DOWN: ARROW_DOWN,
    pygame.K_LEFT: ARROW_LEFT,
    pygame.K_RIGHT: ARROW_RIGHT,
    pygame.K_w: KEY_W,
    pygame.K_s: KEY_S,
    pygame.K_a: KEY_A,
    pygame.K_d: KEY_D,
}

_END_MESSAGES = {
    Outcome.WON: "\n\nYOU WIN !\n\n\n",
    Outcome.LOST: "\n\nYOU LOOSE !\n\n\n",
    Outcome.QUIT: (
        "\n\no====||==================>\n"
        "ARE YOU FLEEING ? COWARD !\n"
        "<==================||====o\n\n\n"
    ),
}


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _to_surface(image: Image) -> pygame.Surface:
    return pygame.image.frombuffer(image.to_rgb_bytes(), (image.width, image.height), "RGB")


def load_textures(directory: str | Path) -> dict[str, pygame.Surface]:
    """Load every game texture from ``directory``, keyed by sprite name.

    Raises XpmError if any of them cannot be loaded.
    """
    base = Path(directory)
    textures: dict[str, pygame.Surface] = {}
    failed: list[str] = []
    for name, filename in TEXTURE_FILES.items():
        try:
            textures[name] = _to_surface(load_xpm(base / filename))
        except XpmError:
            failed.append(name)
    if failed:
        raise XpmError("Textures loading error !")
    return textures


def render_map(
    surface: pygame.Surface, game: Game, textures: Mapping[str, pygame.Surface]
) -> None:
    """Draw every tile of the map with the sprite the game gives for it."""
    for y, row in enumerate(game.map.grid):
        for x in range(len(row)):
            texture = textures.get(game.sprite_at(x, y))
            if texture is not None:
                surface.blit(texture, (x * TILE_SIZE, y * TILE_SIZE))


def draw_counter(surface: pygame.Surface, game: Game, font: pygame.font.Font) -> None:
    """Clear the counter box and write the move counter in it."""
    left, top = COUNTER_ORIGIN
    surface.fill(_rgb(CLEAR_COLOR), pygame.Rect(left, top, TILE_SIZE, TILE_SIZE))
    text = font.render(str(game.counter), False, _rgb(TEXT_COLOR))
    x, baseline = COUNTER_TEXT_POS
    surface.blit(text, (x, baseline - font.get_ascent()))


def _redraw(surface, game, textures, font) -> None:
    render_map(surface, game, textures)
    draw_counter(surface, game, font)
    pygame.display.flip()


def _handle_event(event: pygame.event.Event, game: Game) -> bool:
    """Apply one event to the game; return True when the view must be redrawn."""
    if event.type == pygame.QUIT:
        game.handle_key(ESC)
        return False
    if event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
        game.handle_key(ESC)
        return False
    if event.type == pygame.KEYDOWN:
        keycode = _KEYS.get(event.key)
        if keycode is None:
            return False
        moves = game.moves
        game.handle_key(keycode)
        return not game.finished and game.moves != moves
    return False


def run(game: Game, textures: Mapping[str, pygame.Surface]) -> Outcome:
    """Open the window and play until the game is won, lost or left."""
    pygame.init()
    try:
        surface = pygame.display.set_mode(
            (game.map.width * TILE_SIZE, game.map.height * TILE_SIZE)
        )
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, FONT_SIZE)
        _redraw(surface, game, textures, font)
        while not game.finished:
            for event in pygame.event.get():
                if _handle_event(event, game):
                    _redraw(surface, game, textures, font)
                if game.finished:
                    break
            if not game.finished and game.tick():
                _redraw(surface, game, textures, font)
    finally:
        pygame.quit()
    print_message(_END_MESSAGES[game.outcome])
    return game.outcome


def _fail(message: str) -> int:
    print_message("Error\n")
    sys.stderr.write(message + "\n")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return _fail("Invalid number of argument")
    try:
        game_map = load_map(args[0])
        print_message("Map successfully checked\n")
        textures = load_textures(TEXTURE_DIR)
        run(Game(game_map), textures)
    except (MapError, XpmError) as exc:
        return _fail(str(exc))
    except pygame.error:
        return _fail("Mlx initialization error !")
    return 0