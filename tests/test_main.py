"""Tests for the pygame loop: frame order on a line clear, game-over frame, key mapping."""

import collections
import itertools

import pygame
import pytest

import main
from tetris_board import Field, COMPLETED
from tetris_config import CONFIG
from tetris_game import Game, Session
from tetris_input import Controls
from tetris_piece import PieceKind
from tetris_render import compose_screen


class LinesOnly:
    def __init__(self):
        self._kinds = itertools.repeat(PieceKind.LINE)

    def next_piece(self):
        return next(self._kinds)


class RecordingRender:
    def __init__(self, events):
        self.events = events

    def draw(self, screen, lines):
        self.events.append(("draw", lines))


class NoWaitClock:
    def tick_busy_loop(self, fps):
        return 0


@pytest.fixture
def screen(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    surface = pygame.display.set_mode((64, 64))
    yield surface
    pygame.display.quit()


@pytest.fixture
def scripted_play(screen, monkeypatch):
    """Run main.play with Line pieces soft-dropped every tick onto a row 16 missing column 6."""
    monkeypatch.setitem(CONFIG, "TICK_MS", 50)
    monkeypatch.setitem(CONFIG, "FLASH_TICKS", 8)
    events = []
    ticks = []

    def new_game():
        game = Game(rng=LinesOnly(), session=Session(), board=Field())
        for x in game.field.interior_cols():
            if x != 6:
                game.field.put(x, 16, "B")
        return game

    def held():
        ticks.append(1)
        return Controls(soft_drop=True)

    monkeypatch.setattr(main, "Game", new_game)
    monkeypatch.setattr(main, "read_controls", held)
    monkeypatch.setattr(pygame.time, "Clock", NoWaitClock)
    monkeypatch.setattr(pygame.time, "delay", lambda ms: events.append(("delay", ms)))

    game = main.play(screen, RecordingRender(events))
    return game, events, len(ticks)


def has_marker(lines):
    return any(COMPLETED in line for line in lines)


def test_flash_frame_then_delay_then_cleared_frame(scripted_play):
    _, events, _ = scripted_play
    delays = [e for e in events if e[0] == "delay"]
    assert delays == [("delay", 400)]

    i = events.index(("delay", 400))
    before, after = events[i - 1], events[i + 1]
    assert before[0] == "draw" and has_marker(before[1])
    assert after[0] == "draw" and not has_marker(after[1])


def test_game_over_frame_is_presented_once(scripted_play):
    game, events, ticks = scripted_play
    assert game.game_over
    draws = [e for e in events if e[0] == "draw"]
    # one frame per tick plus the extra flash frame
    assert len(draws) == ticks + 1
    assert events[-1] == ("draw", compose_screen(game.field, game.piece, game.score))


def test_read_controls_maps_keys(screen, monkeypatch):
    keys = collections.defaultdict(bool, {pygame.K_z: True, pygame.K_DOWN: True})
    monkeypatch.setattr(pygame.key, "get_pressed", lambda: keys)
    assert main.read_controls() == Controls(rotate=True, soft_drop=True)

    keys.clear()
    keys.update({pygame.K_UP: True, pygame.K_LEFT: True})
    assert main.read_controls() == Controls(rotate=True, left=True)

    keys.clear()
    keys[pygame.K_RIGHT] = True
    assert main.read_controls() == Controls(right=True)
