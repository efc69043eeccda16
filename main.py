
import argparse
import sys
import pygame
from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import Controls
from tetris_layout import compute_dims
from tetris_render import RenderAssets, compose_screen


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Console-style Tetris")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"], help="piece randomizer seed")
    p.add_argument("--tick-ms", type=int, default=CONFIG["TICK_MS"], help="game tick length in ms (default: 50)")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"], help="pixel size of one screen cell")
    args = p.parse_args(argv)
    if args.tick_ms <= 0:
        p.error("--tick-ms must be positive")
    if args.cell_size < 4:
        p.error("--cell-size must be at least 4")
    return args


def read_controls() -> Controls:
    keys = pygame.key.get_pressed()
    return Controls(
        rotate=bool(keys[pygame.K_z] or keys[pygame.K_UP]),
        left=bool(keys[pygame.K_LEFT]),
        right=bool(keys[pygame.K_RIGHT]),
        soft_drop=bool(keys[pygame.K_DOWN]),
    )


def pump_events():
    for e in pygame.event.get():
        if e.type == pygame.QUIT:
            pygame.quit(); sys.exit()


def present(screen, render, game):
    render.draw(screen, compose_screen(game.field, game.piece, game.score))
    pygame.display.flip()


def play(screen, render) -> Game:
    """Run one game to its end and return it."""
    game = Game()
    clock = pygame.time.Clock()
    fps = 1000 / CONFIG["TICK_MS"]

    while not game.game_over:
        clock.tick_busy_loop(fps)
        pump_events()
        result = game.tick(read_controls())
        if result.game_over:
            present(screen, render, game)
            break
        if result.completed_rows:
            # flash frame with the marked rows, then drop them
            present(screen, render, game)
            pygame.time.delay(CONFIG["FLASH_TICKS"] * CONFIG["TICK_MS"])
            game.clear_lines()
        present(screen, render, game)
    return game


def wait_for_ack(screen, big_font, dims) -> bool:
    """Show the game-over banner; True means restart, False means quit."""
    msg = big_font.render("GAME OVER (R to Restart)", True, (255, 220, 220))
    rect = msg.get_rect(center=(dims.total_w // 2, dims.total_h // 2))
    screen.blit(msg, rect)
    pygame.display.flip()
    while True:
        ev = pygame.event.wait()
        if ev.type == pygame.QUIT:
            return False
        if ev.type == pygame.KEYDOWN:
            return ev.key == pygame.K_r


def main(argv=None):
    args = parse_args(argv)
    CONFIG["SEED"] = args.seed
    CONFIG["TICK_MS"] = args.tick_ms
    CONFIG["CELL_SIZE"] = args.cell_size

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Console Tetris")
    font = pygame.font.SysFont("monospace", dims.cell, bold=True)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font)

    while True:
        game = play(screen, render)
        print(f"Game Over!! Score: {game.score}")
        if not wait_for_ack(screen, big_font, dims):
            break

    pygame.quit()
    return 0


if __name__ == '__main__':
    sys.exit(main())
