from __future__ import annotations

import logging
from typing import Dict

import pygame

from pill_drop.board import Color
from pill_drop.game import Action, GameConfig, PillDropGame, VirusPlacement
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
}

DEMO_VIRUSES = (
    VirusPlacement(15, 1, Color.RED),
    VirusPlacement(14, 2, Color.BLUE),
    VirusPlacement(13, 5, Color.YELLOW),
    VirusPlacement(12, 6, Color.RED),
    VirusPlacement(11, 0, Color.BLUE),
    VirusPlacement(10, 4, Color.YELLOW),
)


def run() -> None:
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = PillDropGame(GameConfig(viruses=DEMO_VIRUSES))
        cell_size = 28
        margin = 20
        renderer = Renderer(cell_size=cell_size, margin=margin)

        h, w = game.field.shape
        screen = pygame.display.set_mode((w * cell_size + margin * 2, h * cell_size + margin * 2))
        pygame.display.set_caption("Pill Drop - Human Play")

        gravity_ms = 600
        resolve_ms = 120
        last_tick = pygame.time.get_ticks()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        game.reset()
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None and not game.resolving:
                            game.step(action)

            # Settling runs faster than pill gravity
            now = pygame.time.get_ticks()
            interval = resolve_ms if game.resolving else gravity_ms
            if now - last_tick >= interval:
                game.tick()
                last_tick = now

            renderer.draw(screen, game.get_state())

            if game.done:
                font = pygame.font.SysFont(None, 28)
                message = "Cleared! R to restart" if game.won else "Game Over - R to restart"
                text = font.render(message, True, (255, 255, 255))
                rect = text.get_rect(center=(screen.get_width() // 2, margin // 2 + 4))
                screen.blit(text, rect)
                pygame.display.flip()

            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
