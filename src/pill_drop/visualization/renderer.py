from __future__ import annotations

from typing import Optional, Tuple

import pygame

from pill_drop.board import ActionPlan, Color, Content, IterationAction, Link, PlayField


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        Color.UNCOLORED: (20, 20, 26),
        Color.RED: (230, 50, 60),
        Color.BLUE: (50, 110, 240),
        Color.YELLOW: (240, 210, 40),
    }
    return palette.get(v, (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin

    def _cell_rect(self, row: int, col: int) -> pygame.Rect:
        return pygame.Rect(col * self.cell_size, row * self.cell_size, self.cell_size - 1, self.cell_size - 1)

    def _draw_pill_half(self, surf: pygame.Surface, rect: pygame.Rect, color, link: Link) -> None:
        inset = rect.inflate(-4, -4)
        pygame.draw.rect(surf, color, inset)
        # Bridge the gap toward the partner half
        if link == Link.RIGHT:
            pygame.draw.rect(surf, color, pygame.Rect(inset.right, inset.top, rect.right - inset.right + 1, inset.height))
        elif link == Link.LEFT:
            pygame.draw.rect(surf, color, pygame.Rect(rect.left, inset.top, inset.left - rect.left, inset.height))
        elif link == Link.DOWN:
            pygame.draw.rect(surf, color, pygame.Rect(inset.left, inset.bottom, inset.width, rect.bottom - inset.bottom + 1))
        elif link == Link.UP:
            pygame.draw.rect(surf, color, pygame.Rect(inset.left, rect.top, inset.width, inset.top - rect.top))

    def _grid_surface(self, field: PlayField, plan: Optional[ActionPlan] = None) -> pygame.Surface:
        h, w = field.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for row, col, cell in field.cells():
            rect = self._cell_rect(row, col)
            pygame.draw.rect(surf, _color_for_value(Color.UNCOLORED), rect)
            color = _color_for_value(cell.color)
            if cell.content == Content.VIRUS:
                pygame.draw.circle(surf, color, rect.center, self.cell_size // 2 - 3)
            elif cell.content == Content.PILL:
                self._draw_pill_half(surf, rect, color, cell.link)

            if plan is None:
                continue
            action = plan.at(row, col)
            if action == IterationAction.CLEAR:
                pygame.draw.rect(surf, (255, 255, 255), rect, 2)
            elif action == IterationAction.FALL:
                bar = pygame.Rect(rect.left, rect.bottom - 3, rect.width, 3)
                pygame.draw.rect(surf, (255, 255, 255), bar)
        return surf

    def draw(self, screen: pygame.Surface, field: PlayField, plan: Optional[ActionPlan] = None) -> None:
        grid_surf = self._grid_surface(field, plan)
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))
        pygame.display.flip()
