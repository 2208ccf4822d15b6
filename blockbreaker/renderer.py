"""pygame presenter for a ``RenderModel``.

Layer Order (bottom -> top):
1. Background fill
2. Active blocks (gradient body, highlight/shadow edges, inner bevel)
3. Paddle
4. Ball
5. HUD text (score, lives)
6. Modal panel + message (Idle / Finished only)
7. Scale the field-sized frame onto the window surface

Block bodies are pre-rendered per (size, color) and kept in a small LRU
cache; a board reuses the same 45 surfaces every frame. The optional
``capture_sequence`` records executed layers for tests.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Dict, List, Optional, Sequence, Tuple

import pygame

from blockbreaker.logger import get_logger
from blockbreaker.render_model import BlockSprite, Modal, RenderModel, TextItem

_log = get_logger("renderer")

Color255 = Tuple[int, ...]


def to_rgb255(color: Sequence[float]) -> Color255:
    """Float 0..1 channels -> pygame 0..255 ints (alpha preserved when present)."""
    return tuple(max(0, min(255, int(round(c * 255)))) for c in color)


class Renderer:
    """Draws render models.

    Usage:
        r = Renderer()
        r.render(controller.render_model(), window_surface)
    """

    def __init__(self, block_cache_capacity: int = 128) -> None:
        self._block_cache: "OrderedDict[tuple, pygame.Surface]" = OrderedDict()
        self._block_cache_capacity = block_cache_capacity
        self._fonts: Dict[Tuple[int, bool], pygame.font.Font] = {}
        self._frame: pygame.Surface | None = None

    # ---------- Caches ----------
    def _font(self, size: int, bold: bool) -> pygame.font.Font:
        key = (size, bold)
        font = self._fonts.get(key)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, int(size * 1.35))  # default font runs small
            font.set_bold(bold)
            self._fonts[key] = font
        return font

    def _block_surface(self, sprite: BlockSprite) -> pygame.Surface:
        _, _, w, h = sprite.rect
        key = (int(w), int(h), sprite.color)
        surf = self._block_cache.get(key)
        if surf is not None:
            self._block_cache.move_to_end(key)
            return surf
        surf = self._build_block_surface(sprite, int(w), int(h))
        self._block_cache[key] = surf
        if len(self._block_cache) > self._block_cache_capacity:
            self._block_cache.popitem(last=False)
            _log.debug("block cache eviction; size", len(self._block_cache))
        return surf

    @staticmethod
    def _build_block_surface(sprite: BlockSprite, w: int, h: int) -> pygame.Surface:
        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        # Diagonal gradient: one anti-diagonal line (x + y == d) per step
        light = sprite.gradient_light
        dark = sprite.gradient_dark
        span = max(1, w + h - 2)
        for d in range(w + h - 1):
            t = d / span
            color = to_rgb255([a + (b - a) * t for a, b in zip(light, dark)])
            x0 = min(d, w - 1)
            x1 = max(0, d - (h - 1))
            pygame.draw.line(surf, color, (x0, d - x0), (x1, d - x1))

        # Edges blend, so draw them on their own layer
        edges = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.lines(edges, to_rgb255(sprite.highlight), False, [(0, h - 1), (0, 0), (w - 1, 0)], 2)
        pygame.draw.lines(edges, to_rgb255(sprite.shadow), False, [(w - 1, 0), (w - 1, h - 1), (0, h - 1)], 2)
        surf.blit(edges, (0, 0))

        bx, by, bw, bh = sprite.bevel_rect
        x, y, _, _ = sprite.rect
        if bw > 0 and bh > 0:
            pygame.draw.rect(surf, to_rgb255(sprite.bevel_color), (int(bx - x), int(by - y), int(bw), int(bh)))
        return surf

    # ---------- Frame ----------
    def render(
        self,
        model: RenderModel,
        target_surface: pygame.Surface,
        capture_sequence: Optional[List[str]] = None,
    ) -> None:
        seq = capture_sequence
        if self._frame is None or self._frame.get_size() != model.size:
            self._frame = pygame.Surface(model.size)
        frame = self._frame

        # 1. Background
        frame.fill(to_rgb255(model.background))
        if seq is not None:
            seq.append("background")

        # 2. Blocks
        for sprite in model.blocks:
            x, y, _, _ = sprite.rect
            frame.blit(self._block_surface(sprite), (int(x), int(y)))
        if seq is not None:
            seq.append("blocks")

        # 3. Paddle
        pygame.draw.rect(frame, to_rgb255(model.paddle.color), pygame.Rect(*(int(v) for v in model.paddle.rect)))
        if seq is not None:
            seq.append("paddle")

        # 4. Ball
        cx, cy = model.ball.center
        pygame.draw.circle(frame, to_rgb255(model.ball.color), (round(cx), round(cy)), int(model.ball.radius))
        if seq is not None:
            seq.append("ball")

        # 5. HUD
        for item in model.hud:
            self._draw_text(frame, item)
        if seq is not None:
            seq.append("hud")

        # 6. Modal
        if model.modal is not None:
            self._draw_modal(frame, model.modal)
            if seq is not None:
                seq.append("modal")

        # 7. Present
        if frame.get_size() != target_surface.get_size():
            target_surface.blit(pygame.transform.scale(frame, target_surface.get_size()), (0, 0))
        else:
            target_surface.blit(frame, (0, 0))
        if seq is not None:
            seq.append("blit")

    def _draw_text(self, surface: pygame.Surface, item: TextItem) -> None:
        font = self._font(item.size, item.bold)
        img = font.render(item.text, True, to_rgb255(item.color))
        x, baseline = item.pos
        surface.blit(img, (int(x), int(baseline - font.get_ascent())))

    def _draw_modal(self, surface: pygame.Surface, modal: Modal) -> None:
        x, y, w, h = modal.panel
        panel = pygame.Surface((int(w), int(h)), pygame.SRCALPHA)
        panel.fill(to_rgb255(modal.color))
        surface.blit(panel, (int(x), int(y)))
        for line in modal.lines:
            self._draw_text(surface, line)


__all__ = ["Renderer", "to_rgb255"]
