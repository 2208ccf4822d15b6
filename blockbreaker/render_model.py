"""Render model: an immutable, drawing-API-free description of one frame.

Colors are float RGB(A) tuples in ``0..1``. Text positions are the left
end of the text baseline, in field coordinates. A presenter draws, in
order: background, blocks, paddle, ball, HUD texts, modal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from blockbreaker import constants as C

if TYPE_CHECKING:  # pragma: no cover
    from blockbreaker.controller import GameController

RGB = Tuple[float, float, float]
RGBA = Tuple[float, float, float, float]
Rect = Tuple[float, float, float, float]

BEVEL_INSET = 3
HUD_FONT_SIZE = 20
TITLE_FONT_SIZE = 24
SUBTITLE_FONT_SIZE = 18
MODAL_SIZE = (300, 60)

START_TEXT = "Click to Start!"
LOSS_TEXT = "Game Over!"
WIN_TEXT = "You Win!"
REPLAY_TEXT = "Click to Play Again"


def _scale(color: RGB, factor: float) -> RGB:
    return tuple(min(1.0, c * factor) for c in color)  # type: ignore[return-value]


@dataclass(frozen=True)
class BlockSprite:
    rect: Rect
    color: RGB
    gradient_light: RGB  # top-left stop
    gradient_dark: RGB  # bottom-right stop
    bevel_rect: Rect
    bevel_color: RGB
    highlight: RGBA = C.HIGHLIGHT_EDGE_COLOR  # top and left edges
    shadow: RGBA = C.SHADOW_EDGE_COLOR  # bottom and right edges

    @classmethod
    def from_block(cls, x: float, y: float, w: float, h: float, color: RGB) -> "BlockSprite":
        return cls(
            rect=(x, y, w, h),
            color=color,
            gradient_light=_scale(color, 1.2),
            gradient_dark=_scale(color, 0.7),
            bevel_rect=(x + BEVEL_INSET, y + BEVEL_INSET, w - 2 * BEVEL_INSET, h - 2 * BEVEL_INSET),
            bevel_color=_scale(color, 0.8),
        )


@dataclass(frozen=True)
class FilledRect:
    rect: Rect
    color: RGB


@dataclass(frozen=True)
class Disc:
    center: Tuple[float, float]
    radius: float
    color: RGB


@dataclass(frozen=True)
class TextItem:
    text: str
    pos: Tuple[float, float]
    size: int
    color: RGB = C.TEXT_COLOR
    bold: bool = True


@dataclass(frozen=True)
class Modal:
    panel: Rect
    color: RGBA
    lines: Tuple[TextItem, ...]


@dataclass(frozen=True)
class RenderModel:
    size: Tuple[int, int]
    background: RGB
    blocks: Tuple[BlockSprite, ...]
    paddle: FilledRect
    ball: Disc
    hud: Tuple[TextItem, ...]
    modal: Modal | None

    @property
    def texts(self) -> Tuple[str, ...]:
        """Every visible string, HUD first."""
        lines = tuple(t.text for t in self.hud)
        if self.modal is not None:
            lines += tuple(t.text for t in self.modal.lines)
        return lines


def _modal(width: float, height: float, lines: Tuple[str, ...]) -> Modal:
    cx, cy = width / 2, height / 2
    mw, mh = MODAL_SIZE
    items = [TextItem(lines[0], (cx - 140, cy + 10), TITLE_FONT_SIZE)]
    if len(lines) > 1:
        items.append(TextItem(lines[1], (cx - 120, cy + 40), SUBTITLE_FONT_SIZE))
    return Modal(panel=(cx - mw / 2, cy - mh / 2, mw, mh), color=C.MODAL_COLOR, lines=tuple(items))


def build_render_model(controller: "GameController") -> RenderModel:
    cfg = controller.config
    width, height = cfg.field_width, cfg.field_height
    ball = controller.ball
    paddle = controller.paddle

    blocks = tuple(
        BlockSprite.from_block(b.x, b.y, b.width, b.height, b.color) for b in controller.blocks if b.active
    )
    hud = (
        TextItem(f"Score: {controller.score}", (20, 30), HUD_FONT_SIZE),
        TextItem(f"Lives: {controller.lives}", (width - 100, 30), HUD_FONT_SIZE),
    )

    modal = None
    if controller.over:
        title = WIN_TEXT if controller.lives > 0 else LOSS_TEXT
        modal = _modal(width, height, (title, REPLAY_TEXT))
    elif not controller.running:
        modal = _modal(width, height, (START_TEXT,))

    return RenderModel(
        size=(width, height),
        background=C.BACKGROUND_COLOR,
        blocks=blocks,
        paddle=FilledRect(paddle.bounds, C.PADDLE_COLOR),
        ball=Disc((ball.x, ball.y), ball.radius, C.BALL_COLOR),
        hud=hud,
        modal=modal,
    )


__all__ = [
    "RenderModel",
    "BlockSprite",
    "FilledRect",
    "Disc",
    "TextItem",
    "Modal",
    "build_render_model",
    "START_TEXT",
    "LOSS_TEXT",
    "WIN_TEXT",
    "REPLAY_TEXT",
]
