"""Input routing.

Transforms raw pygame events into controller actions. Each rule is a
function(event) -> action|None; the first matching rule wins for an event
and actions keep event order, so a pointer move followed by a click in the
same frame positions the paddle before the ball is launched.

Bindings are fixed: the pointer drives the paddle and the primary button
starts (or restarts) the game.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, List, NamedTuple

import pygame

if TYPE_CHECKING:  # pragma: no cover
    from blockbreaker.controller import GameController

POINTER_MOVE = "pointer_move"
CLICK = "click"


class Action(NamedTuple):
    name: str
    value: float | None = None


Rule = Callable[[pygame.event.Event], Action | None]


class InputRouter:
    """Maps pygame events to controller operations.

    ``window_width`` is the current width of the window surface; pointer
    coordinates are scaled into field units when the window is resized.
    """

    def __init__(self, field_width: float, window_width: float | None = None) -> None:
        self.field_width = field_width
        self.window_width = window_width or field_width
        self._rules: List[Rule] = [self._pointer_rule, self._click_rule]

    def resize(self, window_width: float) -> None:
        if window_width > 0:
            self.window_width = window_width

    def to_field_x(self, window_x: float) -> float:
        return window_x * self.field_width / self.window_width

    def _pointer_rule(self, e: pygame.event.Event) -> Action | None:
        if e.type == pygame.MOUSEMOTION:
            return Action(POINTER_MOVE, self.to_field_x(e.pos[0]))
        return None

    def _click_rule(self, e: pygame.event.Event) -> Action | None:
        if e.type == pygame.MOUSEBUTTONDOWN and getattr(e, "button", None) == 1:
            return Action(CLICK)
        return None

    def process(self, events: Iterable[pygame.event.Event]) -> List[Action]:
        actions: List[Action] = []
        for e in events:
            for rule in self._rules:
                a = rule(e)
                if a:
                    actions.append(a)
                    break  # stop at first rule match for this event
        return actions

    def dispatch(self, events: Iterable[pygame.event.Event], controller: "GameController") -> List[Action]:
        actions = self.process(events)
        for action in actions:
            if action.name == POINTER_MOVE:
                controller.on_pointer_move(action.value)
            elif action.name == CLICK:
                controller.on_click()
        return actions


__all__ = ["InputRouter", "Action", "POINTER_MOVE", "CLICK"]
