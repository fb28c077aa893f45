"""Centralized input routing.

Turns raw pygame events into one ``InputSample`` per frame: the latest
arena-local pointer x (or None when the pointer did not move) plus the
discrete actions requested this frame.

Design:
- Rules are functions(event) -> action|None checked in declaration order;
  the first match wins for each event.
- Duplicate actions in one frame are collapsed preserving the order of
  first occurrence.
- Pointer events are divided by ``scale`` so a window scaled to fit the
  screen still drives the cannon in arena coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List

import pygame

Action = str
Rule = Callable[[pygame.event.Event], Action | None]


@dataclass
class InputSample:
    pointer_x: float | None = None
    actions: List[Action] = field(default_factory=list)


def _key_rule(key: int, action: Action, event_type=pygame.KEYDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "key", None) == key:
            return action
        return None

    return _r


def _mouse_button_rule(button: int, action: Action, event_type=pygame.MOUSEBUTTONDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "button", None) == button:
            return action
        return None

    return _r


def _quit_rule(e: pygame.event.Event):
    return "quit" if e.type == pygame.QUIT else None


class InputRouter:
    """Maps pygame events to pointer samples and semantic actions."""

    def __init__(self, scale: float = 1.0, arena_width: float | None = None) -> None:
        if scale <= 0:
            raise ValueError(f"input scale must be positive (got {scale})")
        self.scale = scale
        self.arena_width = arena_width
        self._rules: List[Rule] = []
        self._register_default_rules()

    def _register_default_rules(self) -> None:
        from rockblast.settings import settings

        self._rules.append(_quit_rule)
        for act, keys in settings.key_bindings.items():
            for k in keys:
                self._rules.append(_key_rule(k, act))
        self._rules.append(_mouse_button_rule(1, "restart"))

    def _pointer_from(self, e: pygame.event.Event) -> float | None:
        if e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN) and hasattr(e, "pos"):
            return e.pos[0] / self.scale
        if e.type in (pygame.FINGERDOWN, pygame.FINGERMOTION) and self.arena_width is not None:
            # Finger coordinates are normalized to 0..1.
            return getattr(e, "x", 0.0) * self.arena_width
        return None

    def process(self, events: Iterable[pygame.event.Event]) -> InputSample:
        sample = InputSample()
        for e in events:
            px = self._pointer_from(e)
            if px is not None:
                sample.pointer_x = px
            for rule in self._rules:
                a = rule(e)
                if a:
                    if a not in sample.actions:
                        sample.actions.append(a)
                    break
        return sample


__all__ = ["InputRouter", "InputSample", "Action"]
