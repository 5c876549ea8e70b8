"""
Input Handler - Translates pygame events to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Callable, List

import pygame

from cannon_coins.ui.renderer import Renderer


class InputHandler:
    """
    Turns raw input into the three player commands.

    Commands are delivered to registered callbacks:
    - pointer move: horizontal pointer position over the play area
    - fire click: left click anywhere but the pause button
    - pause toggle: pause button click or the P key
    """

    def __init__(self, renderer: Renderer):
        self.renderer = renderer

        self._pointer_move: List[Callable[[float], None]] = []
        self._fire_click: List[Callable[[], None]] = []
        self._pause_toggle: List[Callable[[], None]] = []

    def on_pointer_move(self, callback: Callable[[float], None]) -> None:
        self._pointer_move.append(callback)

    def on_fire_click(self, callback: Callable[[], None]) -> None:
        self._fire_click.append(callback)

    def on_pause_toggle(self, callback: Callable[[], None]) -> None:
        self._pause_toggle.append(callback)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single event.
        Returns True if the game should quit.
        """
        if event.type == pygame.QUIT:
            return True

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return True
            if event.key == pygame.K_p:
                self._toggle_pause()

        elif event.type == pygame.MOUSEMOTION:
            x = event.pos[0]
            for callback in self._pointer_move:
                callback(x)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.renderer.pause_button.collidepoint(event.pos):
                self._toggle_pause()
            else:
                for callback in self._fire_click:
                    callback()

        return False

    def _toggle_pause(self):
        for callback in self._pause_toggle:
            callback()
