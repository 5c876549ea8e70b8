"""
Renderer - pygame implementation of the game view.
This is a THIN ADAPTER - no game logic here.

The engine pushes changes in through the GameView methods; draw() paints
whatever the renderer currently holds.
"""
import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import pygame

from cannon_coins.gameplay.constants import (
    CANNON_WIDTH, CANNON_HEIGHT, BULLET_WIDTH, BULLET_HEIGHT, HIGHSCORE_BANNER_MS,
)
from cannon_coins.gameplay.view import GameView

logger = logging.getLogger(__name__)


# Colors
COLOR_BG_TOP = (20, 30, 60)
COLOR_BG_BOTTOM = (60, 90, 140)
COLOR_CANNON = (70, 70, 80)
COLOR_CANNON_BARREL = (40, 40, 45)
COLOR_BULLET = (255, 220, 80)
COLOR_HUD = (235, 235, 235)
COLOR_COIN = (255, 200, 40)
COLOR_HEART = (230, 50, 70)
COLOR_BUTTON = (30, 30, 40)
COLOR_BANNER = (255, 215, 0)
COLOR_GAME_OVER = (255, 100, 100)

FONT_NAME = "freesansbold.ttf"
FONT_SIZE_HUD = 22
FONT_SIZE_BIG = 48

PAUSE_BUTTON_SIZE = 40
HUD_PADDING = 10


@dataclass
class Visual:
    """Something drawn on the play area."""
    kind: str
    x: float
    y: float
    radius: float = 0.0
    color: Tuple[int, int, int] = COLOR_BULLET


def hue_color(hue: int) -> Tuple[int, int, int]:
    """Bright colour for a ball hue in degrees."""
    color = pygame.Color(0, 0, 0)
    color.hsva = (hue % 360, 70, 95, 100)
    return (color.r, color.g, color.b)


class Renderer(GameView):
    """
    Renders game state to a pygame surface.

    Visuals are tracked by integer handle so the engine never holds pygame
    objects.
    """

    def __init__(self, width: int, height: int, clock: Callable[[], int] = pygame.time.get_ticks):
        self.width = width
        self.height = height
        self.clock = clock

        # Created in init_display()
        self.screen: Optional[pygame.Surface] = None
        self.font: Optional[pygame.font.Font] = None
        self.font_big: Optional[pygame.font.Font] = None
        self.background: Optional[pygame.Surface] = None

        self.visuals: Dict[int, Visual] = {}
        self._handles = itertools.count(1)

        self.cannon_x = 0.0
        self.coins = 0
        self.lives = 0
        self.paused = False
        self.banner_until_ms: Optional[int] = None

        self.pause_button = pygame.Rect(
            width - PAUSE_BUTTON_SIZE - HUD_PADDING, HUD_PADDING,
            PAUSE_BUTTON_SIZE, PAUSE_BUTTON_SIZE
        )

    def init_display(self, title: str) -> pygame.Surface:
        """Open the window and load fonts."""
        pygame.display.set_caption(title)
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.font = pygame.font.Font(FONT_NAME, FONT_SIZE_HUD)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_BIG)
        self.background = self._make_background()
        logger.info(f"Display opened ({self.width}x{self.height})")
        return self.screen

    def _make_background(self) -> pygame.Surface:
        """Vertical gradient sky."""
        surf = pygame.Surface((self.width, self.height))
        for y in range(self.height):
            t = y / max(1, self.height - 1)
            color = tuple(
                int(top + (bottom - top) * t)
                for top, bottom in zip(COLOR_BG_TOP, COLOR_BG_BOTTOM)
            )
            pygame.draw.line(surf, color, (0, y), (self.width, y))
        return surf

    # =========================================================================
    # GAME VIEW
    # =========================================================================

    def move_cannon(self, x: float) -> None:
        self.cannon_x = x

    def render_bullet(self, x: float, y: float) -> int:
        handle = next(self._handles)
        self.visuals[handle] = Visual("bullet", x, y)
        return handle

    def render_ball(self, x: float, y: float, radius: float, hue: int) -> int:
        handle = next(self._handles)
        self.visuals[handle] = Visual("ball", x, y, radius, hue_color(hue))
        return handle

    def move_visual(self, handle, x: float, y: float) -> None:
        visual = self.visuals.get(handle)
        if visual is not None:
            visual.x = x
            visual.y = y

    def remove_visual(self, handle) -> None:
        self.visuals.pop(handle, None)

    def update_score(self, coins: int) -> None:
        self.coins = coins

    def update_lives(self, lives: int) -> None:
        self.lives = lives

    def show_high_score_banner(self) -> None:
        """
        Show the banner for HIGHSCORE_BANNER_MS of wall-clock time.
        The countdown keeps running while the game is paused or the
        game-over overlay is up.
        """
        self.banner_until_ms = self.clock() + HIGHSCORE_BANNER_MS

    def show_paused(self, paused: bool) -> None:
        self.paused = paused

    def show_game_over(self, coins: int) -> None:
        """Draw the game-over overlay and wait for a key press or click."""
        if self.screen is None:
            return

        self.draw()
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        self.screen.blit(overlay, (0, 0))

        title = self.font_big.render("Game Over!", True, COLOR_GAME_OVER)
        self.screen.blit(title, title.get_rect(center=(self.width // 2, self.height // 2 - 40)))
        score = self.font.render(f"Coins: {coins}", True, COLOR_HUD)
        self.screen.blit(score, score.get_rect(center=(self.width // 2, self.height // 2 + 10)))
        hint = self.font.render("Click or press any key to play again", True, (150, 150, 150))
        self.screen.blit(hint, hint.get_rect(center=(self.width // 2, self.height // 2 + 50)))
        pygame.display.flip()

        pygame.event.clear()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                # Leave it for the main loop
                pygame.event.post(pygame.event.Event(pygame.QUIT))
                return
            if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                return

    def banner_visible(self) -> bool:
        if self.banner_until_ms is None:
            return False
        if self.clock() >= self.banner_until_ms:
            self.banner_until_ms = None
            return False
        return True

    # =========================================================================
    # DRAWING
    # =========================================================================

    def draw(self) -> None:
        """Render the entire frame."""
        if self.screen is None:
            return

        self.screen.blit(self.background, (0, 0))
        self._draw_entities()
        self._draw_cannon()
        self._draw_hud()

    def _draw_entities(self):
        for visual in self.visuals.values():
            if visual.kind == "ball":
                center = (int(visual.x + visual.radius), int(visual.y + visual.radius))
                pygame.draw.circle(self.screen, visual.color, center, int(visual.radius))
                pygame.draw.circle(self.screen, (255, 255, 255), center, int(visual.radius), 1)
            else:
                rect = pygame.Rect(int(visual.x), int(visual.y), BULLET_WIDTH, BULLET_HEIGHT)
                pygame.draw.rect(self.screen, COLOR_BULLET, rect, border_radius=2)

    def _draw_cannon(self):
        top = self.height - CANNON_HEIGHT
        base = pygame.Rect(int(self.cannon_x), top + CANNON_HEIGHT // 2, CANNON_WIDTH, CANNON_HEIGHT // 2)
        barrel_width = CANNON_WIDTH // 4
        barrel = pygame.Rect(
            int(self.cannon_x + (CANNON_WIDTH - barrel_width) / 2), top,
            barrel_width, CANNON_HEIGHT // 2 + 4
        )
        pygame.draw.rect(self.screen, COLOR_CANNON_BARREL, barrel, border_radius=3)
        pygame.draw.rect(self.screen, COLOR_CANNON, base, border_top_left_radius=12, border_top_right_radius=12)

    def _draw_hud(self):
        # Coins (left)
        pygame.draw.circle(self.screen, COLOR_COIN, (HUD_PADDING + 10, HUD_PADDING + 12), 10)
        coins_text = self.font.render(str(self.coins), True, COLOR_HUD)
        self.screen.blit(coins_text, (HUD_PADDING + 26, HUD_PADDING + 2))

        # Hearts (left of the pause button)
        x = self.pause_button.left - HUD_PADDING - 24
        for _ in range(max(0, self.lives)):
            self._draw_heart(x, HUD_PADDING + 8)
            x -= 28

        self._draw_pause_button()

        if self.banner_visible():
            banner = self.font.render("New high score!", True, COLOR_BANNER)
            rect = banner.get_rect(center=(self.width // 2, 60))
            bg = pygame.Surface(rect.inflate(20, 10).size, pygame.SRCALPHA)
            bg.fill((0, 0, 0, 140))
            self.screen.blit(bg, rect.inflate(20, 10))
            self.screen.blit(banner, rect)

    def _draw_heart(self, x: int, y: int):
        pygame.draw.circle(self.screen, COLOR_HEART, (x + 6, y + 6), 6)
        pygame.draw.circle(self.screen, COLOR_HEART, (x + 16, y + 6), 6)
        pygame.draw.polygon(self.screen, COLOR_HEART, [(x, y + 8), (x + 22, y + 8), (x + 11, y + 20)])

    def _draw_pause_button(self):
        rect = self.pause_button
        pygame.draw.rect(self.screen, COLOR_BUTTON, rect, border_radius=6)
        if self.paused:
            # Play icon
            points = [
                (rect.left + 13, rect.top + 10),
                (rect.left + 13, rect.bottom - 10),
                (rect.right - 10, rect.centery),
            ]
            pygame.draw.polygon(self.screen, COLOR_HUD, points)
        else:
            # Pause icon
            bar_w = 6
            pygame.draw.rect(self.screen, COLOR_HUD, (rect.left + 11, rect.top + 10, bar_w, rect.height - 20))
            pygame.draw.rect(self.screen, COLOR_HUD, (rect.right - 11 - bar_w, rect.top + 10, bar_w, rect.height - 20))
