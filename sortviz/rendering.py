"""Drawing sorting frames as bar charts in a pygame window."""

from __future__ import annotations

import os
import threading
from typing import Iterable, Optional, Tuple, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .sorting import Algorithm, Frame  # noqa: E402

WINDOW_WIDTH = 1400
WINDOW_HEIGHT = 230
BAR_GAP = 5
PANEL_GAP = 30
BOTTOM_MARGIN = 30
HEADROOM = 40
LABEL_OFFSET = 20
FONT_PATH = "arial.ttf"
FONT_SIZE = 13

Rgb = Tuple[int, int, int]

BLACK: Rgb = (0x00, 0x00, 0x00)
WHITE: Rgb = (0xFF, 0xFF, 0xFF)
GREEN: Rgb = (0x00, 0xFF, 0x00)
RED: Rgb = (0xFF, 0x00, 0x00)
BLUE: Rgb = (0x00, 0x00, 0xFF)
ORANGE: Rgb = (0xFF, 0xA5, 0x00)
CYAN: Rgb = (0x00, 0xFF, 0xFF)
SPRING_GREEN: Rgb = (0x00, 0xFF, 0x77)


def bar_width(count: int) -> int:
    """Width of each bar when count bars share the window."""
    if count < 1:
        raise ValueError("at least one bar is needed")
    return (WINDOW_WIDTH - BAR_GAP * (count - 1)) // count


def bar_height(value: int) -> int:
    """Height in pixels of the bar for a value on the 0..100 scale."""
    scaled = abs(value) * (WINDOW_HEIGHT - HEADROOM) // 100
    return scaled if value >= 0 else -scaled


def bar_rect(index: int, value: int, count: int) -> pygame.Rect:
    """The rectangle of a bar inside its panel."""
    width = bar_width(count)
    height = bar_height(value)
    return pygame.Rect(
        index * (width + BAR_GAP),
        WINDOW_HEIGHT - height - BOTTOM_MARGIN,
        width,
        height,
    )


def _is(index: int, target: Optional[int]) -> bool:
    return target is not None and index == target


def _before(index: int, target: Optional[int]) -> bool:
    return target is not None and index < target


def bar_color(
    mode: str, index: int, current: Optional[int], second: Optional[int]
) -> Rgb:
    """The colour of a bar given the drawing mode and highlighted indices."""
    if mode == "update":
        return GREEN
    if mode == "selection":
        if _is(index, current):
            return RED
        if _is(index, second):
            return BLUE
        return GREEN
    if mode == "insertion":
        if _before(index, current):
            return GREEN
        if _is(index, current):
            return BLUE
        if _is(index, second):
            return RED
        return ORANGE
    if mode == "merge":
        if _before(index, current):
            return CYAN
        if _is(index, second):
            return BLUE
        return ORANGE
    if mode == "quick":
        if _is(index, current):
            return RED
        if _is(index, second):
            return BLUE
        return ORANGE
    if mode == "heap":
        return RED if _is(index, current) else SPRING_GREEN
    if _is(index, current):
        return RED
    if _is(index, second):
        return BLUE
    return GREEN


def window_position(algorithm: Union[Algorithm, int]) -> Tuple[int, int]:
    """Screen position of the window for an algorithm."""
    slot = Algorithm(algorithm) - 1
    return 20, 40 + (slot % 3) * (WINDOW_HEIGHT + PANEL_GAP)


class Visualizer:
    """A window with one bar-chart panel per algorithm, stacked vertically."""

    def __init__(
        self,
        algorithms: Iterable[Union[Algorithm, int]],
        font_path: str = FONT_PATH,
    ) -> None:
        order = list(dict.fromkeys(Algorithm(a) for a in algorithms))
        if not order:
            raise ValueError("at least one algorithm is needed")
        self._lock = threading.Lock()
        self._open = False
        x, y = window_position(order[0])
        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{x},{y}"
        try:
            pygame.display.init()
            pygame.font.init()
            self._font = self._load_font(font_path)
            height = len(order) * WINDOW_HEIGHT + (len(order) - 1) * PANEL_GAP
            self.surface = pygame.display.set_mode((WINDOW_WIDTH, height))
            pygame.display.set_caption(" | ".join(a.title for a in order))
        except Exception:
            pygame.font.quit()
            pygame.display.quit()
            raise
        self._panels = {
            algorithm: pygame.Rect(
                0, n * (WINDOW_HEIGHT + PANEL_GAP), WINDOW_WIDTH, WINDOW_HEIGHT
            )
            for n, algorithm in enumerate(order)
        }
        self._open = True

    @staticmethod
    def _load_font(path: str) -> pygame.font.Font:
        try:
            return pygame.font.Font(path, FONT_SIZE)
        except (OSError, pygame.error):
            return pygame.font.Font(None, FONT_SIZE)

    @property
    def algorithms(self) -> Tuple[Algorithm, ...]:
        return tuple(self._panels)

    @property
    def is_open(self) -> bool:
        return self._open

    def draw(self, algorithm: Union[Algorithm, int], frame: Frame) -> None:
        """Paint a frame into the panel of an algorithm."""
        with self._lock:
            if not self._open:
                return
            try:
                panel = self._panels[Algorithm(algorithm)]
            except KeyError:
                raise ValueError(f"no panel for {algorithm!r}") from None
            canvas = self.surface.subsurface(panel)
            canvas.fill(BLACK)
            count = len(frame.values)
            for index, value in enumerate(frame.values):
                rect = bar_rect(index, value, count)
                canvas.fill(bar_color(frame.mode, index, frame.current, frame.second), rect)
                label = self._font.render(str(value), False, WHITE)
                canvas.blit(label, (rect.x, max(rect.y - LABEL_OFFSET, 0)))
            pygame.display.update(panel)

    def close(self) -> None:
        """Close the window; later draws are ignored."""
        with self._lock:
            if not self._open:
                return
            self._open = False
            self._font = None
            pygame.font.quit()
            pygame.display.quit()

    def __enter__(self) -> "Visualizer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()