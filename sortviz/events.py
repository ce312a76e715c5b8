"""Shared playback controls: quit, pause and animation speed."""

from __future__ import annotations

import os
import sys
import threading
from typing import Callable, Optional, TextIO

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from .utilities import Color, clear_screen, colored  # noqa: E402

DEFAULT_DELAY_MS = 100
DELAY_STEP_MS = 10
MIN_DELAY_MS = 10


class Controls:
    """Thread-safe state shared between the event loop and sorting threads."""

    def __init__(
        self,
        delay: int = DEFAULT_DELAY_MS,
        *,
        stream: Optional[TextIO] = None,
        clear: Callable[[], object] = clear_screen,
    ) -> None:
        self._condition = threading.Condition()
        self._quit = False
        self._paused = False
        self.delay = delay
        self._stream = stream
        self._clear = clear

    @property
    def quit_requested(self) -> bool:
        with self._condition:
            return self._quit

    @property
    def paused(self) -> bool:
        with self._condition:
            return self._paused

    def _say(self, message: str, color: Color) -> None:
        self._clear()
        print(colored(message, color), file=self._stream or sys.stdout)

    def request_quit(self) -> None:
        """Ask every running sort to stop."""
        with self._condition:
            self._quit = True
            self._condition.notify_all()

    def toggle_pause(self) -> bool:
        """Flip the paused state and return the new state."""
        with self._condition:
            self._paused = not self._paused
            if self._paused:
                self._say("Paused. Press 'P' to resume.", Color.RED)
            else:
                self._condition.notify_all()
            return self._paused

    def speed_up(self) -> int:
        """Shorten the delay by one step, not going below the minimum."""
        with self._condition:
            if self.delay > MIN_DELAY_MS:
                self.delay -= DELAY_STEP_MS
                self._say(f"Speed increased. Delay: {self.delay}ms", Color.GREEN)
            return self.delay

    def slow_down(self) -> int:
        """Lengthen the delay by one step."""
        with self._condition:
            self.delay += DELAY_STEP_MS
            self._say(f"Speed decreased. Delay: {self.delay}ms", Color.YELLOW)
            return self.delay

    def handle_key(self, key: int) -> None:
        """React to a pressed key."""
        if key == pygame.K_ESCAPE:
            self.request_quit()
        elif key == pygame.K_p:
            self.toggle_pause()
        elif key == pygame.K_RIGHT:
            self.speed_up()
        elif key == pygame.K_LEFT:
            self.slow_down()

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to a window event."""
        if event.type == pygame.QUIT:
            self.request_quit()
        elif event.type == pygame.KEYDOWN:
            self.handle_key(event.key)

    def poll(self) -> int:
        """Drain the window event queue; return how many events were handled."""
        if not pygame.display.get_init():
            return 0
        events = pygame.event.get()
        for event in events:
            self.handle_event(event)
        return len(events)

    def wait_for_resume(self) -> bool:
        """Block while paused; return False once quit has been requested."""
        with self._condition:
            self._condition.wait_for(lambda: not self._paused or self._quit)
            return not self._quit

    def sleep(self) -> None:
        """Wait for the current delay, waking early if quit is requested."""
        with self._condition:
            self._condition.wait_for(lambda: self._quit, timeout=self.delay / 1000)

    def reset(self) -> None:
        """Clear the quit and pause flags before a new run."""
        with self._condition:
            self._quit = False
            self._paused = False
            self._condition.notify_all()