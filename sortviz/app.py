"""Interactive terminal menus that launch sorting visualizations."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Callable, List, Optional, Sequence

from .events import Controls
from .rendering import Visualizer, pygame
from .sorting import Algorithm, random_values, run_sort
from .utilities import Color, clear_screen, colored

MAX_VISUALIZATIONS = 3
DEFAULT_SPEED_MS = 100
SPEEDS = {1: 300, 2: 100, 3: 50}
POLL_INTERVAL_S = 0.01

Reader = Callable[[], str]

_WELCOME_ALGORITHMS = (
    "Insertion Sort",
    "Selection Sort",
    "Merge Sort",
    "Bubble Sort",
    "Quick Sort",
    "Heap Sort",
)


def _say(text: str, color: Color, end: str = "\n") -> None:
    print(colored(text, color), end=end, flush=True)


def _error(text: str) -> None:
    print(colored(text, Color.RED), file=sys.stderr, flush=True)


def _first_char(read: Reader) -> str:
    while True:
        line = read().strip()
        if line:
            return line[0]


def parse_choice(text: str, low: int, high: int) -> int:
    """Read a whole number within low..high; ValueError otherwise."""
    value = int(text.strip())
    if not low <= value <= high:
        raise ValueError(f"{value} is not between {low} and {high}")
    return value


def speed_for_choice(choice: int) -> int:
    """Delay in milliseconds for a speed menu choice, Medium if unknown."""
    return SPEEDS.get(choice, DEFAULT_SPEED_MS)


def show_welcome(read: Reader) -> None:
    """Print the welcome screen and wait for 'Y'."""
    clear_screen()
    _say("==============================", Color.CYAN)
    _say("  Welcome to the Sorting Visualizer!", Color.YELLOW)
    _say("==============================", Color.CYAN)
    _say("This sorting visualizer visualizes multiple sorting algorithms:", Color.GREEN)
    for name in _WELCOME_ALGORITHMS:
        _say(f" - {name}", Color.GREEN)
    _say(
        "\nYou can speed up or slow down using the left and right arrow keys, respectively.",
        Color.BLUE,
    )
    _say("Press 'P' to pause and 'ESC' to quit the window.", Color.BLUE)
    _say(
        "\nCaution: Pressing multiple keys during multiple visualizations may cause the program to crash!",
        Color.RED,
    )
    _say("\nPress 'Y' to continue to the main menu...", Color.CYAN)
    while _first_char(read) not in ("Y", "y"):
        _say("Invalid input! Please press 'Y' to continue.", Color.RED)


def _show_main_menu() -> None:
    _say("=====================", Color.CYAN)
    _say("  Main Menu", Color.YELLOW)
    _say("=====================", Color.CYAN)
    _say("1. One Visualization", Color.GREEN)
    _say("2. Multiple Visualizations", Color.GREEN)
    _say("3. Change Speed", Color.GREEN)
    _say("4. Exit", Color.GREEN)
    _say("Enter your choice: ", Color.BLUE, end="")


def _show_algorithms() -> None:
    for algorithm in Algorithm:
        _say(f"{algorithm.value}. {algorithm.label}", Color.GREEN)


def run_visualization(
    algorithms: Sequence[Algorithm], controls: Controls
) -> Optional[List[bool]]:
    """Run the sorts in their own threads until the window is closed.

    Returns whether each sort finished, or None if no window could be opened.
    """
    try:
        visualizer = Visualizer(algorithms)
    except pygame.error as exc:
        _error(f"Could not open the visualization window: {exc}")
        return None

    results = [False] * len(algorithms)

    def work(slot: int, algorithm: Algorithm) -> None:
        results[slot] = run_sort(
            algorithm,
            random_values(),
            controls,
            lambda frame: visualizer.draw(algorithm, frame),
        )

    with visualizer:
        threads = [
            threading.Thread(target=work, args=(slot, Algorithm(algorithm)), daemon=True)
            for slot, algorithm in enumerate(algorithms)
        ]
        for thread in threads:
            thread.start()
        while not controls.quit_requested:
            controls.poll()
            time.sleep(POLL_INTERVAL_S)
        for thread in threads:
            thread.join()
    controls.reset()
    return results


def single_visualization_menu(
    controls: Controls, read: Reader
) -> Optional[List[Algorithm]]:
    """Ask for one algorithm and visualize it; return what was run."""
    clear_screen()
    print("Select sorting algorithm to visualize:")
    _show_algorithms()
    _say("Enter your choice (1-6): ", Color.BLUE, end="")
    try:
        algorithms = [Algorithm(parse_choice(read(), 1, 6))]
    except ValueError:
        _error("Invalid choice! Please enter a number between 1 and 6.")
        return None
    if run_visualization(algorithms, controls) is None:
        return None
    return algorithms


def multiple_visualizations_menu(
    controls: Controls, read: Reader
) -> Optional[List[Algorithm]]:
    """Ask for several algorithms and visualize them side by side."""
    clear_screen()
    print(
        f"How many sorting algorithms to visualize (1-{MAX_VISUALIZATIONS}): ",
        end="",
        flush=True,
    )
    try:
        count = parse_choice(read(), 1, MAX_VISUALIZATIONS)
    except ValueError:
        _error(
            "Invalid number of visualizations! Please enter a number between 1 and "
            f"{MAX_VISUALIZATIONS}."
        )
        return None
    clear_screen()
    print("Select the sorting algorithms to visualize:")
    _show_algorithms()
    algorithms: List[Algorithm] = []
    while len(algorithms) < count:
        _say(f"Enter choice {len(algorithms) + 1} (1-6): ", Color.BLUE, end="")
        try:
            algorithms.append(Algorithm(parse_choice(read(), 1, 6)))
        except ValueError:
            _error("Invalid choice! Please enter a number between 1 and 6.")
    if run_visualization(algorithms, controls) is None:
        return None
    return algorithms


def change_speed_menu(controls: Controls, read: Reader) -> int:
    """Ask for a speed, store its delay on the controls and return it."""
    clear_screen()
    _say("Select speed:", Color.CYAN)
    _say("1. Slow", Color.GREEN)
    _say("2. Medium", Color.GREEN)
    _say("3. Fast", Color.GREEN)
    _say("Enter your choice: ", Color.BLUE, end="")
    try:
        choice = parse_choice(read(), 1, len(SPEEDS))
    except ValueError:
        _error("Invalid choice! Using default speed (Medium).")
        choice = 0
    controls.delay = speed_for_choice(choice)
    return controls.delay


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive sorting visualizer."""
    parser = argparse.ArgumentParser(
        prog="sortviz", description="Watch sorting algorithms at work."
    )
    parser.parse_args(argv)
    controls = Controls()
    read: Reader = input
    try:
        show_welcome(read)
        while True:
            clear_screen()
            _show_main_menu()
            try:
                choice = parse_choice(read(), 1, 4)
            except ValueError:
                _error("Invalid choice! Please enter a number between 1 and 4.")
                continue
            if choice == 1:
                single_visualization_menu(controls, read)
            elif choice == 2:
                multiple_visualizations_menu(controls, read)
            elif choice == 3:
                change_speed_menu(controls, read)
            else:
                break
    except EOFError:
        print()
    except KeyboardInterrupt:
        print()
        return 130
    return 0