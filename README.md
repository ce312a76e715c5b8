# sortviz

sortviz lets you watch sorting algorithms run. Each algorithm sorts 70 random
values from 0 to 99, drawn as bars with their values on top. Coloured
highlights show which elements are being compared, moved or merged.

The algorithms are:

1. Selection Sort
2. Insertion Sort
3. Bubble Sort
4. Merge Sort
5. Quick Sort
6. Heap Sort

## Installation

```
pip install .
```

This also installs pygame, which sortviz uses for its window.

## Usage

Start the program from a terminal:

```
sortviz
```

`sortviz --help` prints a short description; the program takes no other
options.

When the welcome screen appears, enter `Y` to go to the main menu. The menu
has these choices:

1. **One Visualization**: choose one algorithm and watch it sort.
2. **Multiple Visualizations**: choose from one to three algorithms. They run
   at the same time, each in its own thread, drawn as panels stacked one above
   the other in a single window.
3. **Change Speed**: choose Slow (300 ms per step), Medium (100 ms) or
   Fast (50 ms). Any other answer sets Medium.
4. **Exit**

Invalid answers print an error in red and bring you back to the menu. Ending
the input (Ctrl-D) leaves the program; Ctrl-C leaves it with exit status 130.

The bar labels use `arial.ttf` from the current directory when it is there,
and pygame's built-in font otherwise.

### Controls in the visualization window

| Key         | Action                                                      |
|-------------|-------------------------------------------------------------|
| Right arrow | Speed up: 10 ms less per step, while the delay is above 10 ms |
| Left arrow  | Slow down: 10 ms more per step                              |
| `P`         | Pause, or resume after a pause                              |
| `Esc`       | Stop the sorts, close the window and return to the menu     |

Closing the window does the same as `Esc`. The window stays open after the
sorts have finished until you close it or press `Esc`. Speed changes made
with the arrow keys carry over to the next visualization.

## Using it as a library

The sorting step generators in `sortviz.sorting` work without a display. Each
one sorts a list in place and yields a `Frame` for every visible step: the
current values, the highlighted positions (`current` and `second`) and a
drawing `mode`:

```python
import random

from sortviz.sorting import Algorithm, frames_for, random_values

values = random_values(10, random.Random(1))
for frame in frames_for(Algorithm.QUICK, values):
    print(frame)
print(values)  # now sorted
```

The generators are also available by name: `selection_sort`, `insertion_sort`,
`bubble_sort`, `merge_sort`, `quick_sort` and `heap_sort`.
`run_sort(algorithm, values, controls, on_frame)` plays a sort step by step
under a `sortviz.events.Controls` object, which holds the delay and the pause
and quit flags, and returns `True` if the sort ran to the end.

`sortviz.rendering` holds the drawing: `Visualizer` opens the window and
draws frames into an algorithm's panel, and `bar_rect` and `bar_color` give
the geometry and colour of each bar.

## Running the tests

```
pip install .[test]
pytest
```