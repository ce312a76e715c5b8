import os

os.environ["SDL_VIDEODRIVER"] = "dummy"

import pytest  # noqa: E402

from sortviz.rendering import (  # noqa: E402
    BAR_GAP,
    BLACK,
    BLUE,
    BOTTOM_MARGIN,
    CYAN,
    GREEN,
    ORANGE,
    PANEL_GAP,
    RED,
    SPRING_GREEN,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Visualizer,
    bar_color,
    bar_height,
    bar_rect,
    bar_width,
    window_position,
)
from sortviz.sorting import Algorithm, Frame  # noqa: E402


def _rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_single_bar_fills_window():
    assert bar_width(1) == WINDOW_WIDTH


def test_bar_width_for_default_array():
    assert bar_width(70) == 15


@pytest.mark.parametrize("count", [1, 2, 3, 10, 70, 100])
def test_bars_fit_window(count):
    width = bar_width(count)
    assert count * width + BAR_GAP * (count - 1) <= WINDOW_WIDTH
    assert count * (width + 1) + BAR_GAP * (count - 1) > WINDOW_WIDTH


def test_bar_width_rejects_no_bars():
    with pytest.raises(ValueError):
        bar_width(0)


def test_bar_height_bounds():
    assert bar_height(0) == 0
    assert bar_height(100) == WINDOW_HEIGHT - 40


def test_bar_height_is_monotonic():
    heights = [bar_height(v) for v in range(100)]
    assert heights == sorted(heights)


@pytest.mark.parametrize("index,value,count", [(0, 10, 5), (3, 99, 70), (69, 0, 70)])
def test_bar_rect_sits_on_baseline(index, value, count):
    rect = bar_rect(index, value, count)
    assert rect.bottom == WINDOW_HEIGHT - BOTTOM_MARGIN
    assert rect.x == index * (bar_width(count) + BAR_GAP)
    assert rect.height == bar_height(value)
    assert rect.width == bar_width(count)


@pytest.mark.parametrize(
    "mode,index,current,second,expected",
    [
        ("update", 3, 3, 4, GREEN),
        ("selection", 3, 3, 5, RED),
        ("selection", 5, 3, 5, BLUE),
        ("selection", 1, 3, 5, GREEN),
        ("insertion", 1, 3, 5, GREEN),
        ("insertion", 3, 3, 5, BLUE),
        ("insertion", 5, 3, 5, RED),
        ("insertion", 6, 3, 5, ORANGE),
        ("merge", 2, 3, None, CYAN),
        ("merge", 4, 3, 4, BLUE),
        ("merge", 5, 3, None, ORANGE),
        ("quick", 3, 3, 5, RED),
        ("quick", 5, 3, 5, BLUE),
        ("quick", 0, 3, 5, ORANGE),
        ("heap", 3, 3, None, RED),
        ("heap", 0, 3, None, SPRING_GREEN),
        ("bubble", 3, 3, 4, RED),
        ("bubble", 4, 3, 4, BLUE),
        ("bubble", 9, 3, 4, GREEN),
    ],
)
def test_bar_color(mode, index, current, second, expected):
    assert bar_color(mode, index, current, second) == expected


def test_window_positions_repeat_every_three():
    assert window_position(Algorithm.SELECTION) == (20, 40)
    assert window_position(Algorithm.MERGE) == window_position(Algorithm.SELECTION)
    assert window_position(6) == window_position(3)
    first, second = window_position(1), window_position(2)
    assert second[1] - first[1] == WINDOW_HEIGHT + PANEL_GAP


def test_window_position_rejects_unknown():
    with pytest.raises(ValueError):
        window_position(7)


def test_visualizer_needs_algorithms():
    with pytest.raises(ValueError):
        Visualizer([])


def test_visualizer_rejects_unknown_algorithm():
    with pytest.raises(ValueError):
        Visualizer([9])


def test_draw_colours_bars():
    with Visualizer([Algorithm.SELECTION]) as vis:
        vis.draw(Algorithm.SELECTION, Frame((40, 80), 0, 1, "selection"))
        assert _rgb(vis.surface, bar_rect(0, 40, 2).center) == RED
        assert _rgb(vis.surface, bar_rect(1, 80, 2).center) == BLUE
    assert not vis.is_open


def test_draw_clears_previous_frame():
    with Visualizer([Algorithm.BUBBLE]) as vis:
        vis.draw(Algorithm.BUBBLE, Frame((90,), None, None, "update"))
        tall = bar_rect(0, 90, 1)
        short = bar_rect(0, 10, 1)
        point = (WINDOW_WIDTH // 2, (tall.top + short.top) // 2)
        assert _rgb(vis.surface, point) == GREEN
        vis.draw(Algorithm.BUBBLE, Frame((10,), None, None, "update"))
        assert _rgb(vis.surface, point) == BLACK


def test_panels_are_stacked_in_order():
    with Visualizer([Algorithm.SELECTION, Algorithm.HEAP]) as vis:
        assert vis.algorithms == (Algorithm.SELECTION, Algorithm.HEAP)
        assert vis.surface.get_height() == 2 * WINDOW_HEIGHT + PANEL_GAP
        vis.draw(Algorithm.HEAP, Frame((60,), 0, None, "heap"))
        x, y = bar_rect(0, 60, 1).center
        assert _rgb(vis.surface, (x, y + WINDOW_HEIGHT + PANEL_GAP)) == RED
        assert _rgb(vis.surface, (x, y)) == BLACK


def test_duplicate_algorithms_share_a_panel():
    with Visualizer([2, 2]) as vis:
        assert vis.algorithms == (Algorithm.INSERTION,)
        assert vis.surface.get_height() == WINDOW_HEIGHT


def test_draw_for_missing_panel_raises():
    with Visualizer([Algorithm.QUICK]) as vis:
        with pytest.raises(ValueError):
            vis.draw(Algorithm.MERGE, Frame((1,), 0, None, "merge"))


def test_draw_after_close_is_ignored():
    vis = Visualizer([Algorithm.QUICK])
    vis.close()
    vis.draw(Algorithm.QUICK, Frame((50,), 0, None, "quick"))
    vis.close()
    assert vis.is_open is False