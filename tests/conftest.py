import pytest

from asciifx.models.cell import Cell, Frame, cell_key


def grid_from_rows(rows, color="#FFFFFF", bg_color="transparent"):
    """
    Build a grid from strings, one per row; spaces become missing keys

    grid_from_rows(["AB", " C"]) → {"0,0": A, "1,0": B, "1,1": C}
    """
    grid = {}
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char != " ":
                grid[cell_key(x, y)] = Cell(char=char, color=color, bg_color=bg_color)
    return grid


@pytest.fixture
def make_grid():
    return grid_from_rows


@pytest.fixture
def colored_grid():
    """Two cells with distinct foregrounds, one with a solid background"""
    return {
        "0,0": Cell(char="A", color="#FF0000", bg_color="transparent"),
        "1,0": Cell(char="B", color="#00FF00", bg_color="#0000FF"),
    }


@pytest.fixture
def frames(make_grid):
    """Three small frames with different content"""
    return [
        Frame(data=make_grid(["AB"]), name="f0"),
        Frame(data=make_grid(["AA"]), name="f1"),
        Frame(data=make_grid(["BA"]), name="f2"),
    ]
