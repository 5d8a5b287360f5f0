from asciifx.gradient.area_matcher import FillCriteria, cell_matches, find_fill_area
from asciifx.models.cell import Cell
from asciifx.models.gradient import GridPoint


def test_contiguous_fill_stops_at_other_glyphs(make_grid):
    cells = make_grid([
        "aba",
        "aba",
        "aaa",
    ])

    area = find_fill_area(cells, 3, 3, GridPoint(0, 0), FillCriteria())

    assert area == {"0,0", "0,1", "0,2", "1,2", "2,2", "2,1", "2,0"}


def test_contiguous_fill_from_center_of_identical_block(make_grid):
    cells = make_grid([
        "xxx",
        "xxx",
        "xxx",
    ])

    area = find_fill_area(cells, 3, 3, GridPoint(1, 1), FillCriteria())

    assert area == {f"{x},{y}" for x in range(3) for y in range(3)}


def test_contiguous_fill_includes_missing_cells_as_empty(make_grid):
    cells = make_grid([
        "x  ",
        "xxx",
    ])

    area = find_fill_area(cells, 3, 2, GridPoint(1, 0), FillCriteria())

    assert area == {"1,0", "2,0"}


def test_region_growth_compares_with_start_cell():
    cells = {
        "0,0": Cell(char="a", color="#000000"),
        "1,0": Cell(char="a", color="#111111"),
        "2,0": Cell(char="a", color="#000000"),
    }

    by_color = find_fill_area(cells, 3, 1, GridPoint(0, 0), FillCriteria())
    by_char = find_fill_area(cells, 3, 1, GridPoint(0, 0), FillCriteria(match_color=False))

    assert by_color == {"0,0"}
    assert by_char == {"0,0", "1,0", "2,0"}


def test_global_fill_ignores_position(make_grid):
    cells = make_grid([
        "aba",
        "bbb",
        "a.a",
    ])

    area = find_fill_area(cells, 3, 3, GridPoint(0, 0), FillCriteria(contiguous=False))

    assert area == {"0,0", "2,0", "0,2", "2,2"}


def test_all_flags_off_matches_everything(make_grid):
    cells = make_grid([
        "abc",
        "def",
        "ghi",
    ])
    criteria = FillCriteria(match_char=False, match_color=False, match_bg_color=False)

    area = find_fill_area(cells, 3, 3, GridPoint(1, 1), criteria)

    assert len(area) == 9


def test_start_off_canvas_is_empty(make_grid):
    cells = make_grid(["aa"])

    assert find_fill_area(cells, 2, 1, GridPoint(5, 0), FillCriteria()) == set()
    assert find_fill_area(cells, 2, 1, GridPoint(-1, 0), FillCriteria()) == set()


def test_area_stays_inside_canvas():
    area = find_fill_area({}, 4, 3, GridPoint(0, 0), FillCriteria())
    assert len(area) == 12


def test_cell_matches_flags():
    a = Cell(char="a", color="#000000", bg_color="#ffffff")
    b = Cell(char="a", color="#000000", bg_color="#000000")

    assert not cell_matches(b, a, FillCriteria())
    assert cell_matches(b, a, FillCriteria(match_bg_color=False))
