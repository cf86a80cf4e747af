from smartfill.grid_io import grid_from_text
from smartfill.preview import preview_grid


def test_preview_without_fill() -> None:
    g = grid_from_text("12\nAB\n")
    out = preview_grid(g)
    lines = out.splitlines()
    assert lines[0] == "grid (2x2)"
    assert lines[1:3] == ["12", "AB"]
    assert "   10 A  count=1" in lines
    assert "filled:" not in out


def test_preview_marks_filled_cells() -> None:
    g = grid_from_text("112\n")
    out = preview_grid(g, order=[(0, 0), (1, 0)], title="row")
    lines = out.splitlines()
    assert lines[0] == "row (3x1)"
    assert lines[1] == "**2"
    assert "    1 1  count=2" in lines
    assert lines[-1] == "filled: 2 of 3 cells"
