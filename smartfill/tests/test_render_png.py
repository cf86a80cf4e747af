import pytest

from smartfill.grid_io import grid_from_text
from smartfill.render_png import _shade, fill_to_png
from smartfill.smart_fill import smart_fill_order


def test_fill_to_png_paints_claimed_cells(tmp_path) -> None:
    Image = pytest.importorskip("PIL.Image")
    g = grid_from_text("112\n")
    order = smart_fill_order(g, 0, 0)
    out = tmp_path / "fill.png"
    fill_to_png(g, order, str(out), scale=4)

    img = Image.open(out)
    assert img.size == (12, 4)
    assert img.getpixel((1, 1)) == (255, 221, 0, 255)
    assert img.getpixel((9, 1)) == (255, 221, 0, 255)


def test_fill_to_png_steps_limits_painted_cells(tmp_path) -> None:
    Image = pytest.importorskip("PIL.Image")
    g = grid_from_text("112\n")
    order = smart_fill_order(g, 0, 0)
    out = tmp_path / "frame.png"
    fill_to_png(g, order, str(out), steps=1, scale=4, fill_rgb=(200, 0, 0))

    img = Image.open(out)
    assert img.getpixel((1, 1)) == (200, 0, 0, 255)
    assert img.getpixel((5, 1)) == (77, 77, 77, 255)  # color 1, not yet claimed
    assert img.getpixel((9, 1)) == (114, 114, 114, 255)  # color 2


def test_fill_to_png_rejects_bad_scale(tmp_path) -> None:
    pytest.importorskip("PIL")
    g = grid_from_text("1\n")
    with pytest.raises(ValueError):
        fill_to_png(g, [], str(tmp_path / "x.png"), scale=0)


def test_shade_stays_on_gray_ramp() -> None:
    shades = [_shade(c) for c in range(256)]
    assert all(r == g == b and 40 <= r <= 239 for r, g, b in shades)
    # Adjacent codes are easy to tell apart.
    assert all(abs(_shade(c)[0] - _shade(c + 1)[0]) >= 37 for c in range(255))
