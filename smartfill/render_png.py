from __future__ import annotations

from .models import FillGrid


def _shade(c: int) -> tuple[int, int, int]:
    # Neighboring codes land far apart on a 40..239 gray ramp; the ramp wraps, so it is not monotonic.
    v = 40 + (c * 37) % 200
    return (v, v, v)


def fill_to_png(
    grid: FillGrid,
    order: list[tuple[int, int]],
    out_path: str,
    *,
    steps: int | None = None,
    scale: int = 16,
    draw_grid: bool = True,
    fill_rgb: tuple[int, int, int] = (255, 221, 0),
) -> None:
    """
    Renders a grid and the first `steps` claimed cells of a fill (all of them
    when None) to a PNG. Calling it with increasing `steps` gives animation frames.

    Requires Pillow, but imports lazily so text-only workflows don't break.
    """
    try:
        from PIL import Image, ImageDraw  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("Pillow is required for PNG rendering; install with: pip install '.[image]'") from e

    if scale <= 0:
        raise ValueError("scale must be positive")
    if steps is not None and steps < 0:
        raise ValueError("steps must be >= 0")

    w, h = grid.w, grid.h
    shown = order if steps is None else order[:steps]
    filled = set(shown)

    img = Image.new("RGBA", (w * scale, h * scale), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    for y in range(h):
        for x in range(w):
            rgb = fill_rgb if (x, y) in filled else _shade(grid.at(x, y))
            x0, y0 = x * scale, y * scale
            draw.rectangle([x0, y0, x0 + scale - 1, y0 + scale - 1], fill=rgb + (255,))

    if draw_grid and scale >= 6:
        # Light grid lines.
        for x in range(w + 1):
            xx = x * scale
            draw.line([(xx, 0), (xx, h * scale)], fill=(0, 0, 0, 40), width=1)
        for y in range(h + 1):
            yy = y * scale
            draw.line([(0, yy), (w * scale, yy)], fill=(0, 0, 0, 40), width=1)

    img.save(out_path, format="PNG")
