import json

import pytest

from smartfill.grid_io import (
    char_code,
    code_char,
    grid_from_json_dict,
    grid_from_rows,
    grid_from_text,
    grid_to_json_dict,
    load_grid,
)


def test_code_chars() -> None:
    assert code_char(7) == "7"
    assert code_char(10) == "A"
    assert code_char(35) == "Z"
    assert code_char(36) == "?"
    assert char_code("b") == 11
    with pytest.raises(ValueError):
        char_code("!")


def test_grid_from_text_ignores_blank_lines_and_spaces() -> None:
    g = grid_from_text("\n1 2\nab\n\n")
    assert (g.w, g.h) == (2, 2)
    assert g.cells == bytes([1, 2, 10, 11])


def test_grid_from_text_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError, match="rectangular"):
        grid_from_text("12\n1\n")


def test_grid_from_rows_checks_values_and_dimensions() -> None:
    with pytest.raises(ValueError):
        grid_from_rows([[1, 300]])
    with pytest.raises(ValueError):
        grid_from_rows([[1, 2]], w=3)
    with pytest.raises(ValueError):
        grid_from_rows([])


def test_grid_from_rows_rejects_non_list_rows() -> None:
    for bad in ([1, 1, 2], [None], 5, "112", [[1, 2], (3, 4)]):
        with pytest.raises(ValueError, match="list of rows"):
            grid_from_rows(bad)
    with pytest.raises(ValueError, match="list of rows"):
        grid_from_json_dict({"cells": [1, 2]})


def test_json_dict_round_trip() -> None:
    d = {"w": 3, "h": 2, "cells": [[0, 1, 2], [4, 5, 6]]}
    g = grid_from_json_dict(d)
    assert g.at(2, 1) == 6
    assert grid_to_json_dict(g) == d


def test_json_dict_without_dimensions() -> None:
    g = grid_from_json_dict({"cells": [[1], [2]]})
    assert (g.w, g.h) == (1, 2)
    with pytest.raises(ValueError):
        grid_from_json_dict({"rows": []})


def test_load_grid_dispatches_on_suffix(tmp_path) -> None:
    jp = tmp_path / "g.json"
    jp.write_text(json.dumps({"cells": [[1, 1, 2]]}), encoding="utf-8")
    tp = tmp_path / "g.txt"
    tp.write_text("112\n", encoding="utf-8")
    assert load_grid(jp) == load_grid(str(tp))

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="invalid JSON"):
        load_grid(bad)
