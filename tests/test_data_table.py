from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from laslite.io.data_table import mask_null_values, parse_data_table
from laslite.io.types import DataTable


def test_clean_rows() -> None:
    t = parse_data_table("~A\n1000 50 2.5\n1000.5 55 2.6\n1001 60 2.7\n", ["DEPT", "GR", "RHOB"])

    assert t.index.tolist() == [1000.0, 1000.5, 1001.0]
    assert list(t.curves) == ["DEPT", "GR", "RHOB"]
    assert t.curves["DEPT"].tolist() == t.index.tolist()
    assert t.curves["GR"].tolist() == [50.0, 55.0, 60.0]
    assert t.is_aligned()


def test_short_row_is_nan_filled() -> None:
    t = parse_data_table("~A\n1000 50 2.5\n1001 60\n", ["DEPT", "GR", "RHOB"])

    assert t.n_rows == 2
    assert t.curves["GR"][1] == 60.0
    assert math.isnan(t.curves["RHOB"][1])
    assert t.is_aligned()


def test_bad_token_becomes_nan_but_keeps_row() -> None:
    t = parse_data_table("~A\n1000 abc 2.5\n", ["DEPT", "GR", "RHOB"])
    assert t.n_rows == 1
    assert math.isnan(t.curves["GR"][0])
    assert t.curves["RHOB"][0] == 2.5


def test_bad_leading_token_drops_row(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="laslite.io.data_table"):
        t = parse_data_table("~A\nDEPTH GR\n1000 50\nn/a 60\n1001 70\n", ["DEPT", "GR"])

    assert t.index.tolist() == [1000.0, 1001.0]
    assert t.curves["GR"].tolist() == [50.0, 70.0]
    assert any("Dropped 2" in r.getMessage() for r in caplog.records)


def test_surplus_tokens_are_ignored() -> None:
    t = parse_data_table("~A\n1 2 3 4 5\n", ["DEPT", "GR"])
    assert list(t.curves) == ["DEPT", "GR"]
    assert t.curves["GR"].tolist() == [2.0]


def test_self_derives_names_when_none_given() -> None:
    t = parse_data_table("~A\n10 1 2\n11 3\n", [])
    assert list(t.curves) == ["DEPTH", "CURVE_1", "CURVE_2"]
    assert math.isnan(t.curves["CURVE_2"][1])
    assert t.is_aligned()


def test_duplicate_names_get_unique_keys() -> None:
    t = parse_data_table("~A\n1 2 3\n", ["DEPT", "GR", "GR"])
    assert list(t.curves) == ["DEPT", "GR", "GR:2"]
    assert t.curves["GR:2"].tolist() == [3.0]


def test_empty_block() -> None:
    for block in (None, "", "~A\n", "~A\n# only a comment\n"):
        t = parse_data_table(block, ["DEPT", "GR"])
        assert t.n_rows == 0
        assert list(t.curves) == ["DEPT", "GR"]
        assert all(v.size == 0 for v in t.curves.values())
        assert t.is_aligned()


def test_empty_block_without_names_has_no_columns() -> None:
    t = parse_data_table("~A\n", [])
    assert t.n_rows == 0
    assert len(t.curves) == 0


def test_line_cap_counts_marker_line() -> None:
    block = "~A\n" + "\n".join(f"{i} {i * 2}" for i in range(100))
    t = parse_data_table(block, ["DEPT", "V"], max_lines=11)
    assert t.n_rows == 10


def test_columns_are_read_only() -> None:
    t = parse_data_table("~A\n1 2\n", ["DEPT", "GR"])
    with pytest.raises(ValueError):
        t.index[0] = 5.0
    with pytest.raises(ValueError):
        t.curves["GR"][0] = 5.0
    with pytest.raises(TypeError):
        t.curves["X"] = np.zeros(1)  # type: ignore[index]


def test_mask_null_values_spares_index_curve() -> None:
    t = parse_data_table("~A\n-999.25 -999.25 1\n2 3 -999.25\n", ["DEPT", "GR", "RHOB"])
    m = mask_null_values(t, -999.25)

    assert m.index.tolist() == [-999.25, 2.0]
    assert m.curves["DEPT"].tolist() == [-999.25, 2.0]
    assert math.isnan(m.curves["GR"][0])
    assert math.isnan(m.curves["RHOB"][1])
    assert mask_null_values(t, None) is t


def test_table_equality_treats_nan_as_equal() -> None:
    a = DataTable.from_columns([1.0], {"A": [float("nan")]})
    b = DataTable.from_columns([1.0], {"A": [float("nan")]})
    c = DataTable.from_columns([1.0], {"B": [float("nan")]})
    assert a == b
    assert a != c
