from __future__ import annotations

import logging

from laslite.io.header import parse_header_line, parse_header_section


def test_dotted_line() -> None:
    item = parse_header_line("STRT.M        1670.0000 : START DEPTH")
    assert item is not None
    assert item.mnemonic == "STRT"
    assert item.unit == "M"
    assert item.raw_data == "1670.0000"
    assert item.description == "START DEPTH"
    assert item.value == 1670.0
    assert item.is_numeric


def test_dotted_line_with_empty_unit_keeps_string_value() -> None:
    item = parse_header_line("WELL.   ANY ET AL OIL WELL #12 : WELL")
    assert item is not None
    assert item.unit == ""
    assert item.raw_data == "ANY ET AL OIL WELL #12"
    assert item.value == "ANY ET AL OIL WELL #12"
    assert not item.is_numeric


def test_dotted_line_unit_stops_at_colon() -> None:
    item = parse_header_line("DEPT.M:Depth")
    assert item is not None
    assert (item.mnemonic, item.unit, item.raw_data, item.description) == ("DEPT", "M", "", "Depth")
    assert item.value == ""


def test_undotted_line() -> None:
    item = parse_header_line("COMP  BIG OIL CO : Company")
    assert item is not None
    assert item.mnemonic == "COMP"
    assert item.unit == ""
    assert item.raw_data == "BIG OIL CO"
    assert item.description == "Company"


def test_colon_before_dot_uses_undotted_grammar() -> None:
    item = parse_header_line("DATE 12:00 on 1.2.2020")
    assert item is not None
    assert item.mnemonic == "DATE"
    assert item.unit == ""
    assert item.raw_data == "12"
    assert item.description == "00 on 1.2.2020"


def test_line_without_colon_is_rejected() -> None:
    assert parse_header_line("no separators here") is None
    assert parse_header_line("NULL.  -999.25") is None


def test_parse_header_section_drops_bad_lines_with_warning(caplog) -> None:
    block = "\n".join(
        [
            "~W",
            "STRT.M 1000 : start",
            "garbage line",
            "# comment",
            "NULL. -999.25 : null",
        ]
    )
    with caplog.at_level(logging.WARNING, logger="laslite.io.header"):
        sec = parse_header_section(block, "Well")

    assert sec.name == "Well"
    assert sec.mnemonics() == ["STRT", "NULL"]
    assert sec.items[1].value == -999.25
    assert any("garbage line" in r.getMessage() for r in caplog.records)


def test_missing_block_gives_empty_section() -> None:
    sec = parse_header_section(None, "Parameter")
    assert sec.name == "Parameter"
    assert sec.items == ()


def test_repeated_mnemonics_kept_in_items_last_wins_in_mapping() -> None:
    sec = parse_header_section("~W\nWELL. A : first\nCOMP. X : c\nWELL. B : second\n", "Well")

    assert [it.value for it in sec.items] == ["A", "X", "B"]
    view = sec.by_mnemonic()
    assert list(view) == ["WELL", "COMP"]
    assert view["WELL"].value == "B"
