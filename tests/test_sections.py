from __future__ import annotations

from laslite.io.sections import block_lines, has_known_section, pick_section, split_sections


def test_split_sections_keys_blocks_and_skips_comments() -> None:
    text = "\r\n".join(
        [
            "# leading comment",
            "~Version Information",
            "VERS. 2.0 : version",
            "",
            "~w well",
            "WELL. ACME 1 : well",
            "# inside comment",
            "~A DEPT GR",
            "1000 50",
        ]
    )
    sections = split_sections(text)

    assert list(sections) == ["~VERSION", "~W", "~A"]
    assert sections["~W"] == "~w well\nWELL. ACME 1 : well\n"
    assert sections["~A"].splitlines() == ["~A DEPT GR", "1000 50"]


def test_split_sections_ignores_text_before_first_marker() -> None:
    sections = split_sections("junk line\n1 2 3\n~A\n1 2\n")
    assert list(sections) == ["~A"]


def test_split_sections_truncates_at_line_cap() -> None:
    text = "~A\n" + "\n".join(f"{i} 1" for i in range(10)) + "\n~O\nnote : x\n"
    sections = split_sections(text, max_lines=4)

    assert "~O" not in sections
    assert sections["~A"].splitlines() == ["~A", "0 1", "1 1", "2 1"]


def test_pick_section_probes_both_spellings() -> None:
    sections = split_sections("~WELL INFORMATION\nWELL. X : name\n")
    assert pick_section(sections, "~W", "~WELL") == sections["~WELL"]
    assert pick_section(sections, "~C", "~CURVE") is None


def test_has_known_section() -> None:
    assert has_known_section(split_sections("~ASCII\n1 2\n"))
    assert not has_known_section(split_sections("~XYZ\n1 2\n"))
    assert not has_known_section(split_sections("1 2 3\n4 5 6\n"))


def test_block_lines_limit_counts_marker_line() -> None:
    block = "~A\n1 2\n# c\n3 4\n5 6\n"
    assert block_lines(block) == ["1 2", "3 4", "5 6"]
    assert block_lines(block, limit=3) == ["1 2"]
    assert block_lines(None) == []
