from __future__ import annotations

from dataclasses import dataclass


def _positive_int(name: str, value: object) -> int:
    # bool is an int subclass; quoted YAML numbers arrive as str.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 1:
        raise ValueError(f"{name} must be >= 1")
    return value


@dataclass(frozen=True)
class ParseConfig:
    # Physical lines considered by the section splitter (and the fallback scan).
    max_section_lines: int = 50_000
    # Lines of a data block considered, counting its own ~A marker line.
    max_data_lines: int = 20_000
    default_index_unit: str = "ft"
    fallback_index_unit: str = "ft"
    pipe_index_unit: str = "unknown"
    # Replace values equal to the ~W NULL item with NaN.
    mask_null_values: bool = False

    def __post_init__(self) -> None:
        _positive_int("max_section_lines", self.max_section_lines)
        _positive_int("max_data_lines", self.max_data_lines)
