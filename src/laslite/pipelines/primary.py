# src/laslite/pipelines/primary.py
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Optional

from laslite.config.defaults import default_config
from laslite.config.schema import ParseConfig
from laslite.curves.schema import finalize_curve_names, resolve_curve_names, synthesize_curve_section
from laslite.curves.units import resolve_index_unit
from laslite.errors import StructuralParseError
from laslite.io.data_table import mask_null_values, parse_data_table
from laslite.io.header import parse_header_section
from laslite.io.las import is_wrapped, null_value
from laslite.io.sections import has_known_section, pick_logical, split_sections
from laslite.io.types import Document, LasHeader
from laslite.pipelines.outcome import ParseFailure, ParseOutcome, ParseSuccess

logger = logging.getLogger(__name__)


def parse_header(sections: Dict[str, str]) -> LasHeader:
    return LasHeader(
        version=parse_header_section(pick_logical(sections, "version"), "Version"),
        well=parse_header_section(pick_logical(sections, "well"), "Well"),
        curve=parse_header_section(pick_logical(sections, "curve"), "Curve"),
        parameter=parse_header_section(pick_logical(sections, "parameter"), "Parameter"),
        other=parse_header_section(pick_logical(sections, "other"), "Other"),
    )


def run_primary(text: str, source_name: str, *, config: Optional[ParseConfig] = None) -> ParseOutcome:
    """
    Section-based parse: split -> headers -> curve schema -> data -> index unit.

    Any error aborts the whole attempt and is reported as a ParseFailure
    (no partial Document is ever returned).
    """
    cfg = config or default_config()
    stage = "split"
    try:
        sections = split_sections(text, max_lines=cfg.max_section_lines)
        if not has_known_section(sections):
            raise StructuralParseError("no recognized section markers")

        stage = "header"
        header = parse_header(sections)
        if is_wrapped(header.version):
            logger.warning("%s declares WRAP=YES; wrapped rows are read line by line", source_name)

        stage = "schema"
        data_block = pick_logical(sections, "data")
        schema = resolve_curve_names(header.curve, data_block)

        stage = "data"
        table = parse_data_table(data_block, schema.names, max_lines=cfg.max_data_lines)
        if cfg.mask_null_values:
            table = mask_null_values(table, null_value(header.well))

        stage = "schema"
        schema, table = finalize_curve_names(schema, table)
        if not schema.from_header and schema.names:
            header = replace(header, curve=synthesize_curve_section(schema.names))

        stage = "unit"
        index_unit = resolve_index_unit(header.well, default=cfg.default_index_unit)
    except StructuralParseError as e:
        logger.warning("Primary parse of %s failed during %s: %s", source_name, stage, e)
        return ParseFailure(reason=str(e), stage=stage)
    except Exception as e:
        logger.warning("Primary parse of %s raised during %s", source_name, stage, exc_info=True)
        return ParseFailure(reason=str(e) or type(e).__name__, stage=stage)

    logger.info("Parsed %s: %d rows, %d curves", source_name, table.n_rows, len(schema.names))
    return ParseSuccess(
        Document(
            header=header,
            data=table,
            curve_names=schema.names,
            index_unit=index_unit,
            source_name=source_name,
        )
    )
