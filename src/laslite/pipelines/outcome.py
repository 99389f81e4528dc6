# src/laslite/pipelines/outcome.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from laslite.io.types import Document


@dataclass(frozen=True)
class ParseSuccess:
    document: Document


@dataclass(frozen=True)
class ParseFailure:
    reason: str
    stage: str = ""


# Returned by the primary and fallback pipelines; callers branch on the type.
ParseOutcome = Union[ParseSuccess, ParseFailure]
