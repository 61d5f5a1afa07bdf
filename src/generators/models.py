"""
Data models for definition-driven generation.

Pool entries and formatting payloads are classified once into closed
kinds before a generator or formatter acts on them.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class EntryKind(Enum):
    """What a single pool element is."""
    LITERAL = "literal"
    PATTERN = "pattern"    # compiled re.Pattern, synthesized per draw


class PayloadKind(Enum):
    """How a formatting definition turns a result into text."""
    TEMPLATES = "templates"  # list of template strings, one picked per call
    CALLABLE = "callable"    # function applied to the result directly


def classify_entry(value: Any) -> EntryKind:
    if isinstance(value, re.Pattern):
        return EntryKind.PATTERN
    return EntryKind.LITERAL


def classify_payload(value: Any) -> PayloadKind:
    """
    Classify a formatting payload.

    Strings are sequences too but never template lists. Anything that is
    not a template list is treated as callable; a payload that is neither
    fails with TypeError when the formatter calls it.
    """
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return PayloadKind.TEMPLATES
    return PayloadKind.CALLABLE


@dataclass
class ColumnSpec:
    """One generated column of a record table."""
    name: str
    definition: str
    pool: Optional[List[Any]] = None
    format: Optional[str] = None


@dataclass
class TableSpec:
    """A record table: which columns to generate, and for which locale."""
    columns: List[ColumnSpec] = field(default_factory=list)
    locale: Optional[str] = None
    definitions_path: Optional[str] = None
    random_seed: Optional[int] = None

    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

