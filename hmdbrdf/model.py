# hmdbrdf/model.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

# parent key of top-level ontology terms; never a table entry
ROOT = "root"


@dataclass
class TermEntry:
    key: str                              # normalized term name
    label: str                            # display text, first seen
    sub_class_of: Optional[str] = None    # key of the parent term or ROOT
    definition: Optional[str] = None
    external_id: Optional[str] = None     # supplied by a child's <parent_id>
    synonyms: Optional[List[str]] = None  # None = never set


class FieldKind(Enum):
    """Child elements of an ontology node."""

    TERM = "term"
    DEFINITION = "definition"
    PARENT_ID = "parent_id"
    LEVEL = "level"
    TYPE = "type"
    SYNONYMS = "synonyms"
    DESCENDANTS = "descendants"
    UNKNOWN = "*"

    @classmethod
    def from_tag(cls, tag: str) -> "FieldKind":
        try:
            return cls(tag)
        except ValueError:
            return cls.UNKNOWN


@dataclass
class ConversionStats:
    records: int = 0
    statements: int = 0
    terms: int = 0
