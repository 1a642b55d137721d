# hmdbrdf/triples_types.py
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Triple:
    subject: str
    predicate: str
    object: str


# ---------- blank-node block: "s p [ ... ] ." ----------

@dataclass(frozen=True)
class BlockOpen:
    subject: str
    predicate: str


@dataclass(frozen=True)
class BlockFragment:
    predicate: str
    object: str


@dataclass(frozen=True)
class BlockClose:
    pass


Statement = Union[Triple, BlockOpen, BlockFragment, BlockClose]
