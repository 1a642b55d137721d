# hmdbrdf/ontology.py
"""
Classification term table.

Every HMDB record repeats its own <ontology> sub-tree. Folding all of them into
one TermTable keyed by normalized term name gives a single deduplicated
hierarchy; each attribute keeps the first value seen and later occurrences of
the same term never change it.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Dict, Iterable, Iterator, List, Optional

from .model import ROOT, FieldKind, TermEntry
from .model_loader import text_of
from .triples_types import Triple
from .ttl_generator import iri, lit
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)


def normalize_term(text: str) -> str:
    """'Physiological effect' -> 'physiological_effect'"""
    return text.strip().lower().replace(" ", "_")


class TermTable:
    def __init__(self) -> None:
        self.data: Dict[str, TermEntry] = {}

    def __contains__(self, key: str) -> bool:
        return key in self.data

    def __getitem__(self, key: str) -> TermEntry:
        return self.data[key]

    def __iter__(self) -> Iterator[TermEntry]:
        return iter(self.data.values())

    def __len__(self) -> int:
        return len(self.data)

    def get(self, key: str) -> Optional[TermEntry]:
        return self.data.get(key)

    def add(self, key: str, label: str, parent_key: str) -> TermEntry:
        """Insert a new term unless the key is already known; return the stored entry."""
        entry = self.data.get(key)
        if entry is None:
            entry = TermEntry(key=key, label=label, sub_class_of=parent_key)
            self.data[key] = entry
        return entry

    def serialize(self, vocab: Vocabulary, omit_root_subclass: bool = False) -> List[Triple]:
        """
        Statements for every term, in insertion order.

        Per term: label, definition, external id, subClassOf, synonyms.
        """
        ns = vocab.namespaces.ontology
        lang = vocab.language
        triples: List[Triple] = []
        for entry in self:
            s = iri(ns, entry.key, vocab.prefixes)
            triples.append(Triple(s, vocab.pred("label"), lit(entry.label, lang=lang)))
            if entry.definition is not None:
                triples.append(Triple(s, vocab.pred("definition"), lit(entry.definition, lang=lang)))
            if entry.external_id is not None:
                triples.append(Triple(s, vocab.pred("identifier"), lit(entry.external_id)))
            if entry.sub_class_of is not None:
                if not (omit_root_subclass and entry.sub_class_of == ROOT):
                    parent = iri(ns, entry.sub_class_of, vocab.prefixes)
                    triples.append(Triple(s, vocab.pred("subclass_of"), parent))
            for synonym in entry.synonyms or []:
                triples.append(Triple(s, vocab.pred("synonym"), lit(synonym, lang=lang)))
        return triples


def fold(table: TermTable, fragment: Iterable[ET.Element], parent_key: str) -> None:
    """Fold sibling ontology nodes (<root> or <descendant>) into the table."""
    for node in fragment:
        _fold_node(table, node, parent_key)


def _fold_node(table: TermTable, node: ET.Element, parent_key: str) -> None:
    current: Optional[TermEntry] = None
    for e in node:
        kind = FieldKind.from_tag(e.tag)

        if kind is FieldKind.TERM:
            text = text_of(e)
            if text is None:
                logger.debug("Empty <term> under <%s>, node skipped", node.tag)
                current = None
                continue
            current = table.add(normalize_term(text), text, parent_key)

        elif kind is FieldKind.DEFINITION:
            text = text_of(e)
            if text is not None and current is not None and current.definition is None:
                current.definition = text

        elif kind is FieldKind.PARENT_ID:
            # the id belongs to the enclosing term, not to this one
            text = text_of(e)
            parent = table.get(parent_key)
            if text is None or parent is None:
                continue
            if parent.external_id is None:
                parent.external_id = text
            # set on insert already; kept so a parent id never leaves a term unparented
            if parent.sub_class_of is None:
                parent.sub_class_of = parent_key

        elif kind is FieldKind.SYNONYMS:
            # <synonyms/> is absent; any other block, even blank, locks the list
            if (e.text is None and len(e) == 0) or current is None or current.synonyms is not None:
                continue
            current.synonyms = [text_of(synonym) or "" for synonym in e]

        elif kind is FieldKind.DESCENDANTS:
            if current is None:
                logger.debug("<descendants> without a term under <%s>, skipped", node.tag)
                continue
            fold(table, e, current.key)

        # LEVEL, TYPE, UNKNOWN: nothing to record


def fold_ontology(table: TermTable, ontology: Optional[ET.Element]) -> None:
    """Fold a record's <ontology> element; its children are top-level terms."""
    if ontology is None:
        return
    fold(table, ontology, ROOT)
