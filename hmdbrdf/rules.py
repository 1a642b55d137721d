# hmdbrdf/rules.py
import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

from .model_loader import child_text, require_child, require_text, text_of
from .triples_types import BlockClose, BlockFragment, BlockOpen, Statement, Triple
from .ttl_generator import iri, lit, long_lit
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)

DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})")

CONCENTRATION_FIELDS = (
    "biospecimen",
    "concentration_value",
    "concentration_units",
    "subject_condition",
    "subject_age",
    "subject_sex",
)


def date_helper(s: str) -> str:
    """'2014-03-11T00:00:00Z' -> '2014-03-11'; anything else passes through."""
    m = DATE_RE.match(s)
    if m:
        return m.group(1)
    logger.warning("Malformed date %r passed through unchanged", s)
    return s


@dataclass
class Context:
    record: ET.Element
    accession: str
    vocab: Vocabulary
    chemont_label2id: Optional[Dict[str, str]] = None  # None: no ChemOnt file given

    @property
    def subject(self) -> str:
        return iri(self.vocab.namespaces.record, self.accession, self.vocab.prefixes)

    def pred(self, name: str) -> str:
        return self.vocab.pred(name)


class Rule(Protocol):
    def apply(self, ctx: Context) -> List[Statement]:
        ...


# --- Конкретные правила ---

class RecordInformationRule:
    """identifier, version, status, created/modified dates, secondary accessions"""

    def apply(self, ctx: Context) -> List[Statement]:
        rec, acc, s = ctx.record, ctx.accession, ctx.subject
        dt = ctx.vocab.date_datatype
        triples: List[Statement] = [
            Triple(s, ctx.pred("identifier"), lit(acc)),
            Triple(s, ctx.pred("version"), lit(require_text(rec, "version", acc))),
            Triple(s, ctx.pred("status"), lit(require_text(rec, "status", acc))),
            Triple(s, ctx.pred("created"),
                   lit(date_helper(require_text(rec, "creation_date", acc)), datatype=dt)),
            Triple(s, ctx.pred("modified"),
                   lit(date_helper(require_text(rec, "update_date", acc)), datatype=dt)),
        ]
        for secondary in require_child(rec, "secondary_accessions", acc):
            triples.append(Triple(s, ctx.pred("secondary_accession"), lit(text_of(secondary))))
        return triples


class IdentificationRule:
    """label, description, synonyms"""

    def apply(self, ctx: Context) -> List[Statement]:
        rec, acc, s = ctx.record, ctx.accession, ctx.subject
        lang = ctx.vocab.language
        triples: List[Statement] = [
            Triple(s, ctx.pred("label"), lit(require_text(rec, "name", acc))),
            Triple(s, ctx.pred("description"),
                   long_lit(require_text(rec, "description", acc), lang=lang)),
        ]
        for synonym in require_child(rec, "synonyms", acc):
            triples.append(Triple(s, ctx.pred("synonym"), lit(text_of(synonym), lang=lang)))
        return triples


class ChemicalTaxonomyRule:
    """
    taxonomy/direct_parent -> "a chemont:Cnnnnnnn".

    A label missing from the ChemOnt table still yields the statement, with an
    empty local name, and a warning.
    """

    def apply(self, ctx: Context) -> List[Statement]:
        if ctx.chemont_label2id is None:
            return []
        label = child_text(ctx.record, "taxonomy/direct_parent")
        if label is None:
            return []
        chemont_id = ctx.chemont_label2id.get(label)
        if chemont_id is None:
            logger.warning("No ChemOnt id for direct parent %r", label)
            chemont_id = ""
        return [Triple(ctx.subject, ctx.pred("chemical_class"),
                       iri(ctx.vocab.namespaces.chemont, chemont_id, ctx.vocab.prefixes))]


class ConcentrationRule:
    """one blank-node block per normal_concentrations/concentration"""

    def apply(self, ctx: Context) -> List[Statement]:
        block = ctx.record.find("normal_concentrations")
        if block is None:
            return []
        pubmed = ctx.vocab.namespaces.pubmed
        triples: List[Statement] = []
        for concentration in block:
            triples.append(BlockOpen(ctx.subject, ctx.pred("concentration")))
            for elm in concentration:
                if elm.tag in CONCENTRATION_FIELDS:
                    # present but empty still yields ""
                    triples.append(BlockFragment(ctx.pred(elm.tag), lit(text_of(elm))))
            for ref in concentration.findall("references/reference"):
                pubmed_id = child_text(ref, "pubmed_id")
                if pubmed_id is not None:
                    ref_iri = iri(pubmed, pubmed_id, ctx.vocab.prefixes)
                    triples.append(BlockFragment(ctx.pred("references"), ref_iri))
            triples.append(BlockClose())
        return triples


# порядок правил = порядок вывода
RULES: List[Rule] = [
    RecordInformationRule(),
    IdentificationRule(),
    ChemicalTaxonomyRule(),
    ConcentrationRule(),
]
