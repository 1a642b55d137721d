# hmdbrdf/triples_generator.py
import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional

from .model import ConversionStats
from .model_loader import iter_records, record_accession
from .observability import clear_log_context, set_log_context
from .ontology import TermTable, fold_ontology
from .rules import RULES, Context
from .triples_types import Statement
from .ttl_generator import TurtleSink
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)


def generate_statements(ctx: Context) -> List[Statement]:
    statements: List[Statement] = []
    for rule in RULES:
        statements.extend(rule.apply(ctx))
    return statements


def convert_document(
    root: ET.Element,
    sink: TurtleSink,
    vocab: Vocabulary,
    chemont_label2id: Optional[Dict[str, str]] = None,
    table: Optional[TermTable] = None,
    omit_root_subclass: bool = False,
) -> ConversionStats:
    """
    Header, then every record's statements as soon as the record is done,
    then the folded term table.

    A MissingFieldError stops the run; whatever was written stays written.
    """
    if table is None:
        table = TermTable()
    stats = ConversionStats()

    sink.write_header()
    try:
        for record in iter_records(root):
            accession = record_accession(record)
            set_log_context(accession=accession)
            ctx = Context(
                record=record,
                accession=accession,
                vocab=vocab,
                chemont_label2id=chemont_label2id,
            )
            statements = generate_statements(ctx)
            fold_ontology(table, record.find("ontology"))
            stats.statements += sink.write(statements)
            stats.records += 1
    finally:
        clear_log_context()

    stats.statements += sink.write(table.serialize(vocab, omit_root_subclass=omit_root_subclass))
    stats.terms = len(table)
    logger.info(
        "Converted %d records: %d statements, %d ontology terms",
        stats.records, stats.statements, stats.terms,
    )
    return stats
