# hmdbrdf/xlsx_export.py
from pathlib import Path
from typing import Union

from openpyxl import Workbook

from .ontology import TermTable
from .vocabulary import Vocabulary


def build_terms_workbook(table: TermTable, vocab: Vocabulary,
                         omit_root_subclass: bool = False) -> Workbook:
    wb = Workbook()
    ws = wb.active
    ws.title = "Terms"

    # заголовки
    ws.append(["key", "label", "definition", "external_id", "sub_class_of", "synonyms"])
    for entry in table:
        ws.append([
            entry.key,
            entry.label,
            entry.definition,
            entry.external_id,
            entry.sub_class_of,
            "; ".join(entry.synonyms or []),
        ])

    ws = wb.create_sheet("Triples")
    ws.append(["subject", "predicate", "object"])
    for t in table.serialize(vocab, omit_root_subclass=omit_root_subclass):
        ws.append([t.subject, t.predicate, t.object])
    return wb


def export_terms_to_xlsx(table: TermTable, vocab: Vocabulary, path: Union[str, Path],
                         omit_root_subclass: bool = False) -> None:
    build_terms_workbook(table, vocab, omit_root_subclass).save(path)
