"""
HMDB metabolite XML -> Turtle.

    python converter.py -i hmdb_metabolites.xml -c ChemOnt_2_1.obo > hmdb.ttl

Statements for each metabolite are written as soon as the record is read;
the merged ontology term table follows the last record.
"""

import argparse
import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import List, Optional

from hmdbrdf.errors import ConfigurationError, ConverterError
from hmdbrdf.model_loader import load_chemont, load_document
from hmdbrdf.observability import configure_logging
from hmdbrdf.ontology import TermTable
from hmdbrdf.triples_generator import convert_document
from hmdbrdf.ttl_generator import TurtleSink
from hmdbrdf.vocabulary import default_vocabulary
from hmdbrdf.xlsx_export import export_terms_to_xlsx

logger = logging.getLogger("converter")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="converter.py",
        description="Convert an HMDB metabolite XML file to Turtle",
    )
    p.add_argument("-i", "--input", type=str, help="path to a HMDB metabolite XML file")
    p.add_argument("-c", "--chemont", type=str, help="path to a ChemOnt obo file")
    p.add_argument("-o", "--output", type=str, help="write Turtle here instead of stdout")
    p.add_argument("--xlsx", type=str, help="also export the ontology term table to this .xlsx")
    p.add_argument(
        "--omit-root-subclass",
        action="store_true",
        help="do not write rdfs:subClassOf for top-level ontology terms",
    )
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="stderr log level",
    )
    p.add_argument("--log-file", type=str, help="also log (DEBUG+) to this file")
    return p


def run(args: argparse.Namespace) -> None:
    if not args.input:
        raise ConfigurationError("an input file is required (-i/--input)")

    vocab = default_vocabulary()
    root = load_document(args.input)
    chemont = load_chemont(args.chemont) if args.chemont else None
    if chemont is None:
        logger.info("No ChemOnt file given, chemical taxonomy statements are skipped")

    table = TermTable()
    with ExitStack() as stack:
        if args.output:
            try:
                out = stack.enter_context(open(args.output, "w", encoding="utf-8"))
            except OSError as e:
                raise ConfigurationError(f"Cannot write output {args.output}: {e}") from e
        else:
            out = sys.stdout
        convert_document(
            root,
            TurtleSink(out, vocab),
            vocab,
            chemont_label2id=chemont,
            table=table,
            omit_root_subclass=args.omit_root_subclass,
        )

    if args.xlsx:
        try:
            export_terms_to_xlsx(table, vocab, args.xlsx, omit_root_subclass=args.omit_root_subclass)
        except OSError as e:
            raise ConfigurationError(f"Cannot write workbook {args.xlsx}: {e}") from e
        logger.info("Term table written to %s", args.xlsx)


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(
        log_file=Path(args.log_file) if args.log_file else None,
        console_level=getattr(logging, args.log_level),
    )

    try:
        run(args)
    except ConfigurationError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 2
    except ConverterError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
