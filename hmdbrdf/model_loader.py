# hmdbrdf/model_loader.py
import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Union

from .errors import ConfigurationError, MissingFieldError

logger = logging.getLogger(__name__)

CHEMONT_ID_RE = re.compile(r"^id: CHEMONTID:(.+)$")
CHEMONT_NAME_RE = re.compile(r"^name: (.+)$")


# ---------- XML document ----------

def _strip_namespaces(root: ET.Element) -> ET.Element:
    """HMDB dumps declare xmlns="http://www.hmdb.ca"; drop it from every tag."""
    for elem in root.iter():
        if isinstance(elem.tag, str) and elem.tag.startswith("{"):
            elem.tag = elem.tag.split("}", 1)[1]
    return root


def load_document(path: Union[str, Path]) -> ET.Element:
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Metabolite XML file not found: {path}")
    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise ConfigurationError(f"Cannot parse {path}: {e}") from e
    return _strip_namespaces(tree.getroot())


def parse_document(xml_content: Union[str, bytes]) -> ET.Element:
    try:
        root = ET.fromstring(xml_content)
    except ET.ParseError as e:
        raise ConfigurationError(f"Cannot parse metabolite XML: {e}") from e
    return _strip_namespaces(root)


def iter_records(root: ET.Element) -> Iterator[ET.Element]:
    """Top-level record elements (<metabolite> under <hmdb>)."""
    if root.tag != "hmdb":
        logger.warning("Unexpected document root <%s>, expected <hmdb>", root.tag)
    for record in root:
        yield record


# ---------- element helpers ----------

def text_of(elem: Optional[ET.Element]) -> Optional[str]:
    """Stripped element text, None for a missing element or blank text."""
    if elem is None or elem.text is None:
        return None
    s = elem.text.strip()
    return s or None


def child_text(elem: ET.Element, path: str) -> Optional[str]:
    return text_of(elem.find(path))


def require_child(record: ET.Element, name: str, accession: Optional[str]) -> ET.Element:
    found = record.find(name)
    if found is None:
        raise MissingFieldError(name, accession)
    return found


def require_text(record: ET.Element, name: str, accession: Optional[str]) -> str:
    """Text of a mandatory element; an empty element yields ""."""
    return text_of(require_child(record, name, accession)) or ""


def record_accession(record: ET.Element) -> str:
    accession = child_text(record, "accession")
    if accession is None:
        raise MissingFieldError("accession")
    return accession


# ---------- ChemOnt flat file ----------

def parse_chemont(lines: Iterable[str]) -> Dict[str, str]:
    """
    Build label -> ChemOnt code from an OBO flat file.

    "id: CHEMONTID:0000123" sets the current code (C0000123); the following
    "name: ..." line binds its label to that code.
    """
    label2id: Dict[str, str] = {}
    chemont_id: Optional[str] = None
    for line in lines:
        line = line.rstrip("\r\n")
        m = CHEMONT_ID_RE.match(line)
        if m:
            chemont_id = f"C{m.group(1)}"
            continue
        m = CHEMONT_NAME_RE.match(line)
        if m:
            if chemont_id is None:
                logger.debug("ChemOnt name %r before any id, skipped", m.group(1))
                continue
            label2id[m.group(1)] = chemont_id
    return label2id


def load_chemont(path: Union[str, Path]) -> Dict[str, str]:
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"ChemOnt file not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            label2id = parse_chemont(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read ChemOnt file {path}: {e}") from e
    logger.info("Loaded %d ChemOnt labels from %s", len(label2id), path)
    return label2id
