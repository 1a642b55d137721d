# hmdbrdf/vocabulary.py
"""Output vocabulary: prefix header and predicate names, loaded from config/*.json."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict

from pydantic import BaseModel, ValidationError, field_validator

from .errors import ConfigurationError

CONFIG_DIR = Path(__file__).resolve().parent / "config"

REQUIRED_PREDICATES = (
    "identifier", "version", "status", "created", "modified", "secondary_accession",
    "label", "description", "synonym", "chemical_class",
    "concentration", "biospecimen", "concentration_value", "concentration_units",
    "subject_condition", "subject_age", "subject_sex", "references",
    "definition", "subclass_of",
)


class Namespaces(BaseModel):
    record: str = ""
    ontology: str = "ont"
    chemont: str = "chemont"
    pubmed: str = "pubmed"


class Vocabulary(BaseModel):
    prefixes: Dict[str, str]
    namespaces: Namespaces
    predicates: Dict[str, str]
    date_datatype: str = "xsd:date"
    language: str = "en"

    @field_validator("predicates")
    @classmethod
    def _all_predicates_present(cls, v: Dict[str, str]) -> Dict[str, str]:
        missing = [name for name in REQUIRED_PREDICATES if name not in v]
        if missing:
            raise ValueError(f"missing predicates: {', '.join(missing)}")
        return v

    def pred(self, name: str) -> str:
        return self.predicates[name]


def _load_json(path: Path) -> dict:
    if not path.exists():
        raise ConfigurationError(f"Vocabulary file not found: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected JSON object in {path}, got {type(data).__name__}")
    return data


def load_vocabulary(config_dir: Path = CONFIG_DIR) -> Vocabulary:
    prefixes = _load_json(config_dir / "prefixes.json")
    terms = _load_json(config_dir / "predicates.json")
    try:
        return Vocabulary(prefixes=prefixes, **terms)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid vocabulary in {config_dir}: {e}") from e


@lru_cache(maxsize=1)
def default_vocabulary() -> Vocabulary:
    return load_vocabulary()
