# hmdbrdf/ttl_generator.py
from typing import Iterable, List, Mapping, Optional, TextIO
from urllib.parse import quote

from .triples_types import BlockClose, BlockFragment, BlockOpen, Statement, Triple
from .vocabulary import Vocabulary

# PN_LOCAL_ESC characters that need a backslash inside a prefixed name
_LOCAL_ESCAPES = set("~.!$&'()*+,;=/?#@%")

# characters no prefixed name can carry, escaped or not
_IRI_ONLY = set("[]\"<>{}|^`\\ ")


def iri(prefix: str, local: str, prefixes: Optional[Mapping[str, str]] = None) -> str:
    """
    prefix + local name -> Turtle prefixed name.

    A local name that cannot be written as a prefixed name becomes a full
    <namespace + percent-encoded name> IRI; that needs the prefix table.
    """
    if not needs_full_iri(local):
        return f"{prefix}:{local_name(local)}"
    if prefixes is None or prefix not in prefixes:
        raise ValueError(f"no namespace for prefix {prefix!r} to write {local!r}")
    return f"<{prefixes[prefix]}{quote(local, safe='')}>"


def needs_full_iri(local: str) -> bool:
    return any(ch in _IRI_ONLY or ord(ch) < 0x20 for ch in local)


def local_name(s: str) -> str:
    out = []
    for i, ch in enumerate(s):
        if ch in _LOCAL_ESCAPES or (ch == "-" and i == 0):
            out.append("\\" + ch)
        else:
            out.append(ch)
    return "".join(out)


def _escape(s: str) -> str:
    return (
        s.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )


def lit(value: Optional[str], lang: Optional[str] = None, datatype: Optional[str] = None) -> str:
    """Short string literal, optionally with @lang or ^^datatype."""
    s = f'"{_escape(value or "")}"'
    if lang:
        return f"{s}@{lang}"
    if datatype:
        return f"{s}^^{datatype}"
    return s


def long_lit(value: Optional[str], lang: Optional[str] = None) -> str:
    """Triple-quoted literal; newlines are kept as-is."""
    s = (value or "").replace("\\", "\\\\").replace('"', '\\"')
    s = f'"""{s}"""'
    return f"{s}@{lang}" if lang else s


def prefix_lines(vocab: Vocabulary) -> List[str]:
    lines = [f"@prefix {name}: <{uri}> ." for name, uri in vocab.prefixes.items()]
    lines.append("")
    return lines


def render_statement(st: Statement) -> str:
    if isinstance(st, Triple):
        return f"{st.subject} {st.predicate} {st.object} ."
    if isinstance(st, BlockOpen):
        return f"{st.subject} {st.predicate} ["
    if isinstance(st, BlockFragment):
        return f"    {st.predicate} {st.object} ;"
    if isinstance(st, BlockClose):
        return "] ."
    raise TypeError(f"Unknown statement kind: {type(st).__name__}")


class TurtleSink:
    """Writes the prefix header and statements, one line each, to a text stream."""

    def __init__(self, out: TextIO, vocab: Vocabulary):
        self.out = out
        self.vocab = vocab

    def write_header(self) -> None:
        for line in prefix_lines(self.vocab):
            self.out.write(line + "\n")

    def write(self, statements: Iterable[Statement]) -> int:
        n = 0
        for st in statements:
            self.out.write(render_statement(st) + "\n")
            n += 1
        return n
