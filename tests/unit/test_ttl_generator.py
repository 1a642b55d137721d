import io

import pytest

from hmdbrdf.triples_types import BlockClose, BlockFragment, BlockOpen, Triple
from hmdbrdf.ttl_generator import (
    TurtleSink,
    iri,
    lit,
    local_name,
    long_lit,
    prefix_lines,
    render_statement,
)
from hmdbrdf.vocabulary import default_vocabulary


def test_literals():
    assert lit("uM") == '"uM"'
    assert lit("Blood", lang="en") == '"Blood"@en'
    assert lit("2014-03-11", datatype="xsd:date") == '"2014-03-11"^^xsd:date'
    assert lit('say "hi"\n') == '"say \\"hi\\"\\n"'
    assert lit(None) == '""'
    assert long_lit("line 1\nline 2", lang="en") == '"""line 1\nline 2"""@en'


def test_local_names():
    assert iri("ont", "physiological_effect") == "ont:physiological_effect"
    prefixes = {"ont": "http://purl.jp/hmdb/ontology/"}
    assert iri("ont", "a_[b]", prefixes) == "<http://purl.jp/hmdb/ontology/a_%5Bb%5D>"
    assert iri("ont", 'say_"x"', prefixes) == "<http://purl.jp/hmdb/ontology/say_%22x%22>"
    assert iri("ont", "a\tb", prefixes) == "<http://purl.jp/hmdb/ontology/a%09b>"
    with pytest.raises(ValueError):
        iri("ont", "a_[b]")
    assert local_name("amino_acids,_peptides") == "amino_acids\\,_peptides"
    assert local_name("-x-y") == "\\-x-y"
    assert local_name("(r)-lactate") == "\\(r\\)-lactate"


def test_render_statements():
    statements = [
        BlockOpen(":HMDB0000001", "ont:concentration"),
        BlockFragment("ont:biospecimen", '"Blood"'),
        BlockClose(),
        Triple(":HMDB0000001", "rdfs:label", '"1-Methylhistidine"'),
    ]
    assert "\n".join(render_statement(st) for st in statements) == "\n".join([
        ":HMDB0000001 ont:concentration [",
        '    ont:biospecimen "Blood" ;',
        "] .",
        ':HMDB0000001 rdfs:label "1-Methylhistidine" .',
    ])
    assert render_statement(BlockClose()) == "] ."


def test_prefix_header():
    lines = prefix_lines(default_vocabulary())
    assert lines[0] == "@prefix : <https://hmdb.ca/metabolites/> ."
    assert "@prefix chemont: <http://classyfire.wishartlab.com/tax_nodes/> ." in lines
    assert lines[-1] == ""


def test_sink_counts_statements():
    out = io.StringIO()
    sink = TurtleSink(out, default_vocabulary())
    sink.write_header()
    n = sink.write([Triple("ont:a", "rdfs:label", '"A"@en'), Triple("ont:b", "rdfs:label", '"B"@en')])
    assert n == 2
    text = out.getvalue()
    assert text.startswith("@prefix : <https://hmdb.ca/metabolites/> .\n")
    assert "\n\nont:a rdfs:label \"A\"@en .\nont:b rdfs:label \"B\"@en .\n" in text
