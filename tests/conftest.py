import pytest

METABOLITE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<hmdb xmlns="http://www.hmdb.ca">
<metabolite>
  <version>5.0</version>
  <creation_date>2005-11-16 15:48:42 UTC</creation_date>
  <update_date>2021-09-14T15:44:51Z</update_date>
  <accession>HMDB0000001</accession>
  <status>quantified</status>
  <secondary_accessions>
    <accession>HMDB0000479</accession>
    <accession>HMDB0006344</accession>
  </secondary_accessions>
  <name>1-Methylhistidine</name>
  <description>1-Methylhistidine, also known as 1-MHis, belongs to the class of "histidine" derivatives.</description>
  <synonyms>
    <synonym>1-MHis</synonym>
    <synonym>Pi-methylhistidine</synonym>
  </synonyms>
  <taxonomy>
    <description>belongs to histidine derivatives</description>
    <direct_parent>Histidine and derivatives</direct_parent>
    <kingdom>Organic compounds</kingdom>
  </taxonomy>
  <ontology>
    <root>
      <term>Physiological effect</term>
      <definition>Effects of metabolites on physiological processes</definition>
      <parent_id/>
      <level>1</level>
      <type>parent</type>
      <synonyms/>
      <descendants>
        <descendant>
          <term>Health effect</term>
          <definition>A health effect</definition>
          <parent_id>7792</parent_id>
          <level>2</level>
          <type>parent</type>
          <synonyms>
            <synonym>Health outcome</synonym>
          </synonyms>
          <descendants/>
        </descendant>
      </descendants>
    </root>
  </ontology>
  <normal_concentrations>
    <concentration>
      <biospecimen>Blood</biospecimen>
      <concentration_value>9.7 +/- 3.0</concentration_value>
      <concentration_units>uM</concentration_units>
      <subject_age>Adult (&gt;18 years old)</subject_age>
      <subject_sex>Both</subject_sex>
      <subject_condition>Normal</subject_condition>
      <references>
        <reference>
          <reference_text>Some paper</reference_text>
          <pubmed_id>19212411</pubmed_id>
        </reference>
        <reference>
          <reference_text>Unpublished</reference_text>
        </reference>
      </references>
    </concentration>
    <concentration>
      <biospecimen>Urine</biospecimen>
      <concentration_value>12.5</concentration_value>
    </concentration>
  </normal_concentrations>
</metabolite>
<metabolite>
  <version>5.0</version>
  <creation_date>2005-11-16</creation_date>
  <update_date>unspecified</update_date>
  <accession>HMDB0000002</accession>
  <status>expected</status>
  <secondary_accessions/>
  <name>1,3-Diaminopropane</name>
  <description>A diamine.</description>
  <synonyms/>
  <taxonomy>
    <direct_parent>Monoalkylamines</direct_parent>
  </taxonomy>
  <ontology>
    <root>
      <term>Physiological effect</term>
      <definition>A later, different definition</definition>
      <parent_id/>
      <synonyms>
        <synonym>Physiological outcome</synonym>
      </synonyms>
      <descendants>
        <descendant>
          <term>Health effect</term>
          <definition>A rewritten health effect</definition>
          <parent_id>9999</parent_id>
          <synonyms>
            <synonym>Should not be merged</synonym>
          </synonyms>
        </descendant>
        <descendant>
          <term>Disposition</term>
          <parent_id>1234</parent_id>
        </descendant>
      </descendants>
    </root>
  </ontology>
</metabolite>
</hmdb>
"""

CHEMONT_OBO = """format-version: 1.2
[Term]
id: CHEMONTID:0000000
name: Organic compounds

[Term]
id: CHEMONTID:0000123
name: Carboxylic acids
def: "Compounds containing a carboxylic acid group" []

[Term]
id: CHEMONTID:0001876
name: Histidine and derivatives
"""


@pytest.fixture
def metabolite_xml() -> str:
    return METABOLITE_XML


@pytest.fixture
def chemont_obo() -> str:
    return CHEMONT_OBO


@pytest.fixture
def xml_file(tmp_path, metabolite_xml):
    path = tmp_path / "hmdb_metabolites.xml"
    path.write_text(metabolite_xml, encoding="utf-8")
    return path


@pytest.fixture
def chemont_file(tmp_path, chemont_obo):
    path = tmp_path / "ChemOnt_2_1.obo"
    path.write_text(chemont_obo, encoding="utf-8")
    return path
