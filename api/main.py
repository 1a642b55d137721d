import io
import os
import tempfile
from typing import List, Optional, Tuple

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse
from pydantic import BaseModel

from hmdbrdf.errors import ConfigurationError, MissingFieldError
from hmdbrdf.model_loader import parse_chemont, parse_document
from hmdbrdf.ontology import TermTable
from hmdbrdf.triples_generator import convert_document
from hmdbrdf.ttl_generator import TurtleSink
from hmdbrdf.vocabulary import default_vocabulary
from hmdbrdf.xlsx_export import export_terms_to_xlsx

# ---------------- Models ----------------

class ConvertRequest(BaseModel):
    xml: str                       # HMDB metabolite XML document
    chemont: Optional[str] = None  # ChemOnt obo file contents
    omit_root_subclass: bool = False


class TermRow(BaseModel):
    key: str
    label: str
    definition: Optional[str] = None
    external_id: Optional[str] = None
    sub_class_of: Optional[str] = None
    synonyms: List[str] = []


# ---------------- Conversion ----------------

def run_conversion(req: ConvertRequest) -> Tuple[str, TermTable]:
    """Whole document -> (Turtle text, folded term table)."""
    vocab = default_vocabulary()
    chemont = parse_chemont(req.chemont.splitlines()) if req.chemont is not None else None
    table = TermTable()
    out = io.StringIO()
    try:
        root = parse_document(req.xml)
        convert_document(
            root,
            TurtleSink(out, vocab),
            vocab,
            chemont_label2id=chemont,
            table=table,
            omit_root_subclass=req.omit_root_subclass,
        )
    except (MissingFieldError, ConfigurationError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return out.getvalue(), table


# ---------------- FastAPI ----------------

app = FastAPI(title="HMDB to RDF converter")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def root():
    return {"status": "ok", "message": "hmdb converter API is running"}

@app.post("/api/hmdb/to-ttl", response_class=PlainTextResponse)
def api_hmdb_to_ttl(req: ConvertRequest = Body(...)) -> str:
    ttl, _ = run_conversion(req)
    return ttl

@app.post("/api/hmdb/to-terms", response_model=List[TermRow])
def api_hmdb_to_terms(req: ConvertRequest = Body(...)) -> List[TermRow]:
    _, table = run_conversion(req)
    return [
        TermRow(
            key=e.key,
            label=e.label,
            definition=e.definition,
            external_id=e.external_id,
            sub_class_of=e.sub_class_of,
            synonyms=e.synonyms or [],
        )
        for e in table
    ]

@app.post("/api/hmdb/to-terms-xlsx")
def api_hmdb_to_terms_xlsx(req: ConvertRequest = Body(...)):
    _, table = run_conversion(req)
    fd, path = tempfile.mkstemp(suffix=".xlsx")
    os.close(fd)
    export_terms_to_xlsx(table, default_vocabulary(), path, omit_root_subclass=req.omit_root_subclass)
    return FileResponse(
        path,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        filename="hmdb_terms.xlsx",
    )
