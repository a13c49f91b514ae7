# api/main.py
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from formats import UnknownFormatError, available_formats
from ingestor import parse_line, parse_lines
from syslogparser import ParserError, config

# ----- logging -----
import logging
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger("uvicorn.error")

app = FastAPI(
    title="Syslog Formats API",
    version="0.1.0",
)

# ----- Schemas -----
class ParseRequest(BaseModel):
    format: Optional[str] = Field(None, min_length=1, max_length=64)
    line: str = Field(..., min_length=1)

class BatchParseRequest(BaseModel):
    format: Optional[str] = Field(None, min_length=1, max_length=64)
    lines: List[str]

class ParseFailureModel(BaseModel):
    line_number: int
    line: str
    reason: str

class BatchParseResponse(BaseModel):
    records: List[Dict[str, Any]]
    failures: List[ParseFailureModel]
    received: int

# ----- Routes -----
@app.get("/health")
def health():
    return {"status": "ok", "formats": available_formats()}

@app.get("/formats")
def list_formats():
    return {"formats": available_formats()}

@app.post("/parse")
def parse(item: ParseRequest):
    fmt = item.format or config.DEFAULT_FORMAT
    try:
        parts = parse_line(item.line, fmt)
    except UnknownFormatError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ParserError as e:
        logger.info("[parse] rejected %s message: %s", fmt, e)
        raise HTTPException(status_code=422, detail=f"Parse error: {e}")
    return parts.to_json_dict()

@app.post("/parse/batch", response_model=BatchParseResponse)
def parse_batch(payload: BatchParseRequest):
    fmt = payload.format or config.DEFAULT_FORMAT
    try:
        result = parse_lines(payload.lines, fmt)
    except UnknownFormatError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return BatchParseResponse(
        records=[r.to_json_dict() for r in result.records],
        failures=[ParseFailureModel(**asdict(f)) for f in result.failures],
        received=len(payload.lines),
    )
