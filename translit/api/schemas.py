from pydantic import BaseModel, Field
from typing import Optional

from translit.text.engine import CaseMode

class TransliterateRequest(BaseModel):
    input: str = Field(..., min_length=1, description="Length is capped by MAX_INPUT_CHARS")
    script: Optional[str] = Field(None, description="Rule table name; 'auto' for the combined table")
    language: Optional[str] = Field(None, description="Language code mapped to a script, e.g. 'hi'")
    case: Optional[CaseMode] = None
    clusters: bool = False

class ClusterOut(BaseModel):
    start: int
    length: int
    output: str
    matched: bool

class TransliterateResponse(BaseModel):
    input: str
    output: str
    scripts: list[str]
    vernacular: bool
    table: Optional[str] = None
    clusters: Optional[list[ClusterOut]] = None

class ScriptInfo(BaseModel):
    script: str
    languages: list[str]
    rules: int
    max_pattern_length: int
    max_fragment_length: int
    source: str
