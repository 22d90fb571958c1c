from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..terminology.models import Issue

Grade = Literal["A", "B", "C", "D", "F"]


class TerminologyResult(BaseModel):
    passed: bool
    total_issues: int = 0
    files: Dict[str, List[Issue]] = Field(default_factory=dict)


class BrokenLink(BaseModel):
    text: str
    url: str
    type: Literal["internal", "external"] = "internal"


class LinkResult(BaseModel):
    passed: bool
    total_links: int = 0
    broken_links: int = 0
    details: Dict[str, List[BrokenLink]] = Field(default_factory=dict)


class CodeBlockIssue(BaseModel):
    language: str
    issues: List[str]
    code: str


class CodeResult(BaseModel):
    passed: bool
    total_code_blocks: int = 0
    valid_code_blocks: int = 0
    issues: Dict[str, List[CodeBlockIssue]] = Field(default_factory=dict)


class OverallResult(BaseModel):
    passed: bool
    score: int
    grade: Grade


class QualityReport(BaseModel):
    schema_version: str = "1.0"
    generated_at: datetime
    terminology: Optional[TerminologyResult] = None
    links: Optional[LinkResult] = None
    code: Optional[CodeResult] = None
    overall: OverallResult
    diagnostics: Dict[str, str] = Field(default_factory=dict)
