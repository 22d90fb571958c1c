from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["Term", "Issue", "IssueType", "Usage", "DirectoryCheckResult", "FixResult"]

Usage = Literal["keep_english", "preferred"]
IssueType = Literal[
    "should_keep_english",
    "should_translate",
    "alternative_used",
    "duplicate_chinese",
    "missing_context",
]


class Term(BaseModel):
    """One bilingual dictionary entry.

    Unknown keys are kept so that load -> save does not drop hand-added data,
    and defaults the file left out are not written back.
    """

    model_config = ConfigDict(extra="allow")

    english: str
    chinese: str
    category: str = "technical"
    context: str = ""
    alternatives: List[str] = Field(default_factory=list)
    usage: Usage = "preferred"

    @field_validator("english")
    @classmethod
    def _english_non_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("english must be non-empty")
        return v

    @field_validator("context", mode="before")
    @classmethod
    def _context_none_to_empty(cls, v: Optional[str]) -> str:
        return v or ""

    @field_validator("alternatives", mode="before")
    @classmethod
    def _alternatives_none_to_empty(cls, v: Optional[List[str]]) -> List[str]:
        return list(v or [])

    @property
    def key(self) -> str:
        return self.english.casefold()


class Issue(BaseModel):
    type: IssueType
    term: str
    count: int = 1
    message: str
    chinese: Optional[str] = None
    preferred: Optional[str] = None


class DirectoryCheckResult(BaseModel):
    """Issues keyed by relative path; only files with issues are listed."""

    files: Dict[str, List[Issue]] = Field(default_factory=dict)
    total: int = 0
    errors: Dict[str, str] = Field(default_factory=dict)


class FixResult(BaseModel):
    changes: int
    content: str
