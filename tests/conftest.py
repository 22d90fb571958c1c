import json

import pytest

from docs_review_app.terminology.dictionary import TerminologyDictionary

SAMPLE_TERMS = [
    {
        "english": "Agent",
        "chinese": "智能体",
        "category": "concept",
        "context": "An autonomous program driven by an LLM",
        "alternatives": ["代理"],
        "usage": "preferred",
    },
    {
        "english": "LLM",
        "chinese": "大语言模型",
        "category": "technical",
        "context": "Large language model",
        "alternatives": [],
        "usage": "keep_english",
    },
    {
        "english": "prompt",
        "chinese": "提示词",
        "category": "technical",
        "context": "Input text given to a model",
        "alternatives": ["提示语"],
        "usage": "preferred",
    },
]


@pytest.fixture(autouse=True)
def _test_env(monkeypatch):
    for name in (
        "DOCS_REVIEW_SOURCE",
        "DOCS_REVIEW_DICTIONARY",
        "DOCS_REVIEW_LANG",
        "DOCS_REVIEW_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PYTHONHASHSEED", "0")
    yield


@pytest.fixture
def sample_terms():
    return [dict(t) for t in SAMPLE_TERMS]


@pytest.fixture
def dictionary_file(tmp_path, sample_terms):
    path = tmp_path / "config" / "terminology.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(sample_terms, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def dictionary(dictionary_file):
    return TerminologyDictionary(dictionary_file, lang="en").load()
