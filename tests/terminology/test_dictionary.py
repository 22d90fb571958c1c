import json

import pytest
import yaml

from docs_review_app.core.errors import DictionaryLoadError, TermNotFoundError
from docs_review_app.terminology.dictionary import TerminologyDictionary
from docs_review_app.terminology.models import Term


def test_load_indexes_terms_case_insensitively(dictionary):
    assert len(dictionary) == 3
    assert "agent" in dictionary
    assert "AGENT" in dictionary
    assert dictionary.translation("Agent") == "智能体"
    assert dictionary.translation("unknown") is None


def test_queries(dictionary):
    assert dictionary.should_keep_english("llm") is True
    assert dictionary.should_keep_english("Agent") is False
    assert dictionary.should_keep_english("missing") is False
    assert dictionary.alternatives("prompt") == ["提示语"]
    assert dictionary.alternatives("missing") == []
    assert dictionary.categories() == ["concept", "technical"]
    assert [t.english for t in dictionary.terms_by_category("technical")] == ["LLM", "prompt"]


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(DictionaryLoadError):
        TerminologyDictionary(tmp_path / "nope.json").load()


def test_no_path_is_fatal():
    with pytest.raises(DictionaryLoadError):
        TerminologyDictionary().load()


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"english": "Agent"}),
        json.dumps([{"chinese": "智能体"}]),
        json.dumps([{"english": "  ", "chinese": "空"}]),
    ],
)
def test_malformed_dictionary_is_fatal(tmp_path, content):
    path = tmp_path / "terminology.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(DictionaryLoadError):
        TerminologyDictionary(path).load()


def test_missing_optional_fields_get_defaults(tmp_path):
    path = tmp_path / "terminology.json"
    path.write_text(
        json.dumps([{"english": "Tool", "chinese": "工具", "context": None, "alternatives": None}]),
        encoding="utf-8",
    )
    term = TerminologyDictionary(path).load().lookup("tool")
    assert term.category == "technical"
    assert term.context == ""
    assert term.alternatives == []
    assert term.usage == "preferred"


def test_save_round_trip_keeps_order_and_unicode(dictionary, dictionary_file, sample_terms):
    dictionary.save()
    raw = dictionary_file.read_text(encoding="utf-8")
    assert "智能体" in raw
    assert raw.endswith("\n")
    assert [r["english"] for r in json.loads(raw)] == [t["english"] for t in sample_terms]

    reloaded = TerminologyDictionary(dictionary_file).load()
    assert reloaded.to_records() == dictionary.to_records()


def test_save_does_not_add_default_fields(tmp_path):
    path = tmp_path / "terminology.json"
    original = [
        {"english": "Tool", "chinese": "工具"},
        {"english": "Agent", "chinese": "智能体", "category": "concept", "since": "v1"},
    ]
    path.write_text(json.dumps(original, ensure_ascii=False), encoding="utf-8")
    TerminologyDictionary(path).load().save()
    assert json.loads(path.read_text(encoding="utf-8")) == original


def test_update_keeps_omitted_defaults_implicit(tmp_path):
    path = tmp_path / "terminology.yml"
    path.write_text(yaml.safe_dump([{"english": "Tool", "chinese": "工具"}], allow_unicode=True), encoding="utf-8")
    d = TerminologyDictionary(path).load()
    d.update("tool", {"context": "Callable function"})
    assert yaml.safe_load(path.read_text(encoding="utf-8")) == [
        {"english": "Tool", "chinese": "工具", "context": "Callable function"}
    ]
    assert d.lookup("tool").usage == "preferred"


def test_unknown_fields_survive_save(tmp_path):
    path = tmp_path / "terminology.json"
    path.write_text(
        json.dumps([{"english": "Agent", "chinese": "智能体", "since": "v1"}], ensure_ascii=False),
        encoding="utf-8",
    )
    d = TerminologyDictionary(path).load()
    d.save()
    assert json.loads(path.read_text(encoding="utf-8"))[0]["since"] == "v1"


def test_yaml_dictionary(tmp_path, sample_terms):
    path = tmp_path / "terminology.yml"
    path.write_text(yaml.safe_dump(sample_terms, allow_unicode=True), encoding="utf-8")
    d = TerminologyDictionary(path).load()
    assert d.translation("prompt") == "提示词"

    d.add(Term(english="Tool", chinese="工具"))
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert data[-1]["english"] == "Tool"


def test_add_persists_and_replaces(dictionary, dictionary_file):
    dictionary.add({"english": "Context Window", "chinese": "上下文窗口", "category": "concept"})
    dictionary.add({"english": "agent", "chinese": "代理程序"})
    reloaded = TerminologyDictionary(dictionary_file).load()
    assert reloaded.translation("context window") == "上下文窗口"
    assert reloaded.translation("Agent") == "代理程序"
    assert len(reloaded) == 4


def test_update_merges_patch(dictionary, dictionary_file):
    updated = dictionary.update("PROMPT", {"context": "new note"})
    assert updated.chinese == "提示词"
    assert updated.context == "new note"
    assert TerminologyDictionary(dictionary_file).load().lookup("prompt").context == "new note"


def test_update_rekeys_in_place(dictionary):
    dictionary.update("LLM", {"english": "Large Language Model"})
    assert "llm" not in dictionary
    assert [t.english for t in dictionary] == ["Agent", "Large Language Model", "prompt"]


def test_update_and_remove_unknown_raise(dictionary):
    with pytest.raises(TermNotFoundError):
        dictionary.update("missing", {"chinese": "缺失"})
    with pytest.raises(TermNotFoundError):
        dictionary.remove("missing")


def test_remove(dictionary, dictionary_file):
    removed = dictionary.remove("agent")
    assert removed.english == "Agent"
    assert "agent" not in TerminologyDictionary(dictionary_file).load()


def test_search_matches_english_chinese_and_context(dictionary):
    assert [t.english for t in dictionary.search("AGE")] == ["Agent"]
    assert [t.english for t in dictionary.search("模型")] == ["LLM"]
    assert [t.english for t in dictionary.search("model")] == ["LLM", "prompt"]
    assert dictionary.search("zzz") == []


def test_stats(dictionary):
    assert dictionary.stats() == {
        "total": 3,
        "categories": {"concept": 1, "technical": 2},
        "usage": {"preferred": 2, "keep_english": 1},
    }


def test_validate_clean(dictionary):
    assert dictionary.validate() == []


def test_validate_reports_duplicates_and_missing_context():
    d = TerminologyDictionary.from_terms(
        [
            {"english": "Agent", "chinese": "智能体", "context": "x"},
            {"english": "Bot", "chinese": "智能体", "context": ""},
        ],
        lang="en",
    )
    issues = d.validate()
    assert [(i.type, i.term) for i in issues] == [
        ("duplicate_chinese", "Bot"),
        ("missing_context", "Bot"),
    ]
    assert "Agent" in issues[0].message and "Bot" in issues[0].message


def test_in_memory_dictionary_does_not_write(tmp_path):
    d = TerminologyDictionary.from_terms([{"english": "Agent", "chinese": "智能体"}])
    d.add({"english": "Tool", "chinese": "工具"})
    assert len(d) == 2
    assert list(tmp_path.iterdir()) == []
