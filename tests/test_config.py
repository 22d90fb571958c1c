from pathlib import Path

import pytest

from docs_review_app.config import DocsConfig, load_config
from docs_review_app.core.discovery import discover_markdown, is_excluded
from docs_review_app.core.errors import DocsReviewError
from docs_review_app.utils.logging import debug_enabled


def test_defaults_derive_from_source_dir(tmp_path):
    cfg = DocsConfig(source_dir=tmp_path)
    assert cfg.dictionary_path == tmp_path / "config" / "terminology.json"
    assert cfg.output_dir == tmp_path / "dist"
    assert cfg.report_path == tmp_path / "quality-report.md"
    assert cfg.lang == "zh"
    assert "scripts/**" in cfg.nav_exclude


def test_unsupported_lang_falls_back():
    assert DocsConfig(lang="fr").lang == "zh"


def test_load_config_from_yaml(tmp_path):
    cfg_file = tmp_path / "config.yml"
    cfg_file.write_text(
        "\n".join(
            [
                "lang: en",
                "build:",
                "  outputDir: site",
                "terminology:",
                "  dictionary: terms/dict.yml",
                "  exclude: ['drafts/**']",
                "navigation:",
                "  rootTitle: My Docs",
                "  exclude: ['private/**']",
            ]
        ),
        encoding="utf-8",
    )
    cfg = load_config(cfg_file)
    assert cfg.source_dir == tmp_path
    assert cfg.lang == "en"
    assert cfg.output_dir == tmp_path / "site"
    assert cfg.dictionary_path == tmp_path / "terms" / "dict.yml"
    assert cfg.exclude == ["drafts/**"]
    assert cfg.nav_exclude == ["private/**"]
    assert cfg.root_title == "My Docs"


def test_relative_source_resolves_against_config_dir(tmp_path, monkeypatch):
    (tmp_path / "site").mkdir()
    cfg_file = tmp_path / "site" / "config.yml"
    cfg_file.write_text("source: ../docs\nreport: out/report.md\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path / "site")
    cfg = load_config(cfg_file)
    assert cfg.source_dir == tmp_path / "site" / ".." / "docs"
    assert cfg.report_path == tmp_path / "site" / ".." / "docs" / "out" / "report.md"


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCS_REVIEW_SOURCE", str(tmp_path))
    monkeypatch.setenv("DOCS_REVIEW_DICTIONARY", "/abs/terms.json")
    monkeypatch.setenv("DOCS_REVIEW_LANG", "EN")
    cfg = load_config()
    assert cfg.source_dir == tmp_path
    assert cfg.dictionary_path == Path("/abs/terms.json")
    assert cfg.lang == "en"


def test_explicit_source_dir_beats_env(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCS_REVIEW_SOURCE", "/elsewhere")
    assert load_config(source_dir=tmp_path).source_dir == tmp_path


def test_bad_config_file(tmp_path):
    bad = tmp_path / "config.yml"
    bad.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(DocsReviewError):
        load_config(bad)
    with pytest.raises(DocsReviewError):
        load_config(tmp_path / "missing.yml")


def test_is_excluded():
    assert is_excluded("node_modules/x/y.md", ["node_modules/**"])
    assert is_excluded("dist", ["dist/**"])
    assert not is_excluded("docs/dist.md", ["dist/**"])
    assert is_excluded("drafts/a.md", ["*/a.md"])


def test_discover_markdown(tmp_path):
    for rel in ["b.md", "a/c.md", "a/skip.txt", "dist/out.md", "node_modules/m.md"]:
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("x", encoding="utf-8")
    assert discover_markdown(tmp_path) == ["a/c.md", "b.md"]
    assert discover_markdown(tmp_path, exclude=["a/**"]) == ["b.md", "dist/out.md", "node_modules/m.md"]


@pytest.mark.parametrize("value, expected", [("1", True), (" 1 ", True), ("true", False), ("0", False)])
def test_debug_enabled(monkeypatch, value, expected):
    monkeypatch.setenv("DOCS_REVIEW_DEBUG", value)
    assert debug_enabled() is expected
