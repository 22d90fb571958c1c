from docs_review_app.report import messages_en, messages_zh
from docs_review_app.report.i18n import get_translator, lookup
from docs_review_app.report.renderer import render


def test_catalogues_have_same_keys():
    assert set(messages_en.MESSAGES) == set(messages_zh.MESSAGES)


def test_translator_formats():
    t = get_translator("en")
    assert t("check.found", total=3) == "Found 3 terminology issue(s):"
    assert get_translator("zh")("check.found", total=3) == "发现 3 个术语问题："


def test_unknown_lang_uses_english():
    assert get_translator("fr")("glossary.title") == "Glossary"
    assert get_translator("zh-CN")("glossary.title") == "术语表"


def test_missing_key_returns_key():
    assert get_translator("en")("no.such.key") == "no.such.key"


def test_bad_format_args_return_template():
    assert get_translator("en")("check.found") == "Found {total} terminology issue(s):"
    assert get_translator("en")("check.found", other=1) == "Found {total} terminology issue(s):"


def test_lookup_has_no_fallback():
    assert lookup("en", "nav.label.factors") == "The 12 Factors"
    assert lookup("en", "nav.label.unknown") is None


def test_render_uses_override_root(tmp_path):
    (tmp_path / "glossary.md").write_text("custom {{ t('glossary.title') }} {{ lang }}", encoding="utf-8")
    assert render("glossary.md", lang="en", template_root=tmp_path, sections=[]) == "custom Glossary en"
