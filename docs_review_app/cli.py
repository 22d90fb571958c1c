from __future__ import annotations

import argparse
import json
import sys
import traceback
from pathlib import Path
from typing import Any, Dict, Optional

from .config import ALLOWED_LANGS, DocsConfig, load_config
from .core.discovery import discover_markdown
from .core.errors import DictionaryLoadError, DocsReviewError
from .navigation.builder import NavigationTreeBuilder
from .navigation.render import write_artifacts
from .quality.report import render_quality_markdown
from .quality.runner import QualityRunner, write_report
from .report.i18n import get_translator
from .terminology.checker import ConsistencyChecker
from .terminology.dictionary import TerminologyDictionary
from .terminology.glossary import glossary_html, glossary_markdown
from .terminology.models import Term
from .terminology.report import format_check_report
from .utils.logging import debug_enabled, init_logging


def _print_json(obj) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def _config(args: argparse.Namespace, source: Optional[str] = None) -> DocsConfig:
    cfg = load_config(args.config, source_dir=source)
    if args.dictionary:
        cfg.dictionary_path = Path(args.dictionary)
    if args.lang:
        cfg.lang = args.lang
    return cfg


def _dictionary(cfg: DocsConfig) -> TerminologyDictionary:
    return TerminologyDictionary(cfg.dictionary_path, lang=cfg.lang).load()


# ---------- checker ----------
def _cmd_check(args: argparse.Namespace) -> int:
    cfg = _config(args, args.dir)
    checker = ConsistencyChecker(_dictionary(cfg))
    result = checker.check_directory(cfg.source_dir, cfg.exclude)
    if args.json:
        _print_json(result.model_dump(exclude_none=True))
    else:
        print(format_check_report(result, cfg.lang))
    return 1 if result.total > 0 else 0


def _cmd_fix(args: argparse.Namespace) -> int:
    cfg = _config(args)
    t = get_translator(cfg.lang)
    target = Path(args.file)
    if not target.is_file():
        print(f"Error: {target} is not a file (fix only supports single files)")
        return 1
    result = ConsistencyChecker(_dictionary(cfg)).fix_file(target, apply=args.apply)
    if args.apply:
        print(t("fix.applied", path=target, changes=result.changes))
    else:
        print(t("fix.preview", changes=result.changes))
        print(t("fix.hint"))
    return 0


# ---------- dictionary management ----------
def _cmd_add(args: argparse.Namespace) -> int:
    cfg = _config(args)
    d = _dictionary(cfg)
    term = d.add(
        Term(
            english=args.english,
            chinese=args.chinese,
            category=args.category,
            context=args.context or "",
            alternatives=list(args.alt or []),
            usage="keep_english" if args.keep_english else "preferred",
        )
    )
    print(f"{term.english} -> {term.chinese} ({term.category})")
    return 0


def _cmd_update(args: argparse.Namespace) -> int:
    cfg = _config(args)
    patch: Dict[str, Any] = {}
    for name in ("chinese", "category", "context", "usage"):
        value = getattr(args, name)
        if value is not None:
            patch[name] = value
    if args.alt is not None:
        patch["alternatives"] = list(args.alt)
    term = _dictionary(cfg).update(args.english, patch)
    _print_json(term.model_dump())
    return 0


def _cmd_remove(args: argparse.Namespace) -> int:
    cfg = _config(args)
    term = _dictionary(cfg).remove(args.english)
    print(f"{term.english} -> {term.chinese}")
    return 0


def _cmd_search(args: argparse.Namespace) -> int:
    cfg = _config(args)
    results = _dictionary(cfg).search(args.query)
    print(f"{len(results)}:")
    for term in results:
        print(f"  {term.english} -> {term.chinese} ({term.category})")
    return 0


def _cmd_stats(args: argparse.Namespace) -> int:
    cfg = _config(args)
    _print_json(_dictionary(cfg).stats())
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    cfg = _config(args)
    t = get_translator(cfg.lang)
    issues = _dictionary(cfg).validate()
    if not issues:
        print(f"✅ {t('validate.passed')}")
        return 0
    print(f"❌ {t('validate.failed', count=len(issues))}")
    for issue in issues:
        print(f"  {issue.message}")
    return 1


def _cmd_export(args: argparse.Namespace) -> int:
    cfg = _config(args)
    d = _dictionary(cfg)
    if args.format == "html":
        content = glossary_html(d)
        out = Path(args.out or "terminology.html")
    else:
        content = glossary_markdown(d)
        out = Path(args.out or "terminology.md")
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    print(f"Exported {args.format} glossary to {out}")
    return 0


# ---------- site tooling ----------
def _cmd_nav(args: argparse.Namespace) -> int:
    cfg = _config(args, args.dir)
    files = discover_markdown(cfg.source_dir, cfg.nav_exclude)
    builder = NavigationTreeBuilder(cfg.source_dir, lang=cfg.lang, root_title=cfg.root_title)
    tree = builder.build(files)
    out_dir = Path(args.out) if args.out else cfg.output_dir
    written = write_artifacts(tree, out_dir)
    for path in written.values():
        print(path)
    return 0


def _cmd_quality(args: argparse.Namespace) -> int:
    cfg = _config(args, args.dir)
    report = QualityRunner(cfg).run()
    if args.json:
        _print_json(json.loads(report.model_dump_json(exclude_none=True)))
    else:
        report_path = Path(args.report) if args.report else cfg.report_path
        write_report(render_quality_markdown(report, cfg.lang), report_path)
        o = report.overall
        print(f"{o.score}/100 ({o.grade})")
    return 0 if report.overall.passed else 1


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="docs-review", description="Terminology, navigation and quality tooling for bilingual docs.")
    ap.add_argument("--config", default=None, help="YAML config file (e.g. config.yml)")
    ap.add_argument("--dictionary", default=None, help="Terminology dictionary (JSON or YAML)")
    ap.add_argument("--lang", default=None, choices=sorted(ALLOWED_LANGS), help="Message language")
    sub = ap.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("check", help="Check terminology consistency of a docs tree.")
    sp.add_argument("dir", nargs="?", default=None, help="Docs root (default: config source dir)")
    sp.add_argument("--json", action="store_true", help="Print the issue report as JSON")
    sp.set_defaults(func=_cmd_check)

    sp = sub.add_parser("fix", help="Replace untranslated terms in one file (dry run by default).")
    sp.add_argument("file")
    sp.add_argument("--apply", action="store_true", help="Write changes back to the file")
    sp.set_defaults(func=_cmd_fix)

    sp = sub.add_parser("add", help="Add or replace a term.")
    sp.add_argument("english")
    sp.add_argument("chinese")
    sp.add_argument("category")
    sp.add_argument("context", nargs="?", default="")
    sp.add_argument("--alt", action="append", help="Deprecated alternative spelling (repeatable)")
    sp.add_argument("--keep-english", action="store_true", help="Term must not be translated")
    sp.set_defaults(func=_cmd_add)

    sp = sub.add_parser("update", help="Update fields of an existing term.")
    sp.add_argument("english")
    sp.add_argument("--chinese")
    sp.add_argument("--category")
    sp.add_argument("--context")
    sp.add_argument("--usage", choices=["keep_english", "preferred"])
    sp.add_argument("--alt", action="append", help="Replace alternatives (repeatable)")
    sp.set_defaults(func=_cmd_update)

    sp = sub.add_parser("remove", help="Remove a term.")
    sp.add_argument("english")
    sp.set_defaults(func=_cmd_remove)

    sp = sub.add_parser("search", help="Search terms by English, Chinese or context.")
    sp.add_argument("query")
    sp.set_defaults(func=_cmd_search)

    sp = sub.add_parser("stats", help="Show dictionary statistics.")
    sp.set_defaults(func=_cmd_stats)

    sp = sub.add_parser("validate", help="Validate the dictionary itself.")
    sp.set_defaults(func=_cmd_validate)

    sp = sub.add_parser("export", help="Export the glossary.")
    sp.add_argument("format", nargs="?", default="markdown", choices=["markdown", "html"])
    sp.add_argument("--out", default=None, help="Output file (default: terminology.md / terminology.html)")
    sp.set_defaults(func=_cmd_export)

    sp = sub.add_parser("nav", help="Write navigation.json, navigation.html and breadcrumbs.json.")
    sp.add_argument("dir", nargs="?", default=None)
    sp.add_argument("--out", default=None, help="Output dir (default: build output dir)")
    sp.set_defaults(func=_cmd_nav)

    sp = sub.add_parser("quality", help="Run all quality checks and write the report.")
    sp.add_argument("dir", nargs="?", default=None)
    sp.add_argument("--report", default=None, help="Markdown report path")
    sp.add_argument("--json", action="store_true", help="Print the report as JSON instead")
    sp.set_defaults(func=_cmd_quality)

    return ap


def main(argv: Optional[list[str]] = None) -> int:
    init_logging()
    ap = build_parser()
    args = ap.parse_args(argv)
    fn = getattr(args, "func", None)
    if fn is None:
        ap.print_help()
        return 2
    try:
        return int(fn(args) or 0)
    except KeyboardInterrupt:
        print("Canceled.")
        return 130
    except DictionaryLoadError as e:
        print(f"Error: {e}")
        return 2
    except (DocsReviewError, ValueError) as e:
        print(f"Error: {e}")
        if debug_enabled():
            traceback.print_exc()
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main(sys.argv[1:]))
