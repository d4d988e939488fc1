"""tgwire docs-sync command line.

    python main.py check [--html FILE] [--url URL]
    python main.py dump  [--html FILE] [--url URL]

``check`` compares the Bot API reference with the binding and exits 0 when
they agree, 1 on drift and 2 when the reference cannot be fetched or
parsed.  ``dump`` prints the parsed sections as JSON.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

import requests

from config import DOCS_URL, HTTP_TIMEOUT, logger
from docsync import compare, fetch_reference, parse_reference
from docsync.parser import DocSection
from tgwire import registry

EXIT_CLEAN = 0
EXIT_DRIFT = 1
EXIT_FAILURE = 2


def _load_sections(args: argparse.Namespace) -> List[DocSection]:
    if args.html:
        with open(args.html, encoding="utf-8") as fh:
            html = fh.read()
        logger.info("Reference read from file", extra={"path": args.html})
    else:
        html = fetch_reference(args.url, timeout=HTTP_TIMEOUT)
    return parse_reference(html)


def cmd_check(args: argparse.Namespace) -> int:
    sections = _load_sections(args)
    report = compare(sections, registry)
    for line in report.lines():
        print(line)
    if report.is_clean:
        logger.info("Binding matches the reference", extra={"sections": len(sections)})
        return EXIT_CLEAN
    logger.warning("Binding drifted from the reference", extra={"drift_count": len(report)})
    return EXIT_DRIFT


def cmd_dump(args: argparse.Namespace) -> int:
    sections = _load_sections(args)
    json.dump([section.to_dict() for section in sections], sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return EXIT_CLEAN


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check the tgwire binding against the Bot API reference.")
    sub = parser.add_subparsers(dest="command", required=True)
    for name, func, help_text in (
        ("check", cmd_check, "report drift between the reference and the binding"),
        ("dump", cmd_dump, "print the parsed reference as JSON"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--html", help="read the reference from a saved HTML file instead of downloading it")
        cmd.add_argument("--url", default=DOCS_URL, help=f"reference URL (default: {DOCS_URL})")
        cmd.set_defaults(func=func)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (requests.RequestException, OSError) as exc:
        logger.error("Could not load the reference", extra={"url": args.url, "html": args.html, "error": str(exc)})
    except ValueError as exc:
        logger.error("Could not parse the reference", extra={"error": str(exc)})
    return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
