"""Docs-sync tooling -- check the binding against the live Bot API reference.

Usage::

    from docsync import fetch_reference, parse_reference, compare
    from tgwire import registry

    sections = parse_reference(fetch_reference("https://core.telegram.org/bots/api"))
    report = compare(sections, registry)
    print("\\n".join(report.lines()))
"""

from docsync.drift import DriftIssue, DriftReport, compare
from docsync.fetch import fetch_reference
from docsync.parser import DocField, DocSection, parse_reference

__all__ = [
    "DocField",
    "DocSection",
    "DriftIssue",
    "DriftReport",
    "compare",
    "fetch_reference",
    "parse_reference",
]
