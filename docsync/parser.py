"""Parse the Bot API HTML reference into documented sections.

The reference page (https://core.telegram.org/bots/api) documents each type
and method under an ``<h4>`` heading, followed by a description paragraph
and either a table of fields/parameters or, for unions, a bullet list of
variants::

    <h4>sendMessage</h4>
    <p>Use this method to send text messages. …</p>
    <table>
      <tr><th>Parameter</th><th>Type</th><th>Required</th><th>Description</th></tr>
      <tr><td>chat_id</td><td>Integer or String</td><td>Yes</td><td>…</td></tr>
    </table>

Headings that are not a single identifier ("Making requests", "Recent
changes", …) and every ``<h3>`` end the current section.
"""

from __future__ import annotations

import dataclasses
import re
from html.parser import HTMLParser
from typing import List, Optional, Tuple

_IDENTIFIER = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")
_SPACES = re.compile(r"\s+")


@dataclasses.dataclass(frozen=True)
class DocField:
    """One documented field of a type or parameter of a method."""
    name: str
    type: str
    required: bool
    description: str = ""


@dataclasses.dataclass
class DocSection:
    """One ``<h4>`` section of the reference: a type, a method or a union."""
    name: str
    note: str = ""
    fields: List[DocField] = dataclasses.field(default_factory=list)
    variants: List[str] = dataclasses.field(default_factory=list)

    @property
    def is_method(self) -> bool:
        return self.name[:1].islower()

    @property
    def is_union(self) -> bool:
        return not self.is_method and bool(self.variants)

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


def _clean(text: str) -> str:
    return _SPACES.sub(" ", text).strip()


class _ReferenceParser(HTMLParser):
    """Event-driven collector of :class:`DocSection` objects."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.sections: List[DocSection] = []
        self._section: Optional[DocSection] = None
        self._capture: Optional[str] = None   # tag whose text is being collected
        self._buffer: List[str] = []
        self._row: Optional[List[str]] = None
        self._row_is_header = False
        self._in_table = False
        self._seen_table = False
        self._note_done = False

    # ── helpers ──────────────────────────────────────────────────────────

    def _start_capture(self, tag: str) -> None:
        self._capture = tag
        self._buffer = []

    def _end_capture(self) -> str:
        text = _clean("".join(self._buffer))
        self._capture = None
        self._buffer = []
        return text

    def _close_section(self) -> None:
        self._section = None
        self._in_table = False
        self._seen_table = False
        self._note_done = False

    def _add_row(self, cells: List[str]) -> None:
        section = self._section
        if section is None or len(cells) < 3:
            return
        if section.is_method:
            if len(cells) < 4:
                return
            name, type_, required, description = cells[:4]
            section.fields.append(DocField(name, type_, required.lower() == "yes", description))
        else:
            name, type_, description = cells[:3]
            section.fields.append(DocField(name, type_, not description.startswith("Optional"), description))

    # ── HTMLParser hooks ─────────────────────────────────────────────────

    def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
        if tag == "h3":
            self._close_section()
        elif tag == "h4":
            self._close_section()
            self._start_capture("h4")
        elif self._section is None:
            return
        elif tag == "p" and not self._note_done and not self._seen_table and self._capture is None:
            self._start_capture("p")
        elif tag == "table":
            self._in_table = True
            self._seen_table = True
        elif tag == "tr" and self._in_table:
            self._row = []
            self._row_is_header = False
        elif tag in ("td", "th") and self._row is not None:
            self._row_is_header = self._row_is_header or tag == "th"
            self._start_capture(tag)
        elif tag == "li" and not self._in_table and not self._seen_table and self._capture is None:
            self._start_capture("li")
        elif tag == "br" and self._capture is not None:
            self._buffer.append(" ")

    def handle_endtag(self, tag: str) -> None:
        if tag == "h4" and self._capture == "h4":
            title = self._end_capture()
            if _IDENTIFIER.match(title):
                self._section = DocSection(name=title)
                self.sections.append(self._section)
        elif self._section is None:
            return
        elif tag == "p" and self._capture == "p":
            self._section.note = self._end_capture()
            self._note_done = True
        elif tag in ("td", "th") and self._capture == tag and self._row is not None:
            self._row.append(self._end_capture())
        elif tag == "tr" and self._row is not None:
            if not self._row_is_header:
                self._add_row(self._row)
            self._row = None
        elif tag == "table":
            self._in_table = False
        elif tag == "li" and self._capture == "li":
            variant = self._end_capture()
            if _IDENTIFIER.match(variant):
                self._section.variants.append(variant)

    def handle_data(self, data: str) -> None:
        if self._capture is not None:
            self._buffer.append(data)


def parse_reference(html: str) -> List[DocSection]:
    """Return every type, method and union section documented in *html*.

    Raises:
        ValueError: If the page contains no recognisable section.
    """
    parser = _ReferenceParser()
    parser.feed(html)
    parser.close()
    if not parser.sections:
        raise ValueError("no type or method sections found in the reference page")
    return parser.sections
