"""Shared fixtures: a reference page rendered from the binding itself."""

import html
import os
import sys
from typing import Callable, List

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from docsync.parser import DocField, DocSection
from tgwire import registry
from tgwire.codec import union_codec
from tgwire.models import wire_models, wire_unions

# Unions that have their own section in the Bot API reference.
DOCUMENTED_UNIONS = ("InputMedia", "InputMessageContent", "InlineQueryResult", "PassportElementError")


def _binding_sections() -> List[DocSection]:
    sections: List[DocSection] = []
    for name, model in wire_models().items():
        fields = []
        for field_name, field in model.model_fields.items():
            required = field.is_required()
            description = "Some value." if required else "Optional. Some value."
            fields.append(DocField(field.alias or field_name, "String", required, description))
        sections.append(DocSection(name, f"This object represents a {name}.", fields))
    unions = wire_unions()
    for name in DOCUMENTED_UNIONS:
        variants = [candidate.__name__ for candidate in union_codec(unions[name]).candidates]
        sections.append(DocSection(name, f"This object represents one {name}.", [], variants))
    for entry in registry:
        fields = [DocField(param, "String", required, "Some parameter.") for param, required in entry.params]
        sections.append(DocSection(entry.name, "Use this method to do things.", fields))
    return sections


def _render(sections: List[DocSection]) -> str:
    parts = [
        "<html><body><div id=\"dev_page_content\">",
        "<h3><a class=\"anchor\" name=\"recent-changes\"></a>Recent changes</h3>",
        "<h4>April 26, 2021</h4><p>Bot API 5.2</p><ul><li>Added things</li></ul>",
        "<h3>Making requests</h3><p>All queries must be served over HTTPS.</p>",
    ]
    for section in sections:
        anchor = section.name.lower()
        parts.append(
            f"<h4><a class=\"anchor\" name=\"{anchor}\" href=\"#{anchor}\"><i class=\"anchor-icon\"></i></a>"
            f"{section.name}</h4>"
        )
        parts.append(f"<p>{html.escape(section.note)}</p>")
        if section.variants:
            parts.append("<ul>")
            parts.extend(f"<li><a href=\"#{v.lower()}\">{v}</a></li>" for v in section.variants)
            parts.append("</ul>")
        elif section.fields:
            parts.append("<table class=\"table\">")
            if section.is_method:
                parts.append("<thead><tr><th>Parameter</th><th>Type</th><th>Required</th><th>Description</th></tr></thead>")
            else:
                parts.append("<thead><tr><th>Field</th><th>Type</th><th>Description</th></tr></thead>")
            parts.append("<tbody>")
            for field in section.fields:
                if section.is_method:
                    required = "Yes" if field.required else "Optional"
                    parts.append(
                        f"<tr><td>{field.name}</td><td>{field.type}</td><td>{required}</td>"
                        f"<td>{html.escape(field.description)}</td></tr>"
                    )
                else:
                    parts.append(
                        f"<tr><td>{field.name}</td><td>{field.type}</td>"
                        f"<td><em>{html.escape(field.description)}</em></td></tr>"
                    )
            parts.append("</tbody></table>")
    parts.append("</div></body></html>")
    return "\n".join(parts)


@pytest.fixture
def binding_sections() -> List[DocSection]:
    """Sections describing exactly what the binding implements."""
    return _binding_sections()


@pytest.fixture
def render_reference() -> Callable[[List[DocSection]], str]:
    """Render sections as a page laid out like the Bot API reference."""
    return _render
