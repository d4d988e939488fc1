"""Tests for the docs-sync tooling: parser, drift comparison and fetch."""

import sys
import os
from typing import Callable, List
from unittest.mock import patch, MagicMock

import pytest
import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from docsync.drift import DriftIssue, DriftReport, compare
from docsync.fetch import fetch_reference
from docsync.parser import DocField, DocSection, parse_reference
from tgwire import registry

SAMPLE = """
<div id="dev_page_content">
<h3><a class="anchor" name="available-types"></a>Available types</h3>
<p>All types used in the Bot API responses are represented as JSON-objects.</p>
<h4><a class="anchor" name="user" href="#user"><i class="anchor-icon"></i></a>User</h4>
<p>This object represents a Telegram user or bot.</p>
<table class="table">
<thead>
<tr>
<th>Field</th>
<th>Type</th>
<th>Description</th>
</tr>
</thead>
<tbody>
<tr>
<td>id</td>
<td>Integer</td>
<td>Unique identifier for this user or bot.</td>
</tr>
<tr>
<td>last_name</td>
<td>String</td>
<td><em>Optional</em>. User&#39;s or bot&#39;s last name</td>
</tr>
</tbody>
</table>
<h4><a class="anchor" name="inputmessagecontent" href="#inputmessagecontent"><i class="anchor-icon"></i></a>InputMessageContent</h4>
<p>This object represents the content of a message to be sent as a result of an inline query.</p>
<ul>
<li><a href="#inputtextmessagecontent">InputTextMessageContent</a></li>
<li><a href="#inputlocationmessagecontent">InputLocationMessageContent</a></li>
</ul>
<h4><a class="anchor" name="formatting-options" href="#formatting-options"><i class="anchor-icon"></i></a>Formatting options</h4>
<ul><li>bold</li></ul>
<h4><a class="anchor" name="getme" href="#getme"><i class="anchor-icon"></i></a>getMe</h4>
<p>A simple method for testing your bot&#39;s auth token.</p>
<h4><a class="anchor" name="sendchataction" href="#sendchataction"><i class="anchor-icon"></i></a>sendChatAction</h4>
<p>Use this method when you need to tell the user that something is happening.</p>
<blockquote><p>Example: an image bot.</p></blockquote>
<table class="table">
<tr><th>Parameter</th><th>Type</th><th>Required</th><th>Description</th></tr>
<tr><td>chat_id</td><td>Integer or String</td><td>Yes</td><td>Unique identifier for the target chat</td></tr>
<tr><td>action</td><td>String</td><td>Yes</td><td>Type of action to broadcast.</td></tr>
<tr><td>extra</td><td>Boolean</td><td>Optional</td><td>Something optional</td></tr>
</table>
<p>We only recommend using this method when a response will take noticeable time.</p>
</div>
"""


def _section(sections: List[DocSection], name: str) -> DocSection:
    return next(section for section in sections if section.name == name)


# ── Parser ───────────────────────────────────────────────────────────────────


class TestParser:
    """Validate parsing of the reference layout."""

    def test_section_names(self) -> None:
        names = [section.name for section in parse_reference(SAMPLE)]
        assert names == ["User", "InputMessageContent", "getMe", "sendChatAction"]

    def test_object_fields(self) -> None:
        user = _section(parse_reference(SAMPLE), "User")
        assert user.note == "This object represents a Telegram user or bot."
        assert user.fields == [
            DocField("id", "Integer", True, "Unique identifier for this user or bot."),
            DocField("last_name", "String", False, "Optional. User's or bot's last name"),
        ]
        assert not user.is_method
        assert not user.is_union

    def test_union_variants(self) -> None:
        union = _section(parse_reference(SAMPLE), "InputMessageContent")
        assert union.is_union
        assert union.variants == ["InputTextMessageContent", "InputLocationMessageContent"]

    def test_method_without_parameters(self) -> None:
        get_me = _section(parse_reference(SAMPLE), "getMe")
        assert get_me.is_method
        assert get_me.fields == []
        assert get_me.note.startswith("A simple method")

    def test_method_parameters(self) -> None:
        action = _section(parse_reference(SAMPLE), "sendChatAction")
        assert [(f.name, f.type, f.required) for f in action.fields] == [
            ("chat_id", "Integer or String", True),
            ("action", "String", True),
            ("extra", "Boolean", False),
        ]
        assert action.note.startswith("Use this method")

    def test_to_dict(self) -> None:
        data = _section(parse_reference(SAMPLE), "getMe").to_dict()
        assert data["name"] == "getMe"
        assert data["fields"] == []

    def test_empty_page_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_reference("<html><body><h3>Nothing here</h3></body></html>")


# ── Drift ────────────────────────────────────────────────────────────────────


class TestDrift:
    """compare() on a page rendered from the binding, then mutated."""

    def _report(
        self,
        sections: List[DocSection],
        render_reference: Callable[[List[DocSection]], str],
    ) -> DriftReport:
        return compare(parse_reference(render_reference(sections)), registry)

    def test_binding_matches_itself(self, binding_sections, render_reference) -> None:
        report = self._report(binding_sections, render_reference)
        assert report.lines() == []
        assert report.is_clean

    def test_added_parameter(self, binding_sections, render_reference) -> None:
        _section(binding_sections, "sendMessage").fields.append(
            DocField("message_thread_id", "Integer", False, "Optional thread"),
        )
        report = self._report(binding_sections, render_reference)
        assert report.issues == [DriftIssue("missing-param", "sendMessage", "message_thread_id")]
        assert not report.is_clean

    def test_added_method(self, binding_sections, render_reference) -> None:
        binding_sections.append(DocSection("banChatSenderChat", "Ban a channel chat.", [
            DocField("chat_id", "Integer or String", True),
            DocField("sender_chat_id", "Integer", True),
        ]))
        report = self._report(binding_sections, render_reference)
        assert report.lines() == ["missing-method: banChatSenderChat"]

    def test_removed_method(self, binding_sections, render_reference) -> None:
        binding_sections.remove(_section(binding_sections, "kickChatMember"))
        report = self._report(binding_sections, render_reference)
        assert report.kinds() == ["extra-method"]
        assert report.issues[0].subject == "kickChatMember"

    def test_requiredness_change(self, binding_sections, render_reference) -> None:
        section = _section(binding_sections, "setChatDescription")
        section.fields = [DocField(f.name, f.type, True, f.description) for f in section.fields]
        report = self._report(binding_sections, render_reference)
        assert report.issues == [
            DriftIssue("param-requiredness", "setChatDescription", "description should be required"),
        ]

    def test_added_variant(self, binding_sections, render_reference) -> None:
        _section(binding_sections, "InputMessageContent").variants.append("InputPollMessageContent")
        report = self._report(binding_sections, render_reference)
        assert report.kinds() == ["union-variants"]
        assert "InputPollMessageContent" in report.lines()[0]

    def test_variant_order(self, binding_sections, render_reference) -> None:
        section = _section(binding_sections, "InputMedia")
        section.variants = list(reversed(section.variants))
        report = self._report(binding_sections, render_reference)
        assert report.kinds() == ["union-variants"]

    def test_new_type(self, binding_sections, render_reference) -> None:
        binding_sections.append(DocSection("BotCommandScopeDefault", "Default scope.", [
            DocField("type", "String", True, "Scope type, must be default"),
        ]))
        report = self._report(binding_sections, render_reference)
        assert report.lines() == ["missing-type: BotCommandScopeDefault"]

    def test_undocumented_union(self, binding_sections, render_reference) -> None:
        binding_sections.append(DocSection("ChatMemberStatus", "", [], ["ChatMemberOwner", "ChatMemberMember"]))
        report = self._report(binding_sections, render_reference)
        assert report.kinds() == ["missing-union"]

    def test_field_changes(self, binding_sections, render_reference) -> None:
        user = _section(binding_sections, "User")
        user.fields = [f for f in user.fields if f.name != "language_code"]
        user.fields.append(DocField("is_premium", "True", False, "Optional. Premium user"))
        report = self._report(binding_sections, render_reference)
        assert sorted(report.lines()) == [
            "extra-field: User (language_code)",
            "missing-field: User (is_premium)",
        ]

    def test_from_alias_is_compared_by_wire_name(self, binding_sections) -> None:
        message = _section(binding_sections, "Message")
        assert "from" in [f.name for f in message.fields]
        assert "from_field" not in [f.name for f in message.fields]

    def test_constant_type_counts_as_required(self, binding_sections, render_reference) -> None:
        section = _section(binding_sections, "InputMediaPhoto")
        section.fields = [
            DocField(f.name, f.type, False, "Optional. x") if f.name == "type" else f for f in section.fields
        ]
        report = self._report(binding_sections, render_reference)
        assert report.issues == [DriftIssue("field-requiredness", "InputMediaPhoto", "type should be optional")]


# ── Fetch ────────────────────────────────────────────────────────────────────


class TestFetch:
    """Validate the requests-based download."""

    @patch("docsync.fetch.requests.get")
    def test_returns_text(self, mock_get: MagicMock) -> None:
        mock_resp = MagicMock()
        mock_resp.text = "<html></html>"
        mock_resp.content = b"<html></html>"
        mock_get.return_value = mock_resp

        assert fetch_reference("https://core.telegram.org/bots/api", timeout=5) == "<html></html>"
        args, kwargs = mock_get.call_args
        assert args[0] == "https://core.telegram.org/bots/api"
        assert kwargs["timeout"] == 5
        mock_resp.raise_for_status.assert_called_once()

    @patch("docsync.fetch.requests.get")
    def test_http_error_propagates(self, mock_get: MagicMock) -> None:
        mock_resp = MagicMock()
        mock_resp.status_code = 503
        mock_resp.raise_for_status.side_effect = requests.HTTPError("503", response=mock_resp)
        mock_get.return_value = mock_resp

        with pytest.raises(requests.HTTPError):
            fetch_reference("https://core.telegram.org/bots/api")

    @patch("docsync.fetch.requests.get")
    def test_network_error_propagates(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = requests.ConnectionError("unreachable")
        with pytest.raises(requests.ConnectionError):
            fetch_reference("https://core.telegram.org/bots/api")
