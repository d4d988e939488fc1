"""Tests for the tag-free union codec."""

import sys
import os
from typing import Optional

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pydantic import ValidationError

from tgwire.codec import OneOf, decode_union, one_of, to_wire, union_codec
from tgwire.exceptions import TgWireError, UnionDecodeError
from tgwire.models import (
    ChatId,
    FileOrPath,
    ForceReply,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InlineQueryResultArticle,
    InlineQueryResultCachedPhoto,
    InlineQueryResultPhoto,
    InputContactMessageContent,
    InputFile,
    InputInvoiceMessageContent,
    InputLocationMessageContent,
    InputMedia,
    InputMediaAnimation,
    InputMediaDocument,
    InputMessageContent,
    InputTextMessageContent,
    InputVenueMessageContent,
    MediaGroupItem,
    Message,
    MessageOrTrue,
    PassportElementError,
    PassportElementErrorFrontSide,
    PassportElementErrorUnspecified,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ReplyMarkup,
    TelegramObject,
)


# ── OneOf construction ───────────────────────────────────────────────────────


class TestOneOf:
    def test_needs_two_candidates(self) -> None:
        with pytest.raises(ValueError):
            OneOf("Lonely", int)

    def test_union_codec_recovers_metadata(self) -> None:
        codec = union_codec(ReplyMarkup)
        assert codec is not None
        assert codec.name == "ReplyMarkup"
        assert codec.candidates == (InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply)

    def test_union_codec_on_plain_type(self) -> None:
        assert union_codec(int) is None

    def test_decode_union_rejects_plain_type(self) -> None:
        with pytest.raises(TypeError):
            decode_union(int, 1)

    def test_repr_lists_candidates(self) -> None:
        assert repr(union_codec(ChatId)) == "OneOf(ChatId: int, str)"


# ── Primitive unions ─────────────────────────────────────────────────────────


class TestChatId:
    def test_integer(self) -> None:
        assert decode_union(ChatId, 12345) == 12345

    def test_username(self) -> None:
        assert decode_union(ChatId, "@channel") == "@channel"

    def test_numeric_string_stays_string(self) -> None:
        value = decode_union(ChatId, "123")
        assert value == "123"
        assert isinstance(value, str)

    def test_bool_is_not_an_id(self) -> None:
        with pytest.raises(UnionDecodeError) as excinfo:
            decode_union(ChatId, True)
        assert excinfo.value.union == "ChatId"
        assert excinfo.value.value is True

    def test_float_rejected(self) -> None:
        with pytest.raises(UnionDecodeError):
            decode_union(ChatId, 1.5)


class TestFileOrPath:
    def test_placeholder(self) -> None:
        assert decode_union(FileOrPath, {}) == InputFile()

    def test_file_id(self) -> None:
        assert decode_union(FileOrPath, "AgACAgIAAxk") == "AgACAgIAAxk"

    def test_instance_passes_through(self) -> None:
        placeholder = InputFile()
        assert decode_union(FileOrPath, placeholder) is placeholder


# ── Reply markup ─────────────────────────────────────────────────────────────


class TestReplyMarkup:
    def test_remove_keyboard(self) -> None:
        value = decode_union(ReplyMarkup, {"remove_keyboard": True})
        assert isinstance(value, ReplyKeyboardRemove)

    def test_inline_keyboard(self) -> None:
        value = decode_union(ReplyMarkup, {"inline_keyboard": [[{"text": "a", "callback_data": "b"}]]})
        assert isinstance(value, InlineKeyboardMarkup)
        assert value.inline_keyboard[0][0].callback_data == "b"

    def test_force_reply(self) -> None:
        assert isinstance(decode_union(ReplyMarkup, {"force_reply": True}), ForceReply)

    def test_earliest_candidate_wins(self) -> None:
        value = decode_union(ReplyMarkup, {"inline_keyboard": [], "keyboard": []})
        assert isinstance(value, InlineKeyboardMarkup)

    def test_no_candidate(self) -> None:
        with pytest.raises(UnionDecodeError) as excinfo:
            decode_union(ReplyMarkup, {"selective": True})
        assert "ReplyMarkup" in str(excinfo.value)

    def test_error_hierarchy(self) -> None:
        assert issubclass(UnionDecodeError, TgWireError)
        assert issubclass(UnionDecodeError, ValueError)


# ── Model unions ─────────────────────────────────────────────────────────────


class TestInputMedia:
    def test_animation_listed_first(self) -> None:
        codec = union_codec(InputMedia)
        assert codec.candidates[0] is InputMediaAnimation

    def test_decodes_by_type_literal(self) -> None:
        value = decode_union(InputMedia, {"type": "document", "media": "x"})
        assert isinstance(value, InputMediaDocument)

    def test_media_group_has_no_animation(self) -> None:
        assert InputMediaAnimation not in union_codec(MediaGroupItem).candidates
        with pytest.raises(UnionDecodeError):
            decode_union(MediaGroupItem, {"type": "animation", "media": "x"})

    def test_missing_type_rejected(self) -> None:
        with pytest.raises(UnionDecodeError):
            decode_union(InputMedia, {"media": "x"})


class TestInputMessageContent:
    def test_text(self) -> None:
        assert isinstance(decode_union(InputMessageContent, {"message_text": "hi"}), InputTextMessageContent)

    def test_location(self) -> None:
        value = decode_union(InputMessageContent, {"latitude": 1.0, "longitude": 2.0})
        assert isinstance(value, InputLocationMessageContent)

    def test_venue_is_not_swallowed_by_location(self) -> None:
        value = decode_union(
            InputMessageContent,
            {"latitude": 1.0, "longitude": 2.0, "title": "Cafe", "address": "Main St"},
        )
        assert isinstance(value, InputVenueMessageContent)

    def test_contact(self) -> None:
        value = decode_union(InputMessageContent, {"phone_number": "+1", "first_name": "A"})
        assert isinstance(value, InputContactMessageContent)

    def test_invoice(self) -> None:
        value = decode_union(
            InputMessageContent,
            {
                "title": "T",
                "description": "D",
                "payload": "p",
                "provider_token": "tok",
                "currency": "EUR",
                "prices": [{"label": "item", "amount": 100}],
                "max_tip_amount": 50,
            },
        )
        assert isinstance(value, InputInvoiceMessageContent)
        assert value.prices[0].amount == 100


class TestInlineQueryResult:
    def test_cached_photo_precedes_photo(self) -> None:
        value = decode_union(
            InlineQueryResult,
            {"type": "photo", "id": "1", "photo_file_id": "f", "photo_url": "https://x/p.jpg", "thumb_url": "https://x/t.jpg"},
        )
        assert isinstance(value, InlineQueryResultCachedPhoto)

    def test_photo_by_url(self) -> None:
        value = decode_union(
            InlineQueryResult,
            {"type": "photo", "id": "1", "photo_url": "https://x/p.jpg", "thumb_url": "https://x/t.jpg"},
        )
        assert isinstance(value, InlineQueryResultPhoto)

    def test_missing_type_rejected(self) -> None:
        with pytest.raises(UnionDecodeError):
            decode_union(InlineQueryResult, {"id": "1", "photo_url": "https://x/p.jpg", "thumb_url": "https://x/t.jpg"})

    def test_twenty_variants(self) -> None:
        assert len(union_codec(InlineQueryResult).candidates) == 20

    def test_nested_union_error_is_single(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            InlineQueryResultArticle.from_wire({"type": "article", "id": "1", "title": "t", "input_message_content": {"nope": 1}})
        errors = excinfo.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == ("input_message_content",)
        assert "InputMessageContent" in errors[0]["msg"]


class TestPassportElementError:
    def test_source_selects_variant(self) -> None:
        value = decode_union(
            PassportElementError,
            {"source": "front_side", "type": "passport", "file_hash": "h", "message": "blurry"},
        )
        assert isinstance(value, PassportElementErrorFrontSide)

    def test_unspecified(self) -> None:
        value = decode_union(
            PassportElementError,
            {"source": "unspecified", "type": "email", "element_hash": "h", "message": "m"},
        )
        assert isinstance(value, PassportElementErrorUnspecified)

    def test_missing_source_rejected(self) -> None:
        with pytest.raises(UnionDecodeError):
            decode_union(
                PassportElementError,
                {"type": "passport", "field_name": "f", "data_hash": "h", "message": "m"},
            )


class TestMessageOrTrue:
    def test_true(self) -> None:
        assert decode_union(MessageOrTrue, True) is True

    def test_message(self) -> None:
        value = decode_union(MessageOrTrue, {"message_id": 1, "date": 0, "chat": {"id": 1, "type": "private"}})
        assert isinstance(value, Message)


# ── Unions inside models ─────────────────────────────────────────────────────


class _Holder(TelegramObject):
    chat_id: ChatId
    markup: Optional[ReplyMarkup] = None


class TestUnionField:
    def test_field_decodes_in_order(self) -> None:
        holder = _Holder.from_wire({"chat_id": "42", "markup": {"force_reply": True}})
        assert holder.chat_id == "42"
        assert isinstance(holder.markup, ForceReply)

    def test_optional_union_absent(self) -> None:
        holder = _Holder.from_wire({"chat_id": 1})
        assert holder.markup is None
        assert holder.to_wire() == {"chat_id": 1}

    def test_field_encodes_held_variant(self) -> None:
        holder = _Holder(chat_id=7, markup=ReplyKeyboardRemove(remove_keyboard=True))
        assert holder.to_wire() == {"chat_id": 7, "markup": {"remove_keyboard": True}}

    def test_round_trip(self) -> None:
        holder = _Holder(chat_id="@c", markup=InlineKeyboardMarkup(inline_keyboard=[]))
        assert _Holder.from_wire(holder.to_wire()) == holder

    def test_failure_is_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            _Holder.from_wire({"chat_id": [1]})


# ── to_wire ──────────────────────────────────────────────────────────────────


class TestToWire:
    def test_containers(self) -> None:
        value = {"a": [ForceReply(force_reply=True)], "b": (1, "x"), "c": None}
        assert to_wire(value) == {"a": [{"force_reply": True}], "b": [1, "x"], "c": None}

    def test_scalars_unchanged(self) -> None:
        assert to_wire("x") == "x"
        assert to_wire(3) == 3

    def test_one_of_returns_annotated(self) -> None:
        alias = one_of("Either", int, str)
        assert union_codec(alias).name == "Either"
