"""Pydantic wire models for every object of the Telegram Bot API 5.2.

Every class corresponds to one object documented in the *Available types*,
*Stickers*, *Inline mode*, *Payments*, *Telegram Passport* and *Games*
sections of https://core.telegram.org/bots/api.

Conventions shared by all models (see :class:`TelegramObject`):

* in-code field names are the documented wire names; the only exception is
  ``from``, a Python keyword, exposed as ``from_field``;
* optional fields default to ``None`` and are omitted when encoding;
* instances are immutable.

Fields whose documented type is "X or Y" use the tag-free unions declared
next to their variants (``ChatId``, ``FileOrPath``, ``ReplyMarkup``,
``InputMedia``, ``MediaGroupItem``, ``InputMessageContent``,
``InlineQueryResult``, ``PassportElementError``, ``MessageOrTrue``).
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field

from tgwire.codec import one_of, union_codec


class TelegramObject(BaseModel):
    """Base class of every wire model."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_wire(self) -> Dict[str, Any]:
        """Encode into a JSON-ready dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_wire(cls, data: Any) -> "TelegramObject":
        """Decode a JSON object (already parsed) into this model."""
        return cls.model_validate(data)

    @classmethod
    def wire_names(cls) -> Dict[str, str]:
        """Map in-code field names to their wire names."""
        return {name: field.alias or name for name, field in cls.model_fields.items()}


class _Constant(TelegramObject):
    """Base of models whose ``type`` or ``source`` field holds one fixed value.

    The constant is required on the wire, so decoding a mapping without it
    fails.  Constructing the model in code fills it in::

        InputMediaPhoto(media="file_id").type        # -> "photo"
        InputMediaPhoto.from_wire({"media": "x"})    # ValidationError
    """

    def __init__(self, **data: Any) -> None:
        for name, field in type(self).model_fields.items():
            if name not in data and get_origin(field.annotation) is Literal:
                data[name] = get_args(field.annotation)[0]
        super().__init__(**data)

    # Keep pydantic from routing model_validate() through __init__, as RootModel does.
    __init__.__pydantic_base_init__ = True  # type: ignore[attr-defined]


# ── Uploads and identifiers ──────────────────────────────────────────────────


class InputFile(TelegramObject):
    """Placeholder for the contents of a file to be uploaded.

    Carries no data: the bytes are attached by the HTTP transport as a
    multipart/form-data part.
    """


ChatId = one_of("ChatId", int, str)
FileOrPath = one_of("FileOrPath", InputFile, str)


# ── Getting updates ──────────────────────────────────────────────────────────


class Update(TelegramObject):
    """This object represents an incoming update. At most one of the optional parameters can be present in any given update."""

    update_id: int
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None
    inline_query: Optional[InlineQuery] = None
    chosen_inline_result: Optional[ChosenInlineResult] = None
    callback_query: Optional[CallbackQuery] = None
    shipping_query: Optional[ShippingQuery] = None
    pre_checkout_query: Optional[PreCheckoutQuery] = None
    poll: Optional[Poll] = None
    poll_answer: Optional[PollAnswer] = None
    my_chat_member: Optional[ChatMemberUpdated] = None
    chat_member: Optional[ChatMemberUpdated] = None


class WebhookInfo(TelegramObject):
    """Contains information about the current status of a webhook."""

    url: str
    has_custom_certificate: bool
    pending_update_count: int
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


# ── Available types ──────────────────────────────────────────────────────────


class User(TelegramObject):
    """This object represents a Telegram user or bot."""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None
    can_join_groups: Optional[bool] = None
    can_read_all_group_messages: Optional[bool] = None
    supports_inline_queries: Optional[bool] = None


class Chat(TelegramObject):
    """This object represents a chat."""

    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    photo: Optional[ChatPhoto] = None
    bio: Optional[str] = None
    description: Optional[str] = None
    invite_link: Optional[str] = None
    pinned_message: Optional[Message] = None
    permissions: Optional[ChatPermissions] = None
    slow_mode_delay: Optional[int] = None
    sticker_set_name: Optional[str] = None
    can_set_sticker_set: Optional[bool] = None
    linked_chat_id: Optional[int] = None
    location: Optional[ChatLocation] = None


class Message(TelegramObject):
    """This object represents a message.

    ``reply_to_message`` and ``pinned_message`` point back at this type; the
    API never nests them further than one level.
    """

    message_id: int
    from_field: Optional[User] = Field(None, alias="from")
    sender_chat: Optional[Chat] = None
    date: int
    chat: Chat
    forward_from: Optional[User] = None
    forward_from_chat: Optional[Chat] = None
    forward_from_message_id: Optional[int] = None
    forward_signature: Optional[str] = None
    forward_sender_name: Optional[str] = None
    forward_date: Optional[int] = None
    reply_to_message: Optional[Message] = None
    via_bot: Optional[User] = None
    edit_date: Optional[int] = None
    media_group_id: Optional[str] = None
    author_signature: Optional[str] = None
    text: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None
    audio: Optional[Audio] = None
    document: Optional[Document] = None
    photo: Optional[List[PhotoSize]] = None
    sticker: Optional[Sticker] = None
    video: Optional[Video] = None
    video_note: Optional[VideoNote] = None
    voice: Optional[Voice] = None
    caption: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    contact: Optional[Contact] = None
    dice: Optional[Dice] = None
    game: Optional[Game] = None
    poll: Optional[Poll] = None
    venue: Optional[Venue] = None
    location: Optional[Location] = None
    new_chat_members: Optional[List[User]] = None
    left_chat_member: Optional[User] = None
    new_chat_title: Optional[str] = None
    new_chat_photo: Optional[List[PhotoSize]] = None
    delete_chat_photo: Optional[bool] = None
    group_chat_created: Optional[bool] = None
    supergroup_chat_created: Optional[bool] = None
    channel_chat_created: Optional[bool] = None
    message_auto_delete_timer_changed: Optional[MessageAutoDeleteTimerChanged] = None
    migrate_to_chat_id: Optional[int] = None
    migrate_from_chat_id: Optional[int] = None
    pinned_message: Optional[Message] = None
    invoice: Optional[Invoice] = None
    successful_payment: Optional[SuccessfulPayment] = None
    connected_website: Optional[str] = None
    passport_data: Optional[PassportData] = None
    proximity_alert_triggered: Optional[ProximityAlertTriggered] = None
    voice_chat_scheduled: Optional[VoiceChatScheduled] = None
    voice_chat_started: Optional[VoiceChatStarted] = None
    voice_chat_ended: Optional[VoiceChatEnded] = None
    voice_chat_participants_invited: Optional[VoiceChatParticipantsInvited] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class MessageId(TelegramObject):
    """This object represents a unique message identifier."""

    message_id: int


class MessageEntity(TelegramObject):
    """This object represents one special entity in a text message. For example, hashtags, usernames, URLs, etc."""

    type: str
    offset: int
    length: int
    url: Optional[str] = None
    user: Optional[User] = None
    language: Optional[str] = None


class PhotoSize(TelegramObject):
    """This object represents one size of a photo or a file / sticker thumbnail."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(TelegramObject):
    """This object represents an animation file (GIF or H.264/MPEG-4 AVC video without sound)."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(TelegramObject):
    """This object represents an audio file to be treated as music by the Telegram clients."""

    file_id: str
    file_unique_id: str
    duration: int
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumb: Optional[PhotoSize] = None


class Document(TelegramObject):
    """This object represents a general file (as opposed to photos, voice messages and audio files)."""

    file_id: str
    file_unique_id: str
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(TelegramObject):
    """This object represents a video file."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(TelegramObject):
    """This object represents a video message."""

    file_id: str
    file_unique_id: str
    length: int
    duration: int
    thumb: Optional[PhotoSize] = None
    file_size: Optional[int] = None


class Voice(TelegramObject):
    """This object represents a voice note."""

    file_id: str
    file_unique_id: str
    duration: int
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Contact(TelegramObject):
    """This object represents a phone contact."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    user_id: Optional[int] = None
    vcard: Optional[str] = None


class Dice(TelegramObject):
    """This object represents an animated emoji that displays a random value."""

    emoji: str
    value: int


class PollOption(TelegramObject):
    """This object contains information about one answer option in a poll."""

    text: str
    voter_count: int


class PollAnswer(TelegramObject):
    """This object represents an answer of a user in a non-anonymous poll."""

    poll_id: str
    user: User
    option_ids: List[int]


class Poll(TelegramObject):
    """This object contains information about a poll."""

    id: str
    question: str
    options: List[PollOption]
    total_voter_count: int
    is_closed: bool
    is_anonymous: bool
    type: str
    allows_multiple_answers: bool
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_entities: Optional[List[MessageEntity]] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None


class Location(TelegramObject):
    """This object represents a point on the map."""

    longitude: float
    latitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class Venue(TelegramObject):
    """This object represents a venue."""

    location: Location
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class ProximityAlertTriggered(TelegramObject):
    """Service message: a user in the chat triggered another user's proximity alert."""

    traveler: User
    watcher: User
    distance: int


class MessageAutoDeleteTimerChanged(TelegramObject):
    """Service message: the auto-delete timer settings of the chat changed."""

    message_auto_delete_time: int


class VoiceChatScheduled(TelegramObject):
    """Service message: a voice chat was scheduled."""

    start_date: int


class VoiceChatStarted(TelegramObject):
    """Service message: a voice chat started. Holds no information."""


class VoiceChatEnded(TelegramObject):
    """Service message: a voice chat ended."""

    duration: int


class VoiceChatParticipantsInvited(TelegramObject):
    """Service message: new participants were invited to a voice chat."""

    users: Optional[List[User]] = None


class UserProfilePhotos(TelegramObject):
    """This object represent a user's profile pictures."""

    total_count: int
    photos: List[List[PhotoSize]]


class File(TelegramObject):
    """A file ready to be downloaded via ``https://api.telegram.org/file/bot<token>/<file_path>``."""

    file_id: str
    file_unique_id: str
    file_size: Optional[int] = None
    file_path: Optional[str] = None


# ── Keyboards ────────────────────────────────────────────────────────────────


class ReplyKeyboardMarkup(TelegramObject):
    """This object represents a custom keyboard with reply options."""

    keyboard: List[List[KeyboardButton]]
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    selective: Optional[bool] = None


class KeyboardButton(TelegramObject):
    """This object represents one button of the reply keyboard."""

    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None
    request_poll: Optional[KeyboardButtonPollType] = None


class KeyboardButtonPollType(TelegramObject):
    """The type of poll allowed to be created when the button is pressed."""

    type: Optional[str] = None


class ReplyKeyboardRemove(TelegramObject):
    """Asks clients to remove the current custom keyboard."""

    remove_keyboard: bool
    selective: Optional[bool] = None


class InlineKeyboardMarkup(TelegramObject):
    """This object represents an inline keyboard that appears right next to the message it belongs to."""

    inline_keyboard: List[List[InlineKeyboardButton]]


class InlineKeyboardButton(TelegramObject):
    """This object represents one button of an inline keyboard. Exactly one of the optional fields must be used."""

    text: str
    url: Optional[str] = None
    login_url: Optional[LoginUrl] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None
    callback_game: Optional[CallbackGame] = None
    pay: Optional[bool] = None


class LoginUrl(TelegramObject):
    """Parameter of an inline keyboard button used to automatically authorize a user."""

    url: str
    forward_text: Optional[str] = None
    bot_username: Optional[str] = None
    request_write_access: Optional[bool] = None


class CallbackQuery(TelegramObject):
    """This object represents an incoming callback query from a callback button in an inline keyboard."""

    id: str
    from_field: User = Field(..., alias="from")
    message: Optional[Message] = None
    inline_message_id: Optional[str] = None
    chat_instance: str
    data: Optional[str] = None
    game_short_name: Optional[str] = None


class ForceReply(TelegramObject):
    """Asks clients to display a reply interface to the user."""

    force_reply: bool
    selective: Optional[bool] = None


ReplyMarkup = one_of(
    "ReplyMarkup",
    InlineKeyboardMarkup,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
    ForceReply,
)


# ── Chats ────────────────────────────────────────────────────────────────────


class ChatPhoto(TelegramObject):
    """This object represents a chat photo."""

    small_file_id: str
    small_file_unique_id: str
    big_file_id: str
    big_file_unique_id: str


class ChatInviteLink(TelegramObject):
    """Represents an invite link for a chat."""

    invite_link: str
    creator: User
    is_primary: bool
    is_revoked: bool
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None


class ChatMember(TelegramObject):
    """This object contains information about one member of a chat."""

    user: User
    status: str
    custom_title: Optional[str] = None
    is_anonymous: Optional[bool] = None
    can_be_edited: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_voice_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None
    is_member: Optional[bool] = None
    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    until_date: Optional[int] = None


class ChatMemberUpdated(TelegramObject):
    """This object represents changes in the status of a chat member."""

    chat: Chat
    from_field: User = Field(..., alias="from")
    date: int
    old_chat_member: ChatMember
    new_chat_member: ChatMember
    invite_link: Optional[ChatInviteLink] = None


class ChatPermissions(TelegramObject):
    """Describes actions that a non-administrator user is allowed to take in a chat."""

    can_send_messages: Optional[bool] = None
    can_send_media_messages: Optional[bool] = None
    can_send_polls: Optional[bool] = None
    can_send_other_messages: Optional[bool] = None
    can_add_web_page_previews: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class ChatLocation(TelegramObject):
    """Represents a location to which a chat is connected."""

    location: Location
    address: str


class BotCommand(TelegramObject):
    """This object represents a bot command."""

    command: str
    description: str


class ResponseParameters(TelegramObject):
    """Contains information about why a request was unsuccessful."""

    migrate_to_chat_id: Optional[int] = None
    retry_after: Optional[int] = None


# ── Input media ──────────────────────────────────────────────────────────────


class InputMediaPhoto(_Constant):
    """Represents a photo to be sent."""

    type: Literal["photo"]
    media: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None


class InputMediaVideo(_Constant):
    """Represents a video to be sent."""

    type: Literal["video"]
    media: str
    thumb: Optional[FileOrPath] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None


class InputMediaAnimation(_Constant):
    """Represents an animation file (GIF or H.264/MPEG-4 AVC video without sound) to be sent."""

    type: Literal["animation"]
    media: str
    thumb: Optional[FileOrPath] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None


class InputMediaAudio(_Constant):
    """Represents an audio file to be treated as music to be sent."""

    type: Literal["audio"]
    media: str
    thumb: Optional[FileOrPath] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None


class InputMediaDocument(_Constant):
    """Represents a general file to be sent."""

    type: Literal["document"]
    media: str
    thumb: Optional[FileOrPath] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_content_type_detection: Optional[bool] = None


InputMedia = one_of(
    "InputMedia",
    InputMediaAnimation,
    InputMediaDocument,
    InputMediaAudio,
    InputMediaPhoto,
    InputMediaVideo,
)

# Album members accepted by sendMediaGroup.
MediaGroupItem = one_of(
    "MediaGroupItem",
    InputMediaAudio,
    InputMediaDocument,
    InputMediaPhoto,
    InputMediaVideo,
)


# ── Stickers ─────────────────────────────────────────────────────────────────


class Sticker(TelegramObject):
    """This object represents a sticker."""

    file_id: str
    file_unique_id: str
    width: int
    height: int
    is_animated: bool
    thumb: Optional[PhotoSize] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    mask_position: Optional[MaskPosition] = None
    file_size: Optional[int] = None


class StickerSet(TelegramObject):
    """This object represents a sticker set."""

    name: str
    title: str
    is_animated: bool
    contains_masks: bool
    stickers: List[Sticker]
    thumb: Optional[PhotoSize] = None


class MaskPosition(TelegramObject):
    """This object describes the position on faces where a mask should be placed by default."""

    point: str
    x_shift: float
    y_shift: float
    scale: float


# ── Inline mode ──────────────────────────────────────────────────────────────


class InlineQuery(TelegramObject):
    """This object represents an incoming inline query."""

    id: str
    from_field: User = Field(..., alias="from")
    query: str
    offset: str
    chat_type: Optional[str] = None
    location: Optional[Location] = None


class _MessageContent(TelegramObject):
    # Input message contents never come back from the API, so unknown keys
    # are rejected; this keeps a venue from decoding as a bare location.
    model_config = ConfigDict(extra="forbid")


class InputTextMessageContent(_MessageContent):
    """Represents the content of a text message to be sent as the result of an inline query."""

    message_text: str
    parse_mode: Optional[str] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None


class InputLocationMessageContent(_MessageContent):
    """Represents the content of a location message to be sent as the result of an inline query."""

    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class InputVenueMessageContent(_MessageContent):
    """Represents the content of a venue message to be sent as the result of an inline query."""

    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class InputContactMessageContent(_MessageContent):
    """Represents the content of a contact message to be sent as the result of an inline query."""

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class InputInvoiceMessageContent(_MessageContent):
    """Represents the content of an invoice message to be sent as the result of an inline query."""

    title: str
    description: str
    payload: str
    provider_token: str
    currency: str
    prices: List[LabeledPrice]
    max_tip_amount: Optional[int] = None
    suggested_tip_amounts: Optional[List[int]] = None
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None


InputMessageContent = one_of(
    "InputMessageContent",
    InputTextMessageContent,
    InputLocationMessageContent,
    InputVenueMessageContent,
    InputContactMessageContent,
    InputInvoiceMessageContent,
)


class InlineQueryResultArticle(_Constant):
    """Represents a link to an article or web page."""

    type: Literal["article"]
    id: str
    title: str
    input_message_content: InputMessageContent
    reply_markup: Optional[InlineKeyboardMarkup] = None
    url: Optional[str] = None
    hide_url: Optional[bool] = None
    description: Optional[str] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultPhoto(_Constant):
    """Represents a link to a photo."""

    type: Literal["photo"]
    id: str
    photo_url: str
    thumb_url: str
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultGif(_Constant):
    """Represents a link to an animated GIF file."""

    type: Literal["gif"]
    id: str
    gif_url: str
    gif_width: Optional[int] = None
    gif_height: Optional[int] = None
    gif_duration: Optional[int] = None
    thumb_url: str
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultMpeg4Gif(_Constant):
    """Represents a link to a video animation (H.264/MPEG-4 AVC video without sound)."""

    type: Literal["mpeg4_gif"]
    id: str
    mpeg4_url: str
    mpeg4_width: Optional[int] = None
    mpeg4_height: Optional[int] = None
    mpeg4_duration: Optional[int] = None
    thumb_url: str
    thumb_mime_type: Optional[str] = None
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVideo(_Constant):
    """Represents a link to a page containing an embedded video player or a video file."""

    type: Literal["video"]
    id: str
    video_url: str
    mime_type: str
    thumb_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    video_width: Optional[int] = None
    video_height: Optional[int] = None
    video_duration: Optional[int] = None
    description: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultAudio(_Constant):
    """Represents a link to an MP3 audio file."""

    type: Literal["audio"]
    id: str
    audio_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    performer: Optional[str] = None
    audio_duration: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultVoice(_Constant):
    """Represents a link to a voice recording in an .OGG container encoded with OPUS."""

    type: Literal["voice"]
    id: str
    voice_url: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    voice_duration: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultDocument(_Constant):
    """Represents a link to a file. Currently, only .PDF and .ZIP files can be sent using this method."""

    type: Literal["document"]
    id: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    document_url: str
    mime_type: str
    description: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultLocation(_Constant):
    """Represents a location on a map."""

    type: Literal["location"]
    id: str
    latitude: float
    longitude: float
    title: str
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultVenue(_Constant):
    """Represents a venue."""

    type: Literal["venue"]
    id: str
    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultContact(_Constant):
    """Represents a contact with a phone number."""

    type: Literal["contact"]
    id: str
    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None
    thumb_url: Optional[str] = None
    thumb_width: Optional[int] = None
    thumb_height: Optional[int] = None


class InlineQueryResultGame(_Constant):
    """Represents a Game."""

    type: Literal["game"]
    id: str
    game_short_name: str
    reply_markup: Optional[InlineKeyboardMarkup] = None


class InlineQueryResultCachedPhoto(_Constant):
    """Represents a link to a photo stored on the Telegram servers."""

    type: Literal["photo"]
    id: str
    photo_file_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedGif(_Constant):
    """Represents a link to an animated GIF file stored on the Telegram servers."""

    type: Literal["gif"]
    id: str
    gif_file_id: str
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedMpeg4Gif(_Constant):
    """Represents a link to a video animation stored on the Telegram servers."""

    type: Literal["mpeg4_gif"]
    id: str
    mpeg4_file_id: str
    title: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedSticker(_Constant):
    """Represents a link to a sticker stored on the Telegram servers."""

    type: Literal["sticker"]
    id: str
    sticker_file_id: str
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedDocument(_Constant):
    """Represents a link to a file stored on the Telegram servers."""

    type: Literal["document"]
    id: str
    title: str
    document_file_id: str
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedVideo(_Constant):
    """Represents a link to a video file stored on the Telegram servers."""

    type: Literal["video"]
    id: str
    video_file_id: str
    title: str
    description: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedVoice(_Constant):
    """Represents a link to a voice message stored on the Telegram servers."""

    type: Literal["voice"]
    id: str
    voice_file_id: str
    title: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


class InlineQueryResultCachedAudio(_Constant):
    """Represents a link to an MP3 audio file stored on the Telegram servers."""

    type: Literal["audio"]
    id: str
    audio_file_id: str
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None
    input_message_content: Optional[InputMessageContent] = None


# Cached results share their ``type`` with the URL-based ones and come first,
# so a value carrying both a file_id and a URL decodes as the cached variant.
InlineQueryResult = one_of(
    "InlineQueryResult",
    InlineQueryResultCachedAudio,
    InlineQueryResultCachedDocument,
    InlineQueryResultCachedGif,
    InlineQueryResultCachedMpeg4Gif,
    InlineQueryResultCachedPhoto,
    InlineQueryResultCachedSticker,
    InlineQueryResultCachedVideo,
    InlineQueryResultCachedVoice,
    InlineQueryResultArticle,
    InlineQueryResultAudio,
    InlineQueryResultContact,
    InlineQueryResultGame,
    InlineQueryResultDocument,
    InlineQueryResultGif,
    InlineQueryResultLocation,
    InlineQueryResultMpeg4Gif,
    InlineQueryResultPhoto,
    InlineQueryResultVenue,
    InlineQueryResultVideo,
    InlineQueryResultVoice,
)


class ChosenInlineResult(TelegramObject):
    """Represents a result of an inline query that was chosen by the user and sent to their chat partner."""

    result_id: str
    from_field: User = Field(..., alias="from")
    location: Optional[Location] = None
    inline_message_id: Optional[str] = None
    query: str


# ── Payments ─────────────────────────────────────────────────────────────────


class LabeledPrice(TelegramObject):
    """This object represents a portion of the price for goods or services."""

    label: str
    amount: int


class Invoice(TelegramObject):
    """This object contains basic information about an invoice."""

    title: str
    description: str
    start_parameter: str
    currency: str
    total_amount: int


class ShippingAddress(TelegramObject):
    """This object represents a shipping address."""

    country_code: str
    state: str
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramObject):
    """This object represents information about an order."""

    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None


class ShippingOption(TelegramObject):
    """This object represents one shipping option."""

    id: str
    title: str
    prices: List[LabeledPrice]


class SuccessfulPayment(TelegramObject):
    """This object contains basic information about a successful payment."""

    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None
    telegram_payment_charge_id: str
    provider_payment_charge_id: str


class ShippingQuery(TelegramObject):
    """This object contains information about an incoming shipping query."""

    id: str
    from_field: User = Field(..., alias="from")
    invoice_payload: str
    shipping_address: ShippingAddress


class PreCheckoutQuery(TelegramObject):
    """This object contains information about an incoming pre-checkout query."""

    id: str
    from_field: User = Field(..., alias="from")
    currency: str
    total_amount: int
    invoice_payload: str
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None


# ── Telegram Passport ────────────────────────────────────────────────────────


class PassportData(TelegramObject):
    """Contains information about Telegram Passport data shared with the bot by the user."""

    data: List[EncryptedPassportElement]
    credentials: EncryptedCredentials


class PassportFile(TelegramObject):
    """A file uploaded to Telegram Passport (JPEG when decrypted, at most 10MB)."""

    file_id: str
    file_unique_id: str
    file_size: int
    file_date: int


class EncryptedPassportElement(TelegramObject):
    """Contains information about documents or other Telegram Passport elements shared with the bot by the user."""

    type: str
    data: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    files: Optional[List[PassportFile]] = None
    front_side: Optional[PassportFile] = None
    reverse_side: Optional[PassportFile] = None
    selfie: Optional[PassportFile] = None
    translation: Optional[List[PassportFile]] = None
    hash: str


class EncryptedCredentials(TelegramObject):
    """Contains data required for decrypting and authenticating EncryptedPassportElement."""

    data: str
    hash: str
    secret: str


class PassportElementErrorDataField(_Constant):
    """Represents an issue in one of the data fields that was provided by the user."""

    source: Literal["data"]
    type: str
    field_name: str
    data_hash: str
    message: str


class PassportElementErrorFrontSide(_Constant):
    """Represents an issue with the front side of a document."""

    source: Literal["front_side"]
    type: str
    file_hash: str
    message: str


class PassportElementErrorReverseSide(_Constant):
    """Represents an issue with the reverse side of a document."""

    source: Literal["reverse_side"]
    type: str
    file_hash: str
    message: str


class PassportElementErrorSelfie(_Constant):
    """Represents an issue with the selfie with a document."""

    source: Literal["selfie"]
    type: str
    file_hash: str
    message: str


class PassportElementErrorFile(_Constant):
    """Represents an issue with a document scan."""

    source: Literal["file"]
    type: str
    file_hash: str
    message: str


class PassportElementErrorFiles(_Constant):
    """Represents an issue with a list of scans."""

    source: Literal["files"]
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorTranslationFile(_Constant):
    """Represents an issue with one of the files that constitute the translation of a document."""

    source: Literal["translation_file"]
    type: str
    file_hash: str
    message: str


class PassportElementErrorTranslationFiles(_Constant):
    """Represents an issue with the translated version of a document."""

    source: Literal["translation_files"]
    type: str
    file_hashes: List[str]
    message: str


class PassportElementErrorUnspecified(_Constant):
    """Represents an issue in an unspecified place."""

    source: Literal["unspecified"]
    type: str
    element_hash: str
    message: str


PassportElementError = one_of(
    "PassportElementError",
    PassportElementErrorDataField,
    PassportElementErrorFrontSide,
    PassportElementErrorReverseSide,
    PassportElementErrorSelfie,
    PassportElementErrorFile,
    PassportElementErrorFiles,
    PassportElementErrorTranslationFile,
    PassportElementErrorTranslationFiles,
    PassportElementErrorUnspecified,
)


# ── Games ────────────────────────────────────────────────────────────────────


class Game(TelegramObject):
    """This object represents a game."""

    title: str
    description: str
    photo: List[PhotoSize]
    text: Optional[str] = None
    text_entities: Optional[List[MessageEntity]] = None
    animation: Optional[Animation] = None


class CallbackGame(TelegramObject):
    """A placeholder, currently holds no information."""


class GameHighScore(TelegramObject):
    """This object represents one row of the high scores table for a game."""

    position: int
    user: User
    score: int


# Result of edit* methods: the edited Message, or True for inline messages.
MessageOrTrue = one_of("MessageOrTrue", Message, bool)


def wire_models() -> Dict[str, type]:
    """Return every concrete wire model class keyed by its Bot API name."""
    return {
        name: obj
        for name, obj in globals().items()
        if isinstance(obj, type)
        and issubclass(obj, TelegramObject)
        and not name.startswith("_")
        and obj is not TelegramObject
    }


def wire_unions() -> Dict[str, Any]:
    """Return every tag-free union alias keyed by its name."""
    unions: Dict[str, Any] = {}
    for alias in list(globals().values()):
        codec = union_codec(alias)
        if codec is not None:
            unions[codec.name] = alias
    return unions


for _model in wire_models().values():
    _model.model_rebuild()
