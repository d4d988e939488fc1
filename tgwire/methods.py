"""Request builders, one per Telegram Bot API 5.2 method.

Each function takes the method's documented parameters and returns a
:class:`~tgwire.request.Request`; nothing is sent.  Required parameters come
first and may be passed positionally, optional ones are keyword-only and
left out of the body when ``None``::

    >>> send_message(12345, "hi")
    Request(method='sendMessage', body={'chat_id': 12345, 'text': 'hi'})

Builders perform no validation: constraints such as text length or mutually
exclusive parameters are enforced by the Bot API server.
"""

from __future__ import annotations

from typing import List, Optional

from tgwire.models import (
    BotCommand,
    Chat,
    ChatId,
    ChatInviteLink,
    ChatMember,
    ChatPermissions,
    File,
    FileOrPath,
    GameHighScore,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InputFile,
    InputMedia,
    LabeledPrice,
    MaskPosition,
    MediaGroupItem,
    Message,
    MessageEntity,
    MessageId,
    MessageOrTrue,
    PassportElementError,
    Poll,
    ReplyMarkup,
    ShippingOption,
    StickerSet,
    Update,
    User,
    UserProfilePhotos,
    WebhookInfo,
)
from tgwire.registry import registry
from tgwire.request import Request


# ── Getting updates ──────────────────────────────────────────────────────────


@registry.register("getUpdates", returns=List[Update])
def get_updates(
    *,
    offset: Optional[int] = None,
    limit: Optional[int] = None,
    timeout: Optional[int] = None,
    allowed_updates: Optional[List[str]] = None,
) -> Request:
    """Receive incoming updates using long polling. Returns an Array of Update objects."""
    return Request.build(
        "getUpdates",
        offset=offset,
        limit=limit,
        timeout=timeout,
        allowed_updates=allowed_updates,
    )


@registry.register("setWebhook", returns=bool)
def set_webhook(
    url: str,
    *,
    certificate: Optional[InputFile] = None,
    ip_address: Optional[str] = None,
    max_connections: Optional[int] = None,
    allowed_updates: Optional[List[str]] = None,
    drop_pending_updates: Optional[bool] = None,
) -> Request:
    """Specify a url and receive incoming updates via an outgoing webhook."""
    return Request.build(
        "setWebhook",
        url=url,
        certificate=certificate,
        ip_address=ip_address,
        max_connections=max_connections,
        allowed_updates=allowed_updates,
        drop_pending_updates=drop_pending_updates,
    )


@registry.register("deleteWebhook", returns=bool)
def delete_webhook(*, drop_pending_updates: Optional[bool] = None) -> Request:
    """Remove webhook integration if you decide to switch back to getUpdates."""
    return Request.build("deleteWebhook", drop_pending_updates=drop_pending_updates)


@registry.register("getWebhookInfo", returns=WebhookInfo)
def get_webhook_info() -> Request:
    """Get current webhook status."""
    return Request.build("getWebhookInfo")


# ── Bot identity and lifecycle ───────────────────────────────────────────────


@registry.register("getMe", returns=User)
def get_me() -> Request:
    """A simple method for testing your bot's auth token."""
    return Request.build("getMe")


@registry.register("logOut", returns=bool)
def log_out() -> Request:
    """Log out from the cloud Bot API server before launching the bot locally."""
    return Request.build("logOut")


@registry.register("close", returns=bool)
def close() -> Request:
    """Close the bot instance before moving it from one local server to another."""
    return Request.build("close")


# ── Sending messages ─────────────────────────────────────────────────────────


@registry.register("sendMessage", returns=Message)
def send_message(
    chat_id: ChatId,
    text: str,
    *,
    parse_mode: Optional[str] = None,
    entities: Optional[List[MessageEntity]] = None,
    disable_web_page_preview: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send text messages. On success, the sent Message is returned."""
    return Request.build(
        "sendMessage",
        chat_id=chat_id,
        text=text,
        parse_mode=parse_mode,
        entities=entities,
        disable_web_page_preview=disable_web_page_preview,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("forwardMessage", returns=Message)
def forward_message(
    chat_id: ChatId,
    from_chat_id: ChatId,
    message_id: int,
    *,
    disable_notification: Optional[bool] = None,
) -> Request:
    """Forward messages of any kind. On success, the sent Message is returned."""
    return Request.build(
        "forwardMessage",
        chat_id=chat_id,
        from_chat_id=from_chat_id,
        message_id=message_id,
        disable_notification=disable_notification,
    )


@registry.register("copyMessage", returns=MessageId)
def copy_message(
    chat_id: ChatId,
    from_chat_id: ChatId,
    message_id: int,
    *,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Copy messages of any kind. Returns the MessageId of the sent message."""
    return Request.build(
        "copyMessage",
        chat_id=chat_id,
        from_chat_id=from_chat_id,
        message_id=message_id,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendPhoto", returns=Message)
def send_photo(
    chat_id: ChatId,
    photo: FileOrPath,
    *,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send photos. On success, the sent Message is returned."""
    return Request.build(
        "sendPhoto",
        chat_id=chat_id,
        photo=photo,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendAudio", returns=Message)
def send_audio(
    chat_id: ChatId,
    audio: FileOrPath,
    *,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    duration: Optional[int] = None,
    performer: Optional[str] = None,
    title: Optional[str] = None,
    thumb: Optional[FileOrPath] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send audio files to be displayed in the music player (.MP3 or .M4A)."""
    return Request.build(
        "sendAudio",
        chat_id=chat_id,
        audio=audio,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        duration=duration,
        performer=performer,
        title=title,
        thumb=thumb,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendDocument", returns=Message)
def send_document(
    chat_id: ChatId,
    document: FileOrPath,
    *,
    thumb: Optional[FileOrPath] = None,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_content_type_detection: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send general files. Bots can currently send files of any type of up to 50 MB in size."""
    return Request.build(
        "sendDocument",
        chat_id=chat_id,
        document=document,
        thumb=thumb,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        disable_content_type_detection=disable_content_type_detection,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendVideo", returns=Message)
def send_video(
    chat_id: ChatId,
    video: FileOrPath,
    *,
    duration: Optional[int] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    thumb: Optional[FileOrPath] = None,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    supports_streaming: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send video files; Telegram clients support mp4 videos."""
    return Request.build(
        "sendVideo",
        chat_id=chat_id,
        video=video,
        duration=duration,
        width=width,
        height=height,
        thumb=thumb,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        supports_streaming=supports_streaming,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendAnimation", returns=Message)
def send_animation(
    chat_id: ChatId,
    animation: FileOrPath,
    *,
    duration: Optional[int] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    thumb: Optional[FileOrPath] = None,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send animation files (GIF or H.264/MPEG-4 AVC video without sound)."""
    return Request.build(
        "sendAnimation",
        chat_id=chat_id,
        animation=animation,
        duration=duration,
        width=width,
        height=height,
        thumb=thumb,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendVoice", returns=Message)
def send_voice(
    chat_id: ChatId,
    voice: FileOrPath,
    *,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    duration: Optional[int] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send audio files to be displayed as a playable voice message (.OGG encoded with OPUS)."""
    return Request.build(
        "sendVoice",
        chat_id=chat_id,
        voice=voice,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        duration=duration,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendVideoNote", returns=Message)
def send_video_note(
    chat_id: ChatId,
    video_note: FileOrPath,
    *,
    duration: Optional[int] = None,
    length: Optional[int] = None,
    thumb: Optional[FileOrPath] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send rounded square mp4 videos of up to 1 minute long."""
    return Request.build(
        "sendVideoNote",
        chat_id=chat_id,
        video_note=video_note,
        duration=duration,
        length=length,
        thumb=thumb,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendMediaGroup", returns=List[Message])
def send_media_group(
    chat_id: ChatId,
    media: List[MediaGroupItem],
    *,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
) -> Request:
    """Send a group of photos, videos, documents or audios as an album."""
    return Request.build(
        "sendMediaGroup",
        chat_id=chat_id,
        media=media,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
    )


@registry.register("sendLocation", returns=Message)
def send_location(
    chat_id: ChatId,
    latitude: float,
    longitude: float,
    *,
    horizontal_accuracy: Optional[float] = None,
    live_period: Optional[int] = None,
    heading: Optional[int] = None,
    proximity_alert_radius: Optional[int] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send point on the map. On success, the sent Message is returned."""
    return Request.build(
        "sendLocation",
        chat_id=chat_id,
        latitude=latitude,
        longitude=longitude,
        horizontal_accuracy=horizontal_accuracy,
        live_period=live_period,
        heading=heading,
        proximity_alert_radius=proximity_alert_radius,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("editMessageLiveLocation", returns=MessageOrTrue)
def edit_message_live_location(
    latitude: float,
    longitude: float,
    *,
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    horizontal_accuracy: Optional[float] = None,
    heading: Optional[int] = None,
    proximity_alert_radius: Optional[int] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Edit live location messages."""
    return Request.build(
        "editMessageLiveLocation",
        latitude=latitude,
        longitude=longitude,
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        horizontal_accuracy=horizontal_accuracy,
        heading=heading,
        proximity_alert_radius=proximity_alert_radius,
        reply_markup=reply_markup,
    )


@registry.register("stopMessageLiveLocation", returns=MessageOrTrue)
def stop_message_live_location(
    *,
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Stop updating a live location message before live_period expires."""
    return Request.build(
        "stopMessageLiveLocation",
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        reply_markup=reply_markup,
    )


@registry.register("sendVenue", returns=Message)
def send_venue(
    chat_id: ChatId,
    latitude: float,
    longitude: float,
    title: str,
    address: str,
    *,
    foursquare_id: Optional[str] = None,
    foursquare_type: Optional[str] = None,
    google_place_id: Optional[str] = None,
    google_place_type: Optional[str] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send information about a venue. On success, the sent Message is returned."""
    return Request.build(
        "sendVenue",
        chat_id=chat_id,
        latitude=latitude,
        longitude=longitude,
        title=title,
        address=address,
        foursquare_id=foursquare_id,
        foursquare_type=foursquare_type,
        google_place_id=google_place_id,
        google_place_type=google_place_type,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendContact", returns=Message)
def send_contact(
    chat_id: ChatId,
    phone_number: str,
    first_name: str,
    *,
    last_name: Optional[str] = None,
    vcard: Optional[str] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send phone contacts. On success, the sent Message is returned."""
    return Request.build(
        "sendContact",
        chat_id=chat_id,
        phone_number=phone_number,
        first_name=first_name,
        last_name=last_name,
        vcard=vcard,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendPoll", returns=Message)
def send_poll(
    chat_id: ChatId,
    question: str,
    options: List[str],
    *,
    is_anonymous: Optional[bool] = None,
    type: Optional[str] = None,
    allows_multiple_answers: Optional[bool] = None,
    correct_option_id: Optional[int] = None,
    explanation: Optional[str] = None,
    explanation_parse_mode: Optional[str] = None,
    explanation_entities: Optional[List[MessageEntity]] = None,
    open_period: Optional[int] = None,
    close_date: Optional[int] = None,
    is_closed: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send a native poll. On success, the sent Message is returned."""
    return Request.build(
        "sendPoll",
        chat_id=chat_id,
        question=question,
        options=options,
        is_anonymous=is_anonymous,
        type=type,
        allows_multiple_answers=allows_multiple_answers,
        correct_option_id=correct_option_id,
        explanation=explanation,
        explanation_parse_mode=explanation_parse_mode,
        explanation_entities=explanation_entities,
        open_period=open_period,
        close_date=close_date,
        is_closed=is_closed,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendDice", returns=Message)
def send_dice(
    chat_id: ChatId,
    *,
    emoji: Optional[str] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send an animated emoji that will display a random value."""
    return Request.build(
        "sendDice",
        chat_id=chat_id,
        emoji=emoji,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("sendChatAction", returns=bool)
def send_chat_action(chat_id: ChatId, action: str) -> Request:
    """Tell the user that something is happening on the bot's side."""
    return Request.build("sendChatAction", chat_id=chat_id, action=action)


# ── Users and files ──────────────────────────────────────────────────────────


@registry.register("getUserProfilePhotos", returns=UserProfilePhotos)
def get_user_profile_photos(
    user_id: int,
    *,
    offset: Optional[int] = None,
    limit: Optional[int] = None,
) -> Request:
    """Get a list of profile pictures for a user."""
    return Request.build("getUserProfilePhotos", user_id=user_id, offset=offset, limit=limit)


@registry.register("getFile", returns=File)
def get_file(file_id: str) -> Request:
    """Get basic info about a file and prepare it for downloading."""
    return Request.build("getFile", file_id=file_id)


# ── Chat administration ──────────────────────────────────────────────────────


@registry.register("kickChatMember", returns=bool)
def kick_chat_member(
    chat_id: ChatId,
    user_id: int,
    *,
    until_date: Optional[int] = None,
    revoke_messages: Optional[bool] = None,
) -> Request:
    """Kick a user from a group, a supergroup or a channel."""
    return Request.build(
        "kickChatMember",
        chat_id=chat_id,
        user_id=user_id,
        until_date=until_date,
        revoke_messages=revoke_messages,
    )


@registry.register("unbanChatMember", returns=bool)
def unban_chat_member(chat_id: ChatId, user_id: int, *, only_if_banned: Optional[bool] = None) -> Request:
    """Unban a previously kicked user in a supergroup or channel."""
    return Request.build("unbanChatMember", chat_id=chat_id, user_id=user_id, only_if_banned=only_if_banned)


@registry.register("restrictChatMember", returns=bool)
def restrict_chat_member(
    chat_id: ChatId,
    user_id: int,
    permissions: ChatPermissions,
    *,
    until_date: Optional[int] = None,
) -> Request:
    """Restrict a user in a supergroup."""
    return Request.build(
        "restrictChatMember",
        chat_id=chat_id,
        user_id=user_id,
        permissions=permissions,
        until_date=until_date,
    )


@registry.register("promoteChatMember", returns=bool)
def promote_chat_member(
    chat_id: ChatId,
    user_id: int,
    *,
    is_anonymous: Optional[bool] = None,
    can_manage_chat: Optional[bool] = None,
    can_post_messages: Optional[bool] = None,
    can_edit_messages: Optional[bool] = None,
    can_delete_messages: Optional[bool] = None,
    can_manage_voice_chats: Optional[bool] = None,
    can_restrict_members: Optional[bool] = None,
    can_promote_members: Optional[bool] = None,
    can_change_info: Optional[bool] = None,
    can_invite_users: Optional[bool] = None,
    can_pin_messages: Optional[bool] = None,
) -> Request:
    """Promote or demote a user in a supergroup or a channel."""
    return Request.build(
        "promoteChatMember",
        chat_id=chat_id,
        user_id=user_id,
        is_anonymous=is_anonymous,
        can_manage_chat=can_manage_chat,
        can_post_messages=can_post_messages,
        can_edit_messages=can_edit_messages,
        can_delete_messages=can_delete_messages,
        can_manage_voice_chats=can_manage_voice_chats,
        can_restrict_members=can_restrict_members,
        can_promote_members=can_promote_members,
        can_change_info=can_change_info,
        can_invite_users=can_invite_users,
        can_pin_messages=can_pin_messages,
    )


@registry.register("setChatAdministratorCustomTitle", returns=bool)
def set_chat_administrator_custom_title(chat_id: ChatId, user_id: int, custom_title: str) -> Request:
    """Set a custom title for an administrator in a supergroup promoted by the bot."""
    return Request.build(
        "setChatAdministratorCustomTitle",
        chat_id=chat_id,
        user_id=user_id,
        custom_title=custom_title,
    )


@registry.register("setChatPermissions", returns=bool)
def set_chat_permissions(chat_id: ChatId, permissions: ChatPermissions) -> Request:
    """Set default chat permissions for all members."""
    return Request.build("setChatPermissions", chat_id=chat_id, permissions=permissions)


@registry.register("exportChatInviteLink", returns=str)
def export_chat_invite_link(chat_id: ChatId) -> Request:
    """Generate a new primary invite link for a chat; the previous one is revoked."""
    return Request.build("exportChatInviteLink", chat_id=chat_id)


@registry.register("createChatInviteLink", returns=ChatInviteLink)
def create_chat_invite_link(
    chat_id: ChatId,
    *,
    expire_date: Optional[int] = None,
    member_limit: Optional[int] = None,
) -> Request:
    """Create an additional invite link for a chat."""
    return Request.build(
        "createChatInviteLink",
        chat_id=chat_id,
        expire_date=expire_date,
        member_limit=member_limit,
    )


@registry.register("editChatInviteLink", returns=ChatInviteLink)
def edit_chat_invite_link(
    chat_id: ChatId,
    invite_link: str,
    *,
    expire_date: Optional[int] = None,
    member_limit: Optional[int] = None,
) -> Request:
    """Edit a non-primary invite link created by the bot."""
    return Request.build(
        "editChatInviteLink",
        chat_id=chat_id,
        invite_link=invite_link,
        expire_date=expire_date,
        member_limit=member_limit,
    )


@registry.register("revokeChatInviteLink", returns=ChatInviteLink)
def revoke_chat_invite_link(chat_id: ChatId, invite_link: str) -> Request:
    """Revoke an invite link created by the bot."""
    return Request.build("revokeChatInviteLink", chat_id=chat_id, invite_link=invite_link)


@registry.register("setChatPhoto", returns=bool)
def set_chat_photo(chat_id: ChatId, photo: InputFile) -> Request:
    """Set a new profile photo for the chat. Photos can't be changed for private chats."""
    return Request.build("setChatPhoto", chat_id=chat_id, photo=photo)


@registry.register("deleteChatPhoto", returns=bool)
def delete_chat_photo(chat_id: ChatId) -> Request:
    """Delete a chat photo."""
    return Request.build("deleteChatPhoto", chat_id=chat_id)


@registry.register("setChatTitle", returns=bool)
def set_chat_title(chat_id: ChatId, title: str) -> Request:
    """Change the title of a chat."""
    return Request.build("setChatTitle", chat_id=chat_id, title=title)


@registry.register("setChatDescription", returns=bool)
def set_chat_description(chat_id: ChatId, *, description: Optional[str] = None) -> Request:
    """Change the description of a group, a supergroup or a channel."""
    return Request.build("setChatDescription", chat_id=chat_id, description=description)


@registry.register("pinChatMessage", returns=bool)
def pin_chat_message(chat_id: ChatId, message_id: int, *, disable_notification: Optional[bool] = None) -> Request:
    """Add a message to the list of pinned messages in a chat."""
    return Request.build(
        "pinChatMessage",
        chat_id=chat_id,
        message_id=message_id,
        disable_notification=disable_notification,
    )


@registry.register("unpinChatMessage", returns=bool)
def unpin_chat_message(chat_id: ChatId, *, message_id: Optional[int] = None) -> Request:
    """Remove a message from the list of pinned messages in a chat."""
    return Request.build("unpinChatMessage", chat_id=chat_id, message_id=message_id)


@registry.register("unpinAllChatMessages", returns=bool)
def unpin_all_chat_messages(chat_id: ChatId) -> Request:
    """Clear the list of pinned messages in a chat."""
    return Request.build("unpinAllChatMessages", chat_id=chat_id)


@registry.register("leaveChat", returns=bool)
def leave_chat(chat_id: ChatId) -> Request:
    """Leave a group, supergroup or channel."""
    return Request.build("leaveChat", chat_id=chat_id)


@registry.register("getChat", returns=Chat)
def get_chat(chat_id: ChatId) -> Request:
    """Get up to date information about the chat."""
    return Request.build("getChat", chat_id=chat_id)


@registry.register("getChatAdministrators", returns=List[ChatMember])
def get_chat_administrators(chat_id: ChatId) -> Request:
    """Get a list of administrators in a chat, bots excluded."""
    return Request.build("getChatAdministrators", chat_id=chat_id)


@registry.register("getChatMembersCount", returns=int)
def get_chat_members_count(chat_id: ChatId) -> Request:
    """Get the number of members in a chat."""
    return Request.build("getChatMembersCount", chat_id=chat_id)


@registry.register("getChatMember", returns=ChatMember)
def get_chat_member(chat_id: ChatId, user_id: int) -> Request:
    """Get information about a member of a chat."""
    return Request.build("getChatMember", chat_id=chat_id, user_id=user_id)


@registry.register("setChatStickerSet", returns=bool)
def set_chat_sticker_set(chat_id: ChatId, sticker_set_name: str) -> Request:
    """Set a new group sticker set for a supergroup."""
    return Request.build("setChatStickerSet", chat_id=chat_id, sticker_set_name=sticker_set_name)


@registry.register("deleteChatStickerSet", returns=bool)
def delete_chat_sticker_set(chat_id: ChatId) -> Request:
    """Delete a group sticker set from a supergroup."""
    return Request.build("deleteChatStickerSet", chat_id=chat_id)


# ── Callbacks and commands ───────────────────────────────────────────────────


@registry.register("answerCallbackQuery", returns=bool)
def answer_callback_query(
    callback_query_id: str,
    *,
    text: Optional[str] = None,
    show_alert: Optional[bool] = None,
    url: Optional[str] = None,
    cache_time: Optional[int] = None,
) -> Request:
    """Send answers to callback queries sent from inline keyboards."""
    return Request.build(
        "answerCallbackQuery",
        callback_query_id=callback_query_id,
        text=text,
        show_alert=show_alert,
        url=url,
        cache_time=cache_time,
    )


@registry.register("setMyCommands", returns=bool)
def set_my_commands(commands: List[BotCommand]) -> Request:
    """Change the list of the bot's commands."""
    return Request.build("setMyCommands", commands=commands)


@registry.register("getMyCommands", returns=List[BotCommand])
def get_my_commands() -> Request:
    """Get the current list of the bot's commands."""
    return Request.build("getMyCommands")


# ── Updating messages ────────────────────────────────────────────────────────


@registry.register("editMessageText", returns=MessageOrTrue)
def edit_message_text(
    text: str,
    *,
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    parse_mode: Optional[str] = None,
    entities: Optional[List[MessageEntity]] = None,
    disable_web_page_preview: Optional[bool] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Edit text and game messages."""
    return Request.build(
        "editMessageText",
        text=text,
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        parse_mode=parse_mode,
        entities=entities,
        disable_web_page_preview=disable_web_page_preview,
        reply_markup=reply_markup,
    )


@registry.register("editMessageCaption", returns=MessageOrTrue)
def edit_message_caption(
    *,
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    caption: Optional[str] = None,
    parse_mode: Optional[str] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Edit captions of messages."""
    return Request.build(
        "editMessageCaption",
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        caption=caption,
        parse_mode=parse_mode,
        caption_entities=caption_entities,
        reply_markup=reply_markup,
    )


@registry.register("editMessageMedia", returns=MessageOrTrue)
def edit_message_media(
    media: InputMedia,
    *,
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Edit animation, audio, document, photo, or video messages."""
    return Request.build(
        "editMessageMedia",
        media=media,
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        reply_markup=reply_markup,
    )


@registry.register("editMessageReplyMarkup", returns=MessageOrTrue)
def edit_message_reply_markup(
    *,
    chat_id: Optional[ChatId] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Edit only the reply markup of messages."""
    return Request.build(
        "editMessageReplyMarkup",
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
        reply_markup=reply_markup,
    )


@registry.register("stopPoll", returns=Poll)
def stop_poll(
    chat_id: ChatId,
    message_id: int,
    *,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Stop a poll which was sent by the bot. The stopped Poll is returned."""
    return Request.build("stopPoll", chat_id=chat_id, message_id=message_id, reply_markup=reply_markup)


@registry.register("deleteMessage", returns=bool)
def delete_message(chat_id: ChatId, message_id: int) -> Request:
    """Delete a message, including service messages, within the documented limits."""
    return Request.build("deleteMessage", chat_id=chat_id, message_id=message_id)


# ── Stickers ─────────────────────────────────────────────────────────────────


@registry.register("sendSticker", returns=Message)
def send_sticker(
    chat_id: ChatId,
    sticker: FileOrPath,
    *,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Request:
    """Send static .WEBP or animated .TGS stickers."""
    return Request.build(
        "sendSticker",
        chat_id=chat_id,
        sticker=sticker,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("getStickerSet", returns=StickerSet)
def get_sticker_set(name: str) -> Request:
    """Get a sticker set."""
    return Request.build("getStickerSet", name=name)


@registry.register("uploadStickerFile", returns=File)
def upload_sticker_file(user_id: int, png_sticker: InputFile) -> Request:
    """Upload a .PNG file with a sticker for later use in sticker set methods."""
    return Request.build("uploadStickerFile", user_id=user_id, png_sticker=png_sticker)


@registry.register("createNewStickerSet", returns=bool)
def create_new_sticker_set(
    user_id: int,
    name: str,
    title: str,
    emojis: str,
    *,
    png_sticker: Optional[FileOrPath] = None,
    tgs_sticker: Optional[InputFile] = None,
    contains_masks: Optional[bool] = None,
    mask_position: Optional[MaskPosition] = None,
) -> Request:
    """Create a new sticker set owned by a user."""
    return Request.build(
        "createNewStickerSet",
        user_id=user_id,
        name=name,
        title=title,
        emojis=emojis,
        png_sticker=png_sticker,
        tgs_sticker=tgs_sticker,
        contains_masks=contains_masks,
        mask_position=mask_position,
    )


@registry.register("addStickerToSet", returns=bool)
def add_sticker_to_set(
    user_id: int,
    name: str,
    emojis: str,
    *,
    png_sticker: Optional[FileOrPath] = None,
    tgs_sticker: Optional[InputFile] = None,
    mask_position: Optional[MaskPosition] = None,
) -> Request:
    """Add a new sticker to a set created by the bot."""
    return Request.build(
        "addStickerToSet",
        user_id=user_id,
        name=name,
        emojis=emojis,
        png_sticker=png_sticker,
        tgs_sticker=tgs_sticker,
        mask_position=mask_position,
    )


@registry.register("setStickerPositionInSet", returns=bool)
def set_sticker_position_in_set(sticker: str, position: int) -> Request:
    """Move a sticker in a set created by the bot to a specific position."""
    return Request.build("setStickerPositionInSet", sticker=sticker, position=position)


@registry.register("deleteStickerFromSet", returns=bool)
def delete_sticker_from_set(sticker: str) -> Request:
    """Delete a sticker from a set created by the bot."""
    return Request.build("deleteStickerFromSet", sticker=sticker)


@registry.register("setStickerSetThumb", returns=bool)
def set_sticker_set_thumb(name: str, user_id: int, *, thumb: Optional[FileOrPath] = None) -> Request:
    """Set the thumbnail of a sticker set."""
    return Request.build("setStickerSetThumb", name=name, user_id=user_id, thumb=thumb)


# ── Inline mode ──────────────────────────────────────────────────────────────


@registry.register("answerInlineQuery", returns=bool)
def answer_inline_query(
    inline_query_id: str,
    results: List[InlineQueryResult],
    *,
    cache_time: Optional[int] = None,
    is_personal: Optional[bool] = None,
    next_offset: Optional[str] = None,
    switch_pm_text: Optional[str] = None,
    switch_pm_parameter: Optional[str] = None,
) -> Request:
    """Send answers to an inline query. No more than 50 results per query are allowed."""
    return Request.build(
        "answerInlineQuery",
        inline_query_id=inline_query_id,
        results=results,
        cache_time=cache_time,
        is_personal=is_personal,
        next_offset=next_offset,
        switch_pm_text=switch_pm_text,
        switch_pm_parameter=switch_pm_parameter,
    )


# ── Payments ─────────────────────────────────────────────────────────────────


@registry.register("sendInvoice", returns=Message)
def send_invoice(
    chat_id: ChatId,
    title: str,
    description: str,
    payload: str,
    provider_token: str,
    currency: str,
    prices: List[LabeledPrice],
    *,
    max_tip_amount: Optional[int] = None,
    suggested_tip_amounts: Optional[List[int]] = None,
    start_parameter: Optional[str] = None,
    provider_data: Optional[str] = None,
    photo_url: Optional[str] = None,
    photo_size: Optional[int] = None,
    photo_width: Optional[int] = None,
    photo_height: Optional[int] = None,
    need_name: Optional[bool] = None,
    need_phone_number: Optional[bool] = None,
    need_email: Optional[bool] = None,
    need_shipping_address: Optional[bool] = None,
    send_phone_number_to_provider: Optional[bool] = None,
    send_email_to_provider: Optional[bool] = None,
    is_flexible: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Send invoices. On success, the sent Message is returned."""
    return Request.build(
        "sendInvoice",
        chat_id=chat_id,
        title=title,
        description=description,
        payload=payload,
        provider_token=provider_token,
        currency=currency,
        prices=prices,
        max_tip_amount=max_tip_amount,
        suggested_tip_amounts=suggested_tip_amounts,
        start_parameter=start_parameter,
        provider_data=provider_data,
        photo_url=photo_url,
        photo_size=photo_size,
        photo_width=photo_width,
        photo_height=photo_height,
        need_name=need_name,
        need_phone_number=need_phone_number,
        need_email=need_email,
        need_shipping_address=need_shipping_address,
        send_phone_number_to_provider=send_phone_number_to_provider,
        send_email_to_provider=send_email_to_provider,
        is_flexible=is_flexible,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("answerShippingQuery", returns=bool)
def answer_shipping_query(
    shipping_query_id: str,
    ok: bool,
    *,
    shipping_options: Optional[List[ShippingOption]] = None,
    error_message: Optional[str] = None,
) -> Request:
    """Reply to shipping queries sent for invoices with a flexible price."""
    return Request.build(
        "answerShippingQuery",
        shipping_query_id=shipping_query_id,
        ok=ok,
        shipping_options=shipping_options,
        error_message=error_message,
    )


@registry.register("answerPreCheckoutQuery", returns=bool)
def answer_pre_checkout_query(
    pre_checkout_query_id: str,
    ok: bool,
    *,
    error_message: Optional[str] = None,
) -> Request:
    """Respond to pre-checkout queries; must be answered within 10 seconds."""
    return Request.build(
        "answerPreCheckoutQuery",
        pre_checkout_query_id=pre_checkout_query_id,
        ok=ok,
        error_message=error_message,
    )


# ── Telegram Passport ────────────────────────────────────────────────────────


@registry.register("setPassportDataErrors", returns=bool)
def set_passport_data_errors(user_id: int, errors: List[PassportElementError]) -> Request:
    """Inform a user that some of the Telegram Passport elements they provided contains errors."""
    return Request.build("setPassportDataErrors", user_id=user_id, errors=errors)


# ── Games ────────────────────────────────────────────────────────────────────


@registry.register("sendGame", returns=Message)
def send_game(
    chat_id: int,
    game_short_name: str,
    *,
    disable_notification: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Request:
    """Send a game. On success, the sent Message is returned."""
    return Request.build(
        "sendGame",
        chat_id=chat_id,
        game_short_name=game_short_name,
        disable_notification=disable_notification,
        reply_to_message_id=reply_to_message_id,
        allow_sending_without_reply=allow_sending_without_reply,
        reply_markup=reply_markup,
    )


@registry.register("setGameScore", returns=MessageOrTrue)
def set_game_score(
    user_id: int,
    score: int,
    *,
    force: Optional[bool] = None,
    disable_edit_message: Optional[bool] = None,
    chat_id: Optional[int] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
) -> Request:
    """Set the score of the specified user in a game."""
    return Request.build(
        "setGameScore",
        user_id=user_id,
        score=score,
        force=force,
        disable_edit_message=disable_edit_message,
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
    )


@registry.register("getGameHighScores", returns=List[GameHighScore])
def get_game_high_scores(
    user_id: int,
    *,
    chat_id: Optional[int] = None,
    message_id: Optional[int] = None,
    inline_message_id: Optional[str] = None,
) -> Request:
    """Get data for high score tables."""
    return Request.build(
        "getGameHighScores",
        user_id=user_id,
        chat_id=chat_id,
        message_id=message_id,
        inline_message_id=inline_message_id,
    )
