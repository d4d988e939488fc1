"""tgwire -- request builders and wire models for the Telegram Bot API 5.2.

Usage::

    from tgwire import methods, decode_result

    request = methods.send_message(12345, "hi")
    # POST request.to_json() to https://api.telegram.org/bot<token>/<request.method>
    message = decode_result(request.method, response_json)
"""

from tgwire import methods
from tgwire.codec import OneOf, decode_union, one_of, to_wire
from tgwire.exceptions import ApiError, TgWireError, UnionDecodeError
from tgwire.models import InputFile, TelegramObject
from tgwire.registry import MethodEntry, MethodRegistry, registry
from tgwire.request import Request
from tgwire.responses import ApiResponse, decode, decode_result

__version__ = "5.2.0"

__all__ = [
    "ApiError",
    "ApiResponse",
    "InputFile",
    "MethodEntry",
    "MethodRegistry",
    "OneOf",
    "Request",
    "TelegramObject",
    "TgWireError",
    "UnionDecodeError",
    "decode",
    "decode_result",
    "decode_union",
    "methods",
    "one_of",
    "registry",
    "to_wire",
]
