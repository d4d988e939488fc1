"""Tag-free union codec and generic wire encoding.

Several Bot API fields accept "one of" a closed set of shapes without any
discriminator key on the wire (a chat identifier is an integer *or* a
string, a reply markup is one of four keyboard objects, ...).  The variant
is recovered by trying each candidate in a fixed, per-union order and
keeping the first one that decodes.  The order is the disambiguation
policy: when a value fits several candidates, the earliest one wins.

Usage::

    ChatId = one_of("ChatId", int, str)

    class SomeModel(TelegramObject):
        chat_id: ChatId

    decode_union(ChatId, "@channel")   # -> "@channel"
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Optional, Tuple, Union

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import core_schema

from tgwire.exceptions import UnionDecodeError


def _is_model(candidate: Any) -> bool:
    return isinstance(candidate, type) and issubclass(candidate, BaseModel)


class OneOf:
    """Ordered decoder for a union without a wire-level tag.

    Used as :class:`typing.Annotated` metadata so that pydantic delegates
    validation of the annotated field to :meth:`decode`.  Serialization is
    left to pydantic, which encodes whichever variant the field holds with
    that variant's own rules.
    """

    def __init__(self, name: str, *candidates: Any) -> None:
        if len(candidates) < 2:
            raise ValueError(f"{name} needs at least two candidates")
        self.name = name
        self.candidates: Tuple[Any, ...] = candidates
        self._adapters: Dict[Any, TypeAdapter] = {}

    def __repr__(self) -> str:
        names = ", ".join(getattr(c, "__name__", repr(c)) for c in self.candidates)
        return f"OneOf({self.name}: {names})"

    def _adapter(self, candidate: Any) -> TypeAdapter:
        adapter = self._adapters.get(candidate)
        if adapter is None:
            adapter = self._adapters[candidate] = TypeAdapter(candidate)
        return adapter

    def _attempt(self, candidate: Any, value: Any) -> Any:
        if _is_model(candidate):
            if isinstance(value, candidate):
                return value
            return candidate.model_validate(value)
        # Primitives are strict: "123" is a string, True is not an integer.
        return self._adapter(candidate).validate_python(value, strict=True)

    def decode(self, value: Any) -> Any:
        """Return *value* decoded as the first candidate that accepts it.

        Raises:
            UnionDecodeError: If no candidate accepts *value*.
        """
        for candidate in self.candidates:
            try:
                return self._attempt(candidate, value)
            except ValidationError:
                continue
        raise UnionDecodeError(self.name, value)

    def encode(self, value: Any) -> Any:
        """Encode the held variant with its own wire rules."""
        return to_wire(value)

    def __get_pydantic_core_schema__(self, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(self.decode)


def one_of(name: str, *candidates: Any) -> Any:
    """Build the ``Annotated`` field type for a tag-free union."""
    return Annotated[Union[candidates], OneOf(name, *candidates)]


def union_codec(alias: Any) -> Optional[OneOf]:
    """Return the :class:`OneOf` carried by a union alias, or ``None``."""
    for meta in getattr(alias, "__metadata__", ()):
        if isinstance(meta, OneOf):
            return meta
    return None


def decode_union(alias: Any, value: Any) -> Any:
    """Decode a bare value against a union alias built by :func:`one_of`."""
    codec = union_codec(alias)
    if codec is None:
        raise TypeError(f"{alias!r} is not a tag-free union")
    return codec.decode(value)


def to_wire(value: Any) -> Any:
    """Convert *value* into JSON-ready data using wire field names.

    Models are dumped by alias with absent (``None``) fields omitted;
    containers are converted item by item; everything else is returned
    unchanged.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    if isinstance(value, dict):
        return {key: to_wire(item) for key, item in value.items()}
    return value
