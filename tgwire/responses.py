"""Decoding of Bot API response envelopes.

Every call answers with ``{"ok": true, "result": ...}`` or
``{"ok": false, "error_code": ..., "description": ...}``.  The result
type is looked up in the method registry, so callers only need the method
name::

    message = decode_result("sendMessage", response.json())
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter

from tgwire.exceptions import ApiError
from tgwire.models import ResponseParameters
from tgwire.registry import registry

# Importing the builders registers them.
import tgwire.methods  # noqa: F401


class ApiResponse(BaseModel):
    """The JSON envelope wrapping every Bot API answer."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    result: Any = None
    description: Optional[str] = None
    error_code: Optional[int] = None
    parameters: Optional[ResponseParameters] = None

    def raise_for_error(self) -> None:
        """Raise :class:`ApiError` if the call was not successful."""
        if self.ok:
            return
        params = self.parameters.to_wire() if self.parameters is not None else None
        raise ApiError(self.error_code, self.description, params)


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode(target: Any, data: Any) -> Any:
    """Decode JSON-ready *data* into *target*.

    *target* may be a model class, a union alias from :mod:`tgwire.models`,
    a primitive, or a ``List[...]`` of those.

    Raises:
        pydantic.ValidationError: If *data* does not fit *target*.
    """
    return _adapter(target).validate_python(data)


def decode_result(method: str, payload: Any) -> Any:
    """Validate a response envelope and decode its result for *method*.

    Raises:
        KeyError: If *method* is not a known API method.
        ApiError: If the envelope reports ``ok: false``.
        pydantic.ValidationError: If the envelope or result is malformed.
    """
    entry = registry.get(method)
    if entry is None:
        raise KeyError(method)
    response = ApiResponse.model_validate(payload)
    response.raise_for_error()
    return decode(entry.returns, response.result)
