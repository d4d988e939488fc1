"""The ``Request`` descriptor produced by every builder in :mod:`tgwire.methods`.

A request is a method name plus a body mapping wire parameter names to
values.  Performing the HTTP call is the caller's job: POST
:meth:`Request.to_json` as ``application/json`` to
``https://api.telegram.org/bot<token>/<method>``, or, when
:attr:`Request.requires_multipart` is true, send
:meth:`Request.to_form_fields` as ``multipart/form-data`` and attach the
file contents for every path listed by :meth:`Request.uploads`.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Tuple

from pydantic import BaseModel, ConfigDict

from tgwire.codec import to_wire
from tgwire.models import InputFile


def _walk_uploads(value: Any, path: str) -> Iterator[str]:
    if isinstance(value, InputFile):
        yield path
    elif isinstance(value, BaseModel):
        for name, field in type(value).model_fields.items():
            yield from _walk_uploads(getattr(value, name), f"{path}.{field.alias or name}")
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            yield from _walk_uploads(item, f"{path}.{index}")
    elif isinstance(value, dict):
        for key, item in value.items():
            yield from _walk_uploads(item, f"{path}.{key}")


class Request(BaseModel):
    """An API call ready to be sent: ``method`` plus its parameter ``body``.

    ``body`` only holds parameters that were supplied; absent optional
    parameters are never stored, not even as ``None``.
    """

    model_config = ConfigDict(frozen=True)

    method: str
    body: Dict[str, Any]

    @classmethod
    def build(cls, method: str, **params: Any) -> "Request":
        """Create a request from keyword parameters, dropping ``None`` values."""
        return cls(method=method, body={key: value for key, value in params.items() if value is not None})

    def to_wire(self) -> Dict[str, Any]:
        """Return the body as JSON-ready data keyed by wire names."""
        return to_wire(self.body)

    def to_json(self) -> str:
        """Serialise the body as a JSON document."""
        return json.dumps(self.to_wire(), ensure_ascii=False, separators=(",", ":"))

    def uploads(self) -> List[str]:
        """Return the dotted paths of every :class:`InputFile` in the body.

        Top-level uploads are reported by parameter name (``"photo"``),
        nested ones by their full path (``"media.0.thumb"``).
        """
        paths: List[str] = []
        for key, value in self.body.items():
            paths.extend(_walk_uploads(value, key))
        return paths

    @property
    def requires_multipart(self) -> bool:
        """Whether the body carries a file upload placeholder."""
        return bool(self.uploads())

    def to_form_fields(self) -> List[Tuple[str, str]]:
        """Return the body as ``multipart/form-data`` text fields.

        Strings are sent unchanged and every other value is JSON encoded.
        Parameters holding an :class:`InputFile` are left out; the transport
        adds them as file parts under the same name.
        """
        fields: List[Tuple[str, str]] = []
        for key, value in self.body.items():
            if isinstance(value, InputFile):
                continue
            if isinstance(value, str):
                fields.append((key, value))
            else:
                fields.append((key, json.dumps(to_wire(value), ensure_ascii=False, separators=(",", ":"))))
        return fields
