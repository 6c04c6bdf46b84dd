"""Field lookups over small, known-shape JSON documents.

Values come back as text: strings verbatim, everything else in its JSON
spelling. A nested object therefore comes back as a JSON document that can
be passed to ``field`` again::

    >>> field(field('{"main": {"temp": 281.7}}', "main"), "temp")
    '281.7'
"""

import json
from typing import Any

from kivakeli.errors import MalformedDocumentError, MissingFieldError


def field(doc: str, name: str) -> str:
    """Return the text of top-level member ``name`` of JSON object ``doc``."""
    obj = _parse_object(doc)
    return _as_text(_member(obj, name))


def array_field(doc: str, array_name: str, member_name: str) -> list[str]:
    """Return ``member_name`` from every element of array ``array_name``, in order."""
    obj = _parse_object(doc)
    items = _member(obj, array_name)
    if not isinstance(items, list):
        raise MalformedDocumentError(f"Field {array_name} is not an array")

    values = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise MalformedDocumentError(f"{array_name}[{i}] is not an object")
        values.append(_as_text(_member(item, member_name)))
    return values


def _parse_object(doc: str) -> dict[str, Any]:
    try:
        obj = json.loads(doc)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedDocumentError(f"Invalid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise MalformedDocumentError("JSON document is not an object")
    return obj


def _member(obj: dict[str, Any], name: str) -> Any:
    value = obj.get(name)
    # null is treated the same as absent
    if value is None:
        raise MissingFieldError(name)
    return value


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)
