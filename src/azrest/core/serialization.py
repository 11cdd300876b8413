"""Field-by-field JSON and XML codec for dataclass models.

Every model field declares its wire name through ``wire``, ``wire_list`` or
``wire_map``. Unset values (``None``, empty lists, empty maps) are omitted on
encode and come back unset on decode. Any mismatch between the body and the
declared field types raises ``DeserializationError``; no partial model is
returned.
"""

from __future__ import annotations

import functools
import json
import re
import types
import typing
import xml.etree.ElementTree as ET
from dataclasses import field, fields, is_dataclass
from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from enum import Enum
from typing import Any, TypeVar, Union

from azrest.core.exceptions import DeserializationError

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"
XML_CONTENT_TYPE = "application/xml"

# Wire formats an operation can declare for its response body
JSON = "json"
XML = "xml"
BINARY = "binary"

# Date formats
ISO8601 = "iso8601"
RFC1123 = "rfc1123"

_FRACTION_RE = re.compile(r"(\.\d{6})\d+")


def wire(name: str, *, attribute: bool = False, fmt: str = ISO8601) -> Any:
    """Declare an optional scalar or nested-model field."""
    return field(default=None, metadata={"wire": name, "attribute": attribute, "fmt": fmt})


def wire_list(name: str, *, item: str | None = None, fmt: str = ISO8601) -> Any:
    """Declare a list field.

    In XML the list is wrapped in a ``name`` element holding ``item`` children
    when ``item`` is given; otherwise the entries are repeated ``name``
    elements directly under the parent.
    """
    return field(default_factory=list, metadata={"wire": name, "item": item, "fmt": fmt})


def wire_map(name: str) -> Any:
    """Declare a string-to-string map field (e.g. user metadata)."""
    return field(default_factory=dict, metadata={"wire": name})


# ---------------------------------------------------------------------------
# Type helpers
# ---------------------------------------------------------------------------


@functools.lru_cache(maxsize=None)
def _hints(cls: type) -> dict[str, Any]:
    return typing.get_type_hints(cls)


def _unwrap_optional(tp: Any) -> Any:
    origin = typing.get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        return args[0]
    return tp


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (list, dict)) and not value)


def _mismatch(where: str, expected: str, value: Any) -> DeserializationError:
    return DeserializationError(f"{where}: expected {expected}, got {type(value).__name__}")


def format_datetime_value(value: datetime, fmt: str = ISO8601) -> str:
    """Render a datetime for the wire in the requested format."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    if fmt == RFC1123:
        return format_datetime(value.astimezone(timezone.utc), usegmt=True)
    return value.isoformat()


def parse_datetime_value(text: str, fmt: str = ISO8601) -> datetime:
    """Parse a wire datetime; raises ValueError when malformed."""
    if fmt == RFC1123:
        try:
            return parsedate_to_datetime(text)
        except (TypeError, IndexError) as exc:
            raise ValueError(f"invalid RFC 1123 date {text!r}") from exc
    return datetime.fromisoformat(_FRACTION_RE.sub(r"\1", text))


def _parse_datetime(text: str, fmt: str, where: str) -> datetime:
    try:
        return parse_datetime_value(text, fmt)
    except ValueError as exc:
        raise DeserializationError(f"{where}: {exc}") from exc


def _parse_enum(tp: type[Enum], value: Any, where: str) -> Enum:
    try:
        return tp(value)
    except ValueError:
        raise DeserializationError(f"{where}: unknown {tp.__name__} value {value!r}") from None


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def to_dict(model: Any) -> dict[str, Any]:
    """Encode a dataclass model into a JSON-ready dict, omitting unset fields."""
    out: dict[str, Any] = {}
    for f in fields(model):
        value = getattr(model, f.name)
        if _is_empty(value):
            continue
        out[f.metadata["wire"]] = _encode_json(value, f.metadata.get("fmt", ISO8601))
    return out


def _encode_json(value: Any, fmt: str) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_datetime_value(value, fmt)
    if isinstance(value, list):
        return [_encode_json(entry, fmt) for entry in value]
    if isinstance(value, dict):
        return {key: _encode_json(entry, fmt) for key, entry in value.items()}
    return value


def from_dict(cls: type[T], data: Any) -> T:
    """Decode a parsed JSON object into ``cls``."""
    if not isinstance(data, dict):
        raise _mismatch(cls.__name__, "object", data)
    hints = _hints(cls)
    kwargs: dict[str, Any] = {}
    for f in fields(cls):  # type: ignore[arg-type]
        key = f.metadata["wire"]
        if data.get(key) is None:
            continue
        where = f"{cls.__name__}.{f.name}"
        kwargs[f.name] = _decode_json(hints[f.name], data[key], f.metadata.get("fmt", ISO8601), where)
    return cls(**kwargs)


def _decode_json(tp: Any, value: Any, fmt: str, where: str) -> Any:
    tp = _unwrap_optional(tp)
    origin = typing.get_origin(tp)
    if origin is list:
        if not isinstance(value, list):
            raise _mismatch(where, "array", value)
        (item_tp,) = typing.get_args(tp)
        return [_decode_json(item_tp, entry, fmt, where) for entry in value]
    if origin is dict:
        if not isinstance(value, dict):
            raise _mismatch(where, "object", value)
        _, value_tp = typing.get_args(tp)
        return {str(key): _decode_json(value_tp, entry, fmt, where) for key, entry in value.items()}
    if is_dataclass(tp):
        return from_dict(tp, value)  # type: ignore[arg-type]
    if isinstance(tp, type) and issubclass(tp, Enum):
        return _parse_enum(tp, value, where)
    if tp is datetime:
        if not isinstance(value, str):
            raise _mismatch(where, "date string", value)
        return _parse_datetime(value, fmt, where)
    if tp is bool:
        if not isinstance(value, bool):
            raise _mismatch(where, "boolean", value)
    elif tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _mismatch(where, "integer", value)
    elif tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _mismatch(where, "number", value)
        return float(value)
    elif tp is str and not isinstance(value, str):
        raise _mismatch(where, "string", value)
    return value


def to_json(model: Any) -> bytes:
    """Serialize a model to UTF-8 JSON bytes."""
    return json.dumps(to_dict(model)).encode("utf-8")


def from_json(cls: type[T], data: bytes) -> T:
    """Deserialize UTF-8 JSON bytes into ``cls``."""
    try:
        parsed = json.loads(data)
    except (ValueError, UnicodeDecodeError) as exc:
        raise DeserializationError(f"{cls.__name__}: malformed JSON body: {exc}") from exc
    return from_dict(cls, parsed)


# ---------------------------------------------------------------------------
# XML
# ---------------------------------------------------------------------------


def _xml_root(cls: type) -> str:
    return getattr(cls, "XML_ROOT", cls.__name__)


def _xml_text(value: Any, fmt: str) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_datetime_value(value, fmt)
    return str(value)


def _to_element(model: Any, tag: str) -> ET.Element:
    element = ET.Element(tag)
    for f in fields(model):
        value = getattr(model, f.name)
        if _is_empty(value):
            continue
        name = f.metadata["wire"]
        fmt = f.metadata.get("fmt", ISO8601)
        if f.metadata.get("attribute"):
            element.set(name, _xml_text(value, fmt))
        elif isinstance(value, list):
            item = f.metadata.get("item")
            parent = ET.SubElement(element, name) if item else element
            for entry in value:
                _append_value(parent, item or name, entry, fmt)
        elif isinstance(value, dict):
            container = ET.SubElement(element, name)
            for key, text in value.items():
                ET.SubElement(container, key).text = str(text)
        else:
            _append_value(element, name, value, fmt)
    return element


def _append_value(parent: ET.Element, tag: str, value: Any, fmt: str) -> None:
    if is_dataclass(value) and not isinstance(value, type):
        parent.append(_to_element(value, tag))
    else:
        ET.SubElement(parent, tag).text = _xml_text(value, fmt)


def to_xml(model: Any) -> bytes:
    """Serialize a model to UTF-8 XML bytes with a declaration."""
    root = _to_element(model, _xml_root(type(model)))
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _parse_xml_text(tp: Any, text: str, fmt: str, where: str) -> Any:
    if isinstance(tp, type) and issubclass(tp, Enum):
        return _parse_enum(tp, text, where)
    if tp is str:
        return text
    if tp is bool:
        if text not in ("true", "false"):
            raise DeserializationError(f"{where}: expected boolean, got {text!r}")
        return text == "true"
    if tp is datetime:
        return _parse_datetime(text, fmt, where)
    if tp in (int, float):
        try:
            return tp(text)
        except ValueError:
            raise DeserializationError(f"{where}: expected {tp.__name__}, got {text!r}") from None
    raise DeserializationError(f"{where}: unsupported field type {tp!r}")


def _from_child(tp: Any, element: ET.Element, fmt: str, where: str) -> Any:
    if is_dataclass(tp):
        return _from_element(tp, element)
    return _parse_xml_text(tp, element.text or "", fmt, where)


def _from_element(cls: Any, element: ET.Element) -> Any:
    hints = _hints(cls)
    kwargs: dict[str, Any] = {}
    for f in fields(cls):
        name = f.metadata["wire"]
        fmt = f.metadata.get("fmt", ISO8601)
        where = f"{cls.__name__}.{f.name}"
        tp = _unwrap_optional(hints[f.name])
        origin = typing.get_origin(tp)
        if f.metadata.get("attribute"):
            raw = element.get(name)
            if raw is not None:
                kwargs[f.name] = _parse_xml_text(tp, raw, fmt, where)
        elif origin is list:
            (item_tp,) = typing.get_args(tp)
            item = f.metadata.get("item")
            if item:
                container = element.find(name)
                children = container.findall(item) if container is not None else []
            else:
                children = element.findall(name)
            if children:
                kwargs[f.name] = [_from_child(item_tp, child, fmt, where) for child in children]
        elif origin is dict:
            container = element.find(name)
            if container is not None and len(container):
                kwargs[f.name] = {child.tag: child.text or "" for child in container}
        else:
            child = element.find(name)
            if child is not None:
                kwargs[f.name] = _from_child(tp, child, fmt, where)
    return cls(**kwargs)


def from_xml(cls: type[T], data: bytes) -> T:
    """Deserialize XML bytes into ``cls``; the root element must match the model."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise DeserializationError(f"{cls.__name__}: malformed XML body: {exc}") from exc
    expected = _xml_root(cls)
    if root.tag != expected:
        raise DeserializationError(f"{cls.__name__}: expected root <{expected}>, got <{root.tag}>")
    return _from_element(cls, root)  # type: ignore[no-any-return]


# ---------------------------------------------------------------------------
# Content-type dispatch
# ---------------------------------------------------------------------------


def serialize_body(model: Any, content_type: str) -> bytes:
    """Encode a request model with the encoder matching the declared content type."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    if media_type.endswith("xml"):
        return to_xml(model)
    if media_type.endswith("json"):
        return to_json(model)
    raise ValueError(f"No model encoder for content type {content_type!r}")


def deserialize_body(cls: type[T], data: bytes, wire_format: str) -> T:
    """Decode a response body declared as ``wire_format`` into ``cls``."""
    if wire_format == XML:
        return from_xml(cls, data)
    if wire_format == JSON:
        return from_json(cls, data)
    raise ValueError(f"Unknown wire format {wire_format!r}")
