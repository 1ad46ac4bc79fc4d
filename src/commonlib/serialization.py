# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Stateless XML and binary persistence helpers.

The XML format mirrors the field layout of a dataclass: the root element is
named after the class and every field becomes a child element holding its
value. Nested dataclasses nest, lists hold one child per item and booleans are
written as ``true``/``false``::

    <?xml version="1.0" encoding="utf-8"?>
    <AppConfig>
      <name>demo</name>
      <retries>3</retries>
      <smtp>
        <enabled>true</enabled>
      </smtp>
    </AppConfig>

Reading is strict by default: an element or attribute the class does not
declare is an error rather than something to skip.

The binary helpers use :mod:`pickle`. Never read a binary file from an
untrusted source; unpickling can execute arbitrary code.
"""

from __future__ import annotations

import dataclasses
import enum
import pickle
import re
import types
import typing
import xml.etree.ElementTree as ET
import zlib
from pathlib import Path
from typing import Any, TypeVar

T = TypeVar("T")

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'

# Item element names for list fields, matching .NET XmlSerializer naming
_SCALAR_ITEM_TAGS: dict[type, str] = {
    str: "string",
    int: "int",
    float: "double",
    bool: "boolean",
}
_TRUE_WORDS = ("true", "1")
_FALSE_WORDS = ("false", "0")

# Characters XML 1.0 cannot carry, lone surrogates included
_INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


class SerializationError(Exception):
    """Base exception for serialization errors."""


class XmlStructureError(SerializationError):
    """Raised when a document does not match the shape of the target type."""


class XmlValueError(SerializationError):
    """Raised when a value cannot be converted to or from its declared type."""


class UnsupportedTypeError(SerializationError):
    """Raised for field types the XML format cannot represent."""


# ------------------------
# Type helpers
# ------------------------


def _is_dataclass_type(tp: Any) -> bool:
    return isinstance(tp, type) and dataclasses.is_dataclass(tp)


def _unwrap_optional(tp: Any) -> tuple[Any, bool]:
    """Return ``(inner, True)`` for ``X | None``, else ``(tp, False)``."""
    origin = typing.get_origin(tp)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0], True
        msg = f"Unsupported union type: {tp!r}"
        raise UnsupportedTypeError(msg)
    return tp, False


def _list_item_type(tp: Any) -> Any | None:
    if typing.get_origin(tp) is list:
        args = typing.get_args(tp)
        return args[0] if args else str
    return None


def _item_tag(tp: Any) -> str:
    if tp in _SCALAR_ITEM_TAGS:
        return _SCALAR_ITEM_TAGS[tp]
    if isinstance(tp, type):
        return tp.__name__
    msg = f"Unsupported list item type: {tp!r}"
    raise UnsupportedTypeError(msg)


def _field_types(cls: type) -> dict[str, Any]:
    """Return ``{field name: resolved type}`` for the init fields of ``cls``."""
    try:
        hints = typing.get_type_hints(cls)
    except (NameError, TypeError) as e:
        msg = f"Cannot resolve field types of {cls.__name__}: {e}"
        raise UnsupportedTypeError(msg) from e
    return {f.name: hints.get(f.name, Any) for f in dataclasses.fields(cls) if f.init}


# ------------------------
# Encoding
# ------------------------


def _scalar_text(tp: Any, value: Any, where: str) -> str:
    if tp is bool:
        if not isinstance(value, bool):
            msg = f"{where}: expected bool, got {type(value).__name__}"
            raise XmlValueError(msg)
        return "true" if value else "false"
    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"{where}: expected int, got {type(value).__name__}"
            raise XmlValueError(msg)
        return str(value)
    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f"{where}: expected float, got {type(value).__name__}"
            raise XmlValueError(msg)
        return repr(float(value))
    if tp is str:
        if not isinstance(value, str):
            msg = f"{where}: expected str, got {type(value).__name__}"
            raise XmlValueError(msg)
        bad = _INVALID_XML_CHARS.search(value)
        if bad:
            msg = f"{where}: character {bad.group()!r} cannot be stored in XML"
            raise XmlValueError(msg)
        return value
    if isinstance(tp, type) and issubclass(tp, enum.Enum):
        if not isinstance(value, tp):
            msg = f"{where}: expected {tp.__name__}, got {type(value).__name__}"
            raise XmlValueError(msg)
        return value.name
    msg = f"{where}: unsupported field type {tp!r}"
    raise UnsupportedTypeError(msg)


def _encode_into(element: ET.Element, tp: Any, value: Any, where: str) -> None:
    if _is_dataclass_type(tp):
        if not isinstance(value, tp):
            msg = f"{where}: expected {tp.__name__}, got {type(value).__name__}"
            raise XmlValueError(msg)
        _encode_fields(element, value)
        return

    item_type = _list_item_type(tp)
    if item_type is not None:
        if not isinstance(value, list):
            msg = f"{where}: expected list, got {type(value).__name__}"
            raise XmlValueError(msg)
        tag = _item_tag(item_type)
        for index, item in enumerate(value):
            child = ET.SubElement(element, tag)
            _encode_into(child, item_type, item, f"{where}[{index}]")
        return

    element.text = _scalar_text(tp, value, where)


def _encode_fields(element: ET.Element, obj: Any) -> None:
    cls = type(obj)
    for name, field_type in _field_types(cls).items():
        value = getattr(obj, name)
        inner, optional = _unwrap_optional(field_type)
        if value is None:
            if optional:
                continue
            msg = f"{cls.__name__}.{name}: None is not allowed for {field_type!r}"
            raise XmlValueError(msg)
        child = ET.SubElement(element, name)
        _encode_into(child, inner, value, f"{cls.__name__}.{name}")


def to_xml_bytes(obj: Any) -> bytes:
    """Serialize a dataclass instance to a UTF-8 XML document."""
    cls = type(obj)
    if not _is_dataclass_type(cls):
        msg = f"Only dataclass instances can be serialized, got {cls.__name__}"
        raise UnsupportedTypeError(msg)
    root = ET.Element(cls.__name__)
    _encode_fields(root, obj)
    ET.indent(root, space="  ")
    # The parser turns a literal carriage return into a newline
    body = ET.tostring(root, encoding="unicode").replace("\r", "&#13;")
    try:
        return (XML_DECLARATION + body + "\n").encode("utf-8")
    except UnicodeEncodeError as e:
        msg = f"{cls.__name__}: text cannot be encoded as UTF-8: {e}"
        raise XmlValueError(msg) from e


# ------------------------
# Decoding
# ------------------------


def _reject_attributes(element: ET.Element, where: str) -> None:
    if element.attrib:
        names = ", ".join(sorted(element.attrib))
        msg = f"{where}: unexpected attribute(s) {names}"
        raise XmlStructureError(msg)


def _reject_text(element: ET.Element, where: str) -> None:
    """Container elements hold child elements and indentation only."""
    if element.text and element.text.strip():
        msg = f"{where}: unexpected text {element.text.strip()!r}"
        raise XmlStructureError(msg)
    for child in element:
        if child.tail and child.tail.strip():
            msg = f"{where}: unexpected text {child.tail.strip()!r} after <{child.tag}>"
            raise XmlStructureError(msg)


def _scalar_value(tp: Any, element: ET.Element, where: str) -> Any:
    if len(element):
        msg = f"{where}: unexpected child element <{element[0].tag}>"
        raise XmlStructureError(msg)
    text = element.text or ""
    if tp is str:
        return text
    word = text.strip()
    try:
        if tp is bool:
            lowered = word.lower()
            if lowered in _TRUE_WORDS:
                return True
            if lowered in _FALSE_WORDS:
                return False
            raise ValueError(word)
        if tp is int:
            return int(word)
        if tp is float:
            return float(word)
        if isinstance(tp, type) and issubclass(tp, enum.Enum):
            return tp[word]
    except (ValueError, KeyError) as e:
        msg = f"{where}: cannot read {word!r} as {getattr(tp, '__name__', tp)}"
        raise XmlValueError(msg) from e
    msg = f"{where}: unsupported field type {tp!r}"
    raise UnsupportedTypeError(msg)


def _decode_element(element: ET.Element, tp: Any, where: str, *, strict: bool) -> Any:
    if strict:
        _reject_attributes(element, where)

    if _is_dataclass_type(tp):
        if strict:
            _reject_text(element, where)
        return _decode_fields(element, tp, where, strict=strict)

    item_type = _list_item_type(tp)
    if item_type is not None:
        if strict:
            _reject_text(element, where)
        tag = _item_tag(item_type)
        items = []
        for index, child in enumerate(element):
            if child.tag != tag:
                if strict:
                    msg = f"{where}: unexpected list item <{child.tag}>, expected <{tag}>"
                    raise XmlStructureError(msg)
                continue
            items.append(_decode_element(child, item_type, f"{where}[{index}]", strict=strict))
        return items

    return _scalar_value(tp, element, where)


def _decode_fields(element: ET.Element, cls: type, where: str, *, strict: bool) -> Any:
    field_types = _field_types(cls)
    values: dict[str, Any] = {}
    for child in element:
        name = child.tag
        if name not in field_types:
            if strict:
                msg = f"{where}: unknown element <{name}>"
                raise XmlStructureError(msg)
            continue
        if name in values:
            msg = f"{where}: duplicate element <{name}>"
            raise XmlStructureError(msg)
        inner, _ = _unwrap_optional(field_types[name])
        values[name] = _decode_element(child, inner, f"{where}.{name}", strict=strict)

    try:
        return cls(**values)
    except TypeError as e:
        msg = f"{where}: cannot construct {cls.__name__}: {e}"
        raise XmlStructureError(msg) from e


def from_xml_bytes(data: bytes | str, cls: type[T], *, strict: bool = True) -> T:
    """Parse an XML document produced by :func:`to_xml_bytes` into ``cls``.

    Args:
        data (bytes | str): The XML document.
        cls (type[T]): Dataclass the document describes.
        strict (bool): Treat unknown elements and attributes as errors.

    Returns:
        T: A new instance of ``cls``; fields missing from the document keep
        their defaults.

    Raises:
        XmlStructureError: Malformed XML or a document of the wrong shape.
        XmlValueError: A value that does not convert to its field type.
        UnsupportedTypeError: ``cls`` is not a dataclass or declares a field
            type the format cannot represent.
    """
    if not _is_dataclass_type(cls):
        msg = f"Only dataclass types can be deserialized, got {cls!r}"
        raise UnsupportedTypeError(msg)
    try:
        root = ET.fromstring(data)
    except (ET.ParseError, LookupError) as e:
        # LookupError: the declaration names an unknown encoding
        msg = f"Malformed XML: {e}"
        raise XmlStructureError(msg) from e
    if root.tag != cls.__name__:
        msg = f"Root element <{root.tag}> does not match {cls.__name__}"
        raise XmlStructureError(msg)
    return _decode_element(root, cls, cls.__name__, strict=strict)


class XmlCodec:
    """Encode/decode pair handed to :class:`commonlib.config.store.ConfigStore`."""

    def __init__(self, *, strict: bool = True) -> None:
        self.strict = strict

    def encode(self, value: Any) -> bytes:
        """Return the XML document for ``value``."""
        return to_xml_bytes(value)

    def decode(self, data: bytes, cls: type[T]) -> T:
        """Return a ``cls`` instance parsed from ``data``."""
        return from_xml_bytes(data, cls, strict=self.strict)


# ------------------------
# File helpers
# ------------------------


def write_xml(file_path: str | Path, obj: Any) -> None:
    """Write ``obj`` to ``file_path`` as XML, overwriting any existing file."""
    Path(file_path).write_bytes(to_xml_bytes(obj))


def read_xml(file_path: str | Path, cls: type[T], *, strict: bool = True) -> T:
    """Read a ``cls`` instance from the XML file at ``file_path``."""
    return from_xml_bytes(Path(file_path).read_bytes(), cls, strict=strict)


def write_binary(file_path: str | Path, obj: Any, *, append: bool = False) -> None:
    """Pickle ``obj`` into ``file_path``.

    With ``append`` the pickle is added after existing content; only the first
    object is returned by :func:`read_binary`.
    """
    with open(file_path, "ab" if append else "wb") as f:
        pickle.dump(obj, f)


def read_binary(file_path: str | Path) -> Any:
    """Unpickle the first object stored in ``file_path``. Trusted files only."""
    with open(file_path, "rb") as f:
        return pickle.load(f)  # noqa: S301


def to_compressed_bytes(obj: Any) -> bytes:
    """Return the XML document for ``obj`` compressed with raw deflate."""
    compressor = zlib.compressobj(level=1, wbits=-zlib.MAX_WBITS)
    return compressor.compress(to_xml_bytes(obj)) + compressor.flush()


def from_compressed_bytes(data: bytes) -> str:
    """Inflate a payload from :func:`to_compressed_bytes` back to XML text."""
    try:
        return zlib.decompress(data, wbits=-zlib.MAX_WBITS).decode("utf-8")
    except (zlib.error, UnicodeDecodeError) as e:
        msg = f"Invalid compressed payload: {e}"
        raise SerializationError(msg) from e
