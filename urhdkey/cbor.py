#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CBOR (RFC 8949) encoding and decoding functions.

Only the definite-length subset needed by Uniform Resources is
supported:

* major type 0 and 1: unsigned and negative integers
* major type 2 and 3: byte strings and (UTF-8) text strings
* major type 4 and 5: arrays and maps
* major type 6: tagged data items
* major type 7: false, true, and null only (no floats)

Each data item starts with a head: the major type in the three
leftmost bits, then the additional information in the five remaining
bits.
Up to 23, the argument (integer value, length, tag number)
is the additional information itself;
otherwise it is expanded as [1 byte head][argument]:

* additional information 24 marks the next byte as the argument;
* additional information 25 marks the next two bytes as the argument;
* additional information 26 marks the next four bytes as the argument;
* additional information 27 marks the next eight bytes as the argument.

Arguments are always serialized in their shortest form.
Map entries are serialized in insertion order, never re-sorted:
the order is part of the schema of the records using this module.
"""

from dataclasses import dataclass
from io import BytesIO
from typing import Any, Dict, Mapping

from urhdkey.alias import BinaryData
from urhdkey.exceptions import URHDKeyTypeError, URHDKeyValueError
from urhdkey.utils import bytesio_from_binarydata

UNSIGNED_INT = 0
NEGATIVE_INT = 1
BYTE_STRING = 2
TEXT_STRING = 3
ARRAY = 4
MAP = 5
TAG = 6
SIMPLE = 7

_FALSE = b"\xF4"
_TRUE = b"\xF5"
_NULL = b"\xF6"

_MAX_NESTING = 64


@dataclass(frozen=True)
class Tagged:
    "A CBOR tagged data item."
    tag: int
    value: Any


def _head(major_type: int, n: int) -> bytes:
    "Return the head of a data item, with the argument in its shortest form."

    if n < 0x00:
        raise URHDKeyValueError(f"negative argument: {n}")
    initial = major_type << 5
    if n < 24:  # argument in the additional information
        return bytes([initial | n])
    if n <= 0xFF:  # 1 byte
        return bytes([initial | 24]) + n.to_bytes(1, byteorder="big", signed=False)
    if n <= 0xFFFF:  # 2 bytes
        return bytes([initial | 25]) + n.to_bytes(2, byteorder="big", signed=False)
    if n <= 0xFFFFFFFF:  # 4 bytes
        return bytes([initial | 26]) + n.to_bytes(4, byteorder="big", signed=False)
    if n <= 0xFFFFFFFFFFFFFFFF:  # 8 bytes
        return bytes([initial | 27]) + n.to_bytes(8, byteorder="big", signed=False)
    raise URHDKeyValueError(f"integer too big for CBOR encoding: {n}")


def serialize(obj: Any) -> bytes:
    "Return the CBOR bytes encoding of a data item."

    # bool must be checked before int, being one of its subclasses
    if obj is False:
        return _FALSE
    if obj is True:
        return _TRUE
    if obj is None:
        return _NULL
    if isinstance(obj, int):
        if obj >= 0:
            return _head(UNSIGNED_INT, obj)
        return _head(NEGATIVE_INT, -1 - obj)
    if isinstance(obj, (bytes, bytearray)):
        return _head(BYTE_STRING, len(obj)) + bytes(obj)
    if isinstance(obj, str):
        text = obj.encode("utf-8")
        return _head(TEXT_STRING, len(text)) + text
    if isinstance(obj, (list, tuple)):
        items = [serialize(item) for item in obj]
        return _head(ARRAY, len(items)) + b"".join(items)
    if isinstance(obj, Mapping):
        entries = [serialize(k) + serialize(v) for k, v in obj.items()]
        return _head(MAP, len(entries)) + b"".join(entries)
    if isinstance(obj, Tagged):
        return _head(TAG, obj.tag) + serialize(obj.value)
    raise URHDKeyTypeError(f"unsupported type for CBOR encoding: {type(obj).__name__}")


def _read(stream: BytesIO, n: int) -> bytes:
    # lengths up to 2^64-1 would overflow BytesIO.read
    left = len(stream.getbuffer()) - stream.tell()
    if n > left:
        raise URHDKeyValueError(f"truncated CBOR data: {max(left, 0)} bytes instead of {n}")
    return stream.read(n)


def _parse_argument(stream: BytesIO, additional_info: int) -> int:

    if additional_info < 24:
        return additional_info
    if additional_info == 24:
        return _read(stream, 1)[0]
    if additional_info == 25:
        return int.from_bytes(_read(stream, 2), byteorder="big", signed=False)
    if additional_info == 26:
        return int.from_bytes(_read(stream, 4), byteorder="big", signed=False)
    if additional_info == 27:
        return int.from_bytes(_read(stream, 8), byteorder="big", signed=False)
    if additional_info == 31:
        raise URHDKeyValueError("indefinite-length CBOR items are not supported")
    raise URHDKeyValueError(f"reserved additional information: {additional_info}")


def _parse_item(stream: BytesIO, nesting: int) -> Any:

    if nesting > _MAX_NESTING:
        raise URHDKeyValueError(f"CBOR nesting deeper than {_MAX_NESTING}")

    initial = _read(stream, 1)[0]
    major_type = initial >> 5
    additional_info = initial & 0x1F

    if major_type == SIMPLE:
        if additional_info == 20:
            return False
        if additional_info == 21:
            return True
        if additional_info == 22:
            return None
        raise URHDKeyValueError(f"unsupported CBOR simple value: 0x{initial:02X}")

    n = _parse_argument(stream, additional_info)
    if major_type == UNSIGNED_INT:
        return n
    if major_type == NEGATIVE_INT:
        return -1 - n
    if major_type == BYTE_STRING:
        return _read(stream, n)
    if major_type == TEXT_STRING:
        try:
            return _read(stream, n).decode("utf-8")
        except UnicodeDecodeError as e:
            raise URHDKeyValueError("invalid UTF-8 CBOR text string") from e
    if major_type == ARRAY:
        return [_parse_item(stream, nesting + 1) for _ in range(n)]
    if major_type == MAP:
        map_: Dict[Any, Any] = {}
        for _ in range(n):
            key = _parse_item(stream, nesting + 1)
            try:
                duplicated = key in map_
            except TypeError as e:  # unhashable key
                raise URHDKeyValueError("unsupported CBOR map key") from e
            if duplicated:
                raise URHDKeyValueError(f"duplicated CBOR map key: {key!r}")
            map_[key] = _parse_item(stream, nesting + 1)
        return map_
    # major_type == TAG
    return Tagged(n, _parse_item(stream, nesting + 1))


def parse(stream: BinaryData) -> Any:
    """Return the data item read from a stream.

    The stream must contain one single data item:
    trailing bytes are not allowed.
    """

    stream = bytesio_from_binarydata(stream)
    obj = _parse_item(stream, 0)
    if stream.read(1):
        raise URHDKeyValueError("trailing bytes after CBOR data item")
    return obj

