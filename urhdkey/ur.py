#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Uniform Resources (UR) single-part encoding.

See BCR-2020-005 (https://github.com/BlockchainCommons/Research).

A single-part UR is:

    ur:<type>/<minimal bytewords of the CBOR payload and its CRC-32>

and it is upper-cased, so that QR codes can use the
compact alphanumeric mode.

Multi-part (fountain-coded) URs are not supported:
a payload longer than the maximum fragment length is rejected.
"""

import re
from typing import Tuple

from urhdkey import bytewords
from urhdkey.alias import Octets
from urhdkey.exceptions import URHDKeyValueError
from urhdkey.utils import bytes_from_octets

SCHEME = "ur"

_UR_TYPE_RE = re.compile(r"[a-z0-9-]+")


def _assert_valid_ur_type(ur_type: str) -> None:
    if not _UR_TYPE_RE.fullmatch(ur_type):
        raise URHDKeyValueError(f"invalid UR type: {ur_type!r}")


def encode(data: Octets, ur_type: str, max_fragment_len: int) -> str:
    "Return the upper-case single-part UR encoding of CBOR data."

    _assert_valid_ur_type(ur_type)
    data = bytes_from_octets(data)
    if len(data) > max_fragment_len:
        err_msg = f"payload too long for a single-part UR: {len(data)} bytes"
        err_msg += f" instead of {max_fragment_len} max"
        raise URHDKeyValueError(err_msg)
    return f"{SCHEME}:{ur_type}/{bytewords.encode(data)}".upper()


def decode(ur_text: str) -> Tuple[str, bytes]:
    "Return the type and the CBOR payload of a single-part UR."

    text = ur_text.strip().lower()
    scheme, sep, rest = text.partition(":")
    if scheme != SCHEME or not sep:
        raise URHDKeyValueError(f"invalid UR scheme: {ur_text!r}")
    components = rest.split("/")
    if len(components) == 3:
        raise URHDKeyValueError("multi-part UR is not supported")
    if len(components) != 2:
        raise URHDKeyValueError(f"invalid UR: {ur_text!r}")
    ur_type, body = components
    _assert_valid_ur_type(ur_type)
    return ur_type, bytewords.decode(body)
