#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 key fingerprint.

The fingerprint of a key is the big-endian uint32 made of the first
four bytes of HASH160 (i.e. RIPEMD160(SHA256)) of the compressed
public key.
It is a provenance pointer, not a unique identifier:
collisions are expected in a 2^32 space.
"""

import re
from typing import Optional

from urhdkey.alias import Octets
from urhdkey.exceptions import InvalidOverrideError
from urhdkey.hashes import hash160
from urhdkey.utils import bytes_from_octets

_HEX8_RE = re.compile(r"[0-9a-fA-F]{8}")


def fingerprint(pub_key: Octets) -> int:
    "Return the uint32 fingerprint of a 33 bytes compressed public key."

    pub_key = bytes_from_octets(pub_key, 33)
    return int.from_bytes(hash160(pub_key)[:4], byteorder="big", signed=False)


def hex_from_fingerprint(fp: int) -> str:
    "Return the fingerprint as 8 lower-case hex characters."

    return fp.to_bytes(4, byteorder="big", signed=False).hex()


def fingerprint_from_hex(hex8: Optional[str]) -> Optional[int]:
    """Return the fingerprint override provided as 8 hex characters.

    None or an empty string mean that no override has been provided.
    """

    if not hex8:
        return None
    hex8 = hex8.strip()
    if not _HEX8_RE.fullmatch(hex8):
        err_msg = f"override fingerprint must be 8 hex chars: {hex8!r}"
        raise InvalidOverrideError(err_msg)
    return int(hex8, 16)
