#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib

from urhdkey.alias import Octets
from urhdkey.utils import bytes_from_octets

# see https://bugs.python.org/issue47101
# With OpenSSL 3.x, hashlib may include ripemd160
# without it being usable unless the legacy provider is loaded:
# pycryptodome is used in that case.
try:
    hashlib.new("ripemd160")
    _HASHLIB_HAS_RIPEMD160 = True
except ValueError:  # pragma: no cover
    from Crypto.Hash import RIPEMD160

    _HASHLIB_HAS_RIPEMD160 = False


def ripemd160(octets: Octets) -> bytes:
    """Return the RIPEMD160(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    if _HASHLIB_HAS_RIPEMD160:
        return hashlib.new("ripemd160", octets).digest()
    return RIPEMD160.new(octets).digest()  # pragma: no cover


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def hash160(octets: Octets) -> bytes:
    """Return the HASH160=RIPEMD160(SHA256) of the input octet sequence."""
    return ripemd160(sha256(octets))
