#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Helper functions to use the libsecp256k1 python bindings.

The bindings are an optional accelerator (extra 'secp256k1'):
generator multiplication falls back to the pure python implementation
of urhdkey.ec.curve when they are not installed.
"""

import contextlib

from urhdkey.alias import INF, Point
from urhdkey.exceptions import URHDKeyRuntimeError

LIBSECP256K1_AVAILABLE = False
with contextlib.suppress(ImportError):
    from btclib_libsecp256k1 import ffi, lib

    LIBSECP256K1_AVAILABLE = True
    # Keeping a single one of these is most efficient.
    ctx = lib.secp256k1_context_create(769)
    EC_UNCOMPRESSED = 2  # lib.SECP256K1_EC_UNCOMPRESSED

_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


def is_available() -> bool:
    return LIBSECP256K1_AVAILABLE


def _uncompressed_pub_key(prv_key: int) -> bytes:
    pubkey_ptr = ffi.new("secp256k1_pubkey *")
    if not lib.secp256k1_ec_pubkey_create(ctx, pubkey_ptr, prv_key.to_bytes(32, "big")):
        raise URHDKeyRuntimeError("secp256k1_ec_pubkey_create failure")
    serialized_pubkey_ptr = ffi.new("char[65]")
    length = ffi.new("size_t *", 65)
    # according to documentation, it always returns 1
    lib.secp256k1_ec_pubkey_serialize(
        ctx, serialized_pubkey_ptr, length, pubkey_ptr, EC_UNCOMPRESSED
    )
    return ffi.unpack(serialized_pubkey_ptr, 65)


def mult(num: int) -> Point:
    """Multiply the generator point."""
    m = num % _ORDER
    if m == 0:
        return INF
    pub_key = _uncompressed_pub_key(m)
    return int.from_bytes(pub_key[1:33], "big"), int.from_bytes(pub_key[33:], "big")
