#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module urhdkey.bip32."""

from urhdkey.bip32.bip32 import BIP32Node, derive, neutered, root_node_from_seed
from urhdkey.bip32.der_path import (
    DerPathStep,
    indexes_from_der_path,
    int_from_index_str,
    parent_der_path,
    steps_from_der_path,
    str_from_der_path,
    str_from_index_int,
)
from urhdkey.bip32.fingerprint import (
    fingerprint,
    fingerprint_from_hex,
    hex_from_fingerprint,
)
from urhdkey.bip32.key_origin import (
    BIP32KeyOrigin,
    build_origin,
    resolve_parent_path,
)

__all__ = [
    "BIP32Node",
    "BIP32KeyOrigin",
    "DerPathStep",
    "build_origin",
    "derive",
    "fingerprint",
    "fingerprint_from_hex",
    "hex_from_fingerprint",
    "indexes_from_der_path",
    "int_from_index_str",
    "neutered",
    "parent_der_path",
    "resolve_parent_path",
    "root_node_from_seed",
    "steps_from_der_path",
    "str_from_der_path",
    "str_from_index_int",
]
