#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module urhdkey.mnemonic."""

from urhdkey.mnemonic.bip39 import (
    assert_valid_mnemonic,
    normalized_mnemonic,
    root_node_from_mnemonic,
    seed_from_mnemonic,
)

__all__ = [
    "assert_valid_mnemonic",
    "normalized_mnemonic",
    "root_node_from_mnemonic",
    "seed_from_mnemonic",
]
