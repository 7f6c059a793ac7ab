#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP39 mnemonic / seed functions.

https://github.com/bitcoin/bips/blob/master/bip-0039.mediawiki.

Word-lists, checksum verification and the PBKDF2 seed stretching
are provided by the python-mnemonic reference implementation.

* bits per word = bpw = 11
* **ENT** = raw entropy
* **CS** = checksum = **ENT** / 32
* **MS** = words in the mnemonic sentence = (**ENT+CS**) / bpw

+-----+----+--------+----+
| ENT | CS | ENT+CS | MS |
+=====+====+========+====+
| 128 |  4 |    132 | 12 |
+-----+----+--------+----+
| 160 |  5 |    165 | 15 |
+-----+----+--------+----+
| 192 |  6 |    198 | 18 |
+-----+----+--------+----+
| 224 |  7 |    231 | 21 |
+-----+----+--------+----+
| 256 |  8 |    264 | 24 |
+-----+----+--------+----+
"""

from typing import Dict

from mnemonic import Mnemonic

from urhdkey.bip32.bip32 import BIP32Node, root_node_from_seed
from urhdkey.exceptions import InvalidMnemonicError

# word-lists are loaded only if needed and read only once from disk
_MNEMONICS: Dict[str, Mnemonic] = {}


def _mnemo(lang: str) -> Mnemonic:
    if lang not in _MNEMONICS:
        _MNEMONICS[lang] = Mnemonic(lang)
    return _MNEMONICS[lang]


def normalized_mnemonic(mnemonic: str) -> str:
    "Return the mnemonic lower-cased and cleaned up from spurious whitespaces."
    return " ".join(mnemonic.lower().split())


def assert_valid_mnemonic(mnemonic: str, lang: str = "english") -> None:
    "Raise InvalidMnemonicError if word-list or checksum verification fails."

    words = normalized_mnemonic(mnemonic)
    if len(words.split()) not in (12, 15, 18, 21, 24):
        err_msg = f"invalid BIP39 mnemonic: {len(words.split())} words"
        raise InvalidMnemonicError(err_msg)
    if not _mnemo(lang).check(words):
        raise InvalidMnemonicError("invalid BIP39 mnemonic: unknown word or bad checksum")


def seed_from_mnemonic(
    mnemonic: str, passphrase: str = "", lang: str = "english"
) -> bytes:
    """Return the 64 bytes seed from the provided BIP39 mnemonic sentence.

    The mnemonic is verified before the (slow) PBKDF2 key stretching.
    """

    assert_valid_mnemonic(mnemonic, lang)
    return Mnemonic.to_seed(normalized_mnemonic(mnemonic), passphrase or "")


def root_node_from_mnemonic(
    mnemonic: str, passphrase: str = "", lang: str = "english"
) -> BIP32Node:
    "Return BIP32 root master node from BIP39 mnemonic."

    seed = seed_from_mnemonic(mnemonic, passphrase, lang)
    return root_node_from_seed(seed)
