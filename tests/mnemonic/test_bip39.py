#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `urhdkey.mnemonic.bip39` module."

import pytest
from mnemonic import Mnemonic

from urhdkey.exceptions import InvalidMnemonicError
from urhdkey.mnemonic import bip39

MNEMONIC = "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"


def test_vectors() -> None:
    """BIP39 test vectors

    https://github.com/trezor/python-mnemonic/blob/master/vectors.json
    """

    vectors = [
        (
            MNEMONIC,
            "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e5349553"
            "1f09a6987599d18264c1e1c92f2cf141630c7a3c4ab7c81b2f001698e7463b04",
        ),
        (
            "legal winner thank year wave sausage worth useful legal winner thank yellow",
            "2e8905819b8723fe2c1d161860e5ee1830318dbf49a83bd451cfb8440c28bd6f"
            "a457fe1296106559a3c80937a1c1069be3a3a5bd381ee6260e8d9739fce1f607",
        ),
        (
            "letter advice cage absurd amount doctor acoustic avoid letter advice cage above",
            "d71de856f81a8acc65e6fc851a38d4d7ec216fd0796d0a6827a3ad6ed5511a30"
            "fa280f12eb2e47ed2ac03b5c462a0358d18d69fe4f985ec81778c1b370b652a8",
        ),
        (
            "zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo wrong",
            "ac27495480225222079d7be181583751e86f571027b0497b5b5d11218e0a8a13"
            "332572917f0f8e5a589620c6f15b11c61dee327651a14c34e18231052e48c069",
        ),
    ]
    for mnemonic, seed in vectors:
        assert bip39.seed_from_mnemonic(mnemonic, "TREZOR").hex() == seed


def test_seed_from_mnemonic() -> None:

    seed = bip39.seed_from_mnemonic(MNEMONIC)
    assert seed.hex() == (
        "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
        "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
    )
    # deterministic
    assert bip39.seed_from_mnemonic(MNEMONIC) == seed
    # the passphrase matters
    assert bip39.seed_from_mnemonic(MNEMONIC, "TREZOR") != seed
    assert bip39.seed_from_mnemonic(MNEMONIC, None) == seed  # type: ignore

    # whitespaces and case are normalized
    messy = "  " + MNEMONIC.upper().replace(" ", " \t\n ") + "\n"
    assert bip39.normalized_mnemonic(messy) == MNEMONIC
    assert bip39.seed_from_mnemonic(messy) == seed


def test_root_node_from_mnemonic() -> None:

    root = bip39.root_node_from_mnemonic(MNEMONIC)
    assert root.is_root
    assert root.fingerprint == 0x73C5DA0A


@pytest.mark.parametrize(
    "mnemonic, err_msg",
    [
        # wrong checksum
        (MNEMONIC.replace("about", "abandon"), "bad checksum"),
        ("zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo", "bad checksum"),
        # unknown word
        (MNEMONIC.replace("about", "bitcoin"), "unknown word"),
        # wrong word count
        (MNEMONIC + " abandon", "13 words"),
        (" ".join(MNEMONIC.split()[:11]), "11 words"),
        ("", "0 words"),
    ],
)
def test_invalid_mnemonics(mnemonic: str, err_msg: str) -> None:

    with pytest.raises(InvalidMnemonicError, match=err_msg):
        bip39.assert_valid_mnemonic(mnemonic)


def test_no_seed_for_invalid_mnemonic(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*_: object) -> bytes:
        raise AssertionError("seed derivation attempted")

    monkeypatch.setattr(Mnemonic, "to_seed", fail)
    with pytest.raises(InvalidMnemonicError):
        bip39.seed_from_mnemonic(MNEMONIC.replace("about", "abandon"))
