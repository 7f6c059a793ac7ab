#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `urhdkey.hdkey` module."

import pytest

from urhdkey import bytewords, cbor
from urhdkey.bip32.key_origin import BIP32KeyOrigin
from urhdkey.exceptions import URHDKeyValueError
from urhdkey.hdkey import UR_TYPE, CryptoHDKey, encode_hdkey

# BIP32 test vector 1, m/0'
PUB_KEY = "035a784662a4a20a65bf6aab9ae98a6c068a81c52e4b032c0fb5400c706cfccc56"
CHAIN_CODE = "47fdacbd0f1097043b78c63c20c34ef4ed9a111d980047ad16282c7ae6236141"
MASTER_FP = 0x3442193E

GOLDEN = bytes.fromhex(
    "a5"
    "035821" + PUB_KEY + "045820" + CHAIN_CODE + "06d90130a2018200f5021a3442193e"
    "081a3442193e"
    "096d" + b"AirGap - meta".hex()
)


def _hdkey() -> CryptoHDKey:
    origin = BIP32KeyOrigin(MASTER_FP, "m/0'")
    return CryptoHDKey(PUB_KEY, CHAIN_CODE, origin, MASTER_FP)


def test_golden_record() -> None:

    hdkey = _hdkey()
    assert hdkey.name == "AirGap - meta"
    assert hdkey.serialize() == GOLDEN
    origin = BIP32KeyOrigin(MASTER_FP, "m/0'")
    assert encode_hdkey(PUB_KEY, CHAIN_CODE, origin, MASTER_FP) == GOLDEN

    obj = cbor.parse(GOLDEN)
    assert list(obj) == [3, 4, 6, 8, 9]
    assert len(obj[3]) == 33
    assert len(obj[4]) == 32
    assert obj[9] == "AirGap - meta"


def test_parse() -> None:

    hdkey = CryptoHDKey.parse(GOLDEN)
    assert hdkey == _hdkey()
    assert hdkey.key.hex() == PUB_KEY
    assert hdkey.chain_code.hex() == CHAIN_CODE
    assert hdkey.origin.description == "3442193e/0'"
    assert hdkey.parent_fingerprint == MASTER_FP


def test_ur() -> None:

    hdkey = _hdkey()
    text = hdkey.to_ur()
    assert text.startswith("UR:CRYPTO-HDKEY/")
    assert text == text.upper()
    assert CryptoHDKey.from_ur(text) == hdkey
    assert CryptoHDKey.from_ur(text.lower()) == hdkey

    with pytest.raises(URHDKeyValueError, match="payload too long for a single-part UR: "):
        hdkey.to_ur(len(GOLDEN) - 1)

    with pytest.raises(URHDKeyValueError, match="invalid UR type: "):
        CryptoHDKey.from_ur(text.replace(UR_TYPE.upper(), "BYTES"))

    # byte string head announcing 2^64-1 bytes
    text = f"ur:{UR_TYPE}/" + bytewords.encode(bytes.fromhex("5bffffffffffffffff"))
    with pytest.raises(URHDKeyValueError, match="truncated CBOR data: "):
        CryptoHDKey.from_ur(text)


def test_name() -> None:

    origin = BIP32KeyOrigin(MASTER_FP, "m/0'")
    hdkey = CryptoHDKey(PUB_KEY, CHAIN_CODE, origin, MASTER_FP, "keystone")
    assert hdkey.serialize()[-9:] == b"\x68keystone"
    assert CryptoHDKey.parse(hdkey.serialize()).name == "keystone"


def test_exceptions() -> None:

    origin = BIP32KeyOrigin(MASTER_FP, "m/0'")

    with pytest.raises(URHDKeyValueError, match="invalid key length: "):
        CryptoHDKey(PUB_KEY[:-2], CHAIN_CODE, origin, MASTER_FP)

    with pytest.raises(URHDKeyValueError, match="invalid chain_code length: "):
        CryptoHDKey(PUB_KEY, CHAIN_CODE + "00", origin, MASTER_FP)

    # private keys are rejected
    with pytest.raises(URHDKeyValueError, match="invalid public key: "):
        CryptoHDKey("00" + "01" * 32, CHAIN_CODE, origin, MASTER_FP)

    for fp in (-1, 0xFFFFFFFF + 1, True, "3442193e"):
        with pytest.raises(URHDKeyValueError, match="invalid parent fingerprint: "):
            CryptoHDKey(PUB_KEY, CHAIN_CODE, origin, fp)  # type: ignore

    with pytest.raises(URHDKeyValueError, match="invalid name: "):
        CryptoHDKey(PUB_KEY, CHAIN_CODE, origin, MASTER_FP, b"name")  # type: ignore


@pytest.mark.parametrize(
    "value, err_msg",
    [
        ([], "crypto-hdkey is not a CBOR map"),
        ({3: b"", 4: b"", 6: None, 8: 0}, "invalid crypto-hdkey keys: "),
        ({4: b"", 3: b"", 6: None, 8: 0, 9: ""}, "invalid crypto-hdkey keys: "),
        ({3: b"", 4: b"", 5: 0, 6: None, 8: 0, 9: ""}, "invalid crypto-hdkey keys: "),
        ({3: "03", 4: b"", 6: None, 8: 0, 9: ""}, "key 3 is not a byte string"),
        ({3: b"", 4: [], 6: None, 8: 0, 9: ""}, "key 4 is not a byte string"),
    ],
)
def test_invalid_cbor_values(value: object, err_msg: str) -> None:

    with pytest.raises(URHDKeyValueError, match=err_msg):
        CryptoHDKey.from_cbor_value(value)


def test_invalid_origin() -> None:

    obj = cbor.parse(GOLDEN)
    obj[6] = cbor.Tagged(305, obj[6].value)
    with pytest.raises(URHDKeyValueError, match="not a tag 304 key origin"):
        CryptoHDKey.parse(cbor.serialize(obj))
