#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `urhdkey.bip32.key_origin` module."

import pytest

from urhdkey import cbor
from urhdkey.bip32.key_origin import (
    KEY_ORIGIN_TAG,
    BIP32KeyOrigin,
    build_origin,
    resolve_parent_path,
)
from urhdkey.exceptions import InvalidPathError, URHDKeyValueError
from urhdkey.profile import DEFAULT_PROFILE, ExportProfile


def test_key_origin() -> None:

    origin = BIP32KeyOrigin(0x73C5DA0A, "m/44'/60'/0'")
    assert origin.der_path == [0x8000002C, 0x8000003C, 0x80000000]
    assert len(origin) == 3
    assert origin.description == "73c5da0a/44'/60'/0'"
    assert origin.components == [44, True, 60, True, 0, True]
    assert origin.to_dict() == {
        "master_fingerprint": "73c5da0a",
        "path": "m/44'/60'/0'",
    }
    assert BIP32KeyOrigin.from_dict(origin.to_dict()) == origin
    assert BIP32KeyOrigin.from_description(origin.description) == origin
    assert BIP32KeyOrigin.from_description(" 73C5DA0A/44'/60'/0' ") == origin
    assert origin == build_origin("m/44'/60'/0'", 0x73C5DA0A)
    assert hash(origin) == hash(build_origin("m/44'/60'/0'", 0x73C5DA0A))
    assert len({origin, build_origin("m/44'/60'/0'", 0x73C5DA0A)}) == 1

    origin = BIP32KeyOrigin(0x3442193E, "m/0'/1/2'")
    assert origin.components == [0, True, 1, False, 2, True]

    origin = BIP32KeyOrigin(0x3442193E, "m")
    assert origin.components == []
    assert origin.description == "3442193e"


def test_cbor() -> None:

    origin = BIP32KeyOrigin(0x3442193E, "m/0'")
    value = origin.to_cbor_value()
    assert value == cbor.Tagged(KEY_ORIGIN_TAG, {1: [0, True], 2: 0x3442193E})
    data = origin.serialize()
    assert data.hex() == "d90130a2018200f5021a3442193e"
    assert BIP32KeyOrigin.parse(data) == origin
    assert BIP32KeyOrigin.from_cbor_value(value) == origin

    origin = BIP32KeyOrigin(0x73C5DA0A, "m/44'/60'/0'/0/1")
    assert BIP32KeyOrigin.parse(origin.serialize()) == origin


def test_exceptions() -> None:

    with pytest.raises(URHDKeyValueError, match="invalid master fingerprint: "):
        BIP32KeyOrigin(0xFFFFFFFF + 1, "m/0")

    with pytest.raises(URHDKeyValueError, match="invalid master fingerprint: "):
        BIP32KeyOrigin(-1, "m/0")

    with pytest.raises(URHDKeyValueError, match="invalid master fingerprint: "):
        BIP32KeyOrigin(None, "m/0")  # type: ignore

    with pytest.raises(URHDKeyValueError, match="invalid master fingerprint: "):
        BIP32KeyOrigin(True, "m/0")  # type: ignore

    with pytest.raises(URHDKeyValueError, match="invalid der_path size: "):
        BIP32KeyOrigin(0, [0] * 256)

    with pytest.raises(URHDKeyValueError, match="invalid der_path element"):
        BIP32KeyOrigin(0, [0xFFFFFFFF + 1])

    with pytest.raises(InvalidPathError, match="invalid derivation path: "):
        BIP32KeyOrigin(0, "m/0h")

    with pytest.raises(URHDKeyValueError):
        BIP32KeyOrigin.from_description("zz/0'")


@pytest.mark.parametrize(
    "value, err_msg",
    [
        ({1: [0, True], 2: 0}, "not a tag 304 key origin"),
        (cbor.Tagged(305, {1: [0, True], 2: 0}), "not a tag 304 key origin"),
        (cbor.Tagged(304, [0, True]), "key origin is not a CBOR map"),
        (cbor.Tagged(304, {2: 0, 1: [0, True]}), "invalid key origin keys: "),
        (cbor.Tagged(304, {1: [0, True]}), "invalid key origin keys: "),
        (cbor.Tagged(304, {1: [0, True], 2: 0, 3: 0}), "invalid key origin keys: "),
        (cbor.Tagged(304, {1: [0], 2: 0}), "invalid key origin components"),
        (cbor.Tagged(304, {1: b"\x00\xf5", 2: 0}), "invalid key origin components"),
        (cbor.Tagged(304, {1: [-1, True], 2: 0}), "invalid key origin index: "),
        (cbor.Tagged(304, {1: [True, True], 2: 0}), "invalid key origin index: "),
        (cbor.Tagged(304, {1: [0x80000000, True], 2: 0}), "invalid key origin index: "),
        (cbor.Tagged(304, {1: [0, 1], 2: 0}), "invalid key origin hardening: "),
        (cbor.Tagged(304, {1: [0, True], 2: "0"}), "invalid master fingerprint: "),
    ],
)
def test_invalid_cbor_values(value: object, err_msg: str) -> None:

    with pytest.raises(URHDKeyValueError, match=err_msg):
        BIP32KeyOrigin.from_cbor_value(value)


def test_resolve_parent_path() -> None:

    assert resolve_parent_path("m/44'/60'/0'") == "m/44'/60'"
    assert resolve_parent_path("m/44'/60'/0'", "auto") == "m/44'/60'"
    assert resolve_parent_path("m/44'/60'/0'", "") == "m/44'/60'"
    assert resolve_parent_path("m/44'") == "m"

    # forced parent, regardless of the depth of the requested path
    for der_path in ("m/0", "m/44'/60'/0'", "m/44'/60'/0'/0/7"):
        assert resolve_parent_path(der_path, "m44h60h") == "m/44'/60'"
        assert resolve_parent_path(der_path, " M44H60H ") == "m/44'/60'"

    with pytest.raises(InvalidPathError, match="the root path 'm' has no parent"):
        resolve_parent_path("m")

    # forced parent paths are always available, even for the root
    assert resolve_parent_path("m", "m44h60h") == "m/44'/60'"

    with pytest.raises(InvalidPathError, match="invalid derivation path: "):
        resolve_parent_path("m//0", "m44h60h")

    with pytest.raises(URHDKeyValueError, match="unknown parent mode: "):
        resolve_parent_path("m/44'/60'/0'", "m44h")

    profile = ExportProfile("test", 400, "m/84'/0'/0'", {"bip84": "m/84'/0'"})
    assert resolve_parent_path("m/84'/0'/0'/0", "bip84", profile) == "m/84'/0'"
    with pytest.raises(URHDKeyValueError, match="unknown parent mode: "):
        resolve_parent_path("m/44'/60'/0'", "m44h60h", profile)
    assert resolve_parent_path("m/44'/60'/0'", "m44h60h", DEFAULT_PROFILE) == "m/44'/60'"
