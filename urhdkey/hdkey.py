#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""crypto-hdkey record of an extended public key.

See BCR-2020-007 (https://github.com/BlockchainCommons/Research).
The record is a CBOR map; the subset used by air-gapped wallets
is, strictly in this order:

- [ 3] key-data: 33 bytes compressed public key
- [ 4] chain-code: 32 bytes
- [ 6] origin: crypto-keypath (tag 304)
- [ 8] parent-fingerprint: uint32
- [ 9] name: text

No other key is emitted and the order is never changed:
it is the schema the scanning device parses.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Type, TypeVar

from urhdkey import cbor, ur
from urhdkey.alias import BinaryData, Octets
from urhdkey.bip32.key_origin import BIP32KeyOrigin
from urhdkey.ec import point_from_octets
from urhdkey.exceptions import URHDKeyValueError
from urhdkey.profile import DEFAULT_PROFILE
from urhdkey.utils import bytes_from_octets

UR_TYPE = "crypto-hdkey"

_KEY_DATA = 3
_CHAIN_CODE = 4
_ORIGIN = 6
_PARENT_FINGERPRINT = 8
_NAME = 9

_KEY_ORDER = [_KEY_DATA, _CHAIN_CODE, _ORIGIN, _PARENT_FINGERPRINT, _NAME]

_KEY_SIZE: List[Tuple[str, int]] = [
    ("key", 33),
    ("chain_code", 32),
]

_CryptoHDKey = TypeVar("_CryptoHDKey", bound="CryptoHDKey")


@dataclass(frozen=True)
class CryptoHDKey:
    key: bytes
    chain_code: bytes
    origin: BIP32KeyOrigin
    parent_fingerprint: int
    name: str

    def __init__(
        self,
        key: Octets,
        chain_code: Octets,
        origin: BIP32KeyOrigin,
        parent_fingerprint: int,
        name: str = DEFAULT_PROFILE.name,
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "key", bytes_from_octets(key))
        object.__setattr__(self, "chain_code", bytes_from_octets(chain_code))
        object.__setattr__(self, "origin", origin)
        object.__setattr__(self, "parent_fingerprint", parent_fingerprint)
        object.__setattr__(self, "name", name)

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:

        for key, size in _KEY_SIZE:
            value = getattr(self, key)
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise URHDKeyValueError(err_msg)

        # key-data must be a public key: private keys never leave the device
        try:
            point_from_octets(self.key)
        except URHDKeyValueError as e:
            raise URHDKeyValueError(f"invalid public key: 0x{self.key.hex()}") from e

        self.origin.assert_valid()

        fp = self.parent_fingerprint
        if not isinstance(fp, int) or isinstance(fp, bool) or not 0 <= fp <= 0xFFFFFFFF:
            raise URHDKeyValueError(f"invalid parent fingerprint: {fp!r}")

        if not isinstance(self.name, str):
            raise URHDKeyValueError(f"invalid name: {self.name!r}")

    def to_cbor_value(self, check_validity: bool = True) -> Dict[int, Any]:

        if check_validity:
            self.assert_valid()

        # insertion order is the serialization order
        return {
            _KEY_DATA: self.key,
            _CHAIN_CODE: self.chain_code,
            _ORIGIN: self.origin.to_cbor_value(check_validity),
            _PARENT_FINGERPRINT: self.parent_fingerprint,
            _NAME: self.name,
        }

    def serialize(self, check_validity: bool = True) -> bytes:
        return cbor.serialize(self.to_cbor_value(check_validity))

    @classmethod
    def from_cbor_value(
        cls: Type[_CryptoHDKey], obj: Any, check_validity: bool = True
    ) -> _CryptoHDKey:

        if not isinstance(obj, dict):
            raise URHDKeyValueError("crypto-hdkey is not a CBOR map")
        if list(obj) != _KEY_ORDER:
            raise URHDKeyValueError(f"invalid crypto-hdkey keys: {list(obj)}")
        for k in (_KEY_DATA, _CHAIN_CODE):
            if not isinstance(obj[k], bytes):
                raise URHDKeyValueError(f"crypto-hdkey key {k} is not a byte string")

        return cls(
            obj[_KEY_DATA],
            obj[_CHAIN_CODE],
            BIP32KeyOrigin.from_cbor_value(obj[_ORIGIN], check_validity),
            obj[_PARENT_FINGERPRINT],
            obj[_NAME],
            check_validity,
        )

    @classmethod
    def parse(
        cls: Type[_CryptoHDKey], data: BinaryData, check_validity: bool = True
    ) -> _CryptoHDKey:
        "Return a CryptoHDKey by parsing CBOR binary data."
        return cls.from_cbor_value(cbor.parse(data), check_validity)

    def to_ur(self, max_fragment_len: int = DEFAULT_PROFILE.max_fragment_len) -> str:
        "Return the upper-case single-part UR encoding."
        return ur.encode(self.serialize(), UR_TYPE, max_fragment_len)

    @classmethod
    def from_ur(
        cls: Type[_CryptoHDKey], ur_text: str, check_validity: bool = True
    ) -> _CryptoHDKey:
        ur_type, data = ur.decode(ur_text)
        if ur_type != UR_TYPE:
            raise URHDKeyValueError(f"invalid UR type: {ur_type!r} instead of {UR_TYPE!r}")
        return cls.parse(data, check_validity)


def encode_hdkey(
    pub_key: Octets,
    chain_code: Octets,
    origin: BIP32KeyOrigin,
    parent_fingerprint: int,
    name: str = DEFAULT_PROFILE.name,
) -> bytes:
    "Return the canonical CBOR crypto-hdkey record."

    return CryptoHDKey(pub_key, chain_code, origin, parent_fingerprint, name).serialize()
