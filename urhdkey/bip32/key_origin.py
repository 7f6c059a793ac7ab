#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 key origin, i.e. derivation provenance of a key.

The key origin is exported as crypto-keypath (CBOR tag 304):

    #6.304({1: [index, hardened, index, hardened, ...], 2: source_fingerprint})

The components array is "compact": the steps are flattened as
index and hardened boolean pairs, in derivation order.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Type, TypeVar

from urhdkey import cbor
from urhdkey.alias import BinaryData
from urhdkey.bip32.der_path import (
    DerPath,
    DerPathStep,
    indexes_from_der_path,
    parent_der_path,
    steps_from_der_path,
    str_from_der_path,
)
from urhdkey.bip32.fingerprint import fingerprint_from_hex, hex_from_fingerprint
from urhdkey.exceptions import URHDKeyValueError
from urhdkey.profile import AUTO_PARENT, DEFAULT_PROFILE, ExportProfile

KEY_ORIGIN_TAG = 304

_COMPONENTS = 1
_SOURCE_FINGERPRINT = 2

_BIP32KeyOrigin = TypeVar("_BIP32KeyOrigin", bound="BIP32KeyOrigin")


def _is_uint(value: Any) -> bool:
    # bool is an int subclass, but not a CBOR unsigned integer
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class BIP32KeyOrigin:
    master_fingerprint: int
    der_path: Sequence[int]

    @property
    def description(self) -> str:
        fp = hex_from_fingerprint(self.master_fingerprint)
        return str_from_der_path(self.der_path, fp)

    @property
    def steps(self) -> List[DerPathStep]:
        return [DerPathStep(i & 0x7FFFFFFF, i >= 0x80000000) for i in self.der_path]

    @property
    def components(self) -> List[Any]:
        "Return the compact array of index and hardened boolean pairs."
        result: List[Any] = []
        for step in self.steps:
            result.extend((step.index, step.hardened))
        return result

    def __init__(
        self,
        master_fingerprint: int,
        der_path: DerPath,
        check_validity: bool = True,
    ) -> None:
        object.__setattr__(self, "master_fingerprint", master_fingerprint)
        object.__setattr__(self, "der_path", indexes_from_der_path(der_path))

        if check_validity:
            self.assert_valid()

    def __len__(self) -> int:
        return len(self.der_path)

    def assert_valid(self) -> None:
        if not _is_uint(self.master_fingerprint) or self.master_fingerprint > 0xFFFFFFFF:
            err_msg = f"invalid master fingerprint: {self.master_fingerprint!r}"
            raise URHDKeyValueError(err_msg)
        if len(self) > 255:
            raise URHDKeyValueError(f"invalid der_path size: {len(self.der_path)}")
        if any(not 0 <= i <= 0xFFFFFFFF for i in self.der_path):
            raise URHDKeyValueError("invalid der_path element")

    def to_dict(self, check_validity: bool = True) -> Dict[str, str]:
        if check_validity:
            self.assert_valid()

        return {
            "master_fingerprint": hex_from_fingerprint(self.master_fingerprint),
            "path": str_from_der_path(self.der_path),
        }

    @classmethod
    def from_dict(
        cls: Type[_BIP32KeyOrigin],
        dict_: Mapping[str, str],
        check_validity: bool = True,
    ) -> _BIP32KeyOrigin:
        return cls(
            fingerprint_from_hex(dict_["master_fingerprint"]),  # type: ignore
            dict_["path"],
            check_validity,
        )

    @classmethod
    def from_description(
        cls: Type[_BIP32KeyOrigin], data: str, check_validity: bool = True
    ) -> _BIP32KeyOrigin:
        "Return a BIP32KeyOrigin from a description like 73c5da0a/44'/60'/0'."
        data = data.strip()
        master_fingerprint = fingerprint_from_hex(data[:8])
        return cls(master_fingerprint, "m" + data[8:], check_validity)  # type: ignore

    def to_cbor_value(self, check_validity: bool = True) -> cbor.Tagged:
        if check_validity:
            self.assert_valid()

        value = {
            _COMPONENTS: self.components,
            _SOURCE_FINGERPRINT: self.master_fingerprint,
        }
        return cbor.Tagged(KEY_ORIGIN_TAG, value)

    @classmethod
    def from_cbor_value(
        cls: Type[_BIP32KeyOrigin], obj: Any, check_validity: bool = True
    ) -> _BIP32KeyOrigin:
        "Return a BIP32KeyOrigin from its decoded crypto-keypath CBOR item."

        if not isinstance(obj, cbor.Tagged) or obj.tag != KEY_ORIGIN_TAG:
            raise URHDKeyValueError(f"not a tag {KEY_ORIGIN_TAG} key origin")
        if not isinstance(obj.value, dict):
            raise URHDKeyValueError("key origin is not a CBOR map")
        if list(obj.value) != [_COMPONENTS, _SOURCE_FINGERPRINT]:
            raise URHDKeyValueError(f"invalid key origin keys: {list(obj.value)}")

        components = obj.value[_COMPONENTS]
        if not isinstance(components, list) or len(components) % 2:
            raise URHDKeyValueError("invalid key origin components")
        der_path: List[int] = []
        for index, hardened in zip(components[::2], components[1::2]):
            if not _is_uint(index) or index >= 0x80000000:
                raise URHDKeyValueError(f"invalid key origin index: {index!r}")
            if not isinstance(hardened, bool):
                raise URHDKeyValueError(f"invalid key origin hardening: {hardened!r}")
            der_path.append(DerPathStep(index, hardened).int_index)

        return cls(obj.value[_SOURCE_FINGERPRINT], der_path, check_validity)

    def serialize(self, check_validity: bool = True) -> bytes:
        return cbor.serialize(self.to_cbor_value(check_validity))

    @classmethod
    def parse(
        cls: Type[_BIP32KeyOrigin], data: BinaryData, check_validity: bool = True
    ) -> _BIP32KeyOrigin:
        """Return a BIP32KeyOrigin by parsing CBOR binary data."""
        return cls.from_cbor_value(cbor.parse(data), check_validity)

    def __hash__(self) -> int:
        return hash(self.serialize())


def build_origin(der_path: DerPath, source_fingerprint: int) -> BIP32KeyOrigin:
    "Return the key origin of the key derived along der_path."
    return BIP32KeyOrigin(source_fingerprint, der_path)


def resolve_parent_path(
    der_path: str,
    parent_from: str = AUTO_PARENT,
    profile: ExportProfile = DEFAULT_PROFILE,
) -> str:
    """Return the derivation path of the node used as "parent".

    In AUTO_PARENT mode it is the immediate parent of der_path
    (the root has no parent: InvalidPathError);
    any other mode selects one of the profile forced parent paths,
    regardless of the depth of der_path.
    """

    steps_from_der_path(der_path)
    parent_from = parent_from.strip().lower() if parent_from else AUTO_PARENT
    if parent_from == AUTO_PARENT:
        return parent_der_path(der_path)
    if parent_from not in profile.parent_paths:
        err_msg = f"unknown parent mode: {parent_from!r}"
        err_msg += f" not in {profile.parent_modes}"
        raise URHDKeyValueError(err_msg)
    return profile.parent_paths[parent_from]
