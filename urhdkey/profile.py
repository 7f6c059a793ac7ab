#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Export profiles: the settings expected by a consuming wallet.

A profile fixes the crypto-hdkey label (key 9),
the maximum UR fragment length, the default derivation path,
and the forced parent paths selectable as parent resolution modes
(some wallets expect the account-level path as "parent"
rather than the direct one-level-up path).
"""

import json
from dataclasses import dataclass
from os import path
from typing import Any, Dict, List, Mapping, Type, TypeVar

from urhdkey.bip32.der_path import steps_from_der_path
from urhdkey.exceptions import URHDKeyValueError

AUTO_PARENT = "auto"

_ExportProfile = TypeVar("_ExportProfile", bound="ExportProfile")


@dataclass(frozen=True)
class ExportProfile:
    # crypto-hdkey name (key 9)
    name: str
    max_fragment_len: int
    default_path: str
    # parent resolution mode -> forced parent derivation path
    parent_paths: Mapping[str, str]

    def __init__(
        self,
        name: str,
        max_fragment_len: int,
        default_path: str,
        parent_paths: Mapping[str, str],
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "name", name)
        object.__setattr__(self, "max_fragment_len", max_fragment_len)
        object.__setattr__(self, "default_path", default_path)
        object.__setattr__(self, "parent_paths", dict(parent_paths))

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:

        if not isinstance(self.name, str):
            raise URHDKeyValueError(f"invalid name: {self.name!r}")
        if not isinstance(self.max_fragment_len, int) or self.max_fragment_len < 10:
            err_msg = f"invalid max fragment length: {self.max_fragment_len!r}"
            raise URHDKeyValueError(err_msg)
        steps_from_der_path(self.default_path)
        if AUTO_PARENT in self.parent_paths:
            raise URHDKeyValueError(f"reserved parent mode: {AUTO_PARENT}")
        for der_path in self.parent_paths.values():
            if not steps_from_der_path(der_path):
                raise URHDKeyValueError("a forced parent path cannot be the root")

    def to_dict(self, check_validity: bool = True) -> Dict[str, Any]:

        if check_validity:
            self.assert_valid()

        return {
            "name": self.name,
            "max_fragment_len": self.max_fragment_len,
            "default_path": self.default_path,
            "parent_paths": dict(self.parent_paths),
        }

    @classmethod
    def from_dict(
        cls: Type[_ExportProfile],
        dict_: Mapping[str, Any],
        check_validity: bool = True,
    ) -> _ExportProfile:

        return cls(
            dict_["name"],
            dict_["max_fragment_len"],
            dict_["default_path"],
            dict_.get("parent_paths", {}),
            check_validity,
        )

    @property
    def parent_modes(self) -> List[str]:
        "Return the available parent resolution modes."
        return [AUTO_PARENT] + sorted(self.parent_paths)


PROFILES: Dict[str, ExportProfile] = {}
datadir = path.join(path.dirname(__file__), "_data")
for profile_name in ("airgap",):
    filename = path.join(datadir, profile_name + ".json")
    with open(filename, "r", encoding="ascii") as file_:
        PROFILES[profile_name] = ExportProfile.from_dict(json.load(file_))

DEFAULT_PROFILE = PROFILES["airgap"]


def profile_from_name(name: str) -> ExportProfile:

    name = name.strip().lower()
    if name not in PROFILES:
        raise URHDKeyValueError(f"unknown profile: {name!r}")
    return PROFILES[name]
