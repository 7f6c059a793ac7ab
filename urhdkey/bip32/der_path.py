#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 derivation path.

A BIP 32 derivation path can be represented as:

- "m/44'/60'/0'" string
- sequence of integer indexes (even a single int),
  with the 0x80000000 bit set for hardened steps

Path strings are strictly checked against the grammar m(/<digits>'?)*:
no blanks inside the path, no empty steps, no alternative hardening
symbols, no missing leading "m".
"""

import re
from typing import List, NamedTuple, Optional, Sequence, Union

from urhdkey.exceptions import InvalidPathError

# the hardening symbol used by the downstream schema
_HARDENING = "'"

_HARDENED_BIT = 0x80000000

_DER_PATH_RE = re.compile(r"m(/[0-9]+'?)*")

_MAX_DEPTH = 255


class DerPathStep(NamedTuple):
    index: int
    hardened: bool

    @property
    def int_index(self) -> int:
        "Return the uint32 index, with the hardened bit applied."
        return self.index + (_HARDENED_BIT if self.hardened else 0)


def int_from_index_str(s: str) -> int:

    hardened = s.endswith(_HARDENING)
    if hardened:
        s = s[:-1]
    if not s.isdigit() or not s.isascii():
        raise InvalidPathError(f"invalid index: {s!r}")

    index = int(s)
    if not 0 <= index < _HARDENED_BIT:
        raise InvalidPathError(f"invalid index: {index}")
    return index + (_HARDENED_BIT if hardened else 0)


def str_from_index_int(i: int) -> str:

    if not 0 <= i <= 0xFFFFFFFF:
        raise InvalidPathError(f"invalid index: {i}")
    if i < _HARDENED_BIT:
        return str(i)
    return str(i - _HARDENED_BIT) + _HARDENING


def _checked_der_path_str(der_path: str) -> str:

    der_path = der_path.strip()
    if not _DER_PATH_RE.fullmatch(der_path):
        raise InvalidPathError(f"invalid derivation path: {der_path!r}")
    return der_path


def steps_from_der_path(der_path: str) -> List[DerPathStep]:
    "Return the (index, hardened) steps of a derivation path string."

    der_path = _checked_der_path_str(der_path)
    indexes = [int_from_index_str(s) for s in der_path.split("/")[1:]]

    if len(indexes) > _MAX_DEPTH:
        raise InvalidPathError(f"depth greater than {_MAX_DEPTH}: {len(indexes)}")
    return [DerPathStep(i & ~_HARDENED_BIT, i >= _HARDENED_BIT) for i in indexes]


DerPath = Union[str, Sequence[int], int]


def indexes_from_der_path(der_path: DerPath) -> List[int]:

    if isinstance(der_path, str):
        return [step.int_index for step in steps_from_der_path(der_path)]

    if isinstance(der_path, int):
        return [der_path]

    # Iterable[int]
    return [int(i) for i in der_path]


def str_from_der_path(
    der_path: DerPath, master_fingerprint: Optional[str] = None
) -> str:
    """Return the normalized string representation of a derivation path.

    The path is prefixed by "m", or by the master fingerprint
    (8 hex characters) if provided.
    """
    indexes = indexes_from_der_path(der_path)
    result = "/".join(str_from_index_int(i) for i in indexes)
    if master_fingerprint:
        first_element = master_fingerprint.strip()
        if len(first_element) != 8:
            err_msg = f"invalid master fingerprint length: {first_element}"
            raise InvalidPathError(err_msg)
    else:
        first_element = "m"

    return first_element + ("/" + result if result else "")


def parent_der_path(der_path: str) -> str:
    """Return the derivation path of the immediate parent.

    The parent of a single step path is the root "m";
    the root itself has no parent.
    """

    der_path = _checked_der_path_str(der_path)
    steps = der_path.split("/")
    if len(steps) == 1:
        raise InvalidPathError("the root path 'm' has no parent")
    return "/".join(steps[:-1])
