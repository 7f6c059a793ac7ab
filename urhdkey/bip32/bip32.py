#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""BIP32 Hierarchical Deterministic Wallet functions.

A hierarchical deterministic wallet is a tree of multiple hash-chains,
derived from a single root, allowing for selective sharing of keypair
chains.

Here, the HD wallet is implemented according to BIP32 bitcoin standard
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki.

A BIP32 node is made of:

- depth in the derivation path
- parent fingerprint
- child index
- chain code
- compressed pub_key or [0x00][prv_key]

The extended key version bytes are not part of the node:
nodes are exported as crypto-hdkey records, not as base58 xkeys.
"""

import copy
import hmac
from dataclasses import dataclass
from typing import List, Tuple

from urhdkey.alias import INF, Octets, Point
from urhdkey.bip32.der_path import DerPath, indexes_from_der_path
from urhdkey.bip32.fingerprint import fingerprint
from urhdkey.ec import bytes_from_point, mult, point_from_octets, secp256k1
from urhdkey.exceptions import DerivationError, URHDKeyValueError
from urhdkey.hashes import hash160
from urhdkey.utils import bytes_from_octets, hex_string

ec = secp256k1


_KEY_SIZE: List[Tuple[str, int]] = [
    ("parent_fingerprint", 4),
    ("chain_code", 32),
    ("key", 33),
]


@dataclass
class BIP32Node:
    depth: int
    parent_fingerprint: bytes
    # index is an int, not bytes, to avoid any byteorder ambiguity
    index: int
    chain_code: bytes
    key: bytes

    @property
    def is_private(self) -> bool:
        return self.key[0] == 0

    @property
    def is_hardened(self) -> bool:
        return self.index >= 0x80000000

    @property
    def is_root(self) -> bool:
        return (
            self.depth == 0
            and self.index == 0
            and self.parent_fingerprint == b"\x00" * 4
        )

    @property
    def pub_key(self) -> bytes:
        "Return the compressed public key of the node."
        if not self.is_private:
            return self.key
        q = int.from_bytes(self.key[1:], byteorder="big", signed=False)
        return bytes_from_point(mult(q))

    @property
    def fingerprint(self) -> int:
        "Return the uint32 fingerprint of the node public key."
        return fingerprint(self.pub_key)

    def __init__(
        self,
        depth: int,
        parent_fingerprint: Octets,
        index: int,
        chain_code: Octets,
        key: Octets,
        check_validity: bool = True,
    ) -> None:

        self.depth = depth
        self.parent_fingerprint = bytes_from_octets(parent_fingerprint)
        self.index = index
        self.chain_code = bytes_from_octets(chain_code)
        self.key = bytes_from_octets(key)

        if check_validity:
            self.assert_valid()

    def assert_valid(self) -> None:

        for key, size in _KEY_SIZE:
            value = bytes(getattr(self, key))
            setattr(self, key, value)
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise URHDKeyValueError(err_msg)

        self.index = int(self.index)
        if not 0 <= self.index <= 0xFFFFFFFF:
            raise URHDKeyValueError(f"invalid index: {self.index}")

        self.depth = int(self.depth)
        if not 0 <= self.depth <= 255:
            raise URHDKeyValueError(f"invalid depth: {self.depth}")

        if self.depth == 0:
            if self.parent_fingerprint != b"\x00" * 4:
                err_msg = "zero depth with non-zero parent fingerprint: "
                err_msg += f"0x{self.parent_fingerprint.hex()}"
                raise URHDKeyValueError(err_msg)
            if self.index != 0:
                raise URHDKeyValueError(f"zero depth with non-zero index: {self.index}")

        if self.is_private:
            q = int.from_bytes(self.key[1:], byteorder="big", signed=False)
            if not 0 < q < ec.n:
                raise URHDKeyValueError(f"invalid private key not in 1..n-1: {hex(q)}")
        elif self.key[0] in (2, 3):
            try:
                point_from_octets(self.key, ec)
            except URHDKeyValueError as e:
                err_msg = f"invalid public key: 0x{self.key.hex()}"
                raise URHDKeyValueError(err_msg) from e
        else:
            err_msg = f"invalid key prefix not in (0x00, 0x02, 0x03): 0x{self.key[:1].hex()}"
            raise URHDKeyValueError(err_msg)


def root_node_from_seed(seed: Octets) -> BIP32Node:
    """Return BIP32 root master node (private) from seed."""

    seed = bytes_from_octets(seed)
    bitlenght = len(seed) * 8
    if bitlenght < 128:
        raise URHDKeyValueError(
            f"too few bits for seed: {bitlenght} in '{hex_string(seed)}'"
        )
    if bitlenght > 512:
        raise URHDKeyValueError(
            f"too many bits for seed: {bitlenght} in '{hex_string(seed)}'"
        )
    hmac_ = hmac.new(b"Bitcoin seed", seed, "sha512").digest()
    q = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
    if not 0 < q < ec.n:
        raise DerivationError(f"invalid master key from seed: {hex(q)}")

    return BIP32Node(
        depth=0,
        parent_fingerprint=b"\x00" * 4,
        index=0,
        chain_code=hmac_[32:],
        key=b"\x00" + hmac_[:32],
    )


def neutered(node: BIP32Node) -> BIP32Node:
    """Neutered Derivation (ND).

    Derivation of the public node corresponding to a private node
    (“neutered” as it removes the ability to sign transactions).
    """

    if not node.is_private:
        raise URHDKeyValueError("not a private node")

    result = copy.copy(node)
    result.key = node.pub_key
    return result


@dataclass
class _ExtendedBIP32Node(BIP32Node):
    # extensions used to cache intermediate results
    # in multi-level derivation: do not rely on them elsewhere
    prv_key_int: int  # non-zero for private key only
    pub_key_point: Point  # non-Infinity for public key only

    def __init__(
        self,
        depth: int,
        parent_fingerprint: Octets,
        index: int,
        chain_code: Octets,
        key: Octets,
    ) -> None:

        super().__init__(depth, parent_fingerprint, index, chain_code, key, False)

        if self.is_private:
            self.prv_key_int = int.from_bytes(self.key[1:], "big", signed=False)
            self.pub_key_point = INF
        else:
            self.prv_key_int = 0
            self.pub_key_point = point_from_octets(self.key, ec)


def __ckd(xkey: _ExtendedBIP32Node, index: int) -> None:

    xkey.depth += 1
    xkey.index = index
    if xkey.is_private:
        Q_bytes = bytes_from_point(mult(xkey.prv_key_int))
        xkey.parent_fingerprint = hash160(Q_bytes)[:4]
        if xkey.is_hardened:  # hardened derivation
            hmac_ = hmac.new(
                xkey.chain_code,
                xkey.key + index.to_bytes(4, byteorder="big", signed=False),
                "sha512",
            ).digest()
        else:  # normal derivation
            hmac_ = hmac.new(
                xkey.chain_code,
                Q_bytes + index.to_bytes(4, byteorder="big", signed=False),
                "sha512",
            ).digest()
        offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
        if offset >= ec.n:
            raise DerivationError(f"invalid derivation at index {index}: IL >= n")
        xkey.chain_code = hmac_[32:]
        xkey.prv_key_int = (xkey.prv_key_int + offset) % ec.n
        if xkey.prv_key_int == 0:
            raise DerivationError(f"invalid derivation at index {index}: zero key")
        xkey.key = b"\x00" + xkey.prv_key_int.to_bytes(
            32, byteorder="big", signed=False
        )
        xkey.pub_key_point = INF
    else:  # public key
        xkey.parent_fingerprint = hash160(xkey.key)[:4]
        if xkey.is_hardened:
            raise DerivationError("invalid hardened derivation from public key")
        hmac_ = hmac.new(
            xkey.chain_code,
            xkey.key + index.to_bytes(4, byteorder="big", signed=False),
            "sha512",
        ).digest()
        offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
        if offset >= ec.n:
            raise DerivationError(f"invalid derivation at index {index}: IL >= n")
        xkey.chain_code = hmac_[32:]
        xkey.pub_key_point = ec.add(xkey.pub_key_point, mult(offset))
        if xkey.pub_key_point[1] == 0:
            raise DerivationError(f"invalid derivation at index {index}: INF point")
        xkey.key = bytes_from_point(xkey.pub_key_point)
        xkey.prv_key_int = 0


def derive(node: BIP32Node, der_path: DerPath) -> BIP32Node:
    """Derive a BIP32 node across a path spanning multiple depth levels.

    Valid DerPath examples:

    - string like "m/44'/60'/0'"
    - iterable integer indexes
    - one single integer index

    The input node is not modified.
    """

    indexes = indexes_from_der_path(der_path)
    for index in indexes:
        if not 0 <= index <= 0xFFFFFFFF:
            raise DerivationError(f"invalid index: {index}")

    final_depth = node.depth + len(indexes)
    if final_depth > 255:
        err_msg = f"final depth greater than 255: {final_depth}"
        raise DerivationError(err_msg)

    xkey = _ExtendedBIP32Node(
        depth=node.depth,
        parent_fingerprint=node.parent_fingerprint,
        index=node.index,
        chain_code=node.chain_code,
        key=node.key,
    )
    for index in indexes:
        __ckd(xkey, index)

    return BIP32Node(
        xkey.depth, xkey.parent_fingerprint, xkey.index, xkey.chain_code, xkey.key
    )
