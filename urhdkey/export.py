#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Export of a derived extended public key as crypto-hdkey UR.

One export call runs the whole chain:

mnemonic -> seed -> root node -> derived node and parent node ->
fingerprints (or their overrides) -> key origin ->
crypto-hdkey CBOR record -> single-part UR text -> optional QR code.

Every input is validated before the slow PBKDF2 seed stretching;
the call either returns a complete HDKeyExport or raises.
Neither the seed nor any private key outlives the call.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from urhdkey import qr
from urhdkey.alias import Octets
from urhdkey.bip32.bip32 import BIP32Node, derive, root_node_from_seed
from urhdkey.bip32.der_path import steps_from_der_path
from urhdkey.bip32.fingerprint import fingerprint_from_hex, hex_from_fingerprint
from urhdkey.bip32.key_origin import build_origin, resolve_parent_path
from urhdkey.hdkey import CryptoHDKey
from urhdkey.mnemonic.bip39 import seed_from_mnemonic
from urhdkey.profile import AUTO_PARENT, DEFAULT_PROFILE, ExportProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HDKeyExport:
    ur: str
    path: str
    parent_path: str
    master_fingerprint: int
    parent_fingerprint: int
    hdkey: CryptoHDKey
    qr_data_url: Optional[str] = None

    @property
    def master_fingerprint_hex(self) -> str:
        return hex_from_fingerprint(self.master_fingerprint)

    @property
    def parent_fingerprint_hex(self) -> str:
        return hex_from_fingerprint(self.parent_fingerprint)

    def to_dict(self) -> Dict[str, str]:
        "Return the JSON-friendly export response."

        result = {
            "ur": self.ur,
            "path": self.path,
            "parentPath": self.parent_path,
            "masterFpHex": self.master_fingerprint_hex,
            "parentFpHex": self.parent_fingerprint_hex,
        }
        if self.qr_data_url is not None:
            result["qrDataUrl"] = self.qr_data_url
        return result


@dataclass(frozen=True)
class _ExportRequest:
    der_path: str
    parent_path: str
    master_fingerprint: Optional[int]
    parent_fingerprint: Optional[int]
    profile: ExportProfile


def _export_request(
    der_path: Optional[str],
    parent_from: str,
    master_fingerprint: Optional[str],
    parent_fingerprint: Optional[str],
    profile: ExportProfile,
) -> _ExportRequest:
    "Validate every non-secret input, in the documented order."

    master_fp = fingerprint_from_hex(master_fingerprint)
    parent_fp = fingerprint_from_hex(parent_fingerprint)

    der_path = profile.default_path if der_path is None else der_path.strip()
    steps_from_der_path(der_path)
    parent_path = resolve_parent_path(der_path, parent_from, profile)
    return _ExportRequest(der_path, parent_path, master_fp, parent_fp, profile)


def _export_from_root(
    root: BIP32Node, request: _ExportRequest, qr_scale: Optional[int]
) -> HDKeyExport:

    # two independent derivations from the same root
    node = derive(root, request.der_path)
    parent = derive(root, request.parent_path)

    master_fp = root.fingerprint
    if request.master_fingerprint is not None:
        logger.debug("master fingerprint overridden")
        master_fp = request.master_fingerprint
    parent_fp = parent.fingerprint
    if request.parent_fingerprint is not None:
        logger.debug("parent fingerprint overridden")
        parent_fp = request.parent_fingerprint
    logger.debug(
        "master fingerprint: %s, parent fingerprint: %s",
        hex_from_fingerprint(master_fp),
        hex_from_fingerprint(parent_fp),
    )

    hdkey = CryptoHDKey(
        node.pub_key,
        node.chain_code,
        build_origin(request.der_path, master_fp),
        parent_fp,
        request.profile.name,
    )
    ur_text = hdkey.to_ur(request.profile.max_fragment_len)
    logger.debug("UR: %d characters", len(ur_text))

    qr_data_url = None
    if qr_scale is not None:
        qr_data_url = qr.qr_data_url(ur_text, qr_scale)

    return HDKeyExport(
        ur_text,
        request.der_path,
        request.parent_path,
        master_fp,
        parent_fp,
        hdkey,
        qr_data_url,
    )


def export_hdkey(
    mnemonic: str,
    passphrase: str = "",
    der_path: Optional[str] = None,
    parent_from: str = AUTO_PARENT,
    master_fingerprint: Optional[str] = "",
    parent_fingerprint: Optional[str] = "",
    profile: ExportProfile = DEFAULT_PROFILE,
    qr_scale: Optional[int] = None,
) -> HDKeyExport:
    """Return the crypto-hdkey export of the node at der_path.

    der_path defaults to the profile default path;
    parent_from is "auto" (the immediate parent of der_path)
    or one of the profile forced parent modes.
    Fingerprint overrides are 8 hex characters,
    while None or an empty string mean no override.
    If qr_scale is not None, the UR is also rendered as PNG QR code.
    """

    request = _export_request(
        der_path, parent_from, master_fingerprint, parent_fingerprint, profile
    )
    logger.debug("path: %s, parent path: %s", request.der_path, request.parent_path)
    root = root_node_from_seed(seed_from_mnemonic(mnemonic, passphrase))
    return _export_from_root(root, request, qr_scale)


def export_hdkey_from_seed(
    seed: Octets,
    der_path: Optional[str] = None,
    parent_from: str = AUTO_PARENT,
    master_fingerprint: Optional[str] = "",
    parent_fingerprint: Optional[str] = "",
    profile: ExportProfile = DEFAULT_PROFILE,
    qr_scale: Optional[int] = None,
) -> HDKeyExport:
    "Return the crypto-hdkey export of the node at der_path from a BIP32 seed."

    request = _export_request(
        der_path, parent_from, master_fingerprint, parent_fingerprint, profile
    )
    logger.debug("path: %s, parent path: %s", request.der_path, request.parent_path)
    root = root_node_from_seed(seed)
    return _export_from_root(root, request, qr_scale)
