#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Command line interface: urhdkey [options] or python -m urhdkey [options].

The mnemonic is read from standard input unless --mnemonic is given,
so that it does not end up in the shell history.

Exit status is 0 on success, 2 for invalid input
(mnemonic, path, fingerprint override, profile),
1 for any derivation or internal failure.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from urhdkey import __version__, qr
from urhdkey.export import export_hdkey
from urhdkey.profile import AUTO_PARENT, DEFAULT_PROFILE, PROFILES, profile_from_name

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urhdkey",
        description="Export a BIP32 extended public key as crypto-hdkey UR",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--mnemonic", help="BIP39 mnemonic (default: read from standard input)"
    )
    parser.add_argument("--passphrase", default="", help="BIP39 passphrase")
    parser.add_argument(
        "--path",
        default=None,
        help=f"derivation path (default: {DEFAULT_PROFILE.default_path})",
    )
    parser.add_argument(
        "--parent-from",
        default=AUTO_PARENT,
        help=f"parent resolution mode, one of {DEFAULT_PROFILE.parent_modes}",
    )
    parser.add_argument("--master-fp", default="", help="master fingerprint override")
    parser.add_argument("--parent-fp", default="", help="parent fingerprint override")
    parser.add_argument(
        "--profile",
        default="airgap",
        help=f"export profile, one of {sorted(PROFILES)}",
    )
    parser.add_argument("--qr-png", metavar="FILE", help="write the QR code as PNG")
    parser.add_argument(
        "--qr-scale",
        default=qr.DEFAULT_SCALE,
        help=f"QR module size in pixels, {qr.MIN_SCALE} to {qr.MAX_SCALE}",
    )
    parser.add_argument(
        "--qr-ascii", action="store_true", help="print the QR code on the terminal"
    )
    parser.add_argument(
        "--json", action="store_true", help="print the full export as JSON"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-5s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    mnemonic = args.mnemonic if args.mnemonic is not None else sys.stdin.read()
    try:
        result = export_hdkey(
            mnemonic,
            args.passphrase,
            args.path,
            args.parent_from,
            args.master_fp,
            args.parent_fp,
            profile_from_name(args.profile),
            args.qr_scale if args.json else None,
        )
        png = qr.qr_png(result.ur, args.qr_scale) if args.qr_png else None
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except RuntimeError as e:
        logger.debug("export failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if png is not None:
        with open(args.qr_png, "wb") as file_:
            file_.write(png)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(result.ur)
    if args.qr_ascii:
        print(qr.qr_ascii(result.ur))
    return 0
