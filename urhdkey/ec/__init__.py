#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module urhdkey.ec."""

from urhdkey.ec.curve import Curve, mult, secp256k1
from urhdkey.ec.sec_point import bytes_from_point, point_from_octets

__all__ = [
    "Curve",
    "mult",
    "secp256k1",
    "bytes_from_point",
    "point_from_octets",
]
