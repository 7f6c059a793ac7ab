#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""SEC compressed point representation.

Only the compressed form is supported: it is the one used by BIP32
and by the crypto-hdkey key-data field.
"""

from urhdkey.alias import Octets, Point
from urhdkey.ec.curve import Curve, secp256k1
from urhdkey.exceptions import URHDKeyValueError
from urhdkey.utils import bytes_from_octets, hex_string


def bytes_from_point(Q: Point, ec: Curve = secp256k1) -> bytes:
    """Return a point as compressed (0x02, 0x03) octet sequence.

    See SEC 1 v.2, section 2.3.3.
    """

    # check that Q is a point and that is on curve
    ec.require_on_curve(Q)

    if Q[1] == 0:  # infinity point in affine coordinates
        raise URHDKeyValueError("no bytes representation for infinity point")

    bytes_ = Q[0].to_bytes(ec.p_size, byteorder="big", signed=False)
    return (b"\x03" if (Q[1] & 1) else b"\x02") + bytes_


def point_from_octets(pub_key: Octets, ec: Curve = secp256k1) -> Point:
    """Return a tuple (x_Q, y_Q) that belongs to the curve.

    See SEC 1 v.2, section 2.3.4.
    """

    pub_key = bytes_from_octets(pub_key, ec.p_size + 1)

    if pub_key[0] not in (0x02, 0x03):
        err_msg = f"invalid compressed point prefix: 0x{pub_key[:1].hex()}"
        raise URHDKeyValueError(err_msg)

    x_Q = int.from_bytes(pub_key[1:], byteorder="big")
    try:
        y_Q = ec.y_even(x_Q)  # also check x_Q validity
    except URHDKeyValueError as e:
        msg = f"invalid x-coordinate: '{hex_string(x_Q)}'"
        raise URHDKeyValueError(msg) from e
    return x_Q, y_Q if pub_key[0] == 0x02 else ec.p - y_Q
