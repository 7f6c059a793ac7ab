#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve of prime order over Fp, restricted to what BIP32 needs.

The curve is the set of points (x, y)
that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
with x, y, a, and b in Fp (p being a prime),
together with a point at infinity INF.

Only secp256k1 is instantiated: it is the curve of BIP32 keys.
"""

from typing import Optional

from urhdkey.alias import INF, INFJ, Integer, JacPoint, Point
from urhdkey.ec import libsecp256k1
from urhdkey.exceptions import URHDKeyTypeError, URHDKeyValueError
from urhdkey.utils import hex_string, int_from_integer


def _jac_from_aff(Q: Point) -> JacPoint:
    """Return the Jacobian representation of the affine point.

    The input point is assumed to be on curve.
    """
    return Q[0], Q[1], 1 if Q[1] else 0


def mod_inv(a: int, m: int) -> int:
    "Return the inverse of a (mod m)."

    a %= m
    if a == 0:
        raise URHDKeyValueError(f"no inverse for 0 mod {m}")
    return pow(a, -1, m)


class Curve:
    "Prime order group of the points of an elliptic curve over Fp."

    def __init__(
        self, name: str, p: Integer, a: Integer, b: Integer, G: Point, n: Integer
    ) -> None:

        self.name = name
        p = int_from_integer(p)
        # Fermat test will do as _probabilistic_ primality test...
        if p < 2 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise URHDKeyValueError(f"p is not prime: {hex_string(p)}")
        # square roots are computed as a^((p+1)/4)
        if p % 4 != 3:
            raise URHDKeyValueError("field prime is not equal to 3 mod 4")
        self.p = p
        self.p_size = (p.bit_length() + 7) // 8
        self._a = int_from_integer(a) % p
        self._b = int_from_integer(b) % p
        if (4 * self._a ** 3 + 27 * self._b ** 2) % p == 0:
            raise URHDKeyValueError("zero discriminant")

        self.G = G
        self.GJ = _jac_from_aff(G)
        self.require_on_curve(G)

        self.n = int_from_integer(n)
        self.n_size = (self.n.bit_length() + 7) // 8

    def _aff_from_jac(self, Q: JacPoint) -> Point:
        # point is assumed to be on curve
        if Q[2] == 0:  # Infinity point in Jacobian coordinates
            return INF
        Z2 = Q[2] * Q[2]
        x = Q[0] * mod_inv(Z2, self.p)
        y = Q[1] * mod_inv(Z2 * Q[2], self.p)
        return x % self.p, y % self.p

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """

        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        QJ = self._add_jac(_jac_from_aff(Q1), _jac_from_aff(Q2))
        return self._aff_from_jac(QJ)

    def _add_jac(self, Q: JacPoint, R: JacPoint) -> JacPoint:
        # points are assumed to be on curve

        RZ2 = R[2] * R[2]
        RZ3 = RZ2 * R[2]
        QZ2 = Q[2] * Q[2]
        QZ3 = QZ2 * Q[2]

        M = Q[0] * RZ2
        N = R[0] * QZ2

        T = Q[1] * RZ3
        U = R[1] * QZ3

        if M % self.p == N % self.p:  # same affine x
            if T % self.p == U % self.p:  # point doubling
                return self._double_jac(Q)

        W = U - T
        V = N - M

        V2 = V * V
        V3 = V2 * V
        MV2 = M * V2

        X = (W * W - V3 - 2 * MV2) % self.p
        Y = (W * (MV2 - X) - T * V3) % self.p
        Z = (V * Q[2] * R[2]) % self.p

        # Z is zero if Q or R are equal to INFJ,
        # so (X, Y, Z) is INFJ instead of being R or Q (respectively)
        ret_values = [(X, Y, Z), R, Q, INFJ]
        i = (Q[2] == 0) + (R[2] == 0) * 2
        return ret_values[i]

    def _double_jac(self, Q: JacPoint) -> JacPoint:
        # point is assumed to be on curve

        QZ2 = Q[2] * Q[2]
        QY2 = Q[1] * Q[1]
        W = 3 * Q[0] * Q[0] + self._a * QZ2 * QZ2
        V = 4 * Q[0] * QY2
        X = W * W - 2 * V
        Y = W * (V - X) - 8 * QY2 * QY2
        Z = 2 * Q[1] * Q[2]
        return X % self.p, Y % self.p, Z % self.p

    def _y2(self, x: int) -> int:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        return ((x * x + self._a) * x + self._b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y).

        Either one of the two roots is returned.
        """
        if not 0 <= x < self.p:
            raise URHDKeyValueError(f"x-coordinate not in 0..p-1: {hex_string(x)}")
        y2 = self._y2(x)
        y = pow(y2, (self.p + 1) // 4, self.p)
        if y * y % self.p != y2:
            raise URHDKeyValueError(f"invalid x-coordinate: {hex_string(x)}")
        return y

    def y_even(self, x: int) -> int:
        "Return the even y coordinate from x, as in (x, y)."
        root = self.y(x)
        return self.p - root if root & 1 else root

    def require_on_curve(self, Q: Point) -> None:
        "Require the input curve Point to be on the curve."

        if not self.is_on_curve(Q):
            raise URHDKeyValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        "Return True if the point is on the curve."

        if len(Q) != 2:
            raise URHDKeyTypeError("point must be a tuple[int, int]")
        if Q[1] == 0:  # Infinity point in affine coordinates
            return True
        if not 0 < Q[1] < self.p:  # y cannot be zero
            raise URHDKeyValueError(f"y-coordinate not in 1..p-1: '{hex_string(Q[1])}'")
        return self._y2(Q[0]) == (Q[1] * Q[1] % self.p)


def _mult_jac(m: int, Q: JacPoint, ec: Curve) -> JacPoint:
    """Scalar multiplication of a curve point in Jacobian coordinates.

    This implementation uses
    'double & add' algorithm,
    'right-to-left' binary decomposition of the m coefficient,
    Jacobian coordinates.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n.
    """

    # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
    R = [INFJ, Q]
    # if least significant bit of m is 1, then add Q to R[0]
    R[not (m & 1)] = Q
    # remove the bit just accounted for
    m >>= 1
    while m > 0:
        # the doubling part of 'double & add'
        Q = ec._double_jac(Q)
        # always perform the 'add', even if useless, to be constant-time
        R[not (m & 1)] = ec._add_jac(R[0], Q)
        m >>= 1
    return R[0]


# SEC 2 v.2 section 2.4.1
secp256k1 = Curve(
    "secp256k1",
    "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE FFFFFC2F",
    0,
    7,
    (
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    ),
    "FFFFFFFF FFFFFFFF FFFFFFFF FFFFFFFE BAAEDCE6 AF48A03B BFD25E8C D0364141",
)


def mult(m: Integer, Q: Optional[Point] = None, ec: Curve = secp256k1) -> Point:
    """Elliptic curve scalar multiplication.

    The generator point G is used if Q is not provided;
    in that case libsecp256k1 bindings are used, if available.
    """
    m = int_from_integer(m) % ec.n
    if Q is None:
        if ec is secp256k1 and libsecp256k1.is_available():
            return libsecp256k1.mult(m)
        Q = ec.G
    else:
        ec.require_on_curve(Q)
    R = _mult_jac(m, _jac_from_aff(Q), ec)
    return ec._aff_from_jac(R)
