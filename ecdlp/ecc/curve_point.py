#!/usr/bin/env python3

# Copyright (C) 2024 The ecdlp developers
#
# This file is part of ecdlp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdlp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurvePoint dataclass.

Point of the group of an elliptic curve over Z/pZ.

The elliptic curve is the set of points (x, y)
that are solutions to a short Weierstrass equation y^2 = x^3 + a*x + b,
together with a point at infinity INF, the group neutral element.

INF has no affine coordinates: it is represented by
x and y set to None, while still carrying the curve coefficients
a and b, so that INF of one curve is not equal to INF of another curve.
"""

from dataclasses import dataclass
from typing import Optional, Set

from ecdlp.ecc.dlp import baby_step_giant_step, brute_force
from ecdlp.ecc.field_element import FieldElement
from ecdlp.ecc.number_theory import is_prime
from ecdlp.exceptions import (
    CurveMismatchError,
    ECDLPTypeError,
    ECDLPValueError,
    ModulusMismatchError,
    PointNotOnCurveError,
)

# enumeration is a walk-through over all x-coordinates
MAX_EXPLORABLE_MODULUS = 10000


def curve_str(a: FieldElement, b: FieldElement) -> str:
    return f"y^2 = x^3 + {a.value}x + {b.value} (mod {a.modulus})"


@dataclass(frozen=True)
class CurvePoint:
    """Point of the y^2 = x^3 + a*x + b curve group.

    x and y both set to None mean INF, the group neutral element;
    otherwise (x, y) are the affine coordinates.
    All coordinates and coefficients share the same modulus.

    With check_validity (the default) the point is required to be
    on the curve at construction: PointNotOnCurveError is raised if not.
    The group law skips the check, its results being on curve already.
    """

    x: Optional[FieldElement]
    y: Optional[FieldElement]
    a: FieldElement
    b: FieldElement

    def __init__(
        self,
        x: Optional[FieldElement],
        y: Optional[FieldElement],
        a: FieldElement,
        b: FieldElement,
        check_validity: bool = True,
    ) -> None:

        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)

        if check_validity:
            self.assert_valid()

    @classmethod
    def identity(cls, a: FieldElement, b: FieldElement) -> "CurvePoint":
        "Return INF, the neutral element of the y^2 = x^3 + a*x + b group."
        return cls(None, None, a, b)

    @property
    def is_identity(self) -> bool:
        return self.x is None

    @property
    def modulus(self) -> int:
        return self.a.modulus

    def __str__(self) -> str:
        if self.x is None or self.y is None:
            return "INF"
        return f"({self.x.value}, {self.y.value})"

    def assert_valid(self) -> None:
        for coefficient in (self.a, self.b):
            if not isinstance(coefficient, FieldElement):
                raise ECDLPTypeError(f"not a FieldElement: {coefficient!r}")
        if self.a.modulus != self.b.modulus:
            err_msg = "curve coefficients with different moduli: "
            err_msg += f"{self.a.modulus} vs {self.b.modulus}"
            raise ModulusMismatchError(err_msg)

        if self.x is None and self.y is None:
            return
        if self.x is None or self.y is None:
            raise ECDLPValueError(f"incomplete affine point: ({self.x}, {self.y})")

        for coordinate in (self.x, self.y):
            if not isinstance(coordinate, FieldElement):
                raise ECDLPTypeError(f"not a FieldElement: {coordinate!r}")
            if coordinate.modulus != self.modulus:
                err_msg = "coordinate and curve with different moduli: "
                err_msg += f"{coordinate.modulus} vs {self.modulus}"
                raise ModulusMismatchError(err_msg)

        if self.y * self.y != (self.x * self.x + self.a) * self.x + self.b:
            err_msg = f"Point ({self.x.value}, {self.y.value}) is not on the curve "
            err_msg += curve_str(self.a, self.b)
            raise PointNotOnCurveError(err_msg)

    def require_same_curve(self, other: "CurvePoint") -> None:
        """Require the other point to belong to the same curve.

        CurveMismatchError is raised if not.
        """
        if not isinstance(other, CurvePoint):
            raise ECDLPTypeError(f"not a CurvePoint: {other!r}")
        if self.a != other.a or self.b != other.b:
            err_msg = "points on different curves: "
            err_msg += f"{curve_str(self.a, self.b)} vs {curve_str(other.a, other.b)}"
            raise CurveMismatchError(err_msg)

    def __add__(self, other: "CurvePoint") -> "CurvePoint":
        "Return the sum of two points of the same curve."

        self.require_same_curve(other)

        if self.x is None or self.y is None:
            return other
        if other.x is None or other.y is None:
            return self

        # opposite points, including doubling of a y=0 point
        if self.x == other.x and self.y == -other.y:
            return CurvePoint.identity(self.a, self.b)

        if self.y == other.y and self.x == other.x:  # point doubling
            lam = (3 * self.x * self.x + self.a) / (2 * self.y)
        else:
            lam = (other.y - self.y) / (other.x - self.x)
        x = lam * lam - self.x - other.x
        y = lam * (self.x - x) - self.y
        # the group law is closed: no need to check the curve equation
        return CurvePoint(x, y, self.a, self.b, check_validity=False)

    def __neg__(self) -> "CurvePoint":
        if self.x is None or self.y is None:
            return self
        return CurvePoint(self.x, -self.y, self.a, self.b, check_validity=False)

    def __sub__(self, other: "CurvePoint") -> "CurvePoint":
        self.require_same_curve(other)
        return self + (-other)

    def __mul__(self, m: int) -> "CurvePoint":
        """Scalar multiplication of a curve point.

        This implementation uses
        'double & add' algorithm,
        'right-to-left' binary decomposition of the m coefficient.

        The result is the same as adding the point to INF m times.
        """

        if not isinstance(m, int):
            return NotImplemented
        if m < 0:
            raise ECDLPValueError(f"negative m: {m}")

        Q = self
        # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
        R = [CurvePoint.identity(self.a, self.b), Q]
        # if least significant bit of m is 1, then add Q to R[0]
        R[0] = R[m & 1]
        # remove the bit just accounted for
        m >>= 1
        while m > 0:
            # the doubling part of 'double & add'
            Q = Q + Q
            # always perform the 'add', even if useless
            R[1] = R[0] + Q
            # if least significant bit of m is 1, then add Q to R[0]
            R[0] = R[m & 1]
            m >>= 1
        return R[0]

    __rmul__ = __mul__

    def order(self) -> int:
        """Return the order of the cyclic subgroup generated by the point.

        Very unsophisticated walk-through approach:
        the point is added to itself until INF is reached.
        """
        Q = self
        n = 1
        while not Q.is_identity:
            Q = Q + self
            n += 1
        return n

    @classmethod
    def enumerate_points(cls, a: FieldElement, b: FieldElement) -> Set["CurvePoint"]:
        """Return all the points of the curve, INF included.

        The modulus must be a prime not larger than MAX_EXPLORABLE_MODULUS:
        every x-coordinate is tested for x^3 + a*x + b being
        a quadratic residue.
        """

        inf = cls.identity(a, b)
        p = inf.modulus
        if p > MAX_EXPLORABLE_MODULUS:
            err_msg = f"modulus is too big to enumerate all curve points: {p}"
            raise ECDLPValueError(err_msg)
        if not is_prime(p):
            raise ECDLPValueError(f"modulus is not prime: {p}")

        points = {inf}
        for i in range(p):
            x = FieldElement(i, p)
            try:
                y = ((x * x + a) * x + b).sqrt()
            except ECDLPValueError:
                continue

            points.add(cls(x, y, a, b))
            if not y.is_zero():
                points.add(cls(x, -y, a, b))

        return points

    def solve_dlp_brute_force(self, target: "CurvePoint") -> Optional[int]:
        "Return x such that target = x * self, None if not found."
        return brute_force(self, target)

    def solve_dlp_baby_step_giant_step(
        self, target: "CurvePoint", order: Optional[int] = None
    ) -> Optional[int]:
        "Return x such that target = x * self, None if not found."
        return baby_step_giant_step(self, target, order)
