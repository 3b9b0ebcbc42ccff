#!/usr/bin/env python3

# Copyright (C) 2024 The ecdlp developers
#
# This file is part of ecdlp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdlp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""FieldElement dataclass.

An element of Z/mZ, the ring of integers modulo m,
with the four ring operations, inverse, and exponentiation.

The modulus is a fixed-width integer (FIELD_BITS bits):
the field is meant to be small enough for an in-memory search
of its elliptic curve groups, not to be cryptographically strong.
"""

from dataclasses import dataclass
from typing import Union

from ecdlp.alias import Integer
from ecdlp.ecc.number_theory import mod_inv, mod_sqrt
from ecdlp.exceptions import ECDLPValueError, ModulusMismatchError
from ecdlp.utils import int_from_integer, int_repr

# storage width of both the modulus and the pow exponent
FIELD_BITS = 64
MAX_MODULUS = (1 << FIELD_BITS) - 1
MAX_EXPONENT = (1 << FIELD_BITS) - 1

Operand = Union["FieldElement", int]


@dataclass(frozen=True)
class FieldElement:
    """Element of the ring of integers modulo m.

    0 <= value < modulus always holds: any integer input
    is reduced modulo m at construction.
    Elements are immutable and hashable;
    every operation returns a new element.

    Binary operations require both operands to share the same modulus,
    ModulusMismatchError is raised otherwise.
    Plain int operands are interpreted as elements of the same ring,
    any other operand is left to its own reflected operator.
    """

    value: int
    modulus: int

    def __init__(self, value: Integer, modulus: Integer) -> None:
        modulus = int_from_integer(modulus)
        if not 1 < modulus <= MAX_MODULUS:
            err_msg = f"modulus not in 2..2^{FIELD_BITS}-1: {int_repr(modulus)}"
            raise ECDLPValueError(err_msg)

        object.__setattr__(self, "modulus", modulus)
        object.__setattr__(self, "value", int_from_integer(value) % modulus)

    def __str__(self) -> str:
        return f"{self.value} (mod {self.modulus})"

    def __int__(self) -> int:
        return self.value

    def _same_field(self, other: Operand, operation: str) -> "FieldElement":
        if isinstance(other, int):
            return FieldElement(other, self.modulus)
        if other.modulus != self.modulus:
            err_msg = f"Cannot {operation} two FieldElement values "
            err_msg += "with different moduli: "
            err_msg += f"{int_repr(self.modulus)} vs {int_repr(other.modulus)}"
            raise ModulusMismatchError(err_msg)
        return other

    def __add__(self, other: Operand) -> "FieldElement":
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        other = self._same_field(other, "add")
        return FieldElement(self.value + other.value, self.modulus)

    __radd__ = __add__

    def __sub__(self, other: Operand) -> "FieldElement":
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        other = self._same_field(other, "subtract")
        return FieldElement(self.value - other.value, self.modulus)

    def __rsub__(self, other: Operand) -> "FieldElement":
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self._same_field(other, "subtract") - self

    def __neg__(self) -> "FieldElement":
        # reduction at construction takes care of -0 = 0
        return FieldElement(self.modulus - self.value, self.modulus)

    def __mul__(self, other: Operand) -> "FieldElement":
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        other = self._same_field(other, "multiply")
        # python int product never wraps around before the reduction
        return FieldElement(self.value * other.value, self.modulus)

    __rmul__ = __mul__

    def __truediv__(self, other: Operand) -> "FieldElement":
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        other = self._same_field(other, "divide")
        return self * other.inverse()

    def __rtruediv__(self, other: Operand) -> "FieldElement":
        if not isinstance(other, (FieldElement, int)):
            return NotImplemented
        return self._same_field(other, "divide") / self

    def __pow__(self, exponent: int) -> "FieldElement":
        return self.pow(exponent)

    def inverse(self) -> "FieldElement":
        """Return the multiplicative inverse.

        Based on Extended Euclidean Algorithm:
        NotInvertibleError is raised if the element is not coprime
        to the modulus (e.g. zero, or any non-unit of a composite modulus).
        """
        return FieldElement(mod_inv(self.value, self.modulus), self.modulus)

    def pow(self, exponent: int) -> "FieldElement":
        """Return the element raised to the exponent power.

        This implementation uses 'square & multiply' algorithm,
        'right-to-left' binary decomposition of the exponent.

        The loop always runs FIELD_BITS times, independently of
        the exponent magnitude, and always performs the 'multiply'.
        """

        if not 0 <= exponent <= MAX_EXPONENT:
            err_msg = f"exponent not in 0..2^{FIELD_BITS}-1: {int_repr(exponent)}"
            raise ECDLPValueError(err_msg)

        # R[0] is the running result, R[1] = R[0] * base is an ancillary variable
        R = [FieldElement(1, self.modulus), FieldElement(1, self.modulus)]
        base = self
        for _ in range(FIELD_BITS):
            R[1] = R[0] * base
            # if least significant bit of exponent is 1, then keep the product
            R[0] = R[exponent & 1]
            base = base * base
            exponent >>= 1
        return R[0]

    def is_zero(self) -> bool:
        return self.value == 0

    def sqrt(self) -> "FieldElement":
        """Return a square root of the element; the modulus must be a prime.

        Note that the opposite element is also a root.
        ECDLPValueError is raised if the element is not a quadratic residue.
        """
        return FieldElement(mod_sqrt(self.value, self.modulus), self.modulus)
