#!/usr/bin/env python3

# Copyright (C) 2024 The ecdlp developers
#
# This file is part of ecdlp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdlp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The generic classes are only meant to discriminate between Exceptions
being raised by ecdlp from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecdlp versions are derived.

The specialized ValueError subclasses name the arithmetic
misuse that triggered them.
"""


class ECDLPValueError(ValueError):
    pass


class ECDLPTypeError(TypeError):
    pass


class ECDLPRuntimeError(RuntimeError):
    pass


class ModulusMismatchError(ECDLPValueError):
    "Two field elements with different moduli have been combined."


class NotInvertibleError(ECDLPValueError):
    "The element is not coprime to its modulus."


class PointNotOnCurveError(ECDLPValueError):
    "The affine coordinates do not satisfy the curve equation."


class CurveMismatchError(ECDLPValueError):
    "Two points of different curves have been combined."
