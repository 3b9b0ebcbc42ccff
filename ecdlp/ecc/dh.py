#!/usr/bin/env python3

# Copyright (C) 2024 The ecdlp developers
#
# This file is part of ecdlp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdlp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Diffie-Hellman elliptic curve key agreement scheme.

The two entities must agree on the elliptic curve and on the
generator point G; each one picks a private scalar and publishes
the corresponding public point.
Both entities then obtain the same shared point by multiplying
the other entity public point by their own private scalar.

The curves handled here are small enough for the shared secret
to be recovered from the public points using the ecdlp.ecc.dlp solvers.
"""

from ecdlp.ecc.curve_point import CurvePoint
from ecdlp.exceptions import ECDLPRuntimeError, ECDLPValueError


def public_key(prv: int, G: CurvePoint) -> CurvePoint:
    "Return the public point prv*G."

    if prv < 1:
        raise ECDLPValueError(f"private key not positive: {prv}")
    return prv * G


def shared_secret(prv: int, Q: CurvePoint) -> CurvePoint:
    "Return the shared point prv*Q, Q being the other entity public point."

    if prv < 1:
        raise ECDLPValueError(f"private key not positive: {prv}")
    shared_secret_point = prv * Q
    if shared_secret_point.is_identity:
        raise ECDLPRuntimeError("invalid (INF) key")
    return shared_secret_point


def diffie_hellman(prv_a: int, prv_b: int, G: CurvePoint) -> CurvePoint:
    """Run the key exchange on both sides and return the agreed point.

    ECDLPRuntimeError is raised if the two sides do not agree.
    """

    QA = public_key(prv_a, G)
    QB = public_key(prv_b, G)

    secret_a = shared_secret(prv_a, QB)
    secret_b = shared_secret(prv_b, QA)
    if secret_a != secret_b:
        raise ECDLPRuntimeError(f"shared secret mismatch: {secret_a} vs {secret_b}")
    return secret_a
