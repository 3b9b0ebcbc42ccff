#!/usr/bin/env python3

# Copyright (C) 2024 The ecdlp developers
#
# This file is part of ecdlp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdlp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve discrete logarithm solvers.

Given a base point P and a target point Q = x*P, recover x.

Two algorithms with different time/space trade-offs are available:

* brute_force: exhaustive search, O(n) group operations, O(1) memory
* baby_step_giant_step: O(sqrt(n)) group operations and O(sqrt(n)) memory

where n is the order of the subgroup generated by P.

The searched exponents are 1..n-1: when Q is not a multiple of P
(or it is INF) None is returned, as this is an expected outcome.
"""

import logging
from math import isqrt
from typing import TYPE_CHECKING, Dict, Optional

from ecdlp.exceptions import ECDLPRuntimeError, ECDLPValueError

if TYPE_CHECKING:
    from ecdlp.ecc.curve_point import CurvePoint

logger = logging.getLogger(__name__)


def brute_force(P: "CurvePoint", Q: "CurvePoint") -> Optional[int]:
    """Return x such that Q = x*P, using exhaustive search.

    Multiples of P are computed until Q is found
    or the whole subgroup generated by P has been walked through.
    """

    P.require_same_curve(Q)
    if Q.is_identity:
        logger.debug("exhaustive search: INF target")
        return None

    xP = P
    x = 1
    while True:
        if xP == Q:
            logger.debug("exhaustive search: found x=%d", x)
            return x
        xP = xP + P
        x += 1
        if xP.is_identity:
            logger.debug("exhaustive search: not found in subgroup of order %d", x)
            return None


def baby_steps(P: "CurvePoint", m: int) -> Dict["CurvePoint", int]:
    """Return the {i*P: i} lookup table for i in 1..m.

    Two different indexes for the same point mean that
    the order of P is lower than m: ECDLPRuntimeError is raised,
    never overwriting the first recorded index.
    """

    table: Dict["CurvePoint", int] = {}
    iP = P
    for i in range(1, m + 1):
        if iP in table:
            err_msg = f"baby-step collision: {i}*P == {table[iP]}*P, "
            err_msg += f"order of P is lower than {m}"
            raise ECDLPRuntimeError(err_msg)
        table[iP] = i
        iP = iP + P
    return table


def baby_step_giant_step(
    P: "CurvePoint", Q: "CurvePoint", order: Optional[int] = None
) -> Optional[int]:
    """Return x such that Q = x*P, using Shanks' baby-step/giant-step.

    With m = ceil(sqrt(n)), n being the order of P,
    the baby steps i*P (i in 1..m) are stored in a lookup table,
    then the giant steps Q - j*(m*P) (j in 0..m-1) are looked up:
    a match means x = m*j + i.

    The order of P is computed if not provided.
    """

    P.require_same_curve(Q)
    if Q.is_identity:
        logger.debug("baby-step/giant-step: INF target")
        return None

    n = P.order() if order is None else order
    if n < 1:
        raise ECDLPValueError(f"non positive order: {n}")

    m = isqrt(n)
    if m * m < n:
        m += 1
    logger.debug("baby-step/giant-step: n=%d, m=%d", n, m)

    table = baby_steps(P, m)

    mP = P * m
    R = Q
    for j in range(m):
        i = table.get(R)
        if i is not None:
            x = m * j + i
            logger.debug("baby-step/giant-step: found x=%d (j=%d, i=%d)", x, j, i)
            return x
        R = R - mP

    logger.debug("baby-step/giant-step: not found after %d giant steps", m)
    return None
