#!/usr/bin/env python3

# Copyright (C) 2024 The ecdlp developers
#
# This file is part of ecdlp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdlp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""CurvePoint explorer functions.

These functions are meant to explore low-cardinality curves,
for didactical (and fun) reason only.
"""

from typing import List

from ecdlp.ecc.curve_point import MAX_EXPLORABLE_MODULUS, CurvePoint
from ecdlp.exceptions import ECDLPValueError


def find_subgroup_points(G: CurvePoint) -> List[CurvePoint]:
    """Return [G, 2G, ..., INF], the G-generated subgroup points.

    Very unsophisticated walk-through approach,
    for didactical sake only.
    """
    if G.modulus > MAX_EXPLORABLE_MODULUS:
        err_msg = f"modulus is too big to list all subgroup points: {G.modulus}"
        raise ECDLPValueError(err_msg)

    points: List[CurvePoint] = [G]
    while not points[-1].is_identity:
        points.append(points[-1] + G)

    return points
