#!/usr/bin/env python3

# Copyright (C) 2024 The ecdlp developers
#
# This file is part of ecdlp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdlp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module ecdlp.ecc."""

from ecdlp.ecc.curve_point import CurvePoint
from ecdlp.ecc.curve_point_f import find_subgroup_points
from ecdlp.ecc.dh import diffie_hellman, public_key, shared_secret
from ecdlp.ecc.dlp import baby_step_giant_step, baby_steps, brute_force
from ecdlp.ecc.field_element import FIELD_BITS, FieldElement

__all__ = [
    "CurvePoint",
    "FieldElement",
    "FIELD_BITS",
    "find_subgroup_points",
    "diffie_hellman",
    "public_key",
    "shared_secret",
    "baby_step_giant_step",
    "baby_steps",
    "brute_force",
]
