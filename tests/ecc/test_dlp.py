#!/usr/bin/env python3

# Copyright (C) 2024 The ecdlp developers
#
# This file is part of ecdlp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdlp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecdlp.ecc.dlp` module."

import logging

import pytest

from ecdlp.ecc.curve_point import CurvePoint
from ecdlp.ecc.dlp import baby_step_giant_step, baby_steps, brute_force
from ecdlp.ecc.field_element import FieldElement
from ecdlp.exceptions import CurveMismatchError, ECDLPRuntimeError, ECDLPValueError

# y^2 = x^3 + 6 (mod 43)
A43, B43 = FieldElement(0, 43), FieldElement(6, 43)
INF43 = CurvePoint.identity(A43, B43)
# order 13
G43 = CurvePoint(FieldElement(13, 43), FieldElement(15, 43), A43, B43)
# order 39, generator of the whole group
H43 = CurvePoint(FieldElement(9, 43), FieldElement(2, 43), A43, B43)


def test_solvers_agree() -> None:
    for G in (G43, H43):
        n = G.order()
        for x in range(1, n):
            Q = x * G
            assert brute_force(G, Q) == x
            assert baby_step_giant_step(G, Q) == x
            assert baby_step_giant_step(G, Q, n) == x
            assert G.solve_dlp_brute_force(Q) == x
            assert G.solve_dlp_baby_step_giant_step(Q) == x


def test_seven() -> None:
    Q = G43 * 7
    assert G43.solve_dlp_brute_force(Q) == 7
    assert G43.solve_dlp_baby_step_giant_step(Q) == 7


def test_reduced_exponent() -> None:
    # 77 = 12 (mod 13)
    Q = G43 * 77
    assert brute_force(G43, Q) == 12
    assert baby_step_giant_step(G43, Q) == 12


def test_not_found() -> None:
    # H43 is not in the subgroup generated by G43
    assert brute_force(G43, H43) is None
    assert baby_step_giant_step(G43, H43) is None
    for x in range(1, 39):
        Q = x * H43
        expected = x // 3 if x % 3 == 0 else None
        assert brute_force(G43, Q) == expected
        assert baby_step_giant_step(G43, Q) == expected

    # INF is not searched
    assert brute_force(G43, INF43) is None
    assert baby_step_giant_step(G43, INF43) is None
    assert brute_force(INF43, INF43) is None
    assert baby_step_giant_step(INF43, INF43) is None
    assert brute_force(INF43, G43) is None
    assert baby_step_giant_step(INF43, G43) is None


def test_curve_mismatch() -> None:
    a, b = FieldElement(-1, 61), FieldElement(0, 61)
    P61 = CurvePoint(FieldElement(8, 61), FieldElement(4, 61), a, b)
    with pytest.raises(CurveMismatchError, match="points on different curves: "):
        brute_force(G43, P61)
    with pytest.raises(CurveMismatchError, match="points on different curves: "):
        baby_step_giant_step(G43, P61)


def test_baby_steps() -> None:
    table = baby_steps(G43, 4)
    assert table == {G43: 1, 2 * G43: 2, 3 * G43: 3, 4 * G43: 4}

    table = baby_steps(G43, 13)
    assert len(table) == 13
    assert table[INF43] == 13

    # the order of G43 is lower than 14: 14*G == 1*G
    err_msg = r"baby-step collision: 14\*P == 1\*P, order of P is lower than 14"
    with pytest.raises(ECDLPRuntimeError, match=err_msg):
        baby_steps(G43, 14)


def test_wrong_order() -> None:
    # m = 15 baby steps, while the actual order is 13
    with pytest.raises(ECDLPRuntimeError, match="baby-step collision: "):
        baby_step_giant_step(G43, 7 * G43, 200)
    with pytest.raises(ECDLPValueError, match="non positive order: 0"):
        baby_step_giant_step(G43, 7 * G43, 0)


def test_larger_group() -> None:
    # cryptohack 'Curves and Logs' curve: G generates all 9735 points
    p = 9739
    a, b = FieldElement(497, p), FieldElement(1768, p)
    G = CurvePoint(FieldElement(1804, p), FieldElement(5368, p), a, b)
    n = 9735
    for x in (1, 2, 1829, n // 2, n - 1):
        Q = x * G
        assert baby_step_giant_step(G, Q, n) == x
    assert brute_force(G, 1829 * G) == 1829


def test_logging(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="ecdlp.ecc.dlp"):
        brute_force(G43, 7 * G43)
        baby_step_giant_step(G43, 7 * G43)
        baby_step_giant_step(G43, H43)
    assert "exhaustive search: found x=7" in caplog.text
    assert "baby-step/giant-step: n=13, m=4" in caplog.text
    assert "baby-step/giant-step: found x=7 (j=1, i=3)" in caplog.text
    assert "baby-step/giant-step: not found after 4 giant steps" in caplog.text
