#!/usr/bin/env python3

# Copyright (C) 2024 The ecdlp developers
#
# This file is part of ecdlp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdlp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Union

# hex-string or bytes representation of an int
#
# e.g.:
# 43
# "0x2b"
# "2b"
# b"\x2b"
#
# use ecdlp.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]
