#!/usr/bin/env python3

# Copyright (C) 2024 The ecdlp developers
#
# This file is part of ecdlp. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdlp including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecdlp package."

name = "ecdlp"
__version__ = "2024.3.1"
__author__ = "The ecdlp developers"
__author_email__ = "devs@ecdlp.dev"
__copyright__ = "Copyright (C) 2024 The ecdlp developers"
__license__ = "MIT License"
