#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the urhdkey package."

name = "urhdkey"
__version__ = "2026.10.0"
__author__ = "The urhdkey developers"
__author_email__ = "devs@urhdkey.invalid"
__copyright__ = "Copyright (C) 2024-2026 The urhdkey developers"
__license__ = "MIT License"
