#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Callable, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings may carry the "0x" prefix used by account-based chains
# and may be in any case, e.g.:
# "0x02cc71eb30d653c0c3163990c47b976f3fb3f37cccdcbedb169a1dfef58bbfbfaf"
# "02CC71EB30D653C0C3163990C47B976F3FB3F37CCCDCBEDB169A1DFEF58BBFBFAF"
#
# use stealthlib.utils.bytes_from_hex to convert Octets to bytes
#
# Octets are used for private keys (32 bytes), public keys
# (33 bytes compressed, 65 bytes uncompressed), shared secrets
# (32 bytes), and addresses (20 bytes)
Octets = Union[bytes, str]

# Canonical hex-string: lowercase, "0x" prefixed,
# as returned by stealthlib.utils.hex_from_bytes
HexStr = str

# Secure random capability: randbelow(n) returns an int in [0, n-1].
# secrets.randbelow is the default everywhere;
# tests may inject a deterministic source.
RandBelow = Callable[[int], int]
