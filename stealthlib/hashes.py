#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

Keccak-256 is the original Keccak submission (0x01 padding),
not the FIPS-202 SHA3-256 available in hashlib:
it is the hash of the target chain account addresses.
"""

from Crypto.Hash import keccak

from stealthlib.alias import Octets
from stealthlib.utils import bytes_from_hex


def keccak256(octets: Octets) -> bytes:
    """Return the KECCAK256(*) of the input octet sequence."""
    octets = bytes_from_hex(octets)
    return keccak.new(data=octets, digest_bits=256).digest()
