#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Recovery of the one-time private key of a discovered stealth address.

The one-time private key is re-derived from the viewing keys and
the ephemeral public key with the same formula used by the sender.
Before being returned it is checked against the claimed address:
a key that does not control that address is never returned.

With the current derivation the returned key does not depend
on the spending private key, which is only validated.
"""

from __future__ import annotations

from stealthlib.address import address_from_prv_key
from stealthlib.alias import Octets
from stealthlib.derivation import stealth_prv_key_from_secret
from stealthlib.ecdh import compute_shared_secret
from stealthlib.exceptions import DerivedAddressMismatch
from stealthlib.keys import prv_key_bytes, pub_key_from_prv_key
from stealthlib.utils import same_hex


def derive_spending_key(
    spending_prv_key: Octets,
    viewing_prv_key: Octets,
    stealth_address: Octets,
    ephemeral_pub_key: Octets,
    viewing_pub_key: Octets | None = None,
) -> int:
    """Return the verified private key of a stealth address.

    If the viewing public key is not provided,
    it is computed from the viewing private key.
    DerivedAddressMismatch is raised if the re-derived address
    is not the claimed one.
    The caller is responsible for the secure handling of the result.
    """

    prv_key_bytes(spending_prv_key)

    shared_secret = compute_shared_secret(viewing_prv_key, ephemeral_pub_key)
    if not viewing_pub_key:
        viewing_pub_key = pub_key_from_prv_key(prv_key_bytes(viewing_prv_key))

    stealth_prv_key = stealth_prv_key_from_secret(shared_secret, viewing_pub_key)
    address = address_from_prv_key(stealth_prv_key)
    if not same_hex(address, stealth_address):
        raise DerivedAddressMismatch("derived address mismatch")

    return stealth_prv_key
