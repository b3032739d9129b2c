#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Stealth address protocol: high level interface.

Keys, addresses, and secrets are accepted as bytes or hex-strings
(with or without 0x prefix, any case)
and returned as lowercase 0x-prefixed hex-strings.

Receiver:

>>> keys = generate_stealth_keys()

Sender, knowing only the receiver public keys:

>>> sa = generate_stealth_address(keys.viewing_pub_key, keys.spending_pub_key)
>>> metadata = create_stealth_metadata(sa, "eth")

Receiver, scanning the published metadata:

>>> found = scan_stealth_addresses(
...     keys.viewing_prv_key, keys.viewing_pub_key, [metadata.to_dict()]
... )
>>> found == [sa]
True
>>> prv_key = derive_stealth_spending_key(
...     keys.spending_prv_key,
...     keys.viewing_prv_key,
...     sa.address,
...     sa.ephemeral_pub_key,
...     keys.viewing_pub_key,
... )

Note that, with the current derivation formula, the spending keys
are validated but do not contribute to the one-time keys:
whoever holds the viewing private key can also spend.
"""

from __future__ import annotations

from concurrent.futures import Executor
from typing import Iterable

from stealthlib.alias import HexStr, Octets
from stealthlib.derivation import StealthAddress, derive_stealth_address
from stealthlib.keys import StealthKeys, bytes_from_prv_key, generate_stealth_keys
from stealthlib.metadata import StealthMetadata, create_stealth_metadata
from stealthlib.recovery import derive_spending_key
from stealthlib.scanner import MetadataRecord, scan_metadata
from stealthlib.utils import hex_from_bytes

__all__ = [
    "StealthAddress",
    "StealthKeys",
    "StealthMetadata",
    "create_stealth_metadata",
    "derive_stealth_spending_key",
    "generate_stealth_address",
    "generate_stealth_keys",
    "scan_stealth_addresses",
]


def generate_stealth_address(
    viewing_pub_key: Octets,
    spending_pub_key: Octets | None = None,
    ephemeral_prv_key: Octets | None = None,
) -> StealthAddress:
    "Return a new stealth address for the receiver."
    return derive_stealth_address(viewing_pub_key, spending_pub_key, ephemeral_prv_key)


def scan_stealth_addresses(
    viewing_prv_key: Octets,
    viewing_pub_key: Octets,
    metadata_list: Iterable[MetadataRecord],
    executor: Executor | None = None,
) -> list[StealthAddress]:
    """Return the stealth addresses addressed to the receiver.

    metadata_list items can be StealthMetadata instances
    or their JSON dicts as stored by the publication layer.
    """
    return scan_metadata(viewing_prv_key, viewing_pub_key, metadata_list, executor)


def derive_stealth_spending_key(
    spending_prv_key: Octets,
    viewing_prv_key: Octets,
    stealth_address: Octets,
    ephemeral_pub_key: Octets,
    viewing_pub_key: Octets | None = None,
) -> HexStr:
    "Return the private key (0x-prefixed hex) of a discovered stealth address."
    q = derive_spending_key(
        spending_prv_key,
        viewing_prv_key,
        stealth_address,
        ephemeral_pub_key,
        viewing_pub_key,
    )
    return hex_from_bytes(bytes_from_prv_key(q))
