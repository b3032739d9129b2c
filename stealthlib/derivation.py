#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Stealth address generation.

The sender draws an ephemeral key-pair (e, E) and, from the receiver
viewing public key V, computes:

* the shared secret s = KECCAK256(compressed(e * V))
* the one-time private key p = KECCAK256(s || compressed(V))
* the one-time address, i.e. the account address of p * G
* the view tag, i.e. the first byte of s

(E, address, view tag) is then published;
the receiver recomputes s as KECCAK256(compressed(v * E)).

The receiver spending public key is accepted, and its format validated,
but it does not enter the derivation: the one-time private key
only depends on the viewing keys and on the ephemeral key.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin, config

from stealthlib.address import address_from_prv_key
from stealthlib.alias import HexStr, Octets, RandBelow
from stealthlib.ecdh import compute_shared_secret, view_tag_from_secret
from stealthlib.exceptions import InvalidPublicKeyFormat, StealthValueError
from stealthlib.hashes import keccak256
from stealthlib.keys import (
    bytes_from_prv_key,
    compressed_pub_key,
    gen_prv_key,
    int_from_prv_key,
    pub_key_bytes,
    pub_key_from_prv_key,
)
from stealthlib.utils import hex_from_bytes, hex_from_view_tag


@dataclass(frozen=True)
class StealthAddress(DataClassJsonMixin):
    # 20 bytes account address, lowercase 0x-prefixed hex
    address: HexStr
    # compressed public key, lowercase 0x-prefixed hex
    ephemeral_pub_key: HexStr = field(metadata=config(field_name="ephemeralPublicKey"))
    # one byte, two lowercase hex digits without prefix
    view_tag: str = field(metadata=config(field_name="viewTag"))


def _pub_key_format(pub_key: Octets, role: str) -> bytes:
    try:
        return pub_key_bytes(pub_key)
    except StealthValueError as e:
        raise InvalidPublicKeyFormat(f"invalid {role} public key format") from e


def stealth_prv_key_from_secret(shared_secret: bytes, viewing_pub_key: Octets) -> int:
    """Return the one-time private key KECCAK256(secret || compressed(V)).

    The viewing public key is normalized to its compressed encoding,
    so that sender and receiver agree on the hashed bytes
    whatever the encoding they have been handed.
    """

    data = shared_secret + compressed_pub_key(viewing_pub_key)
    return int_from_prv_key(keccak256(data))


def stealth_address_from_secret(shared_secret: bytes, viewing_pub_key: Octets) -> bytes:
    "Return the one-time account address for the given shared secret."
    stealth_prv_key = stealth_prv_key_from_secret(shared_secret, viewing_pub_key)
    return address_from_prv_key(stealth_prv_key)


def derive_stealth_address(
    viewing_pub_key: Octets,
    spending_pub_key: Octets | None = None,
    ephemeral_prv_key: Octets | int | None = None,
    rand: RandBelow = secrets.randbelow,
) -> StealthAddress:
    """Return a new stealth address for the receiver viewing public key.

    If no ephemeral private key is provided, a fresh one is drawn
    from rand at each call.
    The spending public key is validated, but not used:
    see the module docstring.
    """

    viewing_pub_key = _pub_key_format(viewing_pub_key, "viewing")
    if spending_pub_key is not None:
        _pub_key_format(spending_pub_key, "spending")

    if ephemeral_prv_key is None:
        ephemeral_prv_key = gen_prv_key(rand)
    if isinstance(ephemeral_prv_key, int):
        ephemeral_prv_key = bytes_from_prv_key(ephemeral_prv_key)

    shared_secret = compute_shared_secret(ephemeral_prv_key, viewing_pub_key)
    address = stealth_address_from_secret(shared_secret, viewing_pub_key)

    return StealthAddress(
        hex_from_bytes(address),
        hex_from_bytes(pub_key_from_prv_key(ephemeral_prv_key)),
        hex_from_view_tag(view_tag_from_secret(shared_secret)),
    )
