#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Account addresses of public and private keys.

The account address is the last 20 bytes of the KECCAK256 of the
64 bytes uncompressed public key (i.e. without the 0x04 prefix).

Addresses are returned as bytes;
the canonical serialization is lowercase 0x-prefixed hex,
while the EIP-55 mixed-case checksum encoding is available for display.
"""

from __future__ import annotations

import re

from btclib.ec import bytes_from_point, secp256k1

from stealthlib.alias import Octets
from stealthlib.exceptions import StealthValueError
from stealthlib.hashes import keccak256
from stealthlib.keys import point_from_pub_key, pub_key_from_prv_key
from stealthlib.utils import bytes_from_hex, strip_0x

ADDRESS_SIZE = 20

_ADDRESS_RE = re.compile(r"0x[a-fA-F0-9]{40}")
_COMPRESSED_PUB_KEY_RE = re.compile(r"[a-fA-F0-9]{66}")


def _address_from_uncompressed(uncompressed_pub_key: bytes) -> bytes:
    return keccak256(uncompressed_pub_key[1:])[-ADDRESS_SIZE:]


def address_from_pub_key(pub_key: Octets) -> bytes:
    "Return the account address of a (compressed or uncompressed) public key."
    Q = point_from_pub_key(pub_key)
    return _address_from_uncompressed(bytes_from_point(Q, secp256k1, compressed=False))


def address_from_prv_key(prv_key: Octets | int) -> bytes:
    "Return the account address controlled by a private key."
    return _address_from_uncompressed(pub_key_from_prv_key(prv_key, compressed=False))


def checksum_address(address: Octets) -> str:
    """Return the EIP-55 mixed-case checksum encoding of an address.

    https://eips.ethereum.org/EIPS/eip-55
    """

    address = bytes_from_hex(address)
    if len(address) != ADDRESS_SIZE:
        err_msg = f"invalid address size: {len(address)} bytes"
        err_msg += f" instead of {ADDRESS_SIZE}"
        raise StealthValueError(err_msg)
    hex_address = address.hex()
    hex_digest = keccak256(hex_address.encode("ascii")).hex()
    chars = [
        c.upper() if int(d, 16) >= 8 else c for c, d in zip(hex_address, hex_digest)
    ]
    return "0x" + "".join(chars)


def is_valid_address(address: str) -> bool:
    "Return True if the string is a 0x-prefixed 20 bytes hex-string."
    return bool(_ADDRESS_RE.fullmatch(address))


def is_valid_pub_key(pub_key: str) -> bool:
    """Return True if the string looks like a compressed public key.

    It only checks the format (33 bytes hex-string, optional 0x prefix),
    not that the point is on the curve.
    """
    return bool(_COMPRESSED_PUB_KEY_RE.fullmatch(strip_0x(pub_key)))
