#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve Diffie-Hellman shared secret.

The sender combines its ephemeral private key with the receiver
viewing public key, the receiver combines its viewing private key
with the sender ephemeral public key:
both obtain the same curve point S.

The shared secret is the KECCAK256 of the 33 bytes compressed
encoding of S (not of its bare x-coordinate):
generation, scanning, and spending key recovery must all hash
the very same byte sequence.
"""

from btclib.ec import bytes_from_point, mult, point_from_octets, secp256k1

from stealthlib.alias import Octets
from stealthlib.exceptions import SharedSecretComputationFailed
from stealthlib.hashes import keccak256
from stealthlib.keys import prv_key_bytes, pub_key_bytes

SHARED_SECRET_SIZE = 32


def compute_shared_secret(prv_key: Octets, pub_key: Octets) -> bytes:
    """Return the 32 bytes ECDH shared secret.

    The private key must be 32 bytes, the public key either
    33 (compressed) or 65 (uncompressed) bytes,
    otherwise InvalidKeyLength is raised.
    Any rejection from the curve library (e.g. zero scalar,
    point not on curve) is raised as SharedSecretComputationFailed.
    """

    prv_key = prv_key_bytes(prv_key)
    pub_key = pub_key_bytes(pub_key)

    try:
        q = int.from_bytes(prv_key, byteorder="big", signed=False)
        if not 0 < q < secp256k1.n:
            raise ValueError("private key not in 1..n-1")
        Q = point_from_octets(pub_key, secp256k1)
        shared_point = mult(q, Q, secp256k1)
        # infinity cannot be reached with a valid q and Q,
        # bytes_from_point would reject it anyway
        shared_point_bytes = bytes_from_point(shared_point, secp256k1, compressed=True)
    except ValueError as e:
        err_msg = f"ECDH computation failed: {e}"
        raise SharedSecretComputationFailed(err_msg) from e

    return keccak256(shared_point_bytes)


def view_tag_from_secret(shared_secret: bytes) -> int:
    "Return the view tag, i.e. the first byte of the shared secret."
    return shared_secret[0]
