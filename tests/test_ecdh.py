#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"Tests for the `stealthlib.ecdh` module."

import coincurve
import pytest
from btclib.ec import secp256k1

from stealthlib.ecdh import compute_shared_secret, view_tag_from_secret
from stealthlib.exceptions import InvalidKeyLength, SharedSecretComputationFailed
from stealthlib.hashes import keccak256
from stealthlib.keys import KeyPair, pub_key_from_prv_key


def test_ecdh_symmetry() -> None:
    for _ in range(5):
        a = KeyPair.generate()
        b = KeyPair.generate()
        secret_ab = compute_shared_secret(a.prv_key_hex, b.pub_key)
        secret_ba = compute_shared_secret(b.prv_key_hex, a.pub_key)
        assert secret_ab == secret_ba
        assert len(secret_ab) == 32


def test_libsecp256k1() -> None:
    a = KeyPair.generate()
    b = KeyPair.generate()
    prv_key = a.prv_key.to_bytes(32, "big")

    # the shared point computed by libsecp256k1, compressed
    shared_point = coincurve.PublicKey(b.pub_key).multiply(prv_key)
    exp = keccak256(shared_point.format(compressed=True))
    assert compute_shared_secret(prv_key, b.pub_key) == exp
    # the hash is over the compressed point, not over its x-coordinate
    x_only = keccak256(shared_point.format(compressed=True)[1:])
    assert compute_shared_secret(prv_key, b.pub_key) != x_only


def test_pub_key_encodings() -> None:
    a = KeyPair.generate()
    q = a.prv_key
    b = KeyPair.generate()
    compressed = b.pub_key
    uncompressed = pub_key_from_prv_key(b.prv_key, compressed=False)
    prv_key = a.prv_key_hex
    exp = compute_shared_secret(prv_key, compressed)
    assert compute_shared_secret(prv_key, uncompressed) == exp
    assert compute_shared_secret(prv_key, compressed.hex()) == exp
    assert compute_shared_secret(prv_key, "0x" + compressed.hex().upper()) == exp
    assert compute_shared_secret(prv_key.upper().replace("0X", "0x"), compressed) == exp
    assert compute_shared_secret(q.to_bytes(32, "big"), compressed) == exp


def test_invalid_lengths() -> None:
    key_pair = KeyPair.generate()
    prv_key = key_pair.prv_key.to_bytes(32, "big")

    with pytest.raises(InvalidKeyLength, match="invalid private key size: 31 bytes"):
        compute_shared_secret(prv_key[1:], key_pair.pub_key)
    with pytest.raises(InvalidKeyLength, match="invalid private key size: 33 bytes"):
        compute_shared_secret(b"\x00" + prv_key, key_pair.pub_key)
    with pytest.raises(InvalidKeyLength, match="invalid public key size: 32 bytes"):
        compute_shared_secret(prv_key, key_pair.pub_key[1:])
    uncompressed = pub_key_from_prv_key(key_pair.prv_key, compressed=False)
    with pytest.raises(InvalidKeyLength, match="invalid public key size: 64 bytes"):
        compute_shared_secret(prv_key, uncompressed[1:])


def test_curve_failures() -> None:
    key_pair = KeyPair.generate()
    prv_key = key_pair.prv_key.to_bytes(32, "big")

    err_msg = "ECDH computation failed: "
    # zero scalar
    with pytest.raises(SharedSecretComputationFailed, match=err_msg):
        compute_shared_secret(b"\x00" * 32, key_pair.pub_key)
    # scalar not lower than n
    with pytest.raises(SharedSecretComputationFailed, match=err_msg):
        compute_shared_secret(secp256k1.n.to_bytes(32, "big"), key_pair.pub_key)
    # invalid prefix
    with pytest.raises(SharedSecretComputationFailed, match=err_msg):
        compute_shared_secret(prv_key, b"\x05" + key_pair.pub_key[1:])
    # point not on curve
    uncompressed = pub_key_from_prv_key(key_pair.prv_key, compressed=False)
    not_on_curve = uncompressed[:-1] + bytes([uncompressed[-1] ^ 1])
    with pytest.raises(SharedSecretComputationFailed, match=err_msg) as excinfo:
        compute_shared_secret(prv_key, not_on_curve)
    # the curve library error is chained
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_view_tag() -> None:
    assert view_tag_from_secret(b"\xab" + b"\x00" * 31) == 0xAB
    a = KeyPair.generate()
    b = KeyPair.generate()
    secret = compute_shared_secret(a.prv_key_hex, b.pub_key)
    assert view_tag_from_secret(secret) == secret[0]
