#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Key validation, key-pairs, and stealth meta-keys.

A receiver identity is made of two independent secp256k1 key-pairs:
the spending one and the viewing one.
Public keys are always stored and exchanged in compressed form,
uncompressed ones being accepted on input only.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field

from btclib.alias import Point
from btclib.ec import bytes_from_point, mult, point_from_octets, secp256k1
from dataclasses_json import DataClassJsonMixin, config

from stealthlib.alias import HexStr, Octets, RandBelow
from stealthlib.exceptions import (
    InvalidKeyLength,
    InvalidPublicKeyFormat,
    StealthValueError,
)
from stealthlib.utils import bytes_from_hex, hex_from_bytes

PRV_KEY_SIZE = 32
COMPRESSED_PUB_KEY_SIZE = 33
UNCOMPRESSED_PUB_KEY_SIZE = 65
PUB_KEY_SIZES = (COMPRESSED_PUB_KEY_SIZE, UNCOMPRESSED_PUB_KEY_SIZE)


def prv_key_bytes(prv_key: Octets) -> bytes:
    "Return the private key bytes, ensuring they are exactly 32."
    prv_key = bytes_from_hex(prv_key)
    if len(prv_key) != PRV_KEY_SIZE:
        err_msg = f"invalid private key size: {len(prv_key)} bytes"
        err_msg += f" instead of {PRV_KEY_SIZE}"
        raise InvalidKeyLength(err_msg)
    return prv_key


def pub_key_bytes(pub_key: Octets) -> bytes:
    "Return the public key bytes, ensuring they are either 33 or 65."
    pub_key = bytes_from_hex(pub_key)
    if len(pub_key) not in PUB_KEY_SIZES:
        err_msg = f"invalid public key size: {len(pub_key)} bytes"
        err_msg += f" instead of {PUB_KEY_SIZES}"
        raise InvalidKeyLength(err_msg)
    return pub_key


def int_from_prv_key(prv_key: Octets | int) -> int:
    """Return a verified-as-valid private key integer.

    Both a native int and 32 octets (bytes or hex-string) are accepted.
    """

    if isinstance(prv_key, int):
        q = prv_key
    else:
        q = int.from_bytes(prv_key_bytes(prv_key), byteorder="big", signed=False)

    if not 0 < q < secp256k1.n:
        raise StealthValueError("private key not in 1..n-1")

    return q


def bytes_from_prv_key(prv_key: Octets | int) -> bytes:
    q = int_from_prv_key(prv_key)
    return q.to_bytes(PRV_KEY_SIZE, byteorder="big", signed=False)


def point_from_pub_key(pub_key: Octets) -> Point:
    """Return the curve point of a SEC encoded public key.

    Both the compressed (0x02, 0x03) and the uncompressed (0x04)
    encodings are accepted.
    """

    pub_key = pub_key_bytes(pub_key)
    try:
        return point_from_octets(pub_key, secp256k1)
    except ValueError as e:
        raise InvalidPublicKeyFormat(f"not a public key: {e}") from e


def compressed_pub_key(pub_key: Octets) -> bytes:
    "Return the 33 bytes compressed encoding of a public key."
    return bytes_from_point(point_from_pub_key(pub_key), secp256k1, compressed=True)


def pub_key_from_prv_key(prv_key: Octets | int, compressed: bool = True) -> bytes:
    q = int_from_prv_key(prv_key)
    Q = mult(q, secp256k1.G, secp256k1)
    return bytes_from_point(Q, secp256k1, compressed)


def gen_prv_key(rand: RandBelow = secrets.randbelow) -> int:
    "Return a private key in the range [1, n-1]."
    return int_from_prv_key(1 + rand(secp256k1.n - 1))


def _encode_prv_key(q: int) -> HexStr:
    return hex_from_bytes(q.to_bytes(PRV_KEY_SIZE, byteorder="big", signed=False))


def _decode_prv_key(prv_key: Octets) -> int:
    return int.from_bytes(prv_key_bytes(prv_key), byteorder="big", signed=False)


@dataclass(frozen=True)
class KeyPair(DataClassJsonMixin):
    prv_key: int = field(
        metadata=config(
            field_name="privateKey", encoder=_encode_prv_key, decoder=_decode_prv_key
        )
    )
    # compressed SEC encoding
    pub_key: bytes = field(
        metadata=config(
            field_name="publicKey", encoder=hex_from_bytes, decoder=bytes_from_hex
        )
    )
    def __post_init__(self) -> None:
        self.assert_valid()

    @property
    def prv_key_hex(self) -> HexStr:
        return _encode_prv_key(self.prv_key)

    @property
    def pub_key_hex(self) -> HexStr:
        return hex_from_bytes(self.pub_key)

    def assert_valid(self) -> None:
        int_from_prv_key(self.prv_key)
        if len(self.pub_key) != COMPRESSED_PUB_KEY_SIZE:
            err_msg = f"invalid compressed public key size: {len(self.pub_key)}"
            raise InvalidKeyLength(err_msg)
        if self.pub_key != pub_key_from_prv_key(self.prv_key):
            raise StealthValueError("public key does not match the private key")

    @classmethod
    def from_prv_key(cls, prv_key: Octets | int) -> KeyPair:
        q = int_from_prv_key(prv_key)
        return cls(q, pub_key_from_prv_key(q))

    @classmethod
    def generate(cls, rand: RandBelow = secrets.randbelow) -> KeyPair:
        return cls.from_prv_key(gen_prv_key(rand))


@dataclass(frozen=True)
class StealthKeys(DataClassJsonMixin):
    """The four keys of a stealth address receiver.

    The public halves are meant to be published,
    the viewing private key can be delegated to a scanning service,
    the spending private key must never leave the receiver.
    """

    spending_prv_key: HexStr = field(metadata=config(field_name="spendingPrivateKey"))
    viewing_prv_key: HexStr = field(metadata=config(field_name="viewingPrivateKey"))
    spending_pub_key: HexStr = field(metadata=config(field_name="spendingPublicKey"))
    viewing_pub_key: HexStr = field(metadata=config(field_name="viewingPublicKey"))

    @property
    def spending(self) -> KeyPair:
        return KeyPair(
            int_from_prv_key(self.spending_prv_key),
            bytes_from_hex(self.spending_pub_key),
        )

    @property
    def viewing(self) -> KeyPair:
        return KeyPair(
            int_from_prv_key(self.viewing_prv_key),
            bytes_from_hex(self.viewing_pub_key),
        )

    @classmethod
    def from_key_pairs(cls, spending: KeyPair, viewing: KeyPair) -> StealthKeys:
        return cls(
            spending.prv_key_hex,
            viewing.prv_key_hex,
            spending.pub_key_hex,
            viewing.pub_key_hex,
        )


def generate_stealth_keys(rand: RandBelow = secrets.randbelow) -> StealthKeys:
    "Return fresh and independent spending and viewing key-pairs."
    spending = KeyPair.generate(rand)
    viewing = KeyPair.generate(rand)
    return StealthKeys.from_key_pairs(spending, viewing)
