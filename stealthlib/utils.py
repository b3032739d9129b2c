#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Canonical encoding of keys, secrets, addresses, and view tags.

This is the only place where hex-strings are parsed or produced:
inputs are normalized once on ingress (optional "0x" prefix,
any case, leading/trailing blanks),
outputs are always lowercase "0x"-prefixed hex-strings.

View tags are the exception: for wire compatibility they are
serialized as two lowercase hex digits without prefix.
"""

from __future__ import annotations

from btclib.utils import bytes_from_octets

from stealthlib.alias import HexStr, Octets
from stealthlib.exceptions import StealthValueError


def strip_0x(hex_str: str) -> str:
    "Return the hex-string without blanks and without the 0x prefix, if any."
    hex_str = hex_str.strip()
    if hex_str[:2] in ("0x", "0X"):
        return hex_str[2:]
    return hex_str


def bytes_from_hex(octets: Octets) -> bytes:
    """Return bytes from a (possibly 0x-prefixed) hex-string.

    If the input is not a string, then it goes untouched.
    """

    if isinstance(octets, str):
        try:
            return bytes_from_octets(strip_0x(octets))
        except ValueError as e:
            raise StealthValueError(f"not a hex-string: {octets!r}") from e
    if isinstance(octets, (bytes, bytearray)):
        return bytes(octets)
    raise StealthValueError(f"not octets: {type(octets).__name__}")


def hex_from_bytes(data: bytes) -> HexStr:
    "Return the canonical lowercase 0x-prefixed hex-string."
    return "0x" + data.hex()


def normalize_hex(octets: Octets) -> HexStr:
    return hex_from_bytes(bytes_from_hex(octets))


def same_hex(a: Octets, b: Octets) -> bool:
    "Compare two octet sequences, irrespective of case and 0x prefix."
    return bytes_from_hex(a) == bytes_from_hex(b)


def hex_from_view_tag(view_tag: int) -> str:
    if not 0 <= view_tag < 256:
        raise StealthValueError(f"view tag is not a byte: {view_tag}")
    return f"{view_tag:02x}"


def view_tag_from_hex(view_tag: Octets) -> int:
    """Return the view tag byte from its serialization.

    Both the bare two-digit form ("ab") and the 0x-prefixed one ("0xAB")
    are accepted.
    """

    tag = bytes_from_hex(view_tag)
    if len(tag) != 1:
        raise StealthValueError(f"invalid view tag size: {len(tag)} bytes")
    return tag[0]
