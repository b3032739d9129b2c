#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `stealthlib.utils` module."

import pytest

from stealthlib.exceptions import StealthValueError
from stealthlib.utils import (
    bytes_from_hex,
    hex_from_bytes,
    hex_from_view_tag,
    normalize_hex,
    same_hex,
    strip_0x,
    view_tag_from_hex,
)


def test_strip_0x() -> None:
    assert strip_0x("0xdeadbeef") == "deadbeef"
    assert strip_0x("0XDEADBEEF") == "DEADBEEF"
    assert strip_0x(" deadbeef ") == "deadbeef"
    assert strip_0x("") == ""


def test_bytes_from_hex() -> None:
    exp = b"\xde\xad\xbe\xef"
    for octets in (exp, "deadbeef", "0xdeadbeef", "0xDEADBEEF", " DeadBeef "):
        assert bytes_from_hex(octets) == exp
    assert bytes_from_hex(bytearray(exp)) == exp
    assert bytes_from_hex("0x") == b""

    with pytest.raises(StealthValueError, match="not a hex-string: "):
        bytes_from_hex("0xdeadbee")
    with pytest.raises(StealthValueError, match="not a hex-string: "):
        bytes_from_hex("0xnothex!")
    with pytest.raises(StealthValueError, match="not octets: int"):
        bytes_from_hex(3735928559)  # type: ignore


def test_canonical_hex() -> None:
    assert hex_from_bytes(b"\xde\xad\xbe\xef") == "0xdeadbeef"
    assert normalize_hex("DEADBEEF") == "0xdeadbeef"
    assert normalize_hex("0XDeadBeef") == "0xdeadbeef"

    assert same_hex("0xDEADBEEF", b"\xde\xad\xbe\xef")
    assert same_hex("deadbeef", "0xDeAdBeEf")
    assert not same_hex("deadbeef", "deadbeee")


def test_view_tag() -> None:
    assert hex_from_view_tag(0) == "00"
    assert hex_from_view_tag(0xAB) == "ab"
    for tag in ("ab", "AB", "0xab", "0xAB"):
        assert view_tag_from_hex(tag) == 0xAB
    assert view_tag_from_hex(b"\x0f") == 0x0F

    with pytest.raises(StealthValueError, match="view tag is not a byte: 256"):
        hex_from_view_tag(256)
    with pytest.raises(StealthValueError, match="invalid view tag size: 2 bytes"):
        view_tag_from_hex("abcd")
    with pytest.raises(StealthValueError, match="invalid view tag size: 0 bytes"):
        view_tag_from_hex("")
