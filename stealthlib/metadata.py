#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Stealth address publication record.

StealthMetadata is what a sender publishes (or hands to an indexer)
for the receiver to scan.
It is a pure transport record: fields are kept as received,
missing ones decode as empty,
and no validation is performed at construction time,
as the scanner must be able to skip malformed records
without failing.
Storage and transport are the caller concern;
the JSON field names are the ones of the existing deployments.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin, config

from stealthlib.address import is_valid_address
from stealthlib.derivation import StealthAddress
from stealthlib.exceptions import StealthValueError
from stealthlib.keys import pub_key_bytes
from stealthlib.utils import view_tag_from_hex


@dataclass
class StealthMetadata(DataClassJsonMixin):
    stealth_address: str = field(
        default="", metadata=config(field_name="stealthAddress")
    )
    ephemeral_pub_key: str = field(
        default="", metadata=config(field_name="ephemeralPublicKey")
    )
    view_tag: str = field(default="", metadata=config(field_name="viewTag"))
    network: str = ""
    # milliseconds since the epoch
    created_at: int = field(default=0, metadata=config(field_name="createdAt"))

    def is_complete(self) -> bool:
        "Return True if all the cryptographic fields are not empty."
        return bool(self.stealth_address and self.ephemeral_pub_key and self.view_tag)

    def assert_valid(self) -> None:
        if not self.is_complete():
            raise StealthValueError("incomplete stealth metadata")
        if not is_valid_address(self.stealth_address):
            raise StealthValueError(f"invalid stealth address: {self.stealth_address}")
        pub_key_bytes(self.ephemeral_pub_key)
        view_tag_from_hex(self.view_tag)
        if self.created_at < 0:
            raise StealthValueError(f"negative creation time: {self.created_at}")


def create_stealth_metadata(
    stealth_address: StealthAddress, network: str, created_at: int | None = None
) -> StealthMetadata:
    "Return the publication record of a freshly generated stealth address."
    if created_at is None:
        created_at = int(time.time() * 1000)
    return StealthMetadata(
        stealth_address.address,
        stealth_address.ephemeral_pub_key,
        stealth_address.view_tag,
        network,
        created_at,
    )
