#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

from stealthlib.stealth import (
    create_stealth_metadata,
    derive_stealth_spending_key,
    generate_stealth_address,
    generate_stealth_keys,
    scan_stealth_addresses,
)

print("\n1. Alice generates her stealth keys")
alice = generate_stealth_keys()
print(f" viewing pub_key: {alice.viewing_pub_key}")
print(f"spending pub_key: {alice.spending_pub_key}")

print("\n2. Bob generates a stealth address for Alice")
sa = generate_stealth_address(alice.viewing_pub_key, alice.spending_pub_key)
print(f"           address: {sa.address}")
print(f"ephemeral pub_key: {sa.ephemeral_pub_key}")
print(f"          view tag: {sa.view_tag}")

print("\n3. Bob publishes the metadata, among many others")
published = [create_stealth_metadata(sa, "eth").to_dict()]
for _ in range(9):
    bob_sa = generate_stealth_address(generate_stealth_keys().viewing_pub_key)
    published.append(create_stealth_metadata(bob_sa, "eth").to_dict())
print(f"{len(published)} records")

print("\n4. Alice scans the published metadata")
found = scan_stealth_addresses(alice.viewing_prv_key, alice.viewing_pub_key, published)
print(f"{len(found)} address(es) found: {[f.address for f in found]}")

print("\n5. Alice derives the private key of the discovered address")
prv_key = derive_stealth_spending_key(
    alice.spending_prv_key,
    alice.viewing_prv_key,
    found[0].address,
    found[0].ephemeral_pub_key,
    alice.viewing_pub_key,
)
print(f"prv_key: {prv_key[:10]}...")
