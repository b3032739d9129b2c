#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Receiver side scanning of published stealth metadata.

For each record the receiver recomputes the shared secret
with its viewing private key and the record ephemeral public key.
The view tag (first byte of the shared secret) is compared first:
a mismatch discards the record at the cost of one scalar multiplication
and one hash, without re-deriving the one-time address.
This rejects about 255/256 of the records not addressed to the receiver.
Only on view tag match is the one-time address re-derived and
compared with the published one.

Each record is processed independently and its outcome is returned
as a ScanResult value: a malformed or malicious record is reported
as INVALID, never raised, so it cannot prevent scanning the others.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any, Iterable, Mapping, Union

from stealthlib.alias import Octets
from stealthlib.derivation import StealthAddress, stealth_address_from_secret
from stealthlib.ecdh import compute_shared_secret, view_tag_from_secret
from stealthlib.exceptions import MissingViewingKeys
from stealthlib.keys import compressed_pub_key, prv_key_bytes
from stealthlib.metadata import StealthMetadata
from stealthlib.utils import (
    hex_from_view_tag,
    normalize_hex,
    same_hex,
    view_tag_from_hex,
)

_log = logging.getLogger(__name__)

# a StealthMetadata or its JSON dict (camelCase keys)
MetadataRecord = Union[StealthMetadata, Mapping[str, Any]]


class ScanStatus(Enum):
    MATCH = "match"
    INCOMPLETE = "incomplete"
    VIEW_TAG_MISMATCH = "view tag mismatch"
    ADDRESS_MISMATCH = "address mismatch"
    INVALID = "invalid"


@dataclass(frozen=True)
class ScanResult:
    status: ScanStatus
    stealth_address: StealthAddress | None = None
    error: Exception | None = None

    @property
    def is_match(self) -> bool:
        return self.status is ScanStatus.MATCH


def _metadata_from_record(record: MetadataRecord) -> StealthMetadata:
    if isinstance(record, StealthMetadata):
        return record
    return StealthMetadata.from_dict(record)


def _scan_record(
    viewing_prv_key: Octets, viewing_pub_key: Octets, record: MetadataRecord
) -> ScanResult:

    metadata = _metadata_from_record(record)
    if not metadata.is_complete():
        return ScanResult(ScanStatus.INCOMPLETE)

    shared_secret = compute_shared_secret(viewing_prv_key, metadata.ephemeral_pub_key)
    view_tag = view_tag_from_secret(shared_secret)
    if view_tag != view_tag_from_hex(metadata.view_tag):
        return ScanResult(ScanStatus.VIEW_TAG_MISMATCH)

    address = stealth_address_from_secret(shared_secret, viewing_pub_key)
    if not same_hex(address, metadata.stealth_address):
        return ScanResult(ScanStatus.ADDRESS_MISMATCH)

    stealth_address = StealthAddress(
        normalize_hex(metadata.stealth_address),
        normalize_hex(metadata.ephemeral_pub_key),
        hex_from_view_tag(view_tag),
    )
    return ScanResult(ScanStatus.MATCH, stealth_address)


def scan_record(
    viewing_prv_key: Octets, viewing_pub_key: Octets, record: MetadataRecord
) -> ScanResult:
    """Return the outcome of scanning a single metadata record.

    Record level failures are returned as INVALID results,
    carrying the original exception.
    """

    try:
        return _scan_record(viewing_prv_key, viewing_pub_key, record)
    # whatever a record contains, it must not abort the scan
    except Exception as e:  # pylint: disable=broad-except
        return ScanResult(ScanStatus.INVALID, error=e)


def _viewing_keys(
    viewing_prv_key: Octets, viewing_pub_key: Octets
) -> tuple[bytes, bytes]:
    if not viewing_prv_key or not viewing_pub_key:
        raise MissingViewingKeys("missing viewing keys")
    # malformed viewing keys would fail every record: fail fast
    return prv_key_bytes(viewing_prv_key), compressed_pub_key(viewing_pub_key)


def scan_records(
    viewing_prv_key: Octets,
    viewing_pub_key: Octets,
    records: Iterable[MetadataRecord],
    executor: Executor | None = None,
) -> list[ScanResult]:
    """Return the ScanResult of each record, in input order.

    If an executor is provided, records are scanned concurrently;
    the results order still follows the input order.
    """

    prv_key, pub_key = _viewing_keys(viewing_prv_key, viewing_pub_key)
    scan = partial(scan_record, prv_key, pub_key)
    if executor is None:
        results = [scan(record) for record in records]
    else:
        results = list(executor.map(scan, records))

    for i, result in enumerate(results):
        if result.status is ScanStatus.INVALID:
            err = result.error
            _log.debug("record %d skipped: %s (%s)", i, result.status.value, err)
        elif result.status is ScanStatus.INCOMPLETE:
            _log.debug("record %d skipped: %s", i, result.status.value)
    return results


def scan_metadata(
    viewing_prv_key: Octets,
    viewing_pub_key: Octets,
    records: Iterable[MetadataRecord],
    executor: Executor | None = None,
) -> list[StealthAddress]:
    """Return the stealth addresses of the records addressed to the receiver.

    Only records whose re-derived one-time address matches
    the published one are returned, in input order;
    an empty list is a valid outcome.
    MissingViewingKeys is raised if a viewing key is missing.
    """

    results = scan_records(viewing_prv_key, viewing_pub_key, records, executor)
    matches = [r.stealth_address for r in results if r.is_match]
    _log.debug("scanned %d records: %d matches", len(results), len(matches))
    return matches  # type: ignore
