#!/usr/bin/env python3

# Copyright (C) The stealthlib developers
#
# This file is part of stealthlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to discriminate between Exceptions
raised by stealthlib from those raised by other codebase
(btclib included).

Each failure kind of the stealth address protocol has its own class,
so that callers can react to it specifically;
all of them are ValueError, as they are caused by malformed
or inconsistent input and are never transient.
"""


class StealthValueError(ValueError):
    pass


class StealthTypeError(TypeError):
    pass


class StealthRuntimeError(RuntimeError):
    pass


class InvalidKeyLength(StealthValueError):
    "A private key is not 32 bytes or a public key is neither 33 nor 65 bytes."


class InvalidPublicKeyFormat(StealthValueError):
    "A public key is not a compressed or uncompressed SEC point encoding."


class MissingViewingKeys(StealthValueError):
    "The viewing private or public key required for scanning is missing."


class SharedSecretComputationFailed(StealthValueError):
    "The curve library rejected the ECDH input (invalid scalar or point)."


class DerivedAddressMismatch(StealthValueError):
    "The re-derived one-time address differs from the claimed one."
