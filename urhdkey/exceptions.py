#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to discriminate between Exceptions
being raised by urhdkey from those raised by other codebase.

Caller mistakes (bad mnemonic, bad path, bad override) derive from
ValueError; internal derivation failures derive from RuntimeError.
"""


class URHDKeyValueError(ValueError):
    pass


class URHDKeyTypeError(TypeError):
    pass


class URHDKeyRuntimeError(RuntimeError):
    pass


class InvalidMnemonicError(URHDKeyValueError):
    "The mnemonic fails BIP39 wordlist or checksum validation."


class InvalidPathError(URHDKeyValueError):
    "The derivation path is malformed or has an out-of-range index."


class InvalidOverrideError(URHDKeyValueError):
    "A fingerprint override is not exactly 4 bytes (8 hex characters)."


class DerivationError(URHDKeyRuntimeError):
    "BIP32 child key derivation failed."
