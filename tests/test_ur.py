#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `urhdkey.ur` module."

import pytest

from urhdkey import bytewords, ur
from urhdkey.exceptions import URHDKeyValueError


def test_encode_decode() -> None:

    data = bytes.fromhex("4401020304")
    text = ur.encode(data, "bytes", 400)
    assert text == "UR:BYTES/" + bytewords.encode(data).upper()
    assert text == text.upper()
    assert ur.decode(text) == ("bytes", data)
    assert ur.decode(text.lower()) == ("bytes", data)
    assert ur.decode("  " + text + "\n") == ("bytes", data)

    assert ur.encode(b"", "crypto-hdkey", 400) == "UR:CRYPTO-HDKEY/AEAEAEAE"
    assert ur.decode("ur:crypto-hdkey/aeaeaeae") == ("crypto-hdkey", b"")


def test_max_fragment_len() -> None:

    data = b"\x00" * 400
    assert ur.decode(ur.encode(data, "bytes", 400)) == ("bytes", data)
    with pytest.raises(URHDKeyValueError, match="payload too long for a single-part UR: "):
        ur.encode(data + b"\x00", "bytes", 400)


def test_invalid_type() -> None:

    for ur_type in ("", "Bytes", "crypto_hdkey", "bytes/1", "bytes "):
        with pytest.raises(URHDKeyValueError, match="invalid UR type: "):
            ur.encode(b"", ur_type, 400)


@pytest.mark.parametrize(
    "text, err_msg",
    [
        ("bytes/aeaeaeae", "invalid UR scheme: "),
        ("urn:bytes/aeaeaeae", "invalid UR scheme: "),
        ("ur:bytes", "invalid UR: "),
        ("ur:bytes/1-2/aeaeaeae", "multi-part UR is not supported"),
        ("ur:bytes/a/b/c", "invalid UR: "),
        ("ur:by_tes/aeaeaeae", "invalid UR type: "),
        ("ur:/aeaeaeae", "invalid UR type: "),
        ("ur:bytes/aeaeaeao", "invalid checksum: "),
    ],
)
def test_invalid_ur(text: str, err_msg: str) -> None:

    with pytest.raises(URHDKeyValueError, match=err_msg):
        ur.decode(text)
