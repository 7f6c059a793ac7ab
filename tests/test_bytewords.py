#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `urhdkey.bytewords` module."

import pytest

from urhdkey import bytewords
from urhdkey.exceptions import URHDKeyValueError


def test_wordlist() -> None:

    assert len(bytewords.WORDS) == 256
    assert len(set(bytewords.WORDS)) == 256
    assert sorted(bytewords.WORDS) == list(bytewords.WORDS)
    assert all(len(word) == 4 for word in bytewords.WORDS)
    # first and last letters are a unique abbreviation
    assert len({word[0] + word[3] for word in bytewords.WORDS}) == 256
    assert bytewords.WORDS[0] == "able"
    assert bytewords.WORDS[255] == "zoom"


def test_encode() -> None:

    # CRC-32 of the empty string is zero
    assert bytewords.encode(b"") == "aeaeaeae"
    assert bytewords.encode(b"", "standard") == "able able able able"
    assert bytewords.encode(b"", "uri") == "able-able-able-able"

    # CRC-32 check value: 0xCBF43926
    data = b"123456789"
    assert bytewords.encode(data) == "eheyeoeeecenemetessbwkesds"
    assert bytewords.encode(data.hex()) == "eheyeoeeecenemetessbwkesds"
    standard = bytewords.encode(data, "standard")
    assert standard.split()[-4:] == ["stub", "work", "eyes", "days"]
    assert bytewords.encode(data, "uri") == standard.replace(" ", "-")

    with pytest.raises(URHDKeyValueError, match="invalid bytewords style: "):
        bytewords.encode(data, "compact")


def test_decode() -> None:

    data = bytes(range(256))
    for style in ("minimal", "standard", "uri"):
        text = bytewords.encode(data, style)
        assert bytewords.decode(text, style) == data
        assert bytewords.decode(text.upper(), style) == data

    assert bytewords.decode("aeaeaeae") == b""
    assert bytewords.decode("EHEYEOEEECENEMETESSBWKESDS") == b"123456789"


@pytest.mark.parametrize(
    "text, style, err_msg",
    [
        ("aeaeaea", "minimal", "invalid minimal bytewords length: "),
        ("aeaeae", "minimal", "bytewords too short for the checksum"),
        ("aeaeaeaq", "minimal", "invalid byteword: "),
        ("able able able", "standard", "bytewords too short for the checksum"),
        ("able able able ably", "standard", "invalid byteword: "),
        ("able  able able able", "standard", "invalid byteword: "),
        ("able-able-able-able", "standard", "invalid byteword: "),
        ("aeaeaeao", "minimal", "invalid checksum: "),
        ("eheyeoeeecenemetessbwkesdy", "minimal", "invalid checksum: "),
        ("aeaeaeae", "compact", "invalid bytewords style: "),
    ],
)
def test_invalid_bytewords(text: str, style: str, err_msg: str) -> None:

    with pytest.raises(URHDKeyValueError, match=err_msg):
        bytewords.decode(text, style)
