#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Bytewords encoding and decoding functions.

See BCR-2020-012 (https://github.com/BlockchainCommons/Research).

Each byte is mapped to one of 256 four-letter words;
a CRC-32 checksum (ISO-HDLC, as in zlib) of the payload
is appended big-endian before the encoding.

The first and last letters of each word are unique among the 256 words,
so that the minimal style uses just those two letters per byte.

* standard: words separated by spaces
* uri: words separated by dashes
* minimal: first and last letters of each word, no separator
"""

import zlib
from typing import Dict, List

from urhdkey.alias import Octets
from urhdkey.exceptions import URHDKeyValueError
from urhdkey.utils import bytes_from_octets

WORDS = """
    able acid also apex aqua arch atom aunt away axis back bald barn belt
    beta bias blue body brag brew bulb buzz calm cash cats chef city claw
    code cola cook cost crux curl cusp cyan dark data days deli dice diet
    door down draw drop drum dull duty each easy echo edge epic even exam
    exit eyes fact fair fern figs film fish fizz flap flew flux foxy free
    frog fuel fund gala game gear gems gift girl glow good gray grim guru
    gush gyro half hang hard hawk heat help high hill holy hope horn huts
    iced idea idle inch inky into iris iron item jade jazz join jolt jowl
    judo jugs jump junk jury keep keno kept keys kick kiln king kite kiwi
    knob lamb lava lazy leaf legs liar limp lion list logo loud love luau
    luck lung main many math maze memo menu meow mild mint miss monk nail
    navy need news next noon note numb obey oboe omit onyx open oval owls
    paid part peck play plus poem pool pose puff puma purr quad quiz race
    ramp real redo rich road rock roof ruby ruin runs rust safe saga scar
    sets silk skew slot soap solo song stub surf swan taco task taxi tent
    tied time tiny toil tomb toys trip tuna twin ugly undo unit urge user
    vast very veto vial vibe view visa void vows wall wand warm wasp wave
    waxy webs what when whiz wolf work yank yawn yell yoga yurt zaps zero
    zest zinc zone zoom
""".split()

STANDARD = "standard"
URI = "uri"
MINIMAL = "minimal"

_SEPARATORS = {STANDARD: " ", URI: "-"}

_WORD_INDEX: Dict[str, int] = {word: i for i, word in enumerate(WORDS)}
_MINIMAL_INDEX: Dict[str, int] = {word[0] + word[3]: i for i, word in enumerate(WORDS)}


def _checksum(data: bytes) -> bytes:
    return zlib.crc32(data).to_bytes(4, byteorder="big", signed=False)


def encode(data: Octets, style: str = MINIMAL) -> str:
    "Return the checksummed bytewords encoding of the input octets."

    data = bytes_from_octets(data)
    words = [WORDS[b] for b in data + _checksum(data)]
    if style == MINIMAL:
        return "".join(word[0] + word[3] for word in words)
    if style not in _SEPARATORS:
        raise URHDKeyValueError(f"invalid bytewords style: {style!r}")
    return _SEPARATORS[style].join(words)


def decode(text: str, style: str = MINIMAL) -> bytes:
    "Return the payload of a checksummed bytewords string."

    text = text.strip().lower()
    if style == MINIMAL:
        if len(text) % 2:
            raise URHDKeyValueError(f"invalid minimal bytewords length: {len(text)}")
        words: List[str] = [text[i : i + 2] for i in range(0, len(text), 2)]
        index = _MINIMAL_INDEX
    elif style in _SEPARATORS:
        words = text.split(_SEPARATORS[style])
        index = _WORD_INDEX
    else:
        raise URHDKeyValueError(f"invalid bytewords style: {style!r}")

    try:
        data = bytes(index[word] for word in words)
    except KeyError as e:
        raise URHDKeyValueError(f"invalid byteword: {e.args[0]!r}") from e

    if len(data) < 4:
        raise URHDKeyValueError("bytewords too short for the checksum")
    payload, checksum = data[:-4], data[-4:]
    if checksum != _checksum(payload):
        err_msg = f"invalid checksum: {checksum.hex()}; "
        err_msg += f"expected: {_checksum(payload).hex()}"
        raise URHDKeyValueError(err_msg)
    return payload
