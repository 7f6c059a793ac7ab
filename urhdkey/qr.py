#!/usr/bin/env python3

# Copyright (C) 2024-2026 The urhdkey developers
#
# This file is part of urhdkey. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of urhdkey including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""QR code rendering of UR text.

Upper-case UR text fits the QR alphanumeric mode.
Codes use the lowest error correction level (L)
and a one module quiet zone, as scanned by air-gapped wallets.
"""

import base64
from io import BytesIO
from typing import Any, Optional

import qrcode
from qrcode.image.pil import PilImage

MIN_SCALE = 3
MAX_SCALE = 12
DEFAULT_SCALE = 8

_BORDER = 1


def clamp_scale(scale: Optional[Any] = None) -> int:
    "Return the QR module size in pixels, clamped to [MIN_SCALE, MAX_SCALE]."

    try:
        value = int(scale)  # type: ignore
    except (TypeError, ValueError):
        return DEFAULT_SCALE
    except OverflowError:
        # infinite floats
        return MAX_SCALE if scale > 0 else MIN_SCALE  # type: ignore
    # zero is not a scale
    if value == 0:
        return DEFAULT_SCALE
    return max(MIN_SCALE, min(MAX_SCALE, value))


def _qr_code(text: str, box_size: int = 1) -> qrcode.QRCode:
    qr = qrcode.QRCode(
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=box_size,
        border=_BORDER,
    )
    qr.add_data(text)
    qr.make(fit=True)
    return qr


def qr_png(text: str, scale: Optional[Any] = None) -> bytes:
    "Return the PNG image bytes of the QR code of text."

    qr = _qr_code(text, clamp_scale(scale))
    img = qr.make_image(image_factory=PilImage)
    buffer = BytesIO()
    img.save(buffer)
    return buffer.getvalue()


def qr_data_url(text: str, scale: Optional[Any] = None) -> str:
    "Return the QR code of text as base64 PNG data URL."

    png = base64.b64encode(qr_png(text, scale)).decode("ascii")
    return "data:image/png;base64," + png


def qr_ascii(text: str) -> str:
    "Return the QR code of text drawn with block characters."

    qr = _qr_code(text)
    lines = []
    for row in qr.get_matrix():
        lines.append("".join("██" if cell else "  " for cell in row))
    return "\n".join(lines)
