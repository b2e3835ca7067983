"""색상 변환 유틸 (코어 밖 표시용 변환 포함)"""
from __future__ import annotations

import colorsys
import re
from typing import Tuple

import numpy as np
from skimage import color as skcolor

HEX_RE = re.compile(r"^#([0-9A-Fa-f]{6})$")


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def hex_to_rgb(s: str) -> Tuple[int, int, int]:
    m = HEX_RE.match((s or "").strip())
    if not m:
        raise ValueError(f"올바른 HEX 형식이 아니야: {s!r} (예: #FD7300)")
    val = m.group(1)
    return int(val[0:2], 16), int(val[2:4], 16), int(val[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError("RGB 범위는 0~255야.")
    return f"#{r:02X}{g:02X}{b:02X}"


def hexes_to_lab(hexes) -> np.ndarray:
    """HEX 목록을 (N, 3) Lab 배열로 바꾼다."""
    rgb = np.array([hex_to_rgb(h) for h in hexes], dtype=float) / 255.0
    return skcolor.rgb2lab(rgb.reshape(1, -1, 3))[0]


def lab_to_hue_degrees(lab: np.ndarray) -> np.ndarray:
    """(N, 3) Lab 배열을 0~360 미만의 색상각(도)으로 바꾼다. sRGB 밖은 잘라낸다."""
    rgb = np.clip(skcolor.lab2rgb(lab.reshape(1, -1, 3)), 0.0, 1.0)
    # HSV 색상각과 HSL 색상각은 같다
    hsv = skcolor.rgb2hsv(rgb)[0]
    return (hsv[:, 0] * 360.0) % 360.0


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """HSL(s, l은 퍼센트)을 화면 표시용 HEX로 바꾼다."""
    r, g, b = colorsys.hls_to_rgb(
        (h % 360.0) / 360.0,
        clamp(l / 100.0, 0.0, 1.0),
        clamp(s / 100.0, 0.0, 1.0),
    )
    return rgb_to_hex(int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))
