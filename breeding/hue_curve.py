"""기본색 hue 테이블의 사전 분포: 앵커 색을 Lab 공간에서 보간해 만든다"""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from color_utils import hexes_to_lab, lab_to_hue_degrees
from config import HUE_ANCHORS, HUE_STEPS


def hue_samples(
    anchors: Sequence[Tuple[str, str]] = HUE_ANCHORS,
    steps: int = HUE_STEPS,
) -> np.ndarray:
    """앵커를 [0, 1]에 고르게 놓고 Lab 선형 보간으로 steps개를 뽑아 정수 hue로 돌려준다."""
    lab = hexes_to_lab([hex_value for _, hex_value in anchors])
    positions = np.linspace(0.0, 1.0, len(anchors))
    t = np.linspace(0.0, 1.0, steps)
    curve = np.stack([np.interp(t, positions, lab[:, i]) for i in range(3)], axis=-1)
    return np.floor(lab_to_hue_degrees(curve)).astype(np.int64) % HUE_STEPS


def hue_prior(anchors: Sequence[Tuple[str, str]] = HUE_ANCHORS) -> np.ndarray:
    counts = np.bincount(hue_samples(anchors), minlength=HUE_STEPS)
    # 한 번도 안 나온 hue도 뽑힐 수 있게 최소 1
    return np.maximum(counts, 1)
