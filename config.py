"""팔레트 교배 전역 설정과 favor 정책 파라미터"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class FavorPolicy:
    decay: bool = True
    rate: int = 10
    spread: int = 10  # 양옆으로 강화할 이웃 수

    def __post_init__(self) -> None:
        if self.rate < 0 or self.spread < 0:
            raise ValueError("rate/spread는 0 이상이어야 해.")


# 전체 가중치를 절반으로 깎은 뒤 선택 주변을 강화
DECAY_THEN_BOOST = FavorPolicy(decay=True, rate=10, spread=10)
# 감쇠 없이 더하기만
ADDITIVE_ONLY = FavorPolicy(decay=False, rate=2, spread=10)


HUE_ANCHORS: Tuple[Tuple[str, str], ...] = (
    ("red", "#FD0000"),
    ("magenta", "#CB0073"),
    ("purple", "#7009A9"),
    ("indigo", "#3914AE"),
    ("blue", "#123FAA"),
    ("teal", "#009898"),
    ("green", "#00CA00"),
    ("lime", "#9EEC00"),
    ("yellow", "#FDFD00"),
    ("gold", "#FDD100"),
    ("amber", "#FDA900"),
    ("orange", "#FD7300"),
    ("red", "#FD0000"),
)

HUE_STEPS = 360
PERCENT_STEPS = 100


@dataclass(frozen=True)
class BreederConfig:
    policy: FavorPolicy = DECAY_THEN_BOOST
    hue_modifier_steps: int = HUE_STEPS
    palettes_per_row: int = 6
    hue_anchors: Tuple[Tuple[str, str], ...] = field(default=HUE_ANCHORS)

    def __post_init__(self) -> None:
        if not 0 < self.hue_modifier_steps <= HUE_STEPS:
            raise ValueError("hue_modifier_steps는 1~360 사이여야 해.")
        if self.palettes_per_row <= 0:
            raise ValueError("palettes_per_row는 1 이상이어야 해.")
        if len(self.hue_anchors) < 2:
            raise ValueError("색상 앵커는 최소 2개 필요해.")


DEFAULT_CONFIG = BreederConfig()
ADDITIVE_CONFIG = BreederConfig(policy=ADDITIVE_ONLY)
