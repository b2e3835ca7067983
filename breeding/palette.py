"""팔레트 구성 요소와 기본색 + 보정값 합성 규칙"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from color_utils import clamp, hsl_to_hex
from config import HUE_STEPS


@dataclass(frozen=True)
class Color:
    hue: int
    saturation: int
    lightness: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.hue, self.saturation, self.lightness

    def to_hex(self) -> str:
        return hsl_to_hex(self.hue, self.saturation, self.lightness)


@dataclass(frozen=True)
class ColorModifier:
    """hue는 더해지는 회전량, saturation/lightness는 기본값 기준 상대 위치(0~100)."""

    hue: int
    saturation: int
    lightness: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.hue, self.saturation, self.lightness


@dataclass(frozen=True)
class Palette:
    base_color: Color
    tile_modifier: ColorModifier
    tile_color: Color
    sprite_modifier: ColorModifier
    sprite_color: Color

    def hex_codes(self) -> Tuple[str, str, str]:
        return self.base_color.to_hex(), self.tile_color.to_hex(), self.sprite_color.to_hex()


def mod_color(base_value: int, mod_value: int) -> int:
    # 가까운 경계(0 또는 100)까지의 거리만큼만 움직일 수 있다
    portion = min(base_value, 100 - base_value)
    percent_mod = mod_value / 100 - 0.5
    value = base_value + portion * percent_mod
    return int(math.floor(clamp(value, 0, 100)))


def combine(base: Color, modifier: ColorModifier) -> Color:
    return Color(
        hue=(base.hue + modifier.hue) % HUE_STEPS,
        saturation=mod_color(base.saturation, modifier.saturation),
        lightness=mod_color(base.lightness, modifier.lightness),
    )
