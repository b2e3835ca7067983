"""팔레트 교배기: 9개 가중치 테이블에서 색을 뽑고, 고른 팔레트로 테이블을 강화한다"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np

from breeding.hue_curve import hue_prior
from breeding.palette import Color, ColorModifier, Palette, combine, mod_color
from breeding.weighted_table import WeightedTable
from config import DEFAULT_CONFIG, HUE_STEPS, PERCENT_STEPS, BreederConfig

logger = logging.getLogger("palette_breeder")


class Axis(Enum):
    HUE = "hue"
    SATURATION = "saturation"
    LIGHTNESS = "lightness"


class Role(Enum):
    BASE = "base"
    TILE = "tile"
    SPRITE = "sprite"


def _resolve_rng(rng):
    if rng is None or isinstance(rng, (int, np.integer)):
        return np.random.default_rng(rng)
    return rng


class PaletteBreeder:
    """(축, 역할) 조합마다 WeightedTable 하나씩, 총 9개를 가진다.

    기본색 hue 테이블만 앵커 곡선에서 온 사전 분포로 시작하고 나머지는 균등하다.
    모든 테이블이 같은 난수원을 공유하므로 시드를 주면 결과가 재현된다.
    단일 스레드 전용이다.
    """

    def __init__(self, config: BreederConfig | None = None, rng=None):
        self.config = config or DEFAULT_CONFIG
        self.rng = _resolve_rng(rng)
        prior = hue_prior(self.config.hue_anchors)
        self._tables: Dict[Tuple[Axis, Role], WeightedTable] = {}
        for role in Role:
            for axis in Axis:
                self._tables[(axis, role)] = WeightedTable(
                    self._table_size(axis, role),
                    policy=self.config.policy,
                    rng=self.rng,
                    prior=prior if (axis, role) == (Axis.HUE, Role.BASE) else None,
                    name=f"{role.value}.{axis.value}",
                )
        logger.debug("[초기화] 정책=%s, 테이블 %d개", self.config.policy, len(self._tables))

    def _table_size(self, axis: Axis, role: Role) -> int:
        if axis is Axis.HUE:
            return HUE_STEPS if role is Role.BASE else self.config.hue_modifier_steps
        return PERCENT_STEPS

    def table(self, axis: Axis, role: Role) -> WeightedTable:
        return self._tables[(axis, role)]

    def _generate(self, role: Role) -> Tuple[int, int, int]:
        return tuple(self._tables[(axis, role)].sample() for axis in Axis)

    def generate_base_color(self) -> Color:
        return Color(*self._generate(Role.BASE))

    def generate_tile_modifier(self) -> ColorModifier:
        return ColorModifier(*self._generate(Role.TILE))

    def generate_sprite_modifier(self) -> ColorModifier:
        return ColorModifier(*self._generate(Role.SPRITE))

    combine = staticmethod(combine)
    mod_color = staticmethod(mod_color)

    def generate_palette(self) -> Palette:
        base = self.generate_base_color()
        tile_mod = self.generate_tile_modifier()
        sprite_mod = self.generate_sprite_modifier()
        return Palette(
            base_color=base,
            tile_modifier=tile_mod,
            tile_color=combine(base, tile_mod),
            sprite_modifier=sprite_mod,
            sprite_color=combine(base, sprite_mod),
        )

    def generate_palettes(self, count: Optional[int] = None) -> List[Palette]:
        count = self.config.palettes_per_row if count is None else count
        if count < 0:
            raise ValueError("count는 0 이상이어야 해.")
        return [self.generate_palette() for _ in range(count)]

    def favor(self, base: Color, tile_modifier: ColorModifier, sprite_modifier: ColorModifier) -> None:
        for role, components in (
            (Role.BASE, base),
            (Role.TILE, tile_modifier),
            (Role.SPRITE, sprite_modifier),
        ):
            for axis, value in zip(Axis, components.as_tuple()):
                self._tables[(axis, role)].favor(value)
        logger.info(
            "[선택] 기본=%s, 타일 보정=%s, 스프라이트 보정=%s",
            base.as_tuple(),
            tile_modifier.as_tuple(),
            sprite_modifier.as_tuple(),
        )

    def favor_palette(self, palette: Palette) -> None:
        self.favor(palette.base_color, palette.tile_modifier, palette.sprite_modifier)
