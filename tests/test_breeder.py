from __future__ import annotations

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np
import pytest

from breeding.breeder import Axis, PaletteBreeder, Role
from breeding.hue_curve import hue_prior
from breeding.palette import Color, ColorModifier, Palette
from color_utils import HEX_RE
from config import ADDITIVE_CONFIG, BreederConfig


@pytest.fixture
def breeder() -> PaletteBreeder:
    return PaletteBreeder(rng=42)


def test_owns_nine_tables(breeder):
    sizes = {(axis, role): len(breeder.table(axis, role)) for axis in Axis for role in Role}
    assert len(sizes) == 9
    for role in Role:
        assert sizes[(Axis.HUE, role)] == 360
        assert sizes[(Axis.SATURATION, role)] == 100
        assert sizes[(Axis.LIGHTNESS, role)] == 100


def test_only_base_hue_starts_non_uniform(breeder):
    base_hue = breeder.table(Axis.HUE, Role.BASE).weights
    assert base_hue.min() >= 1
    assert base_hue.max() > 1
    for axis in Axis:
        for role in Role:
            if (axis, role) == (Axis.HUE, Role.BASE):
                continue
            assert set(breeder.table(axis, role).weights.tolist()) == {1}


def test_generated_values_in_domain(breeder):
    for _ in range(200):
        base = breeder.generate_base_color()
        assert isinstance(base, Color)
        assert 0 <= base.hue < 360
        assert 0 <= base.saturation < 100
        assert 0 <= base.lightness < 100
        for modifier in (breeder.generate_tile_modifier(), breeder.generate_sprite_modifier()):
            assert isinstance(modifier, ColorModifier)
            assert 0 <= modifier.hue < 360
            assert 0 <= modifier.saturation < 100
            assert 0 <= modifier.lightness < 100


def test_same_seed_same_palettes():
    a = PaletteBreeder(rng=7).generate_palettes(12)
    b = PaletteBreeder(rng=7).generate_palettes(12)
    assert a == b


def test_accepts_generator_instance():
    rng = np.random.default_rng(3)
    breeder = PaletteBreeder(rng=rng)
    assert breeder.table(Axis.SATURATION, Role.TILE).rng is rng


def test_generate_palettes_default_row(breeder):
    palettes = breeder.generate_palettes()
    assert len(palettes) == 6
    for palette in palettes:
        assert isinstance(palette, Palette)
        assert palette.tile_color == breeder.combine(palette.base_color, palette.tile_modifier)
        assert palette.sprite_color == breeder.combine(palette.base_color, palette.sprite_modifier)
        assert all(HEX_RE.match(code) for code in palette.hex_codes())


def test_generate_palettes_rejects_negative_count(breeder):
    with pytest.raises(ValueError):
        breeder.generate_palettes(-1)


def test_combine_and_mod_color_exposed(breeder):
    assert breeder.combine(Color(350, 20, 20), ColorModifier(20, 100, 0)) == Color(10, 30, 10)
    assert breeder.mod_color(20, 100) == 30


def test_favor_reinforces_each_table(breeder):
    base = Color(200, 30, 60)
    tile_mod = ColorModifier(15, 70, 40)
    sprite_mod = ColorModifier(300, 10, 90)
    before = {key: breeder.table(*key).weights for key in ((a, r) for a in Axis for r in Role)}
    breeder.favor(base, tile_mod, sprite_mod)
    for role, components in ((Role.BASE, base), (Role.TILE, tile_mod), (Role.SPRITE, sprite_mod)):
        for axis, value in zip(Axis, components.as_tuple()):
            table = breeder.table(axis, role)
            assert table.weight(value) > before[(axis, role)][value]
            if (axis, role) != (Axis.HUE, Role.BASE):
                assert table.weight(value) == table.weights.max()


def test_favor_palette_matches_favor():
    a = PaletteBreeder(rng=11)
    b = PaletteBreeder(rng=11)
    palette = a.generate_palette()
    b.generate_palette()
    a.favor_palette(palette)
    b.favor(palette.base_color, palette.tile_modifier, palette.sprite_modifier)
    for axis in Axis:
        for role in Role:
            assert np.array_equal(a.table(axis, role).weights, b.table(axis, role).weights)


def test_favor_rejects_out_of_domain_component(breeder):
    with pytest.raises(AssertionError):
        breeder.favor(Color(10, 100, 50), ColorModifier(0, 0, 0), ColorModifier(0, 0, 0))


@pytest.mark.parametrize("hue", [400, 360, -5])
def test_favor_rejects_base_hue_outside_wheel(breeder, hue):
    with pytest.raises(AssertionError):
        breeder.favor(Color(hue, 50, 50), ColorModifier(0, 50, 50), ColorModifier(0, 50, 50))


def test_base_hue_sampling_follows_anchor_prior():
    breeder = PaletteBreeder(rng=31)
    table = breeder.table(Axis.HUE, Role.BASE)
    prior = hue_prior()
    assert np.allclose(table.probabilities(), prior / prior.sum())

    draws = 60000
    counts = np.bincount([breeder.generate_base_color().hue for _ in range(draws)], minlength=360)
    # 30도 구간으로 묶어 비교
    empirical = counts.reshape(12, 30).sum(axis=1) / draws
    expected = table.probabilities().reshape(12, 30).sum(axis=1)
    assert np.all(np.abs(empirical - expected) < 0.01)


def test_additive_config_uses_additive_policy():
    breeder = PaletteBreeder(config=ADDITIVE_CONFIG, rng=1)
    breeder.favor(Color(100, 50, 50), ColorModifier(0, 50, 50), ColorModifier(0, 50, 50))
    table = breeder.table(Axis.SATURATION, Role.BASE)
    assert table.weight(50) == 1 + 10
    assert table.weight(51) == 1 + 20
    assert table.weight(0) == 1


def test_reduced_hue_modifier_domain():
    breeder = PaletteBreeder(config=BreederConfig(hue_modifier_steps=36), rng=5)
    tile_hue = breeder.table(Axis.HUE, Role.TILE)
    assert len(tile_hue) == 36
    assert len(breeder.table(Axis.HUE, Role.BASE)) == 360
    assert all(breeder.generate_tile_modifier().hue < 36 for _ in range(100))
    breeder.favor(Color(0, 50, 50), ColorModifier(35, 50, 50), ColorModifier(3, 50, 50))
    assert tile_hue.weight(35) == tile_hue.weights.max()
    with pytest.raises(AssertionError):
        breeder.favor(Color(0, 50, 50), ColorModifier(40, 50, 50), ColorModifier(3, 50, 50))


@pytest.mark.parametrize("kwargs", [{"hue_modifier_steps": 0}, {"hue_modifier_steps": 400}, {"palettes_per_row": 0}])
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        BreederConfig(**kwargs)


def test_breeding_skews_generation_toward_choice():
    breeder = PaletteBreeder(rng=2024)
    chosen = Color(120, 70, 30)
    for _ in range(6):
        breeder.favor(chosen, ColorModifier(0, 50, 50), ColorModifier(180, 50, 50))
    hues = np.array([breeder.generate_base_color().hue for _ in range(3000)])
    near = np.minimum(np.abs(hues - 120), 360 - np.abs(hues - 120)) <= 10
    assert near.mean() > 0.5
