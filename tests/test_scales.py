"""Tests for palettelab.core.scales."""

import pytest

from palettelab.core import config as c
from palettelab.core.conversions import hex_to_hsl, hex_to_oklch
from palettelab.core.errors import InvalidColorFormat
from palettelab.core.scales import (
    adjust_lightness,
    adjust_saturation,
    generate_scale_hsl,
    generate_shades,
    generate_tints,
    generate_tonal_scale,
    generate_tones,
    gradient_stops,
    mix_colors,
    scale_hexes,
)
from palettelab.shared.sanitizer import is_valid_hex


def hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


def lightness(hexes):
    return [hex_to_oklch(h).l for h in hexes]


def strictly_decreasing(values):
    return all(a > b for a, b in zip(values, values[1:]))


class TestTonalScale:
    def test_default_eleven_stops(self):
        scale = generate_tonal_scale('#3b82f6')
        assert len(scale.stops) == 11
        assert scale.labels == c.SCALE_LABELS

    def test_seed_keeps_exact_hex(self):
        scale = generate_tonal_scale('#3B82F6')
        assert scale.stops[scale.seed_index].hex == '#3b82f6'

    def test_seed_lands_on_closest_reference_stop(self):
        # L of #3b82f6 is about 0.62, the 11-stop ladder puts 0.64 at index 4
        assert generate_tonal_scale('#3b82f6').seed_index == 4

    @pytest.mark.parametrize('seed', ['#3b82f6', '#ff0000', '#10b981', '#7c3aed', '#f59e0b', '#808080'])
    def test_lightness_strictly_decreasing(self, seed):
        assert strictly_decreasing(lightness(generate_tonal_scale(seed).hexes))

    def test_extreme_seeds_extrapolate(self):
        white = generate_tonal_scale('#ffffff')
        assert white.seed_index == 0
        assert white.stops[0].hex == '#ffffff'
        assert strictly_decreasing(lightness(white.hexes))

        black = generate_tonal_scale('#000000')
        assert black.seed_index == 10
        assert black.stops[-1].hex == '#000000'
        assert strictly_decreasing(lightness(black.hexes))

    @pytest.mark.parametrize('steps', range(c.SCALE_MIN_STEPS, c.SCALE_MAX_STEPS + 1))
    @pytest.mark.parametrize('seed', ['#000000', '#ffffff', '#111827'])
    def test_near_extreme_seeds_at_every_step_count(self, seed, steps):
        scale = generate_tonal_scale(seed, steps=steps)
        assert scale.stops[scale.seed_index].hex == seed
        assert strictly_decreasing(lightness(scale.hexes))
        assert len(set(scale.hexes)) == steps

    @pytest.mark.parametrize('seed', ['#3b82f6', '#ff0000', '#10b981', '#7c3aed'])
    def test_hue_preserved_where_chroma_is_meaningful(self, seed):
        seed_h = hex_to_oklch(seed).h
        for hex_code in generate_tonal_scale(seed).hexes:
            _, chroma, h = hex_to_oklch(hex_code)
            if chroma >= 0.04:
                assert hue_distance(h, seed_h) <= 15

    def test_custom_step_count_labels(self):
        scale = generate_tonal_scale('#3b82f6', steps=5)
        assert scale.labels == (100, 200, 300, 400, 500)

    @pytest.mark.parametrize('steps', [2, 7, 30])
    def test_step_counts(self, steps):
        scale = generate_tonal_scale('#3b82f6', steps=steps)
        assert len(scale.stops) == steps
        assert strictly_decreasing(lightness(scale.hexes))

    @pytest.mark.parametrize('steps', [0, 1, 31])
    def test_steps_out_of_range(self, steps):
        with pytest.raises(ValueError):
            generate_tonal_scale('#3b82f6', steps=steps)

    def test_invalid_seed(self):
        with pytest.raises(InvalidColorFormat):
            generate_tonal_scale('nope')

    def test_scale_hexes(self):
        scale = generate_tonal_scale('#3b82f6')
        assert scale_hexes(scale) == list(scale.hexes)
        assert all(is_valid_hex(h) for h in scale_hexes(scale))


class TestHslScale:
    def test_ladder(self):
        scale = generate_scale_hsl('#3b82f6')
        assert len(scale.stops) == 11
        assert hex_to_hsl(scale.stops[0].hex).l == pytest.approx(97, abs=0.5)
        assert hex_to_hsl(scale.stops[-1].hex).l == pytest.approx(14, abs=0.5)

    def test_seed_index_is_nearest_ladder_step(self):
        # #3b82f6 has HSL lightness of about 60
        assert generate_scale_hsl('#3b82f6').seed_index == 5

    def test_custom_step_count(self):
        scale = generate_scale_hsl('#3b82f6', steps=5)
        assert scale.labels == (100, 200, 300, 400, 500)
        values = [hex_to_hsl(h).l for h in scale.hexes]
        assert values[0] == pytest.approx(97, abs=0.5)
        assert values[-1] == pytest.approx(12, abs=0.5)
        assert values == sorted(values, reverse=True)

    def test_custom_step_count_keeps_saturation(self):
        seed_s = hex_to_hsl('#3b82f6').s
        middle = generate_scale_hsl('#3b82f6', steps=3).stops[1].hex
        assert hex_to_hsl(middle).s == pytest.approx(seed_s, abs=2)

    @pytest.mark.parametrize('steps', [1, 31])
    def test_steps_out_of_range(self, steps):
        with pytest.raises(ValueError):
            generate_scale_hsl('#3b82f6', steps=steps)


class TestTintsShadesTones:
    def test_tints_get_lighter(self):
        tints = generate_tints('#ff0000', 3)
        assert len(tints) == 3
        values = [hex_to_hsl(h).l for h in tints]
        assert values == sorted(values)
        assert values[-1] == pytest.approx(95, abs=0.5)

    def test_shades_get_darker(self):
        shades = generate_shades('#ff0000', 4)
        values = [hex_to_hsl(h).l for h in shades]
        assert values == sorted(values, reverse=True)
        assert values[-1] == pytest.approx(10, abs=0.5)

    def test_tones_lose_saturation(self):
        values = [hex_to_hsl(h).s for h in generate_tones('#ff0000', 4)]
        assert values == sorted(values, reverse=True)
        assert values[0] < 100


class TestMixAndGradient:
    def test_mix_endpoints(self):
        assert mix_colors('#ff0000', '#0000ff', 0) == '#ff0000'
        assert mix_colors('#ff0000', '#0000ff', 1) == '#0000ff'

    def test_mix_takes_short_hue_path(self):
        assert mix_colors('#ff0000', '#ff00ff', 0.5) == '#ff0080'

    def test_srgb_gradient(self):
        assert gradient_stops('#000000', '#ffffff', 3, 'srgb') == ['#000000', '#808080', '#ffffff']

    @pytest.mark.parametrize('space', c.GRADIENT_COLORSPACES)
    def test_endpoints_preserved(self, space):
        stops = gradient_stops('#FF0000', '#0000ff', 6, space)
        assert len(stops) == 6
        assert stops[0] == '#ff0000'
        assert stops[-1] == '#0000ff'
        assert all(is_valid_hex(h) for h in stops)

    def test_oklch_gradient_from_gray_keeps_target_hue(self):
        middle = gradient_stops('#808080', '#ff0000', 3, 'oklch')[1]
        assert hue_distance(hex_to_oklch(middle).h, hex_to_oklch('#ff0000').h) <= 5

    def test_unknown_colorspace(self):
        with pytest.raises(ValueError):
            gradient_stops('#000000', '#ffffff', 3, 'cmyk')

    def test_too_few_steps(self):
        with pytest.raises(ValueError):
            gradient_stops('#000000', '#ffffff', 1, 'srgb')


class TestAdjust:
    def test_lightness_clamps(self):
        assert adjust_lightness('#808080', 100) == '#ffffff'
        assert adjust_lightness('#808080', -100) == '#000000'

    def test_desaturate_to_gray(self):
        assert adjust_saturation('#ff0000', -100) == '#808080'
