"""Tests for palettelab.core.vision."""

import pytest

from palettelab.core.contrast import contrast_ratio
from palettelab.core.conversions import hex_to_hsl, hex_to_rgb
from palettelab.core.errors import InvalidColorFormat
from palettelab.core.vision import (
    COMMON_CVD_TYPES,
    CVD_TYPES,
    are_distinguishable,
    check_category_accessibility,
    check_palette_accessibility,
    clear_simulation_cache,
    deficiency_description,
    deficiency_name,
    simulate,
    simulate_all,
    simulate_batch,
    simulation_cache_size,
    suggest_contrast_fix,
    suggest_distinguishable_fix,
)


class TestSimulate:
    @pytest.mark.parametrize('kind', CVD_TYPES)
    def test_white_and_black_are_fixed_points(self, kind):
        assert simulate('#ffffff', kind) == '#ffffff'
        assert simulate('#000000', kind) == '#000000'

    def test_zero_intensity_is_identity(self):
        assert simulate('#3b82f6', 'protanopia', 0.0) == '#3b82f6'

    def test_intensity_is_clamped(self):
        assert simulate('#3b82f6', 'deuteranopia', 5.0) == simulate('#3b82f6', 'deuteranopia', 1.0)

    def test_achromatopsia_is_gray(self):
        r, g, b = hex_to_rgb(simulate('#ff0000', 'achromatopsia'))
        assert r == g == b

    def test_protanopia_changes_red(self):
        assert simulate('#ff0000', 'protanopia') != '#ff0000'

    def test_accepts_unnormalized_hex(self):
        assert simulate('#F00', 'tritanopia') == simulate('#ff0000', 'tritanopia')

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            simulate('#ff0000', 'tetrachromacy')

    def test_invalid_hex(self):
        with pytest.raises(InvalidColorFormat):
            simulate('#12', 'protanopia')


class TestSimulationCache:
    def test_cache_fills_and_clears(self):
        clear_simulation_cache()
        assert simulation_cache_size() == 0
        simulate('#3b82f6', 'protanopia')
        simulate('#3B82F6', 'protanopia')
        assert simulation_cache_size() == 1
        simulate('#3b82f6', 'tritanopia')
        assert simulation_cache_size() == 2
        clear_simulation_cache()
        assert simulation_cache_size() == 0


class TestBatchHelpers:
    def test_simulate_all(self):
        result = simulate_all('#3b82f6')
        assert set(result) == set(CVD_TYPES)

    def test_simulate_batch(self):
        result = simulate_batch(['#ff0000', '#00ff00', '#ffffff'], 'deuteranopia')
        assert len(result) == 3
        assert result[2] == '#ffffff'

    def test_common_types_are_a_subset(self):
        assert set(COMMON_CVD_TYPES) <= set(CVD_TYPES)

    def test_names_and_descriptions(self):
        for kind in CVD_TYPES:
            assert deficiency_name(kind)
            assert deficiency_description(kind)
        assert deficiency_name('protanopia').startswith('Protanopia')


class TestAccessibility:
    def test_identical_colors_are_not_distinguishable(self):
        assert not are_distinguishable('#3b82f6', '#3b82f6', 'protanopia')

    def test_black_and_white_are_distinguishable(self):
        for kind in CVD_TYPES:
            assert are_distinguishable('#000000', '#ffffff', kind)

    def test_palette_with_duplicate(self):
        result = check_palette_accessibility(['#ff0000', '#FF0000'])
        assert set(result) == set(COMMON_CVD_TYPES)
        for entry in result.values():
            assert not entry['accessible']
            assert entry['problematic_pairs'] == [('#ff0000', '#ff0000')]

    def test_accessible_palette(self):
        result = check_palette_accessibility(['#000000', '#ffffff'])
        assert all(entry['accessible'] for entry in result.values())

    def test_categories_are_checked_separately(self):
        result = check_category_accessibility({
            'dark': ['#000000', '#000000'],
            'single': ['#ffffff'],
            'mono': ['#000', '#fff'],
        })
        assert set(result['by_category']) == {'dark', 'mono'}
        protan = result['by_type']['protanopia']
        assert not protan['accessible']
        assert protan['problematic_pairs'] == [('#000000', '#000000', 'dark')]

    def test_no_cross_category_comparison(self):
        result = check_category_accessibility({'a': ['#ff0000'], 'b': ['#ff0000']})
        assert result['by_category'] == {}
        assert all(entry['accessible'] for entry in result['by_type'].values())


class TestSuggestContrastFix:
    def test_reaches_target_under_simulation(self):
        fix = suggest_contrast_fix('#777777', '#ffffff', 'deuteranopia')
        ratio = contrast_ratio(simulate(fix.hex, 'deuteranopia'), simulate('#ffffff', 'deuteranopia'))
        assert ratio >= 4.5
        assert fix.lightness < 47

    def test_light_text_on_dark_goes_lighter(self):
        fix = suggest_contrast_fix('#555555', '#000000', 'protanopia')
        assert fix.lightness > 33

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            suggest_contrast_fix('#777777', '#ffffff', 'nope')


class TestSuggestDistinguishableFix:
    def test_separates_identical_colors(self):
        fix = suggest_distinguishable_fix('#808080', '#808080', 'achromatopsia')
        assert fix is not None
        assert are_distinguishable(fix.hex, '#808080', 'achromatopsia', 25)
        # one 5% step is not enough for grays, two are
        assert fix.lightness == pytest.approx(hex_to_hsl('#808080').l + 10)

    def test_darker_color_moves_darker_first(self):
        fix = suggest_distinguishable_fix('#404040', '#808080', 'achromatopsia')
        assert fix.lightness == pytest.approx(hex_to_hsl('#404040').l - 5)
        assert fix.hex == '#333333'

    def test_unreachable_threshold(self):
        assert suggest_distinguishable_fix('#808080', '#808080', 'protanopia', threshold=500) is None

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            suggest_distinguishable_fix('#808080', '#808080', 'nope')
