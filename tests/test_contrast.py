"""Tests for palettelab.core.contrast and luminance."""

import pytest

from palettelab.core import contrast
from palettelab.core.contrast import (
    check_all_contrast,
    classify,
    contrast_matrix,
    contrast_ratio,
    find_best_contrast,
    format_contrast_ratio,
    get_contrast_result,
    is_light_color,
    optimal_text_color,
    suggest_contrasting_color,
    wcag_level,
)
from palettelab.core.errors import InvalidColorFormat
from palettelab.core.luminance import relative_luminance


class TestRelativeLuminance:
    def test_extremes(self):
        assert relative_luminance('#000000') == 0.0
        assert relative_luminance('#ffffff') == pytest.approx(1.0)

    def test_accepts_rgb_tuple(self):
        assert relative_luminance((255, 0, 0)) == pytest.approx(0.2126)


class TestContrastRatio:
    def test_black_on_white(self):
        assert contrast_ratio('#000000', '#ffffff') == pytest.approx(21.0)

    def test_same_color(self):
        assert contrast_ratio('#3b82f6', '#3b82f6') == pytest.approx(1.0)

    def test_symmetry(self):
        pairs = [('#3b82f6', '#ffffff'), ('#ff0000', '#00ff00'), ('#123456', '#fedcba')]
        for a, b in pairs:
            assert contrast_ratio(a, b) == contrast_ratio(b, a)

    def test_accepts_rgb_tuples(self):
        assert contrast_ratio((0, 0, 0), '#fff') == pytest.approx(21.0)

    def test_gray_on_white(self):
        assert contrast_ratio('#777777', '#ffffff') == pytest.approx(4.48, abs=0.01)

    def test_invalid_hex(self):
        with pytest.raises(InvalidColorFormat):
            contrast_ratio('#12', '#ffffff')


class TestClassify:
    def test_aa_threshold(self):
        result = classify(4.5)
        assert result.aa_normal
        assert result.aa_large
        assert result.aaa_large
        assert not result.aaa_normal

    def test_large_only(self):
        result = classify(3.0)
        assert result.aa_large
        assert not result.aa_normal
        assert not result.aaa_large

    def test_max(self):
        assert all(classify(21.0)[1:])

    def test_get_contrast_result_rounds_ratio(self):
        result = get_contrast_result('#777777', '#ffffff')
        assert result.ratio == 4.48
        assert not result.aa_normal
        assert result.aa_large


class TestWcagLevel:
    def test_normal_text(self):
        assert wcag_level(7.0) == 'AAA'
        assert wcag_level(4.5) == 'AA'
        assert wcag_level(3.2) == 'AA Large'
        assert wcag_level(2.0) == 'Fail'

    def test_large_text(self):
        assert wcag_level(4.5, large_text=True) == 'AAA'
        assert wcag_level(3.0, large_text=True) == 'AA'
        assert wcag_level(2.9, large_text=True) == 'Fail'


class TestOptimalTextColor:
    def test_white_background(self):
        assert optimal_text_color('#ffffff') == '#000000'

    def test_black_background(self):
        assert optimal_text_color('#000000') == '#ffffff'

    def test_yellow_prefers_black(self):
        assert optimal_text_color('#ffff00') == '#000000'

    def test_navy_prefers_white(self):
        assert optimal_text_color('#000080') == '#ffffff'

    def test_tie_goes_to_black(self, monkeypatch):
        monkeypatch.setattr(contrast, 'contrast_ratio', lambda a, b: 5.0)
        assert optimal_text_color('#777777') == '#000000'

    def test_is_light_color(self):
        assert is_light_color('#ffffff')
        assert is_light_color('#ffff00')
        assert not is_light_color('#000080')


class TestContrastHelpers:
    def test_find_best_contrast(self):
        assert find_best_contrast('#ffffff', ['#eeeeee', '#333333', '#777777']) == '#333333'

    def test_find_best_contrast_empty(self):
        assert find_best_contrast('#ffffff', []) is None

    def test_contrast_matrix(self):
        assert contrast_matrix(['#000000', '#ffffff']) == [[1.0, 21.0], [21.0, 1.0]]

    def test_check_all_contrast(self):
        results = check_all_contrast(['#000', '#fff', '#777777'])
        assert len(results) == 3
        first = results[0]
        assert first['color1'] == '#000000'
        assert first['color2'] == '#ffffff'
        assert first['ratio'] == 21.0
        assert first['passes']
        assert not results[2]['passes']

    def test_format_contrast_ratio(self):
        assert format_contrast_ratio(4.5) == '4.50:1'
        assert format_contrast_ratio(21) == '21.00:1'


class TestSuggestContrastingColor:
    def test_passing_foreground_is_kept(self):
        assert suggest_contrasting_color('#ffffff', '#000') == '#000000'

    def test_reaches_target_on_white(self):
        fixed = suggest_contrasting_color('#ffffff', '#aaaaaa')
        assert contrast_ratio('#ffffff', fixed) >= 4.5

    def test_reaches_target_on_black(self):
        fixed = suggest_contrasting_color('#000000', '#3b3b8f', 7.0)
        assert contrast_ratio('#000000', fixed) >= 7.0

    def test_unreachable_target_returns_extreme(self):
        assert suggest_contrasting_color('#777777', '#777777', 20.0) in ('#000000', '#ffffff')
