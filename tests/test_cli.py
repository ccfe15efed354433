"""Tests for the palettelab command line."""

import json
import sys

import pytest

from palettelab import __version__
from palettelab.main import main


def run(monkeypatch, capsys, *argv):
    monkeypatch.setenv('COLORTERM', 'truecolor')
    monkeypatch.setattr(sys, 'argv', ['palettelab', *argv])
    with pytest.raises(SystemExit) as exc:
        main()
    out, err = capsys.readouterr()
    return exc.value.code, out, err


class TestConvert:
    def test_single_format(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'convert', '-H', '#ff0000', '-t', 'rgb')
        assert code == 0
        assert out.strip() == 'rgb(255, 0, 0)'

    def test_accepts_css_syntax(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'convert', '-H', 'hsl(120, 100%, 50%)', '-t', 'hex')
        assert code == 0
        assert out.strip() == '#00ff00'

    def test_all_formats(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'convert', '-H', 'abc')
        assert code == 0
        assert '#aabbcc' in out
        assert 'oklch(' in out

    def test_bad_hex_exits_2(self, monkeypatch, capsys):
        code, _, err = run(monkeypatch, capsys, 'convert', '-H', '#12')
        assert code == 2
        assert 'error' in err

    def test_unknown_format(self, monkeypatch, capsys):
        code, _, err = run(monkeypatch, capsys, 'convert', '-H', '#fff', '-t', 'xyz')
        assert code == 2
        assert 'unknown format' in err

    def test_cmyk(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'convert', '-H', '#ff0000', '-t', 'cmyk')
        assert code == 0
        assert out.strip() == 'cmyk(0%, 100%, 100%, 0%)'

    def test_lab(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'convert', '-H', '#ffffff', '-t', 'lab')
        assert code == 0
        assert out.strip() == 'lab(100 0 0)'

    def test_listing_includes_cmyk_and_lab(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'convert', '-H', '#ff0000')
        assert code == 0
        assert 'cmyk(0%, 100%, 100%, 0%)' in out
        assert 'lab(53.24' in out

    def test_random_is_reproducible(self, monkeypatch, capsys):
        _, first, _ = run(monkeypatch, capsys, 'convert', '-r', '-s', '42', '-t', 'hex')
        _, second, _ = run(monkeypatch, capsys, 'convert', '-r', '-s', '42', '-t', 'hex')
        assert first == second


class TestContrast:
    def test_black_on_white(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'contrast', '-f', '#000', '-b', '#fff')
        assert code == 0
        assert '21.00:1' in out

    def test_fix(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'contrast', '-f', '#aaa', '-b', '#fff', '--fix')
        assert code == 0
        assert 'fixed for 4.5:1' in out

    def test_level_follows_exact_ratio(self, monkeypatch, capsys):
        # 4.4991:1 displays as 4.50:1 but does not reach AA
        code, out, _ = run(monkeypatch, capsys, 'contrast', '-f', '#007eb7', '-b', '#fff')
        assert code == 0
        assert '4.50:1  (AA Large)' in out

    def test_missing_background(self, monkeypatch, capsys):
        code, _, _ = run(monkeypatch, capsys, 'contrast', '-f', '#000')
        assert code == 2


class TestHarmony:
    def test_complementary(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'harmony', '-H', '#ff0000', '-k', 'complementary')
        assert code == 0
        assert '#00ffff' in out

    def test_unknown_kind(self, monkeypatch, capsys):
        code, _, err = run(monkeypatch, capsys, 'harmony', '-H', '#ff0000', '-k', 'pentagonal')
        assert code == 2
        assert 'pentagonal' in err


class TestScale:
    def test_steps(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'scale', '-H', '#3b82f6', '-S', '5')
        assert code == 0
        assert '500' in out
        assert '#3b82f6' in out

    def test_hsl_method(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'scale', '-H', '#3b82f6', '-m', 'hsl')
        assert code == 0
        assert '950' in out

    def test_hsl_method_honours_steps(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'scale', '-H', '#3b82f6', '-m', 'hsl', '-S', '5')
        assert code == 0
        stops = [line for line in out.splitlines() if line[:1].isdigit()]
        assert len(stops) == 5


class TestVision:
    def test_all(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'vision', '-H', '#ff0000', '-all')
        assert code == 0
        for label in ('protan', 'deuter', 'tritan', 'achroma', 'protanom'):
            assert label in out

    def test_requires_input(self, monkeypatch, capsys):
        code, _, _ = run(monkeypatch, capsys, 'vision', '-p')
        assert code == 2

    def test_compare_suggests_fix(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'vision', '-H', '#808080', '-c', '#808080', '-a')
        assert code == 0
        assert 'merges' in out
        assert 'try l=' in out

    def test_compare_distinct(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'vision', '-H', '#000000', '-c', '#ffffff', '-p')
        assert code == 0
        assert 'distinct' in out
        assert 'merges' not in out


class TestPalette:
    def test_json_is_reproducible(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'palette', '-s', '7', '--json')
        assert code == 0
        payload = json.loads(out)
        assert list(payload) == ['primary', 'secondary', 'accent', 'neutral',
                                 'success', 'warning', 'error', 'info']
        assert list(payload['primary']) == ['50', '100', '200', '300', '400', '500',
                                            '600', '700', '800', '900', '950']
        _, again, _ = run(monkeypatch, capsys, 'palette', '-s', '7', '--json')
        assert again == out

    def test_text_output(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, 'palette', '-s', '1', '-S', '3')
        assert code == 0
        assert 'neutral' in out


class TestMain:
    def test_version(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, '--version')
        assert code == 0
        assert __version__ in out

    def test_unknown_command(self, monkeypatch, capsys):
        code, _, err = run(monkeypatch, capsys, 'paint')
        assert code == 2
        assert 'paint' in err

    def test_help_full(self, monkeypatch, capsys):
        code, out, _ = run(monkeypatch, capsys, '--help-full')
        assert code == 0
        assert 'palettelab vision' in out

    def test_no_arguments_prints_help(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, 'argv', ['palettelab'])
        main()
        assert 'palettelab' in capsys.readouterr().out
