# test_public_api.py

import pytest

import chalkee
from chalkee import (
    red, green, blue, yellow, magenta, cyan, white, black, gray, grey,
    red_bright, bold, dim, italic, underline, strikethrough, inverse, hidden,
    bg_red, bg_green, bg_blue, bg_yellow, bg_magenta, bg_cyan, bg_white, bg_black,
    bg_red_bright, b, d, i, u, s, r,
    reset, as_, hex, rgb, bg_hex, bg_rgb, bg,
)


class TestExports:
    @pytest.mark.parametrize('styler, code', [
        (black, 30), (red, 31), (green, 32), (yellow, 33), (blue, 34),
        (magenta, 35), (cyan, 36), (white, 37), (gray, 90), (grey, 90),
        (red_bright, 91), (bg_black, 40), (bg_red, 41), (bg_green, 42),
        (bg_yellow, 43), (bg_blue, 44), (bg_magenta, 45), (bg_cyan, 46),
        (bg_white, 47), (bg_red_bright, 101), (bold, 1), (dim, 2),
        (italic, 3), (underline, 4), (inverse, 7), (hidden, 8),
        (strikethrough, 9), (b, 1), (d, 2), (i, 3), (u, 4), (s, 9),
    ])
    def test_single_style(self, styler, code):
        assert str(styler('Hello')) == f'\x1b[{code}mHello\x1b[0m'

    def test_every_registry_name_is_exported(self):
        for name in chalkee.STYLE_NAMES:
            assert callable(getattr(chalkee, name))

    def test_camel_case_module_attributes(self):
        assert str(chalkee.bgRedBright('x')) == '\x1b[101mx\x1b[0m'
        assert str(chalkee.bgHex('#00ff00')('x')) == '\x1b[48;5;46mx\x1b[0m'

    def test_unknown_module_attribute(self):
        with pytest.raises(AttributeError):
            chalkee.purple

    def test_exports_are_stylers(self):
        assert isinstance(red('x'), chalkee.Styler)


class TestDocumentedChains:
    def test_empty_text(self):
        assert str(red('')) == '\x1b[31m\x1b[0m'

    def test_reset_alone(self):
        assert str(reset('unstyled text')) == 'unstyled text\x1b[0m'
        assert str(r('reset text')) == 'reset text\x1b[0m'

    def test_bright_then_modifier(self):
        result = red_bright('bright red text').bold('bold text')
        assert str(result) == '\x1b[91mbright red text\x1b[0m\x1b[1;91mbold text\x1b[0m'

    def test_blue_dim_reset_yellow_bold(self):
        result = blue.dim('blue dim text').r.yellow.bold('yellow bold text')
        assert str(result) == '\x1b[2;34mblue dim text\x1b[0m\x1b[1;33myellow bold text\x1b[0m'

    def test_mixed_modifiers_on_background(self):
        result = bg_red('bg red').u('underlined').i('italic').b('bold').s('strikethrough')
        assert str(result) == (
            '\x1b[41mbg red\x1b[0m'
            '\x1b[4;41munderlined\x1b[0m'
            '\x1b[4;3;41mitalic\x1b[0m'
            '\x1b[4;3;1;41mbold\x1b[0m'
            '\x1b[4;3;1;9;41mstrikethrough\x1b[0m'
        )

    def test_auto_spacing_with_values(self):
        a, b_ = 2, 4
        result = red('first').as_(a)('+').blue('second')(b_)('=').green(a + b_)
        assert str(result) == (
            '\x1b[31mfirst\x1b[0m \x1b[31m2\x1b[0m \x1b[31m+\x1b[0m '
            '\x1b[31;34msecond\x1b[0m \x1b[31;34m4\x1b[0m \x1b[31;34m=\x1b[0m '
            '\x1b[31;34;32m6\x1b[0m'
        )

    def test_repeated_auto_spacing(self):
        result = blue('start').as_.yellow('next').as_.cyan('then').as_.magenta('end')
        assert str(result) == (
            '\x1b[34mstart\x1b[0m \x1b[34;33mnext\x1b[0m '
            '\x1b[34;33;36mthen\x1b[0m \x1b[34;33;36;35mend\x1b[0m'
        )

    def test_background_auto_spacing(self):
        result = bg_red('bg first').as_.bg_green('bg second')
        assert str(result) == '\x1b[41mbg first\x1b[0m \x1b[41;42mbg second\x1b[0m'

    def test_background_mode(self):
        result = bg.red('red background').blue('blue background')
        assert str(result) == '\x1b[41mred background\x1b[0m\x1b[44mblue background\x1b[0m'

    def test_background_mode_with_auto_spacing(self):
        result = as_.bg.red('red background').blue('blue background')
        assert str(result) == '\x1b[41mred background\x1b[0m \x1b[44mblue background\x1b[0m'

    def test_separate_calls_render_independently(self):
        # Sequential segments each carry their own full sequence, while
        # background mode collapses colors into a single background code.
        chained = red('x').blue('y')
        assert str(chained) == '\x1b[31mx\x1b[0m\x1b[31;34my\x1b[0m'
        assert str(bg.red.blue('z')) == '\x1b[44mz\x1b[0m'


class TestColorFunctions:
    def test_hex(self):
        assert str(hex('#ff0000')('red hex text')) == '\x1b[38;5;196mred hex text\x1b[0m'
        assert str(hex('#f00')('x')) == str(hex('#ff0000')('x'))

    def test_rgb(self):
        assert str(rgb(255, 0, 0)('red rgb text')) == '\x1b[38;5;196mred rgb text\x1b[0m'

    def test_background_variants(self):
        assert str(bg_hex('#00ff00')('green background')) == '\x1b[48;5;46mgreen background\x1b[0m'
        assert str(bg_rgb(0, 255, 0)('green background')) == '\x1b[48;5;46mgreen background\x1b[0m'

    def test_invalid_hex(self):
        with pytest.raises(chalkee.InvalidColorFormat):
            hex('#zzz')


class TestNoColor:
    def test_flag_set_on_one_export_affects_another(self):
        result = bg_red_bright('Hello World')
        red.no_color = True
        assert str(result) == 'Hello World'
        red.no_color = False
        assert str(result) == '\x1b[101mHello World\x1b[0m'

    def test_global_accessor(self):
        result = green('ok')
        chalkee.set_global_color_enabled(False)
        assert not chalkee.is_color_enabled()
        assert green.no_color
        assert str(result) == 'ok'

    def test_reset_marker_survives(self):
        chalkee.set_global_color_enabled(False)
        assert str(red('a').r('b')) == 'ab\x1b[0m'
