import pytest

from mdtidy.lists import UnorderedListStyle
from mdtidy.options import (
    BooleanOption,
    DropdownOption,
    DropdownRecord,
    MomentFormatOption,
    Option,
    OptionError,
    TextAreaOption,
    TextOption,
)
from mdtidy.rules import get_rule


def test_defaults_resolve_to_options_class():
    options = get_rule('unordered-list-style').resolve_options()
    assert options.list_style is UnorderedListStyle.CONSISTENT


def test_dropdown_accepts_plain_value_and_member():
    rule = get_rule('unordered-list-style')
    assert rule.resolve_options({'list_style': '*'}).list_style is UnorderedListStyle.ASTERISK
    assert rule.resolve_options({'list_style': UnorderedListStyle.PLUS}).list_style is UnorderedListStyle.PLUS


def test_dropdown_rejects_unknown_value():
    with pytest.raises(OptionError, match='list_style'):
        get_rule('unordered-list-style').resolve_options({'list_style': 'x'})


def test_unknown_option_key():
    with pytest.raises(OptionError, match='unknown option'):
        get_rule('trailing-spaces').resolve_options({'two_space': True})


def test_boolean_option():
    option = BooleanOption('flag', 'Flag', 'A flag', False)
    assert option.validate(True) is True
    with pytest.raises(OptionError):
        option.validate('yes')


def test_text_options():
    assert TextOption('lang', 'Language', '', '').validate('bash') == 'bash'
    area = TextAreaOption('words', 'Words', '', '')
    assert area.widget == 'text-area'
    with pytest.raises(OptionError):
        area.validate(3)


@pytest.mark.parametrize('value', ['YYYY-MM-DD', 'dddd, MMMM Do YYYY, h:mm:ss a', '[Week] W, YYYY'])
def test_moment_format_valid(value):
    assert MomentFormatOption('fmt', 'Format', '', 'YYYY').validate(value) == value


@pytest.mark.parametrize('value', ['', 'hello', None])
def test_moment_format_invalid(value):
    with pytest.raises(OptionError):
        MomentFormatOption('fmt', 'Format', '', 'YYYY').validate(value)


def test_widgets_are_tagged():
    assert [cls.widget for cls in (BooleanOption, TextOption, DropdownOption, MomentFormatOption)] == [
        'toggle', 'text', 'dropdown', 'moment-format']


def test_dropdown_to_dict():
    option = DropdownOption(
        'style', 'Style', 'Pick one', UnorderedListStyle.DASH,
        records=(DropdownRecord(UnorderedListStyle.DASH, 'dash'), DropdownRecord(UnorderedListStyle.PLUS, 'plus')),
    )
    assert option.to_dict() == {
        'key': 'style',
        'name': 'Style',
        'description': 'Pick one',
        'default': '-',
        'widget': 'dropdown',
        'records': [{'value': '-', 'description': 'dash'}, {'value': '+', 'description': 'plus'}],
    }


def test_option_base_class_is_abstract():
    with pytest.raises(TypeError):
        Option('k', 'K', '', None)
