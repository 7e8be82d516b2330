import pytest

from mdtidy.lists import ListIndicatorNormalizer, ListScope, UnorderedListStyle, normalize_list_indicators

MIXED = "* Item 1\n  - Sub 1\n* Item 2\n  + Sub 2\n"
ORDERED = "1. Item 1\n  - Sub item 1\n1. Item 2\n  * Sub item 2\n"


def test_consistent_first_indicator_wins():
    assert normalize_list_indicators(MIXED, 'consistent') == "* Item 1\n  * Sub 1\n* Item 2\n  * Sub 2\n"


def test_fixed_character():
    assert normalize_list_indicators(MIXED, UnorderedListStyle.DASH) == "- Item 1\n  - Sub 1\n- Item 2\n  - Sub 2\n"


def test_ordered_items_are_untouched_and_do_not_seed():
    assert normalize_list_indicators(ORDERED, 'consistent') == "1. Item 1\n  - Sub item 1\n1. Item 2\n  - Sub item 2\n"


def test_ordered_parenthesis_markers_untouched():
    assert normalize_list_indicators("1) a\n2) b\n", '*') == "1) a\n2) b\n"


def test_checklist_indicator_is_rewritten_brackets_kept():
    text = "* [ ] task\n+ [x] done\n"
    assert normalize_list_indicators(text, '-') == "- [ ] task\n- [x] done\n"


def test_checklist_follows_resolved_indicator():
    assert normalize_list_indicators("* a\n- [ ] b\n", 'consistent') == "* a\n* [ ] b\n"


def test_checklist_does_not_seed_consistent_style():
    text = "- [ ] t\n* a\n- b\n"
    assert normalize_list_indicators(text, 'consistent') == "- [ ] t\n* a\n* b\n"


def test_blockquote_contexts_resolve_independently():
    text = "- a\n\n> * b\n> - c\n> > + d\n> > - e\n"
    assert normalize_list_indicators(text, 'consistent') == "- a\n\n> * b\n> * c\n> > + d\n> > + e\n"


def test_blockquote_fixed_character():
    text = "> - Item 1\n> + Item 2\n> > * Subitem 1\n> >   - Sub sub item 1\n"
    expected = "> + Item 1\n> + Item 2\n> > + Subitem 1\n> >   + Sub sub item 1\n"
    assert normalize_list_indicators(text, '+') == expected


def test_thematic_break_is_not_a_list_item():
    assert normalize_list_indicators("* * *\n* a\n", '-') == "* * *\n- a\n"
    assert normalize_list_indicators("- - -\n", '*') == "- - -\n"


def test_indicator_needs_following_whitespace():
    text = "*emphasis*\n-not a list\n**bold**\n"
    assert normalize_list_indicators(text, '+') == text


def test_only_the_indicator_changes():
    text = "*\ta  with   spacing  \n    - deep\n"
    assert normalize_list_indicators(text, '-') == "-\ta  with   spacing  \n    - deep\n"


def test_tabs_count_to_the_next_stop():
    normalizer = ListIndicatorNormalizer('consistent')
    assert normalizer.normalize("* a\n\t- b\n") == "* a\n\t* b\n"
    assert normalizer.resolved == {('', 0): '*', ('', 4): '*'}


def test_line_endings_preserved():
    assert normalize_list_indicators("* a\r\n- b\r\n", 'consistent') == "* a\r\n* b\r\n"


def test_empty_and_irrelevant_text():
    assert normalize_list_indicators('', 'consistent') == ''
    text = "# Title\n\nJust a paragraph.\n"
    assert normalize_list_indicators(text, '*') == text


def test_scope_state_after_run():
    normalizer = ListIndicatorNormalizer(UnorderedListStyle.CONSISTENT)
    normalizer.normalize(MIXED)
    assert normalizer.resolved == {('', 0): '*', ('', 2): '*'}
    assert normalizer.stacks[''] == [ListScope('', 0, indicator='*'), ListScope('', 2, indicator='*')]


def test_scope_state_under_ordered_parent():
    normalizer = ListIndicatorNormalizer('consistent')
    normalizer.normalize(ORDERED)
    assert normalizer.resolved == {('', 2): '-'}
    assert normalizer.stacks[''] == [ListScope('', 0, ordered=True), ListScope('', 2, indicator='-')]


def test_blockquote_scopes_keyed_by_depth():
    normalizer = ListIndicatorNormalizer('consistent')
    normalizer.normalize("> * a\n>> - b\n")
    assert normalizer.resolved == {('> ', 0): '*', ('> > ', 0): '-'}


def test_leaving_a_blockquote_closes_its_scopes():
    normalizer = ListIndicatorNormalizer('consistent')
    normalizer.normalize("> * a\n\n- b\n")
    assert list(normalizer.stacks) == ['']


@pytest.mark.parametrize('style', list(UnorderedListStyle))
def test_idempotent(style):
    text = (
        "1. one\n"
        "  - [ ] task\n"
        "  * sub\n"
        "+ Item\n"
        "    - deep\n"
        "\t+ tabbed\n"
        "> - quoted\n"
        "> > * nested quote\n"
        "\n"
        "para\n"
        "\n"
        "- after\n"
        "  + child\n"
    )
    once = normalize_list_indicators(text, style)
    assert normalize_list_indicators(once, style) == once


@pytest.mark.parametrize('text,style', [("+ - -\n", '-'), ("- a\n+ - -\n", 'consistent'), ("> + * *\n", '*')])
def test_rewrite_never_creates_a_thematic_break(text, style):
    assert normalize_list_indicators(text, style) == text
