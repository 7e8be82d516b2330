import json

import pytest

from mdtidy.rules import RULES, RuleType, build_registry, get_rule

EXAMPLES = [(rule, example) for rule in RULES.values() for example in rule.examples]
EXAMPLE_IDS = [f'{rule.alias}-{i}' for rule in RULES.values() for i, _ in enumerate(rule.examples)]


@pytest.mark.parametrize('rule,example', EXAMPLES, ids=EXAMPLE_IDS)
def test_example(rule, example):
    options = rule.resolve_options(example.options)
    assert rule.apply(example.before, options) == example.after


@pytest.mark.parametrize('rule,example', EXAMPLES, ids=EXAMPLE_IDS)
def test_example_output_is_a_fixed_point(rule, example):
    options = rule.resolve_options(example.options)
    assert rule.apply(example.after, options) == example.after


@pytest.mark.parametrize('rule', list(RULES.values()), ids=list(RULES))
def test_empty_text(rule):
    assert rule.apply('') == ''


@pytest.mark.parametrize('rule', list(RULES.values()), ids=list(RULES))
def test_code_block_content_is_protected(rule):
    body = "*   a   \n-  b\n\n\n\n### y\nhttps://x.com\n"
    text = "Intro\n\n```\n" + body + "```\n"
    assert body in rule.apply(text)


def test_every_rule_has_examples():
    for rule in RULES.values():
        assert rule.examples, rule.alias


def test_registry_order_and_lookup():
    assert list(build_registry()) == list(RULES)
    assert get_rule('Unordered List Style') is RULES['unordered-list-style']
    with pytest.raises(KeyError):
        get_rule('no-such-rule')


def test_rule_metadata_is_json_serializable():
    data = json.loads(json.dumps([rule.to_dict() for rule in RULES.values()]))
    ul = next(d for d in data if d['alias'] == 'unordered-list-style')
    assert ul['type'] == RuleType.CONTENT.value
    assert ul['options'][0]['default'] == 'consistent'
    assert ul['examples'][1]['options'] == {'list_style': '-'}


def test_unordered_list_style_ignores_tags():
    rule = get_rule('unordered-list-style')
    text = "* a\n- #tag item\n"
    assert rule.apply(text) == "* a\n* #tag item\n"


def test_unordered_list_continues_across_code_block():
    rule = get_rule('unordered-list-style')
    text = "+ a\n  ```\n  * code\n  ```\n  - b\n- c\n"
    assert rule.apply(text) == "+ a\n  ```\n  * code\n  ```\n  + b\n+ c\n"


def test_trailing_spaces_keeps_line_endings():
    rule = get_rule('trailing-spaces')
    assert rule.apply("a  \r\nb\t\r\nc ") == "a\r\nb\r\nc"


def test_header_increment_ignores_comments():
    rule = get_rule('header-increment')
    text = "# a\n<!--\n### b\n-->\n### c\n"
    assert rule.apply(text) == "# a\n<!--\n### b\n-->\n## c\n"


def test_default_language_tilde_and_trailing_space():
    rule = get_rule('default-language-for-code-fences')
    options = rule.resolve_options({'default_language': 'python'})
    assert rule.apply("~~~\nx\n~~~\n```   \ny\n```\n", options) == "~~~python\nx\n~~~\n```python\ny\n```\n"


def test_default_language_skips_frontmatter():
    rule = get_rule('default-language-for-code-fences')
    options = rule.resolve_options({'default_language': 'text'})
    text = "---\nnote: |\n  ```\n---\n```\nx\n```\n"
    assert rule.apply(text, options) == "---\nnote: |\n  ```\n---\n```text\nx\n```\n"


def test_wrap_bare_urls_leaves_autolinks_and_wiki_links():
    rule = get_rule('wrap-bare-urls')
    text = "<https://a.example> [[https://b.example]] <c@d.example>\n"
    assert rule.apply(text) == text


def test_consecutive_blank_lines_whitespace_only_lines():
    rule = get_rule('consecutive-blank-lines')
    assert rule.apply("a\n  \n\t\n\nb\n") == "a\n  \nb\n"


def test_space_after_list_markers_ordered_paren():
    rule = get_rule('space-after-list-markers')
    assert rule.apply("1)   a\n10.  b\n") == "1) a\n10. b\n"


def test_registry_order():
    assert list(RULES) == [
        'unordered-list-style',
        'space-after-list-markers',
        'consecutive-blank-lines',
        'trailing-spaces',
        'header-increment',
        'default-language-for-code-fences',
        'wrap-bare-urls',
    ]


def test_header_increment_after_comment_opener_in_code():
    rule = get_rule('header-increment')
    text = "# a\n\n```html\n<!-- open\n```\n\n### c\n"
    assert rule.apply(text) == "# a\n\n```html\n<!-- open\n```\n\n## c\n"


def test_default_language_after_comment_opener_in_code():
    rule = get_rule('default-language-for-code-fences')
    options = rule.resolve_options({'default_language': 'text'})
    text = "```html\n<!-- open\n```\n\n```\nx\n```\n"
    assert rule.apply(text, options) == "```html\n<!-- open\n```\n\n```text\nx\n```\n"


def test_wrap_bare_urls_after_math_opener_in_code():
    rule = get_rule('wrap-bare-urls')
    text = "```\n$$\n```\n\nSee https://x.example and $$a$$\n"
    assert rule.apply(text) == "```\n$$\n```\n\nSee <https://x.example> and $$a$$\n"


def test_wrap_bare_urls_address_inside_url_is_wrapped_once():
    rule = get_rule('wrap-bare-urls')
    text = "See https://x.example/?to=bob@example.com now\n"
    assert rule.apply(text) == "See <https://x.example/?to=bob@example.com> now\n"
