from __future__ import annotations

import re
from textwrap import dedent

from ..ignore_types import IgnoreKind
from ..lists import THEMATIC_BREAK_RE
from ..rewriter import ignore_list_of_types
from .base import Example, Rule, RuleType

IGNORED = (IgnoreKind.CODE, IgnoreKind.YAML)

MARKER_RE = re.compile(r"^(?P<lead>(?:[ \t]*>[ ]?)*[ \t]*(?:[-*+]|\d{1,9}[.)]))(?P<space>[ \t]+)(?=\S)", re.M)
CHECKBOX_RE = re.compile(r"^(?P<lead>(?:[ \t]*>[ ]?)*[ \t]*[-*+] \[.\])(?P<space>[ \t]+)(?=\S)", re.M)


def _single_space(m):
    # thematic breaks like '*   *   *' keep their spacing
    line_end = m.string.find('\n', m.start())
    line = m.string[m.start():line_end if line_end != -1 else len(m.string)]
    if THEMATIC_BREAK_RE.match(line.lstrip(' \t>')):
        return m.group(0)
    return m.group('lead') + ' '


def apply(text: str, options) -> str:
    def fix(t):
        t = MARKER_RE.sub(_single_space, t)
        return CHECKBOX_RE.sub(_single_space, t)
    return ignore_list_of_types(IGNORED, text, fix)


RULE = Rule(
    name='Space after list markers',
    alias='space-after-list-markers',
    description='There should be a single space after list markers and checkboxes.',
    type=RuleType.SPACING,
    apply_fn=apply,
    examples=(
        Example(
            description='A single space is left between the list marker and the text of the list item',
            before=dedent("""\
                1.      Item 1
                2.  Item 2

                -   [ ] Item 1
                -\t[x]    Item 2
                *  Item 3
            """),
            after=dedent("""\
                1. Item 1
                2. Item 2

                - [ ] Item 1
                - [x] Item 2
                * Item 3
            """),
        ),
        Example(
            description='Blockquoted lists are fixed and thematic breaks are left as they are',
            before=dedent("""\
                >   +   Quoted item
                *   *   *
            """),
            after=dedent("""\
                >   + Quoted item
                *   *   *
            """),
        ),
    ),
)
