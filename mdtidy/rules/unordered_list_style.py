from __future__ import annotations

from dataclasses import dataclass
from textwrap import dedent

from ..ignore_types import IgnoreKind
from ..lists import UnorderedListStyle, normalize_list_indicators
from ..options import DropdownOption, DropdownRecord
from ..rewriter import ignore_list_of_types
from .base import Example, Rule, RuleType

IGNORED = (IgnoreKind.CODE, IgnoreKind.YAML, IgnoreKind.TAG)


@dataclass(frozen=True)
class UnorderedListStyleOptions:
    list_style: UnorderedListStyle = UnorderedListStyle.CONSISTENT


def apply(text: str, options: UnorderedListStyleOptions) -> str:
    return ignore_list_of_types(IGNORED, text, lambda t: normalize_list_indicators(t, options.list_style))


RULE = Rule(
    name='Unordered List Style',
    alias='unordered-list-style',
    description='Makes sure that unordered lists follow the style specified.',
    type=RuleType.CONTENT,
    apply_fn=apply,
    options_class=UnorderedListStyleOptions,
    options=(
        DropdownOption(
            key='list_style',
            name='List item style',
            description='The list item style to use in unordered lists',
            default=UnorderedListStyle.CONSISTENT,
            records=(
                DropdownRecord(
                    UnorderedListStyle.CONSISTENT,
                    'Makes sure unordered list items use a consistent list item indicator in the file '
                    'which will be based on the first list item found',
                ),
                DropdownRecord(UnorderedListStyle.DASH, 'Makes sure unordered list items use `-` as their indicator'),
                DropdownRecord(UnorderedListStyle.ASTERISK, 'Makes sure unordered list items use `*` as their indicator'),
                DropdownRecord(UnorderedListStyle.PLUS, 'Makes sure unordered list items use `+` as their indicator'),
            ),
        ),
    ),
    examples=(
        Example(
            description="Unordered lists have their indicator updated to `*` when `List item style = 'consistent'` "
                        "and `*` is the first unordered list indicator",
            before=dedent("""\
                1. ordered item 1
                2. ordered item 2

                Checklists should be ignored
                - [ ] Checklist item 1
                - [x] completed item

                * Item 1
                  - Sublist 1 item 1
                  - Sublist 1 item 2
                - Item 2
                  + Sublist 2 item 1
                  + Sublist 2 item 2
                + Item 3
                  * Sublist 3 item 1
                  * Sublist 3 item 2
            """),
            after=dedent("""\
                1. ordered item 1
                2. ordered item 2

                Checklists should be ignored
                - [ ] Checklist item 1
                - [x] completed item

                * Item 1
                  * Sublist 1 item 1
                  * Sublist 1 item 2
                * Item 2
                  * Sublist 2 item 1
                  * Sublist 2 item 2
                * Item 3
                  * Sublist 3 item 1
                  * Sublist 3 item 2
            """),
        ),
        Example(
            description="Unordered lists have their indicator updated to `-` when `List item style = '-'`",
            before=dedent("""\
                - Item 1
                  * Sublist 1 item 1
                  * Sublist 1 item 2
                * Item 2
                  + Sublist 2 item 1
                  + Sublist 2 item 2
                + Item 3
                  - Sublist 3 item 1
                  - Sublist 3 item 2

                See that the ordered list is ignored, but its sublist is not

                1. Item 1
                  - Sub item 1
                1. Item 2
                  * Sub item 2
                1. Item 3
                  + Sub item 3
            """),
            after=dedent("""\
                - Item 1
                  - Sublist 1 item 1
                  - Sublist 1 item 2
                - Item 2
                  - Sublist 2 item 1
                  - Sublist 2 item 2
                - Item 3
                  - Sublist 3 item 1
                  - Sublist 3 item 2

                See that the ordered list is ignored, but its sublist is not

                1. Item 1
                  - Sub item 1
                1. Item 2
                  - Sub item 2
                1. Item 3
                  - Sub item 3
            """),
            options={'list_style': '-'},
        ),
        Example(
            description="Unordered lists have their indicator updated to `*` when `List item style = '*'`",
            before=dedent("""\
                - Item 1
                  * Sublist 1 item 1
                  * Sublist 1 item 2
                * Item 2
                  + Sublist 2 item 1
                  + Sublist 2 item 2
                + Item 3
                  - Sublist 3 item 1
                  - Sublist 3 item 2
            """),
            after=dedent("""\
                * Item 1
                  * Sublist 1 item 1
                  * Sublist 1 item 2
                * Item 2
                  * Sublist 2 item 1
                  * Sublist 2 item 2
                * Item 3
                  * Sublist 3 item 1
                  * Sublist 3 item 2
            """),
            options={'list_style': '*'},
        ),
        Example(
            description="Unordered list in blockquote has list item indicators set to `+` when `List item style = '+'`",
            before=dedent("""\
                > - Item 1
                > + Item 2
                > > * Subitem 1
                > > + Subitem 2
                > >   - Sub sub item 1
                > > - Subitem 3
            """),
            after=dedent("""\
                > + Item 1
                > + Item 2
                > > + Subitem 1
                > > + Subitem 2
                > >   + Sub sub item 1
                > > + Subitem 3
            """),
            options={'list_style': '+'},
        ),
        Example(
            description='Code blocks, frontmatter and tags are left alone',
            before=dedent("""\
                ---
                tags:
                - note
                ---
                * Item 1
                  ```text
                  - not a list item
                  ```
                - Item 2
            """),
            after=dedent("""\
                ---
                tags:
                - note
                ---
                * Item 1
                  ```text
                  - not a list item
                  ```
                * Item 2
            """),
        ),
    ),
)
