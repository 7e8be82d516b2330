from __future__ import annotations

import re
from textwrap import dedent

from ..ignore_types import IgnoreKind
from ..rewriter import ignore_list_of_types
from .base import Example, Rule, RuleType

IGNORED = (IgnoreKind.CODE, IgnoreKind.YAML, IgnoreKind.HTML_COMMENT)

HEADING_RE = re.compile(r"^(?P<indent> {0,3})(?P<hashes>#{1,6})(?P<rest>[ \t].*|)$", re.M)


def fix_heading_increments(text: str) -> str:
    """Lower any heading that jumps more than one level below the previous one."""
    prev_level = 0

    def fix(m):
        nonlocal prev_level
        level = len(m.group('hashes'))
        if prev_level and level > prev_level + 1:
            level = prev_level + 1
        prev_level = level
        return f"{m.group('indent')}{'#' * level}{m.group('rest')}"

    return HEADING_RE.sub(fix, text)


def apply(text: str, options) -> str:
    return ignore_list_of_types(IGNORED, text, fix_heading_increments)


RULE = Rule(
    name='Header Increment',
    alias='header-increment',
    description='Heading levels should only increment by one level at a time.',
    type=RuleType.HEADING,
    apply_fn=apply,
    examples=(
        Example(
            description='Skipped heading levels are pulled up to one below the previous heading',
            before=dedent("""\
                # H1
                ### H3
                ##### H5
                ## H2
                #### H4
            """),
            after=dedent("""\
                # H1
                ## H3
                ### H5
                ## H2
                ### H4
            """),
        ),
        Example(
            description='Headings in code blocks are ignored',
            before=dedent("""\
                # H1

                ```bash
                ### not a heading
                ```

                ### H3
            """),
            after=dedent("""\
                # H1

                ```bash
                ### not a heading
                ```

                ## H3
            """),
        ),
    ),
)
