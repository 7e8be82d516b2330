from __future__ import annotations

from textwrap import dedent

from ..ignore_types import IgnoreKind
from ..rewriter import ignore_list_of_types
from .base import Example, Rule, RuleType

IGNORED = (IgnoreKind.CODE, IgnoreKind.YAML)


def collapse_blank_lines(text: str) -> str:
    out = []
    prev_blank = False
    for line in text.splitlines(keepends=True):
        if line.strip() == '':
            if prev_blank:
                continue
            prev_blank = True
        else:
            prev_blank = False
        out.append(line)
    return ''.join(out)


def apply(text: str, options) -> str:
    return ignore_list_of_types(IGNORED, text, collapse_blank_lines)


RULE = Rule(
    name='Consecutive blank lines',
    alias='consecutive-blank-lines',
    description='There should be at most one consecutive blank line.',
    type=RuleType.SPACING,
    apply_fn=apply,
    examples=(
        Example(
            description='Consecutive blank lines are removed, blank lines inside code blocks are kept',
            before=dedent("""\
                Some text


                Some more text



                ```
                code


                ```
            """),
            after=dedent("""\
                Some text

                Some more text

                ```
                code


                ```
            """),
        ),
    ),
)
