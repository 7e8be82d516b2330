from __future__ import annotations

import re
from dataclasses import dataclass

from ..ignore_types import IgnoreKind
from ..options import BooleanOption
from ..rewriter import ignore_list_of_types
from .base import Example, Rule, RuleType

IGNORED = (IgnoreKind.CODE, IgnoreKind.YAML)

TRAILING_RE = re.compile(r"[ \t]+(?=\r?\n|\Z)")


@dataclass(frozen=True)
class TrailingSpacesOptions:
    two_space_linebreak: bool = False


def apply(text: str, options: TrailingSpacesOptions) -> str:
    def strip(m):
        if options.two_space_linebreak and m.group(0) == '  ':
            return m.group(0)
        return ''
    return ignore_list_of_types(IGNORED, text, lambda t: TRAILING_RE.sub(strip, t))


RULE = Rule(
    name='Trailing spaces',
    alias='trailing-spaces',
    description='Removes extra spaces after every line.',
    type=RuleType.SPACING,
    apply_fn=apply,
    options_class=TrailingSpacesOptions,
    options=(
        BooleanOption(
            key='two_space_linebreak',
            name='Two Space Linebreak',
            description='Ignore two spaces followed by a line break ("Two Space Rule").',
            default=False,
        ),
    ),
    examples=(
        Example(
            description='Removes trailing spaces and tabs',
            before='# H1   \nLine with trailing spaces and tabs.        \t\n',
            after='# H1\nLine with trailing spaces and tabs.\n',
        ),
        Example(
            description='With `Two Space Linebreak = true` exactly two trailing spaces are kept',
            before='# H1\nLine with trailing spaces and tabs.  \nLine with three spaces.   \n',
            after='# H1\nLine with trailing spaces and tabs.  \nLine with three spaces.\n',
            options={'two_space_linebreak': True},
        ),
    ),
)
