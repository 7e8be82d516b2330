from __future__ import annotations

import re

from ..ignore_types import IgnoreKind, classify
from ..rewriter import apply_ignoring_spans
from .base import Example, Rule, RuleType

IGNORED = (
    IgnoreKind.CODE,
    IgnoreKind.INLINE_CODE,
    IgnoreKind.YAML,
    IgnoreKind.LINK,
    IgnoreKind.WIKI_LINK,
    IgnoreKind.MATH,
    IgnoreKind.HTML_COMMENT,
)

URL_RE = re.compile(r"(?<![(<\[])https?://[^\s)\]>]*[^\s)\]>.,;:!?'\"]")
EMAIL_RE = re.compile(r"(?<![<\w/])[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
# one pass, so an address inside a URL is not wrapped again
BARE_LINK_RE = re.compile(URL_RE.pattern + '|' + EMAIL_RE.pattern)


def wrap_urls(segment: str) -> str:
    return BARE_LINK_RE.sub(lambda m: '<' + m.group(0) + '>', segment)


def apply(text: str, options) -> str:
    return apply_ignoring_spans(text, classify(text, IGNORED), wrap_urls)


RULE = Rule(
    name='Wrap bare URLs',
    alias='wrap-bare-urls',
    description='Bare URLs and e-mail addresses are wrapped in angle brackets so they render as links.',
    type=RuleType.CONTENT,
    apply_fn=apply,
    examples=(
        Example(
            description='Bare URLs and e-mail addresses are wrapped, links and code are not',
            before=(
                'Visit https://example.com/docs, or mail admin@example.com.\n'
                '\n'
                '`https://inline.example.com` and [docs](https://example.com) stay.\n'
            ),
            after=(
                'Visit <https://example.com/docs>, or mail <admin@example.com>.\n'
                '\n'
                '`https://inline.example.com` and [docs](https://example.com) stay.\n'
            ),
        ),
    ),
)
