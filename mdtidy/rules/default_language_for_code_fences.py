from __future__ import annotations

from dataclasses import dataclass
from textwrap import dedent

from ..ignore_types import IgnoreKind, find_fences
from ..options import TextOption
from ..rewriter import ignore_list_of_types
from .base import Example, Rule, RuleType

IGNORED = (IgnoreKind.YAML, IgnoreKind.HTML_COMMENT)


@dataclass(frozen=True)
class DefaultLanguageOptions:
    default_language: str = ''


def add_fence_language(text: str, language: str) -> str:
    language = language.strip()
    if not language:
        return text
    # right to left so earlier offsets stay valid
    for fence in reversed(find_fences(text)):
        if fence.info.strip():
            continue
        text = text[:fence.info_start] + language + text[fence.info_start + len(fence.info):]
    return text


def apply(text: str, options: DefaultLanguageOptions) -> str:
    return ignore_list_of_types(IGNORED, text, lambda t: add_fence_language(t, options.default_language))


RULE = Rule(
    name='Default Language For Code Fences',
    alias='default-language-for-code-fences',
    description='Add a default language to code fences that do not have a language specified.',
    type=RuleType.CONTENT,
    apply_fn=apply,
    options_class=DefaultLanguageOptions,
    options=(
        TextOption(
            key='default_language',
            name='Programming Language',
            description='The language to add to fences without one. Leave empty to do nothing.',
            default='',
        ),
    ),
    examples=(
        Example(
            description='Add `text` to opening fences without a language',
            before=dedent("""\
                ```
                plain output
                ```

                ```bash
                echo 'hello'
                ```
            """),
            after=dedent("""\
                ```text
                plain output
                ```

                ```bash
                echo 'hello'
                ```
            """),
            options={'default_language': 'text'},
        ),
        Example(
            description='Empty default language leaves fences alone',
            before='```\nplain\n```\n',
            after='```\nplain\n```\n',
        ),
    ),
)
