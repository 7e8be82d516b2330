"""Normalize unordered list indicators (``-``, ``*``, ``+``).

Works line by line with an explicit stack of list scopes per blockquote
context. A scope is keyed by the blockquote prefix and the indentation of
its items, so blockquote nesting and list nesting are tracked separately.

Indentation is measured after the blockquote prefix is removed, with tabs
advancing to the next multiple of 4 columns.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .ignore_types import indent_width


class UnorderedListStyle(str, Enum):
    CONSISTENT = 'consistent'
    DASH = '-'
    ASTERISK = '*'
    PLUS = '+'


BLOCKQUOTE_RE = re.compile(r"^(?:[ \t]*>[ ]?)*")
UNORDERED_RE = re.compile(r"^(?P<indent>[ \t]*)(?P<indicator>[-*+])[ \t]+(?P<rest>.*)$")
ORDERED_RE = re.compile(r"^(?P<indent>[ \t]*)\d{1,9}[.)](?:[ \t]|$)")
CHECKLIST_RE = re.compile(r"^\[.\](?:[ \t]|$)")
THEMATIC_BREAK_RE = re.compile(r"^[ \t]*([-*_])(?:[ \t]*\1){2,}[ \t]*$")
HEADING_RE = re.compile(r"^[ \t]*#{1,6}(?:[ \t]|$)")


@dataclass
class ListScope:
    """One level of list nesting inside one blockquote context.

    ``indicator`` is the indicator resolved for the scope's key, or None for
    ordered items and for checklist items whose key is not resolved yet.
    """

    prefix: str
    indent: int
    ordered: bool = False
    indicator: Optional[str] = None

    @property
    def key(self) -> Tuple[str, int]:
        return self.prefix, self.indent


class ListIndicatorNormalizer:
    """Single-use normalizer; ``stacks`` and ``resolved`` stay inspectable."""

    def __init__(self, style=UnorderedListStyle.CONSISTENT):
        self.style = UnorderedListStyle(style)
        self.stacks: Dict[str, List[ListScope]] = {}
        self.resolved: Dict[Tuple[str, int], str] = {}
        self._prev_blank = True

    def normalize(self, text: str) -> str:
        return ''.join(self._normalize_line(line) for line in text.splitlines(keepends=True))

    def _normalize_line(self, line: str) -> str:
        body = line.rstrip('\r\n')
        prefix = BLOCKQUOTE_RE.match(body).group(0)
        key_prefix = '> ' * prefix.count('>')
        self._close_deeper(key_prefix)
        rest = body[len(prefix):]
        if not rest.strip():
            self._prev_blank = True
            return line
        after_blank, self._prev_blank = self._prev_blank, False

        stack = self.stacks.setdefault(key_prefix, [])
        if THEMATIC_BREAK_RE.match(rest) or HEADING_RE.match(rest):
            stack.clear()
            return line
        m = ORDERED_RE.match(rest)
        if m:
            self._enter(stack, key_prefix, indent_width(m.group('indent')), ordered=True)
            return line
        m = UNORDERED_RE.match(rest)
        if m is None:
            # a paragraph after a blank line ends the list; otherwise it is a lazy continuation
            if after_blank and indent_width(rest) == 0:
                stack.clear()
            return line

        indicator = m.group('indicator')
        scope, parent = self._enter(stack, key_prefix, indent_width(m.group('indent')))
        target = self._resolve(scope, parent, indicator, CHECKLIST_RE.match(m.group('rest')) is not None)
        if target is None or target == indicator:
            return line
        pos = m.start('indicator')
        # "+ - -" must not become the thematic break "- - -"
        if THEMATIC_BREAK_RE.match(rest[:pos] + target + rest[pos + 1:]):
            return line
        pos += len(prefix)
        return line[:pos] + target + line[pos + 1:]

    def _close_deeper(self, key_prefix: str):
        for prefix in [p for p in self.stacks if len(p) > len(key_prefix)]:
            del self.stacks[prefix]

    def _enter(self, stack: List[ListScope], prefix: str, indent: int, ordered: bool = False):
        assert indent >= 0, f'negative indentation {indent}'
        while stack and stack[-1].indent >= indent:
            stack.pop()
        parent = stack[-1] if stack else None
        scope = ListScope(prefix, indent, ordered=ordered)
        stack.append(scope)
        return scope, parent

    def _resolve(self, scope: ListScope, parent: Optional[ListScope], indicator: str, checklist: bool):
        if self.style is not UnorderedListStyle.CONSISTENT:
            scope.indicator = self.style.value
            return scope.indicator
        if scope.key not in self.resolved and not checklist:
            if parent is not None and not parent.ordered and parent.indicator is not None:
                self.resolved[scope.key] = parent.indicator
            else:
                self.resolved[scope.key] = indicator
        scope.indicator = self.resolved.get(scope.key)
        return scope.indicator


def normalize_list_indicators(text: str, style=UnorderedListStyle.CONSISTENT) -> str:
    return ListIndicatorNormalizer(style).normalize(text)
