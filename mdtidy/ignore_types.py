"""Find the regions of a markdown document that rules must leave untouched.

Each ignore kind has a finder that returns spans over the original text.
``classify`` runs the requested finders and merges overlapping results into
left-to-right, non-overlapping superspans.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class IgnoreKind(str, Enum):
    CODE = 'code'
    INLINE_CODE = 'inlineCode'
    YAML = 'yaml'
    TAG = 'tag'
    LINK = 'link'
    WIKI_LINK = 'wikiLink'
    MATH = 'math'
    HTML_COMMENT = 'htmlComment'


@dataclass(frozen=True)
class ProtectedSpan:
    """Half-open ``[start, end)`` character range of protected text."""

    start: int
    end: int
    kind: IgnoreKind


@dataclass(frozen=True)
class Fence:
    """A fenced code block found by ``find_fences``.

    ``start`` is the offset of the opening marker, ``end`` the end of the
    closing line (or of the document when the fence is never closed).
    """

    start: int
    end: int
    marker: str
    info: str
    info_start: int
    closed: bool


YAML_OPEN_RE = re.compile(r"^---[ \t]*(?:\r?\n|$)")
YAML_CLOSE_RE = re.compile(r"^---[ \t]*$", re.M)
FENCE_OPEN_RE = re.compile(r"^(?P<lead>(?:[ \t]*>)*[ \t]*)(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
FENCE_CLOSE_RE = re.compile(r"^(?:[ \t]*>)*[ \t]*(?P<fence>`{3,}|~{3,})[ \t]*$")
LIST_LINE_RE = re.compile(r"^[ \t]*(?:[-*+]|\d{1,9}[.)])(?:[ \t]|$)")
BACKTICKS_RE = re.compile(r"`+")
BLANK_LINE_RE = re.compile(r"\n[ \t]*\r?\n")
# a tag needs at least one non-digit character: #123 is not a tag
TAG_RE = re.compile(r"(?<!\S)#[\w/-]*[^\W\d][\w/-]*")
LINK_RE = re.compile(r"!?\[[^\]\n]*\]\([^)\n]*\)|<[A-Za-z][A-Za-z0-9+.-]{1,31}:[^\s<>]*>")
WIKI_LINK_RE = re.compile(r"!?\[\[[^\]\n]+\]\]")
DISPLAY_MATH_RE = re.compile(r"\$\$[\s\S]*?\$\$")
INLINE_MATH_RE = re.compile(r"(?<![\\$])\$(?=[^\s$])[^$\n]*?[^\s\\$]\$(?![\d$])|(?<![\\$])\$[^\s$\\]\$(?![\d$])")
HTML_COMMENT_RE = re.compile(r"<!--[\s\S]*?(?:-->|\Z)")


def _lines_with_offsets(text: str):
    """Yield ``(offset, line)`` pairs, ``line`` without its line ending."""
    offset = 0
    for raw in text.splitlines(keepends=True):
        yield offset, raw.rstrip('\r\n')
        offset += len(raw)


def indent_width(s: str, tab_size: int = 4) -> int:
    """Column width of the leading whitespace of ``s``, tabs to the next stop."""
    width = 0
    for ch in s:
        if ch == ' ':
            width += 1
        elif ch == '\t':
            width += tab_size - (width % tab_size)
        else:
            break
    return width


def find_yaml(text: str) -> List[ProtectedSpan]:
    """Frontmatter must open on the very first line of the document."""
    m = YAML_OPEN_RE.match(text)
    if not m:
        return []
    close = YAML_CLOSE_RE.search(text, m.end())
    end = close.end() if close else len(text)
    return [ProtectedSpan(0, end, IgnoreKind.YAML)]


def find_fences(text: str) -> List[Fence]:
    fences = []
    current: Optional[dict] = None
    for offset, line in _lines_with_offsets(text):
        if current is None:
            m = FENCE_OPEN_RE.match(line)
            if not m:
                continue
            fence, info = m.group('fence'), m.group('info')
            # a backtick in the info string means this is inline code
            if fence[0] == '`' and '`' in info:
                continue
            current = {
                'start': offset + m.start('fence'),
                'marker': fence,
                'info': info,
                'info_start': offset + m.start('info'),
            }
            continue
        m = FENCE_CLOSE_RE.match(line)
        if m and m.group('fence')[0] == current['marker'][0] and len(m.group('fence')) >= len(current['marker']):
            fences.append(Fence(end=offset + len(line), closed=True, **current))
            current = None
    if current is not None:
        # unterminated fences protect through the end of the document
        fences.append(Fence(end=len(text), closed=False, **current))
    return fences


def _find_indented_code(text: str, fences: List[Fence]) -> List[ProtectedSpan]:
    spans = []
    fence_iter = iter(fences)
    fence = next(fence_iter, None)
    in_list = False
    prev_blank = True
    block_start = None
    block_end = None
    for offset, line in _lines_with_offsets(text):
        while fence is not None and fence.end < offset:
            fence = next(fence_iter, None)
        line_end = offset + len(line)
        if fence is not None and fence.start < line_end and offset <= fence.end:
            if block_start is not None:
                spans.append(ProtectedSpan(block_start, block_end, IgnoreKind.CODE))
                block_start = None
            prev_blank = False
            continue
        blank = line.strip() == ''
        if block_start is not None:
            if blank:
                continue
            if indent_width(line) >= 4:
                block_end = line_end
                continue
            spans.append(ProtectedSpan(block_start, block_end, IgnoreKind.CODE))
            block_start = None
        if blank:
            prev_blank = True
            continue
        if not in_list and prev_blank and indent_width(line) >= 4:
            block_start, block_end = offset, line_end
            prev_blank = False
            continue
        if LIST_LINE_RE.match(line):
            in_list = True
        elif prev_blank and indent_width(line) == 0:
            in_list = False
        prev_blank = False
    if block_start is not None:
        spans.append(ProtectedSpan(block_start, block_end, IgnoreKind.CODE))
    return spans


def find_code_blocks(text: str) -> List[ProtectedSpan]:
    fences = find_fences(text)
    spans = [ProtectedSpan(f.start, f.end, IgnoreKind.CODE) for f in fences]
    spans.extend(_find_indented_code(text, fences))
    spans.sort(key=lambda s: s.start)
    return spans


def find_inline_code(text: str) -> List[ProtectedSpan]:
    """Backtick spans, matched by run length, outside code blocks."""
    blocks = find_code_blocks(text)
    spans = []
    pos = 0
    for limit, resume in [(b.start, b.end) for b in blocks] + [(len(text), len(text))]:
        while True:
            opening = BACKTICKS_RE.search(text, pos, limit)
            if not opening:
                break
            run = opening.group(0)
            stop = BLANK_LINE_RE.search(text, opening.end(), limit)
            stop = stop.start() if stop else limit
            closing = None
            for candidate in BACKTICKS_RE.finditer(text, opening.end(), stop):
                if candidate.group(0) == run:
                    closing = candidate
                    break
            if closing is None:
                pos = opening.end()
                continue
            spans.append(ProtectedSpan(opening.start(), closing.end(), IgnoreKind.INLINE_CODE))
            pos = closing.end()
        pos = max(pos, resume)
    return spans


def _gaps(text: str, blocks: List[ProtectedSpan]):
    """Yield ``(start, end)`` ranges of ``text`` not covered by ``blocks``."""
    pos = 0
    for block in blocks:
        if block.start > pos:
            yield pos, block.start
        pos = max(pos, block.end)
    if pos < len(text):
        yield pos, len(text)


def _code_and_inline_code(text: str) -> List[ProtectedSpan]:
    return merge_spans(find_code_blocks(text) + find_inline_code(text))


def _regex_spans(pattern, kind: IgnoreKind, skip=find_code_blocks):
    """Finder for ``pattern``, searched only between the spans ``skip`` returns."""
    def finder(text: str) -> List[ProtectedSpan]:
        spans = []
        for start, end in _gaps(text, skip(text)):
            spans.extend(ProtectedSpan(m.start(), m.end(), kind)
                         for m in pattern.finditer(text, start, end) if m.end() > m.start())
        return spans
    return finder


_find_display_math = _regex_spans(DISPLAY_MATH_RE, IgnoreKind.MATH, _code_and_inline_code)
_find_inline_math = _regex_spans(INLINE_MATH_RE, IgnoreKind.MATH, _code_and_inline_code)


def find_math(text: str) -> List[ProtectedSpan]:
    spans = _find_display_math(text)
    for span in _find_inline_math(text):
        if not any(s.start <= span.start < s.end for s in spans):
            spans.append(span)
    spans.sort(key=lambda s: s.start)
    return spans


FINDERS = {
    IgnoreKind.CODE: find_code_blocks,
    IgnoreKind.INLINE_CODE: find_inline_code,
    IgnoreKind.YAML: find_yaml,
    IgnoreKind.TAG: _regex_spans(TAG_RE, IgnoreKind.TAG),
    IgnoreKind.LINK: _regex_spans(LINK_RE, IgnoreKind.LINK),
    IgnoreKind.WIKI_LINK: _regex_spans(WIKI_LINK_RE, IgnoreKind.WIKI_LINK),
    IgnoreKind.MATH: find_math,
    IgnoreKind.HTML_COMMENT: _regex_spans(HTML_COMMENT_RE, IgnoreKind.HTML_COMMENT, _code_and_inline_code),
}


def merge_spans(spans) -> List[ProtectedSpan]:
    """Merge overlapping spans; the earliest-starting span names the result."""
    merged: List[ProtectedSpan] = []
    for span in sorted(spans, key=lambda s: (s.start, -s.end)):
        if span.end <= span.start:
            continue
        if merged and span.start < merged[-1].end:
            last = merged[-1]
            if span.end > last.end:
                merged[-1] = ProtectedSpan(last.start, span.end, last.kind)
            continue
        merged.append(span)
    return merged


def classify(text: str, kinds) -> List[ProtectedSpan]:
    """Return the merged protected spans of ``text`` for the given kinds."""
    spans = []
    for kind in kinds:
        spans.extend(FINDERS[IgnoreKind(kind)](text))
    return merge_spans(spans)
