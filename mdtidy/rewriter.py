"""Apply text transforms to everything except protected spans.

Two ways of doing it:

- ``apply_ignoring_spans`` calls the transform once per rewritable segment.
  Good for inline substitutions that need no surrounding context.
- ``apply_masked`` swaps every protected span for a placeholder, runs the
  transform once over the whole masked document and puts the spans back.
  Line-oriented rules use this through ``ignore_list_of_types`` so that
  a list interrupted by a code block is still seen as one list.
"""
from __future__ import annotations

from typing import Callable, List, Tuple

from .ignore_types import classify

# private use characters, repeated until neither occurs in the text
PLACEHOLDER_OPEN = '\ue000'
PLACEHOLDER_CLOSE = '\ue001'


def split_segments(text: str, spans) -> List[Tuple[bool, str]]:
    """Split ``text`` into ``(protected, segment)`` pairs in document order."""
    segments = []
    pos = 0
    for span in spans:
        assert pos <= span.start <= span.end <= len(text), f'bad span {span!r}'
        if span.start > pos:
            segments.append((False, text[pos:span.start]))
        if span.end > span.start:
            segments.append((True, text[span.start:span.end]))
        pos = span.end
    if pos < len(text):
        segments.append((False, text[pos:]))
    return segments


def apply_ignoring_spans(text: str, spans, transform: Callable[[str], str]) -> str:
    out = []
    for protected, segment in split_segments(text, spans):
        out.append(segment if protected else transform(segment))
    return ''.join(out)


def _markers_for(text: str) -> Tuple[str, str]:
    width = 1
    while PLACEHOLDER_OPEN * width in text or PLACEHOLDER_CLOSE * width in text:
        width += 1
    return PLACEHOLDER_OPEN * width, PLACEHOLDER_CLOSE * width


def apply_masked(text: str, spans, transform: Callable[[str], str]) -> str:
    segments = split_segments(text, spans)
    if all(protected for protected, _ in segments):
        return text
    opening, closing = _markers_for(text)
    masked = []
    protected_parts = []
    for protected, segment in segments:
        if protected:
            masked.append(f'{opening}{len(protected_parts)}{closing}')
            protected_parts.append(segment)
        else:
            masked.append(segment)
    result = transform(''.join(masked))
    for i, segment in enumerate(protected_parts):
        placeholder = f'{opening}{i}{closing}'
        count = result.count(placeholder)
        assert count == 1, f'placeholder {i} appears {count} times after transform'
        result = result.replace(placeholder, segment, 1)
    return result


def ignore_list_of_types(kinds, text: str, transform: Callable[[str], str]) -> str:
    """Classify ``text`` for ``kinds`` and run ``transform`` on the rest."""
    return apply_masked(text, classify(text, kinds), transform)
