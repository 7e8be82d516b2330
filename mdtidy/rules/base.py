from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ..options import NoOptions, Option, resolve_options


class RuleType(str, Enum):
    YAML = 'YAML'
    HEADING = 'Heading'
    FOOTNOTE = 'Footnote'
    CONTENT = 'Content'
    SPACING = 'Spacing'
    FORMATTING = 'Formatting'


@dataclass(frozen=True)
class Example:
    """A before/after pair; documentation and regression test in one."""

    description: str
    before: str
    after: str
    options: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'description': self.description,
            'before': self.before,
            'after': self.after,
            'options': {k: getattr(v, 'value', v) for k, v in self.options.items()},
        }


@dataclass(frozen=True)
class Rule:
    """Metadata and the pure ``apply`` function of one lint rule.

    ``apply_fn(text, options)`` receives an instance of ``options_class``
    built by ``resolve_options``; it does not validate it again.
    """

    name: str
    alias: str
    description: str
    type: RuleType
    apply_fn: Callable[[str, Any], str]
    options_class: type = NoOptions
    options: Tuple[Option, ...] = ()
    examples: Tuple[Example, ...] = ()

    def resolve_options(self, values: Optional[Mapping[str, Any]] = None):
        return resolve_options(self.options_class, self.options, values)

    def apply(self, text: str, options=None) -> str:
        if options is None:
            options = self.resolve_options()
        return self.apply_fn(text, options)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'alias': self.alias,
            'description': self.description,
            'type': self.type.value,
            'options': [o.to_dict() for o in self.options],
            'examples': [e.to_dict() for e in self.examples],
        }
