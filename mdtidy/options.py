"""Rule option schema.

An option is one of a closed set of variants: toggle, text, text area,
dropdown or moment date format. ``widget`` names the control a settings UI
would draw for it; nothing in this package draws anything.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Optional, Sequence, Tuple


class OptionError(ValueError):
    pass


@dataclass(frozen=True)
class Option(ABC):
    key: str
    name: str
    description: str
    default: Any
    widget: ClassVar[str] = ''

    @abstractmethod
    def validate(self, value):
        """Return ``value`` in its resolved form or raise ``OptionError``."""

    def to_dict(self) -> dict:
        default = self.default
        return {
            'key': self.key,
            'name': self.name,
            'description': self.description,
            'default': getattr(default, 'value', default),
            'widget': self.widget,
        }


@dataclass(frozen=True)
class BooleanOption(Option):
    widget: ClassVar[str] = 'toggle'

    def validate(self, value):
        if not isinstance(value, bool):
            raise OptionError(f'{self.key}: expected true or false, got {value!r}')
        return value


@dataclass(frozen=True)
class TextOption(Option):
    widget: ClassVar[str] = 'text'

    def validate(self, value):
        if not isinstance(value, str):
            raise OptionError(f'{self.key}: expected text, got {value!r}')
        return value


@dataclass(frozen=True)
class TextAreaOption(TextOption):
    widget: ClassVar[str] = 'text-area'


@dataclass(frozen=True)
class DropdownRecord:
    value: Any
    description: str


@dataclass(frozen=True)
class DropdownOption(Option):
    records: Tuple[DropdownRecord, ...] = ()
    widget: ClassVar[str] = 'dropdown'

    def validate(self, value):
        for record in self.records:
            # accept the enum member or its plain value as written in JSON
            if value == record.value or value == getattr(record.value, 'value', record.value):
                return record.value
        allowed = ', '.join(repr(getattr(r.value, 'value', r.value)) for r in self.records)
        raise OptionError(f'{self.key}: {value!r} is not one of {allowed}')

    def to_dict(self) -> dict:
        d = super().to_dict()
        d['records'] = [
            {'value': getattr(r.value, 'value', r.value), 'description': r.description}
            for r in self.records
        ]
        return d


MOMENT_TOKEN_RE = re.compile(
    r"\[[^\]]*\]|YYYYYY|YYYY|YY|Q|Mo|M{1,4}|Do|DDDo|D{1,4}|do|d{1,4}|E|e|wo|w{1,2}|Wo|W{1,2}"
    r"|gggg|gg|GGGG|GG|A|a|H{1,2}|h{1,2}|k{1,2}|m{1,2}|s{1,2}|S{1,9}|X|x|Z{1,2}"
)


@dataclass(frozen=True)
class MomentFormatOption(Option):
    """A moment.js display format such as ``dddd, MMMM Do YYYY, h:mm:ss a``."""

    widget: ClassVar[str] = 'moment-format'

    def validate(self, value):
        if not isinstance(value, str) or not value.strip():
            raise OptionError(f'{self.key}: expected a date format, got {value!r}')
        leftover = MOMENT_TOKEN_RE.sub('', value)
        if re.search(r"[A-Za-z]", leftover):
            raise OptionError(f'{self.key}: {value!r} has letters that are not format tokens; wrap literals in []')
        return value


@dataclass(frozen=True)
class NoOptions:
    pass


def resolve_options(options_class, schema: Sequence[Option], values: Optional[Mapping[str, Any]] = None):
    """Build ``options_class`` from defaults overlaid with ``values``."""
    values = dict(values or {})
    unknown = sorted(set(values) - {o.key for o in schema})
    if unknown:
        raise OptionError(f"unknown option(s): {', '.join(unknown)}")
    resolved = {o.key: o.validate(values.get(o.key, o.default)) for o in schema}
    return options_class(**resolved)
