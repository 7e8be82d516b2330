"""Run the enabled rules over a document.

Settings are a JSON document of the form::

    {"rules": {"unordered-list-style": {"enabled": true, "list_style": "-"}}}

Rules not mentioned, or mentioned without ``"enabled": true``, do not run.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .options import OptionError
from .rules import RULES, Rule


class SettingsError(ValueError):
    pass


@dataclass
class LintSettings:
    rule_configs: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def enable(self, alias: str):
        if alias not in RULES:
            raise SettingsError(f'unknown rule: {alias}')
        self.rule_configs.setdefault(alias, {})['enabled'] = True

    def enabled_rules(self) -> List[Tuple[Rule, Any]]:
        """Enabled rules in registry order, each with its resolved options."""
        out = []
        for alias, rule in RULES.items():
            config = dict(self.rule_configs.get(alias, {}))
            if not config.pop('enabled', False):
                continue
            try:
                out.append((rule, rule.resolve_options(config)))
            except OptionError as e:
                raise SettingsError(f'{alias}: {e}') from e
        return out


def settings_from_dict(data) -> LintSettings:
    if not isinstance(data, dict) or not isinstance(data.get('rules', {}), dict):
        raise SettingsError('settings must be an object with a "rules" object')
    configs = {}
    for alias, config in data.get('rules', {}).items():
        if alias not in RULES:
            raise SettingsError(f'unknown rule: {alias}')
        if not isinstance(config, dict):
            raise SettingsError(f'{alias}: rule settings must be an object')
        if not isinstance(config.get('enabled', False), bool):
            raise SettingsError(f'{alias}: "enabled" must be true or false')
        configs[alias] = dict(config)
    return LintSettings(configs)


def load_settings(path) -> LintSettings:
    try:
        data = json.loads(Path(path).read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise SettingsError(f'{path}: invalid JSON: {e}') from e
    return settings_from_dict(data)


def lint_text(text: str, settings: LintSettings) -> str:
    for rule, options in settings.enabled_rules():
        text = rule.apply(text, options)
    return text
