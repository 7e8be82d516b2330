"""Lint rules and the registry of all of them.

Rules run in registry order when more than one is enabled.
"""
from . import (
    consecutive_blank_lines,
    default_language_for_code_fences,
    header_increment,
    space_after_list_markers,
    trailing_spaces,
    unordered_list_style,
    wrap_bare_urls,
)
from .base import Example, Rule, RuleType


def build_registry():
    registry = {}
    for rule in (
        unordered_list_style.RULE,
        space_after_list_markers.RULE,
        consecutive_blank_lines.RULE,
        trailing_spaces.RULE,
        header_increment.RULE,
        default_language_for_code_fences.RULE,
        wrap_bare_urls.RULE,
    ):
        assert rule.alias not in registry, f'duplicate rule alias {rule.alias}'
        registry[rule.alias] = rule
    return registry


RULES = build_registry()


def get_rule(name: str) -> Rule:
    """Look a rule up by alias or display name."""
    if name in RULES:
        return RULES[name]
    for rule in RULES.values():
        if rule.name.lower() == name.lower():
            return rule
    raise KeyError(name)


__all__ = ['RULES', 'Example', 'Rule', 'RuleType', 'build_registry', 'get_rule']
