"""Composable Markdown style rules that leave code, frontmatter and tags alone."""
from .engine import LintSettings, SettingsError, lint_text, load_settings
from .ignore_types import IgnoreKind, ProtectedSpan, classify
from .lists import UnorderedListStyle, normalize_list_indicators
from .options import OptionError
from .rewriter import apply_ignoring_spans, apply_masked, ignore_list_of_types
from .rules import RULES, Example, Rule, RuleType, get_rule

__version__ = '0.1.0'

__all__ = [
    'RULES',
    'Example',
    'IgnoreKind',
    'LintSettings',
    'OptionError',
    'ProtectedSpan',
    'Rule',
    'RuleType',
    'SettingsError',
    'UnorderedListStyle',
    'apply_ignoring_spans',
    'apply_masked',
    'classify',
    'get_rule',
    'ignore_list_of_types',
    'lint_text',
    'load_settings',
    'normalize_list_indicators',
]
