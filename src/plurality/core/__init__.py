"""Core plurality functionality: inflection engine, default rules, rules files."""

from .errors import InvalidRuleArgument, PluralityError, RulesFileError
from .inflector import Inflector
from .rules import Literal, Pattern, Rule, RulePattern
from .rules_loader import RulesFile, apply_rules, load_rules_file, parse_rules

__all__ = [
    "Inflector",
    "Rule",
    "RulePattern",
    "Literal",
    "Pattern",
    "PluralityError",
    "InvalidRuleArgument",
    "RulesFileError",
    "RulesFile",
    "load_rules_file",
    "parse_rules",
    "apply_rules",
]
