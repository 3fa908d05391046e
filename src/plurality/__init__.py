"""
plurality - rule-based English noun inflection.

Convert nouns between singular and plural form using an ordered,
overridable set of pattern rules plus irregular and uncountable words.
"""

from __future__ import annotations

from ._version import __version__
from .core.errors import InvalidRuleArgument, PluralityError, RulesFileError
from .core.inflector import Inflector
from .core.rules import Literal, Pattern
from .core.strings import (
    add_irregular_rule,
    add_plural_rule,
    add_singular_rule,
    add_uncountable_rule,
    get_default_inflector,
    is_plural,
    is_singular,
    plural,
    pluralize,
    reset_rules,
    set_default_inflector,
    singular,
    singularize,
)

__all__ = [
    "__version__",
    "Inflector",
    "Literal",
    "Pattern",
    "PluralityError",
    "InvalidRuleArgument",
    "RulesFileError",
    "plural",
    "singular",
    "is_plural",
    "is_singular",
    "pluralize",
    "singularize",
    "add_plural_rule",
    "add_singular_rule",
    "add_uncountable_rule",
    "add_irregular_rule",
    "reset_rules",
    "get_default_inflector",
    "set_default_inflector",
]
