"""
Process-wide inflection API.

Module-level functions delegating to a lazily created default
:class:`~plurality.core.inflector.Inflector`. Code that needs isolated rules
should construct its own ``Inflector`` instead.

Examples:
    >>> pluralize("test")
    'tests'
    >>> pluralize("test", 1, inclusive=True)
    '1 test'
    >>> singularize("Alumni")
    'Alumnus'
"""

from __future__ import annotations

import logging
import re
import threading

from .environment import RULES_ENV_VAR, get_rules_path
from .errors import PluralityError
from .inflector import Inflector
from .rules import Pattern, RuleInput

logger = logging.getLogger(__name__)

_default_inflector: Inflector | None = None
_default_lock = threading.Lock()


def get_default_inflector() -> Inflector:
    """
    Return the process-wide inflector, creating it on first use.

    When PLURALITY_RULES names a rules file it is applied once, at creation.
    A file that cannot be loaded is logged and ignored; the default rules
    are used instead.
    """
    global _default_inflector

    with _default_lock:
        if _default_inflector is None:
            inflector = Inflector()
            rules_path = get_rules_path()
            if rules_path is not None:
                from .rules_loader import apply_rules, load_rules_file

                try:
                    apply_rules(inflector, load_rules_file(rules_path))
                except PluralityError as e:
                    logger.error("Ignoring %s=%s: %s", RULES_ENV_VAR, rules_path, e.message)
                    inflector.reset_rules()
            _default_inflector = inflector
        return _default_inflector


def set_default_inflector(inflector: Inflector | None) -> None:
    """Replace the process-wide inflector; ``None`` recreates it on next use."""
    global _default_inflector

    with _default_lock:
        _default_inflector = inflector


def plural(word: str) -> str:
    """Pluralize a word."""
    return get_default_inflector().plural(word)


def singular(word: str) -> str:
    """Singularize a word."""
    return get_default_inflector().singular(word)


def is_plural(word: str) -> bool:
    """
    Check if a word is plural.

    Examples:
        >>> is_plural("ducks")
        True
        >>> is_plural("foot")
        False
    """
    return get_default_inflector().is_plural(word)


def is_singular(word: str) -> bool:
    """
    Check if a word is singular.

    Examples:
        >>> is_singular("duck")
        True
        >>> is_singular("feet")
        False
    """
    return get_default_inflector().is_singular(word)


def pluralize(word: str, count: int = 2, inclusive: bool = False) -> str:
    """
    Pluralize or singularize a word based on ``count``.

    Args:
        word: Word to inflect
        count: How many of the word exist. A count of 1 or -1 singularizes.
        inclusive: Whether to prefix with the count (e.g. "3 ducks")

    Returns:
        The inflected word

    Examples:
        >>> pluralize("duck")
        'ducks'
        >>> pluralize("duck", 3, inclusive=True)
        '3 ducks'
        >>> pluralize("ducks", 1)
        'duck'
    """
    return get_default_inflector().pluralize(word, count, inclusive)


def singularize(word: str, inclusive: bool = False) -> str:
    """
    Always singularize a word.

    Examples:
        >>> singularize("ducks")
        'duck'
        >>> singularize("duck", inclusive=True)
        '1 duck'
    """
    return get_default_inflector().singularize(word, inclusive)


def add_plural_rule(rule: RuleInput, replacement: str) -> None:
    get_default_inflector().add_plural_rule(rule, replacement)


def add_singular_rule(rule: RuleInput, replacement: str) -> None:
    get_default_inflector().add_singular_rule(rule, replacement)


def add_uncountable_rule(rule: str | re.Pattern[str] | Pattern) -> None:
    get_default_inflector().add_uncountable_rule(rule)


def add_irregular_rule(single: str, plural: str) -> None:
    get_default_inflector().add_irregular_rule(single, plural)


def reset_rules() -> None:
    """Restore the process-wide inflector to its default rules."""
    get_default_inflector().reset_rules()
