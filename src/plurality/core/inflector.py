"""
Rule-based English noun inflection engine.

An :class:`Inflector` owns a mutable ruleset:

- irregular word pairs, looked up before any pattern rule
- uncountable words and patterns, returned unchanged
- ordered plural and singular rules, tried most-recently-registered first

Usage:
    from plurality.core.inflector import Inflector

    inflector = Inflector()
    inflector.plural("foot")  # "feet"
    inflector.singular("Alumni")  # "Alumnus"

    inflector.add_plural_rule(re.compile(r"gex$", re.IGNORECASE), "gexii")
    inflector.plural("regex")  # "regexii"
    inflector.reset_rules()
    inflector.plural("regex")  # "regexes"

Each instance is independent and guards its state with a single lock, so
instances can be shared between threads or created per test.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterable

from . import seed as defaults
from .case import restore_case
from .errors import InvalidRuleArgument
from .rules import Pattern, Rule, RuleInput, apply_rule, compile_pattern, make_rule

logger = logging.getLogger(__name__)


class Inflector:
    """Pluralize and singularize English nouns with an overridable ruleset."""

    def __init__(self, seed: bool = True) -> None:
        self._lock = threading.RLock()
        self._plural_rules: list[Rule] = []
        self._singular_rules: list[Rule] = []
        self._uncountable_words: set[str] = set()
        self._uncountable_patterns: list[re.Pattern[str]] = []
        self._irregular_singles: dict[str, str] = {}
        self._irregular_plurals: dict[str, str] = {}

        if seed:
            self.reset_rules()

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"Inflector(plural_rules={len(self._plural_rules)}, "
                f"singular_rules={len(self._singular_rules)}, "
                f"irregulars={len(self._irregular_singles)}, "
                f"uncountables={len(self._uncountable_words) + len(self._uncountable_patterns)})"
            )

    # -------------------------------------------------------------------------
    # Inflection
    # -------------------------------------------------------------------------

    def plural(self, word: str) -> str:
        """Return the plural form of ``word``."""
        with self._lock:
            return self._replace_word(word, self._irregular_singles, self._irregular_plurals, self._plural_rules)

    def singular(self, word: str) -> str:
        """Return the singular form of ``word``."""
        with self._lock:
            return self._replace_word(word, self._irregular_plurals, self._irregular_singles, self._singular_rules)

    def pluralize(self, word: str, count: int = 2, inclusive: bool = False) -> str:
        """
        Pluralize or singularize ``word`` based on ``count``.

        A count of 1 or -1 singularizes, anything else pluralizes. With
        ``inclusive`` the count is prefixed, e.g. "3 ducks".
        """
        inflected = self.singular(word) if abs(count) == 1 else self.plural(word)

        if inclusive:
            return f"{count} {inflected}"
        return inflected

    def singularize(self, word: str, inclusive: bool = False) -> str:
        """Always singularize ``word``, e.g. "1 duck" with ``inclusive``."""
        return self.pluralize(word, 1, inclusive)

    def is_plural(self, word: str) -> bool:
        """
        Check if ``word`` is plural.

        Approximate: outside the irregular table a word counts as plural when
        no plural rule changes it, so unknown words can be misclassified.
        """
        with self._lock:
            return self._check_word(word, self._irregular_singles, self._irregular_plurals, self._plural_rules)

    def is_singular(self, word: str) -> bool:
        """
        Check if ``word`` is singular.

        Approximate in the same way as :meth:`is_plural`.
        """
        with self._lock:
            return self._check_word(word, self._irregular_plurals, self._irregular_singles, self._singular_rules)

    def _replace_word(self, word: str, replace: dict[str, str], keep: dict[str, str], rules: list[Rule]) -> str:
        token = word.lower()

        # Already in the target form.
        if token in keep:
            return restore_case(word, token)

        if token in replace:
            return restore_case(word, replace[token])

        return self._sanitize_word(token, word, rules)

    def _check_word(self, word: str, replace: dict[str, str], keep: dict[str, str], rules: list[Rule]) -> bool:
        token = word.lower()

        if token in keep:
            return True
        if token in replace:
            return False
        return self._sanitize_word(token, token, rules) == token

    def _is_uncountable(self, token: str) -> bool:
        if token in self._uncountable_words:
            return True
        return any(pattern.search(token) for pattern in self._uncountable_patterns)

    def _sanitize_word(self, token: str, word: str, rules: list[Rule]) -> str:
        # Empty string or doesn't need fixing.
        if not token.strip() or self._is_uncountable(token):
            return word

        for rule in reversed(rules):
            if rule.test(word):
                return apply_rule(word, rule)

        return word

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add_plural_rule(self, rule: RuleInput, replacement: str) -> None:
        """
        Add a pluralization rule, taking precedence over existing rules.

        Args:
            rule: Literal word (``str`` or ``Literal``) or regex
                (``re.Pattern`` or ``Pattern``)
            replacement: Template; ``$0`` is the match, ``$1``.. are groups

        Raises:
            InvalidRuleArgument: If the pattern or replacement is unusable.
        """
        compiled = make_rule(rule, replacement)
        with self._lock:
            self._plural_rules.append(compiled)
        logger.debug("Added plural rule %r -> %r", compiled.pattern.pattern, replacement)

    def add_singular_rule(self, rule: RuleInput, replacement: str) -> None:
        """Add a singularization rule, taking precedence over existing rules."""
        compiled = make_rule(rule, replacement)
        with self._lock:
            self._singular_rules.append(compiled)
        logger.debug("Added singular rule %r -> %r", compiled.pattern.pattern, replacement)

    def add_uncountable_rule(self, rule: str | re.Pattern[str] | Pattern) -> None:
        """
        Mark a word or pattern as uncountable.

        A string is stored as an exact, case-insensitive word. A regex is
        stored as an uncountable pattern and also registered as an identity
        plural and singular rule.
        """
        if isinstance(rule, str):
            with self._lock:
                self._uncountable_words.add(rule.lower())
            logger.debug("Added uncountable word %r", rule.lower())
            return

        pattern = compile_pattern(rule)
        with self._lock:
            self._add_uncountable_pattern(pattern)
        logger.debug("Added uncountable pattern %r", pattern.pattern)

    def add_irregular_rule(self, single: str, plural: str) -> None:
        """
        Add an irregular word pair, replacing any existing entry.

        Args:
            single: The singular version of the word. e.g. "I"
            plural: The plural version of the word. e.g. "we"

        Raises:
            InvalidRuleArgument: If either word is not a string.
        """
        for value in (single, plural):
            if not isinstance(value, str):
                raise InvalidRuleArgument(f"Irregular words must be strings, got {type(value).__name__}", value)

        with self._lock:
            self._add_irregular(single, plural)
        logger.debug("Added irregular rule %r <-> %r", single.lower(), plural.lower())

    def add_plural_rules(self, rules: Iterable[tuple[RuleInput, str]]) -> None:
        """Add several pluralization rules in order."""
        for rule, replacement in rules:
            self.add_plural_rule(rule, replacement)

    def add_singular_rules(self, rules: Iterable[tuple[RuleInput, str]]) -> None:
        """Add several singularization rules in order."""
        for rule, replacement in rules:
            self.add_singular_rule(rule, replacement)

    def add_uncountable_rules(self, rules: Iterable[str | re.Pattern[str] | Pattern]) -> None:
        """Add several uncountable words or patterns in order."""
        for rule in rules:
            self.add_uncountable_rule(rule)

    def add_irregular_rules(self, pairs: Iterable[tuple[str, str]]) -> None:
        """Add several irregular ``(singular, plural)`` pairs in order."""
        for single, plural in pairs:
            self.add_irregular_rule(single, plural)

    def reset_rules(self) -> None:
        """Discard all rules, including ones added at runtime, and restore the defaults."""
        with self._lock:
            self._plural_rules.clear()
            self._singular_rules.clear()
            self._uncountable_words.clear()
            self._uncountable_patterns.clear()
            self._irregular_singles.clear()
            self._irregular_plurals.clear()

            for single, plural in defaults.IRREGULAR_RULES:
                self._add_irregular(single, plural)
            self._plural_rules.extend(Rule(pattern, replacement) for pattern, replacement in defaults.PLURAL_RULES)
            self._singular_rules.extend(Rule(pattern, replacement) for pattern, replacement in defaults.SINGULAR_RULES)
            self._uncountable_words.update(defaults.UNCOUNTABLE_WORDS)
            for pattern in defaults.UNCOUNTABLE_PATTERNS:
                self._add_uncountable_pattern(pattern)

        logger.debug("Reset inflection rules to defaults: %r", self)

    def _add_irregular(self, single: str, plural: str) -> None:
        single_lc = single.lower()
        plural_lc = plural.lower()
        self._irregular_singles[single_lc] = plural_lc
        self._irregular_plurals[plural_lc] = single_lc

    def _add_uncountable_pattern(self, pattern: re.Pattern[str]) -> None:
        identity = Rule(pattern, "$0")
        self._uncountable_patterns.append(pattern)
        self._plural_rules.append(identity)
        self._singular_rules.append(identity)
