"""
Inflection rules: pattern resolution and application.

A rule pairs a compiled regular expression with a replacement template.
Callers hand patterns to the registration API in one of these forms:

- ``str``: a literal word, anchored as ``^word$`` and matched case-insensitively
- ``re.Pattern``: used as-is, with its own flags
- ``Literal(text)`` / ``Pattern(regex)``: the explicit tagged forms

Every form is resolved once, at registration time, into a single compiled
regex by :func:`compile_pattern`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .case import interpolate, restore_case
from .errors import InvalidRuleArgument


@dataclass(frozen=True)
class Literal:
    """A literal word matched in full, ignoring case."""

    text: str


@dataclass(frozen=True)
class Pattern:
    """
    A regular expression rule pattern.

    ``regex`` may be a compiled pattern (flags kept as given) or a pattern
    source string, which is compiled case-insensitively.
    """

    regex: str | re.Pattern[str]


RulePattern = Literal | Pattern
RuleInput = str | re.Pattern[str] | RulePattern


@dataclass(frozen=True)
class Rule:
    """A compiled pattern and its replacement template."""

    pattern: re.Pattern[str]
    replacement: str

    def test(self, word: str) -> bool:
        """Return True if the pattern matches anywhere in ``word``."""
        return self.pattern.search(word) is not None


def compile_pattern(rule: RuleInput) -> re.Pattern[str]:
    """
    Resolve any accepted pattern form into a compiled regex.

    Raises:
        InvalidRuleArgument: If ``rule`` is of an unsupported type or is not
            a valid regular expression.
    """
    if isinstance(rule, str):
        rule = Literal(rule)

    if isinstance(rule, re.Pattern):
        if not isinstance(rule.pattern, str):
            raise InvalidRuleArgument("Rule patterns must match text, not bytes", rule)
        return rule

    if isinstance(rule, Literal):
        if not isinstance(rule.text, str):
            raise InvalidRuleArgument(f"Literal text must be a string, got {type(rule.text).__name__}", rule)
        return re.compile(f"^{re.escape(rule.text)}$", re.IGNORECASE)

    if isinstance(rule, Pattern):
        regex = rule.regex
        if isinstance(regex, re.Pattern):
            return compile_pattern(regex)
        if not isinstance(regex, str):
            raise InvalidRuleArgument(
                f"Pattern regex must be a string or compiled regex, got {type(regex).__name__}", rule
            )
        try:
            return re.compile(regex, re.IGNORECASE)
        except re.error as e:
            raise InvalidRuleArgument(f"Invalid rule pattern {regex!r}: {e}", rule) from e

    raise InvalidRuleArgument(f"Unsupported rule pattern type: {type(rule).__name__}", rule)


def make_rule(rule: RuleInput, replacement: str) -> Rule:
    """Build a :class:`Rule`, validating both the pattern and the replacement."""
    if not isinstance(replacement, str):
        raise InvalidRuleArgument(f"Rule replacement must be a string, got {type(replacement).__name__}", replacement)
    return Rule(compile_pattern(rule), replacement)


def apply_rule(word: str, rule: Rule) -> str:
    """
    Replace every match of ``rule`` in ``word`` with its interpolated template.

    Each replacement is re-cased against the text it replaces. A zero-width
    match has no text, so the character before it (or a space at the start
    of the word) is used instead. A zero-width match directly after another
    match is skipped, so ``s?$`` applied to ``tests`` leaves it unchanged.
    """
    parts: list[str] = []
    position = 0
    previous_end = -1

    for match in rule.pattern.finditer(word):
        start, end = match.span()
        if start == end and start == previous_end:
            continue

        args = [match.group(0)] + [group or "" for group in match.groups()]
        result = interpolate(rule.replacement, args)

        if start == end:
            reference = word[start - 1] if start > 0 else " "
        else:
            reference = match.group(0)

        parts.append(word[position:start])
        parts.append(restore_case(reference, result))
        position = end
        previous_end = end

    parts.append(word[position:])
    return "".join(parts)
