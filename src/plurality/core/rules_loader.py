"""
Rules file loading.

A rules file is TOML describing extra rules to register on an inflector:

    [[plural]]
    pattern = "gex$"
    replacement = "gexii"

    [[singular]]
    word = "mornings"
    replacement = "suck"

    [[irregular]]
    singular = "irregular"
    plural = "regular"

    [uncountable]
    words = ["paper"]
    patterns = ["pok[eé]mon$"]

Patterns are regular expressions matched case-insensitively; words are
matched literally against the whole word.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .errors import InvalidRuleArgument, RulesFileError
from .inflector import Inflector
from .rules import Literal, Pattern, RulePattern, compile_pattern

logger = logging.getLogger(__name__)


class RuleEntry(BaseModel):
    """
    A plural or singular rule.

    Attributes:
        pattern: Regular expression source, matched case-insensitively
        word: Literal word, matched in full
        replacement: Replacement template ($0 = match, $1.. = groups)
    """

    pattern: str | None = None
    word: str | None = None
    replacement: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _check_one_pattern(self) -> RuleEntry:
        if (self.pattern is None) == (self.word is None):
            raise ValueError("exactly one of 'pattern' or 'word' is required")
        if self.pattern is not None:
            try:
                compile_pattern(Pattern(self.pattern))
            except InvalidRuleArgument as e:
                raise ValueError(e.message) from e
        return self

    def to_rule_pattern(self) -> RulePattern:
        if self.pattern is not None:
            return Pattern(self.pattern)
        return Literal(self.word or "")


class IrregularEntry(BaseModel):
    """An irregular singular/plural word pair."""

    singular: str
    plural: str

    model_config = ConfigDict(frozen=True, extra="forbid")


class UncountableSpec(BaseModel):
    """Uncountable words and patterns."""

    words: list[str] = Field(default_factory=list)
    patterns: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("patterns")
    @classmethod
    def _check_patterns(cls, patterns: list[str]) -> list[str]:
        for pattern in patterns:
            try:
                compile_pattern(Pattern(pattern))
            except InvalidRuleArgument as e:
                raise ValueError(e.message) from e
        return patterns


class RulesFile(BaseModel):
    """Parsed contents of a rules file."""

    plural: list[RuleEntry] = Field(default_factory=list)
    singular: list[RuleEntry] = Field(default_factory=list)
    irregular: list[IrregularEntry] = Field(default_factory=list)
    uncountable: UncountableSpec = Field(default_factory=UncountableSpec)

    model_config = ConfigDict(frozen=True, extra="forbid")


def parse_rules(data: dict[str, Any], source: Path | None = None) -> RulesFile:
    """Validate already-decoded rules data.

    Args:
        data: Decoded rules, e.g. from ``tomllib``.
        source: File the data came from, named in error messages.

    Raises:
        RulesFileError: If the data does not match the rules file schema.
    """
    try:
        return RulesFile.model_validate(data)
    except ValidationError as e:
        where = f" schema in {source}" if source is not None else ""
        raise RulesFileError(f"Invalid rules{where}: {e}") from e


def load_rules_file(path: Path) -> RulesFile:
    """Load and validate a TOML rules file.

    Args:
        path: Path to the rules file.

    Returns:
        RulesFile instance.

    Raises:
        RulesFileError: If the file doesn't exist, can't be read as UTF-8,
            or contains invalid TOML/schema.
    """
    if not path.is_file():
        raise RulesFileError(f"Rules file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RulesFileError(f"Cannot read rules file {path}: {e}") from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise RulesFileError(f"Invalid TOML in {path}: {e}") from e

    return parse_rules(data, source=path)


def apply_rules(inflector: Inflector, rules: RulesFile) -> None:
    """Register every entry of ``rules`` on ``inflector``, in file order."""
    inflector.add_irregular_rules((entry.singular, entry.plural) for entry in rules.irregular)
    inflector.add_plural_rules((entry.to_rule_pattern(), entry.replacement) for entry in rules.plural)
    inflector.add_singular_rules((entry.to_rule_pattern(), entry.replacement) for entry in rules.singular)
    inflector.add_uncountable_rules(rules.uncountable.words)
    inflector.add_uncountable_rules(Pattern(pattern) for pattern in rules.uncountable.patterns)

    logger.info(
        "Applied rules: %d irregular, %d plural, %d singular, %d uncountable",
        len(rules.irregular),
        len(rules.plural),
        len(rules.singular),
        len(rules.uncountable.words) + len(rules.uncountable.patterns),
    )
