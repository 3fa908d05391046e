"""Tests for plurality.core.strings module."""

import re

from plurality import (
    Inflector,
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


class TestPluralize:
    """Tests for pluralize function."""

    def test_count(self):
        assert pluralize("test", 0) == "tests"
        assert pluralize("test", 1) == "test"
        assert pluralize("test", 5) == "tests"

    def test_inclusive(self):
        assert pluralize("test", 1, inclusive=True) == "1 test"
        assert pluralize("test", 5, inclusive=True) == "5 tests"

    def test_plural_stays_plural(self):
        assert pluralize("tests", 5) == "tests"

    def test_singularizes_for_one(self):
        assert pluralize("ducks", 1) == "duck"

    def test_non_ascii_passthrough(self):
        assert pluralize("蘋果", 2, inclusive=True) == "2 蘋果"

    def test_empty_string(self):
        assert pluralize("") == ""


class TestSingularize:
    """Tests for singularize function."""

    def test_singularize(self):
        assert singularize("tests") == "test"
        assert singularize("test") == "test"

    def test_inclusive(self):
        assert singularize("test", inclusive=True) == "1 test"
        assert singularize("tests", inclusive=True) == "1 test"


class TestGlobalApi:
    """The module-level API works on the process-wide inflector."""

    def test_plural_and_singular(self):
        assert plural("foot") == "feet"
        assert singular("feet") == "foot"
        assert plural("Alumnus") == "Alumni"

    def test_is_plural_and_is_singular(self):
        assert is_plural("ducks") is True
        assert is_plural("duck") is False
        assert is_singular("duck") is True
        assert is_singular("ducks") is False

    def test_uncountable_rule_and_reset(self):
        assert pluralize("paper") == "papers"
        add_uncountable_rule("paper")
        assert pluralize("paper") == "paper"

        reset_rules()
        assert pluralize("paper") == "papers"

    def test_irregular_rule_and_reset(self):
        assert pluralize("irregular") == "irregulars"
        add_irregular_rule("irregular", "regular")
        assert pluralize("irregular") == "regular"

        reset_rules()
        assert pluralize("irregular") == "irregulars"

    def test_plural_rule_and_reset(self):
        assert pluralize("regex") == "regexes"
        add_plural_rule(re.compile(r"gex$", re.IGNORECASE), "gexii")
        assert pluralize("regex") == "regexii"

        reset_rules()
        assert pluralize("regex") == "regexes"

    def test_singular_rule_and_reset(self):
        assert singularize("singles") == "single"
        add_singular_rule(re.compile(r"singles$"), "singular")
        assert singularize("singles") == "singular"

        reset_rules()
        assert singularize("singles") == "single"

    def test_string_rules_and_reset(self):
        add_plural_rule("person", "peeps")
        add_singular_rule("mornings", "suck")
        assert pluralize("person") == "peeps"
        assert singularize("mornings") == "suck"

        reset_rules()
        assert pluralize("person") == "people"
        assert singularize("mornings") == "morning"


class TestDefaultInflector:
    """Tests for the process-wide inflector accessors."""

    def test_default_is_created_once(self):
        assert get_default_inflector() is get_default_inflector()

    def test_set_default_inflector(self):
        custom = Inflector(seed=False)
        set_default_inflector(custom)
        assert get_default_inflector() is custom
        assert plural("test") == "test"

    def test_clearing_default_recreates_it(self):
        add_irregular_rule("irregular", "regular")
        set_default_inflector(None)
        assert plural("irregular") == "irregulars"
