"""Tests for plurality.core.rules_loader module."""

from pathlib import Path

import pytest

from plurality.core.errors import RulesFileError
from plurality.core.inflector import Inflector
from plurality.core.rules import Literal, Pattern
from plurality.core.rules_loader import RulesFile, apply_rules, load_rules_file, parse_rules

RULES_TOML = """
[[plural]]
pattern = "gex$"
replacement = "gexii"

[[plural]]
word = "person"
replacement = "peeps"

[[singular]]
word = "mornings"
replacement = "suck"

[[irregular]]
singular = "irregular"
plural = "regular"

[uncountable]
words = ["paper"]
patterns = ["ware$"]
"""


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    path = tmp_path / "rules.toml"
    path.write_text(RULES_TOML, encoding="utf-8")
    return path


class TestLoadRulesFile:
    """Tests for load_rules_file function."""

    def test_loads_all_sections(self, rules_file: Path):
        rules = load_rules_file(rules_file)

        assert isinstance(rules, RulesFile)
        assert [entry.replacement for entry in rules.plural] == ["gexii", "peeps"]
        assert rules.plural[0].to_rule_pattern() == Pattern("gex$")
        assert rules.plural[1].to_rule_pattern() == Literal("person")
        assert rules.singular[0].word == "mornings"
        assert rules.irregular[0].singular == "irregular"
        assert rules.uncountable.words == ["paper"]
        assert rules.uncountable.patterns == ["ware$"]

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "rules.toml"
        path.write_text("", encoding="utf-8")

        rules = load_rules_file(path)
        assert rules.plural == []
        assert rules.uncountable.words == []

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(RulesFileError, match="not found"):
            load_rules_file(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path):
        path = tmp_path / "rules.toml"
        path.write_text("[[plural]\npattern = ", encoding="utf-8")

        with pytest.raises(RulesFileError, match="Invalid TOML"):
            load_rules_file(path)

    def test_non_utf8_file(self, tmp_path: Path):
        path = tmp_path / "rules.toml"
        path.write_bytes(b"\xff\xfe[[plural]]")

        with pytest.raises(RulesFileError, match="Cannot read rules file"):
            load_rules_file(path)

    def test_directory_is_not_a_rules_file(self, tmp_path: Path):
        path = tmp_path / "rules.toml"
        path.mkdir()

        with pytest.raises(RulesFileError, match="not found"):
            load_rules_file(path)

    def test_invalid_schema(self, tmp_path: Path):
        path = tmp_path / "rules.toml"
        path.write_text('[[plural]]\nreplacement = "x"\n', encoding="utf-8")

        with pytest.raises(RulesFileError, match="Invalid rules schema"):
            load_rules_file(path)


class TestParseRules:
    """Tests for parse_rules validation."""

    def test_pattern_and_word_are_exclusive(self):
        with pytest.raises(RulesFileError, match="exactly one"):
            parse_rules({"plural": [{"pattern": "x$", "word": "x", "replacement": "y"}]})

    def test_invalid_regex(self):
        with pytest.raises(RulesFileError, match="Invalid rule pattern"):
            parse_rules({"singular": [{"pattern": "(", "replacement": "y"}]})

    def test_invalid_uncountable_regex(self):
        with pytest.raises(RulesFileError, match="Invalid rule pattern"):
            parse_rules({"uncountable": {"patterns": ["["]}})

    def test_unknown_keys_are_rejected(self):
        with pytest.raises(RulesFileError):
            parse_rules({"plurals": []})
        with pytest.raises(RulesFileError):
            parse_rules({"irregular": [{"singular": "a", "plural": "b", "note": "c"}]})

    def test_source_is_named_in_error(self, tmp_path: Path):
        source = tmp_path / "rules.toml"

        with pytest.raises(RulesFileError, match=r"^Invalid rules: "):
            parse_rules({"plurals": []})
        with pytest.raises(RulesFileError, match="Invalid rules schema in .*rules.toml"):
            parse_rules({"plurals": []}, source=source)

    def test_missing_replacement(self):
        with pytest.raises(RulesFileError):
            parse_rules({"plural": [{"word": "x"}]})


class TestApplyRules:
    """Tests for apply_rules function."""

    def test_applies_every_entry(self, rules_file: Path):
        inflector = Inflector()
        apply_rules(inflector, load_rules_file(rules_file))

        assert inflector.plural("regex") == "regexii"
        assert inflector.plural("person") == "peeps"
        assert inflector.plural("salesperson") == "salespeople"
        assert inflector.singular("mornings") == "suck"
        assert inflector.plural("irregular") == "regular"
        assert inflector.plural("paper") == "paper"
        assert inflector.plural("Middleware") == "Middleware"

    def test_reset_discards_file_rules(self, rules_file: Path):
        inflector = Inflector()
        apply_rules(inflector, load_rules_file(rules_file))
        inflector.reset_rules()

        assert inflector.plural("regex") == "regexes"
        assert inflector.plural("paper") == "papers"

    def test_logs_summary(self, rules_file: Path, caplog: pytest.LogCaptureFixture):
        caplog.set_level("INFO", logger="plurality.core.rules_loader")
        apply_rules(Inflector(), load_rules_file(rules_file))

        assert "2 plural, 1 singular, 2 uncountable" in caplog.text
