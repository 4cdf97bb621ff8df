"""
Unit tests for case rule conversion.
"""

import pytest

from casedrill.case_rules import STYLES, CaseRule, split_words, to_case


class TestToCase:
    """Test each naming convention on a multi-word phrase."""

    @pytest.mark.parametrize(
        "rule, expected",
        [
            (CaseRule.CAMEL, "userEmailAddress"),
            (CaseRule.SNAKE, "user_email_address"),
            (CaseRule.PASCAL, "UserEmailAddress"),
            (CaseRule.KEBAB, "user-email-address"),
            (CaseRule.UPPER_SNAKE, "USER_EMAIL_ADDRESS"),
        ],
    )
    def test_three_word_phrase(self, rule, expected):
        assert to_case("user email address", rule) == expected

    def test_repeated_word(self):
        """Words drawn with replacement can repeat."""
        assert to_case("get get", CaseRule.CAMEL) == "getGet"

    def test_single_letter_words(self):
        assert to_case("a b", CaseRule.PASCAL) == "AB"

    def test_empty_phrase(self):
        assert to_case("", CaseRule.SNAKE) == ""

    def test_extra_spaces_collapse(self):
        assert to_case("  create   read ", CaseRule.KEBAB) == "create-read"


class TestSplitWords:
    """Test phrase splitting."""

    def test_spaces(self):
        assert split_words("create read") == ["create", "read"]

    def test_mixed_separators(self):
        assert split_words("max_retry-count") == ["max", "retry", "count"]

    def test_camel_boundaries(self):
        assert split_words("userName") == ["user", "name"]


class TestStyles:
    """Test the fixed style list."""

    def test_five_styles(self):
        assert len(STYLES) == 5

    def test_every_rule_has_one_label(self):
        assert {s.rule for s in STYLES} == set(CaseRule)

    def test_labels(self):
        assert [s.label for s in STYLES] == [
            "camel case",
            "snake case",
            "pascal case",
            "kebab case",
            "upper snake case",
        ]
