"""Tests for attribute matcher extraction and name conversion."""

import pytest

from mistcss.extractor import (
    AttributeMatch,
    extract_boolean_attributes,
    extract_enum_attributes,
    kebab_to_camel,
    kebab_to_pascal,
)


class TestNameConversion:
    @pytest.mark.parametrize(
        "raw, expected",
        [("size", "size"), ("is-active", "isActive"), ("a-b-c", "aBC"), ("tone2", "tone2")],
    )
    def test_kebab_to_camel(self, raw: str, expected: str) -> None:
        assert kebab_to_camel(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [("card", "Card"), ("my-button", "MyButton"), ("nav-link-item", "NavLinkItem")],
    )
    def test_kebab_to_pascal(self, raw: str, expected: str) -> None:
        assert kebab_to_pascal(raw) == expected


class TestAttributeMatch:
    def test_name_is_camel_case(self) -> None:
        assert AttributeMatch("is-active").name == "isActive"

    @pytest.mark.parametrize("attribute", ["col-2", "a--b"])
    def test_stylesheet_spelling_kept(self, attribute: str) -> None:
        (match,) = extract_boolean_attributes(f"[data-{attribute}]")
        assert match.attribute == attribute


class TestEnumScan:
    def test_single_quotes(self) -> None:
        assert extract_enum_attributes(":scope[data-size='sm']") == [
            AttributeMatch("size", "sm")
        ]

    def test_double_quotes(self) -> None:
        assert extract_enum_attributes(':scope[data-size="lg"]') == [
            AttributeMatch("size", "lg")
        ]

    def test_unquoted(self) -> None:
        assert extract_enum_attributes(":scope[data-tone=muted]") == [
            AttributeMatch("tone", "muted")
        ]

    def test_whitespace_inside_brackets(self) -> None:
        assert extract_enum_attributes("[ data-size = 'sm' ]") == [AttributeMatch("size", "sm")]

    def test_empty_quoted_value(self) -> None:
        assert extract_enum_attributes("[data-size='']") == [AttributeMatch("size", "")]

    def test_quoted_value_may_contain_bracket(self) -> None:
        assert extract_enum_attributes("[data-label='a]b']") == [AttributeMatch("label", "a]b")]

    @pytest.mark.parametrize(
        "selector",
        ["[data-size='sm' i]", '[data-size="sm" s]', "[data-size=sm I]", "[data-size = 'sm'  i ]"],
    )
    def test_case_flag_is_not_part_of_value(self, selector: str) -> None:
        assert extract_enum_attributes(selector) == [AttributeMatch("size", "sm")]

    @pytest.mark.parametrize("selector", ["[data-size=s'm]", "[data-size=sm lg]", "[data-size=]"])
    def test_malformed_matcher_skipped(self, selector: str) -> None:
        assert extract_enum_attributes(selector) == []

    def test_kebab_name_converted(self) -> None:
        (match,) = extract_enum_attributes("[data-text-align='left']")
        assert match == AttributeMatch("text-align", "left")
        assert match.name == "textAlign"

    def test_several_matchers_in_order(self) -> None:
        matches = extract_enum_attributes("[data-a='1'][data-b='2'] [data-a='3']")
        assert [(m.name, m.value) for m in matches] == [("a", "1"), ("b", "2"), ("a", "3")]

    def test_ignores_boolean_matchers(self) -> None:
        assert extract_enum_attributes("[data-disabled][data-size='sm']") == [
            AttributeMatch("size", "sm")
        ]

    def test_ignores_other_operators(self) -> None:
        assert extract_enum_attributes("[data-size~='sm']") == []

    def test_ignores_non_data_attributes(self) -> None:
        assert extract_enum_attributes("[type='button']") == []


class TestBooleanScan:
    def test_bare_matcher(self) -> None:
        matches = extract_boolean_attributes(":scope[data-disabled]")
        assert matches == [AttributeMatch("disabled")]
        assert matches[0].value is None

    def test_ignores_enum_matchers(self) -> None:
        assert extract_boolean_attributes("[data-size='sm'][data-disabled]") == [
            AttributeMatch("disabled")
        ]

    def test_ignores_flagged_enum_matchers(self) -> None:
        assert extract_boolean_attributes("[data-size='sm' i]") == []

    def test_kebab_name_converted(self) -> None:
        (match,) = extract_boolean_attributes("[data-is-active]")
        assert match.name == "isActive"

    def test_no_matchers(self) -> None:
        assert extract_boolean_attributes("button:hover") == []
